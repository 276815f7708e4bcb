import json
import sys
from pathlib import Path
from typing import Any

import httpx
import pytest

# Ensure project root is on sys.path so 'src' is importable during tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


API_URL = "http://notes.test/api"


class MockBackend:
    """Canned responses keyed by (method, path), plus a log of received requests."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def respond(self, method: str, path: str, status: int, body: Any) -> None:
        self.routes[(method, path)] = (status, body)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        status, body = self.routes.get((request.method, path), (404, {"message": "Not found"}))
        return httpx.Response(status, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture()
def storage_dir(tmp_path: Path) -> Path:
    return tmp_path / "storage"


@pytest.fixture()
def session(storage_dir):
    from src.infrastructure.session.local_storage import LocalStorage
    from src.infrastructure.session.session_context import SessionContext

    return SessionContext(LocalStorage(storage_dir))


@pytest.fixture()
def backend() -> MockBackend:
    return MockBackend()


@pytest.fixture()
def client(session, backend):
    from src.infrastructure.api.notes_api_client import NotesApiClient

    return NotesApiClient(API_URL, session, transport=backend.transport)


@pytest.fixture()
def logged_in(session) -> str:
    session.save_token("test-token")
    return "test-token"
