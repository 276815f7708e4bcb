from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.domain.errors import FormValidationError
from src.infrastructure.api.notes_api_client import NotesApiClient


def _persist_token(client: NotesApiClient, payload: Any) -> None:
    token = payload.get("token") if isinstance(payload, dict) else None
    if token:
        client.session.save_token(token)


@dataclass
class SignupUseCase:
    client: NotesApiClient

    async def execute(self, name: str, email: str, password: str) -> Any:
        if not name or not email or not password:
            raise FormValidationError("Name, email and password are required")
        payload = await self.client.signup(name, email, password)
        _persist_token(self.client, payload)
        return payload


@dataclass
class LoginUseCase:
    client: NotesApiClient

    async def execute(self, email: str, password: str) -> Any:
        if not email or not password:
            raise FormValidationError("Email and password are required")
        payload = await self.client.login(email, password)
        _persist_token(self.client, payload)
        return payload


@dataclass
class LogoutUseCase:
    client: NotesApiClient

    def execute(self) -> None:
        self.client.session.remove_token()
