"""
Async REST client for the notes backend.
- Attaches the session's bearer token to authenticated requests
- Raises RequestError on any non-2xx response
- Bodies are built without validation; required fields are checked by callers
- No retries and no timeout: transport errors propagate as httpx raises them
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
from loguru import logger

from src.application.dtos.auth_dto import LoginBody, SignupBody
from src.application.dtos.note_dto import NoteBody
from src.application.dtos.profile_dto import UpdateProfileBody
from src.domain.errors import RequestError
from src.infrastructure.session.session_context import SessionContext

DEFAULT_MESSAGES = {
    "signup": "Signup failed",
    "login": "Login failed",
    "get_profile": "Failed to fetch profile",
    "update_profile": "Failed to update profile",
    "get_tasks": "Failed to fetch tasks",
    "create_task": "Failed to create task",
    "update_task": "Failed to update task",
    "delete_task": "Failed to delete task",
}


class NotesApiClient:
    """Named wrappers around the backend's auth, profile and notes endpoints."""

    def __init__(
        self,
        base_url: str,
        session: SessionContext,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session
        self.transport = transport

    def get_headers(self, include_auth: bool = False) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if include_auth:
            token = self.session.get_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        auth: bool,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug(f"{operation}: {method} {url}")
        async with httpx.AsyncClient(transport=self.transport, timeout=None) as client:
            response = await client.request(
                method,
                url,
                headers=self.get_headers(auth),
                json=body,
            )

        data = response.json()

        if not response.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            message = str(message) if message else DEFAULT_MESSAGES[operation]
            logger.warning(f"{operation} failed with {response.status_code}: {message}")
            raise RequestError(message, status_code=response.status_code, operation=operation)

        return data

    # Auth
    async def signup(self, name: str, email: str, password: str) -> Any:
        body = SignupBody.model_construct(name=name, email=email, password=password)
        return await self._request("signup", "POST", "/auth/signup", auth=False, body=body.model_dump(warnings=False))

    async def login(self, email: str, password: str) -> Any:
        body = LoginBody.model_construct(email=email, password=password)
        return await self._request("login", "POST", "/auth/login", auth=False, body=body.model_dump(warnings=False))

    # User profile
    async def get_profile(self) -> Any:
        return await self._request("get_profile", "GET", "/user/profile", auth=True)

    async def update_profile(
        self, name: str, email: str, bio: Optional[str] = None, password: Optional[str] = None
    ) -> Any:
        """Update the profile; an empty or missing password keeps the current one."""
        body = UpdateProfileBody.model_construct(name=name, email=email, bio=bio, password=password)
        return await self._request("update_profile", "PUT", "/user/profile", auth=True, body=body.to_payload())

    # Notes
    async def get_tasks(self) -> Any:
        return await self._request("get_tasks", "GET", "/tasks", auth=True)

    async def create_task(self, title: str, content: str) -> Any:
        body = NoteBody.model_construct(title=title, content=content)
        return await self._request("create_task", "POST", "/tasks", auth=True, body=body.model_dump(warnings=False))

    async def update_task(self, task_id: str, title: str, content: str) -> Any:
        body = NoteBody.model_construct(title=title, content=content)
        return await self._request("update_task", "PUT", f"/tasks/{task_id}", auth=True, body=body.model_dump(warnings=False))

    async def delete_task(self, task_id: str) -> Any:
        return await self._request("delete_task", "DELETE", f"/tasks/{task_id}", auth=True)
