from __future__ import annotations

from dataclasses import dataclass

from src.application.use_cases.session_guard import load_authenticated
from src.domain.entities.profile import UserProfile
from src.domain.errors import FormValidationError
from src.infrastructure.api.notes_api_client import NotesApiClient


@dataclass
class ProfileUseCase:
    client: NotesApiClient

    async def load(self) -> UserProfile:
        data = await load_authenticated(self.client.session, self.client.get_profile)
        return UserProfile.from_dict(data)

    async def update(self, name: str, email: str, bio: str = "", password: str = "") -> UserProfile:
        if not name or not email:
            raise FormValidationError("Name and email are required")
        data = await self.client.update_profile(name, email, bio, password)
        return UserProfile.from_dict(data)
