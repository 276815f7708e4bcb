from __future__ import annotations

from dataclasses import dataclass

from src.application.use_cases.session_guard import load_authenticated
from src.domain.entities.profile import UserProfile
from src.infrastructure.api.notes_api_client import NotesApiClient


@dataclass
class LoadDashboardUseCase:
    client: NotesApiClient

    async def execute(self) -> UserProfile:
        data = await load_authenticated(self.client.session, self.client.get_profile)
        return UserProfile.from_dict(data)
