from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.application.use_cases.session_guard import load_authenticated
from src.domain.entities.note import Note
from src.domain.errors import FormValidationError
from src.infrastructure.api.notes_api_client import NotesApiClient


@dataclass
class NotesUseCase:
    client: NotesApiClient

    async def list_notes(self) -> list[Note]:
        data = await load_authenticated(self.client.session, self.client.get_tasks)
        return [Note.from_dict(item) for item in data or []]

    async def save_note(self, title: str, content: str, note_id: str | None = None) -> Note:
        """Create a note, or update ``note_id`` when one is given."""
        if not title or not content:
            raise FormValidationError("Title and content are required")
        if note_id:
            data = await self.client.update_task(note_id, title, content)
        else:
            data = await self.client.create_task(title, content)
        return Note.from_dict(data)

    async def delete_note(self, note_id: str) -> Any:
        return await self.client.delete_task(note_id)
