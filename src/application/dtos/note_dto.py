"""Request bodies for the notes (tasks) endpoints."""
from __future__ import annotations

from pydantic import BaseModel, Field


class NoteBody(BaseModel):
    """Body of POST /tasks and PUT /tasks/{id}."""
    title: str = Field(..., description="Title of the note")
    content: str = Field(..., description="Body text of the note")
