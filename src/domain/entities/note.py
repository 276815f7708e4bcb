from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Note:
    id: str
    title: str
    content: str
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Note":
        """Build a note from a backend payload.

        Document-store backends key notes by ``_id``, others by ``id``.
        """
        created_at = data.get("createdAt")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
        return cls(
            id=str(data.get("_id") or data.get("id") or ""),
            title=data.get("title") or "",
            content=data.get("content") or "",
            created_at=created_at,
        )
