from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UserProfile:
    name: str
    email: str
    bio: str = ""
    id: str | None = None  # _id or id as returned by the backend

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserProfile":
        return cls(
            name=data.get("name") or "",
            email=data.get("email") or "",
            bio=data.get("bio") or "",
            id=data.get("_id") or data.get("id"),
        )
