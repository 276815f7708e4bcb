"""Request bodies for the user profile endpoints."""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class UpdateProfileBody(BaseModel):
    """Body of PUT /user/profile."""
    name: str = Field(..., description="Display name of the user")
    email: str = Field(..., description="Email address of the user")
    bio: Optional[str] = Field(None, description="Free-form biography")
    password: Optional[str] = Field(
        None, description="New password; left out of the payload when empty"
    )

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(exclude={"password"}, exclude_none=True, warnings=False)
        if self.password:
            payload["password"] = self.password
        return payload
