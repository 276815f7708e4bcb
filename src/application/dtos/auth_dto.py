"""Request bodies for the authentication endpoints."""
from __future__ import annotations

from pydantic import BaseModel, Field


class SignupBody(BaseModel):
    """Body of POST /auth/signup."""
    name: str = Field(..., description="Display name of the new user")
    email: str = Field(..., description="Email address used to log in")
    password: str = Field(..., description="Plain-text password, sent over the wire once")


class LoginBody(BaseModel):
    """Body of POST /auth/login."""
    email: str = Field(..., description="Email address of the account")
    password: str = Field(..., description="Account password")
