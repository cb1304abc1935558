"""Schemas for the login endpoint."""
from __future__ import annotations

from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    """Signed bearer token returned after a successful login."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int
