"""Commands for the authentication flow."""
from __future__ import annotations

from dataclasses import dataclass

from pocketbook.core.errors import ValidationError
from pocketbook.schemas.auth import LoginRequest


@dataclass(frozen=True, slots=True)
class LoginCommand:
    email: str
    password: str

    @classmethod
    def from_request(cls, request: LoginRequest) -> "LoginCommand":
        email = request.email.strip()
        if not email:
            raise ValidationError("Invalid email")
        if not request.password:
            raise ValidationError("Invalid password")
        return cls(email=email, password=request.password)
