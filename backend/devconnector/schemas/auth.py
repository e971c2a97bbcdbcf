"""Auth Schemas — registration and login request bodies.

Invariants:
    - All fields optional at the type level; required/format rules in core/account_fields.py
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=255)
    password: str | None = None


class LoginRequest(BaseModel):
    email: str | None = Field(None, max_length=255)
    password: str | None = None


class TokenResponse(BaseModel):
    token: str
