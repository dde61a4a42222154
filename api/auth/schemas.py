"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel

from users.schemas import UserCreate, UserOut


class RegisterRequest(UserCreate):
    pass


class LoginRequest(BaseModel):
    # No length rules: every bad credential must reach the 401 path.
    email: str
    senha: str


class AuthResponse(BaseModel):
    message: str
    user: UserOut
