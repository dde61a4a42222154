"""
User API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    senha: str = Field(..., min_length=1)


class UserUpdate(BaseModel):
    nome: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    # Empty or null leaves the stored hash untouched.
    senha: str | None = None


class UserOut(BaseModel):
    id: int
    nome: str
    email: str
    # bcrypt hash, returned as stored. See DESIGN.md (hash disclosure).
    senha: str
