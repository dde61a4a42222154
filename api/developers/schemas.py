"""
Pydantic schemas for developer endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.responses import TimestampedOut


class DeveloperCreate(BaseModel):
    nome_dev: str = Field(..., min_length=1, max_length=255)
    foto_URL: str | None = Field(default=None, max_length=300)
    descricao_base: str | None = None


class DeveloperUpdate(BaseModel):
    nome_dev: str | None = Field(default=None, min_length=1, max_length=255)
    foto_URL: str | None = Field(default=None, max_length=300)
    descricao_base: str | None = None


class DeveloperOut(TimestampedOut):
    id: int
    nome_dev: str
    foto_URL: str | None = None
    descricao_base: str | None = None
