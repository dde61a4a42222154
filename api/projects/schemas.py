"""
Pydantic schemas for project endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.responses import TimestampedOut


class ProjectCreate(BaseModel):
    nome_projeto: str = Field(..., min_length=1, max_length=255)
    foto_URL: str | None = Field(default=None, max_length=300)
    # Free-form date string, stored as sent.
    data_projeto: str = Field(..., max_length=20)
    descricao: str | None = None
    desenvolvedores_id: int | None = None


class ProjectUpdate(BaseModel):
    nome_projeto: str | None = Field(default=None, min_length=1, max_length=255)
    foto_URL: str | None = Field(default=None, max_length=300)
    data_projeto: str | None = Field(default=None, max_length=20)
    descricao: str | None = None
    desenvolvedores_id: int | None = None


class ProjectOut(TimestampedOut):
    id: int
    nome_projeto: str
    foto_URL: str | None = None
    data_projeto: str
    descricao: str | None = None
    desenvolvedores_id: int | None = None
