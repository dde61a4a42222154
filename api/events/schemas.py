"""
Pydantic schemas for event endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.responses import TimestampedOut


class EventCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=255)
    data: str = Field(..., max_length=20)
    descricao: str | None = None
    imagem: str | None = Field(default=None, max_length=300)
    envolvidos: str | None = Field(default=None, max_length=255)


class EventUpdate(BaseModel):
    nome: str | None = Field(default=None, min_length=1, max_length=255)
    data: str | None = Field(default=None, max_length=20)
    descricao: str | None = None
    imagem: str | None = Field(default=None, max_length=300)
    envolvidos: str | None = Field(default=None, max_length=255)


class EventOut(TimestampedOut):
    id: int
    nome: str
    data: str
    descricao: str | None = None
    imagem: str | None = None
    envolvidos: str | None = None
