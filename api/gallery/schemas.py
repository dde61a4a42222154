"""
Pydantic schemas for event gallery endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.responses import TimestampedOut


class GalleryImageForm(BaseModel):
    descricao: str | None = None
    evento_id: int


class GalleryImageCreate(GalleryImageForm):
    url_imagem: str = Field(..., min_length=1, max_length=500)


class GalleryImageUpdate(BaseModel):
    url_imagem: str | None = Field(default=None, min_length=1, max_length=500)
    descricao: str | None = None
    evento_id: int | None = None


class GalleryImageOut(TimestampedOut):
    id: int
    url_imagem: str
    descricao: str | None = None
    evento_id: int
