"""
Event gallery persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db
from core.schema import GALLERY


async def list_images() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, url_imagem, descricao, evento_id, created_at, updated_at
        FROM galeria_evento
        ORDER BY id
        """
    )


async def create_image(*, url_imagem: str, descricao: str | None, evento_id: int) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO galeria_evento (url_imagem, descricao, evento_id)
        VALUES ($1, $2, $3)
        RETURNING id, url_imagem, descricao, evento_id, created_at, updated_at
        """,
        url_imagem,
        descricao,
        evento_id,
    )
    if row is None:
        raise RuntimeError("Failed to create gallery image.")
    return row


async def update_image(image_id: int, fields: dict[str, Any]) -> bool:
    return await db.update_by_id(GALLERY.name, image_id, fields)


async def delete_image(image_id: int) -> None:
    await db.execute("DELETE FROM galeria_evento WHERE id = $1", image_id)
