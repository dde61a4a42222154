"""
Developer persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db
from core.schema import DEVELOPERS


async def list_developers() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, nome_dev, "foto_URL", descricao_base, created_at, updated_at
        FROM desenvolvedores
        ORDER BY id
        """
    )


async def create_developer(
    *,
    nome_dev: str,
    foto_URL: str | None,
    descricao_base: str | None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO desenvolvedores (nome_dev, "foto_URL", descricao_base)
        VALUES ($1, $2, $3)
        RETURNING id, nome_dev, "foto_URL", descricao_base, created_at, updated_at
        """,
        nome_dev,
        foto_URL,
        descricao_base,
    )
    if row is None:
        raise RuntimeError("Failed to create developer.")
    return row


async def update_developer(developer_id: int, fields: dict[str, Any]) -> bool:
    return await db.update_by_id(DEVELOPERS.name, developer_id, fields)


async def delete_developer(developer_id: int) -> None:
    await db.execute("DELETE FROM desenvolvedores WHERE id = $1", developer_id)
