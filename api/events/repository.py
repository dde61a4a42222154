"""
Event persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db
from core.schema import EVENTS


async def list_events() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, nome, data, descricao, imagem, envolvidos, created_at, updated_at
        FROM evento
        ORDER BY id
        """
    )


async def create_event(
    *,
    nome: str,
    data: str,
    descricao: str | None,
    imagem: str | None,
    envolvidos: str | None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO evento (nome, data, descricao, imagem, envolvidos)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING id, nome, data, descricao, imagem, envolvidos, created_at, updated_at
        """,
        nome,
        data,
        descricao,
        imagem,
        envolvidos,
    )
    if row is None:
        raise RuntimeError("Failed to create event.")
    return row


async def update_event(event_id: int, fields: dict[str, Any]) -> bool:
    return await db.update_by_id(EVENTS.name, event_id, fields)


async def delete_event(event_id: int) -> None:
    # Gallery rows still pointing here make this fail (no cascade).
    await db.execute("DELETE FROM evento WHERE id = $1", event_id)
