"""
Project persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db
from core.schema import PROJECTS


async def list_projects() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, nome_projeto, "foto_URL", data_projeto, descricao,
               desenvolvedores_id, created_at, updated_at
        FROM projeto
        ORDER BY id
        """
    )


async def create_project(
    *,
    nome_projeto: str,
    foto_URL: str | None,
    data_projeto: str,
    descricao: str | None,
    desenvolvedores_id: int | None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO projeto (nome_projeto, "foto_URL", data_projeto, descricao, desenvolvedores_id)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING id, nome_projeto, "foto_URL", data_projeto, descricao,
                  desenvolvedores_id, created_at, updated_at
        """,
        nome_projeto,
        foto_URL,
        data_projeto,
        descricao,
        desenvolvedores_id,
    )
    if row is None:
        raise RuntimeError("Failed to create project.")
    return row


async def update_project(project_id: int, fields: dict[str, Any]) -> bool:
    return await db.update_by_id(PROJECTS.name, project_id, fields)


async def delete_project(project_id: int) -> None:
    await db.execute("DELETE FROM projeto WHERE id = $1", project_id)
