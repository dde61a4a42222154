"""
User persistence helpers.
"""

from __future__ import annotations

from typing import Any

from core import db
from core.schema import USERS


async def list_users() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, nome, email, senha
        FROM users
        ORDER BY id
        """
    )


async def create_user(*, nome: str, email: str, senha: str) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO users (nome, email, senha)
        VALUES ($1, $2, $3)
        RETURNING id, nome, email, senha
        """,
        nome,
        email,
        senha,
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row


async def get_user_by_email(email: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, nome, email, senha
        FROM users
        WHERE email = $1
        """,
        email,
    )


async def update_user(user_id: int, fields: dict[str, Any]) -> bool:
    return await db.update_by_id(USERS.name, user_id, fields, touch_updated_at=USERS.timestamps)


async def delete_user(user_id: int) -> None:
    await db.execute("DELETE FROM users WHERE id = $1", user_id)
