"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from .settings import env_int

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str | None:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        return None
    return _sanitize_database_url(url)


def connect_kwargs() -> dict[str, Any]:
    """
    Connection settings from the DB_* knobs (used when DATABASE_URL is unset).
    """
    return {
        "host": os.environ.get("DB_HOST", "").strip() or "localhost",
        "port": env_int("DB_PORT", 5432),
        "user": os.environ.get("DB_USER", "").strip() or "postgres",
        "password": os.environ.get("DB_PASS", ""),
        "database": os.environ.get("DB_NAME", "").strip() or "eventos",
    }


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None

    sizing = {
        "min_size": env_int("DB_POOL_MIN", 1),
        "max_size": env_int("DB_POOL_MAX", 5),
        "command_timeout": 30,
    }
    dsn = database_url()
    if dsn:
        logger.info("db_pool_open source=DATABASE_URL")
        _pool = await asyncpg.create_pool(dsn=dsn, **sizing)
        return None

    params = connect_kwargs()
    logger.info(
        "db_pool_open host=%s port=%s database=%s user=%s",
        params["host"],
        params["port"],
        params["database"],
        params["user"],
    )
    _pool = await asyncpg.create_pool(**params, **sizing)


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def quote_ident(name: str) -> str:
    """
    Quote a column/table identifier. Needed for mixed-case names like "foto_URL".
    """
    return '"' + name.replace('"', '""') + '"'


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await pool().fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool().fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    await pool().execute(sql, *args)


def build_update(
    table: str,
    fields: dict[str, Any],
    *,
    touch_updated_at: bool,
) -> tuple[str, list[Any]]:
    """
    Build `UPDATE <table> SET ... WHERE id = $1 RETURNING id` for a patch.

    Only keys present in `fields` are written; the row id is always $1.
    With an empty patch on a table without `updated_at` this degrades to a
    plain existence check.
    """
    assignments = []
    values: list[Any] = []
    for index, (column, value) in enumerate(fields.items(), start=2):
        assignments.append(f"{quote_ident(column)} = ${index}")
        values.append(value)
    if touch_updated_at:
        assignments.append("updated_at = now()")

    if not assignments:
        return f"SELECT id FROM {quote_ident(table)} WHERE id = $1", values

    sql = f"UPDATE {quote_ident(table)} SET {', '.join(assignments)} WHERE id = $1 RETURNING id"
    return sql, values


async def update_by_id(
    table: str,
    row_id: int,
    fields: dict[str, Any],
    *,
    touch_updated_at: bool = True,
) -> bool:
    """
    Apply a partial update. Returns False when no row has this id.
    """
    sql, values = build_update(table, fields, touch_updated_at=touch_updated_at)
    row = await fetch_one(sql, row_id, *values)
    return row is not None
