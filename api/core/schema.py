"""
Table declarations and startup schema reconciliation.

Every table the API touches is declared here once. On startup
`sync_schema()` creates missing tables and adds missing columns. It never
drops or retypes anything: drift in that direction is only logged.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from . import db

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Column:
    name: str
    type: str
    nullable: bool = True
    unique: bool = False
    references: str | None = None
    on_delete: str | None = None
    default: str | None = None

    def ddl(self) -> str:
        parts = [db.quote_ident(self.name), self.type]
        if not self.nullable:
            parts.append("NOT NULL")
        if self.unique:
            parts.append("UNIQUE")
        if self.default is not None:
            parts.append(f"DEFAULT {self.default}")
        if self.references:
            parts.append(f"REFERENCES {db.quote_ident(self.references)}(id)")
            if self.on_delete:
                parts.append(f"ON DELETE {self.on_delete}")
        return " ".join(parts)

    @property
    def information_schema_type(self) -> str:
        base = self.type.split("(", 1)[0].split()[0].upper()
        return _INFORMATION_SCHEMA_TYPES.get(base, base.lower())


_INFORMATION_SCHEMA_TYPES = {
    "SERIAL": "integer",
    "INTEGER": "integer",
    "VARCHAR": "character varying",
    "TEXT": "text",
    "TIMESTAMPTZ": "timestamp with time zone",
}


def _timestamps() -> list[Column]:
    return [
        Column("created_at", "TIMESTAMPTZ", nullable=False, default="now()"),
        Column("updated_at", "TIMESTAMPTZ", nullable=False, default="now()"),
    ]


@dataclass(frozen=True)
class Table:
    name: str
    columns: list[Column] = field(default_factory=list)
    timestamps: bool = True

    @property
    def all_columns(self) -> list[Column]:
        cols = [Column("id", "SERIAL PRIMARY KEY", nullable=True), *self.columns]
        if self.timestamps:
            cols.extend(_timestamps())
        return cols

    def create_sql(self) -> str:
        body = ",\n  ".join(c.ddl() for c in self.all_columns)
        return f"CREATE TABLE IF NOT EXISTS {db.quote_ident(self.name)} (\n  {body}\n)"

    def add_column_sql(self, column: Column) -> str:
        return f"ALTER TABLE {db.quote_ident(self.name)} ADD COLUMN IF NOT EXISTS {column.ddl()}"


USERS = Table(
    "users",
    [
        Column("nome", "VARCHAR(255)", nullable=False),
        Column("email", "VARCHAR(255)", nullable=False, unique=True),
        Column("senha", "VARCHAR(255)", nullable=False),
    ],
    timestamps=False,
)

DEVELOPERS = Table(
    "desenvolvedores",
    [
        Column("nome_dev", "VARCHAR(255)", nullable=False),
        Column("foto_URL", "VARCHAR(300)"),
        Column("descricao_base", "TEXT"),
    ],
)

PROJECTS = Table(
    "projeto",
    [
        Column("nome_projeto", "VARCHAR(255)", nullable=False),
        Column("foto_URL", "VARCHAR(300)"),
        Column("data_projeto", "VARCHAR(20)", nullable=False),
        Column("descricao", "TEXT"),
        Column("desenvolvedores_id", "INTEGER", references="desenvolvedores", on_delete="SET NULL"),
    ],
)

EVENTS = Table(
    "evento",
    [
        Column("nome", "VARCHAR(255)", nullable=False),
        Column("data", "VARCHAR(20)", nullable=False),
        Column("descricao", "TEXT"),
        Column("imagem", "VARCHAR(300)"),
        Column("envolvidos", "VARCHAR(255)"),
    ],
)

GALLERY = Table(
    "galeria_evento",
    [
        Column("url_imagem", "VARCHAR(500)", nullable=False),
        Column("descricao", "TEXT"),
        Column("evento_id", "INTEGER", nullable=False, references="evento"),
    ],
)

# Parents before children so REFERENCES resolve.
TABLES: list[Table] = [USERS, DEVELOPERS, PROJECTS, EVENTS, GALLERY]


def sync_enabled() -> bool:
    raw = os.environ.get("DB_SYNC_SCHEMA", "").strip().lower()
    return raw not in {"0", "false", "no", "off"}


def find_drift(table: Table, existing: dict[str, str]) -> list[str]:
    """
    Compare declared columns with `existing` ({column_name: data_type}).

    Returns human-readable drift notes for columns the reconciler will not
    touch: undeclared extras and type mismatches.
    """
    notes: list[str] = []
    declared = {c.name: c for c in table.all_columns}
    for name, data_type in existing.items():
        column = declared.get(name)
        if column is None:
            notes.append(f"{table.name}.{name} exists in store but is not declared")
        elif data_type != column.information_schema_type:
            notes.append(
                f"{table.name}.{name} is {data_type}, declared {column.information_schema_type}"
            )
    return notes


async def _existing_columns() -> dict[str, dict[str, str]]:
    rows = await db.fetch_all(
        """
        SELECT table_name, column_name, data_type
        FROM information_schema.columns
        WHERE table_schema = current_schema()
          AND table_name = ANY($1::text[])
        """,
        [t.name for t in TABLES],
    )
    found: dict[str, dict[str, str]] = {}
    for row in rows:
        found.setdefault(str(row["table_name"]), {})[str(row["column_name"])] = str(row["data_type"])
    return found


async def sync_schema() -> None:
    """
    Create-or-alter the store to match TABLES (additive only).
    """
    existing = await _existing_columns()
    for table in TABLES:
        current = existing.get(table.name)
        if current is None:
            logger.info("schema_create_table table=%s", table.name)
            await db.execute(table.create_sql())
            continue

        for column in table.all_columns:
            if column.name not in current:
                logger.info("schema_add_column table=%s column=%s", table.name, column.name)
                await db.execute(table.add_column_sql(column))

        for note in find_drift(table, current):
            logger.warning("schema_drift %s (left unchanged)", note)
