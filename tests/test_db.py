# tests/test_db.py
import pytest

from core import db


def test_build_update_only_includes_supplied_columns():
    sql, values = db.build_update(
        "desenvolvedores",
        {"nome_dev": "Ana", "foto_URL": "uploads/x.png"},
        touch_updated_at=True,
    )

    assert sql == (
        'UPDATE "desenvolvedores" SET "nome_dev" = $2, "foto_URL" = $3, '
        "updated_at = now() WHERE id = $1 RETURNING id"
    )
    assert values == ["Ana", "uploads/x.png"]


def test_build_update_empty_patch_without_timestamps_checks_existence():
    sql, values = db.build_update("users", {}, touch_updated_at=False)

    assert sql == 'SELECT id FROM "users" WHERE id = $1'
    assert values == []


def test_quote_ident_escapes_quotes():
    assert db.quote_ident('we"ird') == '"we""ird"'


def test_connect_kwargs_defaults(monkeypatch):
    for name in ("DB_HOST", "DB_PORT", "DB_USER", "DB_PASS", "DB_NAME"):
        monkeypatch.delenv(name, raising=False)

    assert db.connect_kwargs() == {
        "host": "localhost",
        "port": 5432,
        "user": "postgres",
        "password": "",
        "database": "eventos",
    }


def test_connect_kwargs_reads_env(monkeypatch):
    monkeypatch.setenv("DB_HOST", "db")
    monkeypatch.setenv("DB_PORT", "6543")
    monkeypatch.setenv("DB_USER", "app")
    monkeypatch.setenv("DB_PASS", "s3cret")
    monkeypatch.setenv("DB_NAME", "agenda")

    params = db.connect_kwargs()

    assert params["host"] == "db"
    assert params["port"] == 6543
    assert params["password"] == "s3cret"
    assert params["database"] == "agenda"


def test_database_url_drops_sslmode(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@h:5432/d?sslmode=require&application_name=x")

    assert db.database_url() == "postgresql://u:p@h:5432/d?application_name=x"


def test_pool_requires_init():
    with pytest.raises(RuntimeError):
        db.pool()


@pytest.mark.asyncio
async def test_update_by_id_reports_missing_row(monkeypatch):
    calls = []

    async def fake_fetch_one(sql, *args):
        calls.append((sql, args))
        return None

    monkeypatch.setattr(db, "fetch_one", fake_fetch_one)

    found = await db.update_by_id("evento", 42, {"nome": "X"})

    assert found is False
    assert calls[0][1] == (42, "X")
