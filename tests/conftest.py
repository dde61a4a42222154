# tests/conftest.py
import os
import tempfile
from datetime import datetime, timezone

# Must be set before `main` is imported: the static mount binds the directory.
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="eventos-uploads-"))
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DB_SYNC_SCHEMA", "false")

import asyncpg
import pytest
from fastapi.testclient import TestClient

import main
from developers import repository as developers_repository
from events import repository as events_repository
from gallery import repository as gallery_repository
from projects import repository as projects_repository
from users import repository as users_repository


class FakeTable:
    """In-memory stand-in for one table, shaped like the repository functions."""

    def __init__(self, *, unique: tuple[str, ...] = (), timestamps: bool = True):
        self.rows: dict[int, dict] = {}
        self.next_id = 1
        self.unique = unique
        self.timestamps = timestamps

    async def list(self) -> list[dict]:
        return [dict(self.rows[key]) for key in sorted(self.rows)]

    async def create(self, **fields) -> dict:
        for column in self.unique:
            if any(row.get(column) == fields.get(column) for row in self.rows.values()):
                raise asyncpg.exceptions.UniqueViolationError(
                    f"duplicate key value violates unique constraint on {column}"
                )
        row = {"id": self.next_id, **fields}
        if self.timestamps:
            now = datetime.now(timezone.utc)
            row.update(created_at=now, updated_at=now)
        self.rows[self.next_id] = row
        self.next_id += 1
        return dict(row)

    async def update(self, row_id: int, fields: dict) -> bool:
        row = self.rows.get(row_id)
        if row is None:
            return False
        row.update(fields)
        if self.timestamps:
            row["updated_at"] = datetime.now(timezone.utc)
        return True

    async def delete(self, row_id: int) -> None:
        self.rows.pop(row_id, None)

    async def find(self, column: str, value) -> dict | None:
        for row in self.rows.values():
            if row.get(column) == value:
                return dict(row)
        return None


class FakeStore:
    def __init__(self):
        self.users = FakeTable(unique=("email",), timestamps=False)
        self.developers = FakeTable()
        self.projects = FakeTable()
        self.events = FakeTable()
        self.gallery = FakeTable()


@pytest.fixture
def store(monkeypatch):
    """Route every repository call to an in-memory store."""
    fake = FakeStore()

    async def get_user_by_email(email):
        return await fake.users.find("email", email)

    monkeypatch.setattr(users_repository, "list_users", fake.users.list)
    monkeypatch.setattr(users_repository, "create_user", fake.users.create)
    monkeypatch.setattr(users_repository, "get_user_by_email", get_user_by_email)
    monkeypatch.setattr(users_repository, "update_user", fake.users.update)
    monkeypatch.setattr(users_repository, "delete_user", fake.users.delete)

    monkeypatch.setattr(developers_repository, "list_developers", fake.developers.list)
    monkeypatch.setattr(developers_repository, "create_developer", fake.developers.create)
    monkeypatch.setattr(developers_repository, "update_developer", fake.developers.update)
    monkeypatch.setattr(developers_repository, "delete_developer", fake.developers.delete)

    monkeypatch.setattr(projects_repository, "list_projects", fake.projects.list)
    monkeypatch.setattr(projects_repository, "create_project", fake.projects.create)
    monkeypatch.setattr(projects_repository, "update_project", fake.projects.update)
    monkeypatch.setattr(projects_repository, "delete_project", fake.projects.delete)

    monkeypatch.setattr(events_repository, "list_events", fake.events.list)
    monkeypatch.setattr(events_repository, "create_event", fake.events.create)
    monkeypatch.setattr(events_repository, "update_event", fake.events.update)
    monkeypatch.setattr(events_repository, "delete_event", fake.events.delete)

    monkeypatch.setattr(gallery_repository, "list_images", fake.gallery.list)
    monkeypatch.setattr(gallery_repository, "create_image", fake.gallery.create)
    monkeypatch.setattr(gallery_repository, "update_image", fake.gallery.update)
    monkeypatch.setattr(gallery_repository, "delete_image", fake.gallery.delete)
    return fake


@pytest.fixture
def client(store):
    # No `with`: the lifespan (pool + schema sync) is not needed against the fake.
    return TestClient(main.app)


@pytest.fixture
def png_bytes():
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
