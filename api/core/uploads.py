"""
Image upload handling for multipart endpoints.

Files land flat in the upload directory under a random name that keeps the
original extension. The returned path (`uploads/<name>`) is what gets stored
in the entity row and is also the URL path served by the static mount.
"""

from __future__ import annotations

import logging
import os
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import aiofiles
from fastapi import UploadFile, status

from .errors import ApiError
from .settings import env_int

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "uploads"

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10 MiB
CHUNK_SIZE = 1024 * 1024  # 1 MiB


def upload_dir() -> Path:
    return Path(os.environ.get("UPLOAD_DIR", "").strip() or "uploads")


def ensure_upload_dir() -> Path:
    path = upload_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def max_upload_bytes_from_env() -> int:
    value = env_int("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES)
    return value if value > 0 else DEFAULT_MAX_UPLOAD_BYTES


def stored_filename(original: str) -> str:
    return uuid.uuid4().hex + Path(original).suffix.lower()


def has_file(file: UploadFile | None) -> bool:
    # Browsers send an empty part with no filename when nothing was picked.
    return file is not None and bool(file.filename)


async def save_upload(file: UploadFile | None) -> str | None:
    """
    Persist `file` and return its stored path, or None if nothing was sent.
    """
    if not has_file(file):
        return None

    name = stored_filename(file.filename or "")
    target = ensure_upload_dir() / name
    max_bytes = max_upload_bytes_from_env()

    written = 0
    async with aiofiles.open(target, mode="wb") as out:
        while True:
            chunk = await file.read(CHUNK_SIZE)
            if not chunk:
                break
            written += len(chunk)
            if written > max_bytes:
                break
            await out.write(chunk)

    if written > max_bytes:
        target.unlink(missing_ok=True)
        raise ApiError(
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            "Arquivo muito grande",
            details={"max_bytes": max_bytes},
        )

    logger.info("upload_saved name=%s original=%r bytes=%s", name, file.filename, written)
    return f"{PUBLIC_PREFIX}/{name}"


def supplied(**fields: object) -> dict:
    """
    Keep only the multipart form fields the client actually sent.
    """
    return {name: value for name, value in fields.items() if value is not None}


def discard(stored_path: str | None) -> None:
    """
    Remove a file previously returned by `save_upload`.
    """
    if not stored_path:
        return
    name = stored_path.rsplit("/", 1)[-1]
    (upload_dir() / name).unlink(missing_ok=True)
    logger.info("upload_discarded name=%s", name)


@contextmanager
def discarded_on_error(stored_path: str | None) -> Iterator[None]:
    """
    Delete the saved upload if the block fails, so rejected writes leave no file.
    """
    try:
        yield
    except BaseException:
        discard(stored_path)
        raise
