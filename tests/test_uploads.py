# tests/test_uploads.py
import io

import pytest
from fastapi import UploadFile

from core import uploads
from core.errors import ApiError


def _upload(data: bytes, filename: str = "Foto.JPG") -> UploadFile:
    return UploadFile(file=io.BytesIO(data), filename=filename)


@pytest.mark.asyncio
async def test_save_upload_writes_file_with_random_name(monkeypatch, tmp_path):
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path))

    first = await uploads.save_upload(_upload(b"one"))
    second = await uploads.save_upload(_upload(b"two"))

    assert first != second
    assert first.startswith("uploads/") and first.endswith(".jpg")
    assert (tmp_path / first.split("/", 1)[1]).read_bytes() == b"one"


@pytest.mark.asyncio
async def test_save_upload_without_file_returns_none():
    assert await uploads.save_upload(None) is None
    assert await uploads.save_upload(_upload(b"", filename="")) is None


@pytest.mark.asyncio
async def test_save_upload_rejects_oversized_file(monkeypatch, tmp_path):
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path))
    monkeypatch.setenv("MAX_UPLOAD_BYTES", "4")

    with pytest.raises(ApiError) as excinfo:
        await uploads.save_upload(_upload(b"0123456789"))

    assert excinfo.value.status_code == 413
    assert list(tmp_path.iterdir()) == []


def test_supplied_drops_unsent_fields():
    assert uploads.supplied(nome="A", data=None, descricao="") == {"nome": "A", "descricao": ""}


@pytest.mark.asyncio
async def test_discarded_on_error_removes_file(monkeypatch, tmp_path):
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path))
    saved = await uploads.save_upload(_upload(b"data"))

    with pytest.raises(RuntimeError):
        with uploads.discarded_on_error(saved):
            raise RuntimeError("insert failed")

    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_discarded_on_error_keeps_file_on_success(monkeypatch, tmp_path):
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path))
    saved = await uploads.save_upload(_upload(b"data"))

    with uploads.discarded_on_error(saved):
        pass

    assert (tmp_path / saved.split("/", 1)[1]).exists()


def test_discard_tolerates_missing_path():
    uploads.discard(None)
    uploads.discard("uploads/does-not-exist.png")
