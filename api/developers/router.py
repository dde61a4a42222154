"""
Developer CRUD endpoints. Create/update take multipart forms with an
optional `foto_URL` image.
"""

from __future__ import annotations

from fastapi import APIRouter, File, Form, UploadFile

from core import uploads
from core.errors import missing_row, reported_as

from . import repository, schemas

router = APIRouter()


@router.get("/desenvolvedores")
async def list_developers() -> list[schemas.DeveloperOut]:
    with reported_as("Erro ao listar desenvolvedores"):
        rows = await repository.list_developers()
    return [schemas.DeveloperOut(**row) for row in rows]


@router.post("/desenvolvedores")
async def create_developer(
    nome_dev: str | None = Form(default=None),
    descricao_base: str | None = Form(default=None),
    foto: UploadFile | None = File(default=None, alias="foto_URL"),
) -> dict:
    with reported_as("Erro ao criar desenvolvedor"):
        payload = schemas.DeveloperCreate(
            **uploads.supplied(nome_dev=nome_dev, descricao_base=descricao_base)
        )
        payload.foto_URL = await uploads.save_upload(foto)
        with uploads.discarded_on_error(payload.foto_URL):
            row = await repository.create_developer(**payload.model_dump())
    return {"message": "Desenvolvedor criado!", "dev": schemas.DeveloperOut(**row)}


@router.put("/desenvolvedores/{developer_id}")
async def update_developer(
    developer_id: int,
    nome_dev: str | None = Form(default=None),
    descricao_base: str | None = Form(default=None),
    foto: UploadFile | None = File(default=None, alias="foto_URL"),
) -> dict:
    with reported_as("Erro ao atualizar desenvolvedor"):
        patch = schemas.DeveloperUpdate(
            **uploads.supplied(nome_dev=nome_dev, descricao_base=descricao_base)
        ).model_dump(exclude_unset=True)
        saved = await uploads.save_upload(foto)
        with uploads.discarded_on_error(saved):
            if saved:
                patch["foto_URL"] = saved
            if not await repository.update_developer(developer_id, patch):
                raise missing_row("Erro ao atualizar desenvolvedor", developer_id)
    return {"message": "Desenvolvedor atualizado!"}


@router.delete("/desenvolvedores/{developer_id}")
async def delete_developer(developer_id: int) -> dict:
    with reported_as("Erro ao deletar desenvolvedor"):
        await repository.delete_developer(developer_id)
    return {"message": "Desenvolvedor deletado!"}
