"""
Project CRUD endpoints. Create/update take multipart forms with an
optional `foto_URL` image.
"""

from __future__ import annotations

from fastapi import APIRouter, File, Form, UploadFile

from core import uploads
from core.errors import missing_row, reported_as

from . import repository, schemas

router = APIRouter()


@router.get("/projetos")
async def list_projects() -> list[schemas.ProjectOut]:
    with reported_as("Erro ao listar projetos"):
        rows = await repository.list_projects()
    return [schemas.ProjectOut(**row) for row in rows]


@router.get("/projetos/{project_id}")
async def list_projects_legacy(project_id: int) -> list[schemas.ProjectOut]:
    """
    Same listing as `/projetos`. Existing clients call this form; the id is
    ignored.
    """
    return await list_projects()


@router.post("/projetos")
async def create_project(
    nome_projeto: str | None = Form(default=None),
    data_projeto: str | None = Form(default=None),
    descricao: str | None = Form(default=None),
    desenvolvedores_id: str | None = Form(default=None),
    foto: UploadFile | None = File(default=None, alias="foto_URL"),
) -> dict:
    with reported_as("Erro ao criar projeto"):
        payload = schemas.ProjectCreate(
            **uploads.supplied(
                nome_projeto=nome_projeto,
                data_projeto=data_projeto,
                descricao=descricao,
                desenvolvedores_id=desenvolvedores_id,
            )
        )
        payload.foto_URL = await uploads.save_upload(foto)
        with uploads.discarded_on_error(payload.foto_URL):
            row = await repository.create_project(**payload.model_dump())
    return {"message": "Projeto criado!", "projeto": schemas.ProjectOut(**row)}


@router.put("/projetos/{project_id}")
async def update_project(
    project_id: int,
    nome_projeto: str | None = Form(default=None),
    data_projeto: str | None = Form(default=None),
    descricao: str | None = Form(default=None),
    desenvolvedores_id: str | None = Form(default=None),
    foto: UploadFile | None = File(default=None, alias="foto_URL"),
) -> dict:
    with reported_as("Erro ao atualizar projeto"):
        patch = schemas.ProjectUpdate(
            **uploads.supplied(
                nome_projeto=nome_projeto,
                data_projeto=data_projeto,
                descricao=descricao,
                desenvolvedores_id=desenvolvedores_id,
            )
        ).model_dump(exclude_unset=True)
        saved = await uploads.save_upload(foto)
        with uploads.discarded_on_error(saved):
            if saved:
                patch["foto_URL"] = saved
            if not await repository.update_project(project_id, patch):
                raise missing_row("Erro ao atualizar projeto", project_id)
    return {"message": "Projeto atualizado!"}


@router.delete("/projetos/{project_id}")
async def delete_project(project_id: int) -> dict:
    with reported_as("Erro ao deletar projeto"):
        await repository.delete_project(project_id)
    return {"message": "Projeto deletado!"}
