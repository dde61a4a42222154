"""
Event CRUD endpoints. Create/update take multipart forms with an optional
`imagem` file.
"""

from __future__ import annotations

from fastapi import APIRouter, File, Form, UploadFile

from core import uploads
from core.errors import missing_row, reported_as

from . import repository, schemas

router = APIRouter()


@router.get("/eventos")
async def list_events() -> list[schemas.EventOut]:
    with reported_as("Erro ao listar eventos"):
        rows = await repository.list_events()
    return [schemas.EventOut(**row) for row in rows]


@router.post("/eventos")
async def create_event(
    nome: str | None = Form(default=None),
    data: str | None = Form(default=None),
    descricao: str | None = Form(default=None),
    envolvidos: str | None = Form(default=None),
    imagem: UploadFile | None = File(default=None),
) -> dict:
    with reported_as("Erro ao criar evento"):
        payload = schemas.EventCreate(
            **uploads.supplied(nome=nome, data=data, descricao=descricao, envolvidos=envolvidos)
        )
        payload.imagem = await uploads.save_upload(imagem)
        with uploads.discarded_on_error(payload.imagem):
            row = await repository.create_event(**payload.model_dump())
    return {"message": "Evento criado!", "evento": schemas.EventOut(**row)}


@router.put("/eventos/{event_id}")
async def update_event(
    event_id: int,
    nome: str | None = Form(default=None),
    data: str | None = Form(default=None),
    descricao: str | None = Form(default=None),
    envolvidos: str | None = Form(default=None),
    imagem: UploadFile | None = File(default=None),
) -> dict:
    with reported_as("Erro ao atualizar evento"):
        patch = schemas.EventUpdate(
            **uploads.supplied(nome=nome, data=data, descricao=descricao, envolvidos=envolvidos)
        ).model_dump(exclude_unset=True)
        saved = await uploads.save_upload(imagem)
        with uploads.discarded_on_error(saved):
            if saved:
                patch["imagem"] = saved
            if not await repository.update_event(event_id, patch):
                raise missing_row("Erro ao atualizar evento", event_id)
    return {"message": "Evento atualizado!"}


@router.delete("/eventos/{event_id}")
async def delete_event(event_id: int) -> dict:
    with reported_as("Erro ao deletar evento"):
        await repository.delete_event(event_id)
    return {"message": "Evento deletado!"}
