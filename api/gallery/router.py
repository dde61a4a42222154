"""
Event gallery endpoints. Every gallery entry needs an uploaded `imagem`.
"""

from __future__ import annotations

from fastapi import APIRouter, File, Form, UploadFile, status

from core import uploads
from core.errors import ApiError, missing_row, reported_as

from . import repository, schemas

router = APIRouter()


@router.get("/galeria_eventos")
async def list_images() -> list[schemas.GalleryImageOut]:
    with reported_as("Erro ao listar imagens"):
        rows = await repository.list_images()
    return [schemas.GalleryImageOut(**row) for row in rows]


@router.post("/galeria_eventos")
async def create_image(
    descricao: str | None = Form(default=None),
    evento_id: str | None = Form(default=None),
    imagem: UploadFile | None = File(default=None),
) -> dict:
    if not uploads.has_file(imagem):
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Imagem obrigatória!")

    with reported_as("Erro ao adicionar imagem"):
        form = schemas.GalleryImageForm(**uploads.supplied(descricao=descricao, evento_id=evento_id))
        url_imagem = await uploads.save_upload(imagem)
        with uploads.discarded_on_error(url_imagem):
            payload = schemas.GalleryImageCreate(url_imagem=url_imagem, **form.model_dump())
            row = await repository.create_image(**payload.model_dump())
    return {
        "message": "Imagem adicionada à galeria do evento!",
        "imagem": schemas.GalleryImageOut(**row),
    }


@router.put("/galeria_eventos/{image_id}")
async def update_image(
    image_id: int,
    descricao: str | None = Form(default=None),
    evento_id: str | None = Form(default=None),
    imagem: UploadFile | None = File(default=None),
) -> dict:
    with reported_as("Erro ao atualizar imagem"):
        patch = schemas.GalleryImageUpdate(
            **uploads.supplied(descricao=descricao, evento_id=evento_id)
        ).model_dump(exclude_unset=True)
        saved = await uploads.save_upload(imagem)
        with uploads.discarded_on_error(saved):
            if saved:
                patch["url_imagem"] = saved
            if not await repository.update_image(image_id, patch):
                raise missing_row("Erro ao atualizar imagem", image_id)
    return {"message": "Imagem da galeria do evento atualizada!"}


@router.delete("/galeria_eventos/{image_id}")
async def delete_image(image_id: int) -> dict:
    with reported_as("Erro ao deletar imagem"):
        await repository.delete_image(image_id)
    return {"message": "Imagem da galeria do evento deletada!"}
