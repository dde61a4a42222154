"""
User CRUD endpoints (JSON bodies).
"""

from __future__ import annotations

from fastapi import APIRouter

from auth import security
from auth import service as auth_service
from core.errors import missing_row, reported_as

from . import repository, schemas

router = APIRouter()


@router.get("/users")
async def list_users() -> list[schemas.UserOut]:
    with reported_as("Erro ao listar usuários"):
        rows = await repository.list_users()
    return [auth_service.to_user_response(row) for row in rows]


@router.post("/users")
async def create_user(payload: schemas.UserCreate) -> dict:
    with reported_as("Erro ao criar usuário"):
        user = await auth_service.create_account(payload)
    return {"message": "Usuário criado!", "user": user}


@router.put("/users/{user_id}")
async def update_user(user_id: int, payload: schemas.UserUpdate) -> dict:
    with reported_as("Erro ao atualizar usuário"):
        patch = payload.model_dump(exclude_unset=True)
        senha = patch.pop("senha", None)
        if senha:
            patch["senha"] = security.hash_password(senha)
        found = await repository.update_user(user_id, patch)
        if not found:
            raise missing_row("Erro ao atualizar usuário", user_id)
    return {"message": "Usuário atualizado!"}


@router.delete("/users/{user_id}")
async def delete_user(user_id: int) -> dict:
    with reported_as("Erro ao deletar usuário"):
        await repository.delete_user(user_id)
    return {"message": "Usuário deletado!"}
