"""
Registration and login endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from core.errors import reported_as

from . import schemas, service

router = APIRouter()


@router.post("/cadastro")
async def register(payload: schemas.RegisterRequest) -> schemas.AuthResponse:
    with reported_as("Erro ao cadastrar usuário"):
        user = await service.create_account(payload)
    return schemas.AuthResponse(message="Usuário cadastrado!", user=user)


@router.post("/login")
async def login(payload: schemas.LoginRequest) -> schemas.AuthResponse:
    with reported_as("Erro ao fazer login"):
        user = await service.login(payload)
    return schemas.AuthResponse(message="Login realizado com sucesso!", user=user)
