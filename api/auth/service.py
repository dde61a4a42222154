"""
Auth business logic.
"""

from __future__ import annotations

from fastapi import status

from core.errors import ApiError
from users import repository as users_repository
from users.schemas import UserCreate, UserOut

from . import schemas, security

INVALID_CREDENTIALS = "Credenciais inválidas"


def to_user_response(user_row: dict) -> UserOut:
    return UserOut(
        id=int(user_row["id"]),
        nome=str(user_row["nome"]),
        email=str(user_row["email"]),
        senha=str(user_row["senha"]),
    )


async def create_account(payload: UserCreate) -> UserOut:
    """
    Hash the password and insert the user. Store errors propagate.
    """
    password_hash = security.hash_password(payload.senha)
    user_row = await users_repository.create_user(
        nome=payload.nome,
        email=payload.email,
        senha=password_hash,
    )
    return to_user_response(user_row)


async def login(payload: schemas.LoginRequest) -> UserOut:
    # Unknown email and wrong password must be indistinguishable.
    user_row = await users_repository.get_user_by_email(payload.email)
    if user_row is None:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, INVALID_CREDENTIALS)

    if not security.verify_password(payload.senha, str(user_row.get("senha") or "")):
        raise ApiError(status.HTTP_401_UNAUTHORIZED, INVALID_CREDENTIALS)

    return to_user_response(user_row)
