"""
Auth security helpers.
"""

from __future__ import annotations

import bcrypt

from core.settings import env_int

DEFAULT_BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72


class AuthSecurityError(RuntimeError):
    pass


def bcrypt_rounds() -> int:
    rounds = env_int("BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS)
    # bcrypt only accepts 4..31.
    return min(max(rounds, 4), 31)


def _password_bytes(plain_password: str) -> bytes:
    return (plain_password or "").encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain_password: str) -> str:
    password = _password_bytes(plain_password)
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=bcrypt_rounds())).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = _password_bytes(plain_password)
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False
