"""Security helpers for hashing passwords."""

from functools import lru_cache

from passlib.context import CryptContext

from app.config import get_settings


@lru_cache
def _pwd_context(rounds: int) -> CryptContext:
    return CryptContext(
        schemes=["pbkdf2_sha256"],
        deprecated="auto",
        pbkdf2_sha256__rounds=rounds,
    )


def _resolve_rounds(rounds: int | None) -> int:
    if rounds is not None:
        return rounds
    return get_settings().password_hash_rounds


def get_password_hash(password: str, *, rounds: int | None = None) -> str:
    return _pwd_context(_resolve_rounds(rounds)).hash(password)
