"""Password hashing for stored user credentials."""

from functools import lru_cache

from passlib.context import CryptContext

from grouporders.config import get_settings


@lru_cache
def _pwd_context() -> CryptContext:
    return CryptContext(schemes=[get_settings().password_hash_scheme], deprecated="auto")


def hash_password(password: str) -> str:
    return _pwd_context().hash(password)
