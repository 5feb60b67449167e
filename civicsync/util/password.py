"""Password hashing utilities."""

from functools import lru_cache

from passlib.context import CryptContext

from civicsync.config import AuthSettings


@lru_cache(maxsize=4)
def _crypt_context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(password: str, settings: AuthSettings) -> str:
    """Hash a plaintext password with a per-password salt.

    Args:
        password: Plaintext password
        settings: Authentication settings

    Returns:
        Salted bcrypt hash
    """
    return _crypt_context(settings.bcrypt_rounds).hash(password)


def verify_password(password: str, password_hash: str, settings: AuthSettings) -> bool:
    """Check a plaintext password against a stored hash.

    Args:
        password: Plaintext password
        password_hash: Stored bcrypt hash
        settings: Authentication settings

    Returns:
        True if the password matches
    """
    return _crypt_context(settings.bcrypt_rounds).verify(password, password_hash)
