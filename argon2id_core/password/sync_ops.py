"""
Sync Password Operations
========================
Synchronous password operations for non-async contexts.
"""

from ..exceptions import Argon2IdError
from .hasher import get_cached_hasher


def hash_password_sync(password: str) -> str:
    """Synchronous version of hash_password (use async version when possible)."""
    if not password:
        raise ValueError("Password cannot be empty")

    hasher = get_cached_hasher()
    return hasher.generate(password)


def verify_password_sync(password: str, hash: str) -> bool:
    """Synchronous version of verify_password (use async version when possible)."""
    if not password or not hash:
        return False

    hasher = get_cached_hasher()
    try:
        hasher.compare(password, hash)
        return True
    except Argon2IdError:
        return False
