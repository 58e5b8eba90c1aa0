"""
Argon2id Primitive
==================
Key derivation and salt generation.
"""

import secrets
from typing import Callable

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from .exceptions import KDFError, RandomSourceError

RandomSource = Callable[[int], bytes]

__all__ = ["ARGON2_VERSION", "RandomSource", "derive_key", "generate_salt"]


def derive_key(
    password: bytes,
    salt: bytes,
    time_cost: int,
    memory_cost: int,
    parallelism: int,
    key_length: int,
) -> bytes:
    """
    Derive a raw Argon2id key.

    Args:
        password: Secret input
        salt: Random salt
        time_cost: Number of passes
        memory_cost: Memory in KiB
        parallelism: Number of lanes
        key_length: Output length in bytes

    Returns:
        ``key_length`` bytes, deterministic for identical inputs

    Raises:
        KDFError: If the primitive rejects the parameters
    """
    try:
        return hash_secret_raw(
            secret=password,
            salt=salt,
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            hash_len=key_length,
            type=Type.ID,
            version=ARGON2_VERSION,
        )
    except HashingError as e:
        raise KDFError(f"argon2id: derive key: {e}") from e


def generate_salt(length: int, source: RandomSource = secrets.token_bytes) -> bytes:
    """
    Read ``length`` random bytes from ``source``.

    Raises:
        RandomSourceError: If the source fails or returns the wrong number of bytes
    """
    try:
        salt = source(length)
    except Exception as e:
        raise RandomSourceError(length) from e

    if isinstance(salt, bytearray):
        salt = bytes(salt)
    if not isinstance(salt, bytes):
        raise RandomSourceError(length)
    if len(salt) != length:
        raise RandomSourceError(length, len(salt))
    return salt
