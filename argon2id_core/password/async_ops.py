"""
Async Password Hashing
======================
Async-safe password hashing and verification using Argon2id.

The KDF is CPU and memory bound, so every call runs in the event loop's
default executor.
"""

import asyncio
from typing import Tuple, Optional

import structlog

from ..exceptions import Argon2IdError
from .hasher import get_cached_hasher

logger = structlog.get_logger(__name__)


async def hash_password(password: str) -> str:
    """
    Hash a password using Argon2id.

    Args:
        password: Plain text password to hash

    Returns:
        Argon2id hash string (includes algorithm, parameters, salt, and hash)
    """
    if not password:
        raise ValueError("Password cannot be empty")

    hasher = get_cached_hasher()
    loop = asyncio.get_running_loop()

    # Run in executor to avoid blocking the event loop
    return await loop.run_in_executor(None, hasher.generate, password)


async def verify_password(password: str, hash: str) -> bool:
    """
    Verify a password against an Argon2id hash.

    Args:
        password: Plain text password to verify
        hash: Encoded hash to verify against

    Returns:
        True if password matches, False on mismatch or an invalid hash
    """
    if not password or not hash:
        return False

    hasher = get_cached_hasher()
    loop = asyncio.get_running_loop()

    def _verify():
        try:
            hasher.compare(password, hash)
            return True
        except Argon2IdError:
            return False

    return await loop.run_in_executor(None, _verify)


async def verify_and_upgrade(
    password: str,
    hash: str,
) -> Tuple[bool, Optional[str]]:
    """
    Verify password and return new hash if upgrade is needed.

    This is the recommended function for login flows.

    Args:
        password: Plain text password
        hash: Existing Argon2id hash

    Returns:
        Tuple of (is_valid, new_hash_or_none)
    """
    is_valid = await verify_password(password, hash)

    if not is_valid:
        return False, None

    # Check if upgrade is needed
    from .utils import needs_rehash
    if needs_rehash(hash):
        logger.info("Upgrading password hash")
        new_hash = await hash_password(password)
        return True, new_hash

    return True, None
