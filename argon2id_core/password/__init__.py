"""
Argon2id Password Hashing
=========================
Generation and verification of encoded Argon2id hashes.

- ``Argon2IdHasher``: raises on mismatch or malformed input
- Sync/async helpers: boolean results for login flows
- ``verify_and_upgrade``: transparent rehash when parameters change
"""

from .hasher import Argon2IdHasher, get_cached_hasher
from .async_ops import hash_password, verify_password, verify_and_upgrade
from .utils import needs_rehash
from .sync_ops import hash_password_sync, verify_password_sync

__all__ = [
    # Hasher
    "Argon2IdHasher",
    "get_cached_hasher",
    # Async Operations
    "hash_password",
    "verify_password",
    "verify_and_upgrade",
    # Utils
    "needs_rehash",
    # Sync Operations
    "hash_password_sync",
    "verify_password_sync",
]
