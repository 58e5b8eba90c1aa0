"""
Password Utilities
==================
Utility functions for password management.
"""

from ..exceptions import Argon2IdError
from .hasher import get_cached_hasher


def needs_rehash(hash: str) -> bool:
    """
    Check if a hash needs to be upgraded.

    Returns True if:
    - Hash is empty or not a valid Argon2id hash
    - Hash was generated with parameters other than the current ones

    Args:
        hash: The hash to check

    Returns:
        True if the hash should be re-computed
    """
    if not hash:
        return True

    try:
        return get_cached_hasher().needs_rehash(hash)
    except Argon2IdError:
        return True
