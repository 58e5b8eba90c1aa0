"""
Argon2id Core Library
=====================
Password hashing with a portable, self-describing Argon2id encoding.
"""

__version__ = "0.1.0"

# Configuration
from argon2id_core.config import (
    Argon2IdConfig,
    new_config,
    with_time_cost,
    with_memory_cost,
    with_parallelism,
    with_salt_length,
    with_key_length,
)

# Codec
from argon2id_core.codec import (
    EncodedHash,
    format_hash,
    parse_hash,
)

# KDF
from argon2id_core.kdf import (
    ARGON2_VERSION,
    derive_key,
    generate_salt,
)

# Exceptions
from argon2id_core.exceptions import (
    Argon2IdError,
    RandomSourceError,
    MalformedHashError,
    ScanError,
    DecodeError,
    KDFError,
    PasswordMismatchError,
)

# Password Hashing
from argon2id_core.password import (
    Argon2IdHasher,
    get_cached_hasher,
    hash_password,
    verify_password,
    verify_and_upgrade,
    needs_rehash,
    hash_password_sync,
    verify_password_sync,
)

__all__ = [
    # Configuration
    "Argon2IdConfig",
    "new_config",
    "with_time_cost",
    "with_memory_cost",
    "with_parallelism",
    "with_salt_length",
    "with_key_length",
    # Codec
    "EncodedHash",
    "format_hash",
    "parse_hash",
    # KDF
    "ARGON2_VERSION",
    "derive_key",
    "generate_salt",
    # Exceptions
    "Argon2IdError",
    "RandomSourceError",
    "MalformedHashError",
    "ScanError",
    "DecodeError",
    "KDFError",
    "PasswordMismatchError",
    # Password Hashing
    "Argon2IdHasher",
    "get_cached_hasher",
    "hash_password",
    "verify_password",
    "verify_and_upgrade",
    "needs_rehash",
    "hash_password_sync",
    "verify_password_sync",
]
