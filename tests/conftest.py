"""
Shared fixtures for argon2id-core tests.
"""

import pytest

# Cheap parameters so the KDF stays fast under test.
FAST_ENV = {
    "ARGON2ID_TIME_COST": "1",
    "ARGON2ID_MEMORY_COST": "1024",
    "ARGON2ID_PARALLELISM": "1",
    "ARGON2ID_SALT_LENGTH": "16",
    "ARGON2ID_KEY_LENGTH": "32",
}


@pytest.fixture
def fast_config():
    from argon2id_core.config import Argon2IdConfig

    return Argon2IdConfig(
        time_cost=1,
        memory_cost=1024,
        parallelism=1,
        salt_length=16,
        key_length=32,
    )


@pytest.fixture
def fast_hasher(fast_config):
    from argon2id_core.password import Argon2IdHasher

    return Argon2IdHasher(fast_config)


@pytest.fixture
def cached_hasher_env(monkeypatch):
    """Point the process-wide cached hasher at cheap parameters."""
    from argon2id_core.password.hasher import get_cached_hasher

    for name, value in FAST_ENV.items():
        monkeypatch.setenv(name, value)
    get_cached_hasher.cache_clear()
    yield
    get_cached_hasher.cache_clear()
