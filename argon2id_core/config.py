"""
Argon2id Configuration
======================
Cost and size parameters for hash generation.

Values are accepted as given: anything below the recommended minimum is
logged as a warning but never rejected. Only values that cannot be encoded
(non-integers, or outside their unsigned width) raise ``ValueError``.
"""

import os
from dataclasses import asdict, dataclass, field, fields
from functools import lru_cache
from typing import Callable, Dict, List, Optional

import structlog

logger = structlog.get_logger(__name__)

UINT32_MAX = 2 ** 32 - 1
UINT8_MAX = 2 ** 8 - 1

DEFAULT_TIME_COST = 2        # 2 iterations
DEFAULT_MEMORY_COST = 65536  # 64MB (64 * 1024 KiB)
DEFAULT_SALT_LENGTH = 16     # bytes
DEFAULT_KEY_LENGTH = 32      # bytes

# field -> (maximum value, recommended minimum)
_LIMITS = {
    "time_cost": (UINT32_MAX, 1),
    "memory_cost": (UINT32_MAX, 65536),
    "parallelism": (UINT8_MAX, 1),
    "salt_length": (UINT32_MAX, 16),
    "key_length": (UINT32_MAX, 32),
}

ENV_PREFIX = "ARGON2ID_"


@lru_cache(maxsize=1)
def default_parallelism() -> int:
    """Number of CPUs this process may run on, clamped to the uint8 range."""
    if hasattr(os, "sched_getaffinity"):
        available = len(os.sched_getaffinity(0))
    else:
        available = os.cpu_count() or 1
    return max(1, min(available, UINT8_MAX))


@dataclass(frozen=True)
class Argon2IdConfig:
    """Configuration for Argon2id hash generation."""
    time_cost: int = DEFAULT_TIME_COST
    memory_cost: int = DEFAULT_MEMORY_COST  # KiB
    parallelism: int = field(default_factory=default_parallelism)
    salt_length: int = DEFAULT_SALT_LENGTH
    key_length: int = DEFAULT_KEY_LENGTH

    def __post_init__(self):
        for f in fields(self):
            _check_width(f.name, getattr(self, f.name))
        for message in self.recommendation_warnings():
            logger.warning("Argon2id parameter below recommendation", detail=message)

    def recommendation_warnings(self) -> List[str]:
        """Return advisory messages for every value below its recommendation."""
        messages = []
        for name, (_, recommended) in _LIMITS.items():
            value = getattr(self, name)
            if value < recommended:
                messages.append(
                    f"{name}={value} is below the recommended minimum of {recommended}"
                )
        return messages

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "Argon2IdConfig":
        """
        Build a configuration from environment variables.

        Reads ``<prefix>TIME_COST``, ``<prefix>MEMORY_COST``,
        ``<prefix>PARALLELISM``, ``<prefix>SALT_LENGTH`` and
        ``<prefix>KEY_LENGTH``. Unset variables keep their defaults.

        Raises:
            ValueError: If a variable is set to a non-integer value
        """
        overrides = {}
        for name in _LIMITS:
            env_name = f"{prefix}{name.upper()}"
            raw = os.environ.get(env_name)
            if raw is None or raw.strip() == "":
                continue
            try:
                overrides[name] = int(raw)
            except ValueError:
                raise ValueError(f"{env_name} must be an integer, got {raw!r}") from None
        return cls(**overrides)


def _check_width(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
    maximum = _LIMITS[name][0]
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")


# Each option sets exactly one field in the pending values.
Argon2IdOption = Callable[[Dict[str, int]], None]


def new_config(
    *options: Argon2IdOption,
    base: Optional[Argon2IdConfig] = None,
) -> Argon2IdConfig:
    """
    Create a configuration from defaults plus overrides.

    Options are applied in the order given; when two options target the
    same field the last one wins. The configuration is built once from the
    merged values, so advisory warnings reflect only the final values.

    Usage:
        config = new_config(with_time_cost(4), with_memory_cost(32768))
    """
    values = asdict(base) if base is not None else {}
    for option in options:
        option(values)
    return Argon2IdConfig(**values)


def _set(name: str, value: int) -> Argon2IdOption:
    def option(values: Dict[str, int]) -> None:
        values[name] = value
    return option


# A value of 1 or greater is recommended.
def with_time_cost(time_cost: int) -> Argon2IdOption:
    return _set("time_cost", time_cost)


# A value of 64 * 1024 or greater is recommended.
def with_memory_cost(memory_cost: int) -> Argon2IdOption:
    return _set("memory_cost", memory_cost)


# A value of 1 or greater is recommended.
def with_parallelism(parallelism: int) -> Argon2IdOption:
    return _set("parallelism", parallelism)


# A value of 16 or greater is recommended.
def with_salt_length(salt_length: int) -> Argon2IdOption:
    return _set("salt_length", salt_length)


# A value of 32 or greater is recommended.
def with_key_length(key_length: int) -> Argon2IdOption:
    return _set("key_length", key_length)
