"""
Password Hasher
===============
Argon2id hash generation and constant-time verification.
"""

import hmac
import secrets
from functools import lru_cache
from typing import Optional, Union

import structlog

from ..codec import EncodedHash, format_hash, parse_hash
from ..config import Argon2IdConfig
from ..exceptions import PasswordMismatchError
from ..kdf import ARGON2_VERSION, RandomSource, derive_key, generate_salt

logger = structlog.get_logger(__name__)

Password = Union[str, bytes]


def _to_bytes(password: Password) -> bytes:
    if isinstance(password, bytes):
        return password
    if isinstance(password, str):
        return password.encode("utf-8")
    raise TypeError(f"password must be str or bytes, not {type(password).__name__}")


class Argon2IdHasher:
    """
    Generates and verifies encoded Argon2id hashes.

    The configuration only affects ``generate`` and ``needs_rehash``;
    ``compare`` always uses the parameters embedded in the hash, so hashes
    produced under any configuration verify under any other.

    Usage:
        hasher = Argon2IdHasher(new_config(with_time_cost(3)))
        encoded = hasher.generate(b"super-secret")
        hasher.compare(b"super-secret", encoded)
    """

    def __init__(
        self,
        config: Optional[Argon2IdConfig] = None,
        random_source: Optional[RandomSource] = None,
    ):
        self._config = config if config is not None else Argon2IdConfig()
        self._random_source = (
            random_source if random_source is not None else secrets.token_bytes
        )

    @property
    def config(self) -> Argon2IdConfig:
        return self._config

    def generate(self, password: Password) -> str:
        """
        Hash a password under this hasher's configuration.

        Args:
            password: Password bytes (``str`` is UTF-8 encoded)

        Returns:
            Canonical ``$argon2id$...`` string with a fresh random salt

        Raises:
            RandomSourceError: If salt generation fails
            KDFError: If the primitive rejects the configuration
        """
        secret = _to_bytes(password)
        config = self._config

        salt = generate_salt(config.salt_length, self._random_source)

        key = derive_key(
            secret,
            salt,
            config.time_cost,
            config.memory_cost,
            config.parallelism,
            config.key_length,
        )

        logger.debug(
            "Generated argon2id hash",
            time_cost=config.time_cost,
            memory_cost=config.memory_cost,
            parallelism=config.parallelism,
            salt_length=config.salt_length,
            key_length=config.key_length,
        )

        return format_hash(EncodedHash(
            version=ARGON2_VERSION,
            memory_cost=config.memory_cost,
            time_cost=config.time_cost,
            parallelism=config.parallelism,
            salt=salt,
            key=key,
        ))

    def compare(self, password: Password, encoded: str) -> None:
        """
        Verify a password against an encoded hash.

        The candidate key is derived with the length of the stored key, so
        both operands of the final comparison are always the same length.

        Raises:
            MalformedHashError: Wrong structure or algorithm tag
            ScanError: Unparseable version or parameters
            DecodeError: Invalid salt or key encoding
            KDFError: Embedded parameters rejected by the primitive
            PasswordMismatchError: Well-formed hash, different password
        """
        secret = _to_bytes(password)
        parsed = parse_hash(encoded)

        candidate = derive_key(
            secret,
            parsed.salt,
            parsed.time_cost,
            parsed.memory_cost,
            parsed.parallelism,
            len(parsed.key),
        )

        if not hmac.compare_digest(parsed.key, candidate):
            raise PasswordMismatchError()

    def verify(self, password: Password, encoded: str) -> bool:
        """
        Boolean form of ``compare``.

        Returns False only for a password mismatch; structural errors
        still propagate.
        """
        try:
            self.compare(password, encoded)
        except PasswordMismatchError:
            return False
        return True

    def needs_rehash(self, encoded: str) -> bool:
        """
        Check whether a hash was produced under different parameters.

        Raises:
            MalformedHashError, ScanError, DecodeError: If ``encoded`` is invalid
        """
        parsed = parse_hash(encoded)
        config = self._config
        return (
            parsed.version != ARGON2_VERSION
            or parsed.memory_cost != config.memory_cost
            or parsed.time_cost != config.time_cost
            or parsed.parallelism != config.parallelism
            or len(parsed.salt) != config.salt_length
            or len(parsed.key) != config.key_length
        )


@lru_cache(maxsize=1)
def get_cached_hasher() -> Argon2IdHasher:
    """Get cached hasher configured from ``ARGON2ID_*`` environment variables."""
    return Argon2IdHasher(Argon2IdConfig.from_env())
