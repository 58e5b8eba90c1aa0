"""
Argon2id Codec
==============
Formatting and parsing of the canonical encoded hash string::

    $argon2id$v=<version>$m=<memory>,t=<time>,p=<parallelism>$<salt>$<key>

Salt and key use the standard base64 alphabet without padding. Parsing is
strict: anything another implementation would not have produced is rejected.
Every value parsed here is public, so none of it needs constant-time handling.
"""

import base64
import binascii
import re
from dataclasses import dataclass

from .config import UINT32_MAX, UINT8_MAX
from .exceptions import DecodeError, MalformedHashError, ScanError

INT64_MAX = 2 ** 63 - 1

ALGORITHM = "argon2id"
SPLIT_CHAR = "$"

ALGORITHM_IDX = 1
VERSION_IDX = 2
PARAMS_IDX = 3
SALT_IDX = 4
KEY_IDX = 5
NUM_PARTS = 6

_VERSION_RE = re.compile(r"v=([0-9]{1,19})")
_PARAMS_RE = re.compile(r"m=([0-9]{1,10}),t=([0-9]{1,10}),p=([0-9]{1,3})")
_B64_RE = re.compile(r"[A-Za-z0-9+/]*")


@dataclass(frozen=True)
class EncodedHash:
    """Components of an encoded Argon2id hash."""
    version: int
    memory_cost: int
    time_cost: int
    parallelism: int
    salt: bytes
    key: bytes
    algorithm: str = ALGORITHM


def b64encode(data: bytes) -> str:
    """Standard base64 without padding."""
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode(field: str, segment: str) -> bytes:
    """
    Strictly decode unpadded standard base64.

    Rejects padding, whitespace, URL-safe characters, impossible lengths,
    non-zero trailing bits and empty input.

    Raises:
        DecodeError: If ``segment`` is not canonical unpadded base64
    """
    if not segment:
        raise DecodeError(field, "empty segment")
    if not _B64_RE.fullmatch(segment):
        raise DecodeError(field, "illegal base64 data")
    if len(segment) % 4 == 1:
        raise DecodeError(field, "illegal base64 length")

    try:
        data = base64.b64decode(segment + "=" * (-len(segment) % 4), validate=True)
    except binascii.Error as e:
        raise DecodeError(field, str(e)) from e

    # Non-zero trailing bits decode fine but would not round-trip.
    if b64encode(data) != segment:
        raise DecodeError(field, "non-canonical base64 data")
    return data


def format_hash(encoded: EncodedHash) -> str:
    """Render an ``EncodedHash`` as its canonical string."""
    return (
        f"{SPLIT_CHAR}{encoded.algorithm}"
        f"{SPLIT_CHAR}v={encoded.version}"
        f"{SPLIT_CHAR}m={encoded.memory_cost},t={encoded.time_cost},p={encoded.parallelism}"
        f"{SPLIT_CHAR}{b64encode(encoded.salt)}"
        f"{SPLIT_CHAR}{b64encode(encoded.key)}"
    )


def _scan_uint(field: str, segment: str, text: str, maximum: int) -> int:
    value = int(text)
    if value > maximum:
        raise ScanError(field, segment)
    return value


def parse_hash(encoded: str) -> EncodedHash:
    """
    Parse a canonical string into its components.

    Raises:
        MalformedHashError: Wrong segment count or algorithm tag
        ScanError: Version or parameter segment does not match
        DecodeError: Salt or key is not strict unpadded base64
    """
    if not isinstance(encoded, str):
        raise MalformedHashError("parts")

    parts = encoded.split(SPLIT_CHAR)
    if len(parts) != NUM_PARTS:
        raise MalformedHashError("parts")

    if parts[ALGORITHM_IDX] != ALGORITHM:
        raise MalformedHashError("algorithm")

    version_match = _VERSION_RE.fullmatch(parts[VERSION_IDX])
    if version_match is None:
        raise ScanError("version", parts[VERSION_IDX])
    version = _scan_uint("version", parts[VERSION_IDX], version_match.group(1), INT64_MAX)

    params = parts[PARAMS_IDX]
    params_match = _PARAMS_RE.fullmatch(params)
    if params_match is None:
        raise ScanError("params", params)
    memory_cost = _scan_uint("params", params, params_match.group(1), UINT32_MAX)
    time_cost = _scan_uint("params", params, params_match.group(2), UINT32_MAX)
    parallelism = _scan_uint("params", params, params_match.group(3), UINT8_MAX)

    salt = b64decode("salt", parts[SALT_IDX])
    key = b64decode("key", parts[KEY_IDX])

    return EncodedHash(
        version=version,
        memory_cost=memory_cost,
        time_cost=time_cost,
        parallelism=parallelism,
        salt=salt,
        key=key,
    )
