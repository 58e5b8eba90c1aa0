"""
Argon2id Exceptions
===================
Exception classes for hash generation and verification.

Every error is raised to the immediate caller; nothing here is logged,
retried or swallowed. ``PasswordMismatchError`` is the expected outcome of a
wrong password and is kept distinct from the structural errors so callers can
tell "wrong password" from "corrupt record".
"""

from typing import Optional


class Argon2IdError(Exception):
    """Base class for all argon2id_core errors."""
    pass


class RandomSourceError(Argon2IdError):
    """Raised when the random source fails or returns too few salt bytes."""

    def __init__(self, requested: int, received: Optional[int] = None):
        self.requested = requested
        self.received = received
        if received is None:
            message = "argon2id: generate salt: random source failed"
        else:
            message = (
                f"argon2id: generate salt: bytes not read "
                f"(requested {requested}, received {received})"
            )
        super().__init__(message)


class MalformedHashError(Argon2IdError, ValueError):
    """Raised when an encoded hash has the wrong structure or algorithm tag."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"argon2id: {reason}: malformed hash")


class ScanError(Argon2IdError, ValueError):
    """Raised when the version or parameter segment cannot be parsed."""

    def __init__(self, field: str, segment: str):
        self.field = field
        self.segment = segment
        super().__init__(f"argon2id: scan {field}: unexpected input {segment!r}")


class DecodeError(Argon2IdError, ValueError):
    """Raised when the salt or key segment is not strict unpadded base64."""

    def __init__(self, field: str, detail: str):
        self.field = field
        super().__init__(f"argon2id: decode {field}: {detail}")


class KDFError(Argon2IdError):
    """Raised when the Argon2 primitive rejects the supplied parameters."""
    pass


class PasswordMismatchError(Argon2IdError):
    """Raised when a well-formed hash does not match the candidate password."""

    def __init__(self):
        super().__init__("argon2id: passwords do not match")
