"""
SHA-256 digest utilities.

Text is always encoded as UTF-8 before hashing; binary buffers are hashed
as-is. The same conversion is used by signing and verification so that a
string and its UTF-8 bytes are interchangeable everywhere.
"""

import hashlib
import logging
import re

from .errors import InvalidInputError

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"

_DIGEST_RE = re.compile(r"[0-9a-f]{64}")


def ensure_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    """
    Convert text or a binary buffer to bytes.

    Args:
        data: Text (UTF-8 encoded) or any bytes-like buffer

    Returns:
        The data as immutable bytes

    Raises:
        InvalidInputError: If data is neither text nor binary, or the text
            cannot be encoded
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        try:
            return data.encode(TEXT_ENCODING)
        except UnicodeEncodeError as e:
            logger.debug(f"Rejected unencodable text input: {e.reason}")
            raise InvalidInputError(
                f"Text cannot be encoded as {TEXT_ENCODING}: {e.reason}",
                details={"start": e.start, "end": e.end},
                cause=e,
            ) from e
    raise InvalidInputError(
        f"Expected str or bytes-like data, got {type(data).__name__}",
        details={"type": type(data).__name__},
    )


def calculate_digest_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    """
    Compute the SHA-256 digest and return it as raw bytes.

    Returns:
        32 bytes of hash output
    """
    return hashlib.sha256(ensure_bytes(data)).digest()


def calculate_digest(data: bytes | bytearray | memoryview | str) -> str:
    """
    Compute the SHA-256 digest of text or bytes.

    Args:
        data: Data to hash

    Returns:
        64-character lowercase hex string

    Example:
        >>> calculate_digest("")
        'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'
    """
    return hashlib.sha256(ensure_bytes(data)).hexdigest()


def is_digest(value: str) -> bool:
    """Check that a string is a 64-character lowercase hex SHA-256 digest."""
    if not isinstance(value, str):
        return False
    return _DIGEST_RE.fullmatch(value) is not None
