"""
ECDSA P-256 signatures over SHA-256.

This module provides:
- P-256 key pair generation
- ECDSA signature generation (hex-encoded DER)
- ECDSA signature verification

Every operation is a single call into ``cryptography``; this module only
checks arguments and maps library errors onto the ecsig error taxonomy.
"""

import logging
import re
from typing import Any

from cryptography.exceptions import InternalError, InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

from .errors import MalformedSignatureError, RandomnessUnavailableError
from .hashing import ensure_bytes
from .keys import KeyPair, require_private_key, require_public_key

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})+")


def _signature_algorithm() -> ec.ECDSA:
    return ec.ECDSA(hashes.SHA256())


def new_elliptic_curve_keypair() -> KeyPair:
    """
    Generate a P-256 key pair for ECDSA signatures.

    Returns:
        KeyPair with public and private key handles

    Raises:
        RandomnessUnavailableError: If the secure random source fails
    """
    try:
        private_key = ec.generate_private_key(ec.SECP256R1())
    except (OSError, InternalError) as e:
        logger.debug(f"Key generation failed: {e}")
        raise RandomnessUnavailableError(
            f"Key generation failed, secure randomness unavailable: {e}",
            cause=e,
        ) from e

    keypair = KeyPair(public_key=private_key.public_key(), private_key=private_key)
    logger.debug(f"Generated P-256 key pair {keypair.fingerprint_short}")
    return keypair


def generate_signature(private_key: Any, data: bytes | bytearray | memoryview | str) -> str:
    """
    Sign data with ECDSA over its SHA-256 digest.

    A fresh random nonce is used for every call, so repeated signatures
    over the same data differ but all verify.

    Args:
        private_key: P-256 private key handle
        data: Text (UTF-8) or bytes to sign

    Returns:
        Lowercase hex of the DER-encoded signature (at most 144 characters)

    Raises:
        KeyRoleMismatchError: If a public key is given
        InvalidKeyError: If the key is not a P-256 private key
        InvalidInputError: If the data cannot be converted to bytes
    """
    key = require_private_key(private_key)
    message = ensure_bytes(data)
    return key.sign(message, _signature_algorithm()).hex()


def decode_signature(signature: str) -> bytes:
    """
    Parse a hex signature string into DER bytes.

    Raises:
        MalformedSignatureError: If the string is not hex or not a DER
            ECDSA signature
    """
    if not isinstance(signature, str):
        raise MalformedSignatureError(
            f"Signature must be a hex string, got {type(signature).__name__}",
            details={"type": type(signature).__name__},
        )
    if _HEX_RE.fullmatch(signature) is None:
        raise MalformedSignatureError(
            "Signature is not valid hex",
            details={"length": len(signature)},
        )

    der = bytes.fromhex(signature)
    try:
        decode_dss_signature(der)
    except ValueError as e:
        raise MalformedSignatureError(
            f"Signature is not a DER-encoded ECDSA signature: {e}",
            cause=e,
        ) from e
    return der


def verify_signature(
    public_key: Any,
    data: bytes | bytearray | memoryview | str,
    signature: str,
) -> bool:
    """
    Verify an ECDSA signature over the SHA-256 digest of data.

    Args:
        public_key: P-256 public key handle
        data: Text (UTF-8) or bytes that were signed
        signature: Hex-encoded DER signature

    Returns:
        True if the signature is valid for exactly this data and key,
        False otherwise

    Raises:
        KeyRoleMismatchError: If a private key is given
        InvalidKeyError: If the key is not a P-256 public key
        MalformedSignatureError: If the signature cannot be parsed
        InvalidInputError: If the data cannot be converted to bytes
    """
    key = require_public_key(public_key)
    message = ensure_bytes(data)
    der = decode_signature(signature)
    try:
        key.verify(der, message, _signature_algorithm())
        return True
    except InvalidSignature:
        return False
