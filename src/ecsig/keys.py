"""
P-256 key handles.

Keys stay as ``cryptography`` handles in memory; this module checks their role
and curve, describes them, and moves them in and out of PEM
(SPKI for public keys, unencrypted PKCS8 for private keys).
"""

import hashlib
import logging
from typing import Any, Literal

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from pydantic import (
    BaseModel,
    ConfigDict,
    field_serializer,
    field_validator,
    model_validator,
)

from .errors import InvalidKeyError, KeyRoleMismatchError

logger = logging.getLogger(__name__)

# OpenSSL name of the only supported curve (secp256r1 / NIST P-256)
NAMED_CURVE = "prime256v1"

_OPENSSL_CURVE_NAMES = {
    "secp256r1": "prime256v1",
}

_PRIVATE_PEM_MARKER = b"PRIVATE KEY-----"
_PUBLIC_PEM_MARKER = b"-----BEGIN PUBLIC KEY-----"


class KeyInfo(BaseModel):
    """Description of an EC key handle."""

    type: Literal["public", "private"]
    asymmetric_key_type: str = "ec"
    named_curve: str
    key_size: int

    model_config = ConfigDict(frozen=True)


def _check_curve(key: ec.EllipticCurvePublicKey | ec.EllipticCurvePrivateKey) -> None:
    if not isinstance(key.curve, ec.SECP256R1):
        raise InvalidKeyError(
            f"Key is on curve {key.curve.name}, expected {NAMED_CURVE}",
            details={"curve": key.curve.name},
        )


def require_private_key(key: Any) -> ec.EllipticCurvePrivateKey:
    """
    Check that a handle is a P-256 private key.

    Raises:
        KeyRoleMismatchError: If a public key was given
        InvalidKeyError: If the object is not an EC private key on P-256
    """
    if isinstance(key, ec.EllipticCurvePublicKey):
        raise KeyRoleMismatchError("Expected a private key, got a public key")
    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise InvalidKeyError(
            f"Expected an EC private key, got {type(key).__name__}",
            details={"type": type(key).__name__},
        )
    _check_curve(key)
    return key


def require_public_key(key: Any) -> ec.EllipticCurvePublicKey:
    """
    Check that a handle is a P-256 public key.

    Raises:
        KeyRoleMismatchError: If a private key was given
        InvalidKeyError: If the object is not an EC public key on P-256
    """
    if isinstance(key, ec.EllipticCurvePrivateKey):
        raise KeyRoleMismatchError("Expected a public key, got a private key")
    if not isinstance(key, ec.EllipticCurvePublicKey):
        raise InvalidKeyError(
            f"Expected an EC public key, got {type(key).__name__}",
            details={"type": type(key).__name__},
        )
    _check_curve(key)
    return key


def describe_key(key: Any) -> KeyInfo:
    """
    Describe an EC key handle.

    Returns:
        KeyInfo with role, key type, OpenSSL curve name and size
    """
    if isinstance(key, ec.EllipticCurvePrivateKey):
        role = "private"
    elif isinstance(key, ec.EllipticCurvePublicKey):
        role = "public"
    else:
        raise InvalidKeyError(
            f"Expected an EC key, got {type(key).__name__}",
            details={"type": type(key).__name__},
        )
    curve = key.curve
    return KeyInfo(
        type=role,
        named_curve=_OPENSSL_CURVE_NAMES.get(curve.name, curve.name),
        key_size=curve.key_size,
    )


def _pem_bytes(pem: str | bytes) -> bytes:
    if isinstance(pem, str):
        return pem.encode("ascii", errors="replace")
    if isinstance(pem, (bytes, bytearray)):
        return bytes(pem)
    raise InvalidKeyError(
        f"Expected PEM text or bytes, got {type(pem).__name__}",
        details={"type": type(pem).__name__},
    )


def export_public_key_pem(key: Any) -> str:
    """Export a public key as SPKI PEM text."""
    public_key = require_public_key(key)
    return public_key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")


def export_private_key_pem(key: Any) -> str:
    """Export a private key as unencrypted PKCS8 PEM text."""
    private_key = require_private_key(key)
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


def load_public_key_pem(pem: str | bytes) -> ec.EllipticCurvePublicKey:
    """
    Import a P-256 public key from SPKI PEM.

    Raises:
        KeyRoleMismatchError: If the PEM holds a private key
        InvalidKeyError: If the PEM cannot be parsed or is not a P-256 key
    """
    data = _pem_bytes(pem)
    if _PRIVATE_PEM_MARKER in data:
        raise KeyRoleMismatchError("Expected public key PEM, got private key PEM")
    try:
        key = serialization.load_pem_public_key(data)
    except (ValueError, UnsupportedAlgorithm) as e:
        logger.debug(f"Public key PEM rejected: {e}")
        raise InvalidKeyError(f"Cannot parse public key PEM: {e}", cause=e) from e
    logger.debug("Loaded public key from PEM")
    return require_public_key(key)


def load_private_key_pem(pem: str | bytes) -> ec.EllipticCurvePrivateKey:
    """
    Import a P-256 private key from unencrypted PKCS8 (or SEC1) PEM.

    Raises:
        KeyRoleMismatchError: If the PEM holds a public key
        InvalidKeyError: If the PEM cannot be parsed, is encrypted, or is not
            a P-256 key
    """
    data = _pem_bytes(pem)
    if _PUBLIC_PEM_MARKER in data:
        raise KeyRoleMismatchError("Expected private key PEM, got public key PEM")
    try:
        key = serialization.load_pem_private_key(data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        logger.debug(f"Private key PEM rejected: {e}")
        raise InvalidKeyError(f"Cannot parse private key PEM: {e}", cause=e) from e
    logger.debug("Loaded private key from PEM")
    return require_private_key(key)


def _spki_der(key: ec.EllipticCurvePublicKey) -> bytes:
    return key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


class KeyPair(BaseModel):
    """
    A P-256 key pair.

    Holds live key handles. Serializes to PEM (SPKI / PKCS8) and validates
    from either PEM text or handles; the two keys must belong together.
    """

    public_key: ec.EllipticCurvePublicKey
    private_key: ec.EllipticCurvePrivateKey

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @field_validator("public_key", mode="before")
    @classmethod
    def validate_public_key(cls, v: Any) -> ec.EllipticCurvePublicKey:
        """Load PEM text if needed and check role and curve."""
        if isinstance(v, (str, bytes)):
            return load_public_key_pem(v)
        return require_public_key(v)

    @field_validator("private_key", mode="before")
    @classmethod
    def validate_private_key(cls, v: Any) -> ec.EllipticCurvePrivateKey:
        """Load PEM text if needed and check role and curve."""
        if isinstance(v, (str, bytes)):
            return load_private_key_pem(v)
        return require_private_key(v)

    @model_validator(mode="after")
    def check_pair(self) -> "KeyPair":
        if _spki_der(self.private_key.public_key()) != _spki_der(self.public_key):
            raise InvalidKeyError("Public key does not match private key")
        return self

    @field_serializer("public_key")
    def serialize_public_key(self, v: ec.EllipticCurvePublicKey, _info) -> str:
        return export_public_key_pem(v)

    @field_serializer("private_key")
    def serialize_private_key(self, v: ec.EllipticCurvePrivateKey, _info) -> str:
        return export_private_key_pem(v)

    @property
    def public_key_pem(self) -> str:
        """Public key as SPKI PEM text."""
        return export_public_key_pem(self.public_key)

    @property
    def private_key_pem(self) -> str:
        """Private key as PKCS8 PEM text."""
        return export_private_key_pem(self.private_key)

    @property
    def fingerprint(self) -> str:
        """SHA-256 of the DER-encoded SPKI public key (hex)."""
        return hashlib.sha256(_spki_der(self.public_key)).hexdigest()

    @property
    def fingerprint_short(self) -> str:
        """Get shortened fingerprint for display."""
        fp = self.fingerprint
        return f"{fp[:8]}...{fp[-8:]}"

    def __repr__(self) -> str:
        return f"KeyPair(curve={NAMED_CURVE}, fingerprint={self.fingerprint_short})"
