"""ecsig - SHA-256 digests and ECDSA P-256 signatures.

A thin layer over ``cryptography`` exposing four operations: digest, key pair
generation, signing and verification, with hex-encoded outputs and a small
error taxonomy.

Example:
    >>> from ecsig import new_elliptic_curve_keypair, generate_signature, verify_signature
    >>> keys = new_elliptic_curve_keypair()
    >>> sig = generate_signature(keys.private_key, "hello")
    >>> verify_signature(keys.public_key, "hello", sig)
    True
"""

from .batch import batch_verify_signatures
from .crypto import (
    generate_signature,
    new_elliptic_curve_keypair,
    verify_signature,
)
from .errors import (
    ConfigurationError,
    EcsigError,
    InvalidInputError,
    InvalidKeyError,
    KeyRoleMismatchError,
    MalformedSignatureError,
    RandomnessUnavailableError,
)
from .hashing import calculate_digest, calculate_digest_bytes, is_digest
from .keys import (
    NAMED_CURVE,
    KeyInfo,
    KeyPair,
    describe_key,
    export_private_key_pem,
    export_public_key_pem,
    load_private_key_pem,
    load_public_key_pem,
)

__version__ = "1.0.0"

__all__ = [
    # Digest
    "calculate_digest",
    "calculate_digest_bytes",
    "is_digest",
    # Keys
    "KeyPair",
    "KeyInfo",
    "NAMED_CURVE",
    "describe_key",
    "export_public_key_pem",
    "export_private_key_pem",
    "load_public_key_pem",
    "load_private_key_pem",
    # Signatures
    "new_elliptic_curve_keypair",
    "generate_signature",
    "verify_signature",
    "batch_verify_signatures",
    # Errors
    "EcsigError",
    "InvalidInputError",
    "InvalidKeyError",
    "KeyRoleMismatchError",
    "RandomnessUnavailableError",
    "MalformedSignatureError",
    "ConfigurationError",
]
