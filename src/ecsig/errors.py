"""ecsig errors.

Every failure surfaced by the library is an ``EcsigError`` carrying a stable
code. A signature that simply does not match is not an error; ``verify``
returns ``False`` for it.
"""

from typing import Any


class EcsigError(Exception):
    """Base class for all ecsig errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict | None = None,
        cause: Exception | None = None,
    ):
        """Initialize an EcsigError.

        Args:
            code: Stable error code (e.g., ECSIG_INVALID_KEY)
            message: Human-readable error message
            details: Additional context (optional)
            cause: Underlying exception if chained (optional)
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict:
        """Convert error to dictionary representation."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }


class InvalidInputError(EcsigError):
    """Input could not be converted to bytes."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__("ECSIG_INVALID_INPUT", message, **kwargs)


# Key Errors
class InvalidKeyError(EcsigError):
    """Key handle is malformed, unparsable, or not on P-256."""

    def __init__(self, message: str = "Invalid key", **kwargs: Any) -> None:
        super().__init__("ECSIG_INVALID_KEY", message, **kwargs)


class KeyRoleMismatchError(InvalidKeyError):
    """A public key was given where a private key is required, or vice versa."""

    def __init__(self, message: str = "Key role mismatch", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.code = "ECSIG_KEY_ROLE_MISMATCH"


class RandomnessUnavailableError(EcsigError):
    """The platform's secure random source failed during key generation."""

    def __init__(
        self, message: str = "Secure randomness unavailable", **kwargs: Any
    ) -> None:
        super().__init__("ECSIG_RANDOMNESS_UNAVAILABLE", message, **kwargs)


# Signature Errors
class MalformedSignatureError(EcsigError):
    """Signature is not hex or not a DER-encoded ECDSA structure."""

    def __init__(self, message: str = "Malformed signature", **kwargs: Any) -> None:
        super().__init__("ECSIG_MALFORMED_SIGNATURE", message, **kwargs)


class ConfigurationError(EcsigError):
    """Configuration file or values are invalid."""

    def __init__(self, message: str = "Invalid configuration", **kwargs: Any) -> None:
        super().__init__("ECSIG_CONFIGURATION", message, **kwargs)
