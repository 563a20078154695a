from abc import ABC, abstractmethod


class IHashPort(ABC):
    """Port for hashing operations."""

    @abstractmethod
    def sha256(self, data: bytes | str) -> bytes:
        """Compute SHA-256 hash of bytes."""
        ...

    @abstractmethod
    def hexdigest(self, data: bytes | str) -> str:
        """Compute SHA-256 hash as a lowercase hex string."""
        ...
