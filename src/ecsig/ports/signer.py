from abc import ABC, abstractmethod
from typing import Any

from ecsig.keys import KeyPair


class ISignerPort(ABC):
    """Port for signature operations (key generation, signing, verification).
    Abstracts the underlying signature scheme (e.g. ECDSA P-256).
    """

    @abstractmethod
    def generate_keypair(self) -> KeyPair:
        """Generate a new key pair."""
        ...

    @abstractmethod
    def sign(self, private_key: Any, data: bytes | str) -> str:
        """Sign data with a private key, returning a hex signature."""
        ...

    @abstractmethod
    def verify(self, public_key: Any, data: bytes | str, signature: str) -> bool:
        """Verify a hex signature with a public key."""
        ...
