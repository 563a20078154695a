from typing import Any

from ecsig.crypto import (
    generate_signature,
    new_elliptic_curve_keypair,
    verify_signature,
)
from ecsig.keys import KeyPair
from ecsig.ports.signer import ISignerPort


class P256SignerAdapter(ISignerPort):
    def generate_keypair(self) -> KeyPair:
        return new_elliptic_curve_keypair()

    def sign(self, private_key: Any, data: bytes | str) -> str:
        """Sign data using ECDSA P-256 / SHA-256.
        Key must be a P-256 private key handle.
        """
        return generate_signature(private_key, data)

    def verify(self, public_key: Any, data: bytes | str, signature: str) -> bool:
        """Verify an ECDSA P-256 / SHA-256 signature.
        Malformed signatures and wrong key roles raise; mismatches return False.
        """
        return verify_signature(public_key, data, signature)
