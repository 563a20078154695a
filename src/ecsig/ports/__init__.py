from .hash import IHashPort
from .signer import ISignerPort

__all__ = ["IHashPort", "ISignerPort"]
