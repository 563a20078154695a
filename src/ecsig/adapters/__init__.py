from .hash import Sha256HashAdapter
from .signer import P256SignerAdapter

__all__ = ["P256SignerAdapter", "Sha256HashAdapter"]
