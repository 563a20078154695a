from ecsig.hashing import calculate_digest, calculate_digest_bytes
from ecsig.ports.hash import IHashPort


class Sha256HashAdapter(IHashPort):
    def sha256(self, data: bytes | str) -> bytes:
        return calculate_digest_bytes(data)

    def hexdigest(self, data: bytes | str) -> str:
        return calculate_digest(data)
