#!/usr/bin/env python3
"""
ecsig Quick Start

Digest, key generation, signing, verification and PEM export in one pass.
"""

from ecsig import (
    calculate_digest,
    describe_key,
    generate_signature,
    load_public_key_pem,
    new_elliptic_curve_keypair,
    verify_signature,
)
from ecsig.config import configure_logging


def main():
    configure_logging()

    print("=" * 50)
    print("ecsig Quick Start")
    print("=" * 50)

    print("\n[1] Digest...")
    print(f"  sha256('test input') = {calculate_digest('test input')}")

    print("\n[2] Generating Key Pair...")
    keys = new_elliptic_curve_keypair()
    info = describe_key(keys.public_key)
    print(f"  Curve:       {info.named_curve}")
    print(f"  Fingerprint: {keys.fingerprint_short}")

    print("\n[3] Signing...")
    data = "test data"
    signature = generate_signature(keys.private_key, data)
    print(f"  Signature: {signature[:32]}... ({len(signature) // 2} bytes)")

    print("\n[4] Verifying...")
    print(f"  Original data: {verify_signature(keys.public_key, data, signature)}")
    print(f"  Tampered data: {verify_signature(keys.public_key, 'tampered data', signature)}")

    print("\n[5] Sharing the Public Key...")
    pem = keys.public_key_pem
    print("  " + pem.splitlines()[0])
    imported = load_public_key_pem(pem)
    print(f"  Imported key verifies: {verify_signature(imported, data, signature)}")

    print("\n" + "=" * 50)
    print("Quick Start Complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
