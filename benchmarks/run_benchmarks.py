import time

from ecsig import (
    batch_verify_signatures,
    calculate_digest,
    generate_signature,
    new_elliptic_curve_keypair,
    verify_signature,
)


def print_result(name, ops, total_time):
    ms_per_op = (total_time / ops) * 1000
    ops_per_sec = ops / total_time
    print(f"| {name:<25} | {ms_per_op:.4f}ms | {ops_per_sec:,.0f} |")


def benchmark_crypto():
    print("\n## ECDSA P-256 / SHA-256")
    print(f"| {'Operation':<25} | {'Latency':<9} | {'Throughput (ops/s)'} |")
    print(f"|{'-'*27}|{'-'*11}|{'-'*22}|")

    msg = b"Hello, benchmarks!" * 100  # 1.8KB message
    count = 1000

    # 1. Digest
    start = time.perf_counter()
    for _ in range(count):
        calculate_digest(msg)
    print_result("Digest (SHA-256)", count, time.perf_counter() - start)

    # 2. Key generation
    keygen_count = 200
    start = time.perf_counter()
    for _ in range(keygen_count):
        new_elliptic_curve_keypair()
    print_result("Key pair (P-256)", keygen_count, time.perf_counter() - start)

    # 3. Signing
    keys = new_elliptic_curve_keypair()
    start = time.perf_counter()
    for _ in range(count):
        generate_signature(keys.private_key, msg)
    print_result("Sign (ECDSA)", count, time.perf_counter() - start)

    # 4. Verify
    sig = generate_signature(keys.private_key, msg)
    start = time.perf_counter()
    for _ in range(count):
        verify_signature(keys.public_key, msg, sig)
    print_result("Verify (ECDSA)", count, time.perf_counter() - start)

    # 5. Batch Verify
    items = [(keys.public_key, msg, sig)] * 100
    batch_count = 20
    start = time.perf_counter()
    for _ in range(batch_count):
        batch_verify_signatures(items, parallel=True)
    total_ops = batch_count * 100
    print_result("Batch Verify (Parallel)", total_ops, time.perf_counter() - start)


if __name__ == "__main__":
    print("# ecsig Benchmarks")
    benchmark_crypto()
