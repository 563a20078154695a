"""
Batch signature verification.

Key handles are immutable, so triples that share a key can be verified
concurrently without locking.
"""

import concurrent.futures
import logging
from typing import Any, Optional

from .config import get_settings
from .crypto import verify_signature

logger = logging.getLogger(__name__)

VerifyItem = tuple[Any, bytes | bytearray | memoryview | str, str]


def batch_verify_signatures(
    items: list[VerifyItem],
    parallel: Optional[bool] = None,
    max_workers: Optional[int] = None,
) -> list[bool]:
    """
    Verify multiple signatures with optional parallelization.

    Args:
        items: List of (public_key, data, signature) tuples
        parallel: Whether to verify in parallel (default: from settings)
        max_workers: Max parallel workers (default: from settings)

    Returns:
        List of verification results, in input order

    Raises:
        Any error verify_signature raises for a malformed item.

    Example:
        items = [
            (pub1, b"msg1", sig1),
            (pub2, b"msg2", sig2),
        ]
        results = batch_verify_signatures(items)
    """
    if not items:
        return []

    batch = get_settings().batch
    if parallel is None:
        parallel = batch.parallel
    if max_workers is None:
        max_workers = batch.max_workers

    # Small batches run faster without executor overhead
    if not parallel or len(items) <= batch.parallel_threshold:
        return [verify_signature(pk, data, sig) for pk, data, sig in items]

    logger.debug(f"Verifying {len(items)} signatures in parallel (max_workers={max_workers})")
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(verify_signature, pk, data, sig)
            for pk, data, sig in items
        ]
        return [f.result() for f in futures]
