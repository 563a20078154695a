import concurrent.futures

import pytest

from ecsig import (
    MalformedSignatureError,
    batch_verify_signatures,
    generate_signature,
    new_elliptic_curve_keypair,
)


def make_items(count):
    keypair = new_elliptic_curve_keypair()
    items = []
    for i in range(count):
        data = f"message {i}"
        items.append((keypair.public_key, data, generate_signature(keypair.private_key, data)))
    return keypair, items


class SpyExecutor(concurrent.futures.ThreadPoolExecutor):
    instances = []

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        SpyExecutor.instances.append(kwargs.get("max_workers"))


@pytest.fixture
def spy_executor(monkeypatch):
    SpyExecutor.instances = []
    monkeypatch.setattr(concurrent.futures, "ThreadPoolExecutor", SpyExecutor)
    return SpyExecutor


def test_empty_batch():
    assert batch_verify_signatures([]) == []


@pytest.mark.parametrize("parallel", [True, False])
def test_results_in_order(parallel):
    keypair, items = make_items(10)
    # Break every third item
    for i in range(0, 10, 3):
        pk, data, sig = items[i]
        items[i] = (pk, data + " (tampered)", sig)

    results = batch_verify_signatures(items, parallel=parallel)

    assert results == [i % 3 != 0 for i in range(10)]


def test_small_batch_runs_sequentially(spy_executor):
    _, items = make_items(4)

    assert batch_verify_signatures(items) == [True] * 4
    assert spy_executor.instances == []


def test_large_batch_runs_in_parallel(spy_executor):
    _, items = make_items(8)

    assert batch_verify_signatures(items, max_workers=2) == [True] * 8
    assert spy_executor.instances == [2]


def test_settings_control_parallelism(monkeypatch, spy_executor):
    monkeypatch.setenv("ECSIG__BATCH__PARALLEL_THRESHOLD", "1")
    monkeypatch.setenv("ECSIG__BATCH__MAX_WORKERS", "3")
    _, items = make_items(2)

    assert batch_verify_signatures(items) == [True, True]
    assert spy_executor.instances == [3]


def test_settings_disable_parallelism(monkeypatch, spy_executor):
    monkeypatch.setenv("ECSIG__BATCH__PARALLEL", "false")
    _, items = make_items(8)

    assert batch_verify_signatures(items) == [True] * 8
    assert spy_executor.instances == []


@pytest.mark.parametrize("parallel", [True, False])
def test_malformed_item_raises(parallel):
    _, items = make_items(6)
    pk, data, _ = items[2]
    items[2] = (pk, data, "not hex")

    with pytest.raises(MalformedSignatureError):
        batch_verify_signatures(items, parallel=parallel)


def test_foreign_config_file_does_not_break_verification(tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "config.yaml").write_text("database: {url: 'postgres://localhost/app'}\n")
    _, items = make_items(1)

    assert batch_verify_signatures(items) == [True]


def test_foreign_keys_in_ecsig_file_ignored(tmp_path):
    (tmp_path / "ecsig.yaml").write_text("database: {url: 'postgres://localhost/app'}\nbatch: {parallel: false}\n")
    _, items = make_items(1)

    assert batch_verify_signatures(items) == [True]
