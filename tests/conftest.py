import os

import pytest

from ecsig import new_elliptic_curve_keypair
from ecsig.config import reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run each test with default settings and no config file in scope."""
    for key in list(os.environ):
        if key.startswith("ECSIG"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def keypair():
    return new_elliptic_curve_keypair()
