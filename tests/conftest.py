"""Global test fixtures."""

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host ROLEKEEPER_* settings out of the tests."""
    for key in list(os.environ):
        if key.startswith("ROLEKEEPER_"):
            monkeypatch.delenv(key, raising=False)
