"""Shared fixtures: the mp_cloudsearch pytest plugin plus env isolation."""
from __future__ import annotations

import os

import pytest

from mp_cloudsearch.testing.fixtures import fake_transport, live_client, sandbox_client  # noqa: F401


@pytest.fixture(autouse=True)
def _isolate_cloudsearch_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CLOUDSEARCH_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("CLOUDSEARCH_"):
            monkeypatch.delenv(key, raising=False)
