"""Root test configuration: keep the developer's environment out of the tests"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch):
    """Drop MDPEEK_* env vars so load_config only sees what a test sets."""
    for name in list(os.environ):
        if name.startswith("MDPEEK_"):
            monkeypatch.delenv(name)
