"""Root test configuration: isolate tests from MDPOSTS_* variables in the caller's environment"""

import os

import pytest

from mdposts.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop MDPOSTS_<FIELD> overrides so defaults are predictable."""
    for name in Settings.model_fields:
        key = f"MDPOSTS_{name.upper()}"
        if key in os.environ:
            monkeypatch.delenv(key)
