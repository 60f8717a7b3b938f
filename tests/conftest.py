"""Root test configuration — isolate settings from the caller's environment"""

import pytest

from mdblocks.config import Settings
from mdblocks.core.parse import MarkdownParser


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove MDBLOCKS_* env vars so config defaults are predictable."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"MDBLOCKS_{name.upper()}", raising=False)


@pytest.fixture(name="parser")
def parser_fixture():
    """Parser with empty block ids for deterministic comparisons."""
    return MarkdownParser.without_ids()
