"""Shared test fixtures."""

from __future__ import annotations

import pytest

AZURE_ENV_KEYS = (
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_DEPLOYMENT",
    "AZURE_OPENAI_API_VERSION",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every Azure OpenAI variable from ``os.environ`` for one test."""
    for key in AZURE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
