"""All string enums for providerkit."""

from __future__ import annotations

from enum import StrEnum, unique


@unique
class ApiKind(StrEnum):
    """Wire protocol a provider endpoint speaks."""

    OPENAI_COMPLETIONS = "openai-completions"


@unique
class AuthMode(StrEnum):
    API_KEY = "api-key"
