"""Provider descriptors and the environment lookup shared by implicit providers."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from providerkit.models.enums import ApiKind

_PROVIDER_ALIASES = {
    "azure": "azure-openai",
    "azure_openai": "azure-openai",
    "azureopenai": "azure-openai",
    "google": "gemini",
}


class ProviderConfigError(Exception):
    """Base class for provider configuration errors."""


class ModelDefinition(BaseModel):
    """A model exposed by a provider."""

    id: str
    name: str


class ProviderDescriptor(BaseModel):
    """Provider entry consumed by the model-invocation layer.

    Attributes:
        base_url: Request base URL for the provider.
        api: Wire protocol tag.
        models: Models served by the provider.
        headers: Extra request headers. Never set for implicit providers.
        auth_header: Auth header override flag. Never set for implicit providers.
        api_key: Name of the environment variable holding the secret. This is a
            reference, never the secret itself.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    base_url: str
    api: ApiKind = ApiKind.OPENAI_COMPLETIONS
    models: list[ModelDefinition] = Field(default_factory=list)
    headers: dict[str, str] | None = None
    auth_header: bool | None = None
    api_key: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping with unset fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ImplicitProviderContext(BaseModel):
    """Inputs for implicit provider resolution.

    Attributes:
        env: Environment snapshot to read from. When ``None``, ``os.environ``
            is read at call time.
        providers: Provider descriptors already known to the caller, keyed by
            provider id. Their ``api_key`` references are honoured when
            resolving credentials.
    """

    env: dict[str, str] | None = None
    providers: dict[str, ProviderDescriptor] = Field(default_factory=dict)


def normalize_provider_id(provider: str) -> str:
    """Lowercase and trim a provider id, mapping known aliases to the canonical id."""
    normalized = provider.strip().lower()
    return _PROVIDER_ALIASES.get(normalized, normalized)


def read_env(name: str, env: Mapping[str, str] | None = None) -> str | None:
    """Read a trimmed environment value; blank values count as unset."""
    source = os.environ if env is None else env
    value = source.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def dump_providers(providers: Mapping[str, ProviderDescriptor]) -> dict[str, dict[str, Any]]:
    """Serialize a provider map into the shape the provider registry expects."""
    return {provider_id: descriptor.to_dict() for provider_id, descriptor in providers.items()}
