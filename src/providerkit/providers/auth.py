"""Just-in-time API key resolution for provider requests."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, SecretStr

from providerkit.models.enums import AuthMode
from providerkit.providers.azure_openai.config import (
    AZURE_OPENAI_API_KEY_ENV,
    AZURE_OPENAI_PROVIDER_ID,
)
from providerkit.providers.base import (
    ImplicitProviderContext,
    ProviderConfigError,
    normalize_provider_id,
    read_env,
)

logger = logging.getLogger("providerkit.providers.auth")

_ENV_VAR_NAME = re.compile(r"^[A-Z][A-Z0-9_]*$")

PROVIDER_ENV_API_KEYS: dict[str, tuple[str, ...]] = {
    "anthropic": ("ANTHROPIC_API_KEY",),
    AZURE_OPENAI_PROVIDER_ID: (AZURE_OPENAI_API_KEY_ENV,),
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    "mistral": ("MISTRAL_API_KEY",),
    "openai": ("OPENAI_API_KEY",),
}


class CredentialError(ProviderConfigError):
    """A provider credential could not be resolved."""


class MissingCredentialError(CredentialError):
    """No API key is available for a provider at request time.

    Attributes:
        provider: Canonical provider id.
        env_vars: Environment variables that were checked.
    """

    def __init__(self, provider: str, *, env_vars: tuple[str, ...] = ()) -> None:
        if env_vars:
            message = f"No API key found for provider {provider!r} (checked {', '.join(env_vars)})"
        else:
            message = f"No API key source known for provider {provider!r}"
        super().__init__(message)
        self.provider = provider
        self.env_vars = env_vars


class ResolvedCredential(BaseModel):
    """A literal secret resolved for one request. Do not store it.

    Attributes:
        api_key: The secret. Masked in ``repr`` and serialization.
        mode: How the secret authenticates.
        source: Where the secret came from, e.g. ``"env: OPENAI_API_KEY"``.
    """

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    mode: AuthMode = AuthMode.API_KEY
    source: str


def _candidate_env_vars(provider_id: str, context: ImplicitProviderContext | None) -> list[str]:
    names: list[str] = []
    if context is not None:
        for key, descriptor in context.providers.items():
            if normalize_provider_id(key) != provider_id or descriptor.api_key is None:
                continue
            # Explicit configs may carry a literal key here; only names are followed
            if _ENV_VAR_NAME.fullmatch(descriptor.api_key):
                names.append(descriptor.api_key)
    for name in PROVIDER_ENV_API_KEYS.get(provider_id, ()):
        if name not in names:
            names.append(name)
    return names


def resolve_env_api_key(
    provider: str,
    env: Mapping[str, str] | None = None,
    *,
    context: ImplicitProviderContext | None = None,
) -> ResolvedCredential | None:
    """Return the API key for ``provider`` from the first set environment variable."""
    provider_id = normalize_provider_id(provider)
    for name in _candidate_env_vars(provider_id, context):
        value = read_env(name, env)
        if value is not None:
            return ResolvedCredential(api_key=SecretStr(value), source=f"env: {name}")
    return None


def resolve_api_key_for_provider(
    provider: str,
    context: ImplicitProviderContext | None = None,
) -> ResolvedCredential:
    """Resolve the literal API key for ``provider`` at dispatch time.

    The environment is read on every call, so a key removed after
    registration is reported as missing.

    Raises:
        MissingCredentialError: If no candidate environment variable is set.
    """
    provider_id = normalize_provider_id(provider)
    env = context.env if context is not None else None
    credential = resolve_env_api_key(provider_id, env, context=context)
    if credential is None:
        env_vars = tuple(_candidate_env_vars(provider_id, context))
        logger.warning("No API key available for provider %s", provider_id)
        raise MissingCredentialError(provider_id, env_vars=env_vars)

    logger.debug("Resolved API key for provider %s from %s", provider_id, credential.source)
    return credential
