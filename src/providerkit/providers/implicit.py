"""Providers configured automatically from environment variables."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from providerkit.providers.azure_openai.config import (
    AZURE_OPENAI_API_KEY_ENV,
    AZURE_OPENAI_PROVIDER_ID,
    resolve_azure_openai_env,
)
from providerkit.providers.azure_openai.provider import build_azure_openai_provider
from providerkit.providers.base import ImplicitProviderContext, ProviderDescriptor

logger = logging.getLogger("providerkit.providers")


@dataclass(frozen=True)
class ImplicitProvider:
    """An implicitly supported provider.

    Attributes:
        provider_id: Canonical id used as the registry key.
        api_key_env: Environment variable holding the provider's secret.
        resolve: Returns the descriptor for an environment, or ``None`` when
            the provider is not configured.
    """

    provider_id: str
    api_key_env: str
    resolve: Callable[[Mapping[str, str] | None], ProviderDescriptor | None]


def _resolve_azure_openai(env: Mapping[str, str] | None) -> ProviderDescriptor | None:
    config = resolve_azure_openai_env(env)
    if config is None:
        return None
    return build_azure_openai_provider(config)


IMPLICIT_PROVIDERS: tuple[ImplicitProvider, ...] = (
    ImplicitProvider(
        provider_id=AZURE_OPENAI_PROVIDER_ID,
        api_key_env=AZURE_OPENAI_API_KEY_ENV,
        resolve=_resolve_azure_openai,
    ),
)


def resolve_implicit_providers(
    context: ImplicitProviderContext | None = None,
) -> dict[str, ProviderDescriptor]:
    """Resolve every implicit provider configured in the environment.

    Each entry's ``api_key`` is set to the name of the environment variable
    that holds the secret, never its value. Providers that are not fully
    configured are left out of the map.
    """
    ctx = context or ImplicitProviderContext()
    providers: dict[str, ProviderDescriptor] = {}
    for implicit in IMPLICIT_PROVIDERS:
        descriptor = implicit.resolve(ctx.env)
        if descriptor is None:
            logger.debug("Implicit provider %s is not configured", implicit.provider_id)
            continue
        providers[implicit.provider_id] = descriptor.model_copy(
            update={"api_key": implicit.api_key_env}
        )
        logger.debug("Registered implicit provider %s", implicit.provider_id)
    return providers
