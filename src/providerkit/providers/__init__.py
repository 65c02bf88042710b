"""Implicit model providers and credential resolution."""

from providerkit.providers.base import (
    ImplicitProviderContext,
    ModelDefinition,
    ProviderConfigError,
    ProviderDescriptor,
    dump_providers,
    normalize_provider_id,
)
from providerkit.providers.security import sanitize_identifier, validate_endpoint
from providerkit.providers.implicit import (
    IMPLICIT_PROVIDERS,
    ImplicitProvider,
    resolve_implicit_providers,
)
from providerkit.providers.auth import (
    CredentialError,
    MissingCredentialError,
    ResolvedCredential,
    resolve_api_key_for_provider,
    resolve_env_api_key,
)

__all__ = [
    "IMPLICIT_PROVIDERS",
    "CredentialError",
    "ImplicitProvider",
    "ImplicitProviderContext",
    "MissingCredentialError",
    "ModelDefinition",
    "ProviderConfigError",
    "ProviderDescriptor",
    "ResolvedCredential",
    "dump_providers",
    "normalize_provider_id",
    "resolve_api_key_for_provider",
    "resolve_env_api_key",
    "resolve_implicit_providers",
    "sanitize_identifier",
    "validate_endpoint",
]
