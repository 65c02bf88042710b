"""providerkit - Environment-driven model provider configuration for agent frameworks."""

from providerkit._version import __version__
from providerkit.models.enums import ApiKind, AuthMode
from providerkit.providers.auth import (
    CredentialError,
    MissingCredentialError,
    ResolvedCredential,
    resolve_api_key_for_provider,
    resolve_env_api_key,
)
from providerkit.providers.azure_openai import (
    AzureOpenAIEnvConfig,
    build_azure_openai_provider,
    resolve_azure_openai_env,
)
from providerkit.providers.base import (
    ImplicitProviderContext,
    ModelDefinition,
    ProviderConfigError,
    ProviderDescriptor,
    dump_providers,
    normalize_provider_id,
)
from providerkit.providers.implicit import resolve_implicit_providers
from providerkit.providers.security import sanitize_identifier, validate_endpoint

__all__ = [
    "__version__",
    # Enums
    "ApiKind",
    "AuthMode",
    # Providers
    "AzureOpenAIEnvConfig",
    "ImplicitProviderContext",
    "ModelDefinition",
    "ProviderDescriptor",
    "build_azure_openai_provider",
    "dump_providers",
    "normalize_provider_id",
    "resolve_azure_openai_env",
    "resolve_implicit_providers",
    # Validation
    "sanitize_identifier",
    "validate_endpoint",
    # Credentials
    "ResolvedCredential",
    "resolve_api_key_for_provider",
    "resolve_env_api_key",
    # Errors
    "CredentialError",
    "MissingCredentialError",
    "ProviderConfigError",
]
