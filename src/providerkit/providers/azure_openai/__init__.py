"""Azure OpenAI implicit provider."""

from providerkit.providers.azure_openai.config import (
    AZURE_OPENAI_API_KEY_ENV,
    AZURE_OPENAI_PROVIDER_ID,
    AzureOpenAIEnvConfig,
    resolve_azure_openai_env,
)
from providerkit.providers.azure_openai.provider import (
    AZURE_OPENAI_DEFAULT_MODEL,
    build_azure_openai_provider,
)

__all__ = [
    "AZURE_OPENAI_API_KEY_ENV",
    "AZURE_OPENAI_DEFAULT_MODEL",
    "AZURE_OPENAI_PROVIDER_ID",
    "AzureOpenAIEnvConfig",
    "build_azure_openai_provider",
    "resolve_azure_openai_env",
]
