"""Azure OpenAI provider descriptor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from providerkit.models.enums import ApiKind
from providerkit.providers.azure_openai.config import AzureOpenAIEnvConfig
from providerkit.providers.base import ModelDefinition, ProviderDescriptor

AZURE_OPENAI_DEFAULT_MODEL = "gpt-4o"


def build_azure_openai_provider(
    config: AzureOpenAIEnvConfig | Mapping[str, Any],
) -> ProviderDescriptor:
    """Build the provider descriptor for an Azure OpenAI resource.

    With both ``api_version`` and ``deployment`` set, the base URL targets the
    deployment (``/openai/deployments/<deployment>``); otherwise it is the
    unified ``/openai/v1`` route. The descriptor carries no headers and no
    credential.

    Args:
        config: Resolved settings, or a mapping with ``endpoint``,
            ``deployment`` and ``apiVersion``/``api_version`` keys.
    """
    if not isinstance(config, AzureOpenAIEnvConfig):
        config = AzureOpenAIEnvConfig.model_validate(config)

    if config.uses_deployment_url:
        base_url = f"{config.endpoint}/openai/deployments/{config.deployment}"
    else:
        base_url = f"{config.endpoint}/openai/v1"

    model_id = config.deployment or AZURE_OPENAI_DEFAULT_MODEL
    return ProviderDescriptor(
        base_url=base_url,
        api=ApiKind.OPENAI_COMPLETIONS,
        models=[ModelDefinition(id=model_id, name=f"Azure OpenAI {model_id}")],
    )
