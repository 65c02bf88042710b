"""Azure OpenAI configuration resolved from environment variables."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from providerkit.providers.base import read_env
from providerkit.providers.security import sanitize_identifier, validate_endpoint

logger = logging.getLogger("providerkit.providers")

AZURE_OPENAI_PROVIDER_ID = "azure-openai"
AZURE_OPENAI_API_KEY_ENV = "AZURE_OPENAI_API_KEY"
AZURE_OPENAI_ENDPOINT_ENV = "AZURE_OPENAI_ENDPOINT"
AZURE_OPENAI_DEPLOYMENT_ENV = "AZURE_OPENAI_DEPLOYMENT"
AZURE_OPENAI_API_VERSION_ENV = "AZURE_OPENAI_API_VERSION"


class AzureOpenAIEnvConfig(BaseModel):
    """Normalized Azure OpenAI connection settings.

    Holds no secret; the API key stays in the environment.

    Attributes:
        endpoint: Resource endpoint, ``https`` with no trailing slash.
        deployment: Deployment name, restricted to ``[A-Za-z0-9._-]``.
        api_version: Azure API version, passed through as given.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    endpoint: str
    deployment: str | None = None
    api_version: str | None = None

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint_url(cls, v: str) -> str:
        """Reject unsafe endpoints and strip trailing slashes."""
        endpoint = validate_endpoint(v)
        if endpoint is None:
            raise ValueError("endpoint must be an https URL that does not target internal hosts")
        return endpoint

    @field_validator("deployment")
    @classmethod
    def validate_deployment(cls, v: str | None) -> str | None:
        """Reject deployment names that are not safe URL path segments."""
        if v is None:
            return None
        deployment = sanitize_identifier(v, label="deployment")
        if deployment is None:
            raise ValueError("deployment may only contain letters, digits, '.', '-' and '_'")
        return deployment

    @property
    def uses_deployment_url(self) -> bool:
        """Whether requests go to the legacy deployment-scoped URL."""
        return self.api_version is not None and self.deployment is not None


def resolve_azure_openai_env(env: Mapping[str, str] | None = None) -> AzureOpenAIEnvConfig | None:
    """Build Azure OpenAI settings from the environment.

    Both ``AZURE_OPENAI_API_KEY`` and a safe ``AZURE_OPENAI_ENDPOINT`` are
    required; otherwise ``None`` is returned. A malformed
    ``AZURE_OPENAI_DEPLOYMENT`` is dropped without failing resolution, and
    ``AZURE_OPENAI_API_VERSION`` is passed through unchanged.

    Args:
        env: Environment snapshot. Defaults to ``os.environ`` read now.
    """
    has_key = read_env(AZURE_OPENAI_API_KEY_ENV, env) is not None
    raw_endpoint = read_env(AZURE_OPENAI_ENDPOINT_ENV, env)
    if not has_key or raw_endpoint is None:
        return None

    endpoint = validate_endpoint(raw_endpoint, label=AZURE_OPENAI_ENDPOINT_ENV)
    if endpoint is None:
        return None

    deployment = sanitize_identifier(
        read_env(AZURE_OPENAI_DEPLOYMENT_ENV, env), label=AZURE_OPENAI_DEPLOYMENT_ENV
    )
    api_version = read_env(AZURE_OPENAI_API_VERSION_ENV, env)

    logger.debug(
        "Resolved Azure OpenAI settings (deployment=%s, api_version=%s)", deployment, api_version
    )
    return AzureOpenAIEnvConfig(endpoint=endpoint, deployment=deployment, api_version=api_version)
