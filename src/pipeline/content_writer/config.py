"""Configuration for the AI content writer.

``ContentWriterConfig`` is a plain value: callers construct it explicitly
(tests do) or load it once from the process environment with
``ContentWriterConfig.from_env``. Nothing else in the pipeline reads
environment variables.

Examples
--------
>>> cfg = ContentWriterConfig(api_key="k", endpoint_base="https://res.openai.azure.com")
>>> cfg.uses_azure
True
>>> cfg.chat_endpoint.endswith("/chat/completions?api-version=2024-05-01-preview")
True
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

import src.config as _project_config
from src.config import (
    AI_DEFAULT_TEMPERATURE,
    DEFAULT_API_VERSION,
    DEFAULT_DEPLOYMENT_NAME,
    DEFAULT_OPENAI_ENDPOINT,
    DEFAULT_OPENAI_MODEL,
)
from src.exceptions import ConfigurationError


@dataclass(frozen=True)
class ContentWriterConfig:
    r"""Connection, concurrency and retry settings for the AI endpoint.

    Attributes
    ----------
    api_key : str
        Key for OpenAI or Azure OpenAI.
    endpoint_base : str | None
        Azure resource base URI. When set, requests go to the Azure
        deployment endpoint; otherwise to ``openai_endpoint``.
    deployment_name : str
        Azure deployment name.
    api_version : str
        Azure API version.
    openai_endpoint : str
        Chat completions URI used when no Azure base is configured.
    openai_model : str
        Model name sent in OpenAI payloads.
    max_concurrent_requests : int
        Upper bound on in-flight requests.
    target_rpm : int
        Requests-per-minute budget for the rate limiter.
    max_retries : int
        Retries after the first attempt for transient failures.
    backoff_factor : float
        Base of the exponential backoff between retries.
    retry_sleep_on_429 : int
        Seconds to sleep per attempt after an HTTP 429.
    temperature : float
        Sampling temperature.
    request_timeout : int
        Per-request timeout in seconds.
    """

    api_key: str
    endpoint_base: str | None = None
    deployment_name: str = DEFAULT_DEPLOYMENT_NAME
    api_version: str = DEFAULT_API_VERSION
    openai_endpoint: str = DEFAULT_OPENAI_ENDPOINT
    openai_model: str = DEFAULT_OPENAI_MODEL
    max_concurrent_requests: int = 8
    target_rpm: int = 600
    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_sleep_on_429: int = 60
    temperature: float = AI_DEFAULT_TEMPERATURE
    request_timeout: int = 300

    @property
    def uses_azure(self) -> bool:
        """Return True when requests target an Azure OpenAI deployment."""
        return bool(self.endpoint_base)

    @property
    def chat_endpoint(self) -> str:
        """Return the full chat completions URI."""
        if self.endpoint_base:
            return (
                f"{self.endpoint_base.rstrip('/')}/openai/deployments/"
                f"{self.deployment_name}/chat/completions?api-version={self.api_version}"
            )
        return self.openai_endpoint

    def auth_headers(self) -> dict[str, str]:
        """Return request headers, using ``api-key`` for Azure and a bearer token otherwise."""
        headers = {"Content-Type": "application/json"}
        if self.uses_azure:
            headers["api-key"] = self.api_key
        else:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    @classmethod
    def from_env(cls) -> ContentWriterConfig:
        """Load the configuration from ``PROJECT_ROOT/.env`` and the environment.

        Returns
        -------
        ContentWriterConfig
            The loaded configuration.

        Raises
        ------
        ConfigurationError
            If no API key is set, if a numeric variable cannot be parsed, or
            if only an Azure key is set without ``AZURE_ENDPOINT_BASE``.

        Examples
        --------
        >>> import os
        >>> os.environ["API_KEY"] = "demo"
        >>> ContentWriterConfig.from_env().api_key  # doctest: +SKIP
        'demo'
        """
        env_path = Path(_project_config.PROJECT_ROOT) / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=True)
        generic_key = os.getenv("API_KEY")
        azure_key = os.getenv("AZURE_API_KEY")
        api_key = generic_key or azure_key
        if not api_key:
            raise ConfigurationError(
                "Missing API key for OpenAI/Azure OpenAI configuration",
                context={"variables": "API_KEY, AZURE_API_KEY"},
            )
        endpoint_base = os.getenv("AZURE_ENDPOINT_BASE") or None
        if azure_key and not generic_key and not endpoint_base:
            raise ConfigurationError(
                "Missing AZURE_ENDPOINT_BASE for Azure OpenAI configuration"
            )
        try:
            return cls(
                api_key=api_key,
                endpoint_base=endpoint_base,
                deployment_name=os.getenv("GPT4O_DEPLOYMENT_NAME", DEFAULT_DEPLOYMENT_NAME),
                api_version=os.getenv("AZURE_API_VERSION", DEFAULT_API_VERSION),
                openai_endpoint=os.getenv("OPENAI_ENDPOINT", DEFAULT_OPENAI_ENDPOINT),
                openai_model=os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL),
                max_concurrent_requests=int(os.getenv("MAX_CONCURRENT_REQUESTS", 8)),
                target_rpm=int(os.getenv("TARGET_RPM", 600)),
                max_retries=int(os.getenv("MAX_RETRIES", 3)),
                backoff_factor=float(os.getenv("BACKOFF_FACTOR", 2.0)),
                retry_sleep_on_429=int(os.getenv("RETRY_SLEEP_ON_429", 60)),
                temperature=float(os.getenv("TEMPERATURE", AI_DEFAULT_TEMPERATURE)),
                request_timeout=int(os.getenv("REQUEST_TIMEOUT", 300)),
            )
        except ValueError as exc:
            raise ConfigurationError(
                f"Invalid numeric AI configuration value: {exc}"
            ) from exc


__all__ = ["ContentWriterConfig"]
