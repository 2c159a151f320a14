"""Tests for loading and deriving the AI content writer configuration."""

import pytest

from src.exceptions import ConfigurationError
from src.pipeline.content_writer.config import ContentWriterConfig

ENV_VARS = (
    "API_KEY",
    "AZURE_API_KEY",
    "AZURE_ENDPOINT_BASE",
    "GPT4O_DEPLOYMENT_NAME",
    "AZURE_API_VERSION",
    "OPENAI_ENDPOINT",
    "OPENAI_MODEL",
    "MAX_CONCURRENT_REQUESTS",
    "TARGET_RPM",
    "MAX_RETRIES",
    "BACKOFF_FACTOR",
    "RETRY_SLEEP_ON_429",
    "TEMPERATURE",
    "REQUEST_TIMEOUT",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("src.config.PROJECT_ROOT", tmp_path)
    return tmp_path


def test_explicit_openai_config():
    cfg = ContentWriterConfig(api_key="k")
    assert cfg.uses_azure is False
    assert cfg.chat_endpoint == "https://api.openai.com/v1/chat/completions"
    assert cfg.auth_headers() == {"Content-Type": "application/json", "Authorization": "Bearer k"}


def test_explicit_azure_config():
    cfg = ContentWriterConfig(api_key="k", endpoint_base="https://res.test/", deployment_name="gpt", api_version="v1")
    assert cfg.chat_endpoint == "https://res.test/openai/deployments/gpt/chat/completions?api-version=v1"
    assert cfg.auth_headers()["api-key"] == "k"


def test_from_env_reads_generic_key_and_numbers(clean_env, monkeypatch):
    monkeypatch.setenv("API_KEY", "abc")
    monkeypatch.setenv("MAX_RETRIES", "5")
    monkeypatch.setenv("TEMPERATURE", "0.2")
    cfg = ContentWriterConfig.from_env()
    assert cfg.api_key == "abc"
    assert cfg.max_retries == 5
    assert cfg.temperature == 0.2
    assert cfg.uses_azure is False


def test_from_env_requires_a_key(clean_env):
    with pytest.raises(ConfigurationError) as exc:
        ContentWriterConfig.from_env()
    assert exc.value.code == "CONFIGURATION_ERROR"


def test_from_env_azure_key_needs_endpoint(clean_env, monkeypatch):
    monkeypatch.setenv("AZURE_API_KEY", "az")
    with pytest.raises(ConfigurationError):
        ContentWriterConfig.from_env()
    monkeypatch.setenv("AZURE_ENDPOINT_BASE", "https://res.test")
    cfg = ContentWriterConfig.from_env()
    assert cfg.uses_azure is True
    assert cfg.api_key == "az"


def test_from_env_rejects_bad_numbers(clean_env, monkeypatch):
    monkeypatch.setenv("API_KEY", "abc")
    monkeypatch.setenv("TARGET_RPM", "lots")
    with pytest.raises(ConfigurationError):
        ContentWriterConfig.from_env()


def test_from_env_loads_project_dotenv(clean_env, monkeypatch):
    # registered so teardown removes the value loaded from the file
    monkeypatch.setenv("API_KEY", "")
    (clean_env / ".env").write_text("API_KEY=from-file\nOPENAI_MODEL=tiny\n", encoding="utf-8")
    monkeypatch.setenv("OPENAI_MODEL", "")
    cfg = ContentWriterConfig.from_env()
    assert cfg.api_key == "from-file"
    assert cfg.openai_model == "tiny"
