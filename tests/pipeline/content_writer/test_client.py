"""Client-related tests for the AI content writer.

Exercises retries, rate limiting and error mapping of ``AIAPIClient`` by
injecting fake sessions/responses and controlling sleeps.
"""

import asyncio
import json

import aiohttp
import pytest

from src.pipeline.content_writer.client import AIAPIClient, strip_code_fences
from src.pipeline.content_writer.config import ContentWriterConfig


class FakeResponse:
    def __init__(self, status: int, text: str):
        self.status = status
        self._text = text

    async def text(self):
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    def __init__(self, responses):
        self._responses = iter(responses)
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        try:
            return next(self._responses)
        except StopIteration:
            return FakeResponse(500, "{}")


def _ok(content: str) -> FakeResponse:
    return FakeResponse(200, json.dumps({"choices": [{"message": {"content": content}}]}))


@pytest.fixture
def slept(monkeypatch):
    calls = []

    async def fake_sleep(t):
        calls.append(t)

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)
    return calls


def make_client(**overrides) -> AIAPIClient:
    settings = {"api_key": "test", "max_retries": 1, "retry_sleep_on_429": 1, "backoff_factor": 2.0}
    settings.update(overrides)
    return AIAPIClient(ContentWriterConfig(**settings))


@pytest.mark.asyncio
async def test_success_strips_fences_and_sends_bearer_token(slept):
    session = FakeSession([_ok("```html\n<h2>Hi</h2>\n```")])
    ok, content, raw = await make_client().process_content(session, {"messages": []})
    assert ok is True and content == "<h2>Hi</h2>"
    assert raw["choices"][0]["message"]["content"].startswith("```")
    url, kwargs = session.calls[0]
    assert url == "https://api.openai.com/v1/chat/completions"
    assert kwargs["headers"]["Authorization"] == "Bearer test"
    assert slept == []


@pytest.mark.asyncio
async def test_azure_requests_use_deployment_url_and_api_key_header(slept):
    client = make_client(endpoint_base="https://res.openai.azure.com/", deployment_name="dep")
    session = FakeSession([_ok("x")])
    await client.process_content(session, {})
    url, kwargs = session.calls[0]
    assert url.startswith("https://res.openai.azure.com/openai/deployments/dep/chat/completions?api-version=")
    assert kwargs["headers"]["api-key"] == "test"
    assert "Authorization" not in kwargs["headers"]


@pytest.mark.asyncio
async def test_rate_limit_429_sleeps_then_succeeds(slept):
    session = FakeSession([FakeResponse(429, "Too many"), _ok("OK")])
    ok, content, _ = await make_client().process_content(session, {})
    assert ok is True and content == "OK"
    assert slept == [1]


@pytest.mark.asyncio
async def test_rate_limit_exhausted_reports_status(slept):
    session = FakeSession([FakeResponse(429, "slow down"), FakeResponse(429, "slow down")])
    ok, content, err = await make_client().process_content(session, {})
    assert ok is False and content is None
    assert err == {"error_type": "HTTPError", "status_code": 429, "error_body": "slow down"}


@pytest.mark.asyncio
async def test_server_error_backs_off_then_fails(slept):
    session = FakeSession([FakeResponse(500, "ERR"), FakeResponse(503, "ERR")])
    ok, _, err = await make_client().process_content(session, {})
    assert ok is False
    assert err["status_code"] == 503
    assert slept == [1.0]


@pytest.mark.asyncio
async def test_invalid_json_is_not_retried(slept):
    session = FakeSession([FakeResponse(200, "<html>")])
    ok, _, err = await make_client().process_content(session, {})
    assert ok is False
    assert err["error_type"] == "InvalidResponse"
    assert len(session.calls) == 1


@pytest.mark.asyncio
async def test_empty_choice_is_retried(slept):
    session = FakeSession([FakeResponse(200, json.dumps({"choices": []})), _ok("second")])
    ok, content, _ = await make_client().process_content(session, {})
    assert ok is True and content == "second"


@pytest.mark.asyncio
async def test_client_error_is_mapped(slept):
    class ErrorSession:
        def post(self, *args, **kwargs):
            raise aiohttp.ClientError("network down")

    ok, content, err = await make_client(max_retries=0).process_content(ErrorSession(), {})
    assert ok is False and content is None
    assert err == {"error_type": "ClientError", "message": "network down"}


@pytest.mark.asyncio
async def test_timeout_is_mapped(slept):
    class SlowSession:
        def post(self, *args, **kwargs):
            raise asyncio.TimeoutError()

    ok, _, err = await make_client().process_content(SlowSession(), {})
    assert ok is False and err == {"error_type": "TimeoutError"}
    assert slept == [1.0]


def test_strip_code_fences_variants():
    assert strip_code_fences("<p>x</p>") == "<p>x</p>"
    assert strip_code_fences("```\nplain\n```") == "plain"
    assert strip_code_fences("```markdown\n## Hi\n```") == "## Hi"
