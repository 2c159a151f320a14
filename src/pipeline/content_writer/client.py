"""Async HTTP client for the chat completions endpoint.

``AIAPIClient`` is the only place that talks to the AI service. It never
raises: every outcome is returned as an ``(ok, content, raw)`` tuple so the
writer can decide whether to fall back to template copy.

Examples
--------
>>> import aiohttp
>>> from src.pipeline.content_writer.config import ContentWriterConfig
>>> client = AIAPIClient(ContentWriterConfig(api_key="secret"))
>>> async def main():
...     async with aiohttp.ClientSession() as session:
...         return await client.process_content(session, {"messages": []})
>>> # import asyncio; asyncio.run(main())
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from typing import Any

import aiohttp

from .config import ContentWriterConfig

logger = logging.getLogger(__name__)

FENCE_PATTERN = re.compile(
    r"^\s*```(?:[a-zA-Z0-9]+\s*\n)?(.*?)\n?```\s*$", re.DOTALL | re.IGNORECASE
)


def strip_code_fences(content: str) -> str:
    """Remove a surrounding Markdown code fence from ``content``.

    Examples
    --------
    >>> strip_code_fences("```html\\n<p>Hi</p>\\n```")
    '<p>Hi</p>'
    """
    cleaned = content.strip()
    match = FENCE_PATTERN.match(cleaned)
    if match:
        return match.group(1).strip()
    if cleaned.startswith("```"):
        return cleaned.strip("`\n ")
    return cleaned


def _first_choice_content(data: dict[str, Any]) -> str:
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message")
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    return content if isinstance(content, str) else ""


class AIAPIClient:
    r"""Send chat completion payloads with retries and backoff.

    Parameters
    ----------
    config : ContentWriterConfig
        Endpoint, credentials and retry settings.

    Notes
    -----
    Rate limiting and concurrency bounds are applied by the caller
    (``ContentWriter``); this class only handles a single request's retries.
    """

    def __init__(self, config: ContentWriterConfig) -> None:
        self.config = config

    async def _backoff(self, attempt: int) -> None:
        await asyncio.sleep(self.config.backoff_factor**attempt)

    async def process_content(
        self, session: aiohttp.ClientSession, payload: dict[str, Any]
    ) -> tuple[bool, str | None, dict[str, Any] | None]:
        r"""POST ``payload`` and return the first choice's message content.

        Parameters
        ----------
        session : aiohttp.ClientSession
            Open session; it is used but not closed.
        payload : dict[str, Any]
            JSON body for the chat completions endpoint.

        Returns
        -------
        tuple[bool, str | None, dict[str, Any] | None]
            ``(True, content, raw_json)`` on success. On failure ``ok`` is
            False, ``content`` is None and ``raw`` describes the error with an
            ``error_type`` key (``ConfigurationError``, ``ClientError``,
            ``TimeoutError``, ``HTTPError``, ``InvalidResponse`` or
            ``Exception``).
        """
        endpoint = self.config.chat_endpoint
        if not endpoint:
            return (
                False,
                None,
                {"error_type": "ConfigurationError", "message": "AI endpoint not set."},
            )
        headers = self.config.auth_headers()
        max_retries = self.config.max_retries

        for attempt in range(max_retries + 1):
            try:
                async with session.post(
                    endpoint,
                    json=payload,
                    headers=headers,
                    timeout=aiohttp.ClientTimeout(total=self.config.request_timeout),
                ) as response:
                    status = response.status
                    text = await response.text()

                    if status == 200:
                        try:
                            data = json.loads(text)
                        except json.JSONDecodeError:
                            return (
                                False,
                                None,
                                {"error_type": "InvalidResponse", "raw_response_text": text},
                            )
                        content = _first_choice_content(data) if isinstance(data, dict) else ""
                        if not content:
                            if attempt < max_retries:
                                await self._backoff(attempt)
                                continue
                            return False, None, {"error_type": "InvalidResponse", "response": data}
                        return True, strip_code_fences(content), data

                    if status == 429:
                        logger.warning(
                            "Rate limited by AI endpoint (attempt %d/%d)",
                            attempt + 1,
                            max_retries + 1,
                        )
                        if attempt < max_retries:
                            await asyncio.sleep(self.config.retry_sleep_on_429 * (attempt + 1))
                            continue
                        return False, None, {"error_type": "HTTPError", "status_code": status, "error_body": text}

                    if attempt < max_retries:
                        await self._backoff(attempt)
                        continue
                    return False, None, {"error_type": "HTTPError", "status_code": status, "error_body": text}

            except aiohttp.ClientError as exc:
                if attempt < max_retries:
                    await self._backoff(attempt)
                    continue
                return False, None, {"error_type": "ClientError", "message": str(exc)}
            except (asyncio.TimeoutError, TimeoutError):
                if attempt < max_retries:
                    await self._backoff(attempt)
                    continue
                return False, None, {"error_type": "TimeoutError"}
            except Exception as exc:
                if attempt < max_retries:
                    await self._backoff(attempt)
                    continue
                return False, None, {"error_type": "Exception", "message": str(exc)}

        return False, None, None


__all__ = ["AIAPIClient", "strip_code_fences"]
