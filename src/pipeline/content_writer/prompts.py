"""Prompt construction for page copy requests.

The prompt file holds a ``SYSTEM:`` block followed by a ``USER:`` block.
``build_payload`` fills the placeholders from a ``ContentRequest`` and
splits the two blocks into chat messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from src.config import AI_PAYLOAD_MAX_TOKENS, DEFAULT_CITY

from .config import ContentWriterConfig
from .templating import render_template

if TYPE_CHECKING:
    from .writer import ContentRequest

SYSTEM_MARKER = "SYSTEM:"
USER_MARKER = "USER:"


def request_location(request: ContentRequest) -> str:
    """Return ``"City, ST"``, the city alone, or the generic area phrase."""
    if request.location_city and request.location_state:
        return f"{request.location_city}, {request.location_state}"
    return request.location_city or DEFAULT_CITY


def prompt_context(request: ContentRequest) -> dict[str, str]:
    """Return the placeholder values for ``request``."""
    service_line = (
        f"Focus on the {request.service_name} service." if request.service_name else ""
    )
    return {
        "page_type": request.page_type,
        "business_name": request.business_name,
        "industry": request.industry or "local service",
        "location": request_location(request),
        "service_line": service_line,
        "target_words": str(request.target_words),
    }


def split_prompt(prompt: str) -> tuple[str, str]:
    """Split a filled prompt into its system and user parts.

    Raises
    ------
    ValueError
        If either marker is missing or the user block precedes the system block.
    """
    system_start = prompt.find(SYSTEM_MARKER)
    user_start = prompt.find(USER_MARKER)
    if system_start == -1 or user_start == -1 or user_start < system_start:
        raise ValueError("Prompt template must contain 'SYSTEM:' and 'USER:' markers.")
    system = prompt[system_start + len(SYSTEM_MARKER) : user_start].strip()
    user = prompt[user_start + len(USER_MARKER) :].strip()
    return system, user


def build_payload(
    template: str, request: ContentRequest, config: ContentWriterConfig
) -> dict[str, Any]:
    """Return the chat completions payload for ``request``.

    OpenAI payloads name the model; Azure deployments imply it.
    """
    system, user = split_prompt(render_template(template, prompt_context(request)))
    payload: dict[str, Any] = {
        "messages": [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ],
        "max_tokens": AI_PAYLOAD_MAX_TOKENS,
        "temperature": config.temperature,
    }
    if not config.uses_azure:
        payload["model"] = config.openai_model
    return payload


__all__ = ["build_payload", "prompt_context", "request_location", "split_prompt"]
