"""The content_writer package generates long-form page copy with an AI service.

This package is the optional enrichment stage in front of the site
generator. It builds prompts from business facts, calls a chat completions
endpoint (OpenAI or Azure OpenAI) through a rate-limited async client, and
converts the answer into a restricted HTML vocabulary. Whenever the service
is unconfigured or fails, template copy is returned instead, so enrichment
can never stop a site from being generated.

Modules exported
----------------
ContentWriterConfig
    Explicit endpoint, concurrency and retry settings; ``from_env`` loads
    them from ``.env`` and the process environment.
AIAPIClient
    Retrying aiohttp client returning ``(ok, content, raw)`` tuples.
ContentRequest, ContentWriter
    One copy request and the writer that fulfils it.
generate_all_page_content, apply_generated_content
    Whole-site generation and folding the results back into a ``Website``.
fallback_content
    Template copy keyed by page type.

Examples
--------
>>> import asyncio
>>> from src.pipeline.content_writer import ContentWriter, generate_all_page_content
>>> from src.pipeline.site_generator.models import Website
>>> site = Website.from_dict({"businessName": "Acme", "industry": "hvac"})
>>> contents = asyncio.run(generate_all_page_content(site, ContentWriter(None)))
>>> contents["home"].lstrip().startswith("<h2>Welcome to Acme</h2>")
True
"""

from __future__ import annotations

from .client import AIAPIClient
from .config import ContentWriterConfig
from .fallback import fallback_content
from .writer import (
    ContentRequest,
    ContentWriter,
    apply_generated_content,
    generate_all_page_content,
)

__all__ = [
    "AIAPIClient",
    "ContentRequest",
    "ContentWriter",
    "ContentWriterConfig",
    "apply_generated_content",
    "fallback_content",
    "generate_all_page_content",
]
