"""AI page copy generation with a guaranteed template fallback.

``ContentWriter.generate_content`` never raises: a missing configuration,
a network failure or an unusable response all end in ``fallback_content``.
``generate_all_page_content`` fans out one request per core page, service
and location, and ``apply_generated_content`` folds the per-entity copy
back into the website as ``custom-content`` sections, which the exporter
embeds into the dedicated service and location templates.

Examples
--------
>>> import asyncio
>>> from src.pipeline.site_generator.models import Website
>>> site = Website.from_dict({"businessName": "Acme", "industry": "plumbing"})
>>> contents = asyncio.run(generate_all_page_content(site))
>>> sorted(contents)
['about', 'contact', 'home', 'locations', 'services']
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import aiohttp
import markdown2
from aiolimiter import AsyncLimiter

from src.config import AI_DEFAULT_TARGET_WORDS, AI_PROMPT_TEMPLATE_PATH
from src.exceptions import ConfigurationError
from src.pipeline.site_generator.markup import industry_label
from src.pipeline.site_generator.models import (
    Location,
    Page,
    PageSection,
    Service,
    Website,
    resolve_page_location,
)
from src.pipeline.site_generator.schema import resolve_page_service

from .client import AIAPIClient
from .config import ContentWriterConfig
from .fallback import fallback_content
from .prompts import build_payload
from .templating import load_template

logger = logging.getLogger(__name__)

ALLOWED_TAGS = frozenset({"h2", "h3", "p", "ul", "ol", "li"})
HEADING_MAP = {"h1": "h2", "h4": "h3", "h5": "h3", "h6": "h3"}
TAG_PATTERN = re.compile(r"</?([a-zA-Z][a-zA-Z0-9]*)\b[^>]*>")
DROP_BLOCK_PATTERN = re.compile(
    r"<(script|style|iframe)\b[^>]*>.*?</\1\s*>", re.DOTALL | re.IGNORECASE
)
MARKDOWN_EXTRAS = ["tables", "fenced-code-blocks"]

# Target lengths per page kind.
TARGET_WORDS = {"home": 800, "about": 600, "contact": 400, "service": 800, "location": 700}

GENERATED_SECTION_PREFIX = "ai-"


@dataclass(frozen=True)
class ContentRequest:
    """One page copy request."""

    business_name: str
    industry: str
    service_name: str | None = None
    location_city: str | None = None
    location_state: str | None = None
    page_type: str = "home"
    target_words: int = AI_DEFAULT_TARGET_WORDS


def has_html_tags(text: str) -> bool:
    """Return True if ``text`` contains at least one HTML tag."""
    return TAG_PATTERN.search(text) is not None


def sanitize_html(html: str) -> str:
    """Reduce ``html`` to the ``h2``/``h3``/``p``/``ul``/``ol``/``li`` vocabulary.

    Script, style and iframe blocks are dropped with their content. Other
    headings are mapped onto ``h2`` or ``h3``; any remaining tag is removed
    while its text is kept. Attributes are never preserved.

    Examples
    --------
    >>> sanitize_html('<h1 class="x">Hi</h1><p>A <strong>b</strong></p><script>x()</script>')
    '<h2>Hi</h2><p>A b</p>'
    """
    html = DROP_BLOCK_PATTERN.sub("", html)

    def replace(match: re.Match[str]) -> str:
        tag = match.group(1).lower()
        tag = HEADING_MAP.get(tag, tag)
        if tag not in ALLOWED_TAGS:
            return ""
        closing = match.group(0).startswith("</")
        return f"</{tag}>" if closing else f"<{tag}>"

    return TAG_PATTERN.sub(replace, html).strip()


def to_page_html(content: str) -> str:
    """Convert AI output to restricted HTML, treating tag-free text as Markdown."""
    if not has_html_tags(content):
        content = str(markdown2.markdown(content, extras=MARKDOWN_EXTRAS))
    return sanitize_html(content)


class ContentWriter:
    r"""Generate page copy through the AI endpoint, falling back to templates.

    Parameters
    ----------
    config : ContentWriterConfig | None
        Endpoint settings. ``None`` disables AI calls entirely.
    client : AIAPIClient | None, optional
        Injected client; built from ``config`` when omitted.
    prompt_template : str | None, optional
        Prompt text with ``SYSTEM:``/``USER:`` markers; read from
        ``AI_PROMPT_TEMPLATE_PATH`` on first use when omitted.
    """

    def __init__(
        self,
        config: ContentWriterConfig | None,
        client: AIAPIClient | None = None,
        prompt_template: str | None = None,
    ) -> None:
        self.config = config
        self.client = client if client is not None else (AIAPIClient(config) if config else None)
        self._prompt_template = prompt_template
        self.rate_limiter: AsyncLimiter | None = None
        self.semaphore: asyncio.Semaphore | None = None
        if config is not None:
            self.rate_limiter = AsyncLimiter(config.target_rpm, 60)
            self.semaphore = asyncio.Semaphore(config.max_concurrent_requests)

    @property
    def enabled(self) -> bool:
        """Return True when AI calls will be attempted."""
        return self.config is not None and self.client is not None

    @property
    def prompt_template(self) -> str:
        if self._prompt_template is None:
            self._prompt_template = load_template(Path(AI_PROMPT_TEMPLATE_PATH))
        return self._prompt_template

    async def _request(
        self, session: aiohttp.ClientSession, payload: dict[str, Any]
    ) -> tuple[bool, str | None, dict[str, Any] | None]:
        client = self.client
        if client is None:
            raise ConfigurationError("AI client is not configured")
        if self.semaphore is None or self.rate_limiter is None:
            return await client.process_content(session, payload)
        async with self.semaphore:
            async with self.rate_limiter:
                return await client.process_content(session, payload)

    async def generate_content(
        self, session: aiohttp.ClientSession | None, request: ContentRequest
    ) -> str:
        """Return restricted HTML copy for ``request``; never raises.

        Parameters
        ----------
        session : aiohttp.ClientSession | None
            Open HTTP session. May be ``None`` when the writer is disabled.
        request : ContentRequest
            What to write.

        Returns
        -------
        str
            AI copy converted to the allowed tag vocabulary, or the template
            fallback.
        """
        if not self.enabled or session is None or self.config is None:
            logger.warning(
                "AI content writer not configured; using template copy for %s page",
                request.page_type,
            )
            return fallback_content(request)
        try:
            payload = build_payload(self.prompt_template, request, self.config)
            ok, content, raw = await self._request(session, payload)
        except Exception:
            logger.exception(
                "Failed to generate AI copy for %s page of %s",
                request.page_type,
                request.business_name,
            )
            return fallback_content(request)
        if not ok or not content:
            logger.warning(
                "AI copy unavailable for %s page (%s); using template copy",
                request.page_type,
                (raw or {}).get("error_type") or (raw or {}).get("status_code") or "unknown error",
            )
            return fallback_content(request)
        html = to_page_html(content)
        if not html:
            logger.warning(
                "AI copy for %s page was empty after cleanup; using template copy",
                request.page_type,
            )
            return fallback_content(request)
        return html


def _primary_place(website: Website) -> tuple[str | None, str | None]:
    if website.address is not None and website.address.city:
        return website.address.city, website.address.state or None
    if website.locations:
        first = website.locations[0]
        return first.city, first.state or None
    return None, None


async def generate_all_page_content(
    website: Website,
    writer: ContentWriter | None = None,
    session: aiohttp.ClientSession | None = None,
) -> dict[str, Any]:
    """Generate copy for the core pages, every service and every location.

    Parameters
    ----------
    website : Website
        Site whose facts drive the prompts.
    writer : ContentWriter | None, optional
        Writer to use; a disabled writer (template copy only) when omitted.
    session : aiohttp.ClientSession | None, optional
        Session to reuse. One is opened for the call when the writer is
        enabled and none is given.

    Returns
    -------
    dict[str, Any]
        ``{"home": html, "about": html, "contact": html,
        "services": {service_id: html}, "locations": {location_id: html}}``.
    """
    writer = writer or ContentWriter(None)
    name = website.display_name
    industry = industry_label(website.industry).lower()
    city, state = _primary_place(website)

    def core(page_type: str) -> ContentRequest:
        return ContentRequest(
            business_name=name,
            industry=industry,
            location_city=city,
            location_state=state,
            page_type=page_type,
            target_words=TARGET_WORDS[page_type],
        )

    requests: list[ContentRequest] = [core("home"), core("about"), core("contact")]
    requests += [
        ContentRequest(
            business_name=name,
            industry=industry,
            service_name=service.name,
            location_city=city,
            location_state=state,
            page_type="service",
            target_words=TARGET_WORDS["service"],
        )
        for service in website.services
    ]
    requests += [
        ContentRequest(
            business_name=name,
            industry=industry,
            location_city=location.city,
            location_state=location.state or None,
            page_type="location",
            target_words=TARGET_WORDS["location"],
        )
        for location in website.locations
    ]
    logger.info("Generating copy for %d pages of %s", len(requests), name)

    async def run(active: aiohttp.ClientSession | None) -> list[str]:
        return list(await asyncio.gather(*(writer.generate_content(active, r) for r in requests)))

    if session is not None or not writer.enabled:
        results = await run(session)
    else:
        async with aiohttp.ClientSession() as owned:
            results = await run(owned)

    home, about, contact, *rest = results
    service_count = len(website.services)
    return {
        "home": home,
        "about": about,
        "contact": contact,
        "services": {s.id: html for s, html in zip(website.services, rest[:service_count])},
        "locations": {
            loc.id: html for loc, html in zip(website.locations, rest[service_count:])
        },
    }


def _with_generated_section(page: Page, section_id: str, html: str) -> Page:
    kept = tuple(s for s in page.sections if s.id != section_id)
    order = max((s.order for s in kept), default=-1) + 1
    section = PageSection(id=section_id, type="custom-content", order=order, content={"html": html})
    return dataclasses.replace(page, sections=kept + (section,))


def _service_page_index(pages: list[Page], website: Website, service: Service) -> int | None:
    for index, page in enumerate(pages):
        if page.type == "service-single" and resolve_page_service(page, website) == service:
            return index
    return None


def _location_page_index(pages: list[Page], website: Website, location: Location) -> int | None:
    for index, page in enumerate(pages):
        if page.type == "location" and resolve_page_location(page, website) == location:
            return index
    return None


def apply_generated_content(website: Website, contents: dict[str, Any]) -> Website:
    """Return a copy of ``website`` with generated per-entity copy attached.

    Each service and location with generated HTML gets a ``custom-content``
    section on its ``service-single`` or ``location`` page; the page is
    created when the site has none. Re-applying replaces the previously
    generated section rather than adding another.
    """
    pages = list(website.pages)
    for service in website.services:
        html = contents.get("services", {}).get(service.id)
        if not html:
            continue
        section_id = f"{GENERATED_SECTION_PREFIX}service-{service.id}"
        index = _service_page_index(pages, website, service)
        if index is None:
            pages.append(
                _with_generated_section(
                    Page(
                        id=f"service-{service.id}",
                        title=service.name,
                        slug=f"services/{service.slug}",
                        type="service-single",
                        service_id=service.id,
                    ),
                    section_id,
                    html,
                )
            )
        else:
            pages[index] = _with_generated_section(pages[index], section_id, html)
    for location in website.locations:
        html = contents.get("locations", {}).get(location.id)
        if not html:
            continue
        section_id = f"{GENERATED_SECTION_PREFIX}location-{location.id}"
        index = _location_page_index(pages, website, location)
        if index is None:
            pages.append(
                _with_generated_section(
                    Page(
                        id=f"location-{location.id}",
                        title=location.display_name,
                        slug=f"locations/{location.slug}",
                        type="location",
                        location_id=location.id,
                    ),
                    section_id,
                    html,
                )
            )
        else:
            pages[index] = _with_generated_section(pages[index], section_id, html)
    return dataclasses.replace(website, pages=tuple(pages))


__all__ = [
    "ContentRequest",
    "ContentWriter",
    "apply_generated_content",
    "generate_all_page_content",
    "has_html_tags",
    "sanitize_html",
    "to_page_html",
]
