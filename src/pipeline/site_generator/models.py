"""Content model for the site generator.

This module holds the read-only aggregate that describes a small-business
website: brand colors, services, locations, pages (each an ordered list of
typed sections), blog posts and SEO settings. The classes carry no rendering
behavior; they are plain frozen dataclasses plus a handful of type-guards and
the parsing code that builds them from the camelCase JSON interchange format.

System Boundaries
-----------------
- Parsing validates structure and raises ``DataValidationError`` on malformed
  aggregates (wrong container types, invalid brand colors).
- Section payloads are kept raw; they are parsed lazily by
  ``sections.parse_section_content`` so a malformed block degrades to a
  visible affordance instead of failing the whole site.
- Nothing in the pipeline mutates these objects. Derived websites are built
  with ``dataclasses.replace``.

Examples
--------
>>> from src.pipeline.site_generator.models import Website, slugify
>>> slugify("Water Extraction & Drying")
'water-extraction-drying'
>>> site = Website.from_dict({"businessName": "Acme Plumbing", "industry": "plumbing"})
>>> site.display_name
'Acme Plumbing'
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from src.config import DEFAULT_BRAND_COLORS
from src.exceptions import DataValidationError

HEX_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")

PAGE_TYPES: tuple[str, ...] = (
    "home",
    "about",
    "services",
    "service-single",
    "contact",
    "blog",
    "blog-post",
    "location",
    "locations",
    "custom",
)

SECTION_TYPES: tuple[str, ...] = (
    "hero",
    "services-grid",
    "about-intro",
    "testimonials",
    "cta",
    "contact-form",
    "locations-list",
    "blog-list",
    "custom-content",
    "gallery",
    "faq",
    "trust-badges",
    "image",
    "video",
    "text-block",
    "features",
)

POST_STATUS_PUBLISHED = "published"
POST_STATUS_DRAFT = "draft"


def slugify(text: str) -> str:
    """Return a URL-safe slug for ``text``.

    Lowercases, drops characters that are neither word characters, whitespace
    nor hyphens, turns whitespace runs into a single hyphen and trims
    hyphens from both ends. Applying it twice yields the same result.

    Parameters
    ----------
    text : str
        Arbitrary display text.

    Returns
    -------
    str
        The slug, possibly empty.

    Examples
    --------
    >>> slugify("  AC Repair -- 24/7 ")
    'ac-repair-247'
    >>> slugify(slugify("Mold Remediation!")) == slugify("Mold Remediation!")
    True
    """
    slug = text.lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def _text(data: Mapping[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise DataValidationError(
            f"Field '{key}' must be text", context={"field": key}
        )
    return str(value)


def _optional_text(data: Mapping[str, Any], key: str) -> str | None:
    value = _text(data, key)
    return value or None


def _int(data: Mapping[str, Any], key: str, default: int = 0) -> int:
    value = data.get(key, default)
    if isinstance(value, bool):
        raise DataValidationError(
            f"Field '{key}' must be an integer", context={"field": key}
        )
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise DataValidationError(
            f"Field '{key}' must be an integer", context={"field": key}
        ) from exc


def _flag(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise DataValidationError(
            f"Field '{key}' must be true or false", context={"field": key}
        )
    return value


def _mapping(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise DataValidationError(
            f"Field '{key}' must be an object", context={"field": key}
        )
    return value


def _records(data: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, Mapping) for v in value):
        raise DataValidationError(
            f"Field '{key}' must be a list of objects", context={"field": key}
        )
    return value


def _strings(data: Mapping[str, Any], key: str) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    if not isinstance(value, list):
        raise DataValidationError(
            f"Field '{key}' must be a list of strings", context={"field": key}
        )
    return tuple(str(v) for v in value if v is not None)


@dataclass(frozen=True)
class BrandColors:
    """Five brand colors; every derived theme color is computed from these."""

    primary: str
    secondary: str
    accent: str
    background: str
    text: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> BrandColors:
        """Build colors from a mapping, filling gaps from ``DEFAULT_BRAND_COLORS``.

        Raises
        ------
        DataValidationError
            If a supplied color is not a 6-digit hex string.
        """
        merged = dict(DEFAULT_BRAND_COLORS)
        for key, value in (data or {}).items():
            if key in merged and value:
                merged[key] = value
        for key, value in merged.items():
            if not isinstance(value, str) or not HEX_COLOR_PATTERN.match(value):
                raise DataValidationError(
                    f"Color '{key}' must be a 6-digit hex value",
                    context={"field": key, "value": str(value)},
                )
        return cls(**merged)


@dataclass(frozen=True)
class SEOSettings:
    site_name: str = ""
    site_description: str = ""
    default_image: str | None = None
    social_links: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SEOSettings:
        links = _mapping(data, "socialLinks")
        return cls(
            site_name=_text(data, "siteName"),
            site_description=_text(data, "siteDescription"),
            default_image=_optional_text(data, "defaultImage"),
            social_links={k: str(v) for k, v in links.items() if v},
        )


@dataclass(frozen=True)
class PageSEO:
    title: str = ""
    description: str = ""
    keywords: tuple[str, ...] = ()
    og_image: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PageSEO:
        return cls(
            title=_text(data, "title"),
            description=_text(data, "description"),
            keywords=_strings(data, "keywords"),
            og_image=_optional_text(data, "ogImage"),
        )


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    slug: str
    description: str = ""
    icon: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Service:
        name = _text(data, "name")
        slug = _text(data, "slug") or slugify(name)
        return cls(
            id=_text(data, "id") or slug,
            name=name,
            slug=slug,
            description=_text(data, "description"),
            icon=_optional_text(data, "icon"),
        )


@dataclass(frozen=True)
class Location:
    id: str
    city: str
    slug: str
    state: str = ""
    description: str = ""

    @property
    def display_name(self) -> str:
        """Return ``"City, ST"`` or just the city when no state is known."""
        return f"{self.city}, {self.state}" if self.state else self.city

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Location:
        city = _text(data, "city")
        slug = _text(data, "slug") or slugify(city)
        return cls(
            id=_text(data, "id") or slug,
            city=city,
            slug=slug,
            state=_text(data, "state"),
            description=_text(data, "description"),
        )


@dataclass(frozen=True)
class BusinessAddress:
    street: str
    city: str
    state: str
    zip: str
    country: str = "US"

    @property
    def one_line(self) -> str:
        """Return the postal address on a single line."""
        return f"{self.street}, {self.city}, {self.state} {self.zip}".strip()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BusinessAddress:
        return cls(
            street=_text(data, "street"),
            city=_text(data, "city"),
            state=_text(data, "state"),
            zip=_text(data, "zip"),
            country=_text(data, "country", "US"),
        )


@dataclass(frozen=True)
class PageSection:
    """One typed, orderable content block within a page.

    ``content`` keeps the raw payload (a mapping or a JSON string) exactly as
    authored; the renderer turns it into a typed variant.
    """

    id: str
    type: str
    order: int = 0
    content: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PageSection:
        return cls(
            id=_text(data, "id"),
            type=_text(data, "type"),
            order=_int(data, "order"),
            content=data.get("content"),
        )


@dataclass(frozen=True)
class Page:
    id: str
    title: str
    slug: str
    type: str
    sections: tuple[PageSection, ...] = ()
    seo: PageSEO = field(default_factory=PageSEO)
    order: int = 0
    published: bool = True
    service_id: str | None = None
    location_id: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Page:
        section_key = "sections" if "sections" in data else "content"
        return cls(
            id=_text(data, "id"),
            title=_text(data, "title"),
            slug=_text(data, "slug").strip("/"),
            type=_text(data, "type", "custom"),
            sections=tuple(
                PageSection.from_dict(s) for s in _records(data, section_key)
            ),
            seo=PageSEO.from_dict(_mapping(data, "seo")),
            order=_int(data, "order"),
            published=_flag(data, "isPublished", True),
            service_id=_optional_text(data, "serviceId"),
            location_id=_optional_text(data, "locationId"),
        )


@dataclass(frozen=True)
class BlogPost:
    id: str
    title: str
    slug: str
    content: str = ""
    excerpt: str = ""
    author: str = ""
    published_at: str | None = None
    updated_at: str | None = None
    status: str = POST_STATUS_DRAFT
    tags: tuple[str, ...] = ()
    seo: PageSEO = field(default_factory=PageSEO)
    featured_image: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BlogPost:
        title = _text(data, "title")
        slug = _text(data, "slug") or slugify(title)
        return cls(
            id=_text(data, "id") or slug,
            title=title,
            slug=slug,
            content=_text(data, "content"),
            excerpt=_text(data, "excerpt"),
            author=_text(data, "author"),
            published_at=_optional_text(data, "publishedAt"),
            updated_at=_optional_text(data, "updatedAt"),
            status=_text(data, "status", POST_STATUS_DRAFT),
            tags=_strings(data, "tags"),
            seo=PageSEO.from_dict(_mapping(data, "seo")),
            featured_image=_optional_text(data, "featuredImage"),
        )


@dataclass(frozen=True)
class Website:
    """Root aggregate describing one business website."""

    id: str
    name: str
    industry: str = ""
    business_name: str = ""
    phone: str | None = None
    email: str | None = None
    logo: str | None = None
    address: BusinessAddress | None = None
    colors: BrandColors = field(
        default_factory=lambda: BrandColors.from_dict(None)
    )
    seo_settings: SEOSettings = field(default_factory=SEOSettings)
    keywords: tuple[str, ...] = ()
    services: tuple[Service, ...] = ()
    locations: tuple[Location, ...] = ()
    pages: tuple[Page, ...] = ()
    blog_posts: tuple[BlogPost, ...] = ()
    base_url: str = ""
    updated_at: str | None = None

    @property
    def display_name(self) -> str:
        """Return the business name, falling back to the website name."""
        return self.business_name or self.name

    def find_service(self, service_id: str | None) -> Service | None:
        """Return the service with ``service_id`` or ``None``."""
        for service in self.services:
            if service.id == service_id:
                return service
        return None

    def find_location(self, location_id: str | None) -> Location | None:
        """Return the location with ``location_id`` or ``None``."""
        for location in self.locations:
            if location.id == location_id:
                return location
        return None

    def find_page(self, page_type: str) -> Page | None:
        """Return the first page of ``page_type`` in navigation order."""
        candidates = [p for p in self.pages if p.type == page_type]
        if not candidates:
            return None
        return min(candidates, key=lambda p: p.order)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Website:
        """Build a website from its JSON interchange representation.

        Parameters
        ----------
        data : Mapping[str, Any]
            Decoded JSON object using the camelCase field names of the
            interchange format (``businessName``, ``blogPosts``, ...).

        Returns
        -------
        Website
            The parsed aggregate.

        Raises
        ------
        DataValidationError
            If the aggregate is structurally malformed.
        """
        if not isinstance(data, Mapping):
            raise DataValidationError("Website description must be a JSON object")
        address_data = data.get("businessAddress")
        address = (
            BusinessAddress.from_dict(address_data)
            if isinstance(address_data, Mapping) and address_data.get("street")
            else None
        )
        name = _text(data, "name")
        business_name = _text(data, "businessName")
        return cls(
            id=_text(data, "id") or slugify(business_name or name),
            name=name or business_name,
            industry=_text(data, "industry"),
            business_name=business_name,
            phone=_optional_text(data, "contactPhone"),
            email=_optional_text(data, "contactEmail"),
            logo=_optional_text(data, "logoUrl"),
            address=address,
            colors=BrandColors.from_dict(_mapping(data, "colors")),
            seo_settings=SEOSettings.from_dict(_mapping(data, "seoSettings")),
            keywords=_strings(data, "keywords"),
            services=tuple(Service.from_dict(s) for s in _records(data, "services")),
            locations=tuple(
                Location.from_dict(loc) for loc in _records(data, "locations")
            ),
            pages=tuple(Page.from_dict(p) for p in _records(data, "pages")),
            blog_posts=tuple(
                BlogPost.from_dict(b) for b in _records(data, "blogPosts")
            ),
            base_url=_text(data, "netlifyUrl").rstrip("/"),
            updated_at=_optional_text(data, "updatedAt"),
        )


def is_published(post: BlogPost) -> bool:
    """Return True if ``post`` is published and may produce output."""
    return post.status == POST_STATUS_PUBLISHED


def published_posts(website: Website) -> list[BlogPost]:
    """Return published posts, newest first; ties keep their authored order."""
    posts = [p for p in website.blog_posts if is_published(p)]
    return sorted(posts, key=lambda p: p.published_at or "", reverse=True)


def is_home_page(page: Page) -> bool:
    """Return True for the home page (type ``home`` or an empty slug)."""
    return page.type == "home" or page.slug == ""


def is_known_section_type(tag: str) -> bool:
    """Return True if ``tag`` names one of the declared section kinds."""
    return tag in SECTION_TYPES


def resolve_page_location(page: Page, website: Website) -> Location | None:
    """Return the location a ``location`` page describes.

    A page with a ``location_id`` binds to that location only; otherwise the
    last slug segment must equal a location slug.
    """
    if page.location_id is not None:
        return website.find_location(page.location_id)
    last_segment = page.slug.rsplit("/", 1)[-1]
    for location in website.locations:
        if location.slug == last_segment:
            return location
    return None


__all__ = [
    "BlogPost",
    "BrandColors",
    "BusinessAddress",
    "Location",
    "PAGE_TYPES",
    "Page",
    "PageSEO",
    "PageSection",
    "SECTION_TYPES",
    "SEOSettings",
    "Service",
    "Website",
    "is_home_page",
    "is_known_section_type",
    "is_published",
    "published_posts",
    "resolve_page_location",
    "slugify",
]
