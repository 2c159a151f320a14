"""Typed section content variants.

Each declared section kind has one frozen dataclass describing its payload,
with field-level fallbacks applied while parsing. Two extra variants close the
union: ``UnknownContent`` for tags outside the declared set and
``InvalidContent`` for payloads that fail to parse or type-check.

``parse_section_content`` never raises; malformed payloads become
``InvalidContent`` so that the renderer can show the raw text for editing.
"""

from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union

from src.config import PLACEHOLDER_IMAGE_URL
from src.exceptions import DataValidationError

from .models import PageSection, is_known_section_type

logger = logging.getLogger(__name__)

YOUTUBE_ID_PATTERN = re.compile(
    r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&?/]+)"
)
VIMEO_ID_PATTERN = re.compile(r"vimeo\.com/(?:video/)?(\d+)")


def _text(data: Mapping[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    if value is None or value == "":
        return default
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise DataValidationError(f"'{key}' must be text", context={"field": key})
    return str(value)


def _optional(data: Mapping[str, Any], key: str) -> str | None:
    return _text(data, key) or None


def _items(data: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, Mapping) for v in value):
        raise DataValidationError(
            f"'{key}' must be a list of objects", context={"field": key}
        )
    return value


@dataclass(frozen=True)
class HeroContent:
    headline: str = "Welcome"
    subheadline: str = ""
    show_cta: bool = True
    cta_text: str = "Get Started"
    cta_link: str = "/contact"
    secondary_cta_text: str | None = None
    secondary_cta_link: str | None = None
    phone: str | None = None
    background_image: str | None = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> HeroContent:
        return cls(
            headline=_text(data, "headline", "Welcome"),
            subheadline=_text(data, "subheadline"),
            show_cta=data.get("showCta") is not False,
            cta_text=_text(data, "ctaText", "Get Started"),
            cta_link=_text(data, "ctaLink", "/contact"),
            secondary_cta_text=_optional(data, "secondaryCtaText"),
            secondary_cta_link=_optional(data, "secondaryCtaLink"),
            phone=_optional(data, "phone"),
            background_image=_optional(data, "backgroundImage"),
        )


@dataclass(frozen=True)
class ServiceCard:
    name: str
    description: str = ""
    icon: str = "✓"
    link: str | None = None


@dataclass(frozen=True)
class ServicesGridContent:
    title: str = "Our Services"
    subtitle: str | None = None
    services: tuple[ServiceCard, ...] = ()

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> ServicesGridContent:
        return cls(
            title=_text(data, "title", "Our Services"),
            subtitle=_optional(data, "subtitle"),
            services=tuple(
                ServiceCard(
                    name=_text(item, "name"),
                    description=_text(item, "description"),
                    icon=_text(item, "icon", "✓"),
                    link=_optional(item, "link"),
                )
                for item in _items(data, "services")
            ),
        )


@dataclass(frozen=True)
class FeatureItem:
    text: str
    icon: str = "✓"


@dataclass(frozen=True)
class AboutIntroContent:
    title: str = "About Us"
    description: str = ""
    features: tuple[FeatureItem, ...] = ()
    image: str | None = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> AboutIntroContent:
        return cls(
            title=_text(data, "title", "About Us"),
            description=_text(data, "description"),
            features=tuple(
                FeatureItem(text=_text(item, "text"), icon=_text(item, "icon", "✓"))
                for item in _items(data, "features")
            ),
            image=_optional(data, "image"),
        )


@dataclass(frozen=True)
class Testimonial:
    name: str
    quote: str
    company: str | None = None
    rating: int | None = None
    image: str | None = None


@dataclass(frozen=True)
class TestimonialsContent:
    title: str = "What Our Customers Say"
    subtitle: str | None = None
    testimonials: tuple[Testimonial, ...] = ()

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> TestimonialsContent:
        testimonials = []
        for item in _items(data, "testimonials"):
            rating = item.get("rating")
            if rating is not None and (
                isinstance(rating, bool)
                or not isinstance(rating, (int, float))
                or not math.isfinite(rating)
            ):
                raise DataValidationError(
                    "'rating' must be a number", context={"field": "rating"}
                )
            testimonials.append(
                Testimonial(
                    name=_text(item, "name", "Customer"),
                    quote=_text(item, "quote"),
                    company=_optional(item, "company"),
                    rating=max(0, min(5, int(rating))) if rating is not None else None,
                    image=_optional(item, "image"),
                )
            )
        return cls(
            title=_text(data, "title", "What Our Customers Say"),
            subtitle=_optional(data, "subtitle"),
            testimonials=tuple(testimonials),
        )


@dataclass(frozen=True)
class CtaContent:
    title: str = "Ready to Get Started?"
    subtitle: str = ""
    cta_text: str = "Get Started"
    cta_link: str = "/contact"
    secondary_cta_text: str | None = None
    secondary_cta_link: str | None = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> CtaContent:
        return cls(
            title=_text(data, "title", "Ready to Get Started?"),
            subtitle=_text(data, "subtitle"),
            cta_text=_text(data, "ctaText", "Get Started"),
            cta_link=_text(data, "ctaLink", "/contact"),
            secondary_cta_text=_optional(data, "secondaryCtaText"),
            secondary_cta_link=_optional(data, "secondaryCtaLink"),
        )


@dataclass(frozen=True)
class ContactFormContent:
    title: str = "Contact Us"
    subtitle: str | None = None
    phone: str | None = None
    email: str | None = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> ContactFormContent:
        return cls(
            title=_text(data, "title", "Contact Us"),
            subtitle=_optional(data, "subtitle"),
            phone=_optional(data, "phone"),
            email=_optional(data, "email"),
        )


@dataclass(frozen=True)
class LocationLink:
    city: str
    link: str | None = None


@dataclass(frozen=True)
class LocationsListContent:
    title: str = "Areas We Serve"
    subtitle: str | None = None
    locations: tuple[LocationLink, ...] = ()

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> LocationsListContent:
        return cls(
            title=_text(data, "title", "Areas We Serve"),
            subtitle=_optional(data, "subtitle"),
            locations=tuple(
                LocationLink(city=_text(item, "city"), link=_optional(item, "link"))
                for item in _items(data, "locations")
            ),
        )


@dataclass(frozen=True)
class BlogListContent:
    title: str = "Latest Articles"
    limit: int | None = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> BlogListContent:
        limit = data.get("limit")
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int)):
            raise DataValidationError("'limit' must be an integer", context={"field": "limit"})
        return cls(title=_text(data, "title", "Latest Articles"), limit=limit)


@dataclass(frozen=True)
class CustomContent:
    html: str = ""

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> CustomContent:
        return cls(html=_text(data, "html"))


@dataclass(frozen=True)
class GalleryImage:
    src: str
    alt: str = ""
    caption: str | None = None


@dataclass(frozen=True)
class GalleryContent:
    title: str | None = None
    images: tuple[GalleryImage, ...] = ()
    columns: int = 3

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> GalleryContent:
        columns = data.get("columns", 3)
        if isinstance(columns, bool) or not isinstance(columns, int) or columns < 1:
            columns = 3
        return cls(
            title=_optional(data, "title"),
            images=tuple(
                GalleryImage(
                    src=_text(item, "src", PLACEHOLDER_IMAGE_URL),
                    alt=_text(item, "alt"),
                    caption=_optional(item, "caption"),
                )
                for item in _items(data, "images")
            ),
            columns=columns,
        )


@dataclass(frozen=True)
class FaqItem:
    question: str
    answer: str


@dataclass(frozen=True)
class FaqContent:
    title: str = "Frequently Asked Questions"
    subtitle: str | None = None
    faqs: tuple[FaqItem, ...] = ()

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> FaqContent:
        return cls(
            title=_text(data, "title", "Frequently Asked Questions"),
            subtitle=_optional(data, "subtitle"),
            faqs=tuple(
                FaqItem(question=_text(item, "question"), answer=_text(item, "answer"))
                for item in _items(data, "faqs")
            ),
        )


@dataclass(frozen=True)
class Badge:
    text: str
    icon: str = "✓"


@dataclass(frozen=True)
class TrustBadgesContent:
    badges: tuple[Badge, ...] = ()

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> TrustBadgesContent:
        return cls(
            badges=tuple(
                Badge(text=_text(item, "text"), icon=_text(item, "icon", "✓"))
                for item in _items(data, "badges")
            )
        )


@dataclass(frozen=True)
class ImageContent:
    image_url: str = PLACEHOLDER_IMAGE_URL
    alt_text: str = "Image"
    caption: str | None = None
    link_url: str | None = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> ImageContent:
        return cls(
            image_url=_text(data, "imageUrl", PLACEHOLDER_IMAGE_URL),
            alt_text=_text(data, "altText", "Image"),
            caption=_optional(data, "caption"),
            link_url=_optional(data, "linkUrl"),
        )


@dataclass(frozen=True)
class VideoContent:
    url: str = ""
    title: str | None = None
    description: str | None = None
    autoplay: bool = False

    @property
    def embed_url(self) -> str | None:
        """Return the player URL for a YouTube or Vimeo link, if recognised."""
        match = YOUTUBE_ID_PATTERN.search(self.url)
        if match:
            embed = f"https://www.youtube.com/embed/{match.group(1)}"
        else:
            match = VIMEO_ID_PATTERN.search(self.url)
            if not match:
                return None
            embed = f"https://player.vimeo.com/video/{match.group(1)}"
        return f"{embed}?autoplay=1" if self.autoplay else embed

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> VideoContent:
        autoplay = data.get("autoplay")
        if autoplay is not None and not isinstance(autoplay, bool):
            raise DataValidationError(
                "'autoplay' must be true or false", context={"field": "autoplay"}
            )
        return cls(
            url=_text(data, "youtubeUrl") or _text(data, "url"),
            autoplay=autoplay is True,
            title=_optional(data, "title"),
            description=_optional(data, "description"),
        )


@dataclass(frozen=True)
class TextBlockContent:
    title: str | None = None
    content: str = ""
    alignment: str = "left"

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> TextBlockContent:
        alignment = _text(data, "alignment", "left")
        if alignment not in ("left", "center", "right"):
            alignment = "left"
        return cls(
            title=_optional(data, "title"),
            content=_text(data, "content"),
            alignment=alignment,
        )


@dataclass(frozen=True)
class FeatureCard:
    title: str
    description: str = ""
    icon: str = "⭐"


@dataclass(frozen=True)
class FeaturesContent:
    title: str = "Our Features"
    subtitle: str | None = None
    features: tuple[FeatureCard, ...] = ()

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> FeaturesContent:
        return cls(
            title=_text(data, "title", "Our Features"),
            subtitle=_optional(data, "subtitle"),
            features=tuple(
                FeatureCard(
                    title=_text(item, "title"),
                    description=_text(item, "description"),
                    icon=_text(item, "icon", "⭐"),
                )
                for item in _items(data, "features")
            ),
        )


@dataclass(frozen=True)
class UnknownContent:
    """Payload of a section whose tag is outside the declared set."""

    tag: str


@dataclass(frozen=True)
class InvalidContent:
    """Payload that failed to parse or type-check, kept for re-editing."""

    tag: str
    raw: str
    reason: str


SectionContent = Union[
    HeroContent,
    ServicesGridContent,
    AboutIntroContent,
    TestimonialsContent,
    CtaContent,
    ContactFormContent,
    LocationsListContent,
    BlogListContent,
    CustomContent,
    GalleryContent,
    FaqContent,
    TrustBadgesContent,
    ImageContent,
    VideoContent,
    TextBlockContent,
    FeaturesContent,
    UnknownContent,
    InvalidContent,
]

CONTENT_PARSERS: dict[str, Callable[[Mapping[str, Any]], SectionContent]] = {
    "hero": HeroContent.from_payload,
    "services-grid": ServicesGridContent.from_payload,
    "about-intro": AboutIntroContent.from_payload,
    "testimonials": TestimonialsContent.from_payload,
    "cta": CtaContent.from_payload,
    "contact-form": ContactFormContent.from_payload,
    "locations-list": LocationsListContent.from_payload,
    "blog-list": BlogListContent.from_payload,
    "custom-content": CustomContent.from_payload,
    "gallery": GalleryContent.from_payload,
    "faq": FaqContent.from_payload,
    "trust-badges": TrustBadgesContent.from_payload,
    "image": ImageContent.from_payload,
    "video": VideoContent.from_payload,
    "text-block": TextBlockContent.from_payload,
    "features": FeaturesContent.from_payload,
}

CONTENT_VARIANTS: tuple[type, ...] = (
    HeroContent,
    ServicesGridContent,
    AboutIntroContent,
    TestimonialsContent,
    CtaContent,
    ContactFormContent,
    LocationsListContent,
    BlogListContent,
    CustomContent,
    GalleryContent,
    FaqContent,
    TrustBadgesContent,
    ImageContent,
    VideoContent,
    TextBlockContent,
    FeaturesContent,
    UnknownContent,
    InvalidContent,
)


def _raw_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    try:
        return json.dumps(content, ensure_ascii=False, indent=2, default=str)
    except (TypeError, ValueError):
        return repr(content)


def parse_section_content(section: PageSection) -> SectionContent:
    """Turn a section's raw payload into its typed content variant.

    Parameters
    ----------
    section : PageSection
        Section whose ``content`` may be a mapping, a JSON string or absent.

    Returns
    -------
    SectionContent
        The matching variant, ``UnknownContent`` for undeclared tags or
        ``InvalidContent`` when the payload cannot be used.
    """
    if not is_known_section_type(section.type):
        return UnknownContent(tag=section.type)
    parser = CONTENT_PARSERS[section.type]

    payload = section.content
    if payload is None:
        payload = {}
    if isinstance(payload, str):
        try:
            payload = json.loads(payload) if payload.strip() else {}
        except json.JSONDecodeError as exc:
            logger.debug("Section %s has unparseable content: %s", section.id, exc)
            return InvalidContent(section.type, section.content, f"Invalid JSON: {exc.msg}")
    if not isinstance(payload, Mapping):
        return InvalidContent(
            section.type, _raw_text(section.content), "Content must be a JSON object"
        )
    try:
        return parser(payload)
    except DataValidationError as exc:
        logger.debug("Section %s failed validation: %s", section.id, exc)
        return InvalidContent(section.type, _raw_text(section.content), exc.message)


__all__ = [
    "AboutIntroContent",
    "BlogListContent",
    "CONTENT_PARSERS",
    "CONTENT_VARIANTS",
    "ContactFormContent",
    "CtaContent",
    "CustomContent",
    "FaqContent",
    "FeaturesContent",
    "GalleryContent",
    "HeroContent",
    "ImageContent",
    "InvalidContent",
    "LocationsListContent",
    "SectionContent",
    "ServicesGridContent",
    "TestimonialsContent",
    "TextBlockContent",
    "TrustBadgesContent",
    "UnknownContent",
    "VideoContent",
    "parse_section_content",
]
