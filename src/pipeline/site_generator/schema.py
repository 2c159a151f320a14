"""JSON-LD structured data for generated pages.

Builders return plain ``dict`` objects ready for ``json.dumps``; optional
facts that are unknown are omitted rather than emitted as empty strings.
``build_page_schemas`` decides which schemas a page carries and
``render_schema_scripts`` serializes them into inline ``<script>`` blocks.

Examples
--------
>>> from src.pipeline.site_generator.models import Page, Website
>>> site = Website.from_dict({"businessName": "Acme", "industry": "plumbing"})
>>> home = Page(id="h", title="Home", slug="", type="home")
>>> [s["@type"] for s in build_page_schemas(home, site)]
['Plumber', 'WebSite', 'BreadcrumbList', 'Organization', 'SiteNavigationElement']
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Sequence

from src.config import DEFAULT_BASE_URL, PLACEHOLDER_IMAGE_URL

from .models import BlogPost, Page, Service, Website, is_home_page
from .vocabulary import schema_type_for

logger = logging.getLogger(__name__)

SCHEMA_CONTEXT = "https://schema.org"

OPENING_HOURS: tuple[dict[str, Any], ...] = (
    {
        "@type": "OpeningHoursSpecification",
        "dayOfWeek": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"],
        "opens": "08:00",
        "closes": "18:00",
    },
    {
        "@type": "OpeningHoursSpecification",
        "dayOfWeek": ["Saturday"],
        "opens": "09:00",
        "closes": "14:00",
    },
)

NAVIGATION_ITEMS: tuple[tuple[str, str], ...] = (
    ("Home", ""),
    ("About", "/about"),
    ("Services", "/services"),
    ("Locations", "/locations"),
    ("Blog", "/blog"),
    ("Contact", "/contact"),
)


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v not in (None, "", [], {})}


def _public_url(website: Website) -> str:
    return website.base_url or DEFAULT_BASE_URL


def _address(website: Website) -> dict[str, Any] | None:
    if website.address is not None:
        a = website.address
        return _compact(
            {
                "@type": "PostalAddress",
                "streetAddress": a.street,
                "addressLocality": a.city,
                "addressRegion": a.state,
                "postalCode": a.zip,
                "addressCountry": a.country,
            }
        )
    if website.locations:
        primary = website.locations[0]
        return _compact(
            {
                "@type": "PostalAddress",
                "addressLocality": primary.city,
                "addressRegion": primary.state,
                "addressCountry": "US",
            }
        )
    return None


def build_local_business(website: Website) -> dict[str, Any]:
    """Return the LocalBusiness (or industry subtype) schema for ``website``."""
    return _compact(
        {
            "@context": SCHEMA_CONTEXT,
            "@type": schema_type_for(website.industry),
            "@id": f"#{website.id}",
            "name": website.display_name,
            "description": website.seo_settings.site_description,
            "url": website.base_url or "/",
            "telephone": website.phone,
            "email": website.email,
            "image": website.logo,
            "priceRange": "$$",
            "address": _address(website),
            "areaServed": [
                {"@type": "City", "name": loc.display_name} for loc in website.locations
            ],
            "openingHoursSpecification": [dict(spec) for spec in OPENING_HOURS],
            "hasOfferCatalog": {
                "@type": "OfferCatalog",
                "name": "Services",
                "itemListElement": [
                    {
                        "@type": "Offer",
                        "itemOffered": _compact(
                            {
                                "@type": "Service",
                                "name": s.name,
                                "description": s.description,
                            }
                        ),
                        "position": index,
                    }
                    for index, s in enumerate(website.services, start=1)
                ],
            },
        }
    )


def build_website(website: Website) -> dict[str, Any]:
    """Return the WebSite schema with a sitelinks SearchAction."""
    base = _public_url(website)
    return _compact(
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "WebSite",
            "name": website.display_name,
            "url": base,
            "description": website.seo_settings.site_description,
            "potentialAction": {
                "@type": "SearchAction",
                "target": f"{base}/search?q={{search_term_string}}",
                "query-input": "required name=search_term_string",
            },
            "publisher": {
                "@type": "Organization",
                "name": website.display_name,
                "url": base,
            },
        }
    )


def build_organization(website: Website) -> dict[str, Any]:
    """Return the Organization schema, including social profiles as ``sameAs``."""
    base = _public_url(website)
    return _compact(
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "Organization",
            "name": website.display_name,
            "url": base,
            "logo": website.logo or f"{base}/logo.png",
            "description": website.seo_settings.site_description,
            "contactPoint": _compact(
                {
                    "@type": "ContactPoint",
                    "telephone": website.phone,
                    "contactType": "customer service",
                    "availableLanguage": ["English"],
                    "areaServed": "US",
                }
            ),
            "sameAs": [url for url in website.seo_settings.social_links.values() if url],
        }
    )


def build_breadcrumbs(page: Page, website: Website) -> dict[str, Any]:
    """Return the BreadcrumbList for ``page``.

    The trail starts at Home. Intermediate slug segments are shown with an
    uppercased first letter; the final crumb uses the page title.

    Examples
    --------
    >>> from src.pipeline.site_generator.models import Page, Website
    >>> site = Website(id="w", name="Acme", base_url="https://acme.test")
    >>> crumbs = build_breadcrumbs(Page("p", "Roof Repair", "services/roof-repair", "service-single"), site)
    >>> [c["name"] for c in crumbs["itemListElement"]]
    ['Home', 'Services', 'Roof Repair']
    """
    base = website.base_url
    trail: list[tuple[str, str]] = [("Home", base or "/")]
    if page.slug:
        parts = page.slug.split("/")
        path = ""
        for index, part in enumerate(parts):
            path += f"/{part}"
            if index == len(parts) - 1:
                trail.append((page.title, f"{base}{path}"))
            else:
                trail.append((part[:1].upper() + part[1:], f"{base}{path}"))
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {"@type": "ListItem", "position": position, "name": name, "item": url}
            for position, (name, url) in enumerate(trail, start=1)
        ],
    }


def build_service_schema(service: Service, website: Website) -> dict[str, Any]:
    """Return the Service schema for one service offered by ``website``."""
    return _compact(
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "Service",
            "name": service.name,
            "description": service.description,
            "url": f"{website.base_url}/services/{service.slug}",
            "provider": _compact(
                {
                    "@type": "LocalBusiness",
                    "name": website.display_name,
                    "telephone": website.phone,
                }
            ),
            "areaServed": [{"@type": "City", "name": loc.city} for loc in website.locations],
            "hasOfferCatalog": {
                "@type": "OfferCatalog",
                "name": service.name,
                "itemListElement": [
                    {"@type": "Offer", "itemOffered": {"@type": "Service", "name": service.name}}
                ],
            },
        }
    )


def build_faq_schema(faqs: Iterable[tuple[str, str]]) -> dict[str, Any]:
    """Return a FAQPage schema from ``(question, answer)`` pairs."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": question,
                "acceptedAnswer": {"@type": "Answer", "text": answer},
            }
            for question, answer in faqs
        ],
    }


def build_article_schema(post: BlogPost, website: Website) -> dict[str, Any]:
    """Return the Article schema for a blog post."""
    base = website.base_url
    url = f"{base}/blog/{post.slug}"
    return _compact(
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "Article",
            "headline": post.title,
            "description": post.excerpt,
            "url": url,
            "datePublished": post.published_at,
            "dateModified": post.updated_at or post.published_at,
            "author": {
                "@type": "Person",
                "name": post.author or website.display_name,
                "url": base or "/",
            },
            "publisher": {
                "@type": "Organization",
                "name": website.display_name,
                "url": base or "/",
                "logo": {
                    "@type": "ImageObject",
                    "url": website.logo or f"{base}/logo.png",
                },
            },
            "mainEntityOfPage": {"@type": "WebPage", "@id": url},
            "image": post.featured_image
            or website.seo_settings.default_image
            or PLACEHOLDER_IMAGE_URL,
            "articleSection": website.industry,
            "keywords": ", ".join(post.tags),
        }
    )


def build_navigation_schema(website: Website) -> dict[str, Any]:
    """Return the SiteNavigationElement schema for the main menu."""
    base = website.base_url
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "SiteNavigationElement",
        "name": "Main Navigation",
        "hasPart": [
            {
                "@type": "SiteNavigationElement",
                "position": position,
                "name": name,
                "url": f"{base}{path}" or "/",
            }
            for position, (name, path) in enumerate(NAVIGATION_ITEMS, start=1)
        ],
    }


def resolve_page_service(page: Page, website: Website) -> Service | None:
    """Return the service a ``service-single`` page describes.

    The explicit ``service_id`` wins. Otherwise the last slug segment must
    equal a service slug exactly, so ``roof`` never binds to
    ``roof-repair``.
    """
    if page.service_id:
        service = website.find_service(page.service_id)
        if service is not None:
            return service
        logger.warning(
            "Page %s references unknown service id %r", page.id, page.service_id
        )
    last_segment = page.slug.rsplit("/", 1)[-1]
    for service in website.services:
        if service.slug == last_segment:
            return service
    return None


def build_page_schemas(page: Page, website: Website) -> list[dict[str, Any]]:
    """Select the schemas embedded in ``page``.

    Every page carries LocalBusiness, WebSite and BreadcrumbList. The home
    page adds Organization and SiteNavigationElement; a ``service-single``
    page adds the Service schema of the service it resolves to.

    Parameters
    ----------
    page : Page
        The page being rendered.
    website : Website
        The owning site.

    Returns
    -------
    list[dict[str, Any]]
        Schemas in emission order.
    """
    schemas = [
        build_local_business(website),
        build_website(website),
        build_breadcrumbs(page, website),
    ]
    if is_home_page(page):
        schemas.append(build_organization(website))
        schemas.append(build_navigation_schema(website))
    if page.type == "service-single":
        service = resolve_page_service(page, website)
        if service is not None:
            schemas.append(build_service_schema(service, website))
    return schemas


def render_schema_scripts(schemas: Sequence[dict[str, Any]]) -> str:
    """Serialize schemas into ``<script type="application/ld+json">`` blocks.

    ``</`` is written as ``<\\/`` so embedded text cannot close the script
    element early.
    """
    blocks = []
    for schema in schemas:
        payload = json.dumps(schema, indent=2, ensure_ascii=False).replace("</", "<\\/")
        blocks.append(f'<script type="application/ld+json">{payload}</script>')
    return "\n".join(blocks)


__all__ = [
    "build_article_schema",
    "build_breadcrumbs",
    "build_faq_schema",
    "build_local_business",
    "build_navigation_schema",
    "build_organization",
    "build_page_schemas",
    "build_service_schema",
    "build_website",
    "render_schema_scripts",
    "resolve_page_service",
]
