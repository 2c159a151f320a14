"""Tests for JSON-LD schema selection and serialization."""

import json

from src.pipeline.site_generator.models import BlogPost, Page, Website
from src.pipeline.site_generator.schema import (
    build_article_schema,
    build_breadcrumbs,
    build_local_business,
    build_page_schemas,
    render_schema_scripts,
    resolve_page_service,
)


def _types(schemas):
    return [s["@type"] for s in schemas]


def test_home_page_carries_organization_and_navigation():
    site = Website.from_dict({"businessName": "Acme", "industry": "plumbing"})
    home = Page(id="h", title="Home", slug="", type="home")
    assert _types(build_page_schemas(home, site)) == [
        "Plumber",
        "WebSite",
        "BreadcrumbList",
        "Organization",
        "SiteNavigationElement",
    ]


def test_unknown_industry_uses_local_business_type():
    site = Website.from_dict({"businessName": "Acme", "industry": "underwater-basket-weaving"})
    assert build_local_business(site)["@type"] == "LocalBusiness"


def test_local_business_omits_unknown_facts_and_uses_first_location(website):
    schema = build_local_business(website)
    assert schema["telephone"] == "(775) 555-0100"
    assert schema["address"]["addressLocality"] == "Reno"
    assert "image" not in schema
    assert "geo" not in schema and "aggregateRating" not in schema
    assert schema["areaServed"] == [{"@type": "City", "name": "Reno, NV"}]
    offers = schema["hasOfferCatalog"]["itemListElement"]
    assert offers[0]["itemOffered"]["name"] == "Water Extraction"


def test_breadcrumbs_follow_slug_segments(website):
    page = Page(id="s", title="Water Extraction", slug="services/water-extraction", type="service-single")
    crumbs = build_breadcrumbs(page, website)["itemListElement"]
    assert [c["name"] for c in crumbs] == ["Home", "Services", "Water Extraction"]
    assert crumbs[1]["item"] == "https://dryfast.test/services"
    assert [c["position"] for c in crumbs] == [1, 2, 3]


def test_service_schema_binds_by_explicit_id():
    site = Website.from_dict(
        {
            "businessName": "Roofers",
            "services": [
                {"id": "r1", "name": "Roof", "slug": "roof"},
                {"id": "r2", "name": "Roof Repair", "slug": "roof-repair"},
            ],
        }
    )
    page = Page(id="p", title="Roof Repair", slug="services/anything", type="service-single", service_id="r2")
    schemas = build_page_schemas(page, site)
    assert schemas[-1]["@type"] == "Service"
    assert schemas[-1]["name"] == "Roof Repair"


def test_slug_fallback_requires_exact_segment_match():
    site = Website.from_dict(
        {
            "businessName": "Roofers",
            "services": [
                {"id": "r1", "name": "Roof", "slug": "roof"},
                {"id": "r2", "name": "Roof Repair", "slug": "roof-repair"},
            ],
        }
    )
    repair = Page(id="p", title="Roof Repair", slug="services/roof-repair", type="service-single")
    roof = Page(id="q", title="Roof", slug="services/roof", type="service-single")
    other = Page(id="z", title="Gutters", slug="services/gutters", type="service-single")
    assert resolve_page_service(repair, site).id == "r2"
    assert resolve_page_service(roof, site).id == "r1"
    assert resolve_page_service(other, site) is None
    assert _types(build_page_schemas(other, site))[-1] == "BreadcrumbList"


def test_unknown_service_id_falls_back_to_slug(caplog, website):
    page = Page(
        id="p",
        title="Water Extraction",
        slug="services/water-extraction",
        type="service-single",
        service_id="gone",
    )
    assert resolve_page_service(page, website).id == "svc-1"
    assert "unknown service id" in caplog.text


def test_article_schema_falls_back_for_dates_and_image(website):
    post = BlogPost(id="b", title="Leak Signs", slug="leak-signs", published_at="2024-03-05", tags=("a", "b"))
    schema = build_article_schema(post, website)
    assert schema["dateModified"] == "2024-03-05"
    assert schema["url"] == "https://dryfast.test/blog/leak-signs"
    assert schema["image"].startswith("http")
    assert schema["keywords"] == "a, b"
    assert schema["author"]["name"] == "Dry Fast Restoration"


def test_render_schema_scripts_escapes_closing_tags():
    html = render_schema_scripts([{"@type": "Thing", "name": "</script><b>x"}])
    assert html.startswith('<script type="application/ld+json">')
    assert "</script><b>" not in html
    payload = html[len('<script type="application/ld+json">') : -len("</script>")]
    assert json.loads(payload.replace("<\\/", "</"))["name"] == "</script><b>x"
