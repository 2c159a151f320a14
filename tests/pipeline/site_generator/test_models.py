"""Tests for the content model: parsing, slugs and post filtering."""

import pytest

from src.exceptions import DataValidationError
from src.pipeline.site_generator.models import (
    BrandColors,
    Page,
    Website,
    is_home_page,
    is_known_section_type,
    published_posts,
    resolve_page_location,
    slugify,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Water Extraction & Drying", "water-extraction-drying"),
        ("  AC Repair -- 24/7 ", "ac-repair-247"),
        ("Mold Remediation!", "mold-remediation"),
        ("---", ""),
        ("", ""),
    ],
)
def test_slugify_examples(text, expected):
    assert slugify(text) == expected


@pytest.mark.parametrize(
    "text", ["Roof Repair", "  Émergency  Plumbing!! ", "a_b c-d", "Über 24/7 -- fast"]
)
def test_slugify_is_idempotent(text):
    once = slugify(text)
    assert slugify(once) == once


def test_website_from_dict_parses_nested_records(website):
    assert website.display_name == "Dry Fast Restoration"
    assert website.base_url == "https://dryfast.test"
    assert [s.slug for s in website.services] == ["water-extraction"]
    assert website.locations[0].display_name == "Reno, NV"
    assert website.find_service("svc-1").name == "Water Extraction"
    assert website.find_service("nope") is None
    assert website.find_location("loc-1").city == "Reno"
    assert website.find_location(None) is None
    assert website.find_page("about").slug == "about"
    assert website.seo_settings.social_links == {"facebook": "https://facebook.com/dryfast"}


def test_website_falls_back_to_business_name_and_derived_slugs():
    site = Website.from_dict(
        {
            "businessName": "Acme Roofing",
            "services": [{"name": "Roof Repair"}],
            "locations": [{"city": "Carson City"}],
        }
    )
    assert site.id == "acme-roofing"
    assert site.name == "Acme Roofing"
    assert site.services[0].slug == "roof-repair"
    assert site.services[0].id == "roof-repair"
    assert site.locations[0].slug == "carson-city"
    assert site.locations[0].display_name == "Carson City"


def test_brand_colors_fill_defaults_and_reject_bad_hex():
    colors = BrandColors.from_dict({"primary": "#123456"})
    assert colors.primary == "#123456"
    assert colors.text.startswith("#")
    with pytest.raises(DataValidationError) as exc:
        BrandColors.from_dict({"primary": "blue"})
    assert exc.value.context["field"] == "primary"


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"services": "not-a-list"},
        {"pages": [{"id": "p", "order": "first"}]},
        {"contactPhone": {"number": 1}},
        {"pages": [{"id": "p", "order": float("inf")}]},
        {"pages": [{"id": "p", "isPublished": "false"}]},
        {"pages": [{"id": "p", "isPublished": 0}]},
    ],
)
def test_malformed_aggregates_raise(payload):
    with pytest.raises(DataValidationError):
        Website.from_dict(payload)


def test_published_posts_filters_drafts_and_sorts_newest_first():
    site = Website.from_dict(
        {
            "name": "Blog",
            "blogPosts": [
                {"title": "Old", "status": "published", "publishedAt": "2023-01-01"},
                {"title": "Draft", "status": "draft", "publishedAt": "2025-01-01"},
                {"title": "New", "status": "published", "publishedAt": "2024-01-01"},
            ],
        }
    )
    assert [p.title for p in published_posts(site)] == ["New", "Old"]


def test_page_sections_accept_content_alias_and_slug_slashes():
    page = Page.from_dict(
        {"id": "p", "title": "T", "slug": "/about/", "content": [{"id": "s", "type": "hero"}]}
    )
    assert page.slug == "about"
    assert page.sections[0].type == "hero"
    assert not is_home_page(page)
    assert is_home_page(Page("h", "Home", "", "custom"))


def test_page_published_flag_defaults_to_true():
    assert Page.from_dict({"id": "p", "title": "T", "slug": "p"}).published is True
    assert Page.from_dict({"id": "p", "slug": "p", "isPublished": False}).published is False


def test_is_known_section_type():
    assert is_known_section_type("faq")
    assert not is_known_section_type("carousel")


def test_resolve_page_location_prefers_explicit_id(website):
    by_slug = Page("p", "Reno", "locations/reno", "location")
    assert resolve_page_location(by_slug, website).id == "loc-1"
    stale = Page("p", "Reno", "locations/reno", "location", location_id="gone")
    assert resolve_page_location(stale, website) is None
    assert resolve_page_location(Page("p", "Elsewhere", "carson", "location"), website) is None
