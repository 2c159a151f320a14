"""Tests for the export assembler and its generated auxiliary files."""

import datetime as dt
import json
import re

import pytest

from src.exceptions import ExportError
from src.pipeline.site_generator.exporter import (
    DEFAULT_STRATEGIES,
    ExportedFile,
    RenderStrategy,
    build_robots_txt,
    build_sitemap_xml,
    editable_preview_files,
    export_website,
    make_editable_preview,
    resolve_strategy,
    search_records,
)
from src.pipeline.site_generator.models import Website

EXPECTED_PATHS = [
    "index.html",
    "about.html",
    "services.html",
    "contact.html",
    "services/water-extraction.html",
    "locations/reno.html",
    "blog.html",
    "blog/leak-signs.html",
    "privacy-policy.html",
    "terms-of-service.html",
    "sitemap.html",
    "sitemap.xml",
    "robots.txt",
    "search.html",
]


def _by_path(files):
    return {f.path: f.content for f in files}


def _with_pages(website_data, *pages):
    data = dict(website_data)
    data["pages"] = list(website_data["pages"]) + list(pages)
    return Website.from_dict(data)


def test_export_produces_files_in_fixed_order(website, build_date):
    files = export_website(website, build_date=build_date)
    assert [f.path for f in files] == EXPECTED_PATHS
    assert all(isinstance(f, ExportedFile) for f in files)


def test_export_is_deterministic_for_a_fixed_build_date(website, build_date):
    first = export_website(website, build_date=build_date)
    assert export_website(website, build_date=build_date) == first


def test_drafts_are_never_exported(website, build_date):
    files = export_website(website, build_date=build_date)
    assert not any("draft-post" in f.path for f in files)
    assert not any("draft-post" in f.content for f in files)


def test_core_pages_use_rich_strategies_and_shared_shell(website, build_date):
    pages = _by_path(export_website(website, build_date=build_date))
    for path in ("index.html", "about.html", "services.html", "contact.html"):
        html = pages[path]
        assert html.startswith("<!DOCTYPE html>")
        assert '<header class="header">' in html
        assert "&copy; 2024 Dry Fast Restoration" in html
    assert '"@type": "SiteNavigationElement"' in pages["index.html"]
    assert '"@type": "SiteNavigationElement"' not in pages["about.html"]


def test_core_pages_exist_without_authored_pages(website_data, build_date):
    data = dict(website_data, pages=[])
    files = export_website(Website.from_dict(data), build_date=build_date)
    assert [f.path for f in files][:4] == ["index.html", "about.html", "services.html", "contact.html"]
    assert "<title>About Us | Dry Fast Restoration</title>" in files[1].content


def test_service_page_carries_service_schema_and_seo_title(website, build_date):
    html = _by_path(export_website(website, build_date=build_date))["services/water-extraction.html"]
    assert "<title>Water Extraction in Reno | Dry Fast Restoration</title>" in html
    assert '"@type": "Service"' in html
    assert '<link rel="canonical" href="https://dryfast.test/services/water-extraction">' in html


def test_location_page_title(website, build_date):
    html = _by_path(export_website(website, build_date=build_date))["locations/reno.html"]
    assert "<title>Water Damage Services in Reno, NV | Dry Fast Restoration</title>" in html


def test_blog_post_has_article_schema(website, build_date):
    html = _by_path(export_website(website, build_date=build_date))["blog/leak-signs.html"]
    assert '"@type": "Article"' in html
    assert "<p>Watch for stains.</p>" in html


def test_blog_index_shows_empty_state_without_posts(website_data, build_date):
    data = dict(website_data, blogPosts=[])
    files = _by_path(export_website(Website.from_dict(data), build_date=build_date))
    assert "No blog posts yet. Check back soon!" in files["blog.html"]
    assert not any(path.startswith("blog/") for path in files)


def test_sitemap_xml_lists_core_services_locations_and_posts(website, build_date):
    xml = build_sitemap_xml(website, build_date)
    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert xml.count("<url>") == 8
    assert "<loc>https://dryfast.test</loc>" in xml
    assert "<loc>https://dryfast.test/services/water-extraction</loc>" in xml
    assert "<loc>https://dryfast.test/blog/leak-signs</loc>" in xml
    assert set(re.findall(r"<lastmod>(.*?)</lastmod>", xml)) == {"2024-06-01"}
    assert "draft-post" not in xml


def test_sitemap_xml_escapes_urls_and_defaults_base():
    site = Website.from_dict({"businessName": "Acme", "services": [{"name": "A&B", "slug": "a&b"}]})
    xml = build_sitemap_xml(site, dt.date(2024, 1, 1))
    assert "<loc>https://example.com/services/a&amp;b</loc>" in xml


def test_robots_txt_allows_all_and_points_to_sitemap(website):
    robots = build_robots_txt(website)
    assert "User-agent: *\nAllow: /" in robots
    assert "Sitemap: https://dryfast.test/sitemap.xml" in robots


def test_search_page_embeds_index_and_reads_query(website, build_date):
    html = _by_path(export_website(website, build_date=build_date))["search.html"]
    match = re.search(r'<script type="application/json" id="searchIndex">(.*?)</script>', html, re.S)
    records = json.loads(match.group(1))
    assert records == search_records(website)
    urls = [r["url"] for r in records]
    assert urls[:5] == ["/", "/about", "/services", "/contact", "/blog"]
    assert "/services/water-extraction" in urls
    assert "/blog/leak-signs.html" in urls
    assert "URLSearchParams" in html and "get('q')" in html
    assert 'id="searchInput"' in html and 'id="searchResults"' in html


def test_failing_strategy_raises_export_error_naming_the_file(website, build_date):
    def explode(facts, site):
        raise RuntimeError("boom")

    strategies = dict(DEFAULT_STRATEGIES, about=RenderStrategy(explode, lambda: ""))
    with pytest.raises(ExportError) as exc:
        export_website(website, build_date=build_date, strategies=strategies)
    assert exc.value.context["path"] == "about.html"
    assert "boom" in exc.value.context["error"]
    assert isinstance(exc.value.__cause__, RuntimeError)


def test_resolve_strategy_defaults_and_misses():
    assert resolve_strategy("home") is DEFAULT_STRATEGIES["home"]
    assert resolve_strategy("custom") is None
    assert resolve_strategy("home", {}) is None


def test_extra_pages_use_section_renderer_with_faq_schema(website_data, build_date):
    website = _with_pages(
        website_data,
        {
            "id": "p-faq",
            "title": "FAQ",
            "slug": "faq",
            "type": "custom",
            "order": 5,
            "sections": [
                {"id": "s1", "type": "faq", "content": {"faqs": [{"question": "Open Sunday?", "answer": "Yes"}]}}
            ],
        },
    )
    files = export_website(website, build_date=build_date)
    paths = [f.path for f in files]
    assert paths.index("faq.html") == 4
    html = _by_path(files)["faq.html"]
    assert '"@type": "FAQPage"' in html
    assert "Open Sunday?" in html


def test_injected_section_renderer_is_used_for_extra_pages(website_data, build_date):
    website = _with_pages(website_data, {"id": "x", "title": "Extra", "slug": "extra", "type": "custom"})
    seen = []

    def renderer(sections, site):
        seen.append(site.id)
        return "<p>INJECTED</p>"

    html = _by_path(export_website(website, build_date=build_date, section_renderer=renderer))["extra.html"]
    assert "<p>INJECTED</p>" in html
    assert seen == ["site-1"]


def test_published_locations_page_uses_rich_strategy(website_data, build_date):
    website = _with_pages(
        website_data, {"id": "p-loc", "title": "Service Areas", "slug": "locations", "type": "locations"}
    )
    html = _by_path(export_website(website, build_date=build_date))["locations.html"]
    assert 'href="/locations/reno"' in html


def test_reserved_and_unpublished_extra_pages_are_skipped(website_data, build_date, caplog):
    website = _with_pages(
        website_data,
        {"id": "r1", "title": "Sneaky", "slug": "privacy-policy", "type": "custom"},
        {"id": "r2", "title": "Nested", "slug": "services/other", "type": "custom"},
        {"id": "r3", "title": "Hidden", "slug": "hidden", "type": "custom", "isPublished": False},
    )
    paths = [f.path for f in export_website(website, build_date=build_date)]
    assert paths == EXPECTED_PATHS
    assert "collides with a reserved path" in caplog.text


def test_authored_service_page_custom_content_is_embedded(website_data, build_date):
    website = _with_pages(
        website_data,
        {
            "id": "p-svc",
            "title": "Water Extraction",
            "slug": "services/water-extraction",
            "type": "service-single",
            "serviceId": "svc-1",
            "sections": [{"id": "c", "type": "custom-content", "content": {"html": "<h2>Our Method</h2>"}}],
        },
    )
    html = _by_path(export_website(website, build_date=build_date))["services/water-extraction.html"]
    assert "<h2>Our Method</h2>" in html


def test_legal_pages_are_stamped_with_build_date(website, build_date):
    pages = _by_path(export_website(website, build_date=build_date))
    assert "Last Updated: June 1, 2024" in pages["privacy-policy.html"]
    assert "Last Updated: June 1, 2024" in pages["terms-of-service.html"]
    assert 'href="/services/water-extraction"' in pages["sitemap.html"]


def test_editable_preview_injects_editor_into_html_only(website, build_date):
    files = export_website(website, build_date=build_date)
    preview = _by_path(editable_preview_files(files))
    original = _by_path(files)
    assert "element-selected" in preview["index.html"]
    assert preview["index.html"].index("element-selected") < preview["index.html"].rindex("</body>")
    assert preview["robots.txt"] == original["robots.txt"]
    assert preview["sitemap.xml"] == original["sitemap.xml"]


def test_make_editable_preview_appends_without_body():
    assert make_editable_preview("<p>x</p>").startswith("<p>x</p>")
    assert "data-editable" in make_editable_preview("<p>x</p>")


def test_non_finite_rating_does_not_abort_export(website_data, build_date):
    content = json.loads('{"testimonials": [{"name": "a", "quote": "b", "rating": Infinity}]}')
    website = _with_pages(
        website_data,
        {
            "id": "p-reviews",
            "title": "Reviews",
            "slug": "reviews",
            "type": "custom",
            "sections": [{"id": "s1", "type": "testimonials", "content": content}],
        },
    )
    html = _by_path(export_website(website, build_date=build_date))["reviews.html"]
    assert '<p class="invalid-flag">Invalid</p>' in html
