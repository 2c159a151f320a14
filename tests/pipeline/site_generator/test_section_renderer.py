"""Tests for typed section parsing and the section renderer."""

import json

import pytest

from src.exceptions import ConfigurationError
from src.pipeline.site_generator import sections
from src.pipeline.site_generator.models import SECTION_TYPES, PageSection
from src.pipeline.site_generator.section_renderer import (
    SECTION_BUILDERS,
    check_builders_exhaustive,
    render_section,
    render_sections,
)


@pytest.mark.parametrize("section_type", SECTION_TYPES)
@pytest.mark.parametrize("content", [None, {}, "", "{}"])
def test_every_declared_type_renders_with_missing_fields(section_type, content, website):
    html = render_section(PageSection(id="s1", type=section_type, content=content), website)
    assert isinstance(html, str)
    assert "Invalid" not in html


def test_unknown_section_type_renders_empty(website):
    section = PageSection(id="x", type="carousel-3000", content={"a": 1})
    assert isinstance(sections.parse_section_content(section), sections.UnknownContent)
    assert render_section(section, website) == ""


def test_hero_without_headline_uses_welcome(website):
    html = render_section(PageSection(id="h", type="hero", content={}), website)
    assert "<h1>Welcome</h1>" in html
    assert 'href="/contact"' in html


def test_hero_fields_are_escaped(website):
    content = {"headline": "<script>alert(1)</script>", "showCta": False}
    html = render_section(PageSection(id="h", type="hero", content=content), website)
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html
    assert "hero-cta" not in html


def test_json_string_payload_is_parsed(website):
    content = json.dumps({"headline": "From JSON"})
    html = render_section(PageSection(id="h", type="hero", content=content), website)
    assert "<h1>From JSON</h1>" in html


@pytest.mark.parametrize(
    "content, reason",
    [
        ('{"headline": ', "Invalid JSON"),
        ("[1, 2]", "Content must be a JSON object"),
        (["a", "b"], "Content must be a JSON object"),
    ],
)
def test_malformed_payload_renders_invalid_affordance(content, reason, website):
    section = PageSection(id="bad", type="hero", content=content)
    parsed = sections.parse_section_content(section)
    assert isinstance(parsed, sections.InvalidContent)
    html = render_section(section, website)
    assert '<p class="invalid-flag">Invalid</p>' in html
    assert reason in html
    assert 'contenteditable="true"' in html


@pytest.mark.parametrize("rating", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_rating_renders_invalid_affordance(rating, website):
    content = '{"testimonials": [{"name": "a", "quote": "b", "rating": %s}]}' % rating
    section = PageSection(id="t", type="testimonials", content=content)
    assert isinstance(sections.parse_section_content(section), sections.InvalidContent)
    html = render_section(section, website)
    assert '<p class="invalid-flag">Invalid</p>' in html
    assert "rating" in html


def test_testimonial_rating_is_clamped(website):
    content = {"testimonials": [{"name": "a", "quote": "b", "rating": 9.5}]}
    parsed = sections.parse_section_content(
        PageSection(id="t", type="testimonials", content=content)
    )
    assert parsed.testimonials[0].rating == 5


def test_custom_content_passes_html_through(website):
    section = PageSection(id="c", type="custom-content", content={"html": "<h2>Raw</h2>"})
    assert "<h2>Raw</h2>" in render_section(section, website)


def test_faq_section_lists_questions(website):
    content = {"faqs": [{"question": "Q1?", "answer": "A1"}, {"question": "Q2?", "answer": "A2"}]}
    html = render_section(PageSection(id="f", type="faq", content=content), website)
    assert html.count('class="faq-item"') == 2
    assert "Q1?" in html and "A2" in html


def test_testimonials_content_is_a_tagged_variant(website):
    content = {"testimonials": [{"name": "Pat", "quote": "Great", "rating": 5}]}
    parsed = sections.parse_section_content(
        PageSection(id="t", type="testimonials", content=content)
    )
    assert isinstance(parsed, sections.TestimonialsContent)


def test_render_sections_orders_by_order_then_authored_sequence(website):
    html = render_sections(
        [
            PageSection(id="b", type="custom-content", order=2, content={"html": "<i>B</i>"}),
            PageSection(id="a1", type="custom-content", order=1, content={"html": "<i>A1</i>"}),
            PageSection(id="a2", type="custom-content", order=1, content={"html": "<i>A2</i>"}),
        ],
        website,
    )
    assert html.index("A1") < html.index("A2") < html.index("<i>B</i>")


def test_builder_table_is_exhaustive():
    check_builders_exhaustive(SECTION_BUILDERS)
    assert set(sections.CONTENT_VARIANTS) <= set(SECTION_BUILDERS)


def test_missing_builder_is_reported():
    partial = {k: v for k, v in SECTION_BUILDERS.items() if k is not sections.FaqContent}
    with pytest.raises(ConfigurationError) as exc:
        check_builders_exhaustive(partial)
    assert exc.value.context["missing"] == ["FaqContent"]


@pytest.mark.parametrize(
    "content, src",
    [
        ({"youtubeUrl": "https://www.youtube.com/watch?v=abc123&t=5"}, "https://www.youtube.com/embed/abc123"),
        ({"url": "https://youtu.be/xyz"}, "https://www.youtube.com/embed/xyz"),
        ({"url": "https://vimeo.com/76979871"}, "https://player.vimeo.com/video/76979871"),
        (
            {"url": "https://vimeo.com/76979871", "autoplay": True},
            "https://player.vimeo.com/video/76979871?autoplay=1",
        ),
    ],
)
def test_video_section_embeds_youtube_and_vimeo(content, src, website):
    html = render_section(PageSection(id="v", type="video", content=content), website)
    assert f'<iframe src="{src}"' in html


def test_video_section_without_recognised_url_renders_nothing(website):
    section = PageSection(id="v", type="video", content={"url": "https://example.com/clip.mp4"})
    assert render_section(section, website) == ""


def test_video_autoplay_must_be_boolean(website):
    section = PageSection(id="v", type="video", content={"url": "https://youtu.be/x", "autoplay": "yes"})
    assert isinstance(sections.parse_section_content(section), sections.InvalidContent)
