"""Tests for the rich page bodies and the markup helpers they use."""

import pytest

from src.pipeline.site_generator.markup import (
    format_date,
    industry_label,
    phone_href,
    process_content_for_output,
)
from src.pipeline.site_generator.models import Website, published_posts
from src.pipeline.site_generator.rich_content import (
    BusinessFacts,
    generate_about_content,
    generate_blog_index_content,
    generate_blog_post_content,
    generate_contact_content,
    generate_home_content,
    generate_location_page_content,
    generate_locations_content,
    generate_service_page_content,
    generate_services_content,
)
from src.pipeline.site_generator.vocabulary import DEFAULT_VOCABULARY, get_vocabulary


def test_business_facts_fall_back_to_first_location(website):
    facts = BusinessFacts.from_website(website)
    assert (facts.city, facts.state) == ("Reno", "NV")
    assert facts.industry_label == "Water Damage"
    assert facts.phone_href == "tel:7755550100"
    assert facts.vocabulary is DEFAULT_VOCABULARY


def test_business_facts_without_contact_details_use_defaults():
    facts = BusinessFacts.from_website(Website.from_dict({"businessName": "Bare"}))
    assert facts.city == "your area"
    assert facts.email == "info@example.com"
    assert facts.phone == "(555) 123-4567"
    assert facts.industry_label == "Professional"


def test_unknown_industry_home_copy_is_never_blank(website):
    html = generate_home_content(BusinessFacts.from_website(website))
    assert DEFAULT_VOCABULARY.hero_service in html
    assert "Dry Fast Restoration" in html
    assert 'href="/services/water-extraction"' in html


def test_known_industry_uses_its_vocabulary():
    site = Website.from_dict({"businessName": "Pipes", "industry": "plumbing"})
    html = generate_home_content(BusinessFacts.from_website(site))
    assert get_vocabulary("plumbing").hero_service in html
    assert "Plumbing Services in" in html


@pytest.mark.parametrize(
    "generator",
    [
        generate_home_content,
        generate_about_content,
        generate_contact_content,
        generate_services_content,
        generate_locations_content,
    ],
)
def test_archetype_bodies_are_deterministic(generator, website):
    facts = BusinessFacts.from_website(website)
    first = generator(facts)
    assert first
    assert generator(facts) == first


def test_business_name_is_escaped_in_copy():
    site = Website.from_dict({"businessName": "<b>Bad</b> & Co"})
    html = generate_about_content(BusinessFacts.from_website(site))
    assert "<b>Bad</b>" not in html
    assert "&lt;b&gt;Bad&lt;/b&gt; &amp; Co" in html


def test_locations_body_links_extensionless(website):
    html = generate_locations_content(BusinessFacts.from_website(website))
    assert 'href="/locations/reno"' in html


def test_blog_index_lists_posts_or_shows_empty_state(website):
    facts = BusinessFacts.from_website(website)
    html = generate_blog_index_content(facts, published_posts(website))
    assert 'href="/blog/leak-signs.html"' in html
    assert "March 5, 2024" in html
    assert "draft-post" not in html
    empty = generate_blog_index_content(facts, [])
    assert '<p class="blog-empty">No blog posts yet. Check back soon!</p>' in empty
    assert "blog-card" not in empty


def test_service_page_embeds_custom_html_only_when_given(website):
    facts = BusinessFacts.from_website(website)
    service = website.services[0]
    plain = generate_service_page_content(facts, service)
    assert "service-details" not in plain
    assert "Water Extraction in Reno" in plain
    custom = generate_service_page_content(facts, service, "<h2>Custom Copy</h2>")
    assert '<div class="custom-content"><h2>Custom Copy</h2></div>' in custom


def test_location_page_mentions_city(website):
    facts = BusinessFacts.from_website(website)
    html = generate_location_page_content(facts, website.locations[0], "<p>Local</p>")
    assert "Reno" in html
    assert "<p>Local</p>" in html


def test_blog_post_body_processes_links_and_author(website):
    post = published_posts(website)[0]
    html = generate_blog_post_content(BusinessFacts.from_website(website), post)
    assert "<p>Watch for stains.</p>" in html
    assert '<span itemprop="name">Dana</span>' in html
    assert 'class="blog-tag">leaks<' in html
    assert "https%3A%2F%2Fdryfast.test%2Fblog%2Fleak-signs" in html


def test_industry_label_and_phone_href():
    assert industry_label("pest-control") == "Pest Control"
    assert industry_label("") == ""
    assert phone_href("+1 (775) 555-0100") == "tel:+17755550100"
    assert phone_href(None) == "tel:5551234567"


def test_format_date_handles_datetimes_and_garbage():
    assert format_date("2024-12-25") == "December 25, 2024"
    assert format_date("2024-03-05T10:00:00Z") == "March 5, 2024"
    assert format_date("someday") == "someday"
    assert format_date(None) == ""


def test_process_content_for_output_respects_existing_attributes():
    html = '<a href="/local">a</a><a href="https://x.org" target="_self">b</a><img src="i.png" loading="eager">'
    assert process_content_for_output(html) == html

