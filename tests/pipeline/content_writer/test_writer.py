"""Tests for AI copy generation, sanitizing and folding copy into the site."""

import pytest

from src.exceptions import ConfigurationError
from src.pipeline.content_writer import (
    ContentRequest,
    ContentWriter,
    ContentWriterConfig,
    apply_generated_content,
    fallback_content,
    generate_all_page_content,
)
from src.pipeline.content_writer.writer import sanitize_html, to_page_html
from src.pipeline.site_generator.exporter import export_website

PROMPT = "SYSTEM: be brief\nUSER: {page_type} page for {business_name} in {location}. {service_line}"


class FakeClient:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.payloads = []

    async def process_content(self, session, payload):
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        if self.result is not None:
            return self.result
        user = payload["messages"][1]["content"]
        return True, f"<h1>Copy</h1><p>{user}</p>", {}


def make_writer(client) -> ContentWriter:
    return ContentWriter(ContentWriterConfig(api_key="k"), client=client, prompt_template=PROMPT)


REQUEST = ContentRequest(
    business_name="Dry Fast",
    industry="water damage",
    service_name="Water Extraction",
    location_city="Reno",
    location_state="NV",
    page_type="service",
)


def test_sanitize_html_keeps_only_the_allowed_vocabulary():
    html = '<div><h4 id="x">Sub</h4><ol><li><a href="/x">One</a></li></ol><style>p{}</style><iframe src="y"></iframe></div>'
    assert sanitize_html(html) == "<h3>Sub</h3><ol><li>One</li></ol>"


def test_markdown_output_is_converted():
    html = to_page_html("## Our Work\n\nWe **dry** homes.\n\n- fast\n- careful\n")
    assert "<h2>Our Work</h2>" in html
    assert "<p>We dry homes.</p>" in html
    assert "<li>fast</li>" in html
    assert "<strong>" not in html


@pytest.mark.asyncio
async def test_disabled_writer_returns_template_copy(caplog):
    html = await ContentWriter(None).generate_content(None, REQUEST)
    assert html == fallback_content(REQUEST)
    assert "<h2>Professional Water Extraction Services</h2>" in html
    assert "not configured" in caplog.text


@pytest.mark.asyncio
async def test_successful_copy_is_sanitized_and_prompt_is_filled():
    client = FakeClient()
    html = await make_writer(client).generate_content(object(), REQUEST)
    assert html.startswith("<h2>Copy</h2><p>service page for Dry Fast in Reno, NV.")
    assert "Focus on the Water Extraction service." in html
    payload = client.payloads[0]
    assert payload["messages"][0] == {"role": "system", "content": "be brief"}
    assert payload["model"] == "gpt-4o-mini"
    assert payload["temperature"] == 0.7


@pytest.mark.parametrize(
    "client",
    [
        FakeClient(result=(False, None, {"error_type": "HTTPError", "status_code": 500})),
        FakeClient(result=(True, "<script>only()</script>", {})),
        FakeClient(error=RuntimeError("boom")),
    ],
)
@pytest.mark.asyncio
async def test_failures_fall_back_to_template_copy(client):
    html = await make_writer(client).generate_content(object(), REQUEST)
    assert html == fallback_content(REQUEST)


@pytest.mark.asyncio
async def test_request_without_client_raises_configuration_error():
    writer = make_writer(FakeClient())
    writer.client = None
    assert not writer.enabled
    with pytest.raises(ConfigurationError):
        await writer._request(object(), {})


def test_fallback_escapes_inputs_and_handles_unknown_types():
    request = ContentRequest(business_name="<Bad & Co>", industry="", page_type="faq")
    html = fallback_content(request)
    assert html == "<p>Welcome to &lt;Bad &amp; Co&gt;. Contact us for local service services in your area.</p>"


@pytest.mark.asyncio
async def test_generate_all_page_content_covers_every_entity(website):
    client = FakeClient()
    contents = await generate_all_page_content(website, make_writer(client), session=object())
    assert set(contents) == {"home", "about", "contact", "services", "locations"}
    assert list(contents["services"]) == ["svc-1"]
    assert list(contents["locations"]) == ["loc-1"]
    assert "Water Extraction" in contents["services"]["svc-1"]
    assert "location page for Dry Fast Restoration in Reno, NV" in contents["locations"]["loc-1"]
    assert len(client.payloads) == 5


@pytest.mark.asyncio
async def test_generate_all_page_content_without_writer_uses_templates(website):
    contents = await generate_all_page_content(website)
    assert contents["contact"].strip().startswith("<h2>Get In Touch</h2>")
    assert "Water Extraction" in contents["services"]["svc-1"]


def test_applied_copy_is_embedded_into_service_and_location_pages(website, build_date):
    contents = {
        "services": {"svc-1": "<h2>Extraction Copy</h2>"},
        "locations": {"loc-1": "<p>Reno Copy</p>"},
    }
    enriched = apply_generated_content(website, contents)
    assert enriched is not website
    assert len(website.pages) == 4
    files = {f.path: f.content for f in export_website(enriched, build_date=build_date)}
    assert "<h2>Extraction Copy</h2>" in files["services/water-extraction.html"]
    assert "<p>Reno Copy</p>" in files["locations/reno.html"]


def test_reapplying_copy_replaces_the_generated_section(website):
    once = apply_generated_content(website, {"services": {"svc-1": "<p>First</p>"}})
    twice = apply_generated_content(once, {"services": {"svc-1": "<p>Second</p>"}})
    service_pages = [p for p in twice.pages if p.type == "service-single"]
    assert len(service_pages) == 1
    assert [s.content for s in service_pages[0].sections] == [{"html": "<p>Second</p>"}]
