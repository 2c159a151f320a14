"""Tests for prompt templating, payload construction and template copy."""

from pathlib import Path

import pytest

from src.config import AI_PROMPT_TEMPLATE_PATH
from src.pipeline.content_writer.config import ContentWriterConfig
from src.pipeline.content_writer.fallback import FALLBACK_BUILDERS, fallback_content
from src.pipeline.content_writer.prompts import (
    build_payload,
    prompt_context,
    request_location,
    split_prompt,
)
from src.pipeline.content_writer.templating import (
    extract_placeholders,
    load_template,
    render_template,
)
from src.pipeline.content_writer.writer import ContentRequest, sanitize_html


def test_render_template_substitutes_and_blanks_missing_keys():
    assert render_template("{a}-{b}-{a}", {"a": 1}) == "1--1"
    assert render_template("no placeholders", {}) == "no placeholders"


def test_extract_placeholders_sorted_unique():
    assert extract_placeholders("{z} {a} {z} {x_y}") == ["a", "x_y", "z"]


def test_load_template_reads_file(tmp_path):
    path = tmp_path / "t.txt"
    path.write_text("SYSTEM: s\nUSER: {who}", encoding="utf-8")
    assert load_template(path) == "SYSTEM: s\nUSER: {who}"
    with pytest.raises(FileNotFoundError):
        load_template(tmp_path / "missing.txt")


def test_shipped_prompt_template_uses_known_placeholders():
    template = load_template(Path(AI_PROMPT_TEMPLATE_PATH))
    request = ContentRequest("Acme", "plumbing")
    assert set(extract_placeholders(template)) <= set(prompt_context(request))
    system, user = split_prompt(template)
    assert system and user


@pytest.mark.parametrize(
    "city, state, expected",
    [("Reno", "NV", "Reno, NV"), ("Reno", None, "Reno"), (None, "NV", "your area")],
)
def test_request_location(city, state, expected):
    request = ContentRequest("Acme", "plumbing", location_city=city, location_state=state)
    assert request_location(request) == expected


def test_split_prompt_requires_ordered_markers():
    assert split_prompt("SYSTEM: a\nUSER: b") == ("a", "b")
    with pytest.raises(ValueError):
        split_prompt("USER: b\nSYSTEM: a")
    with pytest.raises(ValueError):
        split_prompt("just text")


def test_azure_payload_omits_model():
    request = ContentRequest("Acme", "plumbing", page_type="about", target_words=600)
    cfg = ContentWriterConfig(api_key="k", endpoint_base="https://res.test", temperature=0.1)
    payload = build_payload("SYSTEM: s\nUSER: {target_words} words", request, cfg)
    assert "model" not in payload
    assert payload["messages"][1]["content"] == "600 words"
    assert payload["temperature"] == 0.1
    assert payload["max_tokens"] == 2000


@pytest.mark.parametrize("page_type", sorted(FALLBACK_BUILDERS))
def test_fallback_copy_stays_within_allowed_tags(page_type):
    request = ContentRequest(
        "Acme & Sons", "plumbing", service_name="Drain Cleaning", location_city="Reno", page_type=page_type
    )
    html = fallback_content(request)
    assert sanitize_html(html) == html.strip()
    assert "Acme & Sons" not in html
