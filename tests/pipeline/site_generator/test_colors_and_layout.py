"""Tests for brand color derivation and the shared layout shell."""

import re

import pytest

from src.pipeline.site_generator.colors import adjust_color, css_variable_block, theme_variables
from src.pipeline.site_generator.layout import canonical_url, render_footer, wrap
from src.pipeline.site_generator.models import BrandColors, Page, Website

HEX = re.compile(r"^#[0-9a-f]{6}$")


@pytest.mark.parametrize("color", ["#000000", "#ffffff", "#1e40af", "#f59e0b", "#7f7f7f"])
@pytest.mark.parametrize("percent", [-200, -100, -20, 0, 20, 100, 250])
def test_adjust_color_stays_a_bounded_hex(color, percent):
    assert HEX.match(adjust_color(color, percent))


def test_adjust_color_clamps_channels():
    assert adjust_color("#ffffff", 50) == "#ffffff"
    assert adjust_color("#000000", -100) == "#000000"
    assert adjust_color("#808080", 20) == "#b3b3b3"


def test_adjust_color_rejects_non_hex():
    with pytest.raises(ValueError):
        adjust_color("red", 10)


def test_theme_variables_are_derived_from_brand_colors():
    colors = BrandColors.from_dict({"primary": "#1e40af", "text": "#111827"})
    variables = theme_variables(colors)
    assert variables["--primary"] == "#1e40af"
    assert variables["--primary-dark"] == adjust_color("#1e40af", -20)
    assert variables["--text-light"] == adjust_color("#111827", 40)
    assert css_variable_block(colors).startswith(":root {")


def test_canonical_url_rules():
    site = Website(id="w", name="Acme", base_url="https://acme.test")
    assert canonical_url(Page("p", "About", "about", "about"), site) == "https://acme.test/about"
    assert canonical_url(Page("h", "Home", "", "home"), site) == "https://acme.test"
    assert canonical_url(Page("h", "Home", "", "home"), Website(id="w", name="Acme")) == "/"


def test_wrap_produces_full_document_with_shared_shell(website, build_date):
    page = Page("p", "About", "about", "about")
    html = wrap("<p>BODY</p>", page, website, build_date=build_date, schemas_html="<script>S</script>")
    assert html.startswith("<!DOCTYPE html>")
    assert '<link rel="canonical" href="https://dryfast.test/about">' in html
    assert 'property="og:title"' in html and 'name="twitter:card"' in html
    assert "<p>BODY</p>" in html
    assert '<header class="header">' in html and '<footer class="footer">' in html
    assert html.index("<script>S</script>") < html.index("</head>")
    assert "toggleMobileMenu" in html
    assert '/services/water-extraction' in html and '/locations/reno' in html


def test_footer_uses_build_year_and_map_only_with_address(website, build_date):
    footer = render_footer(website, build_date)
    assert "&copy; 2024 Dry Fast Restoration" in footer
    assert "footer-map" not in footer
    with_address = Website.from_dict(
        {
            "businessName": "Acme",
            "businessAddress": {"street": "1 Main St", "city": "Reno", "state": "NV", "zip": "89501"},
        }
    )
    footer = render_footer(with_address, build_date)
    assert "footer-map" in footer
    assert 'itemprop="streetAddress">1 Main St' in footer
