"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides a small website description shared by the site generator tests.
"""

import datetime as dt
import os
import sys

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests
from pathlib import Path

import pytest

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from src.pipeline.site_generator.models import Website  # noqa: E402


@pytest.fixture
def website_data() -> dict:
    """Return the JSON description of a one-service, one-location site."""
    return {
        "id": "site-1",
        "name": "Dry Fast",
        "businessName": "Dry Fast Restoration",
        "industry": "water-damage",
        "contactPhone": "(775) 555-0100",
        "contactEmail": "help@dryfast.test",
        "netlifyUrl": "https://dryfast.test/",
        "colors": {
            "primary": "#1e40af",
            "secondary": "#0f172a",
            "accent": "#f59e0b",
            "background": "#ffffff",
            "text": "#111827",
        },
        "seoSettings": {
            "siteName": "Dry Fast",
            "siteDescription": "Water damage restoration in Reno.",
            "socialLinks": {"facebook": "https://facebook.com/dryfast"},
        },
        "services": [
            {
                "id": "svc-1",
                "name": "Water Extraction",
                "slug": "water-extraction",
                "description": "Fast removal of standing water.",
            }
        ],
        "locations": [{"id": "loc-1", "city": "Reno", "state": "NV", "slug": "reno"}],
        "pages": [
            {"id": "p-home", "title": "Home", "slug": "", "type": "home", "order": 0},
            {"id": "p-about", "title": "About", "slug": "about", "type": "about", "order": 1},
            {"id": "p-services", "title": "Services", "slug": "services", "type": "services", "order": 2},
            {"id": "p-contact", "title": "Contact", "slug": "contact", "type": "contact", "order": 3},
        ],
        "blogPosts": [
            {
                "id": "post-1",
                "title": "Leak Signs",
                "slug": "leak-signs",
                "content": "<p>Watch for stains.</p>",
                "excerpt": "Early warning signs of a leak.",
                "author": "Dana",
                "publishedAt": "2024-03-05T10:00:00Z",
                "status": "published",
                "tags": ["leaks"],
            },
            {
                "id": "post-2",
                "title": "Draft Post",
                "slug": "draft-post",
                "status": "draft",
            },
        ],
    }


@pytest.fixture
def website(website_data) -> Website:
    """Return the parsed shared website."""
    return Website.from_dict(website_data)


@pytest.fixture
def build_date() -> dt.date:
    """Return a fixed build date so output is reproducible."""
    return dt.date(2024, 6, 1)
