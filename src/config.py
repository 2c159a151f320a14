"""Global configuration constants for the project.

Defines paths, filenames and rendering defaults used across the site
generator and the AI content writer.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
LOG_DIR: Path = PROJECT_ROOT / "logs"
TEMPLATES_DIR: Path = PROJECT_ROOT / "templates"

# AI / Azure defaults used by the content writer
DEFAULT_API_VERSION: str = "2024-05-01-preview"
DEFAULT_DEPLOYMENT_NAME: str = "gpt-4o"
DEFAULT_OPENAI_ENDPOINT: str = "https://api.openai.com/v1/chat/completions"
DEFAULT_OPENAI_MODEL: str = "gpt-4o-mini"

# Prompt/template paths (relative to project root)
AI_PROMPT_TEMPLATE_PATH: str = str(TEMPLATES_DIR / "ai_prompt_template.txt")

# AI payload defaults
AI_PAYLOAD_MAX_TOKENS: int = 2000
AI_DEFAULT_TEMPERATURE: float = 0.7
AI_DEFAULT_TARGET_WORDS: int = 800

# Templating defaults
MISSING_DATA_PLACEHOLDER: str = ""

# Business fact fallbacks
DEFAULT_PHONE: str = "(555) 123-4567"
DEFAULT_EMAIL: str = "info@example.com"
DEFAULT_LEGAL_EMAIL: str = "contact@example.com"
DEFAULT_BASE_URL: str = "https://example.com"
DEFAULT_CITY: str = "your area"
DEFAULT_INDUSTRY_LABEL: str = "Professional"

# Brand colors applied when a website description carries none
DEFAULT_BRAND_COLORS: dict[str, str] = {
    "primary": "#2563eb",
    "secondary": "#1e40af",
    "accent": "#f59e0b",
    "background": "#ffffff",
    "text": "#1f2937",
}

# Media placeholders
PLACEHOLDER_IMAGE_URL: str = "https://picsum.photos/800/400"
DEFAULT_VIDEO_ID: str = "dQw4w9WgXcQ"

# Navigation limits
NAV_DROPDOWN_LIMIT: int = 8
MOBILE_MENU_SERVICE_LIMIT: int = 4
FOOTER_LINK_LIMIT: int = 6

# Sitemap
SITEMAP_PRIORITIES: dict[str, str] = {
    "home": "1.0",
    "about": "0.8",
    "services": "0.9",
    "contact": "0.8",
    "blog": "0.7",
    "service": "0.8",
    "location": "0.8",
    "post": "0.6",
}
SITEMAP_CHANGEFREQ: dict[str, str] = {
    "home": "weekly",
    "about": "monthly",
    "services": "weekly",
    "contact": "monthly",
    "blog": "weekly",
    "service": "monthly",
    "location": "monthly",
    "post": "monthly",
}

# Archive
ARCHIVE_COMPRESSION_LEVEL: int = 6

# CLI defaults and logging
DEFAULT_OUTPUT_DIR: Path = PROJECT_ROOT / "output" / "site"
LOG_FILENAME_SITE_GENERATOR: str = "site_generator.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

