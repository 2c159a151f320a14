"""Site Generator Pipeline Module.

Summary
-------
Turns a structured description of a small-business website into a complete
static site: one HTML document per core page, service, location and
published blog post, plus legal pages, ``sitemap.xml``, ``robots.txt`` and a
client-side ``search.html``.

Extended Description
--------------------
Two rendering strategies share one layout shell:

- the section renderer turns a page's ordered, typed sections into HTML
  (``section_renderer``, driven by the variants in ``sections``);
- the rich generators synthesize long-form marketing copy per page
  archetype from business facts and an industry vocabulary
  (``rich_content``, ``rich_styles``, ``vocabulary``).

``exporter.export_website`` chooses the strategy per page from a table,
embeds JSON-LD from ``schema`` and wraps every body with ``layout.wrap`` so
header, footer, CSS variables and navigation are identical on every page.

System Boundaries
-----------------
- Rendering is pure; file and archive output live in ``file_writer`` and
  ``archive``, orchestration in ``runner`` and ``cli``.
- The optional AI copy stage lives in :mod:`src.pipeline.content_writer`
  and is only reached through the runner.

Usage
-----
    >>> import datetime as dt
    >>> from src.pipeline.site_generator import Website, export_website
    >>> site = Website.from_dict({"businessName": "Acme", "industry": "roofing"})
    >>> files = export_website(site, build_date=dt.date(2024, 1, 1))
    >>> files[0].path
    'index.html'
"""

from .archive import archive_filename, to_archive
from .exporter import (
    DEFAULT_STRATEGIES,
    ExportedFile,
    RenderStrategy,
    build_robots_txt,
    build_search_page,
    build_sitemap_xml,
    editable_preview_files,
    export_website,
    make_editable_preview,
    resolve_strategy,
)
from .file_writer import write_files
from .layout import wrap
from .models import (
    BlogPost,
    BrandColors,
    Location,
    Page,
    PageSection,
    Service,
    Website,
    slugify,
)
from .schema import build_page_schemas, render_schema_scripts
from .section_renderer import render_section, render_sections

__all__ = [
    "BlogPost",
    "BrandColors",
    "DEFAULT_STRATEGIES",
    "ExportedFile",
    "Location",
    "Page",
    "PageSection",
    "RenderStrategy",
    "Service",
    "Website",
    "archive_filename",
    "build_page_schemas",
    "build_robots_txt",
    "build_search_page",
    "build_sitemap_xml",
    "editable_preview_files",
    "export_website",
    "make_editable_preview",
    "render_schema_scripts",
    "render_section",
    "render_sections",
    "resolve_strategy",
    "slugify",
    "to_archive",
    "wrap",
    "write_files",
]
