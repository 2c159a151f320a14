"""Local Business Site Generator package.

This package is the root of the static site generator for small local
businesses. A structured website description (brand, services, locations,
pages, blog posts) is turned into a deployable set of HTML documents plus a
sitemap, a robots file and a client-side search page.

Package Structure
-----------------
- `pipeline/site_generator/`:
    Content model, section renderer, rich content generators, JSON-LD schema
    builders, layout shell and the export assembler.
- `pipeline/content_writer/`:
    Asynchronous AI copy collaborator with a deterministic template fallback.
- `config.py`: Configuration constants (paths, defaults, limits) as UPPER_SNAKE_CASE.
- `exceptions.py`: Project-specific exception hierarchy.

Examples
--------
>>> from src.pipeline.site_generator import Website, export_website
>>> # files = export_website(Website.from_dict(data))

"""
