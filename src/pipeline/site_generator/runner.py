"""Headless runner: website JSON in, static site (and optional ZIP) out.

Usage Examples
--------------
Programmatic usage::

    from pathlib import Path
    from src.pipeline.site_generator.runner import run_from_config

    ok = run_from_config(Path("data/website.json"), output_dir=Path("output/site"))
    assert ok is True

With AI copy and an archive::

    run_from_config(
        Path("data/website.json"),
        zip_path=Path("output/"),
        with_ai=True,
    )
"""

from __future__ import annotations

import asyncio
import dataclasses
import datetime as dt
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from src.config import DEFAULT_OUTPUT_DIR
from src.exceptions import ConfigurationError, DataValidationError
from src.pipeline.content_writer import (
    ContentWriter,
    ContentWriterConfig,
    apply_generated_content,
    generate_all_page_content,
)

from .archive import archive_filename, to_archive
from .exporter import ExportedFile, editable_preview_files, export_website
from .file_writer import write_files
from .models import Website

logger = logging.getLogger(__name__)


@dataclass
class SiteBuildResult:
    """What a build produced and where it went."""

    website: Website
    files: list[ExportedFile]
    written: list[Path] = field(default_factory=list)
    archive_path: Path | None = None


def load_website(path: Path) -> Website:
    """Read and parse a website JSON file.

    Raises
    ------
    DataValidationError
        If the file is not valid JSON or not a valid website description.
    FileNotFoundError
        If ``path`` does not exist.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DataValidationError(
            f"Website file is not valid JSON: {exc.msg}",
            context={"path": str(path), "line": exc.lineno},
        ) from exc
    return Website.from_dict(data)


def enrich_with_ai(website: Website, config: ContentWriterConfig | None = None) -> Website:
    """Attach AI (or template) copy to service and location pages.

    A missing AI configuration is logged and the template copy is used.
    """
    if config is None:
        try:
            config = ContentWriterConfig.from_env()
        except ConfigurationError as exc:
            logger.warning("AI configuration unavailable (%s); using template copy", exc.message)
    contents = asyncio.run(generate_all_page_content(website, ContentWriter(config)))
    return apply_generated_content(website, contents)


def build_site(
    website_json: Path,
    output_dir: Path | None = None,
    zip_path: Path | None = None,
    base_url: str | None = None,
    build_date: dt.date | None = None,
    editable_preview: bool = False,
    with_ai: bool = False,
) -> SiteBuildResult:
    """Export a site and write it to disk and/or a ZIP archive.

    Files are written to ``output_dir``; when neither ``output_dir`` nor
    ``zip_path`` is given, ``DEFAULT_OUTPUT_DIR`` is used. A ``zip_path``
    that is an existing directory receives ``archive_filename(website)``.

    Raises
    ------
    AppError
        Any validation, export or write failure.
    """
    website = load_website(website_json)
    if base_url:
        website = dataclasses.replace(website, base_url=base_url.rstrip("/"))
    if with_ai:
        website = enrich_with_ai(website)
    files = export_website(website, build_date=build_date)
    if editable_preview:
        files = editable_preview_files(files)
    result = SiteBuildResult(website=website, files=files)

    if output_dir is None and zip_path is None:
        output_dir = DEFAULT_OUTPUT_DIR
    if output_dir is not None:
        result.written = write_files(files, Path(output_dir))
    if zip_path is not None:
        target = Path(zip_path)
        if target.is_dir():
            target = target / archive_filename(website)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(to_archive(files))
        result.archive_path = target
        logger.info("Wrote archive %s", target)
    return result


def run_from_config(
    website_json: Path,
    output_dir: Path | None = None,
    zip_path: Path | None = None,
    base_url: str | None = None,
    build_date: dt.date | None = None,
    editable_preview: bool = False,
    with_ai: bool = False,
) -> bool:
    """Generate the site described by ``website_json``.

    Returns
    -------
    bool
        ``True`` when the site was written; ``False`` if anything failed (the
        failure is logged).

    Examples
    --------
    >>> from pathlib import Path
    >>> run_from_config(Path("missing.json"))
    False
    """
    try:
        build_site(
            website_json,
            output_dir=output_dir,
            zip_path=zip_path,
            base_url=base_url,
            build_date=build_date,
            editable_preview=editable_preview,
            with_ai=with_ai,
        )
        return True
    except Exception:
        logger.exception("Failed to generate website from %s", website_json)
        return False


__all__ = ["SiteBuildResult", "build_site", "enrich_with_ai", "load_website", "run_from_config"]
