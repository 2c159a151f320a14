"""Command-line entry point for the site generator.

Parses arguments, configures logging, runs the build and prints a ``rich``
table of the generated files. All rendering is delegated to
:mod:`src.pipeline.site_generator.runner`.

Examples
--------
>>> # In shell
>>> python -m src.pipeline.site_generator.cli data/website.json --output out/site --zip out/
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import os
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.table import Table

from src.config import DEFAULT_OUTPUT_DIR, LOG_DIR, LOG_FILENAME_SITE_GENERATOR, LOG_FORMAT

from .runner import SiteBuildResult, build_site

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO", enable_file: bool = True) -> None:
    """Replace root handlers with a stream handler and an optional file handler.

    Parameters
    ----------
    level : str, optional
        Logging level name. Unknown names fall back to INFO.
    enable_file : bool, optional
        Also log to ``LOG_DIR/LOG_FILENAME_SITE_GENERATOR``. Ignored when
        ``DISABLE_FILE_LOGS`` is set. Failures creating the file handler
        are suppressed.
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file and not os.environ.get("DISABLE_FILE_LOGS"):
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0, logging.FileHandler(LOG_DIR / LOG_FILENAME_SITE_GENERATOR, mode="a")
            )
        except Exception:
            pass
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def _iso_date(value: str) -> dt.date:
    try:
        return dt.date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from exc


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="site-generator",
        description="Generate a static small-business website from a JSON description.",
    )
    parser.add_argument("website_json", type=Path, help="Website description (JSON).")
    parser.add_argument("--output", type=Path, default=None, help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).")
    parser.add_argument("--zip", type=Path, default=None, help="Also write a ZIP archive to this file or directory.")
    parser.add_argument("--base-url", default=None, help="Override the public site URL.")
    parser.add_argument("--build-date", type=_iso_date, default=None, help="Date stamped into the site (YYYY-MM-DD).")
    parser.add_argument("--editable-preview", action="store_true", help="Inject the in-page editor into HTML files.")
    parser.add_argument("--with-ai", action="store_true", help="Generate service and location copy with the AI writer.")
    parser.add_argument(
        "--log-level", type=str, default=os.environ.get("LOG_LEVEL", "INFO")
    )
    return parser.parse_args(argv)


def summary_table(result: SiteBuildResult) -> Table:
    """Return a table listing every generated file and its size."""
    table = Table(
        show_header=True,
        header_style="bold blue",
        title=f"{result.website.display_name}: {len(result.files)} files",
    )
    table.add_column("#", justify="right")
    table.add_column("Path")
    table.add_column("Size", justify="right")
    for index, exported in enumerate(result.files, 1):
        table.add_row(str(index), exported.path, f"{len(exported.content.encode('utf-8')):,} B")
    return table


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run the site generator CLI and return the process exit code."""
    args = parse_arguments(argv)
    configure_logging(args.log_level)
    console = console or Console()
    try:
        result = build_site(
            args.website_json,
            output_dir=args.output,
            zip_path=args.zip,
            base_url=args.base_url,
            build_date=args.build_date,
            editable_preview=args.editable_preview,
            with_ai=args.with_ai,
        )
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 1
    except Exception:
        logger.exception("Failed to generate website from %s", args.website_json)
        return 1
    console.print(summary_table(result))
    if result.written:
        console.print(f"Wrote {len(result.written)} files to {args.output or DEFAULT_OUTPUT_DIR}")
    if result.archive_path is not None:
        console.print(f"Archive: {result.archive_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
