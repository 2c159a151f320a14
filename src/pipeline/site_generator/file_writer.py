"""Write an exported file set to disk.

This module performs only file I/O; it never renders anything.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from src.exceptions import ExportError

from .archive import validate_relative_path
from .exporter import ExportedFile

logger = logging.getLogger(__name__)


def write_files(files: Iterable[ExportedFile], output_dir: Path) -> list[Path]:
    """Write ``files`` under ``output_dir`` as UTF-8 text.

    Parameters
    ----------
    files : Iterable[ExportedFile]
        Files to write; their relative paths are kept.
    output_dir : Path
        Destination root, created if missing.

    Returns
    -------
    list[Path]
        Written paths in input order.

    Raises
    ------
    ExportError
        If a file cannot be written.
    DataValidationError
        If a path would escape ``output_dir``.
    """
    output_dir = Path(output_dir)
    written: list[Path] = []
    for exported in files:
        target = output_dir / validate_relative_path(exported.path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(exported.content, encoding="utf-8")
        except OSError as exc:
            raise ExportError(
                f"Failed to write {exported.path}",
                context={"path": str(target)},
            ) from exc
        written.append(target)
    logger.info("Wrote %d files to %s", len(written), output_dir)
    return written


__all__ = ["write_files"]
