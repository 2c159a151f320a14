"""ZIP packaging for an exported file set.

The archive is built in memory so callers decide where the bytes go (disk,
an HTTP response, a deploy API).
"""

from __future__ import annotations

import io
import logging
import re
import zipfile
from typing import Iterable

from src.config import ARCHIVE_COMPRESSION_LEVEL
from src.exceptions import DataValidationError

from .exporter import ExportedFile
from .models import Website

logger = logging.getLogger(__name__)


def validate_relative_path(path: str) -> str:
    """Return ``path`` if it is a safe relative forward-slash path.

    Raises
    ------
    DataValidationError
        If the path is empty, absolute, uses backslashes or contains a
        ``..`` segment.
    """
    if (
        not path
        or path.startswith("/")
        or "\\" in path
        or re.match(r"^[A-Za-z]:", path)
        or ".." in path.split("/")
    ):
        raise DataValidationError(
            f"Unsafe archive path: {path!r}", context={"path": path}
        )
    return path


def to_archive(files: Iterable[ExportedFile]) -> bytes:
    """Pack ``files`` into a DEFLATE-compressed ZIP and return its bytes.

    Parameters
    ----------
    files : Iterable[ExportedFile]
        Exported files; each path becomes an archive member name.

    Returns
    -------
    bytes
        The ZIP archive.

    Raises
    ------
    DataValidationError
        If any path is absolute or escapes the archive root.
    """
    buffer = io.BytesIO()
    count = 0
    with zipfile.ZipFile(
        buffer,
        mode="w",
        compression=zipfile.ZIP_DEFLATED,
        compresslevel=ARCHIVE_COMPRESSION_LEVEL,
    ) as archive:
        for exported in files:
            archive.writestr(validate_relative_path(exported.path), exported.content.encode("utf-8"))
            count += 1
    data = buffer.getvalue()
    logger.info("Packed %d files into a %d byte archive", count, len(data))
    return data


def archive_filename(website: Website) -> str:
    """Return ``<safe-name>-website.zip`` for ``website``.

    Examples
    --------
    >>> from src.pipeline.site_generator.models import Website
    >>> archive_filename(Website(id="w", name="Joe's Plumbing & Heating"))
    'joe-s-plumbing-heating-website.zip'
    """
    safe = re.sub(r"[^a-z0-9]+", "-", website.display_name.lower()).strip("-")
    return f"{safe or 'site'}-website.zip"


__all__ = ["archive_filename", "to_archive", "validate_relative_path"]
