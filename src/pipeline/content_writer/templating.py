"""Placeholder templating for AI prompt files.

Templates use ``{name}`` placeholders (letters, digits, underscores or
slashes). Rendering never fails on a missing key: the project-wide
``MISSING_DATA_PLACEHOLDER`` is substituted instead.

Examples
--------
>>> render_template("Hello {who}, {missing}!", {"who": "Reno"})
'Hello Reno, !'
>>> extract_placeholders("{b} {a} {b}")
['a', 'b']
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Mapping

from src.config import MISSING_DATA_PLACEHOLDER

PLACEHOLDER_PATTERN = re.compile(r"\{([a-zA-Z0-9_/]+)\}")


def load_template(path: Path) -> str:
    """Read a UTF-8 template file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    with Path(path).open("r", encoding="utf-8") as fh:
        return fh.read()


def extract_placeholders(content: str) -> list[str]:
    """Return the sorted unique placeholder names in ``content``."""
    return sorted(set(PLACEHOLDER_PATTERN.findall(content)))


def render_template(template_content: str, context: Mapping[str, object]) -> str:
    """Replace each ``{name}`` in ``template_content`` with ``context[name]``."""

    def replace(match: re.Match[str]) -> str:
        value = context.get(match.group(1))
        return MISSING_DATA_PLACEHOLDER if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(replace, template_content)


__all__ = ["extract_placeholders", "load_template", "render_template"]
