"""Small HTML string helpers shared by every renderer.

All functions are pure and operate on plain strings; none of them parse HTML
into a tree. Regex-based normalization mirrors what the generated markup
actually contains, so the patterns stay deliberately narrow.
"""

from __future__ import annotations

import datetime as dt
import html
import re

from src.config import DEFAULT_PHONE

_EXTERNAL_LINK_PATTERN = re.compile(r"<a\s+([^>]*href=[\"']https?://[^>]*)>", re.IGNORECASE)
_IMG_PATTERN = re.compile(r"<img\s+([^>]*?)\s*/?>", re.IGNORECASE)


def escape_html(text: str | None) -> str:
    """Escape ``& < > " '`` for safe inclusion in markup and attributes.

    Examples
    --------
    >>> escape_html('<b>"Tom & Jerry"</b>')
    '&lt;b&gt;&quot;Tom &amp; Jerry&quot;&lt;/b&gt;'
    >>> escape_html(None)
    ''
    """
    if not text:
        return ""
    return html.escape(str(text), quote=True)


def phone_digits(phone: str | None) -> str:
    """Return ``phone`` reduced to digits and ``+`` for use in ``tel:`` links."""
    return re.sub(r"[^0-9+]", "", phone or DEFAULT_PHONE)


def phone_href(phone: str | None) -> str:
    """Return a ``tel:`` URI for ``phone`` (falls back to the default number)."""
    return f"tel:{phone_digits(phone)}"


def initials(name: str) -> str:
    """Return up to two uppercase initials for a logo placeholder.

    Examples
    --------
    >>> initials("Acme Water Restoration")
    'AW'
    >>> initials("Zephyr")
    'ZE'
    """
    words = name.split()
    if not words:
        return ""
    if len(words) == 1:
        return words[0][:2].upper()
    return (words[0][0] + words[1][0]).upper()


def industry_label(industry: str) -> str:
    """Return a display label for an industry id (``"pest-control"`` -> ``"Pest Control"``)."""
    return " ".join(part.capitalize() for part in re.split(r"[-_\s]+", industry) if part)


def format_date(value: str | None) -> str:
    """Format an ISO date (or datetime) string as ``"Month D, YYYY"``.

    Unparseable input is returned unchanged; ``None`` becomes ``""``.

    Examples
    --------
    >>> format_date("2024-03-05T10:00:00Z")
    'March 5, 2024'
    >>> format_date("soon")
    'soon'
    """
    if not value:
        return ""
    try:
        day = dt.date.fromisoformat(value[:10])
    except ValueError:
        return value
    return f"{day:%B} {day.day}, {day.year}"


def process_content_for_output(html_content: str) -> str:
    """Prepare authored blog HTML for publication.

    External links (``http://`` or ``https://``) without a ``target`` open in
    a new tab with ``rel="noopener noreferrer"``; images without a
    ``loading`` attribute are lazy-loaded.

    Examples
    --------
    >>> process_content_for_output('<a href="https://x.org">x</a>')
    '<a href="https://x.org" target="_blank" rel="noopener noreferrer">x</a>'
    >>> process_content_for_output('<img src="a.png">')
    '<img src="a.png" loading="lazy">'
    """

    def _link(match: re.Match[str]) -> str:
        attrs = match.group(1)
        if re.search(r"\btarget=", attrs, re.IGNORECASE):
            return match.group(0)
        return f'<a {attrs} target="_blank" rel="noopener noreferrer">'

    def _image(match: re.Match[str]) -> str:
        attrs = match.group(1)
        if re.search(r"\bloading=", attrs, re.IGNORECASE):
            return match.group(0)
        return f'<img {attrs} loading="lazy">'

    html_content = _EXTERNAL_LINK_PATTERN.sub(_link, html_content)
    return _IMG_PATTERN.sub(_image, html_content)


__all__ = [
    "escape_html",
    "format_date",
    "industry_label",
    "initials",
    "phone_digits",
    "phone_href",
    "process_content_for_output",
]
