"""Brand color derivation.

Derived theme colors (light/dark variants, muted text) are never stored on
the content model; they are recomputed from the five brand colors every time
the CSS variable block is rendered.
"""

from __future__ import annotations

from .models import HEX_COLOR_PATTERN, BrandColors


def adjust_color(color: str, percent: float) -> str:
    """Lighten (positive) or darken (negative) a hex color.

    Every RGB channel is shifted by ``round(2.55 * percent)`` and clamped to
    ``[0, 255]``.

    Parameters
    ----------
    color : str
        A 6-digit hex color such as ``"#2563eb"``.
    percent : float
        Brightness change in percent, typically within ``[-100, 100]``.

    Returns
    -------
    str
        A 6-digit lowercase hex color with a leading ``#``.

    Raises
    ------
    ValueError
        If ``color`` is not a 6-digit hex value.

    Examples
    --------
    >>> adjust_color("#808080", 20)
    '#b3b3b3'
    >>> adjust_color("#ffffff", 50)
    '#ffffff'
    >>> adjust_color("#000000", -100)
    '#000000'
    """
    if not HEX_COLOR_PATTERN.match(color):
        raise ValueError(f"Not a 6-digit hex color: {color!r}")
    amount = round(2.55 * percent)
    value = int(color[1:], 16)
    channels = ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
    r, g, b = (max(0, min(255, c + amount)) for c in channels)
    return f"#{r:02x}{g:02x}{b:02x}"


def theme_variables(colors: BrandColors) -> dict[str, str]:
    """Return the CSS custom properties derived from ``colors``, in emission order."""
    return {
        "--primary": colors.primary,
        "--secondary": colors.secondary,
        "--accent": colors.accent,
        "--bg": colors.background,
        "--text": colors.text,
        "--text-light": adjust_color(colors.text, 40),
        "--primary-dark": adjust_color(colors.primary, -20),
        "--primary-light": adjust_color(colors.primary, 20),
    }


def css_variable_block(colors: BrandColors) -> str:
    """Render ``theme_variables`` as a ``:root { ... }`` rule."""
    lines = [f"  {name}: {value};" for name, value in theme_variables(colors).items()]
    return ":root {\n" + "\n".join(lines) + "\n}"


__all__ = ["adjust_color", "css_variable_block", "theme_variables"]
