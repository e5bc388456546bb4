"""SVG status badge rendering.

Produces a flat two-part badge ("slack | 3/42") in the style of the common
README badges, without external rendering services.
"""

from html import escape
from typing import Optional

from modules.slackin.models import UsersOnline

LABEL = "slack"
LABEL_COLOR = "#555"
VALUE_COLOR = "#E01563"
UNAVAILABLE_COLOR = "#9F9F9F"
UNAVAILABLE_VALUE = "-"

# Approximate advance of an 11px Verdana glyph
CHAR_WIDTH = 7
PADDING = 10

BADGE_TEMPLATE = """<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="20" role="img" aria-label="{label}: {value}">
<title>{label}: {value}</title>
<linearGradient id="s" x2="0" y2="100%"><stop offset="0" stop-color="#bbb" stop-opacity=".1"/><stop offset="1" stop-opacity=".1"/></linearGradient>
<clipPath id="r"><rect width="{width}" height="20" rx="3" fill="#fff"/></clipPath>
<g clip-path="url(#r)">
<rect width="{label_width}" height="20" fill="{label_color}"/>
<rect x="{label_width}" width="{value_width}" height="20" fill="{value_color}"/>
<rect width="{width}" height="20" fill="url(#s)"/>
</g>
<g fill="#fff" text-anchor="middle" font-family="Verdana,Geneva,DejaVu Sans,sans-serif" font-size="11">
<text x="{label_x}" y="15" fill="#010101" fill-opacity=".3">{label}</text>
<text x="{label_x}" y="14">{label}</text>
<text x="{value_x}" y="15" fill="#010101" fill-opacity=".3">{value}</text>
<text x="{value_x}" y="14">{value}</text>
</g>
</svg>
"""


def text_width(text: str) -> int:
    """Estimated rendered width of a badge segment, padding included."""
    return len(text) * CHAR_WIDTH + PADDING


def render_badge(
    value: str,
    label: str = LABEL,
    value_color: str = VALUE_COLOR,
    label_color: str = LABEL_COLOR,
) -> bytes:
    """Render a two-part badge.

    Args:
        value: Right-hand text.
        label: Left-hand text (default: "slack").
        value_color: Fill of the right-hand part.
        label_color: Fill of the left-hand part.

    Returns:
        UTF-8 encoded SVG document.
    """
    label_width = text_width(label)
    value_width = text_width(value)
    svg = BADGE_TEMPLATE.format(
        width=label_width + value_width,
        label_width=label_width,
        value_width=value_width,
        label_x=label_width / 2,
        value_x=label_width + value_width / 2,
        label=escape(label),
        value=escape(value),
        label_color=label_color,
        value_color=value_color,
    )
    return svg.encode("utf-8")


def render_users_badge(users: Optional[UsersOnline]) -> bytes:
    """Render the online users badge, "active/total" or "-" when unknown."""
    if users is None:
        return render_badge(UNAVAILABLE_VALUE, value_color=UNAVAILABLE_COLOR)
    return render_badge(f"{users.active}/{users.total}")
