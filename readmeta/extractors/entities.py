"""HTML entity unescaping for meta-tag values.

Many sites entity-escape their ``content`` attributes a second time, so the
parser hands us ``&amp;amp;`` style leftovers.  Only the five XML entities
and short numeric references are handled.
"""

from __future__ import annotations

import re

from .patterns import NUMERIC_ENTITY_RE

# Applied in this order; each pass runs over the whole string
_NAMED_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&quot;", '"'),
    ("&amp;", "&"),
    ("&apos;", "'"),
    ("&lt;", "<"),
    ("&gt;", ">"),
)


def _numeric_reference(match: re.Match[str]) -> str:
    hex_digits, decimal_digits = match.group(1), match.group(2)
    if hex_digits:
        return chr(int(hex_digits, 16))
    if decimal_digits:
        return chr(int(decimal_digits))
    return chr(0)


def unescape_html_entities(text: str | None) -> str | None:
    """Replace named and numeric character references in *text*.

    ``None`` and the empty string are returned unchanged.
    """
    if not text:
        return text
    for entity, char in _NAMED_ENTITIES:
        text = text.replace(entity, char)
    return NUMERIC_ENTITY_RE.sub(_numeric_reference, text)
