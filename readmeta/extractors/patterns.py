"""Compiled regular expressions shared by the extractors.

All patterns are compiled once at import time and never mutated.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Whitespace
# ---------------------------------------------------------------------------

_WHITESPACE_ONLY_RE = re.compile(r"^\s*$")
_MULTI_SPACE_RE = re.compile(r"\s{2,}")
WHITESPACE_RUN_RE = re.compile(r"\s+")

# ---------------------------------------------------------------------------
# <meta> harvesting
# ---------------------------------------------------------------------------

# property is a space-separated list of values; searched anywhere
PROPERTY_PATTERN = re.compile(
    r"\s*(article|dc|dcterm|og|twitter)\s*:\s*"
    r"(author|creator|description|published_time|title|site_name)\s*",
    re.IGNORECASE,
)

# name is a single value; must match the whole attribute
NAME_PATTERN = re.compile(
    r"^\s*(?:(dc|dcterm|og|twitter|weibo:(article|webpage))\s*[.:]\s*)?"
    r"(author|creator|description|title|site_name)\s*$",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------

NUMERIC_ENTITY_RE = re.compile(r"&#(?:x([0-9a-fA-F]{1,4})|([0-9]{1,4}));")

# ---------------------------------------------------------------------------
# Title heuristic
# ---------------------------------------------------------------------------

TITLE_SEPARATOR_RE = re.compile(r" [|\-/>»] ")
TITLE_HIERARCHICAL_SEPARATOR_RE = re.compile(r" [/>»] ")
TITLE_DROP_LAST_PART_RE = re.compile(r"(.*)[|\-/>»] .*", re.IGNORECASE)
TITLE_DROP_FIRST_PART_RE = re.compile(r"[^|\-/>»]*[|\-/>»](.*)", re.IGNORECASE)
TITLE_SEPARATOR_CHARS_RE = re.compile(r"[|\-/>»]+")


def normalize_spaces(text: str) -> str:
    """Turn no-break spaces into spaces, then collapse whitespace runs to one space."""
    return _MULTI_SPACE_RE.sub(" ", text.replace("\xa0", " "))


def is_whitespace_text(text: str) -> bool:
    return _WHITESPACE_ONLY_RE.match(text) is not None
