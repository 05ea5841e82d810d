"""Meta-tag metadata extraction.

Every ``<meta>`` element is scanned once.  Tags whose ``property`` or
``name`` attribute looks like a Dublin Core, Open Graph, Twitter Card or
Weibo field are collected into a key → content map (last tag wins per key),
then each output field takes the first key present from its priority list:

    title:   dc → dcterm → og → weibo:article → weibo:webpage → plain → twitter
    excerpt: same order, ``description`` field
    byline:  dc:creator → dcterm:creator → author

A missing or blank title falls back to :func:`~readmeta.extractors.title.derive_title`.
"""

from __future__ import annotations

import logging
from typing import Any

import dateparser
from bs4 import BeautifulSoup, Tag

from readmeta import settings
from readmeta.document import document_charset, ensure_document
from readmeta.items import ArticleMetadata

from .entities import unescape_html_entities
from .patterns import NAME_PATTERN, PROPERTY_PATTERN, WHITESPACE_RUN_RE
from .title import derive_title

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Field priority lists (first key present wins)
# ---------------------------------------------------------------------------

_EXCERPT_KEYS: tuple[str, ...] = (
    "dc:description",
    "dcterm:description",
    "og:description",
    "weibo:article:description",
    "weibo:webpage:description",
    "description",
    "twitter:description",
)

_TITLE_KEYS: tuple[str, ...] = (
    "dc:title",
    "dcterm:title",
    "og:title",
    "weibo:article:title",
    "weibo:webpage:title",
    "title",
    "twitter:title",
)

_BYLINE_KEYS: tuple[str, ...] = (
    "dc:creator",
    "dcterm:creator",
    "author",
)

_SITE_NAME_KEYS: tuple[str, ...] = (
    "og:site_name",
    "site_name",
    "twitter:site_name",
)

_PUBLISHED_TIME_KEYS: tuple[str, ...] = (
    "article:published_time",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _safe_str(val: Any, default: str = "") -> str:
    """Flatten an attribute value; multi-valued attributes come back as lists."""
    if val is None:
        return default
    if isinstance(val, list):
        return " ".join(str(v) for v in val)
    return str(val)


def _first_present(values: dict[str, str], keys: tuple[str, ...]) -> str | None:
    """Return the value of the first key in *keys* present in *values*.

    Presence is what counts: an empty string stored under an earlier key
    still wins over later keys.
    """
    for key in keys:
        if key in values:
            return values[key]
    return None


def _parse_date(raw: str | None) -> str | None:
    """ISO 8601 form of *raw*, or None when unparseable or implausibly dated."""
    if not raw:
        return None
    raw = WHITESPACE_RUN_RE.sub(" ", raw.strip())
    try:
        parsed = dateparser.parse(
            raw,
            settings={
                "RETURN_AS_TIMEZONE_AWARE": True,
                "PREFER_DAY_OF_MONTH": "first",
                "PREFER_LOCALE_DATE_ORDER": False,
            },
        )
        if parsed:
            low, high = settings.PUBLISHED_YEAR_RANGE
            if not (low <= parsed.year <= high):
                return None
            return parsed.isoformat()
    except Exception as exc:
        logger.debug("Date parse failed for %r: %s", raw, exc)
    return None


# ---------------------------------------------------------------------------
# Harvesting
# ---------------------------------------------------------------------------

def _property_key(prop: str) -> str | None:
    match = PROPERTY_PATTERN.search(prop)
    if match is None:
        return None
    # Lowercase and drop whitespace so the priority lists can match
    return WHITESPACE_RUN_RE.sub("", match.group(0).lower())


def _name_key(name: str) -> str | None:
    if NAME_PATTERN.search(name) is None:
        return None
    return WHITESPACE_RUN_RE.sub("", name.lower()).replace(".", ":")


def collect_meta_values(document: BeautifulSoup) -> dict[str, str]:
    """Map normalized meta keys (``og:title``, ``dc:creator``…) to trimmed content."""
    values: dict[str, str] = {}

    for tag in document.find_all("meta"):
        if not isinstance(tag, Tag):
            continue
        content = _safe_str(tag.get("content"))
        if not content:
            continue

        element_property = _safe_str(tag.get("property"))
        element_name = _safe_str(tag.get("name"))

        key = _property_key(element_property) if element_property else None
        if key is None and element_name:
            key = _name_key(element_name)
        if key is None:
            continue

        values[key] = content.strip()

    logger.debug("Collected %d meta values: %s", len(values), sorted(values))
    return values


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_metadata(document: BeautifulSoup | str | bytes) -> ArticleMetadata:
    """Extract title, byline, excerpt and charset from *document*.

    Args:
        document: A parsed BeautifulSoup tree, or raw HTML which is parsed
                  with :func:`~readmeta.document.parse_document`.

    Returns:
        A frozen :class:`~readmeta.items.ArticleMetadata`.  The tree is not
        modified.
    """
    soup = ensure_document(document)
    values = collect_meta_values(soup)

    excerpt = _first_present(values, _EXCERPT_KEYS)

    title = _first_present(values, _TITLE_KEYS)
    if title is None or not title.strip():
        title = derive_title(soup)

    byline = _first_present(values, _BYLINE_KEYS)
    site_name = _first_present(values, _SITE_NAME_KEYS)

    raw_published = _first_present(values, _PUBLISHED_TIME_KEYS)
    published_time = _parse_date(raw_published) or raw_published or None

    # Meta values are frequently entity-escaped a second time
    return ArticleMetadata(
        title=unescape_html_entities(title),
        byline=unescape_html_entities(byline),
        excerpt=unescape_html_entities(excerpt),
        charset=document_charset(soup),
        site_name=unescape_html_entities(site_name),
        published_time=published_time,
    )
