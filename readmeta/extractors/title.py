"""Article title heuristic.

Used when the page carries no usable title in its meta tags.  Starting from
the document ``<title>``, site-name suffixes and section prefixes are cut
off (``"Story - Site"``, ``"Section: Story"``), falling back to a lone
``<h1>`` for titles that are implausibly long or short.  Whenever the
cleanup leaves four words or fewer without a good reason, the original
title wins.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from bs4 import BeautifulSoup, Tag

from readmeta import settings
from readmeta.document import document_title

from .dom import get_inner_text
from .patterns import (
    TITLE_DROP_FIRST_PART_RE,
    TITLE_DROP_LAST_PART_RE,
    TITLE_HIERARCHICAL_SEPARATOR_RE,
    TITLE_SEPARATOR_CHARS_RE,
    TITLE_SEPARATOR_RE,
    WHITESPACE_RUN_RE,
    normalize_spaces,
)

logger = logging.getLogger(__name__)


class TitleRead(NamedTuple):
    """Outcome of reading the raw title off a document."""

    text: str
    ok: bool


def word_count(text: str) -> int:
    """Count whitespace-separated tokens.

    Note: ``word_count("") == 1`` and leading/trailing whitespace adds an
    empty token.  The short-title checks below are calibrated on this.
    """
    return len(WHITESPACE_RUN_RE.split(text))


def read_title(document: BeautifulSoup) -> TitleRead:
    """Read ``<title>``, or the ``#title`` element when that is blank.

    Never raises: a failure yields ``TitleRead("", False)``.
    """
    try:
        title = document_title(document)
        if not title.strip():
            element = document.find(id="title")
            if isinstance(element, Tag):
                title = get_inner_text(element, normalize_spaces)
    except Exception as exc:
        logger.debug("Reading document title failed: %s", exc)
        return TitleRead("", False)
    return TitleRead(title, True)


def _heading_matches(document: BeautifulSoup, text: str) -> bool:
    return any(h.get_text() == text for h in document.find_all(["h1", "h2"]))


def _split_on_colon(orig_title: str) -> str:
    cur_title = orig_title[orig_title.rfind(":") + 1:]

    # Too short after the last colon: try the first one instead
    if word_count(cur_title) < 3:
        cur_title = orig_title[orig_title.find(":") + 1:]
    # Too many words before the colon, something odd is going on
    elif word_count(orig_title[: orig_title.find(":")]) > 5:
        cur_title = orig_title
    return cur_title


def derive_title(document: BeautifulSoup) -> str:
    """Derive a clean article title from the document's own title and headings."""
    read = read_title(document)
    orig_title = cur_title = read.text

    had_hierarchical_separators = False

    if TITLE_SEPARATOR_RE.search(cur_title):
        had_hierarchical_separators = bool(TITLE_HIERARCHICAL_SEPARATOR_RE.search(cur_title))
        cur_title = TITLE_DROP_LAST_PART_RE.sub(r"\1", orig_title)

        # Too few words left: drop the first part instead
        if word_count(cur_title) < 3:
            cur_title = TITLE_DROP_FIRST_PART_RE.sub(r"\1", orig_title)
    elif ": " in cur_title:
        # A heading with this exact text means the title is already the full title
        if not _heading_matches(document, cur_title):
            cur_title = _split_on_colon(orig_title)
    elif len(cur_title) > settings.TITLE_MAX_CHARS or len(cur_title) < settings.TITLE_MIN_CHARS:
        h_ones = document.find_all("h1")
        if len(h_ones) == 1:
            cur_title = get_inner_text(h_ones[0], normalize_spaces)

    cur_title = cur_title.strip()

    # Four words or fewer is only kept when a hierarchical separator was cut
    # and exactly one word went with it
    cur_word_count = word_count(cur_title)
    if cur_word_count <= 4 and (
        not had_hierarchical_separators
        or cur_word_count != word_count(TITLE_SEPARATOR_CHARS_RE.sub("", orig_title)) - 1
    ):
        logger.debug("Derived title %r too short, keeping %r", cur_title, orig_title)
        cur_title = orig_title

    return cur_title
