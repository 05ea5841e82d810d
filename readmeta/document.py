"""Document tree helpers: parsing plus the title and charset accessors.

readmeta works on ``bs4.BeautifulSoup`` trees.  Callers that already hold a
parsed tree pass it straight through; raw markup is parsed here with the
``lxml`` tree builder.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag

from readmeta import settings

logger = logging.getLogger(__name__)

# ASCII whitespace plus the no-break space (&nbsp;)
_TITLE_WHITESPACE_CHARS = " \t\n\f\r\xa0"
_TITLE_WHITESPACE_RE = re.compile(f"[{_TITLE_WHITESPACE_CHARS}]+")


def parse_document(html: str | bytes, parser: str | None = None) -> BeautifulSoup:
    """Parse *html* into a BeautifulSoup tree.

    Bytes input goes through encoding detection, and the detected encoding
    is later reported by :func:`document_charset`.
    """
    return BeautifulSoup(html, parser or settings.DEFAULT_PARSER)


def ensure_document(document: BeautifulSoup | str | bytes) -> BeautifulSoup:
    if isinstance(document, BeautifulSoup):
        return document
    return parse_document(document)


def document_title(document: BeautifulSoup) -> str:
    """Return the text of the first ``<title>`` element, whitespace-collapsed."""
    title_tag = document.title
    if not isinstance(title_tag, Tag):
        return ""
    return _TITLE_WHITESPACE_RE.sub(" ", title_tag.get_text()).strip(_TITLE_WHITESPACE_CHARS)


def document_charset(document: BeautifulSoup) -> str:
    """Return the encoding detected while parsing, or the configured default."""
    encoding = getattr(document, "original_encoding", None)
    if not encoding:
        logger.debug("No detected encoding, using %s", settings.DEFAULT_CHARSET)
        return settings.DEFAULT_CHARSET
    return str(encoding)
