"""readmeta - article metadata and title extraction for readability pipelines.

Quick usage::

    from readmeta import extract_metadata

    meta = extract_metadata(html)
    print(meta.title, meta.byline, meta.excerpt, meta.charset)

Working on an already-parsed tree::

    from readmeta import derive_title, parse_document

    soup = parse_document(raw_bytes)
    meta = extract_metadata(soup)
    print(derive_title(soup))   # title heuristic only, ignores <meta> tags
"""

from readmeta.document import parse_document
from readmeta.extractors import derive_title, extract_metadata, unescape_html_entities
from readmeta.items import ArticleMetadata

__version__ = "0.1.0"
__all__ = [
    "ArticleMetadata",
    "derive_title",
    "extract_metadata",
    "parse_document",
    "unescape_html_entities",
]
