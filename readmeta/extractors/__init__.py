"""Extraction sub-package: meta-tag harvesting, title heuristic and DOM helpers."""

from .dom import (
    PHRASING_ELEMS,
    get_inner_text,
    is_phrasing_content,
    is_text_node,
    is_whitespace,
    next_element,
    print_and_remove,
    remove_nodes,
    replace_nodes,
)
from .entities import unescape_html_entities
from .metadata import collect_meta_values, extract_metadata
from .title import TitleRead, derive_title, read_title, word_count

__all__ = [
    "PHRASING_ELEMS",
    "TitleRead",
    "collect_meta_values",
    "derive_title",
    "extract_metadata",
    "get_inner_text",
    "is_phrasing_content",
    "is_text_node",
    "is_whitespace",
    "next_element",
    "print_and_remove",
    "read_title",
    "remove_nodes",
    "replace_nodes",
    "unescape_html_entities",
    "word_count",
]
