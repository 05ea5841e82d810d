"""DOM traversal primitives shared by the readability stages.

Stateless helpers over BeautifulSoup nodes.  None of them raise on a
well-formed tree; the removal helpers log what they take out at DEBUG level.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from bs4 import NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from readmeta import settings

from .patterns import is_whitespace_text

logger = logging.getLogger(__name__)

PHRASING_ELEMS: frozenset[str] = frozenset(
    {
        "abbr", "audio", "b", "bdo", "br", "button", "cite", "code", "data",
        "datalist", "dfn", "em", "embed", "i", "img", "input", "kbd", "label",
        "mark", "math", "meter", "noscript", "object", "output", "progress", "q",
        "ruby", "samp", "script", "select", "small", "span", "strong", "sub",
        "sup", "textarea", "time", "var", "wbr",
    },
)

# Inline only when everything inside them is
_TRANSPARENT_ELEMS: frozenset[str] = frozenset({"a", "del", "ins"})


# ---------------------------------------------------------------------------
# Node classification
# ---------------------------------------------------------------------------

def is_text_node(node: PageElement | None) -> bool:
    """True for character data; comments, CDATA and doctypes don't count."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def _normal_name(node: PageElement) -> str:
    if isinstance(node, Tag):
        return (node.name or "").lower()
    return ""


def is_whitespace(node: PageElement) -> bool:
    if is_text_node(node):
        return not str(node).strip()
    return isinstance(node, Tag) and _normal_name(node) == "br"


def is_phrasing_content(node: PageElement) -> bool:
    if is_text_node(node):
        return True
    if not isinstance(node, Tag):
        return False
    name = _normal_name(node)
    if name in PHRASING_ELEMS:
        return True
    return name in _TRANSPARENT_ELEMS and all(
        is_phrasing_content(child) for child in node.children
    )


def next_element(
    node: PageElement | None,
    whitespace_test: Callable[[str], bool] = is_whitespace_text,
) -> Tag | None:
    """Find the next element starting at *node*, skipping whitespace text.

    If *node* is an element it is returned as-is.  Traversal stops at the
    first node that is neither an element nor whitespace-only text.
    """
    current = node
    while (
        current is not None
        and is_text_node(current)
        and whitespace_test(str(current))
    ):
        current = current.next_sibling
    return current if isinstance(current, Tag) else None


def get_inner_text(
    element: Tag,
    normalizer: Callable[[str], str] | None = None,
    normalize_spaces: bool = True,
) -> str:
    """Return the trimmed text content of *element*.

    When a *normalizer* is given (and *normalize_spaces* is left on) it is
    applied to the trimmed text, typically to collapse whitespace runs.
    """
    text_content = element.get_text().strip()
    if normalize_spaces and normalizer is not None:
        return normalizer(text_content)
    return text_content


# ---------------------------------------------------------------------------
# Tree mutation
# ---------------------------------------------------------------------------

def log_node_info(node: PageElement, reason: str, truncate: bool | None = None) -> None:
    if truncate is None:
        truncate = settings.TRUNCATE_LOG_OUTPUT
    markup = str(node)
    if truncate:
        node_str = markup[: settings.LOG_TRUNCATE_CHARS].replace("\n", "")
    else:
        node_str = "\n------\n" + markup + "\n------\n"
    logger.debug("%s [%s]", reason, node_str)


def print_and_remove(node: PageElement, reason: str) -> None:
    """Detach *node* from its parent, logging it first.  Detached nodes are ignored."""
    if node.parent is not None:
        log_node_info(node, reason)
        node.extract()


def remove_nodes(
    element: Tag,
    tag_name: str,
    filter_function: Callable[[Tag], bool] | None = None,
) -> None:
    """Remove every descendant *tag_name* element accepted by *filter_function*.

    Candidates are visited in reverse document order so nested matches are
    taken out innermost first.
    """
    for child in reversed(element.find_all(tag_name)):
        if child.parent is None:
            continue
        if filter_function is None or filter_function(child):
            print_and_remove(child, f"removeNode('{tag_name}')")


def replace_nodes(element: Tag, tag_name: str, new_tag_name: str) -> None:
    """Rename every descendant *tag_name* element to *new_tag_name* in place."""
    for child in element.find_all(tag_name):
        child.name = new_tag_name
