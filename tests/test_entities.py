"""Tests for readmeta.extractors.entities."""

from __future__ import annotations

import pytest

from readmeta.extractors.entities import unescape_html_entities


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("A &amp; B", "A & B"),
        ("&#65;", "A"),
        ("&#x41;", "A"),
        ("&quot;Quoted&quot; &lt;b&gt; it&apos;s", "\"Quoted\" <b> it's"),
        ("caf&#233; &#x2014; bar", "café — bar"),
    ],
)
def test_unescape(raw, expected):
    assert unescape_html_entities(raw) == expected


def test_none_passes_through():
    assert unescape_html_entities(None) is None


def test_empty_passes_through():
    assert unescape_html_entities("") == ""


def test_named_pass_runs_before_numeric():
    # "&amp;" is resolved first, exposing references for the later passes
    assert unescape_html_entities("&amp;lt;") == "<"
    assert unescape_html_entities("&amp;#65;") == "A"


def test_unsupported_references_left_alone():
    assert unescape_html_entities("&#X41;") == "&#X41;"
    assert unescape_html_entities("&#12345;") == "&#12345;"
    assert unescape_html_entities("&nbsp;&copy;") == "&nbsp;&copy;"


def test_plain_text_unchanged():
    assert unescape_html_entities("Nothing to see here") == "Nothing to see here"
