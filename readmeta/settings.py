"""Extraction settings for readmeta.

Plain module-level constants; functions that depend on them accept keyword
overrides so callers never need to patch this module.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
# BeautifulSoup tree builder used by parse_document()
DEFAULT_PARSER = "lxml"

# Reported when the tree was built from str input (no encoding was detected)
DEFAULT_CHARSET = "utf-8"

# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------
# When True, removed-node markup in debug logs is cut to LOG_TRUNCATE_CHARS
TRUNCATE_LOG_OUTPUT = False
LOG_TRUNCATE_CHARS = 80

# ---------------------------------------------------------------------------
# Title heuristic
# ---------------------------------------------------------------------------
# Titles outside this length range are replaced by a lone <h1>, if any
TITLE_MIN_CHARS = 15
TITLE_MAX_CHARS = 150

# ---------------------------------------------------------------------------
# Published time
# ---------------------------------------------------------------------------
# Parsed dates outside this range are treated as bogus (epoch defaults etc.)
PUBLISHED_YEAR_RANGE = (1990, 2099)
