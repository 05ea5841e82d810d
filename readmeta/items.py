"""Pydantic output schema for extracted article metadata."""

from __future__ import annotations

from pydantic import BaseModel

from readmeta import settings


class ArticleMetadata(BaseModel):
    """Metadata harvested from a single document.  Immutable once built."""

    model_config = {"frozen": True}

    title: str | None = None
    byline: str | None = None
    excerpt: str | None = None
    charset: str = settings.DEFAULT_CHARSET

    # Open Graph / Dublin Core extras
    site_name: str | None = None
    published_time: str | None = None  # ISO 8601 when parseable, else as authored
