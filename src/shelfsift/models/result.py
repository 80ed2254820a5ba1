"""Result models — Provider-agnostic search results.

Every adapter returns a ``ResultSet``. A search either succeeds (``items`` and
``total_items`` populated) or fails softly (``error`` populated); the two
outcomes are mutually exclusive.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ItemFormat(str, Enum):
    """Bibliographic format of a result item."""

    BOOK = "Book"
    SERIAL = "Serial"


class ErrorInfo(BaseModel):
    """Details of a failed search, extracted on a best-effort basis."""

    exception: str | None = Field(default=None, description="Transport error description")
    status: int | None = Field(default=None, description="HTTP status code, if a response was received")
    message: str | None = Field(default=None, description="Error message reported by the remote API")
    details: Any = Field(default=None, description="Raw error object from the response body")


class ResultItem(BaseModel):
    """A single normalized search hit."""

    title: str | None = None
    subtitle: str | None = None
    link: str | None = None
    abstract: str | None = Field(default=None, description="Sanitized description, safe for display")
    year_published: int | None = None
    format: ItemFormat = ItemFormat.BOOK


class ResultSet(BaseModel):
    """Outcome of one adapter search call."""

    items: list[ResultItem] = Field(default_factory=list)
    total_items: int | None = None
    start: int = 0
    per_page: int = 10
    error: ErrorInfo | None = None

    @model_validator(mode="after")
    def _error_excludes_results(self) -> ResultSet:
        if self.error is not None and (self.items or self.total_items is not None):
            raise ValueError("A failed result set cannot carry items or total_items")
        return self

    @property
    def failed(self) -> bool:
        return self.error is not None
