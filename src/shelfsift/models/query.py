"""Search request model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SearchRequest(BaseModel):
    """Normalized search request handed to an adapter.

    Produced by ``SearchAdapter.parse_search_arguments()``. Optional fields
    stay ``None`` unless the caller asked for them explicitly; adapters apply
    their own defaults when assembling results.
    """

    model_config = ConfigDict(frozen=True)

    query: str = Field(description="Free-text query")
    search_field: str | None = Field(default=None, description="Adapter-specific field to scope the query to")
    start: int | None = Field(default=None, ge=0, description="Zero-based offset of the first result")
    per_page: int | None = Field(default=None, ge=1, le=100, description="Number of results per page")
