"""Base search adapter — Abstract interface for all metadata provider connectors.

Every provider must implement this interface to plug into an aggregator.
The adapter is responsible for:
  1. Translating a normalized ``SearchRequest`` into a provider query
  2. Executing that query against the provider
  3. Mapping the provider's response to a ``ResultSet``
  4. Declaring its capabilities (required config, page size, search fields)

Argument normalization shared by all adapters lives here too, in
``parse_search_arguments()``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from typing import Any

from shelfsift.adapters.base.exceptions import ConfigurationError, InvalidSearchArgumentsError
from shelfsift.models.query import SearchRequest
from shelfsift.models.result import ResultSet

logger = logging.getLogger(__name__)

DEFAULT_PER_PAGE = 10


class SemanticField(str, Enum):
    """Provider-independent meaning of a search field."""

    TITLE = "title"
    AUTHOR = "author"
    PUBLISHER = "publisher"
    SUBJECT = "subject"
    ISBN = "isbn"


class SearchAdapter(ABC):
    """Abstract base class for metadata provider adapters.

    All adapters must implement:
      - name: Unique adapter name used by the registry
      - initialize() / shutdown(): Manage the HTTP client lifecycle
      - search(): Execute a normalized request and return a ``ResultSet``

    Capability declarations (``required_configuration``, ``max_per_page``,
    ``search_field_definitions``) are classmethods so an aggregator can
    inspect them without instantiating the adapter.

    Adapters hold only read-only configuration between calls, so a single
    instance may serve concurrent searches.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique adapter name (e.g., 'google_books')."""

    @abstractmethod
    async def initialize(self) -> None:
        """Validate configuration and open connections.

        Called once before the first search.
        """

    @abstractmethod
    async def shutdown(self) -> None:
        """Release connections. Called once during application shutdown."""

    @abstractmethod
    async def search(self, request: SearchRequest) -> ResultSet:
        """Execute a search against the provider.

        Provider failures (bad status, error payloads, timeouts) are
        reported through ``ResultSet.error``; only unexpected failures raise.

        Args:
            request: The normalized search request.

        Returns:
            The populated or failed result set.
        """

    # ── Capabilities ─────────────────────────────────────────────────────

    @classmethod
    def required_configuration(cls) -> list[str]:
        """Configuration keys that must be set before the adapter can run."""
        return []

    @classmethod
    def max_per_page(cls) -> int:
        return 100

    @classmethod
    def search_field_definitions(cls) -> dict[str, SemanticField]:
        """Map of provider search field name to its semantic meaning."""
        return {}

    @classmethod
    def semantic_search_field(cls, semantic: SemanticField | str) -> str | None:
        """Find the provider field name for a semantic field, if supported."""
        semantic = SemanticField(semantic) if not isinstance(semantic, SemanticField) else semantic
        for field_name, meaning in cls.search_field_definitions().items():
            if meaning == semantic:
                return field_name
        return None

    @classmethod
    def validate_configuration(cls, config: Mapping[str, Any]) -> None:
        """Check that every required configuration key has a value.

        Raises:
            ConfigurationError: Listing the missing keys.
        """
        missing = [key for key in cls.required_configuration() if not config.get(key)]
        if missing:
            raise ConfigurationError(f"{cls.__name__} is missing required configuration: {', '.join(missing)}")

    # ── Argument normalization ───────────────────────────────────────────

    def parse_search_arguments(
        self,
        query: str,
        *,
        search_field: str | None = None,
        semantic_search_field: SemanticField | str | None = None,
        start: int | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> SearchRequest:
        """Normalize caller arguments into a ``SearchRequest``.

        Args:
            query: Free-text query.
            search_field: Provider-specific field name, passed through as-is.
            semantic_search_field: Semantic field, mapped through
                ``search_field_definitions()``.
            start: Zero-based offset. Mutually exclusive with ``page``.
            page: One-based page number, converted to ``start``.
            per_page: Page size, clamped to ``max_per_page()``.

        Returns:
            The normalized request. Values the caller did not supply stay
            ``None``.

        Raises:
            InvalidSearchArgumentsError: On conflicting or out-of-range
                arguments, or an unsupported semantic field.
        """
        if search_field and semantic_search_field:
            raise InvalidSearchArgumentsError("Pass either search_field or semantic_search_field, not both")

        if semantic_search_field:
            try:
                search_field = self.semantic_search_field(semantic_search_field)
            except ValueError as e:
                raise InvalidSearchArgumentsError(f"Unknown semantic search field: {semantic_search_field}") from e
            if search_field is None:
                raise InvalidSearchArgumentsError(
                    f"Adapter '{self.name}' does not support semantic search field '{semantic_search_field}'. "
                    f"Supported: {sorted(str(v.value) for v in self.search_field_definitions().values())}"
                )

        if per_page is not None:
            if per_page < 1:
                raise InvalidSearchArgumentsError(f"per_page must be positive, got {per_page}")
            if per_page > self.max_per_page():
                logger.warning(
                    "per_page=%d exceeds maximum for %s, clamping to %d",
                    per_page,
                    self.name,
                    self.max_per_page(),
                )
                per_page = self.max_per_page()

        if page is not None:
            if start is not None:
                raise InvalidSearchArgumentsError("Pass either start or page, not both")
            if page < 1:
                raise InvalidSearchArgumentsError(f"page must be 1 or greater, got {page}")
            start = (page - 1) * (per_page or DEFAULT_PER_PAGE)

        if start is not None and start < 0:
            raise InvalidSearchArgumentsError(f"start must not be negative, got {start}")

        return SearchRequest(query=query, search_field=search_field, start=start, per_page=per_page)
