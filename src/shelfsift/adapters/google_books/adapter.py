"""Google Books adapter — Book and magazine metadata via the Books Volumes API.

Connects to the public Google Books API using ``httpx`` (async).

API reference:
  GET {base_url}volumes
    ?q=<query>
    &key=<api key>
    &maxResults=<page size>
    &startIndex=<zero-based offset>

https://developers.google.com/books/docs/v1/using

Usage::

    adapter = GoogleBooksAdapter(GoogleBooksSettings(api_key="..."))
    await adapter.initialize()
    request = adapter.parse_search_arguments("dune", semantic_search_field="title", per_page=20)
    results = await adapter.search(request)
"""

from __future__ import annotations

import logging
import re
from typing import Any
from urllib.parse import quote_plus

import httpx
from pydantic import ValidationError

from shelfsift.adapters.base.adapter import DEFAULT_PER_PAGE, SearchAdapter, SemanticField
from shelfsift.adapters.base.exceptions import ConnectionError
from shelfsift.adapters.google_books.schema import Volume, VolumesResponse
from shelfsift.config.settings import GoogleBooksSettings
from shelfsift.models.query import SearchRequest
from shelfsift.models.result import ErrorInfo, ItemFormat, ResultItem, ResultSet
from shelfsift.text.sanitize import sanitize

logger = logging.getLogger(__name__)

# Transport failures reported as soft errors. Anything else propagates.
TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (
    TimeoutError,
    httpx.TimeoutException,
    httpx.UnsupportedProtocol,
    httpx.InvalidURL,
    httpx.RemoteProtocolError,
    httpx.DecodingError,
)

_TOKEN_RE = re.compile(r'\s|("[^"]+")')
_YEAR_RE = re.compile(r"[0-9]{4}")
_KEY_PARAM_RE = re.compile(r"([?&]key=)[^&]*")


def fielded_query(query: str, field: str) -> str:
    """Scope every token of *query* to *field*, as Google's own search form does.

    Double-quoted phrases stay a single token, quotes included::

        >>> fielded_query('"to be" or not', "intitle")
        'intitle:"to be" intitle:or intitle:not'
    """
    tokens = [token for token in _TOKEN_RE.split(query) if token and not token.isspace()]
    return " ".join(f"{field}:{token}" for token in tokens)


def parse_year(date: str | None) -> int | None:
    """Year of an ISO-8601-ish date string, if it starts with four digits."""
    if not date:
        return None
    match = _YEAR_RE.match(date)
    return int(match.group()) if match else None


class GoogleBooksAdapter(SearchAdapter):
    """Search adapter for the Google Books Volumes API.

    Provides:
      - Free-text and fielded search (``intitle:``, ``inauthor:`` ...)
      - Offset pagination up to 100 results per page
      - Normalized titles, links, sanitized abstracts, publication years
        and a book/serial format flag

    Remote failures (timeouts, non-2xx statuses, error payloads, unparseable
    bodies) never raise; they come back as ``ResultSet.error``.

    Args:
        settings: Adapter configuration. Built from ``**kwargs`` when omitted.
        **kwargs: Individual ``GoogleBooksSettings`` fields; override
            ``settings`` when both are given.
    """

    def __init__(self, settings: GoogleBooksSettings | None = None, **kwargs: Any) -> None:
        if kwargs:
            base = settings.model_dump() if settings else {}
            settings = GoogleBooksSettings(**{**base, **kwargs})
        self._settings = settings or GoogleBooksSettings()
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        return "google_books"

    @property
    def settings(self) -> GoogleBooksSettings:
        return self._settings

    async def initialize(self) -> None:
        """Validate configuration and create the HTTP client.

        Raises:
            ConfigurationError: If ``api_key`` is missing and key suppression
                is off.
        """
        if not self._settings.suppress_key:
            self.validate_configuration(self._settings.model_dump())

        self._client = httpx.AsyncClient(
            headers={"Accept": "application/json"},
            timeout=httpx.Timeout(self._settings.timeout),
        )
        logger.info(
            "Google Books adapter initialized (base_url=%s, suppress_key=%s)",
            self._settings.base_url,
            self._settings.suppress_key,
        )

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    # ── Capabilities ─────────────────────────────────────────────────────

    @classmethod
    def required_configuration(cls) -> list[str]:
        return ["api_key"]

    @classmethod
    def max_per_page(cls) -> int:
        return 100

    @classmethod
    def search_field_definitions(cls) -> dict[str, SemanticField]:
        return {
            "intitle": SemanticField.TITLE,
            "inauthor": SemanticField.AUTHOR,
            "inpublisher": SemanticField.PUBLISHER,
            "subject": SemanticField.SUBJECT,
            "isbn": SemanticField.ISBN,
        }

    # ── Search ───────────────────────────────────────────────────────────

    async def search(self, request: SearchRequest) -> ResultSet:
        """Run *request* against the Volumes API.

        Args:
            request: The normalized search request.

        Returns:
            Result set with items, or with ``error`` set if the search failed.

        Raises:
            ConnectionError: If the adapter has not been initialized.
        """
        if not self._client:
            raise ConnectionError("Google Books client not initialized.")

        url = self.build_search_url(request)
        logger.debug("Google Books search: %s", _redact_key(url))

        try:
            response = await self._client.get(url)
        except TRANSPORT_ERRORS as e:
            error = ErrorInfo(exception=f"{type(e).__name__}: {e}")
            logger.warning("Google Books request failed: %s", error.exception)
            return self._failed(request, error)

        outcome = self.classify_response(response)
        if isinstance(outcome, ErrorInfo):
            logger.warning(
                "Google Books search error: status=%s, message=%s",
                outcome.status,
                outcome.message,
            )
            return self._failed(request, outcome)

        results = self.assemble_results(outcome, request)
        logger.debug(
            "Google Books search: results=%d, total=%s",
            len(results.items),
            results.total_items,
        )
        return results

    def build_search_url(self, request: SearchRequest) -> str:
        """Build the full Volumes API URL for *request*.

        Paging parameters appear only when the request set them explicitly.
        """
        query = request.query
        if request.search_field:
            query = fielded_query(query, request.search_field)

        url = f"{self._settings.base_url}volumes?q={quote_plus(query)}"
        if not self._settings.suppress_key:
            url += f"&key={quote_plus(self._settings.api_key)}"
        if request.per_page is not None:
            url += f"&maxResults={request.per_page}"
        if request.start is not None:
            url += f"&startIndex={request.start}"
        return url

    @staticmethod
    def classify_response(response: httpx.Response) -> VolumesResponse | ErrorInfo:
        """Decide whether *response* is a usable result page.

        A response fails if its body is not a JSON object matching the
        Volumes schema, its status is not 2xx, or it carries a top-level
        ``error`` object.

        Returns:
            The parsed response, or the error details to report.
        """
        try:
            data = response.json()
        except ValueError:
            data = None

        error_obj = data.get("error") if isinstance(data, dict) else None

        if isinstance(data, dict) and "error" not in data and response.is_success:
            try:
                return VolumesResponse.model_validate(data)
            except ValidationError as e:
                logger.debug("Google Books response did not match schema: %s", e)

        message = None
        if isinstance(error_obj, dict):
            errors = error_obj.get("errors")
            if isinstance(errors, list) and errors and isinstance(errors[0], dict):
                message = ", ".join(str(v) for v in errors[0].values())

        return ErrorInfo(status=response.status_code, message=message, details=error_obj)

    # ── Schema mapping ───────────────────────────────────────────────────

    def assemble_results(self, response: VolumesResponse, request: SearchRequest) -> ResultSet:
        """Build the result set for a successful response page."""
        return ResultSet(
            items=[self.map_volume(volume) for volume in response.items or []],
            total_items=response.total_items,
            start=request.start or 0,
            per_page=request.per_page or DEFAULT_PER_PAGE,
        )

    @staticmethod
    def map_volume(volume: Volume) -> ResultItem:
        """Map one ``items`` entry, flat or nested, to a ``ResultItem``."""
        info = volume.info
        return ResultItem(
            title=info.title,
            subtitle=info.subtitle,
            link=info.canonical_volume_link,
            abstract=sanitize(info.description),
            year_published=parse_year(info.published_date),
            format=ItemFormat.SERIAL if info.print_type == "MAGAZINE" else ItemFormat.BOOK,
        )

    @staticmethod
    def _failed(request: SearchRequest, error: ErrorInfo) -> ResultSet:
        return ResultSet(
            start=request.start or 0,
            per_page=request.per_page or DEFAULT_PER_PAGE,
            error=error,
        )


def _redact_key(url: str) -> str:
    return _KEY_PARAM_RE.sub(r"\1<redacted>", url)
