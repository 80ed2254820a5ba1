"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any

import pytest

from shelfsift.config.settings import GoogleBooksSettings, Settings


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        debug=True,
        google_books={"api_key": "test-key"},
    )


@pytest.fixture
def google_books_settings() -> GoogleBooksSettings:
    return GoogleBooksSettings(api_key="test-key")


# ── Google Books payloads ────────────────────────────────────────────────────


@pytest.fixture
def nested_volume() -> dict[str, Any]:
    """A volume as returned by ``GET volumes`` (fields under ``volumeInfo``)."""
    return {
        "kind": "books#volume",
        "id": "zyTCAlFPjgYC",
        "volumeInfo": {
            "title": "The Google Story",
            "subtitle": "Inside the Hottest Business, Media, and Technology Success of Our Time",
            "authors": ["David A. Vise", "Mark Malseed"],
            "publishedDate": "2005-11-15",
            "description": "<p>Here is the story behind one of the most <b>remarkable</b> Internet successes.</p>",
            "printType": "BOOK",
            "canonicalVolumeLink": "https://books.google.com/books/about/The_Google_Story.html?id=zyTCAlFPjgYC",
        },
    }


@pytest.fixture
def flat_volume() -> dict[str, Any]:
    """A volume whose bibliographic fields sit directly on the entry."""
    return {
        "title": "Popular Science",
        "publishedDate": "1972-03",
        "description": "Monthly magazine.",
        "printType": "MAGAZINE",
        "canonicalVolumeLink": "https://books.google.com/books/about/Popular_Science.html?id=ps1972",
    }


@pytest.fixture
def volumes_response(nested_volume: dict, flat_volume: dict) -> dict[str, Any]:
    return {
        "kind": "books#volumes",
        "totalItems": 1245,
        "items": [nested_volume, flat_volume],
    }


@pytest.fixture
def api_error_object() -> dict[str, Any]:
    return {
        "errors": [{"reason": "x", "message": "bad key"}],
        "code": 403,
        "message": "bad key",
    }
