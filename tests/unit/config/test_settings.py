"""Tests for application settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from shelfsift.config.settings import GoogleBooksSettings, Settings


class TestGoogleBooksSettings:
    def test_defaults(self) -> None:
        s = GoogleBooksSettings()
        assert s.api_key == ""
        assert s.base_url == "https://www.googleapis.com/books/v1/"
        assert s.suppress_key is False
        assert s.timeout == 30.0

    def test_base_url_gets_trailing_slash(self) -> None:
        assert GoogleBooksSettings(base_url="http://localhost/books").base_url == "http://localhost/books/"

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            GoogleBooksSettings(timeout=0)


class TestSettings:
    def test_fixture(self, settings: Settings) -> None:
        assert settings.debug is True
        assert settings.google_books.api_key == "test-key"
        assert settings.observability.log_format == "json"

    def test_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHELFSIFT_GOOGLE_BOOKS__API_KEY", "env-key")
        monkeypatch.setenv("SHELFSIFT_GOOGLE_BOOKS__SUPPRESS_KEY", "true")
        monkeypatch.setenv("SHELFSIFT_OBSERVABILITY__LOG_LEVEL", "debug")

        s = Settings(_env_file=None)  # type: ignore[call-arg]

        assert s.google_books.api_key == "env-key"
        assert s.google_books.suppress_key is True
        assert s.observability.log_level == "debug"

    def test_from_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "shelfsift.yaml"
        config.write_text(
            "google_books:\n"
            "  api_key: yaml-key\n"
            "  timeout: 12.5\n"
            "observability:\n"
            "  log_format: console\n"
        )

        s = Settings.from_yaml(config)

        assert s.google_books.api_key == "yaml-key"
        assert s.google_books.timeout == 12.5
        assert s.observability.log_format == "console"

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "missing.yaml")
