"""Tests for the command-line entry point."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import pytest

from shelfsift.adapters.google_books.adapter import GoogleBooksAdapter
from shelfsift.cli import main
from shelfsift.models.query import SearchRequest
from shelfsift.models.result import ErrorInfo, ResultItem, ResultSet


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.delenv("SHELFSIFT_GOOGLE_BOOKS__API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)


class TestFieldsCommand:
    def test_lists_fields(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["fields"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert "intitle\ttitle" in out
        assert "isbn\tisbn" in out
        assert len(out) == 5


class TestSearchCommand:
    def test_prints_results(self, capsys: pytest.CaptureFixture[str]) -> None:
        results = ResultSet(items=[ResultItem(title="Dune", year_published=1965)], total_items=1)
        search = AsyncMock(return_value=results)

        with patch.object(GoogleBooksAdapter, "search", search):
            code = main(["search", "dune", "--semantic-field", "title", "--page", "2", "--per-page", "5", "--no-key"])

        assert code == 0
        request = search.await_args.args[0]
        assert request == SearchRequest(query="dune", search_field="intitle", start=5, per_page=5)
        data = json.loads(capsys.readouterr().out)
        assert data["total_items"] == 1
        assert data["items"][0]["title"] == "Dune"
        assert data["items"][0]["format"] == "Book"

    def test_failed_search_exits_nonzero(self, capsys: pytest.CaptureFixture[str]) -> None:
        failed = ResultSet(error=ErrorInfo(status=403, message="x, bad key"))

        with patch.object(GoogleBooksAdapter, "search", AsyncMock(return_value=failed)):
            code = main(["search", "dune", "--no-key"])

        assert code == 1
        data = json.loads(capsys.readouterr().out)
        assert data["error"]["status"] == 403

    def test_missing_api_key(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["search", "dune"]) == 2
        assert "api_key" in capsys.readouterr().err

    def test_invalid_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["search", "dune", "--semantic-field", "colour", "--no-key"]) == 2
        assert "Unknown semantic" in capsys.readouterr().err

    def test_config_file(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "config.yaml"
        config.write_text("google_books:\n  api_key: file-key\n")
        search = AsyncMock(return_value=ResultSet(total_items=0))

        with patch.object(GoogleBooksAdapter, "search", search):
            code = main(["--config", str(config), "search", "dune"])

        assert code == 0
        assert search.await_count == 1

    def test_missing_config_file(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--config", str(tmp_path / "nope.yaml"), "search", "dune"]) == 2
        assert "Config file not found" in capsys.readouterr().err
