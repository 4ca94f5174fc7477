"""Tests for the Faleproxy CLI commands."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest
import respx
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the CLI from reconfiguring the root logger during tests."""
    monkeypatch.setattr("cli.main.configure_logging", lambda *args, **kwargs: None)


class TestTransformCommand:
    def test_transforms_file(self, tmp_path):
        page = tmp_path / "page.html"
        page.write_text('<p><a href="https://yale.edu">Yale</a></p>', encoding="utf-8")

        result = runner.invoke(app, ["transform", "--file", str(page)])
        assert result.exit_code == 0
        assert '<p><a href="https://yale.edu">Fale</a></p>' in result.stdout

    def test_transforms_stdin(self):
        result = runner.invoke(app, ["transform"], input="<p>yale</p>")
        assert result.exit_code == 0
        assert "<p>fale</p>" in result.stdout

    def test_missing_file_fails(self, tmp_path):
        result = runner.invoke(app, ["transform", "--file", str(tmp_path / "nope.html")])
        assert result.exit_code != 0


class TestRewriteCommand:
    def test_prints_rewritten_page(self):
        with respx.mock:
            respx.get("http://example.com/").mock(
                return_value=httpx.Response(200, text="<title>Yale</title><p>Yale</p>")
            )
            result = runner.invoke(app, ["rewrite", "--url", "example.com"])

        assert result.exit_code == 0
        assert "<title>Fale</title><p>Fale</p>" in result.stdout

    def test_title_only(self):
        with respx.mock:
            respx.get("http://example.com/").mock(
                return_value=httpx.Response(200, text="<title>Yale News</title><p>x</p>")
            )
            result = runner.invoke(app, ["rewrite", "--url", "example.com", "--title-only"])

        assert result.exit_code == 0
        assert "Fale News" in result.stdout
        assert "<p>x</p>" not in result.stdout

    def test_fetch_failure_exits_1(self):
        with respx.mock:
            respx.get("http://error.example.com/").mock(
                side_effect=httpx.ConnectError("Connection failed")
            )
            result = runner.invoke(app, ["rewrite", "--url", "error.example.com"])

        assert result.exit_code == 1
        assert "Failed to fetch content: Connection failed" in result.output


class TestServeCommand:
    def test_runs_uvicorn(self):
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--port", "4000"])

        assert result.exit_code == 0
        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args[0] == "faleproxy.api.app:app"
        assert kwargs["port"] == 4000
