"""Tests for the typer CLI."""

import json
from contextlib import contextmanager
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from newsdash.cli.app import app
from newsdash.ingestion import BatchFetchResult, FetchResult

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("ingestion:\n  max_sources: 10\n")
    monkeypatch.setenv("NEWSDASH_CONFIG", str(path))
    return path


@pytest.fixture
def database(config_file, mock_conn):
    @contextmanager
    def fake_connection(db_config):
        yield mock_conn

    with patch("newsdash.cli.common.get_connection", fake_connection):
        yield mock_conn


def test_missing_config_exits(tmp_path, monkeypatch):
    monkeypatch.setenv("NEWSDASH_CONFIG", str(tmp_path / "absent.yaml"))

    result = runner.invoke(app, ["fetch"])

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_settings_set_rejects_non_number(database):
    result = runner.invoke(app, ["settings", "set", "--retention-days", "abc"])

    assert result.exit_code == 1
    assert "must be a number" in result.output
    database.commit.assert_not_called()


def test_settings_show_uses_default(database):
    result = runner.invoke(app, ["settings", "show"])

    assert result.exit_code == 0
    assert "7" in result.output


def test_fetch_json(database):
    batch = BatchFetchResult(
        total_sources=1,
        results=[FetchResult(source_id=1, source_name="Blog", created=3, skipped=2)],
    )
    with patch("newsdash.cli.fetch.BatchOrchestrator") as orchestrator_cls:
        orchestrator_cls.return_value.fetch_all.return_value = batch

        result = runner.invoke(app, ["fetch", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["success"] is True
    assert payload["total_sources"] == 1
    assert payload["results"][0]["created"] == 3


def test_cleanup_rejects_out_of_range(database):
    result = runner.invoke(app, ["cleanup", "--days", "0"])

    assert result.exit_code == 1
    assert "at least 1" in result.output


def test_sources_add_over_limit(database):
    database.cur.fetchone.return_value = {"count": 10}

    result = runner.invoke(app, ["sources", "add", "--name", "Blog", "--url", "https://example.com/rss"])

    assert result.exit_code == 1
    assert "Maximum sources limit" in result.output


def test_draft_shows_usage(database, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    database.cur.fetchone.side_effect = [
        {
            "id": 5,
            "title": "Rust 2.0",
            "link": "https://example.com/rust",
            "source_id": 1,
            "status": "visible",
            "tags": ["Rust"],
            "is_favorite": False,
        },
        {"id": 1, "name": "Slack", "template": "Share {{title}}", "is_default": True},
    ]

    result = runner.invoke(app, ["draft", "5"])

    assert result.exit_code == 0
    assert "[Mock draft]" in result.output
    assert "Tokens used: 100" in result.output
