"""Tests for the Typer CLI.

The page operations are patched where ``cli.main`` imported them, so no
HTTP traffic happens.
"""

from __future__ import annotations

import json

from typer.testing import CliRunner

from cli.main import app
from inspector.scraper.models import LinkMatch, SearchOutcome

runner = CliRunner()

_URL = "https://college.example.edu/timetable"


def test_section_found(monkeypatch):
    monkeypatch.setattr(
        "cli.main.search_text_in_section",
        lambda url, text, section: SearchOutcome(found=True, message="yes"),
    )
    result = runner.invoke(
        app,
        ["section", "--url", _URL, "--search-text", "Power", "--section", "Winter 2024"],
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"found": True, "message": "yes"}


def test_section_not_found_exits_nonzero(monkeypatch):
    monkeypatch.setattr(
        "cli.main.search_text_in_section",
        lambda url, text, section: SearchOutcome(found=False, message="no"),
    )
    result = runner.invoke(
        app,
        ["section", "--url", _URL, "--search-text", "Power", "--section", "Winter 2024"],
    )
    assert result.exit_code == 1


def test_links_lists_matches(monkeypatch):
    captured = {}

    def _fake(url, div_id, link_text):
        captured["args"] = (url, div_id, link_text)
        return [LinkMatch(text="Fifth Semester Notes", href="/notes/fifth")]

    monkeypatch.setattr("cli.main.find_specific_links_in_div", _fake)
    result = runner.invoke(
        app, ["links", "--url", _URL, "--div-id", "v-pills-all-1", "--link-text", "fifth"]
    )
    assert result.exit_code == 0
    assert captured["args"] == (_URL, "v-pills-all-1", "fifth")
    assert "1 link(s)" in result.stdout
    assert "/notes/fifth" in result.stdout


def test_links_none_found(monkeypatch):
    monkeypatch.setattr("cli.main.find_specific_links_in_div", lambda *a: [])
    result = runner.invoke(app, ["links", "--url", _URL, "--div-id", "x"])
    assert result.exit_code == 0
    assert "No links" in result.stdout


def test_result_prints_envelope(monkeypatch):
    monkeypatch.setattr(
        "cli.main.build_result",
        lambda request: {"status": "success", "url": request.url},
    )
    result = runner.invoke(app, ["result", "--url", _URL])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"status": "success", "url": _URL}
