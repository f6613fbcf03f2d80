"""Tests for the HTTP surface.

``fetch_page`` is patched in the fetcher module so both operations read a
canned page; the FastAPI ``TestClient`` drives the catch-all route.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from inspector.api.app import create_app
from inspector.scraper.models import RawPage


_URL = "https://college.example.edu/timetable"

_PAGE = """\
<html><body>
  <section><h2>Winter 2024</h2><p>Electrical Power System</p></section>
  <div id="v-pills-all-1">
    <a href="/notes/fifth">Fifth Semester Notes</a>
    <a>Fifth Semester Syllabus</a>
    <a href="/notes/sixth">Sixth Semester Notes</a>
  </div>
</body></html>
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def fetched(monkeypatch):
    """Serve ``_PAGE`` (or a configured status) for every fetch; record URLs."""
    state = {"status": 200, "urls": []}

    def _fake_fetch(url: str) -> RawPage:
        state["urls"].append(url)
        return RawPage(url=url, html=_PAGE, status_code=state["status"])

    monkeypatch.setattr("inspector.scraper.fetcher.fetch_page", _fake_fetch)
    return state


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setattr("inspector.config.settings.identity_endpoint", "")
    with TestClient(create_app(), raise_server_exceptions=True) as c:
        yield c


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestPing:
    @pytest.mark.parametrize("method", ["get", "post", "put", "delete"])
    def test_pong_for_any_method(self, client, method) -> None:
        resp = client.request(method.upper(), "/ping")
        assert resp.status_code == 200
        assert resp.text == "Pong"
        assert resp.headers["content-type"].startswith("text/plain")

    def test_cross_origin_preflight_reaches_dispatcher(self, client) -> None:
        resp = client.options(
            "/ping",
            headers={
                "Origin": "https://dashboard.example.com",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert resp.status_code == 200
        assert resp.text == "Pong"

    def test_cross_origin_options_elsewhere_gets_info(self, client) -> None:
        resp = client.options(
            "/result",
            headers={
                "Origin": "https://dashboard.example.com",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert resp.status_code == 200
        assert resp.json()["status"] == "info"


class TestResult:
    def test_missing_url_is_bad_request(self, client, fetched) -> None:
        resp = client.get("/result")
        assert resp.status_code == 400
        assert resp.json()["status"] == "error"
        assert fetched["urls"] == []

    def test_url_only(self, client, fetched) -> None:
        resp = client.get("/result", params={"url": _URL})
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "success"
        assert data["url"] == _URL
        assert data["searchTextInWebsiteHtml"]["found"] is False
        assert data["searchTextInWebsiteHtml"]["message"].startswith("Skipped search")
        assert data["findSpecificLinksInDiv"] == {
            "linksFound": [],
            "message": "No links found matching the criteria.",
        }
        assert fetched["urls"] == []

    def test_full_inspection(self, client, fetched) -> None:
        resp = client.get(
            "/result",
            params={
                "url": _URL,
                "searchText": "power",
                "sectionIdentifier": "winter 2024",
                "divId": "v-pills-all-1",
                "linkTextToFind": "fifth",
            },
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["searchTextInWebsiteHtml"] == {
            "found": True,
            "message": 'Text "power" found within section "winter 2024".',
        }
        assert data["findSpecificLinksInDiv"] == {
            "linksFound": [
                {"text": "Fifth Semester Notes", "href": "/notes/fifth"},
                {"text": "Fifth Semester Syllabus", "href": "N/A"},
            ],
            "message": "Found 2 link(s) matching the criteria.",
        }
        # One independent fetch per operation.
        assert fetched["urls"] == [_URL, _URL]

    def test_upstream_404_is_still_200(self, client, fetched) -> None:
        fetched["status"] = 404
        resp = client.get(
            "/result",
            params={
                "url": _URL,
                "searchText": "power",
                "sectionIdentifier": "winter 2024",
                "divId": "v-pills-all-1",
                "linkTextToFind": "fifth",
            },
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["searchTextInWebsiteHtml"] == {
            "found": False,
            "message": "Failed to load page: HTTP status 404.",
        }
        assert data["findSpecificLinksInDiv"]["linksFound"] == []

    def test_repeated_request_is_identical(self, client, fetched) -> None:
        params = {"url": _URL, "divId": "v-pills-all-1", "linkTextToFind": "semester"}
        first = client.get("/result", params=params)
        second = client.get("/result", params=params)
        assert first.content == second.content


class TestFallback:
    @pytest.mark.parametrize("path", ["/", "/docs", "/anything/else"])
    def test_info_payload(self, client, path) -> None:
        resp = client.get(path)
        assert resp.status_code == 200
        assert resp.json()["status"] == "info"

    def test_post_result_is_info(self, client, fetched) -> None:
        resp = client.post("/result", params={"url": _URL})
        assert resp.status_code == 200
        assert resp.json()["status"] == "info"
        assert fetched["urls"] == []
