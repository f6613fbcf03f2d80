"""HTTP fetch + HTML parse, reported as a :class:`PageLoad` value."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from bs4 import BeautifulSoup, Tag
from bs4.element import NavigableString, PreformattedString

from inspector.config import settings
from inspector.scraper.models import PageLoad, RawPage

LOGGER = logging.getLogger(__name__)


def _default_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


def fetch_page(url: str) -> RawPage:
    """GET *url* and return a :class:`RawPage` whatever the status code.

    Unlike a typical fetcher this never calls ``raise_for_status``: a non-200
    answer is a reportable outcome for the callers, not an exception.

    Raises:
        httpx.HTTPError: On transport failures (DNS, connect, timeout, ...).
        httpx.InvalidURL: If *url* cannot be parsed.
    """
    with httpx.Client(
        headers=_default_headers(),
        timeout=settings.request_timeout,
        follow_redirects=settings.follow_redirects,
    ) as client:
        response = client.get(url)
        return RawPage(url=url, html=response.text, status_code=response.status_code)


def parse_html(html: str, parser: Optional[str] = None) -> BeautifulSoup:
    """Parse *html* into a traversable BeautifulSoup tree.

    The default ``html5lib`` builder always produces an ``<html>`` root with
    ``<head>`` and ``<body>``, and moves stray content into ``<body>``.
    """
    return BeautifulSoup(html, parser or settings.html_parser)


def element_text(element: Tag) -> str:
    """Concatenate every text node below *element*, in document order.

    Unlike ``Tag.get_text()`` this keeps ``<script>``/``<style>``/``<template>``
    strings whatever tree builder produced them; comments, doctypes and other
    markup declarations are left out.
    """
    return "".join(
        node
        for node in element.descendants
        if isinstance(node, NavigableString) and not isinstance(node, PreformattedString)
    )


def describe_error(exc: BaseException) -> str:
    """Return a human-readable one-liner for *exc*."""
    text = str(exc).strip()
    return text or exc.__class__.__name__


def load_page(url: str) -> PageLoad:
    """Fetch and parse *url*, capturing every failure in the returned value.

    Callers branch on the :class:`PageLoad` state instead of catching
    exceptions; no fetch or parse error escapes this function.
    """
    try:
        raw = fetch_page(url)
        if raw.status_code != 200:
            LOGGER.debug("GET %s answered HTTP %d", url, raw.status_code)
            return PageLoad(url=url, status_code=raw.status_code)
        document = parse_html(raw.html)
    except Exception as exc:
        return PageLoad(url=url, error=describe_error(exc))
    return PageLoad(url=url, document=document, status_code=200)
