"""Scraper package — page loading, section search and link extraction."""

from inspector.scraper.fetcher import fetch_page, load_page, parse_html
from inspector.scraper.link_finder import find_specific_links_in_div
from inspector.scraper.models import LinkMatch, PageLoad, RawPage, SearchOutcome
from inspector.scraper.section_search import search_text_in_section

__all__ = [
    "fetch_page",
    "load_page",
    "parse_html",
    "search_text_in_section",
    "find_specific_links_in_div",
    "LinkMatch",
    "PageLoad",
    "RawPage",
    "SearchOutcome",
]
