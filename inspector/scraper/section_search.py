"""Look for a phrase inside a named section of a web page."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from bs4 import BeautifulSoup, Tag

from inspector.scraper.fetcher import element_text, load_page
from inspector.scraper.models import SearchOutcome

LOGGER = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _iter_elements(document: BeautifulSoup) -> Iterator[Tag]:
    """Yield every element of *document* in pre-order (document order)."""
    for node in document.descendants:
        if isinstance(node, Tag):
            yield node


def find_section_text(document: BeautifulSoup, section_identifier: str) -> Optional[str]:
    """Return the full text of the first element containing *section_identifier*.

    Elements are visited in document order and the scan stops at the first
    hit, so an ancestor such as ``<html>`` or ``<body>`` wins over the more
    specific element nested inside it.  Matching is case-insensitive.
    Returns ``None`` when no element matches.
    """
    needle = section_identifier.casefold()
    for element in _iter_elements(document):
        text = element_text(element)
        if needle in text.casefold():
            return text
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def search_text_in_section(
    url: str,
    search_text: str,
    section_identifier: str,
    logger: Optional[logging.Logger] = None,
) -> SearchOutcome:
    """Fetch *url* and check whether *search_text* appears in the named section.

    Args:
        url: Page to fetch.
        search_text: Phrase to look for (e.g. ``"Electrical Power System"``).
        section_identifier: Text that identifies the section
            (e.g. ``"Winter 2024"``).
        logger: Destination for decision-point log lines; defaults to this
            module's logger.

    Every failure (HTTP status, transport error, parse error) is reported
    through the returned :class:`SearchOutcome`; nothing is raised.
    """
    log = logger or LOGGER
    page = load_page(url)

    if page.error is not None:
        log.error("An error occurred during searchTextInWebsiteHtml: %s", page.error)
        return SearchOutcome(found=False, message=f"An error occurred: {page.error}")

    if not page.ok:
        log.error("Failed to load page %s: HTTP status %s", url, page.status_code)
        return SearchOutcome(
            found=False,
            message=f"Failed to load page: HTTP status {page.status_code}.",
        )

    section_text = find_section_text(page.document, section_identifier)
    if section_text is None:
        log.info('Section "%s" not found on the page.', section_identifier)
        return SearchOutcome(
            found=False,
            message=f'Section "{section_identifier}" not found on the page.',
        )
    log.info(
        'Found section: "%s". Extracting content for further search.',
        section_identifier,
    )

    if search_text.casefold() in section_text.casefold():
        log.info('Found "%s" within the "%s" section.', search_text, section_identifier)
        return SearchOutcome(
            found=True,
            message=f'Text "{search_text}" found within section "{section_identifier}".',
        )

    log.info('"%s" not found within the "%s" section.', search_text, section_identifier)
    return SearchOutcome(
        found=False,
        message=f'Text "{search_text}" not found within section "{section_identifier}".',
    )
