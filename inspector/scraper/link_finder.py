"""Extract matching hyperlinks from a container element identified by id."""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from inspector.scraper.fetcher import element_text, load_page
from inspector.scraper.models import MISSING_HREF, LinkMatch

LOGGER = logging.getLogger(__name__)


def collect_links(container: Tag, link_text: str) -> List[LinkMatch]:
    """Return the ``<a>`` elements under *container* whose text contains *link_text*.

    The comparison is a case-insensitive substring test against the trimmed
    anchor text; an empty *link_text* keeps every anchor.  Document order is
    preserved.
    """
    needle = link_text.casefold()
    matches: List[LinkMatch] = []
    for anchor in container.find_all("a"):
        text = element_text(anchor).strip()
        if needle in text.casefold():
            matches.append(LinkMatch(text=text, href=anchor.get("href", MISSING_HREF)))
    return matches


def find_container(document: BeautifulSoup, container_id: str) -> Optional[Tag]:
    """Return the first element whose ``id`` equals *container_id* exactly."""
    return document.find(id=container_id)


def find_specific_links_in_div(
    url: str,
    div_id: str,
    link_text_to_find: str,
    logger: Optional[logging.Logger] = None,
) -> List[LinkMatch]:
    """Fetch *url* and list the links inside ``#div_id`` matching *link_text_to_find*.

    Any failure (HTTP status, transport or parse error, missing container)
    is logged and yields an empty list.
    """
    log = logger or LOGGER
    page = load_page(url)

    if page.error is not None:
        log.error("An error occurred during findSpecificLinksInDiv: %s", page.error)
        return []

    if not page.ok:
        log.error("Failed to load page %s: HTTP status %s", url, page.status_code)
        return []

    container = find_container(page.document, div_id)
    if container is None:
        log.info('Div with ID "%s" not found on the page.', div_id)
        return []

    matches = collect_links(container, link_text_to_find)
    if matches:
        log.info('Found %d matching <a> tags inside div "%s".', len(matches), div_id)
    else:
        log.info(
            'No <a> tags with text containing "%s" found inside div "%s".',
            link_text_to_find,
            div_id,
        )
    return matches
