"""Route one inspection request to its operations and assemble the reply.

Three routes exist:

    /ping              any method   → plain text ``Pong``
    /result            GET          → section search + link search envelope
    anything else                   → static informational JSON

Collaborators are passed in explicitly: a :class:`logging.Logger`, a
:class:`ResponseSink` that renders text/JSON replies, and an optional
:class:`~inspector.identity.IdentityDirectory`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Protocol

from inspector.identity import IdentityDirectory
from inspector.scraper.link_finder import find_specific_links_in_div
from inspector.scraper.models import LinkMatch, SearchOutcome
from inspector.scraper.section_search import search_text_in_section

LOGGER = logging.getLogger(__name__)

MISSING_URL_MESSAGE = 'The "url" query parameter is required for the /result endpoint.'
SKIPPED_SEARCH_MESSAGE = "Skipped search: searchText or sectionIdentifier not provided."
NO_LINKS_MESSAGE = "No links found matching the criteria."

INFO_PAYLOAD: dict[str, str] = {
    "status": "info",
    "message": (
        "Please use GET /result with query parameters "
        "or POST to a different endpoint if supported."
    ),
    "motto": "Build like a team of hundreds_",
    "learn": "https://appwrite.io/docs",
    "connect": "https://appwrite.io/discord",
    "getInspired": "https://builtwith.appwrite.io",
}

SectionSearch = Callable[..., SearchOutcome]
LinkFinder = Callable[..., List[LinkMatch]]


# ---------------------------------------------------------------------------
# Request / response seams
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InspectRequest:
    """One incoming request, resolved once at the hosting boundary."""

    method: str = "GET"
    path: str = "/"
    url: str = ""
    search_text: str = ""
    section_identifier: str = ""
    div_id: str = ""
    link_text_to_find: str = ""
    api_key: str = ""

    @classmethod
    def from_query(
        cls,
        method: str,
        path: str,
        query: Mapping[str, str],
        api_key: str = "",
    ) -> "InspectRequest":
        """Build a request from raw query parameters; absent keys become ``""``."""
        return cls(
            method=method.upper(),
            path=path,
            url=query.get("url", ""),
            search_text=query.get("searchText", ""),
            section_identifier=query.get("sectionIdentifier", ""),
            div_id=query.get("divId", ""),
            link_text_to_find=query.get("linkTextToFind", ""),
            api_key=api_key,
        )


class ResponseSink(Protocol):
    """Renders a reply in whatever form the hosting runtime needs."""

    def text(self, body: str, status_code: int = 200) -> Any: ...

    def json(self, payload: Mapping[str, Any], status_code: int = 200) -> Any: ...


@dataclass(frozen=True)
class Reply:
    """Runtime-neutral reply produced by :class:`ReplySink`."""

    status_code: int
    media_type: str
    body: Any


class ReplySink:
    """A :class:`ResponseSink` that returns plain :class:`Reply` values."""

    def text(self, body: str, status_code: int = 200) -> Reply:
        return Reply(status_code=status_code, media_type="text/plain", body=body)

    def json(self, payload: Mapping[str, Any], status_code: int = 200) -> Reply:
        return Reply(status_code=status_code, media_type="application/json", body=dict(payload))


# ---------------------------------------------------------------------------
# Envelope assembly
# ---------------------------------------------------------------------------

def links_message(links: List[LinkMatch]) -> str:
    if links:
        return f"Found {len(links)} link(s) matching the criteria."
    return NO_LINKS_MESSAGE


def build_result(
    request: InspectRequest,
    logger: Optional[logging.Logger] = None,
    section_search: SectionSearch = search_text_in_section,
    link_finder: LinkFinder = find_specific_links_in_div,
) -> dict[str, Any]:
    """Run the requested operations for *request* and return the success envelope.

    The caller must have checked that ``request.url`` is non-empty.  Each
    operation runs only when both of its parameters are non-empty; the two
    run sequentially and each performs its own fetch.
    """
    log = logger or LOGGER

    if request.search_text and request.section_identifier:
        outcome = section_search(
            request.url, request.search_text, request.section_identifier, logger=log
        )
    else:
        outcome = SearchOutcome(found=False, message=SKIPPED_SEARCH_MESSAGE)
        log.info(
            "Skipping searchTextInWebsiteHtml as searchText or "
            "sectionIdentifier were not provided."
        )

    if request.div_id and request.link_text_to_find:
        links = link_finder(request.url, request.div_id, request.link_text_to_find, logger=log)
    else:
        links = []
        log.info(
            "Skipping findSpecificLinksInDiv as divId or linkTextToFind were not provided."
        )

    return {
        "status": "success",
        "url": request.url,
        "searchTextInWebsiteHtml": outcome.to_dict(),
        "findSpecificLinksInDiv": {
            "linksFound": [link.to_dict() for link in links],
            "message": links_message(links),
        },
    }


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

class RequestDispatcher:
    """Stateless router from :class:`InspectRequest` to a sink reply."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        directory: Optional[IdentityDirectory] = None,
        section_search: SectionSearch = search_text_in_section,
        link_finder: LinkFinder = find_specific_links_in_div,
    ) -> None:
        self.logger = logger or LOGGER
        self.directory = directory
        self.section_search = section_search
        self.link_finder = link_finder

    def _log_user_total(self) -> None:
        if self.directory is None:
            return
        try:
            total = self.directory.count_users()
        except Exception as exc:
            self.logger.error("Could not list users: %s", exc)
            return
        self.logger.info("Total users: %d", total)

    def dispatch(self, request: InspectRequest, sink: ResponseSink) -> Any:
        """Handle *request* and return whatever *sink* produces."""
        self._log_user_total()

        if request.path == "/ping":
            return sink.text("Pong")

        if request.path == "/result" and request.method == "GET":
            if not request.url:
                self.logger.error(
                    "URL query parameter is missing or empty for /result GET request."
                )
                return sink.json({"status": "error", "message": MISSING_URL_MESSAGE}, 400)
            payload = build_result(
                request,
                logger=self.logger,
                section_search=self.section_search,
                link_finder=self.link_finder,
            )
            return sink.json(payload)

        return sink.json(INFO_PAYLOAD)
