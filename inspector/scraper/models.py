"""Data models for the inspection pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional

from bs4 import BeautifulSoup

# Placeholder href for anchors that carry no ``href`` attribute.
MISSING_HREF = "N/A"


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class PageLoad:
    """Outcome of fetching and parsing one page.

    Exactly one of three states holds:

    * ``document`` is set: the page loaded with HTTP 200 and parsed;
    * ``status_code`` is set without a document: the server answered
      with a non-200 status;
    * ``error`` is set: the fetch or the parse raised.
    """

    url: str
    document: Optional[BeautifulSoup] = None
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.document is not None


@dataclass(frozen=True)
class SearchOutcome:
    """Result of looking for a phrase inside a page section."""

    found: bool
    message: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LinkMatch:
    """A hyperlink found inside a container element."""

    text: str
    href: str = MISSING_HREF

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
