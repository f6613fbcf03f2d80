"""Utilities for rendering inspection results in the CLI."""

from __future__ import annotations

import json
from typing import Any, List, Mapping

from inspector.scraper.models import LinkMatch, SearchOutcome


def render_json(payload: Mapping[str, Any]) -> str:
    """Pretty-print *payload* the way ``GET /result`` would serialise it."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


def render_outcome(outcome: SearchOutcome) -> str:
    return render_json(outcome.to_dict())


def render_links(links: List[LinkMatch]) -> str:
    """Render *links* as one ``text -> href`` line each.

    Returns an empty string for an empty list; callers print their own notice.
    """
    width = max((len(link.text) for link in links), default=0)
    return "\n".join(f"  {link.text.ljust(width)}  ->  {link.href}" for link in links)
