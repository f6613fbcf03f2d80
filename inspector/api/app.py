"""FastAPI application factory.

Every path and method is funnelled into a single catch-all route that hands
the request to :class:`~inspector.dispatcher.RequestDispatcher`:

    /ping      — liveness, plain text ``Pong``
    /result    — section search + link search (GET only)
    *          — static informational payload

The interactive docs routes are disabled so that every unknown path,
``/docs`` included, receives the informational payload.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from inspector.config import configure_logging
from inspector.dispatcher import InspectRequest, RequestDispatcher
from inspector.identity import IdentityDirectory

LOGGER = logging.getLogger("inspector.api")

_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


class StarletteSink:
    """Renders dispatcher replies as Starlette responses."""

    def text(self, body: str, status_code: int = 200) -> Response:
        return PlainTextResponse(body, status_code=status_code)

    def json(self, payload: Mapping[str, Any], status_code: int = 200) -> Response:
        return JSONResponse(dict(payload), status_code=status_code)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging once on startup."""
    configure_logging()
    yield


def _to_inspect_request(request: Request) -> InspectRequest:
    return InspectRequest.from_query(
        method=request.method,
        path=request.url.path,
        query=request.query_params,
        api_key=request.headers.get("x-appwrite-key", ""),
    )


def handle(request: Request) -> Response:
    """Adapt *request*, dispatch it and return the rendered response."""
    inspect_request = _to_inspect_request(request)
    dispatcher = RequestDispatcher(
        logger=LOGGER,
        directory=IdentityDirectory.from_settings(api_key=inspect_request.api_key),
    )
    return dispatcher.dispatch(inspect_request, StarletteSink())


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Page Inspector API",
        description=(
            "Fetches a target page, checks whether a phrase appears inside a "
            "named section and lists the matching links inside a container."
        ),
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.add_api_route(
        "/{full_path:path}",
        handle,
        methods=_METHODS,
        include_in_schema=False,
    )

    return app


# Module-level instance used by uvicorn:
#   uvicorn inspector.api.app:app --reload
app = create_app()
