"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from inspector.api import app

    uvicorn inspector.api:app --reload
"""

from inspector.api.app import app

__all__ = ["app"]
