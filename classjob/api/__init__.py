"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from classjob.api import app

    uvicorn classjob.api:app --reload
"""

from classjob.api.app import app

__all__ = ["app"]
