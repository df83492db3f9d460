"""Character class/job endpoint.

Routes
------
GET /character/{character_id}    Scrape and return the class/job profile

The identifier is captured with the ``path`` converter so an encoded slash
(``a%2Fb``) still reaches the handler and is re-encoded for the upstream URL.

Errors are always JSON: ``{"error": <message>, "url": <upstream url>}`` with
status 502, except a blank identifier which is rejected with 400 before any
upstream request is made.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from classjob.scraper.errors import ClassJobError, MissingCharacterIdError
from classjob.scraper.fetcher import character_url, fetch_class_job_page
from classjob.scraper.profile import build_profile

logger = logging.getLogger(__name__)

router = APIRouter()

_NO_STORE = {"Cache-Control": "no-store"}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _error(status_code: int, message: str, url: str | None = None) -> JSONResponse:
    body = {"error": message}
    if url is not None:
        body["url"] = url
    return JSONResponse(status_code=status_code, content=body, headers=_NO_STORE)


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.get("/{character_id:path}")
async def get_character(character_id: str) -> JSONResponse:
    """Fetch the character's class/job page and return its parsed profile."""
    try:
        url = character_url(character_id)
    except MissingCharacterIdError as exc:
        return _error(400, exc.message)

    try:
        raw = await fetch_class_job_page(character_id)
        profile = build_profile(raw.html)
    except ClassJobError as exc:
        return _error(502, exc.message, exc.url or url)
    except Exception:
        logger.exception("Unexpected failure while scraping %s", url)
        return _error(502, "Fetch/parse failed", url)

    return JSONResponse(content=profile.to_dict(), headers=_NO_STORE)
