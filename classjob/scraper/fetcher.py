"""Single-shot async fetch of a character's class/job page."""

from __future__ import annotations

import asyncio
import logging
from urllib.parse import quote

import httpx

from classjob.config import settings
from classjob.scraper.errors import (
    MissingCharacterIdError,
    UpstreamStatusError,
    UpstreamTimeoutError,
    UpstreamTransportError,
)
from classjob.scraper.models import RawPage

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides the unreserved set.
_SAFE_CHARS = "!~*'()"


def character_url(character_id: str) -> str:
    """Return the upstream class/job URL for *character_id*.

    Raises:
        MissingCharacterIdError: If the identifier is empty or whitespace.
    """
    cid = (character_id or "").strip()
    if not cid:
        raise MissingCharacterIdError()
    base = settings.lodestone_base_url.rstrip("/")
    return f"{base}/{quote(cid, safe=_SAFE_CHARS)}/class_job/"


async def _get(url: str) -> httpx.Response:
    async with httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        response = await client.get(url)
        response.raise_for_status()
        return response


async def fetch_class_job_page(character_id: str) -> RawPage:
    """Fetch the class/job page for *character_id* in one timed attempt.

    The identifier is validated before any connection is opened.  There are
    no retries.

    Raises:
        MissingCharacterIdError: Empty identifier.
        UpstreamTimeoutError: The request exceeded ``settings.request_timeout``.
        UpstreamStatusError: The server answered with a 4xx/5xx status.
        UpstreamTransportError: Any other transport failure.
    """
    url = character_url(character_id)
    logger.info("Fetching %s", url)

    try:
        # httpx timeouts apply per connect/read step; wait_for caps the whole
        # request, body included.
        response = await asyncio.wait_for(_get(url), timeout=settings.request_timeout)
    except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
        logger.warning("Timed out after %.1fs fetching %s", settings.request_timeout, url)
        raise UpstreamTimeoutError(url) from exc
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        logger.warning("Upstream returned HTTP %d for %s", status, url)
        raise UpstreamStatusError(status, url) from exc
    except httpx.HTTPError as exc:
        logger.warning("Fetching %s failed: %s", url, exc)
        raise UpstreamTransportError(url, exc) from exc

    return RawPage(url=url, html=response.text, status_code=response.status_code)
