"""Fatal error types raised while retrieving a class/job page.

Markup irregularities are never raised; they degrade to defaults inside the
parser.  Only input and network problems surface as a :class:`ClassJobError`.
"""

from __future__ import annotations

from typing import Optional


class ClassJobError(Exception):
    """Base class: carries a human-readable message and the upstream URL."""

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.url = url


class MissingCharacterIdError(ClassJobError):
    """The character identifier was empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("Missing character ID.")


class UpstreamTimeoutError(ClassJobError):
    """The upstream fetch exceeded the configured timeout."""

    def __init__(self, url: str) -> None:
        super().__init__("Request timed out", url)


class UpstreamStatusError(ClassJobError):
    """The upstream server answered with a non-2xx status."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"Upstream returned HTTP {status_code}", url)
        self.status_code = status_code


class UpstreamTransportError(ClassJobError):
    """Connection, DNS or protocol failure before a response arrived."""

    def __init__(self, url: str, cause: Optional[BaseException] = None) -> None:
        super().__init__("Fetch/parse failed", url)
        self.cause = cause
