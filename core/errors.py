"""Error taxonomy shared by every harvesting stage."""
from __future__ import annotations

from typing import Optional


class HarvestError(Exception):
    """Base error for the harvesting pipeline."""


class ConfigurationError(HarvestError):
    """Missing credential or invalid target. Fatal before any network call."""


class TransportError(HarvestError):
    """Base error for a single outbound request."""

    def __init__(self, message: str, *, url: str = "", status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class RateLimited(TransportError):
    """429 responses persisted past the retry budget."""


class TransientServerError(TransportError):
    """5xx or network failures persisted past the retry budget."""


class NotFound(TransportError):
    """The requested resource does not exist (404)."""


class RequestFailed(TransportError):
    """Any other non-2xx response."""

    def __init__(self, message: str, *, url: str = "", status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message, url=url, status_code=status_code)
        self.body = body


class MalformedResponse(TransportError):
    """Body could not be parsed or did not match the expected schema."""
