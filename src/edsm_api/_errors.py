"""EDSM error types.

Every failed call raises exactly one of three subclasses of
:class:`EdsmError`:

- :class:`TransportError`: the HTTP exchange failed.
- :class:`EmptyResponseError`: EDSM answered with an empty sentinel payload
  (``{}`` or ``[]``), meaning nothing matched the query.
- :class:`DecodeError`: the payload did not match the expected shape.
"""

from __future__ import annotations


class EdsmError(Exception):
    """Base class for EDSM API errors."""


class TransportError(EdsmError):
    """HTTP request failed (connection, timeout or non-2xx status).

    Args:
        cause: The underlying ``httpx`` error.
    """

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"HTTP error: {cause}")
        self.cause = cause


class EmptyResponseError(EdsmError):
    """EDSM returned an empty response."""

    def __init__(self, payload: bytes = b"{}") -> None:
        super().__init__("empty response")
        self.payload = payload


class DecodeError(EdsmError):
    """Failed to decode the JSON payload into a typed record.

    Args:
        cause: The underlying structural failure.
    """

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"failed to decode JSON: {cause}")
        self.cause = cause
