"""EDSM asynchronous HTTP client.

Provides typed access to the EDSM status, system and bodies endpoints.
Each call issues exactly one GET request; nothing is cached or retried.
No authentication is required.
"""

from __future__ import annotations

import logging

import httpx

from edsm_api._errors import EmptyResponseError, TransportError
from edsm_api._query import EdsmQuery
from edsm_api._responses import Bodies, EliteServerStatus, SystemInfo, decode_record
from edsm_api._types import EdsmEndpoint, SystemSpecifier

logger = logging.getLogger(__name__)

_DEFAULT_BASE_URL = "https://www.edsm.net"
_DEFAULT_TIMEOUT = 120.0

EMPTY_SENTINELS: tuple[bytes, ...] = (b"{}", b"[]")
"""Payloads EDSM sends instead of an error status when nothing matched."""


def check_empty(body: bytes) -> None:
    """Reject EDSM's empty sentinel payloads.

    Args:
        body: Raw response body.

    Raises:
        EmptyResponseError: If *body* is exactly ``{}`` or ``[]``.
    """
    if body in EMPTY_SENTINELS:
        raise EmptyResponseError(body)


class EdsmClient:
    """EDSM API client.

    Owns an :class:`httpx.AsyncClient`; close it with :meth:`aclose` or use
    the client as an async context manager.

    Args:
        base_url: Custom base URL for testing.
        timeout: HTTP timeout in seconds. Default: 120.0.
        transport: Custom ``httpx`` transport, e.g. ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float = _DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or _DEFAULT_BASE_URL).rstrip("/")
        self._client = httpx.AsyncClient(
            timeout=timeout, follow_redirects=True, transport=transport
        )

    async def __aenter__(self) -> EdsmClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    # ========================================
    # Tier 1: Endpoint methods
    # ========================================

    async def elite_server(self) -> EliteServerStatus:
        """Get the Elite: Dangerous game server status.

        Raises:
            TransportError: If the HTTP request fails.
            EmptyResponseError: If EDSM returns an empty payload.
            DecodeError: If the payload does not match the expected shape.
        """
        return await self._query_status(EdsmQuery.status)

    async def system(self, system: str | int | SystemSpecifier) -> SystemInfo:
        """Get a system's information.

        Args:
            system: System name, EDSM system ID, or a specifier.

        Raises:
            TransportError: If the HTTP request fails.
            EmptyResponseError: If no such system exists.
            DecodeError: If the payload does not match the expected shape.
        """
        return await self._query_system(EdsmQuery.system.for_system(system))

    async def bodies(self, system: str | int | SystemSpecifier) -> Bodies:
        """Get the bodies in a system.

        Args:
            system: System name, EDSM system ID, or a specifier.

        Raises:
            TransportError: If the HTTP request fails.
            EmptyResponseError: If no such system exists.
            DecodeError: If the payload does not match the expected shape.
        """
        return await self._query_bodies(EdsmQuery.bodies.for_system(system))

    # ========================================
    # Tier 2: Query builder methods
    # ========================================

    async def query(self, query: EdsmQuery) -> EliteServerStatus | SystemInfo | Bodies:
        """Execute a query and return the typed record for its endpoint.

        Args:
            query: An EdsmQuery instance.
        """
        endpoint = query.endpoint()
        if endpoint is EdsmEndpoint.STATUS:
            return await self._query_status(query)
        elif endpoint is EdsmEndpoint.SYSTEM:
            return await self._query_system(query)
        else:
            return await self._query_bodies(query)

    async def query_raw(self, query: EdsmQuery) -> bytes:
        """Execute a query and return the raw response body.

        The body has passed the empty-response check but is not decoded.

        Args:
            query: An EdsmQuery instance.

        Raises:
            TransportError: If the HTTP request fails.
            EmptyResponseError: If EDSM returns an empty payload.
        """
        body = await self.fetch(self.build_full_url(query))
        check_empty(body)
        return body

    # ========================================
    # Internal query helpers
    # ========================================

    async def _query_status(self, query: EdsmQuery) -> EliteServerStatus:
        body = await self.query_raw(query)
        return decode_record(body, EliteServerStatus)

    async def _query_system(self, query: EdsmQuery) -> SystemInfo:
        body = await self.query_raw(query)
        return decode_record(body, SystemInfo)

    async def _query_bodies(self, query: EdsmQuery) -> Bodies:
        body = await self.query_raw(query)
        return decode_record(body, Bodies)

    # ========================================
    # URL building and transport
    # ========================================

    def build_full_url(self, query: EdsmQuery) -> str:
        """Build the full request URL for a query."""
        endpoint = query.endpoint().endpoint_path()
        params = query.build_url()
        if params:
            return f"{self._base_url}{endpoint}?{params}"
        return f"{self._base_url}{endpoint}"

    async def fetch(self, url: str) -> bytes:
        """Execute one HTTP GET request and return the response body.

        Raises:
            TransportError: On network failures and non-2xx statuses.
        """
        logger.debug("Requesting %s", url)
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise TransportError(exc) from exc
        return response.content
