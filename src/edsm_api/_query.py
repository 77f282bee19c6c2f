"""EDSM query builder.

Provides a fluent builder API for constructing EDSM API queries. Each
query targets one endpoint and carries at most one system specifier.
"""

from __future__ import annotations

from urllib.parse import urlencode

from edsm_api._types import EdsmEndpoint, SystemSpecifier, to_specifier

_ENDPOINT_DEBUG: dict[EdsmEndpoint, str] = {
    EdsmEndpoint.STATUS: "Status",
    EdsmEndpoint.SYSTEM: "System",
    EdsmEndpoint.BODIES: "Bodies",
}


class _QueryFactory:
    """Descriptor that creates a fresh EdsmQuery on each access.

    Allows ``EdsmQuery.system`` to return a new query instance each time,
    enabling fluent builder patterns without shared mutable state.
    """

    def __init__(self, endpoint: EdsmEndpoint) -> None:
        self._endpoint = endpoint

    def __get__(self, obj: object, objtype: type | None = None) -> EdsmQuery:
        return EdsmQuery(self._endpoint)


class EdsmQuery:
    """Builder for constructing EDSM API queries.

    Uses a fluent API where each method returns a new instance. Use the
    class properties ``status``, ``system`` and ``bodies`` to create
    queries targeting the respective endpoints.
    """

    def __init__(self, endpoint: EdsmEndpoint) -> None:
        self._endpoint = endpoint
        self._specifier: SystemSpecifier | None = None

    def _clone(self) -> EdsmQuery:
        """Return a shallow copy of this query."""
        new = EdsmQuery.__new__(EdsmQuery)
        new._endpoint = self._endpoint
        new._specifier = self._specifier
        return new

    status = _QueryFactory(EdsmEndpoint.STATUS)
    system = _QueryFactory(EdsmEndpoint.SYSTEM)
    bodies = _QueryFactory(EdsmEndpoint.BODIES)

    def for_system(self, value: str | int | SystemSpecifier) -> EdsmQuery:
        """Set the target system.

        Args:
            value: System name, EDSM system ID, or a specifier.

        Raises:
            ValueError: If the endpoint does not take a system.
        """
        if not self._endpoint.takes_system():
            raise ValueError(f"{self._endpoint} endpoint does not take a system")
        new = self._clone()
        new._specifier = to_specifier(value)
        return new

    # -- Accessors --

    def endpoint(self) -> EdsmEndpoint:
        """Return the endpoint targeted by this query."""
        return self._endpoint

    def specifier(self) -> SystemSpecifier | None:
        """Return the system specifier, or None if not set."""
        return self._specifier

    # -- URL building --

    def build_params(self) -> list[tuple[str, str]]:
        """Build the ordered query parameters for this query.

        The system parameter comes first, followed by the endpoint's
        fixed parameters.

        Raises:
            ValueError: If the endpoint requires a system and none is set.
        """
        params: list[tuple[str, str]] = []
        if self._endpoint.takes_system():
            if self._specifier is None:
                raise ValueError(f"{self._endpoint} query requires a system")
            self._specifier.apply(params)
        params.extend(self._endpoint.fixed_params())
        return params

    def build_url(self) -> str:
        """Build the URL query string for this query.

        Returns:
            URL-encoded query string (e.g. ``"systemName=Sol"``).
        """
        return urlencode(self.build_params())

    def __str__(self) -> str:
        return self.build_url()

    def __repr__(self) -> str:
        if self._endpoint.takes_system() and self._specifier is None:
            return f"EdsmQuery({_ENDPOINT_DEBUG[self._endpoint]})"
        return f'EdsmQuery({_ENDPOINT_DEBUG[self._endpoint]}, "{self.build_url()}")'
