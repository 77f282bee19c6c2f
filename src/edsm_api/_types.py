"""EDSM type definitions.

Provides the endpoint enum and the system specifier types used to
address a star system by name or by numeric ID.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

_MAX_UINT64 = 2**64 - 1


class EdsmEndpoint(Enum):
    """EDSM API endpoint."""

    STATUS = "status"
    SYSTEM = "system"
    BODIES = "bodies"

    def endpoint_path(self) -> str:
        """Return the API endpoint path for this endpoint."""
        _paths = {
            EdsmEndpoint.STATUS: "/api-status-v1/elite-server",
            EdsmEndpoint.SYSTEM: "/api-v1/system",
            EdsmEndpoint.BODIES: "/api-system-v1/bodies",
        }
        return _paths[self]

    def fixed_params(self) -> list[tuple[str, str]]:
        """Return the query parameters always sent to this endpoint."""
        if self is EdsmEndpoint.SYSTEM:
            return [
                ("showId", "1"),
                ("showCoordinates", "1"),
                ("showPermit", "1"),
                ("showInformation", "1"),
                ("showPrimaryStar", "1"),
                ("includeHidden", "1"),
            ]
        return []

    def takes_system(self) -> bool:
        """Return True if this endpoint requires a system specifier."""
        return self is not EdsmEndpoint.STATUS

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"EdsmEndpoint.{self.name.title()}"


@dataclass(frozen=True)
class SystemName:
    """Specify a system by name.

    The name is sent as given; EDSM decides whether it exists.
    """

    name: str

    def apply(self, params: list[tuple[str, str]]) -> None:
        """Append the ``systemName`` parameter to *params*."""
        params.append(("systemName", self.name))


@dataclass(frozen=True)
class SystemId:
    """Specify a system by its EDSM numeric ID."""

    id: int

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"system ID must be an int, got {type(self.id).__name__}")
        if not 0 <= self.id <= _MAX_UINT64:
            raise ValueError(f"system ID must be an unsigned 64-bit integer, got {self.id}")

    def apply(self, params: list[tuple[str, str]]) -> None:
        """Append the ``systemId`` parameter to *params*."""
        params.append(("systemId", str(self.id)))


SystemSpecifier = Union[SystemName, SystemId]
"""A system addressed either by name or by numeric ID."""


def to_specifier(value: str | int | SystemSpecifier) -> SystemSpecifier:
    """Convert a bare name or ID into a system specifier.

    Args:
        value: System name, EDSM system ID, or an existing specifier.

    Returns:
        ``SystemName`` for strings, ``SystemId`` for integers, or *value*
        unchanged if it is already a specifier.

    Raises:
        TypeError: If *value* is not a string, integer or specifier.
        ValueError: If an integer ID is outside the unsigned 64-bit range.
    """
    if isinstance(value, (SystemName, SystemId)):
        return value
    if isinstance(value, str):
        return SystemName(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return SystemId(value)
    raise TypeError(
        f"system must be a name (str) or an ID (int), got {type(value).__name__}"
    )
