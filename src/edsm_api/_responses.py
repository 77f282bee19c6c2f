"""Typed response classes for EDSM API responses.

Provides one record per endpoint (:class:`EliteServerStatus`,
:class:`SystemInfo`, :class:`Bodies`) plus the nested records they carry.
Field names follow Python conventions; ``from_json_dict`` and
``to_json_dict`` map them to and from EDSM's camelCase wire names.

Decoding is strict: a missing key or a value of the wrong JSON type raises
``KeyError`` or ``TypeError``, and bad enum, timestamp or out-of-range
numeric values raise ``ValueError``. :func:`decode_record` folds all of
these into :class:`~edsm_api._errors.DecodeError`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Protocol, TypeVar

from edsm_api._dates import format_edsm_datetime, parse_edsm_datetime
from edsm_api._errors import DecodeError
from edsm_api._types import _MAX_UINT64


def _require(d: dict, key: str) -> Any:
    if key not in d:
        raise KeyError(f"missing field `{key}`")
    return d[key]


def _check_uint(key: str, val: Any) -> int:
    if isinstance(val, bool) or not isinstance(val, int):
        raise TypeError(f"field `{key}`: expected integer, got {type(val).__name__}")
    if not 0 <= val <= _MAX_UINT64:
        raise ValueError(f"field `{key}`: {val} is out of range for an unsigned 64-bit integer")
    return val


def _check_float(key: str, val: Any) -> float:
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        raise TypeError(f"field `{key}`: expected number, got {type(val).__name__}")
    try:
        return float(val)
    except OverflowError as exc:
        raise ValueError(f"field `{key}`: number out of range") from exc


def _check_str(key: str, val: Any) -> str:
    if not isinstance(val, str):
        raise TypeError(f"field `{key}`: expected string, got {type(val).__name__}")
    return val


def _check_bool(key: str, val: Any) -> bool:
    if not isinstance(val, bool):
        raise TypeError(f"field `{key}`: expected boolean, got {type(val).__name__}")
    return val


def _check_dict(key: str, val: Any) -> dict:
    if not isinstance(val, dict):
        raise TypeError(f"field `{key}`: expected object, got {type(val).__name__}")
    return val


def _check_list(key: str, val: Any) -> list:
    if not isinstance(val, list):
        raise TypeError(f"field `{key}`: expected array, got {type(val).__name__}")
    return val


def _optional(d: dict, key: str, check) -> Any:
    val = d.get(key)
    if val is None:
        return None
    return check(key, val)


class StatusType(Enum):
    """Server status classes."""

    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EliteServerStatus:
    """Elite: Dangerous game server status.

    Response of the ``/api-status-v1/elite-server`` endpoint.
    """

    last_update: datetime
    """When EDSM last checked the status with the game server (UTC)."""
    type: StatusType
    message: str
    status: int

    @classmethod
    def from_json_dict(cls, d: dict) -> EliteServerStatus:
        """Create an EliteServerStatus from a JSON dict with camelCase keys."""
        return cls(
            last_update=parse_edsm_datetime(_require(d, "lastUpdate")),
            type=StatusType(_check_str("type", _require(d, "type"))),
            message=_check_str("message", _require(d, "message")),
            status=_check_uint("status", _require(d, "status")),
        )

    def to_json_dict(self) -> dict[str, Any]:
        """Return the wire representation of this record."""
        return {
            "lastUpdate": format_edsm_datetime(self.last_update),
            "type": self.type.value,
            "message": self.message,
            "status": self.status,
        }


@dataclass(frozen=True)
class Coords:
    """Galactic coordinates of a system in light years, Sol at the origin."""

    x: float
    y: float
    z: float

    @classmethod
    def from_json_dict(cls, d: dict) -> Coords:
        return cls(
            x=_check_float("x", _require(d, "x")),
            y=_check_float("y", _require(d, "y")),
            z=_check_float("z", _require(d, "z")),
        )

    def to_json_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass(frozen=True)
class PrimaryStar:
    """Primary star of a system as reported in :class:`SystemInfo`."""

    name: str
    type: str
    """Star sub type, e.g. ``"G (White-Yellow) Star"``."""
    is_scoopable: bool

    @classmethod
    def from_json_dict(cls, d: dict) -> PrimaryStar:
        return cls(
            name=_check_str("name", _require(d, "name")),
            type=_check_str("type", _require(d, "type")),
            is_scoopable=_check_bool("isScoopable", _require(d, "isScoopable")),
        )

    def to_json_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type, "isScoopable": self.is_scoopable}


@dataclass(frozen=True)
class SystemInfo:
    """System metadata.

    Response of the ``/api-v1/system`` endpoint with ID, coordinates,
    permit, information and primary star output enabled.
    """

    id: int
    id64: int
    """In-game system address."""
    name: str
    coords: Coords
    coords_locked: bool
    require_permit: bool
    primary_star: PrimaryStar
    permit_name: str | None = None
    information: dict[str, Any] = field(default_factory=dict)
    """Allegiance, government, economy and population details, as sent."""

    @classmethod
    def from_json_dict(cls, d: dict) -> SystemInfo:
        """Create a SystemInfo from a JSON dict with camelCase keys."""
        information = d.get("information")
        # EDSM sends an empty array when it has no information for a system
        if information is None or information == []:
            information = {}
        return cls(
            id=_check_uint("id", _require(d, "id")),
            id64=_check_uint("id64", _require(d, "id64")),
            name=_check_str("name", _require(d, "name")),
            coords=Coords.from_json_dict(_check_dict("coords", _require(d, "coords"))),
            coords_locked=_check_bool("coordsLocked", _require(d, "coordsLocked")),
            require_permit=_check_bool("requirePermit", _require(d, "requirePermit")),
            primary_star=PrimaryStar.from_json_dict(
                _check_dict("primaryStar", _require(d, "primaryStar"))
            ),
            permit_name=_optional(d, "permitName", _check_str),
            information=dict(_check_dict("information", information)),
        )

    def to_json_dict(self) -> dict[str, Any]:
        """Return the wire representation of this record."""
        out: dict[str, Any] = {
            "id": self.id,
            "id64": self.id64,
            "name": self.name,
            "coords": self.coords.to_json_dict(),
            "coordsLocked": self.coords_locked,
            "requirePermit": self.require_permit,
            "primaryStar": self.primary_star.to_json_dict(),
        }
        if self.permit_name is not None:
            out["permitName"] = self.permit_name
        if self.information:
            out["information"] = dict(self.information)
        return out


@dataclass(frozen=True)
class Body:
    """A star or planet within a system.

    Only the fields shared by every body type are typed; the full wire
    object is kept in ``raw`` for type-specific data (orbital parameters,
    rings, materials and so on).
    """

    id: int
    name: str
    type: str
    """``"Star"`` or ``"Planet"``."""
    id64: int | None = None
    body_id: int | None = None
    sub_type: str | None = None
    distance_to_arrival: float | None = None
    """Distance from the arrival point in light seconds."""
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_json_dict(cls, d: dict) -> Body:
        return cls(
            id=_check_uint("id", _require(d, "id")),
            name=_check_str("name", _require(d, "name")),
            type=_check_str("type", _require(d, "type")),
            id64=_optional(d, "id64", _check_uint),
            body_id=_optional(d, "bodyId", _check_uint),
            sub_type=_optional(d, "subType", _check_str),
            distance_to_arrival=_optional(d, "distanceToArrival", _check_float),
            raw=dict(d),
        )

    def to_json_dict(self) -> dict[str, Any]:
        return dict(self.raw)


@dataclass(frozen=True)
class Bodies:
    """Bodies in a system.

    Response of the ``/api-system-v1/bodies`` endpoint.
    """

    id: int
    id64: int
    name: str
    url: str
    """EDSM page URL of the system."""
    body_count: int
    bodies: tuple[Body, ...]

    @classmethod
    def from_json_dict(cls, d: dict) -> Bodies:
        """Create a Bodies record from a JSON dict with camelCase keys."""
        raw_bodies = _check_list("bodies", _require(d, "bodies"))
        return cls(
            id=_check_uint("id", _require(d, "id")),
            id64=_check_uint("id64", _require(d, "id64")),
            name=_check_str("name", _require(d, "name")),
            url=_check_str("url", _require(d, "url")),
            body_count=_check_uint("bodyCount", _require(d, "bodyCount")),
            bodies=tuple(
                Body.from_json_dict(_check_dict("bodies", b)) for b in raw_bodies
            ),
        )

    def to_json_dict(self) -> dict[str, Any]:
        """Return the wire representation of this record."""
        return {
            "id": self.id,
            "id64": self.id64,
            "name": self.name,
            "url": self.url,
            "bodyCount": self.body_count,
            "bodies": [b.to_json_dict() for b in self.bodies],
        }


class _FromJsonDict(Protocol):
    @classmethod
    def from_json_dict(cls, d: dict) -> Any: ...


R = TypeVar("R", bound=_FromJsonDict)


def decode_record(body: bytes, record_type: type[R]) -> R:
    """Decode a JSON payload into a typed record.

    Args:
        body: Raw response body.
        record_type: Target record class with a ``from_json_dict`` method.

    Returns:
        A fully populated *record_type* instance.

    Raises:
        DecodeError: If the payload is not valid JSON, is not a JSON object,
            or does not match the record's shape.
    """
    try:
        payload = json.loads(body)
        if not isinstance(payload, dict):
            raise TypeError(f"expected JSON object, got {type(payload).__name__}")
        return record_type.from_json_dict(payload)
    except (ValueError, KeyError, TypeError, RecursionError) as exc:
        raise DecodeError(exc) from exc
