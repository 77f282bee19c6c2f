"""
edsm_api is a typed asynchronous client for the EDSM (Elite Dangerous Star Map) HTTP API.
"""

from edsm_api import status, system, systems
from edsm_api._client import EMPTY_SENTINELS, EdsmClient, check_empty
from edsm_api._dates import format_edsm_datetime, parse_edsm_datetime
from edsm_api._errors import (
    DecodeError,
    EdsmError,
    EmptyResponseError,
    TransportError,
)
from edsm_api._query import EdsmQuery
from edsm_api._responses import (
    Bodies,
    Body,
    Coords,
    EliteServerStatus,
    PrimaryStar,
    StatusType,
    SystemInfo,
    decode_record,
)
from edsm_api._types import (
    EdsmEndpoint,
    SystemId,
    SystemName,
    SystemSpecifier,
    to_specifier,
)

__all__ = [
    # Endpoint modules
    "status",
    "system",
    "systems",
    # Enums
    "EdsmEndpoint",
    "StatusType",
    # Specifiers
    "SystemName",
    "SystemId",
    "SystemSpecifier",
    "to_specifier",
    # Query builder
    "EdsmQuery",
    # Client
    "EdsmClient",
    "EMPTY_SENTINELS",
    "check_empty",
    # Response types
    "EliteServerStatus",
    "SystemInfo",
    "Coords",
    "PrimaryStar",
    "Bodies",
    "Body",
    "decode_record",
    # Timestamps
    "parse_edsm_datetime",
    "format_edsm_datetime",
    # Errors
    "EdsmError",
    "TransportError",
    "EmptyResponseError",
    "DecodeError",
]
