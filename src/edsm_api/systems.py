"""System search API.

See https://www.edsm.net/en/api-v1.
"""

from __future__ import annotations

from edsm_api._client import EdsmClient
from edsm_api._responses import Coords, PrimaryStar, SystemInfo
from edsm_api._types import SystemSpecifier


async def system(system: str | int | SystemSpecifier) -> SystemInfo:
    """Get a system's information by name or ID.

    Opens a client for this call only.

    Example::

        info = asyncio.run(edsm_api.systems.system(27))
        assert info.name == "Sol"
    """
    async with EdsmClient() as client:
        return await client.system(system)


__all__ = ["Coords", "PrimaryStar", "SystemInfo", "system"]
