"""In-system information API.

See https://www.edsm.net/en/api-system-v1.
"""

from __future__ import annotations

from edsm_api._client import EdsmClient
from edsm_api._responses import Bodies, Body
from edsm_api._types import SystemSpecifier


async def bodies(system: str | int | SystemSpecifier) -> Bodies:
    """Get the bodies in a system by name or ID.

    Opens a client for this call only.

    Example::

        result = asyncio.run(edsm_api.system.bodies("Sol"))
        assert result.bodies[1].name == "Mercury"
    """
    async with EdsmClient() as client:
        return await client.bodies(system)


__all__ = ["Bodies", "Body", "bodies"]
