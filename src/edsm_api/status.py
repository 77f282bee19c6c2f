"""Game server status API.

See https://www.edsm.net/en/api-status-v1.
"""

from __future__ import annotations

from edsm_api._client import EdsmClient
from edsm_api._responses import EliteServerStatus, StatusType


async def elite_server() -> EliteServerStatus:
    """Get the Elite: Dangerous game server status.

    Opens a client for this call only.

    Example::

        status = asyncio.run(edsm_api.status.elite_server())
        print(status.message)
    """
    async with EdsmClient() as client:
        return await client.elite_server()


__all__ = ["EliteServerStatus", "StatusType", "elite_server"]
