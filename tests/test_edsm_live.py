"""Live tests against edsm.net (network required)."""

import asyncio

import pytest

import edsm_api as edsm


@pytest.mark.ci
class TestEdsmLive:
    """Tests hitting the real EDSM API."""

    def test_systems_system(self):
        info = asyncio.run(edsm.systems.system(27))
        assert info.name == "Sol"

    def test_system_bodies(self):
        bodies = asyncio.run(edsm.system.bodies(27))
        assert bodies.bodies[1].name == "Mercury"

    def test_system_not_found(self):
        with pytest.raises(edsm.EmptyResponseError):
            asyncio.run(edsm.systems.system("Not Exist XX-X x0"))
