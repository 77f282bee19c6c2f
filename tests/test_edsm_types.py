"""Tests for EDSM endpoint enum and system specifiers."""

import pytest

import edsm_api as edsm


class TestEdsmEndpoint:
    """Tests for EdsmEndpoint enum."""

    def test_variants(self):
        assert str(edsm.EdsmEndpoint.STATUS) == "status"
        assert str(edsm.EdsmEndpoint.SYSTEM) == "system"
        assert str(edsm.EdsmEndpoint.BODIES) == "bodies"

    def test_repr(self):
        assert repr(edsm.EdsmEndpoint.BODIES) == "EdsmEndpoint.Bodies"

    def test_repr_all_variants(self):
        assert repr(edsm.EdsmEndpoint.STATUS) == "EdsmEndpoint.Status"
        assert repr(edsm.EdsmEndpoint.SYSTEM) == "EdsmEndpoint.System"

    def test_endpoint_path(self):
        assert edsm.EdsmEndpoint.STATUS.endpoint_path() == "/api-status-v1/elite-server"
        assert edsm.EdsmEndpoint.SYSTEM.endpoint_path() == "/api-v1/system"
        assert edsm.EdsmEndpoint.BODIES.endpoint_path() == "/api-system-v1/bodies"

    def test_takes_system(self):
        assert not edsm.EdsmEndpoint.STATUS.takes_system()
        assert edsm.EdsmEndpoint.SYSTEM.takes_system()
        assert edsm.EdsmEndpoint.BODIES.takes_system()

    def test_fixed_params_system(self):
        params = edsm.EdsmEndpoint.SYSTEM.fixed_params()
        assert [k for k, _ in params] == [
            "showId",
            "showCoordinates",
            "showPermit",
            "showInformation",
            "showPrimaryStar",
            "includeHidden",
        ]
        assert all(v == "1" for _, v in params)

    def test_fixed_params_others_empty(self):
        assert edsm.EdsmEndpoint.STATUS.fixed_params() == []
        assert edsm.EdsmEndpoint.BODIES.fixed_params() == []


class TestSystemSpecifier:
    """Tests for SystemName / SystemId and their conversions."""

    @pytest.mark.parametrize("name", ["Sol", "Colonia", "Col 285 Sector AB-C d1-2", ""])
    def test_name_applies_system_name(self, name):
        params: list[tuple[str, str]] = []
        edsm.to_specifier(name).apply(params)
        assert params == [("systemName", name)]

    @pytest.mark.parametrize("system_id", [0, 27, 10477373803, 2**64 - 1])
    def test_id_applies_system_id(self, system_id):
        params: list[tuple[str, str]] = []
        edsm.to_specifier(system_id).apply(params)
        assert params == [("systemId", str(system_id))]

    def test_apply_appends_in_place(self):
        params = [("existing", "x")]
        edsm.SystemId(27).apply(params)
        assert params == [("existing", "x"), ("systemId", "27")]

    def test_conversion_types(self):
        assert edsm.to_specifier("Sol") == edsm.SystemName("Sol")
        assert edsm.to_specifier(27) == edsm.SystemId(27)

    def test_specifier_passthrough(self):
        spec = edsm.SystemName("Sol")
        assert edsm.to_specifier(spec) is spec

    def test_immutable(self):
        spec = edsm.SystemName("Sol")
        with pytest.raises(AttributeError):
            spec.name = "Achenar"  # type: ignore[misc]

    def test_negative_id_raises(self):
        with pytest.raises(ValueError, match="unsigned"):
            edsm.SystemId(-1)

    def test_oversized_id_raises(self):
        with pytest.raises(ValueError, match="unsigned"):
            edsm.to_specifier(2**64)

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            edsm.to_specifier(True)

    def test_other_type_rejected(self):
        with pytest.raises(TypeError, match="name"):
            edsm.to_specifier(27.0)  # type: ignore[arg-type]
