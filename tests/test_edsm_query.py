"""Tests for EdsmQuery builder."""

import pytest

import edsm_api as edsm


class TestEdsmQueryConstructors:
    """Tests for EdsmQuery class attribute constructors."""

    def test_status_constructor(self):
        query = edsm.EdsmQuery.status
        assert query.build_url() == ""
        assert query.endpoint() is edsm.EdsmEndpoint.STATUS
        assert "Status" in repr(query)

    def test_system_constructor(self):
        query = edsm.EdsmQuery.system
        assert query.specifier() is None
        assert repr(query) == "EdsmQuery(System)"

    def test_fresh_instances(self):
        a = edsm.EdsmQuery.bodies
        b = edsm.EdsmQuery.bodies
        assert a is not b


class TestEdsmQueryBuild:
    """Tests for parameter and URL building."""

    def test_bodies_by_name(self):
        query = edsm.EdsmQuery.bodies.for_system("Sol")
        assert query.build_params() == [("systemName", "Sol")]
        assert query.build_url() == "systemName=Sol"

    def test_bodies_by_id(self):
        query = edsm.EdsmQuery.bodies.for_system(27)
        assert query.build_params() == [("systemId", "27")]

    def test_system_appends_fixed_params_after_specifier(self):
        query = edsm.EdsmQuery.system.for_system("Sol")
        assert query.build_url() == (
            "systemName=Sol&showId=1&showCoordinates=1&showPermit=1"
            "&showInformation=1&showPrimaryStar=1&includeHidden=1"
        )

    def test_exactly_one_system_param(self):
        params = edsm.EdsmQuery.system.for_system(10477373803).build_params()
        keys = [k for k, _ in params]
        assert keys.count("systemId") == 1
        assert "systemName" not in keys

    def test_for_system_replaces_previous(self):
        query = edsm.EdsmQuery.bodies.for_system("Sol").for_system(27)
        assert query.build_params() == [("systemId", "27")]

    def test_for_system_does_not_mutate(self):
        base = edsm.EdsmQuery.bodies
        named = base.for_system("Sol")
        assert base.specifier() is None
        assert named.specifier() == edsm.SystemName("Sol")

    def test_name_is_url_encoded(self):
        query = edsm.EdsmQuery.bodies.for_system("Col 285 Sector")
        assert query.build_url() == "systemName=Col+285+Sector"

    def test_str_is_url(self):
        query = edsm.EdsmQuery.bodies.for_system("Sol")
        assert str(query) == query.build_url()
        assert 'EdsmQuery(Bodies, "systemName=Sol")' == repr(query)


class TestEdsmQueryValidation:
    """Tests for builder misuse."""

    def test_status_rejects_system(self):
        with pytest.raises(ValueError, match="does not take a system"):
            edsm.EdsmQuery.status.for_system("Sol")

    def test_missing_system_raises(self):
        with pytest.raises(ValueError, match="requires a system"):
            edsm.EdsmQuery.bodies.build_params()
