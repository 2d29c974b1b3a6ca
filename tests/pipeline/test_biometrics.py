from strike_zone_impact.domain.identity import Biometric, Identity
from strike_zone_impact.pipeline.biometrics import attach_heights, join_heights, parse_biometrics


class TestParseBiometrics:
    def test_parses_heights(self) -> None:
        table = parse_biometrics([{"bbref_id": "troutmi01", "height": "74"}])
        assert table == {"troutmi01": Biometric(bbref_id="troutmi01", height_in=74.0)}

    def test_skips_blank_zero_and_garbage_heights(self) -> None:
        rows = [
            {"bbref_id": "a01", "height": None},
            {"bbref_id": "b01", "height": "0"},
            {"bbref_id": "c01", "height": "tall"},
            {"bbref_id": None, "height": "70"},
        ]
        assert parse_biometrics(rows) == {}


class TestJoinHeights:
    def test_chains_mlbam_to_bbref_to_height(self) -> None:
        identities = {1: Identity(mlbam_id=1, bbref_id="x01", name="X, Y")}
        biometrics = {"x01": Biometric(bbref_id="x01", height_in=72.0)}
        assert join_heights(identities, biometrics) == {1: 72.0}

    def test_identity_without_biometric_contributes_nothing(self) -> None:
        identities = {1: Identity(mlbam_id=1, bbref_id="x01", name="X, Y")}
        assert join_heights(identities, {}) == {}

    def test_biometric_without_identity_contributes_nothing(self) -> None:
        biometrics = {"x01": Biometric(bbref_id="x01", height_in=72.0)}
        assert join_heights({}, biometrics) == {}

    def test_identity_without_bbref_contributes_nothing(self) -> None:
        identities = {1: Identity(mlbam_id=1, bbref_id=None, name="X")}
        assert join_heights(identities, {}) == {}

    def test_identities_sharing_a_bbref_id_all_get_the_height(self) -> None:
        identities = {
            1: Identity(mlbam_id=1, bbref_id="x01", name="A"),
            2: Identity(mlbam_id=2, bbref_id="x01", name="B"),
        }
        biometrics = {"x01": Biometric(bbref_id="x01", height_in=72.0)}
        assert join_heights(identities, biometrics) == {1: 72.0, 2: 72.0}


def test_attach_heights(make_events) -> None:
    events = make_events({"batter": 545361}, {"batter": 592450})
    enriched = attach_heights(events, {545361: 74.0})
    assert enriched.loc[0, "height_in"] == 74.0
    assert enriched["height_in"].isna().tolist() == [False, True]
