import itertools

import pytest

from strike_zone_impact.domain.zone import MalformedZoneError, ZoneDefinition, ZoneTransition


class TestZoneDefinition:
    def test_height_and_area(self) -> None:
        zone = ZoneDefinition(bottom=18.0, top=42.0)
        assert zone.height == 24.0
        assert zone.area == 24.0 * 17.0

    def test_top_equal_to_bottom_is_malformed(self) -> None:
        with pytest.raises(MalformedZoneError):
            ZoneDefinition(bottom=20.0, top=20.0)

    def test_top_below_bottom_is_malformed(self) -> None:
        with pytest.raises(MalformedZoneError):
            ZoneDefinition(bottom=30.0, top=20.0)

    def test_proportional_height_for_76_inch_batter(self) -> None:
        zone = ZoneDefinition.proportional(76.0, bottom_fraction=0.27, top_fraction=0.535)
        assert zone.bottom == pytest.approx(20.52)
        assert zone.top == pytest.approx(40.66)
        assert zone.height == pytest.approx(20.14)

    @pytest.mark.parametrize("height", [66.0, 70.5, 74.0, 79.0])
    def test_proportional_height_is_fixed_fraction(self, height: float) -> None:
        zone = ZoneDefinition.proportional(height, bottom_fraction=0.27, top_fraction=0.535)
        assert zone.height == pytest.approx(0.265 * height)


class TestContains:
    zone = ZoneDefinition(bottom=20.0, top=40.0)

    def test_center_is_in(self) -> None:
        assert self.zone.contains(0.0, 30.0)

    @pytest.mark.parametrize("z", [20.0, 40.0])
    def test_on_vertical_bound_is_out(self, z: float) -> None:
        assert not self.zone.contains(0.0, z)

    @pytest.mark.parametrize("x", [-8.5, 8.5])
    def test_on_plate_edge_is_out(self, x: float) -> None:
        assert not self.zone.contains(x, 30.0)

    def test_just_inside_plate_edge_is_in(self) -> None:
        assert self.zone.contains(8.49, 20.01)

    def test_outside_plate_is_out(self) -> None:
        assert not self.zone.contains(9.0, 30.0)


class TestZoneTransition:
    def test_from_flags(self) -> None:
        assert ZoneTransition.from_flags(True, True) is ZoneTransition.STILL_IN
        assert ZoneTransition.from_flags(True, False) is ZoneTransition.NEWLY_EXCLUDED
        assert ZoneTransition.from_flags(False, True) is ZoneTransition.NEWLY_INCLUDED
        assert ZoneTransition.from_flags(False, False) is ZoneTransition.STILL_OUT

    def test_each_flag_pair_has_exactly_one_category(self) -> None:
        seen = {ZoneTransition.from_flags(a, b) for a, b in itertools.product([True, False], repeat=2)}
        assert seen == set(ZoneTransition)
