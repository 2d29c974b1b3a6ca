from dataclasses import dataclass
from enum import StrEnum


class ZoneTransition(StrEnum):
    STILL_IN = "still_in"
    STILL_OUT = "still_out"
    NEWLY_EXCLUDED = "newly_excluded"
    NEWLY_INCLUDED = "newly_included"

    @classmethod
    def from_flags(cls, legacy_in_zone: bool, proportional_in_zone: bool) -> "ZoneTransition":
        if legacy_in_zone and proportional_in_zone:
            return cls.STILL_IN
        if legacy_in_zone:
            return cls.NEWLY_EXCLUDED
        if proportional_in_zone:
            return cls.NEWLY_INCLUDED
        return cls.STILL_OUT


class MalformedZoneError(ValueError):
    """Raised when a zone's top bound does not sit above its bottom bound."""


@dataclass(frozen=True)
class ZoneDefinition:
    """Vertical strike-zone bounds in inches plus the plate width used for area."""

    bottom: float
    top: float
    plate_width: float = 17.0

    def __post_init__(self) -> None:
        if self.top <= self.bottom:
            raise MalformedZoneError(f"zone top {self.top} must be above bottom {self.bottom}")

    @property
    def height(self) -> float:
        return self.top - self.bottom

    @property
    def area(self) -> float:
        return self.height * self.plate_width

    def contains(self, x: float, z: float) -> bool:
        """Boundary-exclusive membership test; a pitch on any edge is out."""
        half_width = self.plate_width / 2
        return -half_width < x < half_width and self.bottom < z < self.top

    @classmethod
    def proportional(
        cls, height_in: float, bottom_fraction: float, top_fraction: float, plate_width: float = 17.0
    ) -> "ZoneDefinition":
        return cls(bottom=bottom_fraction * height_in, top=top_fraction * height_in, plate_width=plate_width)
