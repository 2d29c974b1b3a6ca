from dataclasses import dataclass
from enum import StrEnum


class SignificanceTier(StrEnum):
    P_001 = "p<0.001"
    P_01 = "p<0.01"
    P_05 = "p<0.05"
    NOT_SIGNIFICANT = "not significant"
    UNDEFINED = "undefined"

    @classmethod
    def from_p_value(cls, p_value: float | None) -> "SignificanceTier":
        if p_value is None:
            return cls.UNDEFINED
        if p_value < 0.001:
            return cls.P_001
        if p_value < 0.01:
            return cls.P_01
        if p_value < 0.05:
            return cls.P_05
        return cls.NOT_SIGNIFICANT


@dataclass(frozen=True)
class GroupSummary:
    key: tuple[object, ...]
    count: int
    means: dict[str, float | None]


@dataclass(frozen=True)
class Comparison:
    left_mean: float | None
    right_mean: float | None
    left_count: int
    right_count: int
    difference: float | None  # right - left
    p_value: float | None
    significance: SignificanceTier


@dataclass(frozen=True)
class AggregateRow:
    """Per-group outcome means under each zone and the proportional minus legacy delta."""

    key: tuple[object, ...]
    metric: str
    count: int
    legacy_mean: float | None
    proportional_mean: float | None
    legacy_count: int
    proportional_count: int
    difference: float | None
    p_value: float | None
    significance: SignificanceTier


@dataclass(frozen=True)
class TransitionCounts:
    key: tuple[object, ...]
    still_in: int
    still_out: int
    newly_excluded: int
    newly_included: int

    @property
    def total(self) -> int:
        return self.still_in + self.still_out + self.newly_excluded + self.newly_included


@dataclass(frozen=True)
class ZoneGeometrySummary:
    key: tuple[object, ...]
    count: int
    legacy_height: float
    proportional_height: float
    legacy_area: float
    proportional_area: float

    @property
    def area_difference(self) -> float:
        return self.proportional_area - self.legacy_area
