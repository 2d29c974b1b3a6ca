from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    mlbam_id: int
    bbref_id: str | None
    name: str  # "Last, First"


@dataclass(frozen=True)
class Biometric:
    bbref_id: str
    height_in: float
