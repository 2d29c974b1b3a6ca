from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd


@dataclass
class DropReport:
    """How many events each stage removed, and why.

    ``input_events`` always equals the sum of the drop counts plus ``output_events``.
    """

    input_events: int = 0
    missing_identity: int = 0
    missing_height: int = 0
    missing_zone_bounds: int = 0
    missing_location: int = 0
    malformed_geometry: int = 0
    output_events: int = 0

    @property
    def total_dropped(self) -> int:
        return (
            self.missing_identity
            + self.missing_height
            + self.missing_zone_bounds
            + self.missing_location
            + self.malformed_geometry
        )

    def as_rows(self) -> list[tuple[str, int]]:
        return [
            ("input events", self.input_events),
            ("missing identity", self.missing_identity),
            ("missing height", self.missing_height),
            ("missing zone bounds", self.missing_zone_bounds),
            ("missing pitch location", self.missing_location),
            ("malformed geometry", self.malformed_geometry),
            ("classified events", self.output_events),
        ]


@dataclass
class PipelineResult:
    events: pd.DataFrame = field(default_factory=pd.DataFrame)
    drops: DropReport = field(default_factory=DropReport)
