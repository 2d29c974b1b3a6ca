from dataclasses import dataclass


@dataclass(frozen=True)
class SziError:
    message: str


@dataclass(frozen=True)
class SourceError(SziError):
    source_type: str
    source_detail: str


@dataclass(frozen=True)
class ExportError(SziError):
    path: str
