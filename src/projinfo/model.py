# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for project info records and aggregated project data."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Literal

ProjectKind = Literal["product", "test"]

ProjectStatus = Literal[
    "valid",
    "exclude_flag_set",
    "duplicate_guid",
    "invalid_guid",
    "no_files_to_analyze",
    "unsupported_language",
]

AnalysisResultType = Literal["files_to_analyze", "code_coverage", "test_results"]

FILES_TO_ANALYZE: AnalysisResultType = "files_to_analyze"


@dataclass(frozen=True)
class Setting:
    """Represent one analysis setting entry."""

    key: str
    value: str


@dataclass(frozen=True)
class AnalysisSettings:
    """Ordered analysis settings that may contain the same key more than once.

    Lookups by key return the last value written for that key, while iteration
    yields every entry in insertion order.

    Attributes:
        entries: Setting entries in insertion order.
    """

    entries: tuple[Setting, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: list[tuple[str, str]]) -> "AnalysisSettings":
        """Build settings from ``(key, value)`` pairs, keeping their order."""
        return cls(entries=tuple(Setting(key=key, value=value) for key, value in pairs))

    def get(self, key: str) -> str | None:
        """Return the last value declared for ``key``, or ``None``."""
        for entry in reversed(self.entries):
            if entry.key == key:
                return entry.value
        return None

    def values(self, key: str) -> list[str]:
        """Return every value declared for ``key`` in declaration order."""
        return [entry.value for entry in self.entries if entry.key == key]

    def __contains__(self, key: object) -> bool:
        return any(entry.key == key for entry in self.entries)

    def __iter__(self) -> Iterator[Setting]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class AnalysisResult:
    """Represent one analysis output declared by a build invocation.

    Attributes:
        result_type: Kind of result, e.g. ``files_to_analyze``.
        location: Path of the result file as declared.
    """

    result_type: AnalysisResultType | str
    location: str


@dataclass(frozen=True)
class InputRecord:
    """Represent the project info emitted by one build invocation.

    Attributes:
        identity: Project identifier shared by all builds of one project.
        source_path: Path of the project file this record describes.
        kind: Whether the project holds product or test code.
        configuration: Build configuration, e.g. ``Debug``.
        platform: Build platform, e.g. ``AnyCPU``.
        target_framework: Target framework moniker, e.g. ``net8.0``.
        exclude_flag: Whether the build requested exclusion from analysis.
        settings: Ordered analysis settings declared by the build.
        analysis_results: Analysis outputs declared by the build.
        encoding: Source encoding, if known.
        language: Project language tag, e.g. ``cs``.
    """

    identity: str | None
    source_path: str
    kind: ProjectKind = "product"
    configuration: str | None = None
    platform: str | None = None
    target_framework: str | None = None
    exclude_flag: bool = False
    settings: AnalysisSettings = field(default_factory=AnalysisSettings)
    analysis_results: tuple[AnalysisResult, ...] = ()
    encoding: str | None = None
    language: str | None = None

    @property
    def variant_key(self) -> str:
        """Return the ordering key of this build variant."""
        return f"{self.configuration}_{self.platform}_{self.target_framework}"


@dataclass(frozen=True)
class AggregatedProjectData:
    """Represent one logical project after aggregation and classification.

    Attributes:
        identity: Canonical project identity of the group.
        representative_project: Record supplying scalar metadata for the group.
        status: Validity classification of the group.
        kind: Product or test, taken from the representative record.
        analyzer_output_paths: Deduplicated analyzer output paths.
        roslyn_report_paths: Deduplicated compiler analyzer report paths.
        telemetry_paths: Telemetry paths in input order.
        files_to_analyze: Deduplicated source files to analyze.
    """

    identity: str
    representative_project: InputRecord
    status: ProjectStatus
    kind: ProjectKind
    analyzer_output_paths: tuple[Path, ...] = ()
    roslyn_report_paths: tuple[Path, ...] = ()
    telemetry_paths: tuple[Path, ...] = ()
    files_to_analyze: tuple[Path, ...] = ()


def resolve_path(value: str) -> Path:
    """Resolve a declared path to a normalized absolute path.

    The filesystem is not consulted; relative values are anchored at the
    current working directory.
    """
    return Path(os.path.abspath(value))


def path_key(path: Path | str) -> str:
    """Return the comparison key for a path on the current platform."""
    return os.path.normcase(str(path))
