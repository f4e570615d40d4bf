# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Merge path declarations of all build variants of one logical project."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from projinfo.grouping import LogicalProject
from projinfo.model import FILES_TO_ANALYZE, InputRecord, path_key, resolve_path
from projinfo.options import AggregationOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregatedPaths:
    """Represent the merged path lists of one logical project."""

    analyzer_output_paths: tuple[Path, ...]
    roslyn_report_paths: tuple[Path, ...]
    telemetry_paths: tuple[Path, ...]
    files_to_analyze: tuple[Path, ...]


class PathAggregator:
    """Merge analyzer output, report, telemetry and source file paths."""

    def __init__(self, options: AggregationOptions | None = None) -> None:
        self._options = options or AggregationOptions()

    def aggregate(
        self, project: LogicalProject, representative: InputRecord
    ) -> AggregatedPaths:
        """Merge the path declarations of every record in a project.

        Args:
            project: Logical project to merge.
            representative: Record whose declarations are merged last.

        Returns:
            Merged path lists. Empty tuples when nothing is declared.
        """
        ordered = variant_order(project.records, representative)
        analyzer_output_paths = self._collect_split_paths(
            records=ordered,
            keys=self._options.analyzer_output_keys,
            delimiter=self._options.analyzer_output_delimiter,
        )
        roslyn_report_paths = self._collect_split_paths(
            records=ordered,
            keys=self._options.roslyn_report_keys,
            delimiter=self._options.roslyn_report_delimiter,
        )
        telemetry_paths = [
            resolve_path(setting.value)
            for record in project.records
            for setting in record.settings
            if setting.key in self._options.telemetry_keys and setting.value.strip()
        ]
        files_to_analyze = _dedupe(
            resolve_path(result.location)
            for record in project.records
            for result in record.analysis_results
            if result.result_type == FILES_TO_ANALYZE and result.location.strip()
        )
        logger.debug(
            f"Merged project paths (identity={project.identity}, "
            f"analyzer_outputs={len(analyzer_output_paths)}, "
            f"files_to_analyze={len(files_to_analyze)})"
        )
        return AggregatedPaths(
            analyzer_output_paths=tuple(analyzer_output_paths),
            roslyn_report_paths=tuple(roslyn_report_paths),
            telemetry_paths=tuple(telemetry_paths),
            files_to_analyze=tuple(files_to_analyze),
        )

    def _collect_split_paths(
        self, records: list[InputRecord], keys: tuple[str, ...], delimiter: str
    ) -> list[Path]:
        collected: list[Path] = []
        for record in records:
            for key in keys:
                value = record.settings.get(key)
                if value is None:
                    continue
                collected.extend(
                    resolve_path(part.strip())
                    for part in value.split(delimiter)
                    if part.strip()
                )
        return _dedupe(collected)


def select_representative(records: tuple[InputRecord, ...]) -> InputRecord:
    """Pick the record supplying scalar metadata for a logical project.

    Records are stably sorted by their variant key and the last one wins, so
    among records with the same variant key the latest in input order wins.

    Raises:
        ValueError: If ``records`` is empty.
    """
    if not records:
        raise ValueError("A logical project must contain at least one record.")
    return sorted(records, key=lambda record: record.variant_key)[-1]


def variant_order(
    records: tuple[InputRecord, ...], representative: InputRecord
) -> list[InputRecord]:
    """Order records so that the representative variant is merged last.

    This is a two-phase stable partition rather than a general sort: every
    other record keeps its input position relative to the others. When the
    representative object occurs more than once, only its last occurrence
    moves, matching :func:`select_representative`.
    """
    positions = [index for index, record in enumerate(records) if record is representative]
    if not positions:
        return list(records)
    last = positions[-1]
    return [record for index, record in enumerate(records) if index != last] + [
        records[last]
    ]


def _dedupe(paths: Iterable[Path]) -> list[Path]:
    seen: set[str] = set()
    unique: list[Path] = []
    for path in paths:
        key = path_key(path)
        if key in seen:
            continue
        seen.add(key)
        unique.append(path)
    return unique
