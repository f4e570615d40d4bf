# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Build aggregated project data from project info records."""

import logging
from dataclasses import dataclass
from typing import Iterable

from projinfo.classifier import ClassificationInput, ValidityClassifier
from projinfo.grouping import LogicalProject, group_records
from projinfo.model import AggregatedProjectData, InputRecord, ProjectStatus
from projinfo.options import AggregationOptions
from projinfo.path_aggregator import PathAggregator, select_representative
from projinfo.warning_sink import WarningSink

logger = logging.getLogger(__name__)

DUPLICATE_GUID_WARNING = (
    'Duplicate ProjectGuid: "{identity}". The project will not be analyzed. '
    'Project file: "{source_path}"'
)


@dataclass(frozen=True)
class BuildResult:
    """Represent the outcome of one aggregation pass.

    Attributes:
        projects: One aggregated entry per logical project, in first-seen order.
        warnings: Duplicate identity warnings emitted during the pass.
    """

    projects: list[AggregatedProjectData]
    warnings: list[str]

    def projects_by_status(self, status: ProjectStatus) -> list[AggregatedProjectData]:
        """Return the aggregated projects with the given status."""
        return [project for project in self.projects if project.status == status]


class ProjectDataBuilder:
    """Group, merge and classify project info records."""

    def __init__(
        self,
        warning_sink: WarningSink,
        options: AggregationOptions | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            warning_sink: Receives duplicate identity warnings.
            options: Aggregation options. Defaults are used when omitted.

        Raises:
            ValueError: If ``warning_sink`` is ``None``.
        """
        if warning_sink is None:
            raise ValueError("warning_sink is required.")
        self._warning_sink = warning_sink
        self._options = options or AggregationOptions()
        self._aggregator = PathAggregator(options=self._options)
        self._classifier = ValidityClassifier(
            supported_languages=self._options.supported_languages
        )

    def build(self, records: Iterable[InputRecord]) -> BuildResult:
        """Aggregate records into one entry per logical project.

        Invalid projects are returned with a non-``valid`` status rather than
        raised. Warnings are handed to the sink as one batch once every
        project has been built.

        Args:
            records: Project info records in input order.

        Returns:
            Aggregated projects and the emitted warnings.

        Raises:
            ValueError: If ``records`` is ``None``.
        """
        if records is None:
            raise ValueError("records is required.")

        projects: list[AggregatedProjectData] = []
        warnings: list[str] = []
        for group in group_records(records):
            project_data = self._build_project(group)
            if project_data.status == "duplicate_guid":
                warnings.extend(
                    DUPLICATE_GUID_WARNING.format(
                        identity=group.identity, source_path=source_path
                    )
                    for source_path in group.distinct_source_paths
                )
            logger.debug(
                f"Project classified (identity={group.identity} "
                f"records={len(group.records)} status={project_data.status})"
            )
            projects.append(project_data)

        for warning in warnings:
            self._warning_sink.warn(warning)

        valid_count = sum(1 for project in projects if project.status == "valid")
        logger.info(
            f"Project aggregation completed (groups={len(projects)} "
            f"valid={valid_count} warnings={len(warnings)})"
        )
        return BuildResult(projects=projects, warnings=warnings)

    def _build_project(self, group: LogicalProject) -> AggregatedProjectData:
        representative = select_representative(group.records)
        paths = self._aggregator.aggregate(group, representative)
        status = self._classifier.classify(
            ClassificationInput(project=group, representative=representative, paths=paths)
        )
        return AggregatedProjectData(
            identity=group.identity,
            representative_project=representative,
            status=status,
            kind=representative.kind,
            analyzer_output_paths=paths.analyzer_output_paths,
            roslyn_report_paths=paths.roslyn_report_paths,
            telemetry_paths=paths.telemetry_paths,
            files_to_analyze=paths.files_to_analyze,
        )
