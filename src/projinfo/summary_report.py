# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Summary report data and text rendering for one aggregation run."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from rich.console import Console
from rich.table import Table

from projinfo.model import AggregatedProjectData

logger = logging.getLogger(__name__)

DASHBOARD_URL_FORMAT = "{host}/dashboard/index/{key}"
DASHBOARD_URL_FORMAT_WITH_BRANCH = "{host}/dashboard/index/{key}:{branch}"
REPORT_WIDTH = 100


@dataclass(frozen=True)
class SummaryReportData:
    """Represent the counts shown in the run summary.

    Attributes:
        product_projects: Valid product projects.
        test_projects: Valid test projects.
        invalid_projects: Projects rejected for a missing or duplicate identity.
        skipped_projects: Projects without files to analyze.
        excluded_projects: Projects excluded by their build.
        unsupported_projects: Projects in a language the run does not analyze.
        succeeded: Whether the analysis ran to completion.
        dashboard_url: Dashboard link, or ``None`` without a host URL.
        project_description: Human-readable project description.
    """

    product_projects: int
    test_projects: int
    invalid_projects: int
    skipped_projects: int
    excluded_projects: int
    unsupported_projects: int
    succeeded: bool
    dashboard_url: str | None
    project_description: str

    @classmethod
    def from_projects(
        cls,
        projects: Iterable[AggregatedProjectData],
        ran_to_completion: bool,
        project_key: str,
        project_name: str | None = None,
        project_version: str | None = None,
        host_url: str | None = None,
        branch: str | None = None,
    ) -> "SummaryReportData":
        """Count aggregated projects by status and kind.

        Args:
            projects: Aggregated projects of the run.
            ran_to_completion: Whether the analysis finished.
            project_key: Key of the analyzed project.
            project_name: Optional display name.
            project_version: Optional version label.
            host_url: Optional server URL used for the dashboard link.
            branch: Optional branch name appended to the dashboard link.

        Returns:
            Summary data.
        """
        projects = list(projects)
        valid = [project for project in projects if project.status == "valid"]

        def count(*statuses: str) -> int:
            return sum(1 for project in projects if project.status in statuses)

        return cls(
            product_projects=sum(1 for project in valid if project.kind == "product"),
            test_projects=sum(1 for project in valid if project.kind == "test"),
            invalid_projects=count("invalid_guid", "duplicate_guid"),
            skipped_projects=count("no_files_to_analyze"),
            excluded_projects=count("exclude_flag_set"),
            unsupported_projects=count("unsupported_language"),
            succeeded=ran_to_completion,
            dashboard_url=dashboard_url(host_url, project_key, branch),
            project_description=(
                f"'{project_name or project_key}' "
                f"(key: '{project_key}', version: '{project_version or ''}')"
            ),
        )


def dashboard_url(host_url: str | None, project_key: str, branch: str | None) -> str | None:
    """Return the dashboard link for a project, or ``None`` without a host."""
    if not host_url or not host_url.strip():
        return None
    host = host_url.strip().rstrip("/")
    if branch and branch.strip():
        return DASHBOARD_URL_FORMAT_WITH_BRANCH.format(
            host=host, key=project_key, branch=branch.strip()
        )
    return DASHBOARD_URL_FORMAT.format(host=host, key=project_key)


def render_summary_report(data: SummaryReportData) -> Table:
    """Build the summary table for a run."""
    table = Table(title="Analysis summary", show_header=True, expand=False)
    table.add_column("item", overflow="fold")
    table.add_column("value", overflow="fold")
    table.add_row("project", data.project_description)
    table.add_row("result", "succeeded" if data.succeeded else "failed")
    if data.succeeded and data.dashboard_url:
        table.add_row("dashboard", data.dashboard_url)
    table.add_row("product projects", str(data.product_projects))
    table.add_row("test projects", str(data.test_projects))
    table.add_row("invalid projects", str(data.invalid_projects))
    table.add_row("skipped projects", str(data.skipped_projects))
    table.add_row("excluded projects", str(data.excluded_projects))
    table.add_row("unsupported projects", str(data.unsupported_projects))
    return table


def write_summary_report(data: SummaryReportData, output_path: Path) -> None:
    """Write the summary report as plain text.

    Args:
        data: Summary data to render.
        output_path: Target file path.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as handle:
        console = Console(
            file=handle, force_terminal=False, color_system=None, width=REPORT_WIDTH
        )
        console.print(render_summary_report(data))
    logger.info(f"Summary report written (output_path={output_path})")
