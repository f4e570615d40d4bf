# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for project info aggregation."""

from projinfo.model import (
    AggregatedProjectData,
    AnalysisResult,
    AnalysisSettings,
    InputRecord,
    Setting,
)
from projinfo.options import AggregationOptions
from projinfo.project_data_builder import BuildResult, ProjectDataBuilder
from projinfo.warning_sink import LoggingWarningSink, WarningSink

__all__ = [
    "AggregatedProjectData",
    "AggregationOptions",
    "AnalysisResult",
    "AnalysisSettings",
    "BuildResult",
    "InputRecord",
    "LoggingWarningSink",
    "ProjectDataBuilder",
    "Setting",
    "WarningSink",
]
