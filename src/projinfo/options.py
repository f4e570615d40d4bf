# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Configuration for the aggregation pipeline."""

from dataclasses import dataclass

ANALYZER_OUTPUT_PATHS_KEY_CS = "sonar.cs.analyzer.projectOutPaths"
ANALYZER_OUTPUT_PATHS_KEY_VB = "sonar.vbnet.analyzer.projectOutPaths"
ROSLYN_REPORT_PATHS_KEY_CS = "sonar.cs.roslyn.reportFilePaths"
ROSLYN_REPORT_PATHS_KEY_VB = "sonar.vbnet.roslyn.reportFilePaths"
TELEMETRY_PATHS_KEY_CS = "sonar.cs.scanner.telemetry"
TELEMETRY_PATHS_KEY_VB = "sonar.vbnet.scanner.telemetry"

ANALYZER_OUTPUT_PATHS_DELIMITER = ","
ROSLYN_REPORT_PATHS_DELIMITER = "|"


@dataclass(frozen=True)
class AggregationOptions:
    """Describe which settings carry paths and how they are split.

    Attributes:
        analyzer_output_keys: Settings keys declaring analyzer output paths.
        roslyn_report_keys: Settings keys declaring Roslyn report paths.
        telemetry_keys: Settings keys declaring telemetry paths.
        analyzer_output_delimiter: Separator inside analyzer output values.
        roslyn_report_delimiter: Separator inside Roslyn report values.
        supported_languages: Languages accepted by the current run, or ``None``
            to accept every language.
    """

    analyzer_output_keys: tuple[str, ...] = (
        ANALYZER_OUTPUT_PATHS_KEY_CS,
        ANALYZER_OUTPUT_PATHS_KEY_VB,
    )
    roslyn_report_keys: tuple[str, ...] = (
        ROSLYN_REPORT_PATHS_KEY_CS,
        ROSLYN_REPORT_PATHS_KEY_VB,
    )
    telemetry_keys: tuple[str, ...] = (
        TELEMETRY_PATHS_KEY_CS,
        TELEMETRY_PATHS_KEY_VB,
    )
    analyzer_output_delimiter: str = ANALYZER_OUTPUT_PATHS_DELIMITER
    roslyn_report_delimiter: str = ROSLYN_REPORT_PATHS_DELIMITER
    supported_languages: frozenset[str] | None = None

    def __post_init__(self) -> None:
        """Validate option values.

        Raises:
            ValueError: If a key set is empty or a delimiter is not a single
                non-whitespace character.
        """
        for name in ("analyzer_output_keys", "roslyn_report_keys", "telemetry_keys"):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty.")
        for name in ("analyzer_output_delimiter", "roslyn_report_delimiter"):
            delimiter = getattr(self, name)
            if len(delimiter) != 1 or delimiter.isspace():
                raise ValueError(f"{name} must be a single non-whitespace character.")

    def is_path_setting(self, key: str) -> bool:
        """Return whether ``key`` declares analyzer, report or telemetry paths."""
        return (
            key in self.analyzer_output_keys
            or key in self.roslyn_report_keys
            or key in self.telemetry_keys
        )
