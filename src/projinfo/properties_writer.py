# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Serialize aggregated projects into analysis properties text."""

import logging
from pathlib import Path
from typing import Iterable

from projinfo.model import AggregatedProjectData
from projinfo.options import (
    ANALYZER_OUTPUT_PATHS_KEY_CS,
    ANALYZER_OUTPUT_PATHS_KEY_VB,
    ROSLYN_REPORT_PATHS_KEY_CS,
    ROSLYN_REPORT_PATHS_KEY_VB,
    TELEMETRY_PATHS_KEY_CS,
    TELEMETRY_PATHS_KEY_VB,
    AggregationOptions,
)

logger = logging.getLogger(__name__)

SONAR_SOURCES = "sonar.sources"
SONAR_TESTS = "sonar.tests"
MULTI_VALUE_SEPARATOR = ",\\\n"

_PATH_KEYS_BY_LANGUAGE: dict[str, tuple[str, str, str]] = {
    "cs": (
        ANALYZER_OUTPUT_PATHS_KEY_CS,
        ROSLYN_REPORT_PATHS_KEY_CS,
        TELEMETRY_PATHS_KEY_CS,
    ),
    "vbnet": (
        ANALYZER_OUTPUT_PATHS_KEY_VB,
        ROSLYN_REPORT_PATHS_KEY_VB,
        TELEMETRY_PATHS_KEY_VB,
    ),
}
_LANGUAGE_ALIASES: dict[str, str] = {"c#": "cs", "csharp": "cs", "vb": "vbnet", "vb.net": "vbnet"}


class PropertiesWriterError(RuntimeError):
    """Represent misuse of a properties writer after it was flushed."""


def escape(value: str | None) -> str | None:
    """Escape a value for a properties file.

    Backslashes are doubled; non-ASCII and control characters are written as
    ``\\uXXXX`` escapes, with characters beyond the Basic Multilingual Plane
    split into their UTF-16 surrogate pair.
    """
    if value is None:
        return None
    parts: list[str] = []
    for char in value:
        code_point = ord(char)
        if char == "\\":
            parts.append("\\\\")
        elif code_point < 128 and char.isprintable():
            parts.append(char)
        elif code_point > 0xFFFF:
            offset = code_point - 0x10000
            parts.append(f"\\u{0xD800 + (offset >> 10):04X}")
            parts.append(f"\\u{0xDC00 + (offset & 0x3FF):04X}")
        else:
            parts.append(f"\\u{code_point:04X}")
    return "".join(parts)


class PropertiesWriter:
    """Accumulate per-project analysis properties."""

    def __init__(
        self,
        project_key: str,
        output_dir: Path,
        options: AggregationOptions | None = None,
    ) -> None:
        """Initialize the writer.

        Args:
            project_key: Key of the analyzed root project.
            output_dir: Analysis output directory holding module work dirs.
            options: Options identifying path settings that must not be copied.
        """
        self._project_key = project_key
        self._output_dir = output_dir
        self._options = options or AggregationOptions()
        self._module_keys: list[str] = []
        self._lines: list[str] = []
        self._finished = False

    @property
    def finished_writing(self) -> bool:
        return self._finished

    def write_settings_for_project(self, project: AggregatedProjectData) -> None:
        """Append the properties of one valid project.

        Args:
            project: Aggregated project with status ``valid``.

        Raises:
            PropertiesWriterError: If the writer was already flushed.
            ValueError: If the project is not valid.
        """
        self._ensure_writable()
        if project.status != "valid":
            raise ValueError(
                f"Only valid projects can be written (identity={project.identity} "
                f"status={project.status})"
            )
        record = project.representative_project
        guid = project.identity.upper()
        source_path = Path(record.source_path)

        self._append(f"{guid}.sonar.projectKey", f"{self._project_key}:{guid}")
        self._append(f"{guid}.sonar.projectName", source_path.stem)
        self._append(f"{guid}.sonar.projectBaseDir", str(source_path.absolute().parent))
        if record.encoding and record.encoding.strip():
            self._append(f"{guid}.sonar.sourceEncoding", record.encoding.lower())

        files = [str(path) for path in project.files_to_analyze]
        if project.kind == "product":
            self._append(f"{guid}.{SONAR_TESTS}", "")
            self._append_paths(f"{guid}.{SONAR_SOURCES}", files)
        else:
            self._append(f"{guid}.{SONAR_SOURCES}", "")
            self._append_paths(f"{guid}.{SONAR_TESTS}", files)
        self._lines.append("")

        if record.settings:
            for setting in record.settings:
                if self._options.is_path_setting(setting.key):
                    continue
                self._append(f"{guid}.{setting.key}", setting.value)
            self._write_language_paths(guid, project)
            self._lines.append("")

        self._module_keys.append(guid)
        work_dir = self._output_dir / ".sonar" / f"mod{len(self._module_keys) - 1}"
        self._append(f"{guid}.sonar.working.directory", str(work_dir))

    def write_projects(self, projects: Iterable[AggregatedProjectData]) -> int:
        """Append every valid project and return how many were written."""
        written = 0
        for project in projects:
            if project.status != "valid":
                logger.debug(
                    f"Skipping project properties (identity={project.identity} "
                    f"status={project.status})"
                )
                continue
            self.write_settings_for_project(project)
            written += 1
        return written

    def flush(self) -> str:
        """Finish writing and return the whole content.

        Raises:
            PropertiesWriterError: If the writer was already flushed.
        """
        self._ensure_writable()
        self._finished = True
        self._append("sonar.modules", ",".join(self._module_keys))
        self._lines.append("")
        return "\n".join(self._lines) + "\n"

    def _write_language_paths(self, guid: str, project: AggregatedProjectData) -> None:
        language = (project.representative_project.language or "").lower()
        keys = _PATH_KEYS_BY_LANGUAGE.get(_LANGUAGE_ALIASES.get(language, language))
        if keys is None:
            logger.debug(
                f"No path properties for language (identity={project.identity} language={language})"
            )
            return
        analyzer_key, report_key, telemetry_key = keys
        for key, paths in (
            (analyzer_key, project.analyzer_output_paths),
            (report_key, project.roslyn_report_paths),
            (telemetry_key, project.telemetry_paths),
        ):
            if paths:
                self._append_paths(f"{guid}.{key}", [str(path) for path in paths])

    def _append(self, key: str, value: str) -> None:
        self._lines.append(f"{key}={escape(value)}")

    def _append_paths(self, key: str, paths: list[str]) -> None:
        quoted = ['"' + escape(path).replace('"', '""') + '"' for path in paths]
        self._lines.append(f"{key}=\\")
        self._lines.append(MULTI_VALUE_SEPARATOR.join(quoted))

    def _ensure_writable(self) -> None:
        if self._finished:
            raise PropertiesWriterError("The properties writer has already been flushed.")
