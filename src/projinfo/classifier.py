# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Validity classification of logical projects."""

from dataclasses import dataclass
from typing import Callable

from projinfo.grouping import LogicalProject
from projinfo.model import InputRecord, ProjectStatus
from projinfo.path_aggregator import AggregatedPaths


@dataclass(frozen=True)
class ClassificationInput:
    """Bundle everything a validity check may inspect.

    Attributes:
        project: Logical project being classified.
        representative: Representative record of the project.
        paths: Merged paths of the project.
    """

    project: LogicalProject
    representative: InputRecord
    paths: AggregatedPaths


ValidityCheck = Callable[[ClassificationInput], ProjectStatus | None]


def check_duplicate_guid(candidate: ClassificationInput) -> ProjectStatus | None:
    """Reject distinct project files sharing one identity."""
    return "duplicate_guid" if candidate.project.is_duplicate else None


def check_invalid_guid(candidate: ClassificationInput) -> ProjectStatus | None:
    """Reject projects without a usable identity."""
    return "invalid_guid" if candidate.project.has_empty_identity else None


def check_exclude_flag(candidate: ClassificationInput) -> ProjectStatus | None:
    """Exclude projects where any build variant requested exclusion."""
    if any(record.exclude_flag for record in candidate.project.records):
        return "exclude_flag_set"
    return None


def check_files_to_analyze(candidate: ClassificationInput) -> ProjectStatus | None:
    """Skip projects that declare no source files."""
    return None if candidate.paths.files_to_analyze else "no_files_to_analyze"


def language_check(supported_languages: frozenset[str]) -> ValidityCheck:
    """Build a check rejecting representatives in unsupported languages.

    Args:
        supported_languages: Language tags accepted by the current run.

    Returns:
        Check returning ``unsupported_language`` for other languages.
    """
    normalized = frozenset(language.lower() for language in supported_languages)

    def check_language(candidate: ClassificationInput) -> ProjectStatus | None:
        language = (candidate.representative.language or "").lower()
        return None if language in normalized else "unsupported_language"

    return check_language


DEFAULT_CHECKS: tuple[ValidityCheck, ...] = (
    check_duplicate_guid,
    check_invalid_guid,
    check_exclude_flag,
    check_files_to_analyze,
)


class ValidityClassifier:
    """Apply validity checks in order; the first verdict wins."""

    def __init__(
        self,
        checks: tuple[ValidityCheck, ...] = DEFAULT_CHECKS,
        supported_languages: frozenset[str] | None = None,
    ) -> None:
        """Initialize the classifier.

        Args:
            checks: Ordered checks. Each returns a status or ``None`` to continue.
            supported_languages: When set, a language check is inserted right
                after the identity checks.
        """
        if supported_languages is not None:
            position = _after_identity_checks(checks)
            checks = (
                *checks[:position],
                language_check(supported_languages),
                *checks[position:],
            )
        self._checks = checks

    def classify(self, candidate: ClassificationInput) -> ProjectStatus:
        """Return the validity status of a logical project.

        Args:
            candidate: Project, representative and merged paths.

        Returns:
            The first status returned by a check, otherwise ``valid``.
        """
        for check in self._checks:
            status = check(candidate)
            if status is not None:
                return status
        return "valid"


def _after_identity_checks(checks: tuple[ValidityCheck, ...]) -> int:
    """Return the index just past the last identity check, or 0 if none."""
    position = 0
    for index, check in enumerate(checks):
        if check in (check_duplicate_guid, check_invalid_guid):
            position = index + 1
    return position
