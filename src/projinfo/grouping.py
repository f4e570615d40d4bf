# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Group project info records by logical project identity."""

import logging
import uuid
from dataclasses import dataclass
from typing import Iterable

from projinfo.model import InputRecord, path_key

logger = logging.getLogger(__name__)

EMPTY_IDENTITY = str(uuid.UUID(int=0))


@dataclass(frozen=True)
class LogicalProject:
    """Represent all records sharing one project identity.

    Attributes:
        identity: Canonical identity of the group.
        records: Member records in input order.
        distinct_source_paths: Distinct project file paths in first-seen order.
    """

    identity: str
    records: tuple[InputRecord, ...]
    distinct_source_paths: tuple[str, ...]

    @property
    def is_duplicate(self) -> bool:
        """Return whether distinct project files share this identity."""
        return len(self.records) > 1 and len(self.distinct_source_paths) > 1

    @property
    def has_empty_identity(self) -> bool:
        return self.identity == EMPTY_IDENTITY


def canonical_identity(identity: str | None) -> str:
    """Return the grouping key for a raw identity value.

    UUID values are compared in canonical lower-case form. Missing, blank and
    all-zero identities all map to :data:`EMPTY_IDENTITY`.
    """
    if identity is None or not identity.strip():
        return EMPTY_IDENTITY
    text = identity.strip()
    try:
        return str(uuid.UUID(text))
    except ValueError:
        return text


def group_records(records: Iterable[InputRecord]) -> list[LogicalProject]:
    """Partition records into logical projects.

    Args:
        records: Records in input order.

    Returns:
        One logical project per distinct identity, in first-seen order.
    """
    by_identity: dict[str, list[InputRecord]] = {}
    for record in records:
        by_identity.setdefault(canonical_identity(record.identity), []).append(record)

    projects: list[LogicalProject] = []
    for identity, members in by_identity.items():
        seen: dict[str, str] = {}
        for member in members:
            seen.setdefault(path_key(member.source_path), member.source_path)
        project = LogicalProject(
            identity=identity,
            records=tuple(members),
            distinct_source_paths=tuple(seen.values()),
        )
        logger.debug(
            f"Grouped logical project (identity={identity}, records={len(members)}, "
            f"duplicate={project.is_duplicate})"
        )
        projects.append(project)
    return projects
