import sys
import uuid
from pathlib import Path
from typing import Callable

import pytest


def _add_src_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()

from projinfo.model import AnalysisResult, AnalysisSettings, InputRecord  # noqa: E402


class RecordingWarningSink:
    """Capture warning lines for assertions."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def warn(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def warning_sink() -> RecordingWarningSink:
    return RecordingWarningSink()


@pytest.fixture
def make_record() -> Callable[..., InputRecord]:
    """Build input records with sensible defaults for one project."""
    default_identity = str(uuid.uuid4())

    def _make(
        *,
        identity: str | None = default_identity,
        source_path: str = "/work/app/App.csproj",
        settings: list[tuple[str, str]] | None = None,
        files: list[str] | None = None,
        **overrides: object,
    ) -> InputRecord:
        analysis_results = tuple(
            AnalysisResult(result_type="files_to_analyze", location=location)
            for location in (["/work/app/Program.cs"] if files is None else files)
        )
        return InputRecord(
            identity=identity,
            source_path=source_path,
            settings=AnalysisSettings.from_pairs(settings or []),
            analysis_results=analysis_results,
            **overrides,  # type: ignore[arg-type]
        )

    return _make
