from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LaunchRecord:
    """What was run, where, and how it ended."""

    argv: list[str]
    cwd: str
    exit_code: int | None  # None: the child never started
    started_at: str  # RFC3339
    finished_at: str  # RFC3339

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


def format_command_string(argv: list[str]) -> str:
    """Space-joined argv for human-readable traces. Not shell-quoted."""

    if not argv:
        return ""
    return " ".join(argv)


def launch_record_to_dict(record: LaunchRecord) -> dict[str, Any]:
    return {
        "argv": list(record.argv),
        "cwd": record.cwd,
        "exit_code": record.exit_code,
        "started_at": record.started_at,
        "finished_at": record.finished_at,
    }
