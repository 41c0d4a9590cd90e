from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from goldshell.snapshot import ProcessResult


class Axis(Enum):
    COMMAND = "shell command"
    RETURNCODE = "return code"
    STDOUT = "stdout"
    STDERR = "stderr"


@dataclass(frozen=True)
class Drift:
    index: int
    command: str
    axis: Axis
    expected: str | int | bytes
    actual: str | int | bytes


@dataclass(frozen=True)
class RecordResult:
    snapshot_path: Path
    results: list[ProcessResult]


@dataclass(frozen=True)
class ReplayReport:
    list_path: Path
    snapshot_path: Path
    commands: list[str]
    drifts: list[Drift]

    @property
    def ok(self) -> bool:
        return not self.drifts

    @property
    def stale(self) -> bool:
        return any(drift.axis is Axis.COMMAND for drift in self.drifts)


class EngineError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class SnapshotStaleError(EngineError):
    def __init__(
        self, list_path: Path, snapshot_path: Path, expected: int, actual: int
    ):
        super().__init__(
            f"Amount of shell commands in {list_path} does not match {snapshot_path}: "
            f"expected {expected}, actual {actual}"
        )
        self.list_path = list_path
        self.snapshot_path = snapshot_path
        self.expected = expected
        self.actual = actual
