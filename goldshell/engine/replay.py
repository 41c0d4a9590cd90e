from __future__ import annotations

import logging
from pathlib import Path

from goldshell.cmdlist import command_token, load_commands
from goldshell.config import HarnessConfig
from goldshell.executor import ProcessRunner, Scheduler
from goldshell.executor.scheduler import DispatchHook
from goldshell.snapshot import ProcessResult, read_snapshot, snapshot_path

from .types import Axis, Drift, ReplayReport, SnapshotStaleError

logger = logging.getLogger(__name__)


def compare(
    index: int, command: str, expected: ProcessResult, actual: ProcessResult
) -> list[Drift]:
    """Byte-exact comparison of one live result against its recorded one."""
    drifts: list[Drift] = []

    if actual.returncode != expected.returncode:
        drifts.append(
            Drift(index, command, Axis.RETURNCODE, expected.returncode, actual.returncode)
        )

    if actual.stdout != expected.stdout:
        drifts.append(Drift(index, command, Axis.STDOUT, expected.stdout, actual.stdout))

    if actual.stderr != expected.stderr:
        drifts.append(Drift(index, command, Axis.STDERR, expected.stderr, actual.stderr))

    return drifts


class ReplayEngine:
    def __init__(
        self,
        config: HarnessConfig | None = None,
        *,
        on_dispatch: DispatchHook | None = None,
    ):
        self.config = config or HarnessConfig()
        self.runner = ProcessRunner(self.config.env, self.config.working_dir)
        self.scheduler = Scheduler(self.config.jobs, on_dispatch=on_dispatch)

    def replay(self, list_path: str | Path) -> ReplayReport:
        list_path = Path(list_path)
        commands = load_commands(list_path)
        path = snapshot_path(list_path, self.config.snapshot_suffix)
        snapshots = read_snapshot(path)

        if len(commands) != len(snapshots):
            raise SnapshotStaleError(list_path, path, len(snapshots), len(commands))

        def check(index: int, command: str) -> list[Drift]:
            return self._check(index, command, snapshots[index])

        per_command = self.scheduler.map(commands, check)
        drifts = [drift for found in per_command for drift in found]
        logger.info(
            "replayed %d commands from %s, %d drifts", len(commands), path, len(drifts)
        )

        return ReplayReport(list_path, path, commands, drifts)

    def _check(self, index: int, command: str, expected: ProcessResult) -> list[Drift]:
        token = command_token(command)
        if token != expected.label:
            # The list was edited without re-recording; outputs are not comparable.
            return [Drift(index, command, Axis.COMMAND, expected.label, token)]

        actual = self.runner.capture(command)
        return compare(index, command, expected, actual)
