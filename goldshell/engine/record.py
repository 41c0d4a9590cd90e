from __future__ import annotations

import logging
from pathlib import Path

from goldshell.cmdlist import load_commands
from goldshell.config import HarnessConfig
from goldshell.executor import ProcessRunner, Scheduler
from goldshell.executor.scheduler import DispatchHook
from goldshell.snapshot import ProcessResult, snapshot_path, write_snapshot

from .types import RecordResult

logger = logging.getLogger(__name__)


class RecordEngine:
    def __init__(
        self,
        config: HarnessConfig | None = None,
        *,
        on_dispatch: DispatchHook | None = None,
    ):
        self.config = config or HarnessConfig()
        self.runner = ProcessRunner(self.config.env, self.config.working_dir)
        self.scheduler = Scheduler(self.config.jobs, on_dispatch=on_dispatch)

    def record(self, list_path: str | Path) -> RecordResult:
        list_path = Path(list_path)
        commands = load_commands(list_path)
        results = self.capture_all(commands)

        path = snapshot_path(list_path, self.config.snapshot_suffix)
        write_snapshot(path, results)
        logger.info("recorded %d commands into %s", len(results), path)

        return RecordResult(path, results)

    def capture_all(self, commands: list[str]) -> list[ProcessResult]:
        return self.scheduler.map(commands, self._capture)

    def _capture(self, index: int, command: str) -> ProcessResult:
        return self.runner.capture(command)
