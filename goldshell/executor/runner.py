from __future__ import annotations

import logging
import os
import subprocess
from typing import Mapping

from goldshell.snapshot import ProcessResult

from .types import Completed, LaunchFailed, Outcome

logger = logging.getLogger(__name__)


def split_command(command: str) -> list[str]:
    """Split on single spaces. No quoting, no shell syntax."""
    return command.split(" ")


class ProcessRunner:
    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        working_dir: str | None = None,
    ):
        self.env = dict(env or {})
        self.working_dir = working_dir

    def run(self, command: str) -> Outcome:
        args = split_command(command)
        logger.debug("spawning %r", args)

        try:
            proc = subprocess.run(
                args,
                cwd=self.working_dir or None,
                env={**os.environ, **self.env},
                capture_output=True,
            )
        except (OSError, ValueError) as exc:
            logger.warning("could not launch %r: %s", args[0], exc)
            return LaunchFailed(str(exc))

        if proc.returncode < 0:
            logger.warning("%r terminated by signal %d", args[0], -proc.returncode)
        else:
            logger.debug("%r exited with %d", args[0], proc.returncode)

        return Completed(proc.returncode, proc.stdout, proc.stderr)

    def capture(self, command: str) -> ProcessResult:
        return self.run(command).to_result(split_command(command)[0])
