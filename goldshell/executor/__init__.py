from .runner import ProcessRunner, split_command
from .scheduler import Scheduler
from .types import FAILURE_RETURNCODE, Completed, LaunchFailed, Outcome

__all__ = [
    "ProcessRunner",
    "split_command",
    "Scheduler",
    "FAILURE_RETURNCODE",
    "Completed",
    "LaunchFailed",
    "Outcome",
]
