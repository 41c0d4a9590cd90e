from dataclasses import dataclass

from goldshell.snapshot import ProcessResult

# Return code every failed launch or signal exit collapses to
FAILURE_RETURNCODE = 1


@dataclass(frozen=True)
class Completed:
    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def signaled(self) -> bool:
        return self.returncode < 0

    def to_result(self, label: str) -> ProcessResult:
        returncode = FAILURE_RETURNCODE if self.signaled else self.returncode
        return ProcessResult(label, returncode, self.stdout, self.stderr)


@dataclass(frozen=True)
class LaunchFailed:
    reason: str

    def to_result(self, label: str) -> ProcessResult:
        return ProcessResult(label, FAILURE_RETURNCODE, b"", b"")


Outcome = Completed | LaunchFailed
