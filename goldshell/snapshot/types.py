from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessResult:
    label: str
    returncode: int
    stdout: bytes
    stderr: bytes


class SnapshotError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class FormatError(SnapshotError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedVersionError(FormatError):
    def __init__(self, version: int, supported: int):
        super().__init__(
            f"Unsupported snapshot version {version}, expected {supported}"
        )
        self.version = version


class TruncatedSnapshotError(SnapshotError, EOFError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
