from .codec import (
    DEFAULT_SUFFIX,
    SNAPSHOT_VERSION,
    SnapshotReader,
    SnapshotWriter,
    dump,
    load,
    read_snapshot,
    snapshot_path,
    write_snapshot,
)
from .types import (
    FormatError,
    ProcessResult,
    SnapshotError,
    TruncatedSnapshotError,
    UnsupportedVersionError,
)

__all__ = [
    "DEFAULT_SUFFIX",
    "SNAPSHOT_VERSION",
    "SnapshotReader",
    "SnapshotWriter",
    "dump",
    "load",
    "read_snapshot",
    "snapshot_path",
    "write_snapshot",
    "FormatError",
    "ProcessResult",
    "SnapshotError",
    "TruncatedSnapshotError",
    "UnsupportedVersionError",
]
