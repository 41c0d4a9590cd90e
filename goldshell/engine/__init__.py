from .record import RecordEngine
from .replay import ReplayEngine, compare
from .types import (
    Axis,
    Drift,
    EngineError,
    RecordResult,
    ReplayReport,
    SnapshotStaleError,
)

__all__ = [
    "RecordEngine",
    "ReplayEngine",
    "compare",
    "Axis",
    "Drift",
    "EngineError",
    "RecordResult",
    "ReplayReport",
    "SnapshotStaleError",
]
