from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, Sequence, TypeVar

T = TypeVar("T")

Work = Callable[[int, str], T]
DispatchHook = Callable[[int, str], None]

logger = logging.getLogger(__name__)


class _Slots(Generic[T]):
    """Pre-sized, index-addressed result storage shared by the workers."""

    def __init__(self, size: int):
        self._lock = threading.Lock()
        self._values: list[T | None] = [None] * size
        self._errors: list[BaseException | None] = [None] * size

    def put(self, index: int, value: T) -> None:
        with self._lock:
            self._values[index] = value

    def fail(self, index: int, exc: BaseException) -> None:
        with self._lock:
            self._errors[index] = exc

    def collect(self) -> list[T]:
        for exc in self._errors:
            if exc is not None:
                raise exc
        return list(self._values)  # type: ignore[arg-type]


class Scheduler:
    """Runs one unit of work per command, at most ``jobs`` at a time.

    ``jobs == 0`` runs everything sequentially on the calling thread. Results
    always come back in command order, whatever order the workers finish in.
    """

    def __init__(self, jobs: int = 0, *, on_dispatch: DispatchHook | None = None):
        if jobs < 0:
            raise ValueError(f"jobs must be >= 0, got {jobs}")
        self.jobs = jobs
        self.on_dispatch = on_dispatch

    def map(self, commands: Sequence[str], work: Work[T]) -> list[T]:
        if self.jobs == 0:
            return self._run_sequential(commands, work)
        return self._run_concurrent(commands, work)

    def _dispatch(self, index: int, command: str) -> None:
        if self.on_dispatch is not None:
            self.on_dispatch(index, command)

    def _run_sequential(self, commands: Sequence[str], work: Work[T]) -> list[T]:
        results: list[T] = []
        for index, command in enumerate(commands):
            self._dispatch(index, command)
            results.append(work(index, command))
        return results

    def _run_concurrent(self, commands: Sequence[str], work: Work[T]) -> list[T]:
        slots: _Slots[T] = _Slots(len(commands))
        gate = threading.BoundedSemaphore(self.jobs)

        def worker(index: int, command: str) -> None:
            with gate:
                try:
                    self._dispatch(index, command)
                    slots.put(index, work(index, command))
                except BaseException as exc:
                    slots.fail(index, exc)

        threads = [
            threading.Thread(
                target=worker,
                args=(index, command),
                name=f"goldshell-worker-{index}",
            )
            for index, command in enumerate(commands)
        ]

        logger.debug("starting %d workers, jobs=%d", len(threads), self.jobs)
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        return slots.collect()
