"""Snapshot file encoding.

A snapshot is a sequence of line-headed fields::

    :i version 1
    :i count <N>
    :b shell <len>
    <len raw bytes>
    :i returncode <code>
    :b stdout <len>
    ...

Blob fields are length-prefixed and followed by a single ``\\n``, so stdout and
stderr may carry any byte sequence without escaping.
"""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import BinaryIO, Iterable

from .types import (
    FormatError,
    ProcessResult,
    TruncatedSnapshotError,
    UnsupportedVersionError,
)

SNAPSHOT_VERSION = 1
DEFAULT_SUFFIX = ".bi"

_INT = b"i"
_BLOB = b"b"
_DECIMAL = re.compile(rb"[+-]?[0-9]+")
_CHUNK_SIZE = 1 << 16


def _prefix(kind: bytes, name: str) -> bytes:
    return b":" + kind + b" " + name.encode("ascii") + b" "


class SnapshotWriter:
    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def write_int(self, name: str, value: int) -> None:
        self.stream.write(_prefix(_INT, name) + str(value).encode("ascii") + b"\n")

    def write_blob(self, name: str, data: bytes) -> None:
        self.stream.write(_prefix(_BLOB, name) + str(len(data)).encode("ascii") + b"\n")
        self.stream.write(data)
        self.stream.write(b"\n")

    def write_results(self, results: Iterable[ProcessResult]) -> None:
        results = list(results)
        self.write_int("version", SNAPSHOT_VERSION)
        self.write_int("count", len(results))
        for result in results:
            self.write_blob("shell", result.label.encode("utf-8", "surrogateescape"))
            self.write_int("returncode", result.returncode)
            self.write_blob("stdout", result.stdout)
            self.write_blob("stderr", result.stderr)


class SnapshotReader:
    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def read_int(self, name: str) -> int:
        return self._parse_int(self._read_header(_INT, name), name)

    def read_blob(self, name: str) -> bytes:
        size = self._parse_int(self._read_header(_BLOB, name), name)
        if size < 0:
            raise FormatError(f"Field '{name}': negative blob length {size}")

        data = self._read_exactly(size, name)

        terminator = self.stream.read(1)
        if terminator == b"":
            raise TruncatedSnapshotError(
                f"Field '{name}': missing final newline at end of file"
            )
        if terminator != b"\n":
            raise FormatError(
                f"Field '{name}': expected final newline, got {terminator!r}"
            )

        return data

    def read_results(self) -> list[ProcessResult]:
        line = self._read_line("version")
        if line.startswith(_prefix(_INT, "version")):
            version = self._parse_int(self._strip(line, _INT, "version"), "version")
            if version != SNAPSHOT_VERSION:
                raise UnsupportedVersionError(version, SNAPSHOT_VERSION)
            count = self.read_int("count")
        elif line.startswith(_prefix(_INT, "count")):
            # Files written before the version field start with the count.
            count = self._parse_int(self._strip(line, _INT, "count"), "count")
        else:
            expected = " or ".join(
                repr(_prefix(_INT, name).decode("ascii"))
                for name in ("version", "count")
            )
            raise FormatError(
                f"Expected line to start with {expected}, got {line[:16]!r}"
            )

        if count < 0:
            raise FormatError(f"Field 'count': negative count {count}")

        results: list[ProcessResult] = []
        for _ in range(count):
            label = self.read_blob("shell")
            returncode = self.read_int("returncode")
            stdout = self.read_blob("stdout")
            stderr = self.read_blob("stderr")
            results.append(
                ProcessResult(
                    label.decode("utf-8", "surrogateescape"),
                    returncode,
                    stdout,
                    stderr,
                )
            )

        return results

    def _read_line(self, name: str) -> bytes:
        line = self.stream.readline()
        if line == b"":
            raise TruncatedSnapshotError(f"Field '{name}': unexpected end of file")
        return line

    def _read_exactly(self, size: int, name: str) -> bytes:
        # Never trust the declared size for a single allocation
        chunks: list[bytes] = []
        remaining = size
        while remaining > 0:
            chunk = self.stream.read(min(remaining, _CHUNK_SIZE))
            if not chunk:
                raise TruncatedSnapshotError(
                    f"Field '{name}': expected {size} bytes, got {size - remaining}"
                )
            chunks.append(chunk)
            remaining -= len(chunk)

        return b"".join(chunks)

    def _read_header(self, kind: bytes, name: str) -> bytes:
        return self._strip(self._read_line(name), kind, name)

    def _strip(self, line: bytes, kind: bytes, name: str) -> bytes:
        prefix = _prefix(kind, name)
        if not line.startswith(prefix):
            actual = line[: len(prefix)]
            raise FormatError(
                f"Expected line to start with {prefix.decode('ascii')!r}, got {actual!r}"
            )

        if not line.endswith(b"\n"):
            raise TruncatedSnapshotError(
                f"Field '{name}': line does not end with newline"
            )

        return line[len(prefix) : -1]

    def _parse_int(self, raw: bytes, name: str) -> int:
        if not _DECIMAL.fullmatch(raw):
            raise FormatError(f"Field '{name}': expected a decimal integer, got {raw!r}")
        return int(raw)


def dump(results: Iterable[ProcessResult], stream: BinaryIO) -> None:
    SnapshotWriter(stream).write_results(results)


def load(stream: BinaryIO) -> list[ProcessResult]:
    return SnapshotReader(stream).read_results()


def snapshot_path(list_path: str | Path, suffix: str = DEFAULT_SUFFIX) -> Path:
    list_path = Path(list_path)
    return list_path.with_name(list_path.name + suffix)


def write_snapshot(path: str | Path, results: Iterable[ProcessResult]) -> None:
    """Write the whole snapshot or leave the previous one in place."""
    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as stream:
            dump(results, stream)
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise


def read_snapshot(path: str | Path) -> list[ProcessResult]:
    with open(path, "rb") as stream:
        return load(stream)
