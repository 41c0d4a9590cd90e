from __future__ import annotations

import argparse

PROG = "goldshell"


class UsageError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def _jobs(value: str) -> int:
    try:
        jobs = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid job count: {value!r}") from None

    if jobs < 0:
        raise argparse.ArgumentTypeError(f"job count must be >= 0, got {jobs}")

    return jobs


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog=PROG,
        description="Record shell command outputs and replay them against the snapshot.",
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Path to config file (.yml/.yaml, .toml, .json)",
    )
    parser.add_argument(
        "-j",
        dest="jobs",
        type=_jobs,
        default=None,
        metavar="N",
        help="Run up to N commands at once (0 = sequential)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
    )

    # record
    record = subparsers.add_parser("record", help="Capture outputs into a snapshot")
    record.add_argument("list_path", help="Command list, one command per line")

    # replay
    replay = subparsers.add_parser("replay", help="Compare outputs against the snapshot")
    replay.add_argument("list_path", help="Command list, one command per line")

    return parser
