from __future__ import annotations

import argparse
import sys
from pathlib import Path

from goldshell.cmdlist import CommandListError, command_token
from goldshell.config import ConfigError, HarnessConfig, load_config
from goldshell.engine import (
    Drift,
    RecordEngine,
    ReplayEngine,
    ReplayReport,
    SnapshotStaleError,
)
from goldshell.logging_config import configure_logging
from goldshell.snapshot import SnapshotError

from .args import PROG, UsageError, build_parser


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        config = _load_config(args)

        match args.command:
            case "record":
                return cmd_record(args, config)
            case "replay":
                return cmd_replay(args, config)
            case _:
                raise UsageError(f"unknown subcommand {args.command}")

    except UsageError as exc:
        parser.print_usage(sys.stderr)
        _print_error(exc)
        return 1

    except SnapshotStaleError as exc:
        _print_error(exc)
        _print_record_note(exc.list_path, exc.snapshot_path)
        return 1

    except (ConfigError, CommandListError, SnapshotError, OSError) as exc:
        _print_error(exc)
        return 1

    except KeyboardInterrupt:
        return 130


def main() -> None:
    sys.exit(run_cli())


def cmd_record(args: argparse.Namespace, config: HarnessConfig) -> int:
    engine = RecordEngine(config, on_dispatch=_notice("CAPTURING"))
    engine.record(args.list_path)
    return 0


def cmd_replay(args: argparse.Namespace, config: HarnessConfig) -> int:
    engine = ReplayEngine(config, on_dispatch=_notice("REPLAYING"))
    report = engine.replay(args.list_path)
    _print_report(report)
    return 0 if report.ok else 1


def _load_config(args: argparse.Namespace) -> HarnessConfig:
    config = load_config(args.config) if args.config else HarnessConfig()
    if args.jobs is not None:
        config.jobs = args.jobs

    try:
        configure_logging(level=config.log_level)
    except ValueError as exc:
        raise ConfigError(f"invalid log level: {exc}") from exc

    return config


def _notice(verb: str):
    def on_dispatch(index: int, command: str) -> None:
        print(f"{verb}: {command_token(command)}", flush=True)

    return on_dispatch


def _print_error(exc: BaseException) -> None:
    print(f"ERROR: {exc}", file=sys.stderr)


def _print_report(report: ReplayReport) -> None:
    for drift in report.drifts:
        _print_drift(drift)

    if report.stale:
        _print_record_note(report.list_path, report.snapshot_path)

    if report.ok:
        print("OK")


def _print_record_note(list_path: Path, snapshot_path: Path) -> None:
    print(
        f"NOTE: You may want to do `{PROG} record {list_path}` to update {snapshot_path}",
        file=sys.stderr,
    )


def _print_drift(drift: Drift) -> None:
    print(f"UNEXPECTED: {drift.axis.value} in {drift.command}", file=sys.stderr)
    print(f"    EXPECTED: {_show(drift.expected)}", file=sys.stderr)
    print(f"    ACTUAL:   {_show(drift.actual)}", file=sys.stderr)


def _show(value: str | int | bytes) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", "backslashreplace")
    return str(value)
