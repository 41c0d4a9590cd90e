import json
import tomllib
from pathlib import Path
from typing import Any, Callable, Mapping, NamedTuple

import yaml

from .types import (
    LOG_LEVELS,
    ConfigError,
    HarnessConfig,
    UnsupportedConfigFormatError,
)


class _Format(NamedTuple):
    name: str
    loads: Callable[[str], Any]
    error: type[Exception]


_FORMATS: dict[str, _Format] = {
    ".yaml": _Format("YAML", yaml.safe_load, yaml.YAMLError),
    ".yml": _Format("YAML", yaml.safe_load, yaml.YAMLError),
    ".toml": _Format("TOML", tomllib.loads, tomllib.TOMLDecodeError),
    ".json": _Format("JSON", json.loads, json.JSONDecodeError),
}


def load_config(path: str | Path) -> HarnessConfig:
    config_path = Path(path).expanduser().resolve()

    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    if not config_path.is_file():
        raise ConfigError(f"Config path is not a file: {config_path}")

    return _build_harness_config(_parse_file(config_path))


def _parse_file(path: Path) -> Mapping[str, Any]:
    fmt = _FORMATS.get(path.suffix.lower())
    if fmt is None:
        raise UnsupportedConfigFormatError(
            f"Unsupported config extension {path.suffix!r}, expected one of: "
            + ", ".join(_FORMATS)
        )

    try:
        raw = fmt.loads(path.read_text(encoding="utf-8"))
    except fmt.error as exc:
        raise ConfigError(f"{path}: invalid {fmt.name}") from exc

    if not isinstance(raw, Mapping):
        raise ConfigError(
            f"{path}: top-level {fmt.name} value must be a mapping, got {type(raw).__name__}"
        )

    return raw


def _build_harness_config(raw: Mapping[str, Any]) -> HarnessConfig:
    keys = {"jobs", "snapshot_suffix", "env", "working_dir", "log_level"}
    config = HarnessConfig()

    for field in raw.keys():
        if field not in keys:
            raise ConfigError(f"Can't process: {field}")

    if "jobs" in raw:
        jobs = raw["jobs"]
        # bool is an int subclass, reject it explicitly
        if not isinstance(jobs, int) or isinstance(jobs, bool):
            raise ConfigError(f"'jobs' must be an integer, got {type(jobs)}")

        if jobs < 0:
            raise ConfigError(f"'jobs' must be >= 0, got {jobs}")

        config.jobs = jobs

    if "snapshot_suffix" in raw:
        suffix = raw["snapshot_suffix"]
        if not isinstance(suffix, str):
            raise ConfigError("'snapshot_suffix' should be a string")

        if len(suffix.strip()) < 1:
            raise ConfigError("'snapshot_suffix' can't be empty")

        if "/" in suffix:
            raise ConfigError("'snapshot_suffix' can't contain a path separator")

        config.snapshot_suffix = suffix

    if "env" in raw:
        if not isinstance(raw["env"], Mapping):
            raise ConfigError("Env should be a mapping")

        for key, item in raw["env"].items():
            if not isinstance(key, str):
                raise ConfigError(f"{key} should be a string")

            if len(key.strip()) < 1:
                raise ConfigError("A key can't be empty")

            if not isinstance(item, str):
                raise ConfigError(f"{item} should be a string")

            config.env[key.strip()] = item

    if "working_dir" in raw:
        if not isinstance(raw["working_dir"], str):
            raise ConfigError("The working_dir should be a string")

        if len(raw["working_dir"].strip()) < 1:
            raise ConfigError("Please provide a string or remove the working_dir field")

        config.working_dir = raw["working_dir"].strip()

    if "log_level" in raw:
        level = raw["log_level"]
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"'log_level' must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
            )

        config.log_level = level.upper()

    return config
