from __future__ import annotations

import json
from pathlib import Path

import pytest

from goldshell.config.loader import load_config
from goldshell.config.types import (
    ConfigError,
    HarnessConfig,
    UnsupportedConfigFormatError,
)


# -------------------------
# Helpers
# -------------------------


def write_text(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def write_json(path: Path, obj: object) -> Path:
    path.write_text(json.dumps(obj), encoding="utf-8")
    return path


# -------------------------
# Basic file/path errors
# -------------------------


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_path_is_dir_raises_config_error(tmp_path: Path) -> None:
    d = tmp_path / "dir"
    d.mkdir()
    with pytest.raises(ConfigError):
        load_config(d)


def test_unsupported_extension_raises_unsupported_format(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.txt", "jobs: 1")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(p)


# -------------------------
# Parse errors are wrapped
# -------------------------


@pytest.mark.parametrize(
    "name, content",
    [
        ("config.yaml", "env: [\n"),
        ("config.toml", "jobs = "),
        ("config.json", '{"jobs": '),
    ],
)
def test_invalid_syntax_is_wrapped_as_config_error(
    tmp_path: Path, name: str, content: str
) -> None:
    p = write_text(tmp_path / name, content)
    with pytest.raises(ConfigError):
        load_config(p)


@pytest.mark.parametrize(
    "ext, content",
    [
        (".yaml", "[]\n"),
        (".yaml", "null\n"),
        (".json", "[]"),
        (".json", "null"),
    ],
)
def test_top_level_not_mapping_raises(tmp_path: Path, ext: str, content: str) -> None:
    p = write_text(tmp_path / f"config{ext}", content)
    with pytest.raises(ConfigError):
        load_config(p)


def test_unknown_key_raises(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.yaml", "jobs: 1\nretries: 3\n")
    with pytest.raises(ConfigError):
        load_config(p)


# -------------------------
# Field validation
# -------------------------


@pytest.mark.parametrize(
    "content",
    [
        "jobs: -1\n",
        "jobs: two\n",
        "jobs: true\n",
        "jobs: 1.5\n",
        "snapshot_suffix: 3\n",
        'snapshot_suffix: "  "\n',
        "snapshot_suffix: /abs\n",
        "env: []\n",
        "env:\n  1: x\n",
        'env:\n  "   ": x\n',
        "env:\n  KEY: 1\n",
        "working_dir: 1\n",
        'working_dir: "   "\n',
        "log_level: LOUD\n",
        "log_level: 10\n",
    ],
)
def test_invalid_field_raises(tmp_path: Path, content: str) -> None:
    p = write_text(tmp_path / "config.yaml", content)
    with pytest.raises(ConfigError):
        load_config(p)


def test_env_key_is_stripped_value_preserved(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.yaml", 'env:\n  " KEY ": "  v  "\n')
    assert load_config(p).env == {"KEY": "  v  "}


def test_log_level_is_upper_cased(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.yaml", "log_level: debug\n")
    assert load_config(p).log_level == "DEBUG"


# -------------------------
# Happy paths (all formats)
# -------------------------


def test_empty_mapping_gives_defaults(tmp_path: Path) -> None:
    p = write_json(tmp_path / "config.json", {})
    assert load_config(p) == HarnessConfig()
    assert HarnessConfig().snapshot_suffix == ".bi"
    assert HarnessConfig().jobs == 0


def test_valid_yaml_loads(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yml",
        "jobs: 4\n"
        "snapshot_suffix: .snapshot\n"
        "working_dir: ./fixtures\n"
        "env:\n"
        "  LANG: C\n",
    )
    config = load_config(p)
    assert config.jobs == 4
    assert config.snapshot_suffix == ".snapshot"
    assert config.working_dir == "./fixtures"
    assert config.env == {"LANG": "C"}


def test_valid_json_loads(tmp_path: Path) -> None:
    p = write_json(tmp_path / "config.json", {"jobs": 2, "log_level": "INFO"})
    config = load_config(p)
    assert config.jobs == 2
    assert config.log_level == "INFO"


def test_valid_toml_loads(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.toml",
        "jobs = 8\n" 'snapshot_suffix = ".golden"\n' "\n" "[env]\n" 'TZ = "UTC"\n',
    )
    config = load_config(p)
    assert config.jobs == 8
    assert config.snapshot_suffix == ".golden"
    assert config.env == {"TZ": "UTC"}


# -------------------------
# Format table
# -------------------------


@pytest.mark.parametrize("name", ["config.yaml", "config.yml", "CONFIG.YML"])
def test_yaml_suffixes_are_accepted(tmp_path: Path, name: str) -> None:
    p = write_text(tmp_path / name, "jobs: 3\n")
    assert load_config(p).jobs == 3


@pytest.mark.parametrize(
    "name, content, fmt",
    [
        ("config.yaml", "env: [\n", "YAML"),
        ("config.toml", "jobs = ", "TOML"),
        ("config.json", '{"jobs": ', "JSON"),
    ],
)
def test_syntax_error_names_the_format(
    tmp_path: Path, name: str, content: str, fmt: str
) -> None:
    p = write_text(tmp_path / name, content)
    with pytest.raises(ConfigError) as e:
        load_config(p)

    assert f"invalid {fmt}" in str(e.value)
    assert e.value.__cause__ is not None


def test_unsupported_extension_lists_known_suffixes(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.ini", "jobs=1")
    with pytest.raises(UnsupportedConfigFormatError) as e:
        load_config(p)

    for suffix in (".yaml", ".yml", ".toml", ".json"):
        assert suffix in str(e.value)
