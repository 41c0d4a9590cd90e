from __future__ import annotations

from pathlib import Path

import pytest

from goldshell.cmdlist import CommandListError, command_token, load_commands


def write_bytes(path: Path, data: bytes) -> Path:
    path.write_bytes(data)
    return path


def test_one_command_per_line(tmp_path: Path) -> None:
    p = write_bytes(tmp_path / "tests.list", b"echo a\necho b\n")
    assert load_commands(p) == ["echo a", "echo b"]


def test_last_line_without_newline_is_kept(tmp_path: Path) -> None:
    p = write_bytes(tmp_path / "tests.list", b"echo a\necho b")
    assert load_commands(p) == ["echo a", "echo b"]


def test_blank_lines_are_not_skipped(tmp_path: Path) -> None:
    p = write_bytes(tmp_path / "tests.list", b"echo a\n\n# not a comment\n")
    assert load_commands(p) == ["echo a", "", "# not a comment"]


def test_crlf_line_endings(tmp_path: Path) -> None:
    p = write_bytes(tmp_path / "tests.list", b"echo a\r\necho b\r\n")
    assert load_commands(p) == ["echo a", "echo b"]


def test_empty_file_gives_empty_list(tmp_path: Path) -> None:
    p = write_bytes(tmp_path / "tests.list", b"")
    assert load_commands(p) == []


def test_undecodable_bytes_are_preserved(tmp_path: Path) -> None:
    p = write_bytes(tmp_path / "tests.list", b"printf \xff\n")
    [command] = load_commands(p)
    assert command.encode("utf-8", "surrogateescape") == b"printf \xff"


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(CommandListError):
        load_commands(tmp_path / "missing.list")


def test_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(CommandListError):
        load_commands(tmp_path)


@pytest.mark.parametrize(
    "command, token",
    [
        ("echo hello", "echo"),
        ("ls", "ls"),
        (" leading", ""),
        ("", ""),
    ],
)
def test_command_token_is_first_space_delimited_item(command: str, token: str) -> None:
    assert command_token(command) == token
