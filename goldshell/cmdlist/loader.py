from pathlib import Path

from .types import CommandListError


def load_commands(path: str | Path) -> list[str]:
    pure_path = Path(path).expanduser()

    if not pure_path.exists():
        raise CommandListError(f"Command list not found: {pure_path}")

    if not pure_path.is_file():
        raise CommandListError(f"Command list path is not a file: {pure_path}")

    try:
        text = pure_path.read_text(encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise CommandListError(f"{pure_path}: cannot read command list") from exc

    return _split_lines(text)


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    # A trailing newline does not open another entry
    if lines[-1] == "":
        lines.pop()

    return [line.removesuffix("\r") for line in lines]


def command_token(command: str) -> str:
    return command.split(" ")[0]
