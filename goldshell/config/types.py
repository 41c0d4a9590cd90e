from dataclasses import dataclass, field

from goldshell.snapshot import DEFAULT_SUFFIX

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class HarnessConfig:
    jobs: int = 0
    snapshot_suffix: str = DEFAULT_SUFFIX
    env: dict[str, str] = field(default_factory=dict)
    working_dir: str | None = None
    log_level: str | None = None


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
