from .loader import load_config
from .types import ConfigError, HarnessConfig, UnsupportedConfigFormatError

__all__ = ["load_config", "HarnessConfig", "ConfigError", "UnsupportedConfigFormatError"]
