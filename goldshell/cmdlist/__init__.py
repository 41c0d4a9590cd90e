from .loader import command_token, load_commands
from .types import CommandListError

__all__ = ["command_token", "load_commands", "CommandListError"]
