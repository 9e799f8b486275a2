"""Model package for smallsh."""

from smallsh.models.command_spec import CommandSpec
from smallsh.models.process_record import ExitStatus, ProcessRecord
from smallsh.models.shell_config import DEFAULT_MAX_ARGS, DEFAULT_MAX_LINE_LENGTH, ShellConfig
from smallsh.models.signal_policy import SignalPolicy

__all__ = [
    "CommandSpec",
    "DEFAULT_MAX_ARGS",
    "DEFAULT_MAX_LINE_LENGTH",
    "ExitStatus",
    "ProcessRecord",
    "ShellConfig",
    "SignalPolicy",
]
