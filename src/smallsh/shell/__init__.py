"""Interactive shell loop and built-in commands."""

from smallsh.shell.builtins import BUILTINS
from smallsh.shell.loop import Shell

__all__ = [
    "BUILTINS",
    "Shell",
]
