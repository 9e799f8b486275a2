"""Commands that run inside the shell process itself."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import TYPE_CHECKING

from smallsh.status import render_status

if TYPE_CHECKING:
    from smallsh.shell.loop import Shell


def cd(shell: Shell, argv: list[str]) -> bool:
    """Change directory to ``argv[1]``, or to $HOME with no argument."""
    target = argv[1] if len(argv) > 1 else os.environ.get("HOME", "")
    try:
        os.chdir(target)
    except OSError as e:
        if shell.config.report_cd_failures:
            print(f"smallsh: cd: {target or '(HOME unset)'}: {e.strerror}", file=shell.stderr)
    return True


def status(shell: Shell, argv: list[str]) -> bool:
    print(render_status(shell.last_status), file=shell.stdout)
    return True


def exit_(shell: Shell, argv: list[str]) -> bool:
    return False


BUILTINS: dict[str, Callable[[Shell, list[str]], bool]] = {
    "cd": cd,
    "status": status,
    "exit": exit_,
}
