"""Process bookkeeping models."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ExitStatus:
    """How a child process terminated: a normal exit code or a signal, never both."""

    code: int | None = None
    signal: int | None = None

    def __post_init__(self) -> None:
        if (self.code is None) == (self.signal is None):
            raise ValueError("ExitStatus needs exactly one of code or signal")

    @classmethod
    def from_wait_status(cls, status: int) -> ExitStatus:
        """Decode a raw status word as returned by os.waitpid."""
        if os.WIFSIGNALED(status):
            return cls(signal=os.WTERMSIG(status))
        if os.WIFEXITED(status):
            return cls(code=os.WEXITSTATUS(status))
        raise ValueError(f"wait status {status:#x} is not a termination")

    @property
    def signaled(self) -> bool:
        return self.signal is not None

    def to_exit_code(self) -> int:
        """Map to a shell exit code, using 128+N for signal terminations."""
        if self.signal is not None:
            return 128 + self.signal
        return self.code


@dataclass
class ProcessRecord:
    """A launched child. ``last_status`` stays None while it is still running."""

    pid: int
    background: bool
    program: str = ""
    last_status: ExitStatus | None = None

    @property
    def running(self) -> bool:
        return self.last_status is None
