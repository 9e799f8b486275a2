"""Error types raised by smallsh."""


class ParseValidationError(ValueError):
    """A command line is malformed; nothing is launched."""


class LaunchError(RuntimeError):
    """The OS refused to create a new process. Fatal to the shell."""

    def __init__(self, program: str, reason: str) -> None:
        super().__init__(f"unable to start {program}: {reason}")
        self.program = program
        self.reason = reason


class RedirectionError(OSError):
    """Opening or installing a redirect failed inside a child process."""
