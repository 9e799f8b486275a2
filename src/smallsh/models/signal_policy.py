"""Signal disposition policy for the shell and its children."""

import logging
import signal
from dataclasses import dataclass

log = logging.getLogger(__name__)

# The Python runtime ignores these; exec'd programs expect the defaults.
RUNTIME_IGNORED_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGPIPE", "SIGXFSZ") if hasattr(signal, name)
)


@dataclass(frozen=True)
class SignalPolicy:
    """Which signals the shell ignores, and what each child gets back.

    The shell ignores ``interrupt_signals`` for its whole lifetime. Foreground
    children restore the default disposition so the user can kill them;
    background children keep the shell's ignore disposition.
    """

    interrupt_signals: tuple[int, ...] = (signal.SIGINT,)

    def install_shell_disposition(self) -> None:
        for signum in self.interrupt_signals:
            signal.signal(signum, signal.SIG_IGN)
        log.debug("shell ignoring signals %s", list(self.interrupt_signals))

    def child_disposition(self, background: bool) -> dict[int, int]:
        """Return the signal -> handler map a new child applies before exec."""
        handler = signal.SIG_IGN if background else signal.SIG_DFL
        disposition = {signum: handler for signum in self.interrupt_signals}
        for signum in RUNTIME_IGNORED_SIGNALS:
            disposition.setdefault(signum, signal.SIG_DFL)
        return disposition

    def apply_child_disposition(self, background: bool) -> None:
        """Install the child disposition. Only call this in a freshly forked child."""
        for signum, handler in self.child_disposition(background).items():
            signal.signal(signum, handler)
