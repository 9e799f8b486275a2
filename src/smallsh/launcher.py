"""Fork/exec of external commands with redirection and signal setup."""

import logging
import os
import sys
from typing import NoReturn

from smallsh.errors import LaunchError, RedirectionError
from smallsh.models import CommandSpec, ProcessRecord, ShellConfig, SignalPolicy

log = logging.getLogger(__name__)

STDIN_FD = 0
STDOUT_FD = 1
STDERR_FD = 2
CHILD_FAILURE_EXIT_CODE = 1


def resolve_input_path(spec: CommandSpec, null_device: str = os.devnull) -> str | None:
    """Return the file a child should read stdin from, or None to inherit.

    An explicit ``<`` always wins. A background command without one reads
    from the null device so it can never block on the terminal.
    """
    if spec.input_redirect is not None:
        return spec.input_redirect
    if spec.background:
        return null_device
    return None


def _redirect(path: str, target_fd: int, flags: int, mode: int, purpose: str) -> None:
    try:
        fd = os.open(path, flags, mode)
    except OSError as e:
        raise RedirectionError(e.errno, f"cannot open {path} for {purpose}: {e.strerror}") from e
    try:
        os.dup2(fd, target_fd)
    except OSError as e:
        raise RedirectionError(e.errno, f"cannot redirect {purpose} to {path}: {e.strerror}") from e
    finally:
        if fd != target_fd:
            os.close(fd)


def _child_fail(message: str) -> NoReturn:
    os.write(STDERR_FD, f"smallsh: {message}\n".encode(errors="replace"))
    os._exit(CHILD_FAILURE_EXIT_CODE)


def _exec_child(spec: CommandSpec, policy: SignalPolicy, config: ShellConfig) -> NoReturn:
    """Set up the freshly forked child and replace it with the target program."""
    try:
        policy.apply_child_disposition(spec.background)

        input_path = resolve_input_path(spec, config.null_device)
        if input_path is not None:
            _redirect(input_path, STDIN_FD, os.O_RDONLY, 0, "input")
        if spec.output_redirect is not None:
            _redirect(
                spec.output_redirect,
                STDOUT_FD,
                os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                config.output_file_mode,
                "output",
            )

        try:
            os.execvp(spec.program, spec.argv)
        except OSError:
            _child_fail(f"did not recognize the command: {spec.program}")
    except RedirectionError as e:
        _child_fail(e.strerror)
    except Exception as e:
        _child_fail(f"cannot start {spec.program}: {e}")
    finally:
        # Never fall back into the shell's own code from the child.
        os._exit(CHILD_FAILURE_EXIT_CODE)


def launch(
    spec: CommandSpec,
    policy: SignalPolicy,
    config: ShellConfig | None = None,
) -> ProcessRecord:
    """Start ``spec`` in a new process and return its record without waiting.

    Raises LaunchError if the process cannot be created. Redirection and
    exec failures happen in the child and only show up as its exit status.
    """
    config = config or ShellConfig()

    # Buffered output would otherwise be written twice, once by each process.
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        pid = os.fork()
    except OSError as e:
        raise LaunchError(spec.program, e.strerror or str(e)) from e

    if pid == 0:
        _exec_child(spec, policy, config)

    log.debug("launched pid=%d argv=%s background=%s", pid, spec.argv, spec.background)
    return ProcessRecord(pid=pid, background=spec.background, program=spec.program)
