"""The interactive read-parse-dispatch loop."""

import logging
import sys
from typing import TextIO

from smallsh.errors import LaunchError, ParseValidationError
from smallsh.jobs import JobTracker
from smallsh.launcher import launch
from smallsh.models import CommandSpec, ExitStatus, ShellConfig, SignalPolicy
from smallsh.parser import build_command_spec
from smallsh.shell.builtins import BUILTINS
from smallsh.status import format_background_start, format_completion, render_status

log = logging.getLogger(__name__)

LAUNCH_FAILURE_EXIT_CODE = 1


class Shell:
    """One interactive session: owns the job tracker and the last foreground status."""

    def __init__(
        self,
        config: ShellConfig | None = None,
        policy: SignalPolicy | None = None,
        jobs: JobTracker | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.config = config or ShellConfig()
        self.policy = policy or SignalPolicy()
        self.jobs = jobs if jobs is not None else JobTracker()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.last_status = ExitStatus(code=0)
        self._foreground_seen = False

    def run(self) -> int:
        """Run until ``exit``, end of input, or a launch failure; return the exit code."""
        while True:
            line = self._read_line()
            if line is None:
                return self.shutdown()
            try:
                keep_going = self.run_line(line)
            except LaunchError as e:
                print(f"smallsh: {e}", file=self.stderr, flush=True)
                self.jobs.drain()
                return LAUNCH_FAILURE_EXIT_CODE
            self.report_background()
            if not keep_going:
                return self.shutdown()

    def run_line(self, line: str) -> bool:
        """Handle one input line. Returns False when the shell should exit."""
        try:
            spec = build_command_spec(
                line,
                max_line_length=self.config.max_line_length,
                max_args=self.config.max_args,
            )
        except ParseValidationError as e:
            print(f"smallsh: {e}", file=self.stderr, flush=True)
            return True
        if spec is None:
            return True

        builtin = BUILTINS.get(spec.program)
        if builtin is not None:
            return builtin(self, spec.argv)

        self._run_external(spec)
        return True

    def _run_external(self, spec: CommandSpec) -> None:
        record = launch(spec, self.policy, self.config)
        if spec.background:
            self.jobs.track(record)
            print(format_background_start(record), file=self.stdout, flush=True)
            return

        self.last_status = self.jobs.wait_foreground(record)
        self._foreground_seen = True
        if self.last_status.signaled:
            print(render_status(self.last_status), file=self.stdout, flush=True)

    def report_background(self) -> None:
        """Print a completion line for each background job that has finished."""
        for record in self.jobs.reap_background():
            print(format_completion(record), file=self.stdout, flush=True)

    def shutdown(self) -> int:
        """Wait for all background jobs and return the shell's exit code."""
        log.debug("shutting down with %d background job(s) outstanding", len(self.jobs))
        self.jobs.drain()
        if self._foreground_seen:
            return self.last_status.to_exit_code()
        if self.jobs.last_reaped is not None:
            return self.jobs.last_reaped.to_exit_code()
        return 0

    def _read_line(self) -> str | None:
        print(self.config.prompt, end="", file=self.stdout, flush=True)
        line = self.stdin.readline()
        if not line:
            return None
        return line
