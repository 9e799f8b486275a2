"""Tracking and reaping of launched child processes."""

import logging
import os

from smallsh.models import ExitStatus, ProcessRecord

log = logging.getLogger(__name__)


class JobTracker:
    """Owns the set of outstanding background processes for one shell.

    Only the shell's control thread touches this object: launches, waits
    and polls happen strictly one after another, so there is no locking.
    """

    def __init__(self) -> None:
        self._background: dict[int, ProcessRecord] = {}
        self.last_reaped: ExitStatus | None = None

    def __len__(self) -> int:
        return len(self._background)

    @property
    def outstanding(self) -> list[ProcessRecord]:
        return list(self._background.values())

    def track(self, record: ProcessRecord) -> None:
        """Add a freshly launched background record to the outstanding set."""
        if not record.background:
            raise ValueError(f"pid {record.pid} is a foreground process")
        self._background[record.pid] = record
        log.debug("tracking background pid=%d (%d outstanding)", record.pid, len(self))

    def wait_foreground(self, record: ProcessRecord) -> ExitStatus:
        """Block until ``record``'s process terminates and return its status."""
        _, status = os.waitpid(record.pid, 0)
        record.last_status = ExitStatus.from_wait_status(status)
        log.debug("foreground pid=%d finished: %s", record.pid, record.last_status)
        return record.last_status

    def reap_background(self) -> list[ProcessRecord]:
        """Collect every background process that has terminated, without blocking.

        Returned records carry their final status and are no longer tracked.
        The order of the result is not meaningful.
        """
        finished: list[ProcessRecord] = []
        for pid, record in list(self._background.items()):
            try:
                reaped_pid, status = os.waitpid(pid, os.WNOHANG)
            except ChildProcessError:
                log.warning("background pid=%d was reaped elsewhere; dropping it", pid)
                del self._background[pid]
                continue
            if reaped_pid == 0:
                continue
            self._finish(record, status)
            finished.append(record)
        return finished

    def drain(self) -> ExitStatus | None:
        """Wait for every outstanding background process before shutdown.

        Returns the status of the last process reaped, or None if nothing
        was outstanding.
        """
        last: ExitStatus | None = None
        for pid, record in list(self._background.items()):
            try:
                _, status = os.waitpid(pid, 0)
            except ChildProcessError:
                log.warning("background pid=%d was reaped elsewhere; dropping it", pid)
                del self._background[pid]
                continue
            last = self._finish(record, status)
        log.debug("drained background jobs, last status %s", last)
        return last

    def _finish(self, record: ProcessRecord, status: int) -> ExitStatus:
        record.last_status = ExitStatus.from_wait_status(status)
        self.last_reaped = record.last_status
        del self._background[record.pid]
        log.debug("background pid=%d finished: %s", record.pid, record.last_status)
        return record.last_status
