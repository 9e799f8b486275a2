"""Human-readable process status reports."""

from smallsh.models import ExitStatus, ProcessRecord


def render_status(status: ExitStatus) -> str:
    """Render a termination status as either an exit value or a signal."""
    if status.signal is not None:
        return f"terminated by signal {status.signal}"
    return f"exited normally with exit value {status.code}"


def format_background_start(record: ProcessRecord) -> str:
    return f"background pid is {record.pid}"


def format_completion(record: ProcessRecord) -> str:
    """Render the report for a reaped background process."""
    if record.last_status is None:
        raise ValueError(f"process {record.pid} has not terminated")
    return f"background pid {record.pid} is done: {render_status(record.last_status)}"
