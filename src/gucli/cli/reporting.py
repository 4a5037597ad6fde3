"""Shared presentation of run results for the run and test commands."""

import click

from gucli.cli.output import machine_output, user_output
from gucli.core.executor.types import Failure, Success, TimedOut
from gucli.core.notify.gate import DispatchResult
from gucli.core.render.transforms import strip_ansi
from gucli.core.runner import RunReport

# Matches coreutils `timeout`
TIMEOUT_EXIT_CODE = 124


def emit_run_report(report: RunReport, *, html: bool) -> None:
    """Print the report and exit with a status reflecting the outcome.

    Raises:
        SystemExit: 1 for failures, 124 for timeouts
    """
    if html:
        machine_output(report.display)
    else:
        machine_output(strip_ansi(report.message))

    if report.notification == DispatchResult.UNAVAILABLE:
        user_output(click.style("Notification skipped: notifier not available", dim=True))

    match report.outcome:
        case Success():
            return
        case Failure():
            raise SystemExit(1)
        case TimedOut():
            raise SystemExit(TIMEOUT_EXIT_CODE)
