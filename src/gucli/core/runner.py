"""Run one command end to end: execute, render, log, notify."""

from dataclasses import dataclass

from gucli.core.context import GucliContext
from gucli.core.executor.types import ExecutionOutcome, Failure, Success, TimedOut
from gucli.core.notify.gate import DispatchResult, dispatch
from gucli.core.registry.types import CommandSpec
from gucli.core.render.pipeline import render_output
from gucli.core.render.transforms import clamp_text, strip_ansi

# Captured output kept in one log line; the full text is only shown to the caller
LOG_OUTPUT_LIMIT = 500


@dataclass(frozen=True)
class RunReport:
    """Everything a caller needs after running a command.

    Attributes:
        command: The command that ran
        outcome: Structured execution result
        message: Plain-text status message (also used for notifications)
        display: The same message rendered as safe HTML markup
        notification: What the dispatch gate did with the outcome
    """

    command: CommandSpec
    outcome: ExecutionOutcome
    message: str
    display: str
    notification: DispatchResult

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, Success)


def format_message(invocation: str, outcome: ExecutionOutcome) -> str:
    """Caller-facing status message; the first line doubles as notification summary."""
    match outcome:
        case Success(text=text):
            return f"Ok( Command <{invocation}> executed ), Result:\n {text}"
        case Failure() as failure:
            return f"Err( Command <{invocation}> failed ), Error:\n {_failure_detail(failure)}"
        case TimedOut() as timed_out:
            return f"Err( Command <{invocation}> timed out ), Error:\n {timed_out.text}"


def format_log_entry(invocation: str, outcome: ExecutionOutcome) -> tuple[str, str]:
    """Return (tag, message) for the execution record written to the log."""
    match outcome:
        case Success(text=text, duration_seconds=duration):
            output = clamp_text(strip_ansi(text), LOG_OUTPUT_LIMIT)
            return "INFO", f"Command <{invocation}> executed in {duration:.2f}s, Result: {output}"
        case Failure(kind="spawn") as failure:
            return "ERROR", f"Command <{invocation}> could not start, Error: {failure.text}"
        case Failure() as failure:
            detail = clamp_text(strip_ansi(_failure_detail(failure)), LOG_OUTPUT_LIMIT)
            return (
                "ERROR",
                f"Command <{invocation}> failed (exit {failure.exit_code}) "
                f"in {failure.duration_seconds:.2f}s, Error: {detail}",
            )
        case TimedOut(elapsed_seconds=elapsed):
            return "ERROR", f"Command <{invocation}> timed out after {elapsed:.2f}s"


def run_command(
    ctx: GucliContext,
    command: CommandSpec,
    *,
    timeout_seconds: float | None = None,
) -> RunReport:
    """Execute command and report the result through every channel.

    The execution record is always appended to the log. A notification is
    sent for failures and timeouts, and for successes when the command opts
    in. Nothing here raises because the command misbehaved.

    Args:
        ctx: Application context
        command: Command to run
        timeout_seconds: Override for ctx.config.timeout_seconds
    """
    timeout = timeout_seconds if timeout_seconds is not None else ctx.config.timeout_seconds
    outcome = ctx.executor.execute(command.invocation, timeout, command.shell)

    message = format_message(command.invocation, outcome)
    display = render_output(message, ctx.config.max_display_chars)

    tag, entry = format_log_entry(command.invocation, outcome)
    ctx.log.append(entry, tag=tag)

    notification = dispatch(
        ctx.notifier,
        outcome,
        strip_ansi(message),
        notify_on_success=command.notify_on_success,
        max_body=ctx.config.max_notification_body,
    )
    return RunReport(
        command=command,
        outcome=outcome,
        message=message,
        display=display,
        notification=notification,
    )


def _failure_detail(failure: Failure) -> str:
    if failure.text.strip():
        return failure.text
    return f"Exit code: {failure.exit_code}"
