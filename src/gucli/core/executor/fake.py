"""Fake Executor implementation for testing.

FakeExecutor returns pre-configured outcomes keyed by invocation and records
every call, so callers of the executor can be tested without spawning
processes.
"""

from gucli.core.executor.abc import Executor
from gucli.core.executor.types import ExecutionOutcome, Success
from gucli.core.registry.types import Shell


class FakeExecutor(Executor):
    """In-memory fake implementation of command execution.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.

    Examples:
        >>> executor = FakeExecutor(outcomes={"exit 1": Failure("boom", 0.01)})
        >>> executor.execute("exit 1", 0.5)
        Failure(text='boom', duration_seconds=0.01, kind='runtime', exit_code=None)
    """

    def __init__(
        self,
        *,
        outcomes: dict[str, ExecutionOutcome] | None = None,
        default: ExecutionOutcome | None = None,
    ) -> None:
        """Create FakeExecutor.

        Args:
            outcomes: Mapping of invocation to the outcome it should produce
            default: Outcome for invocations not in outcomes (empty Success if None)
        """
        self._outcomes = outcomes or {}
        self._default = default if default is not None else Success(text="", duration_seconds=0.0)
        self._calls: list[tuple[str, float, Shell]] = []

    @property
    def calls(self) -> list[tuple[str, float, Shell]]:
        """Get the (invocation, timeout_seconds, shell) of every execute() call.

        This property is for test assertions only.
        """
        return self._calls

    def execute(
        self,
        invocation: str,
        timeout_seconds: float,
        shell: Shell = Shell.SH,
    ) -> ExecutionOutcome:
        self._calls.append((invocation, timeout_seconds, shell))
        return self._outcomes.get(invocation, self._default)
