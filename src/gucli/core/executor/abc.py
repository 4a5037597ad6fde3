"""Command execution abstraction.

Enables dependency injection for testing without mock.patch: callers depend
on Executor, production wires RealExecutor, tests wire FakeExecutor.
"""

from abc import ABC, abstractmethod

from gucli.core.executor.types import ExecutionOutcome
from gucli.core.registry.types import Shell


class Executor(ABC):
    """Runs one shell invocation under a hard wall-clock budget."""

    @abstractmethod
    def execute(
        self,
        invocation: str,
        timeout_seconds: float,
        shell: Shell = Shell.SH,
    ) -> ExecutionOutcome:
        """Run invocation with `<shell> -c` and wait at most timeout_seconds.

        Never raises for command problems: spawn errors, non-zero exits and
        timeouts are all reported through the returned outcome.

        Args:
            invocation: Command string passed verbatim to the shell
            timeout_seconds: Wall-clock budget before the child is terminated
            shell: Interpreter to run the invocation with

        Returns:
            Success, Failure or TimedOut
        """
        ...
