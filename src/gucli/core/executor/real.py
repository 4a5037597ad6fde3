"""Production executor: one child process per call, supervised by a poll loop."""

import logging
import subprocess
import threading
from functools import partial
from typing import IO

from gucli.core.executor.abc import Executor
from gucli.core.executor.types import ExecutionOutcome, Failure, Success, TimedOut
from gucli.core.registry.types import Shell
from gucli.core.time.abc import Time

logger = logging.getLogger(__name__)

_READ_CHUNK = 65536


class RealExecutor(Executor):
    """Runs invocations with `<shell> -c` under a hard timeout.

    Implementation details:
    - stdout and stderr are drained by background threads into separate
      buffers, so a child writing more than a pipe buffer never stalls
    - completion is checked every poll_interval_seconds via Popen.poll()
      rather than an unbounded wait()
    - on timeout the direct child gets SIGTERM, then SIGKILL after
      grace_seconds; descendants started in the background (`cmd &`) are
      not tracked and may outlive the call
    - failures are logged at DEBUG only; run_command writes the one
      execution record per call
    """

    def __init__(
        self,
        time: Time,
        *,
        poll_interval_seconds: float = 0.1,
        grace_seconds: float = 0.1,
    ) -> None:
        self._time = time
        self._poll_interval = poll_interval_seconds
        self._grace = grace_seconds

    def execute(
        self,
        invocation: str,
        timeout_seconds: float,
        shell: Shell = Shell.SH,
    ) -> ExecutionOutcome:
        logger.debug("Executing command with %s: %s", shell.value, invocation)
        start = self._time.monotonic()

        try:
            process = subprocess.Popen(
                [shell.value, "-c", invocation],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            logger.debug("Failed to start %s for <%s>: %s", shell.value, invocation, e)
            return Failure(
                text=f"Failed to start {shell.value}: {e}",
                duration_seconds=self._time.monotonic() - start,
                kind="spawn",
            )

        stdout_chunks: list[bytes] = []
        stderr_chunks: list[bytes] = []
        readers = [
            _start_reader(process.stdout, stdout_chunks),
            _start_reader(process.stderr, stderr_chunks),
        ]

        while process.poll() is None:
            elapsed = self._time.monotonic() - start
            if elapsed >= timeout_seconds:
                self._terminate(process)
                elapsed = self._time.monotonic() - start
                logger.debug("Command <%s> timed out after %.2fs", invocation, elapsed)
                return TimedOut(elapsed_seconds=elapsed)
            self._time.sleep(min(self._poll_interval, timeout_seconds - elapsed))

        # Background descendants may keep the pipes open past the shell's exit
        for reader in readers:
            reader.join(timeout=self._grace)

        duration = self._time.monotonic() - start
        if process.returncode == 0:
            return Success(text=_decode(stdout_chunks), duration_seconds=duration)
        return Failure(
            text=_decode(stderr_chunks),
            duration_seconds=duration,
            kind="runtime",
            exit_code=process.returncode,
        )

    def _terminate(self, process: subprocess.Popen[bytes]) -> None:
        process.terminate()
        try:
            process.wait(timeout=self._grace)
        except subprocess.TimeoutExpired:
            logger.debug("Process %d ignored SIGTERM, sending SIGKILL", process.pid)
            process.kill()
            process.wait()


def _start_reader(stream: IO[bytes] | None, sink: list[bytes]) -> threading.Thread:
    def drain() -> None:
        if stream is None:
            return
        with stream:
            for chunk in iter(partial(stream.read1, _READ_CHUNK), b""):  # type: ignore[attr-defined]
                sink.append(chunk)

    thread = threading.Thread(target=drain, daemon=True)
    thread.start()
    return thread


def _decode(chunks: list[bytes]) -> str:
    return b"".join(list(chunks)).decode("utf-8", errors="replace")
