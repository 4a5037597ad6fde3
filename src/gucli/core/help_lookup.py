"""Find console help for a command via `man` or its own --help.

The lookup is modelled as an ordered list of candidate invocations tried in
sequence; the first one producing enough output wins. first_valid_help() is a
pure function over the candidates and a runner so it can be tested without
spawning processes.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from gucli.core.executor.abc import Executor
from gucli.core.executor.types import Success

# Shorter outputs are treated as errors ("No manual entry for x")
MIN_HELP_LENGTH = 50

# Topics containing one of these already ask for help and run verbatim
HELP_FLAGS = (
    " --longhelp ",
    " --help-all ",
    " --help ",
    " help ",
    " -? ",
    "man ",
    " info ",
    " --usage ",
    " -help ",
)

EMPTY_TOPIC_MESSAGE = "Enter the command to search for help"

HelpStrategy = Callable[[str], str]

DEFAULT_STRATEGIES: tuple[HelpStrategy, ...] = (
    lambda topic: f"man -P cat {topic}",
    lambda topic: f"{topic} --help",
)


@dataclass(frozen=True)
class HelpResult:
    """Outcome of a help lookup.

    Attributes:
        topic: The trimmed topic that was searched
        text: Help text, or a message explaining why none was found
        invocation: The candidate that produced text, None if nothing did
        found: True if text is real help output
    """

    topic: str
    text: str
    invocation: str | None
    found: bool


def has_help_flag(topic: str) -> bool:
    padded = f" {topic} "
    return any(flag in padded for flag in HELP_FLAGS)


def candidate_invocations(
    topic: str, strategies: Sequence[HelpStrategy] = DEFAULT_STRATEGIES
) -> list[str]:
    return [strategy(topic) for strategy in strategies]


def first_valid_help(
    candidates: Sequence[str],
    run: Callable[[str], str | None],
    min_length: int = MIN_HELP_LENGTH,
) -> tuple[str, str] | None:
    """Return (invocation, output) for the first candidate with enough output.

    Args:
        candidates: Invocations in priority order
        run: Returns output for a successful invocation, None on failure
        min_length: Outputs shorter than this are skipped

    Returns:
        The winning (invocation, output), or None if no candidate qualified
    """
    for candidate in candidates:
        output = run(candidate)
        if output is not None and len(output) >= min_length:
            return candidate, output
    return None


def lookup_help(
    topic: str,
    executor: Executor,
    timeout_seconds: float,
    strategies: Sequence[HelpStrategy] = DEFAULT_STRATEGIES,
) -> HelpResult:
    """Look up help for topic.

    An empty topic returns usage guidance. A topic that already contains a
    help flag runs verbatim and its output (or error) is returned as is.
    Otherwise each strategy's candidate is tried in order.
    """
    topic = topic.strip()
    if not topic:
        return HelpResult(topic=topic, text=EMPTY_TOPIC_MESSAGE, invocation=None, found=False)

    if has_help_flag(topic):
        outcome = executor.execute(topic, timeout_seconds)
        return HelpResult(
            topic=topic,
            text=outcome.text,
            invocation=topic,
            found=isinstance(outcome, Success),
        )

    def run(invocation: str) -> str | None:
        outcome = executor.execute(invocation, timeout_seconds)
        if isinstance(outcome, Success):
            return outcome.text
        return None

    winner = first_valid_help(candidate_invocations(topic, strategies), run)
    if winner is None:
        return HelpResult(
            topic=topic,
            text=f"No valid help found for '{topic}'",
            invocation=None,
            found=False,
        )
    invocation, text = winner
    return HelpResult(topic=topic, text=text, invocation=invocation, found=True)
