"""Output helpers with clear intent.

user_output: human-facing messages, errors and progress (stderr)
machine_output: command results meant to be consumed or piped (stdout)
"""

import click


def user_output(message: str = "") -> None:
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    click.echo(message)
