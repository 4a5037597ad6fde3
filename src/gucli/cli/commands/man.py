import click

from gucli.cli.output import machine_output
from gucli.core.context import GucliContext
from gucli.core.help_lookup import lookup_help
from gucli.core.render.pipeline import render_help, render_output
from gucli.core.render.transforms import clamp_text, strip_ansi


@click.command("man")
@click.argument("topic", nargs=-1)
@click.option("--html", is_flag=True, help="Print enriched HTML markup.")
@click.pass_obj
def man_cmd(ctx: GucliContext, topic: tuple[str, ...], html: bool) -> None:
    """Show console help for a command via `man` or `--help`.

    Write just the command name to search both. To ask for specific help
    flags (--longhelp, --help-all) enter the full command.
    """
    result = lookup_help(" ".join(topic), ctx.executor, ctx.config.help_timeout_seconds)
    limit = ctx.config.max_display_chars
    if html:
        rendered = render_help(result.text, limit) if result.found else render_output(result.text, limit)
        machine_output(rendered)
    else:
        machine_output(strip_ansi(clamp_text(result.text, limit)))
    if not result.found:
        raise SystemExit(1)
