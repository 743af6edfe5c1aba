"""``pieshop`` entry point: global flags, settings, and the command tree."""

from __future__ import annotations

import click

from pieshop import __version__
from pieshop.commands import register_commands
from pieshop.commands._context import AppContext
from pieshop.config.settings import PieSettings
from pieshop.infrastructure.session import SESSION_NAME_PATTERN


def _check_session_name(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> str | None:
    if value is not None and not SESSION_NAME_PATTERN.match(value):
        msg = f"Invalid session name: {value!r}. Use letters, digits, '-' or '_'."
        raise click.BadParameter(msg)
    return value


@click.group(invoke_without_command=True, epilog="Each --session keeps its own cart.")
@click.version_option(version=__version__, prog_name="pieshop")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and operation timings.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Use this pieshop.toml instead of searching upward.",
)
@click.option(
    "-s",
    "--session",
    "session_name",
    default=None,
    callback=_check_session_name,
    help="Visitor session (default: [session] name).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    session_name: str | None,
) -> None:
    """pieshop: Bethany's Pie Shop storefront and cart."""
    app = AppContext(
        PieSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            session_name=session_name,
        )
    )
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
