"""Root CLI group for realmctl with global flags and command registration."""

from __future__ import annotations

import click

from realmctl import __version__
from realmctl.commands import register_commands
from realmctl.commands._base import RealmGroup
from realmctl.commands._context import AppContext
from realmctl.config.settings import RealmSettings


_CLI_EXAMPLES = """\
  realmctl realms set realms.json
  realmctl multiply transfers.json --factor 1.5
  realmctl donkeys transfers.json --realm Ememurd
  realmctl --json donkeys transfers.json --custom-id 99
  realmctl interactive"""


@click.group(cls=RealmGroup, invoke_without_command=True, examples=_CLI_EXAMPLES)
@click.version_option(version=__version__, prog_name="realmctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--data-dir",
    default=None,
    type=click.Path(file_okay=False),
    help="Directory holding the saved realm directory.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    data_dir: str | None,
) -> None:
    """realmctl — Eternum resource transfer tools."""
    settings = RealmSettings.from_cli(
        config_path=config_path,
        data_dir=data_dir,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
