"""Command: prompt-driven form over a single FormSession.

Each line is ``<verb> [argument]``. Arguments that start with ``@`` are
read from that file, so multi-line JSON never has to be typed inline.
Failed actions print their error and leave the form as it was.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from realmctl.commands._base import RealmCommand
from realmctl.domain.types import TransformMode
from realmctl.output.formatters import format_result

if TYPE_CHECKING:
    from realmctl.commands._context import AppContext
    from realmctl.services.form import FormSession
    from realmctl.services.realms import RealmService
    from realmctl.services.result import ServiceResult

_HELP = """\
  realms <json|@file>   save the realm directory
  input <json|@file>    set the transfer JSON
  mode <multiply|send-donkeys>
  factor <number>       set the multiplier
  options               show the realm selector
  select <custom|id|name>
  custom <id>           type a realm id (custom mode only)
  run                   execute the current mode
  result                print the last result
  quit"""


def _argument_text(arg: str) -> str:
    if arg.startswith("@"):
        return Path(arg[1:]).read_text(encoding="utf-8")
    return arg


@click.command(
    cls=RealmCommand,
    examples="""\
  realmctl interactive
  printf 'input @transfers.json\\nfactor 2\\nrun\\n' | realmctl interactive""",
)
@click.pass_obj
def interactive(app: AppContext) -> None:
    """Fill in the transfer form step by step."""
    from realmctl.services.form import FormSession
    from realmctl.services.realms import RealmService

    form = FormSession(app.workspace)
    click.echo("Type 'help' for commands, 'quit' to leave.")

    while True:
        try:
            line = click.prompt(
                f"[{form.mode}]", prompt_suffix=" > ", default="", show_default=False
            )
        except click.Abort:
            break
        verb, _, arg = line.strip().partition(" ")
        arg = arg.strip()
        if not verb:
            continue
        if verb in ("quit", "exit"):
            break
        if verb == "help":
            click.echo(_HELP)
            continue

        try:
            result = _dispatch(form, verb, arg, RealmService(app.workspace))
        except OSError as exc:
            click.echo(f"ERROR: cannot read {arg[1:]!r}: {exc.strerror}", err=True)
            continue
        if result is not None:
            _show(app, result)


def _dispatch(
    form: FormSession, verb: str, arg: str, realms: RealmService
) -> ServiceResult | None:
    if verb == "realms":
        return form.edit_realms(_argument_text(arg))
    if verb == "input":
        form.set_input(_argument_text(arg))
        return None
    if verb == "factor":
        form.set_multiplier(arg)
        return None
    if verb == "mode":
        if arg not in {m.value for m in TransformMode}:
            click.echo(f"ERROR: unknown mode {arg!r}", err=True)
            return None
        form.set_mode(arg)
        return None
    if verb == "options":
        return realms.options(form.selection)
    if verb == "select":
        return form.select_realm(arg)
    if verb == "custom":
        return form.set_custom_id(arg)
    if verb == "run":
        return form.run()
    if verb == "result":
        text = form.result_text()
        click.echo(text if text is not None else "No result yet.")
        return None
    click.echo(f"ERROR: unknown command {verb!r} (try 'help')", err=True)
    return None


def _show(app: AppContext, result: ServiceResult) -> None:
    output = format_result(result, settings=app.output_settings)
    click.echo(output, err=not result.ok)
