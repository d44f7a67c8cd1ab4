"""Command: derive the donkey transfers needed to move a transfer list."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import click

from realmctl.commands._base import RealmCommand
from realmctl.domain.selection import CUSTOM
from realmctl.domain.types import CarrierRouting

if TYPE_CHECKING:
    from realmctl.commands._context import AppContext


@click.command(
    cls=RealmCommand,
    examples="""\
  realmctl donkeys transfers.json
  realmctl donkeys transfers.json --realm Ememurd
  realmctl donkeys transfers.json --realm 4604
  realmctl donkeys transfers.json --custom-id 99
  realmctl donkeys transfers.json --custom-id 99 --routing destination --no-merge
  cat transfers.json | realmctl donkeys -o donkeys.json""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "-r",
    "--realm",
    "realm",
    default=None,
    help="Donkey-producing realm to send from (id or name). Defaults to the first one saved.",
)
@click.option(
    "--custom-id",
    "custom_id",
    default=None,
    help="Send from this realm id instead of a saved realm.",
)
@click.option(
    "--routing",
    type=click.Choice([r.value for r in CarrierRouting]),
    default=None,
    help="Address donkeys to each transfer's 'from' realm (origin) or 'to' realm (destination).",
)
@click.option(
    "--merge/--no-merge",
    default=None,
    help="Sum donkeys bound for the same realm into one transfer.",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write the resulting JSON to this file.",
)
@click.pass_obj
def donkeys(
    app: AppContext,
    source: TextIO,
    realm: str | None,
    custom_id: str | None,
    routing: str | None,
    merge: bool | None,
    output_path: Path | None,
) -> None:
    """Compute donkey transfers for the transfer JSON from SOURCE (default: stdin).

    Each transfer needs one donkey per 500 resources, rounded up.
    """
    from realmctl.services.form import FormSession

    if realm is not None and custom_id is not None:
        raise click.UsageError("--realm and --custom-id are mutually exclusive.")

    form = FormSession(app.workspace)
    form.set_input(source.read())
    form.routing = CarrierRouting(routing) if routing is not None else None
    form.merge = merge

    if realm is not None:
        selected = form.select_realm(realm)
    elif custom_id is not None:
        form.select_realm(CUSTOM)
        selected = form.set_custom_id(custom_id)
    else:
        selected = None
    if selected is not None and not selected.ok:
        app.emit(selected)

    result = form.send_donkeys()
    app.write_document(result, output_path)
    app.emit(result)
