"""Command: scale every transfer amount by a multiplier."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import click

from realmctl.commands._base import RealmCommand

if TYPE_CHECKING:
    from realmctl.commands._context import AppContext


@click.command(
    cls=RealmCommand,
    examples="""\
  realmctl multiply transfers.json --factor 1.5
  cat transfers.json | realmctl multiply -f 0.5
  realmctl multiply transfers.json -f 2 --output doubled.json
  realmctl --json multiply transfers.json -f 3""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("-f", "--factor", "factor", required=True, help="Multiplier applied to amounts.")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write the resulting JSON to this file.",
)
@click.pass_obj
def multiply(app: AppContext, source: TextIO, factor: str, output_path: Path | None) -> None:
    """Multiply every amount in the transfer JSON from SOURCE (default: stdin).

    Amounts are rounded to the nearest integer, halves rounding up.
    """
    from realmctl.services.form import FormSession

    form = FormSession(app.workspace)
    form.set_input(source.read())
    form.set_multiplier(factor)
    result = form.multiply()
    app.write_document(result, output_path)
    app.emit(result)
