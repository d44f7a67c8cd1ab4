"""Command group: view and edit the saved realm directory."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from realmctl.commands._base import RealmGroup
from realmctl.services.realms import RealmService

if TYPE_CHECKING:
    from realmctl.commands._context import AppContext

_REALMS_EXAMPLES = """\
  realmctl realms set realms.json
  cat realms.json | realmctl realms set
  realmctl realms show
  realmctl realms options
  realmctl realms export > backup.json"""


@click.group(cls=RealmGroup, examples=_REALMS_EXAMPLES)
@click.pass_obj
def realms(app: AppContext) -> None:
    """Manage the saved realm directory."""


@realms.command(
    examples="""\
  realmctl realms show
  realmctl --json realms show"""
)
@click.pass_obj
def show(app: AppContext) -> None:
    """List saved realms and which of them produce donkeys."""
    app.emit(RealmService(app.workspace).show())


@realms.command(
    name="set",
    examples="""\
  realmctl realms set realms.json
  echo '{"realms": [{"id": 4604, "name": "Ememurd", "output": ["Donkey"]}]}' | realmctl realms set""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def set_realms(app: AppContext, source: TextIO) -> None:
    """Replace the realm directory with JSON from SOURCE (default: stdin).

    The text is validated, then stored exactly as given.
    """
    app.emit(RealmService(app.workspace).save(source.read()))


@realms.command(
    examples="""\
  realmctl realms export
  realmctl realms export > realms.json"""
)
@click.pass_obj
def export(app: AppContext) -> None:
    """Print the saved realm directory as JSON."""
    app.emit(RealmService(app.workspace).export())


@realms.command(
    examples="""\
  realmctl realms options
  realmctl -q realms options"""
)
@click.pass_obj
def options(app: AppContext) -> None:
    """Show the realm selector entries and the default selection."""
    app.emit(RealmService(app.workspace).options())
