"""Subcommand modules for realmctl.

Provides register_commands() which uses deferred imports to keep
``realmctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the realms group and the standalone commands on the root group."""
    from realmctl.commands.donkeys import donkeys
    from realmctl.commands.interactive import interactive
    from realmctl.commands.multiply import multiply
    from realmctl.commands.realms import realms

    cli.add_command(realms)
    cli.add_command(multiply)
    cli.add_command(donkeys)
    cli.add_command(interactive)
