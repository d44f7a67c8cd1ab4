"""Parametrized help tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from realmctl.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["realms", "multiply", "donkeys", "interactive"]),
    (["realms", "--help"], ["show", "set", "export", "options"]),
    (["realms", "set", "--help"], ["SOURCE"]),
    (["multiply", "--help"], ["SOURCE", "--factor", "--output"]),
    (["donkeys", "--help"], ["--realm", "--custom-id", "--routing", "--merge", "--output"]),
    (["interactive", "--help"], ["transfer form"]),
]


@pytest.mark.usefixtures("_isolated_root")
@pytest.mark.parametrize(
    "args,expected",
    HELP_COMMANDS,
    ids=["_".join(a for a in args if a != "--help") or "root" for args, _ in HELP_COMMANDS],
)
def test_help(cli_runner: CliRunner, args: list[str], expected: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for kw in expected:
        assert kw in result.output, f"Expected '{kw}' in help output for {args}"
