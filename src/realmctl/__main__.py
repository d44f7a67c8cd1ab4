"""Allow ``python -m realmctl``."""

from realmctl.cli import cli

if __name__ == "__main__":
    cli()
