"""realmctl — resource transfer transforms for Eternum realms."""

__version__ = "0.1.0"
