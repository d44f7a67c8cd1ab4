"""Shared pytest fixtures and test helpers for realmctl tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from realmctl.config.settings import RealmSettings
from realmctl.infrastructure.workspace import Workspace

REALMS_DOC: dict[str, Any] = {
    "realms": [
        {"id": 4604, "name": "Ememurd", "output": ["Donkey", "Copper"]},
        {"id": 12, "name": "Stonehold", "output": ["Stone", "Coal"]},
        {"id": 77, "name": "Ashmoor", "output": ["Donkey"]},
    ]
}

TRANSFERS_DOC: dict[str, Any] = {
    "items": [
        {"from": 10, "to": 1, "resource": "Wood", "amount": 1000},
        {"from": 10, "to": 2, "resource": "Stone", "amount": 200},
        {"from": 11, "to": 1, "resource": "Coal", "amount": 501},
    ]
}


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None]:
    """Undo the handler swap each CLI invocation makes on the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> RealmSettings:
    """Settings rooted at a temp directory with no config file or env overrides."""
    monkeypatch.delenv("REALMCTL_CONFIG", raising=False)
    return RealmSettings.from_cli(root=tmp_path)


@pytest.fixture
def workspace(settings: RealmSettings) -> Workspace:
    """Workspace with an empty store."""
    return Workspace(settings)


@pytest.fixture
def saved_workspace(workspace: Workspace) -> Workspace:
    """Workspace whose store already holds :data:`REALMS_DOC`."""
    workspace.realms.save(json.dumps(REALMS_DOC))
    return Workspace(workspace.settings)


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI uses an isolated store.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.delenv("REALMCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def realms_text() -> str:
    """Realm directory JSON with two donkey producers out of three realms."""
    return json.dumps(REALMS_DOC, indent=2)


@pytest.fixture
def transfers_text() -> str:
    """Transfer list JSON with two senders (10 and 11)."""
    return json.dumps(TRANSFERS_DOC, indent=2)
