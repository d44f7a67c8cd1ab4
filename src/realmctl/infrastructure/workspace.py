"""Workspace — the single dependency injected into every service.

Owns the settings and the realm directory store. The store (and with it
the storage file) is only touched on first access, so ``--help`` and
``--version`` never read from disk.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from realmctl.infrastructure.kvstore import KeyValueStore
from realmctl.infrastructure.store import RealmDirectoryStore

if TYPE_CHECKING:
    from pathlib import Path

    from realmctl.config.settings import RealmSettings

logger = logging.getLogger(__name__)


class Workspace:
    """Settings plus lazily opened local storage."""

    def __init__(self, settings: RealmSettings) -> None:
        self.settings = settings
        self._realms: RealmDirectoryStore | None = None

    @property
    def storage_path(self) -> Path:
        return self.settings.storage_path

    @property
    def realms(self) -> RealmDirectoryStore:
        """The realm directory store (opened on first access)."""
        if self._realms is None:
            logger.debug("Opening store at %s", self.storage_path)
            kv = KeyValueStore(self.storage_path)
            self._realms = RealmDirectoryStore(kv, self.settings.storage.key)
        return self._realms
