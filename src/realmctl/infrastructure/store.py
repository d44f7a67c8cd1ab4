"""RealmDirectoryStore — the persisted realm directory.

INVARIANT: the stored value is exactly the text the user saved. The store
never re-serializes a directory; it validates the text, then writes it
verbatim under a single fixed key.

Load failures (missing key, unreadable JSON, wrong shape) degrade to the
empty directory and are logged, never raised. Save failures raise
:class:`MalformedRealmDirectory` and leave both the cache and the stored
text untouched.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from realmctl.domain.errors import MalformedRealmDirectory
from realmctl.domain.transfers import RealmDirectory, parse_realm_directory

if TYPE_CHECKING:
    from realmctl.infrastructure.kvstore import KeyValueStore

logger = logging.getLogger(__name__)


class RealmDirectoryStore:
    """Load-once, write-through cache of the realm directory."""

    def __init__(self, kv: KeyValueStore, key: str) -> None:
        self._kv = kv
        self._key = key
        self._directory: RealmDirectory | None = None

    @property
    def key(self) -> str:
        return self._key

    @property
    def directory(self) -> RealmDirectory:
        """The in-memory directory, loaded from storage on first access."""
        if self._directory is None:
            self._directory = self.load()
        return self._directory

    def load(self) -> RealmDirectory:
        """Read the persisted directory, falling back to ``{"realms": []}``."""
        raw = self._kv.get(self._key)
        if raw is None:
            logger.debug("No saved realms data under %s", self._key)
            directory = RealmDirectory()
        else:
            try:
                directory = parse_realm_directory(raw)
            except MalformedRealmDirectory as exc:
                logger.warning("Error loading saved realms data: %s", exc.reason)
                directory = RealmDirectory()
        self._directory = directory
        return directory

    def save(self, text: str) -> RealmDirectory:
        """Validate *text*, then persist it verbatim and refresh the cache."""
        directory = parse_realm_directory(text)
        self._kv.set(self._key, text)
        self._directory = directory
        logger.debug("Saved realms data (%d realms)", len(directory.realms))
        return directory

    def raw(self) -> str | None:
        """The stored text exactly as saved, or None."""
        return self._kv.get(self._key)
