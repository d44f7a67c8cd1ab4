"""Domain exceptions.

Every exception carries a stable ``code`` (used as the ServiceError code)
and a short human-readable ``message``. The ``reason`` is the underlying
parser complaint, kept out of the message and surfaced as detail.
"""

from __future__ import annotations

GENERIC_MESSAGE = "Error processing data. Please check your inputs."


class RealmctlError(ValueError):
    """Base class for all user-facing realmctl errors."""

    code = "ERROR"
    message = GENERIC_MESSAGE

    def __init__(self, reason: str = "") -> None:
        super().__init__(reason or self.message)
        self.reason = reason


class MalformedRealmDirectory(RealmctlError):
    code = "MALFORMED_REALM_DIRECTORY"
    message = "Invalid realms data format. Please check your input."


class MalformedTransferList(RealmctlError):
    code = "MALFORMED_TRANSFER_LIST"


class InvalidMultiplier(RealmctlError):
    code = "INVALID_MULTIPLIER"


class InvalidRealmId(RealmctlError):
    code = "INVALID_REALM_ID"


class SelectionError(RealmctlError):
    """Raised for selector misuse (unknown realm, locked id field)."""

    code = "INVALID_SELECTION"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.message = reason
