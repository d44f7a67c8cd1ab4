"""Source-realm selector for the Send Donkeys action.

Three states::

    none ──▶ realm(id) ◀──▶ custom

- ``none``: nothing selected yet; the id field is empty.
- ``realm``: a carrier-producing realm is selected; the id field is locked
  to that realm's id.
- ``custom``: the id field is free text, entered by the user.

The selector value ``"custom"`` is a sentinel. Realm ids are integers, so
the sentinel can never collide with a stringified id.

:func:`reconcile` has no watcher behind it: callers invoke it explicitly
after every directory load or edit.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

from realmctl.domain.errors import SelectionError
from realmctl.domain.transfers import Realm, RealmDirectory
from realmctl.domain.types import CARRIER_RESOURCE

CUSTOM = "custom"
CUSTOM_LABEL = "Custom"


class SelectionKind(StrEnum):
    NONE = "none"
    REALM = "realm"
    CUSTOM = "custom"


@dataclass(frozen=True)
class SelectorOption:
    """One entry of the realm dropdown."""

    value: str
    label: str


@dataclass(frozen=True)
class RealmSelection:
    """Current selector state plus the text of the realm id field."""

    kind: SelectionKind = SelectionKind.NONE
    realm_id: int | None = None
    custom_id: str = ""

    @property
    def id_locked(self) -> bool:
        """The id field is only editable in custom mode."""
        return self.kind != SelectionKind.CUSTOM

    @property
    def value(self) -> str:
        """The selector value as the dropdown would hold it."""
        if self.kind == SelectionKind.CUSTOM:
            return CUSTOM
        if self.kind == SelectionKind.REALM:
            return str(self.realm_id)
        return ""

    def realm_id_text(self) -> str:
        """Text shown in the realm id field."""
        if self.kind == SelectionKind.CUSTOM:
            return self.custom_id
        if self.kind == SelectionKind.REALM:
            return str(self.realm_id)
        return ""


def eligible_realms(directory: RealmDirectory, resource: str = CARRIER_RESOURCE) -> list[Realm]:
    """Realms that produce carriers, in directory order."""
    return directory.producers(resource)


def selector_options(
    directory: RealmDirectory, resource: str = CARRIER_RESOURCE
) -> list[SelectorOption]:
    """Dropdown entries: the custom sentinel first, then each eligible realm."""
    options = [SelectorOption(value=CUSTOM, label=CUSTOM_LABEL)]
    options.extend(
        SelectorOption(value=str(realm.id), label=realm.name)
        for realm in eligible_realms(directory, resource)
    )
    return options


def reconcile(
    selection: RealmSelection,
    directory: RealmDirectory,
    resource: str = CARRIER_RESOURCE,
) -> RealmSelection:
    """Auto-select the first eligible realm when nothing is selected."""
    if selection.kind != SelectionKind.NONE:
        return selection
    eligible = eligible_realms(directory, resource)
    if not eligible:
        return selection
    return RealmSelection(kind=SelectionKind.REALM, realm_id=eligible[0].id)


def select(
    selection: RealmSelection,
    value: str,
    directory: RealmDirectory,
    resource: str = CARRIER_RESOURCE,
) -> RealmSelection:
    """Apply a dropdown choice.

    *value* is the custom sentinel, a stringified realm id, or a realm
    name. Entering custom mode pre-fills the id field with whatever it
    showed before; leaving it drops the custom text.
    """
    if value == CUSTOM:
        if selection.kind == SelectionKind.CUSTOM:
            return selection
        return RealmSelection(kind=SelectionKind.CUSTOM, custom_id=selection.realm_id_text())

    match = directory.find(value)
    if match is None or not match.produces(resource):
        eligible = eligible_realms(directory, resource)
        match = next((r for r in eligible if r.name == value), None)
    if match is None:
        msg = f"No {resource}-producing realm matches {value!r}"
        raise SelectionError(msg)
    return RealmSelection(kind=SelectionKind.REALM, realm_id=match.id)


def enter_custom_id(selection: RealmSelection, text: str) -> RealmSelection:
    """Edit the realm id field. Only permitted in custom mode."""
    if selection.id_locked:
        msg = "Realm ID is locked to the selected realm; select 'custom' to edit it"
        raise SelectionError(msg)
    return replace(selection, custom_id=text)
