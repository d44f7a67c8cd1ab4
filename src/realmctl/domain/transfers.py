"""Transfer and realm models with JSON parsing.

Wire shapes::

    {"items": [{"from": 1, "to": 2, "resource": "Wood", "amount": 100}]}
    {"realms": [{"id": 4604, "name": "Ememurd", "output": ["Donkey", "Copper"]}]}

``from`` is a Python keyword, so :class:`TransferItem` stores it as
``source`` and serializes it back under its alias. Realm ids and amounts
are validated strictly: ``"1"`` and ``true`` are not numbers. Unknown keys
are kept on items and realms so a round trip through the tool loses nothing.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import (
    BaseModel,
    Field,
    StrictFloat,
    StrictInt,
    ValidationError,
    field_validator,
    model_validator,
)

from realmctl.domain.errors import MalformedRealmDirectory, MalformedTransferList


class TransferItem(BaseModel):
    """One resource movement between two realms."""

    model_config = {"frozen": True, "extra": "allow", "populate_by_name": True}

    source: StrictInt = Field(alias="from")
    to: StrictInt
    resource: str
    amount: StrictInt | StrictFloat

    @field_validator("amount")
    @classmethod
    def _finite_non_negative(cls, value: int | float) -> int | float:
        if isinstance(value, float) and not math.isfinite(value):
            msg = "amount must be finite"
            raise ValueError(msg)
        if value < 0:
            msg = "amount must be non-negative"
            raise ValueError(msg)
        return value

    def to_wire(self) -> dict[str, Any]:
        """Serialize with ``from`` restored as the key."""
        return self.model_dump(by_alias=True)


class TransferList(BaseModel):
    """Ordered list of transfers, as pasted into the form."""

    model_config = {"frozen": True}

    items: list[TransferItem]

    def to_wire(self) -> dict[str, Any]:
        return {"items": [item.to_wire() for item in self.items]}


class Realm(BaseModel):
    """A named location and the resources it produces."""

    model_config = {"frozen": True, "extra": "allow"}

    id: StrictInt
    name: str
    output: list[str] = Field(default_factory=list)

    def produces(self, resource: str) -> bool:
        return resource in self.output


class RealmDirectory(BaseModel):
    """The user-maintained catalog of known realms."""

    model_config = {"frozen": True, "extra": "allow"}

    realms: list[Realm] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> RealmDirectory:
        seen: set[int] = set()
        for realm in self.realms:
            if realm.id in seen:
                msg = f"duplicate realm id {realm.id}"
                raise ValueError(msg)
            seen.add(realm.id)
        return self

    def find(self, realm_id: str) -> Realm | None:
        """Look up a realm by stringified id."""
        for realm in self.realms:
            if str(realm.id) == realm_id:
                return realm
        return None

    def producers(self, resource: str) -> list[Realm]:
        """Realms whose output includes *resource*, in directory order."""
        return [realm for realm in self.realms if realm.produces(resource)]

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump()


def parse_transfer_list(text: str) -> TransferList:
    """Parse transfer-list JSON text, raising MalformedTransferList."""
    try:
        return TransferList.model_validate_json(text)
    except ValidationError as exc:
        raise MalformedTransferList(_first_error(exc)) from exc


def parse_realm_directory(text: str) -> RealmDirectory:
    """Parse realm-directory JSON text, raising MalformedRealmDirectory."""
    try:
        return RealmDirectory.model_validate_json(text)
    except ValidationError as exc:
        raise MalformedRealmDirectory(_first_error(exc)) from exc


def _first_error(exc: ValidationError) -> str:
    """Condense a pydantic error to ``loc: msg`` for the first failure."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return f"{loc}: {first['msg']}" if loc else str(first["msg"])
