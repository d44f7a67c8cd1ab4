"""Pure transfer-list transforms: Multiply and Derive-Carrier-Transfers.

Both functions take parsed values and return a new :class:`TransferList`;
the input is never mutated. Text parsing of the scalar parameters lives
here too so every entry point shares one definition of a valid
multiplier and a valid realm id.
"""

from __future__ import annotations

import math

from realmctl.domain.errors import InvalidMultiplier, InvalidRealmId, MalformedTransferList
from realmctl.domain.transfers import TransferItem, TransferList
from realmctl.domain.types import CARRIER_CAPACITY, CARRIER_RESOURCE, CarrierRouting


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    Matches JavaScript ``Math.round``: ``round_half_up(50.5) == 51`` and
    ``round_half_up(2.5) == 3``, unlike Python's banker's ``round``.

    Examples:
        >>> round_half_up(50.5)
        51
        >>> round_half_up(0.49999999999999994)
        0
    """
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def parse_multiplier(text: str) -> float:
    """Parse the multiplier field. Rejects empty, NaN, infinite and negative input."""
    try:
        factor = float(text.strip())
    except ValueError as exc:
        raise InvalidMultiplier(f"not a number: {text!r}") from exc
    if not math.isfinite(factor):
        raise InvalidMultiplier(f"not a finite number: {text!r}")
    if factor < 0:
        raise InvalidMultiplier(f"negative multiplier: {text!r}")
    return factor


def parse_realm_id(text: str) -> int:
    """Parse the realm id field as a base-10 integer."""
    try:
        return int(text.strip())
    except ValueError as exc:
        raise InvalidRealmId(f"not an integer: {text!r}") from exc


def multiply(transfers: TransferList, factor: float) -> TransferList:
    """Scale every amount by *factor*, keeping order and all other keys.

    Raises MalformedTransferList when a scaled amount is too large to be
    represented as a finite number.
    """
    return TransferList(
        items=[
            item.model_copy(update={"amount": _scaled(item.amount, factor, index)})
            for index, item in enumerate(transfers.items)
        ]
    )


def _scaled(amount: int | float, factor: float, index: int) -> int:
    try:
        product = amount * factor
    except OverflowError as exc:
        raise MalformedTransferList(f"items.{index}.amount: too large to scale") from exc
    if isinstance(product, float) and not math.isfinite(product):
        raise MalformedTransferList(f"items.{index}.amount: scaled amount is not finite")
    return round_half_up(product)


def carriers_needed(amount: int | float, capacity: int = CARRIER_CAPACITY) -> int:
    """Carrier units required to move *amount* resources (rounded up).

    Integer amounts use floor division so the count stays exact at any size.
    """
    if isinstance(amount, int):
        return -(-amount // capacity)
    return math.ceil(amount / capacity)


def derive_carrier_transfers(
    transfers: TransferList,
    source_realm_id: int,
    *,
    routing: CarrierRouting = CarrierRouting.ORIGIN,
    merge: bool = True,
    capacity: int = CARRIER_CAPACITY,
    resource: str = CARRIER_RESOURCE,
) -> TransferList:
    """Compute the carrier transfers sent from *source_realm_id*.

    Each input item yields ``ceil(amount / capacity)`` carriers addressed to
    the item's ``from`` realm (``routing=ORIGIN``) or its ``to`` realm
    (``routing=DESTINATION``). Zero-carrier candidates are dropped. With
    *merge*, candidates for the same realm are summed into the first
    occurrence, preserving first-occurrence order.
    """
    merged: dict[int, int] = {}
    unmerged: list[tuple[int, int]] = []

    for item in transfers.items:
        count = carriers_needed(item.amount, capacity)
        if count <= 0:
            continue
        target = item.source if routing == CarrierRouting.ORIGIN else item.to
        if merge:
            merged[target] = merged.get(target, 0) + count
        else:
            unmerged.append((target, count))

    pairs = list(merged.items()) if merge else unmerged
    return TransferList(
        items=[
            TransferItem(source=source_realm_id, to=target, resource=resource, amount=count)
            for target, count in pairs
        ]
    )
