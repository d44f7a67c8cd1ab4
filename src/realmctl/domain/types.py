"""Transform modes, carrier routing, and game constants."""

from __future__ import annotations

from enum import StrEnum

# Resource units a single carrier can move.
CARRIER_CAPACITY = 500
CARRIER_RESOURCE = "Donkey"


class TransformMode(StrEnum):
    """The two actions offered by the transfer form."""

    MULTIPLY = "multiply"
    SEND_DONKEYS = "send-donkeys"


class CarrierRouting(StrEnum):
    """Which field of a transfer names the realm that receives carriers."""

    ORIGIN = "origin"
    DESTINATION = "destination"
