"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, realmctl.toml only contains
overrides. A fresh workspace needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from realmctl.domain.types import CARRIER_CAPACITY, CARRIER_RESOURCE, CarrierRouting

REALMS_DATA_KEY = "eternum_realms_data"


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    dirname: str = ".realmctl"
    filename: str = "storage.json"
    key: str = REALMS_DATA_KEY


class CarrierConfig(BaseModel):
    """[carrier] section."""

    model_config = {"frozen": True}

    capacity: int = Field(default=CARRIER_CAPACITY, gt=0)
    resource: str = CARRIER_RESOURCE
    routing: CarrierRouting = CarrierRouting.ORIGIN
    merge: bool = True


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    indent: int = Field(default=2, ge=0)

