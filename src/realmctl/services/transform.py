"""TransformService — run Multiply and Send Donkeys over raw form text.

Pipeline per action: PARSE → TRANSFORM → RESPOND. Parse or transform failures
abort the action with a failed result; nothing is partially applied.
"""

from __future__ import annotations

import logging

from realmctl.domain.errors import RealmctlError
from realmctl.domain.transfers import parse_transfer_list
from realmctl.domain.transforms import (
    derive_carrier_transfers,
    multiply,
    parse_multiplier,
    parse_realm_id,
)
from realmctl.domain.types import CarrierRouting
from realmctl.services.base import BaseService
from realmctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class TransformService(BaseService):
    """Stateless transforms; results carry the Transfer List as ``data``."""

    def multiply(self, json_text: str, multiplier_text: str) -> ServiceResult:
        """Scale every amount in *json_text* by the parsed multiplier."""
        op = "multiply"
        try:
            transfers = parse_transfer_list(json_text)
            factor = parse_multiplier(multiplier_text)
            result = multiply(transfers, factor)
        except RealmctlError as exc:
            return self._failure(op, exc)

        logger.debug("Multiplied %d items by %s", len(result.items), factor)
        return ServiceResult(
            ok=True,
            op=op,
            data=result.to_wire(),
            meta={"factor": factor, "count": len(result.items)},
        )

    def send_donkeys(
        self,
        json_text: str,
        realm_id_text: str,
        *,
        routing: CarrierRouting | None = None,
        merge: bool | None = None,
    ) -> ServiceResult:
        """Derive the carrier transfers sent from the parsed realm id.

        *routing* and *merge* default to the ``[carrier]`` config section.
        """
        op = "send_donkeys"
        carrier = self._workspace.settings.carrier
        routing = CarrierRouting(routing) if routing is not None else carrier.routing
        merge = carrier.merge if merge is None else merge

        try:
            transfers = parse_transfer_list(json_text)
            source = parse_realm_id(realm_id_text)
        except RealmctlError as exc:
            return self._failure(op, exc)

        result = derive_carrier_transfers(
            transfers,
            source,
            routing=routing,
            merge=merge,
            capacity=carrier.capacity,
            resource=carrier.resource,
        )
        logger.debug(
            "Derived %d carrier transfers from %d items",
            len(result.items),
            len(transfers.items),
        )
        return ServiceResult(
            ok=True,
            op=op,
            data=result.to_wire(),
            meta={
                "source_realm_id": source,
                "routing": str(routing),
                "merge": merge,
                "capacity": carrier.capacity,
                "count": len(result.items),
            },
        )
