"""FormSession — the form state holder.

Holds the transfer form: the transfer JSON text, the multiplier text,
the active mode, the realm selector and the last successful result.
Only the realm directory outlives a session; it is read through the
workspace store and written back on every valid edit.

INVARIANT: a failed action never changes ``result``. Each action reads a
snapshot of the current fields and replaces ``result`` only on success.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from realmctl.domain.errors import RealmctlError
from realmctl.domain.selection import RealmSelection, enter_custom_id, reconcile, select
from realmctl.domain.types import CarrierRouting, TransformMode
from realmctl.services.base import BaseService
from realmctl.services.realms import RealmService
from realmctl.services.result import ServiceResult
from realmctl.services.transform import TransformService

if TYPE_CHECKING:
    from realmctl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class FormSession(BaseService):
    """Interactive form state over one workspace."""

    def __init__(self, workspace: Workspace) -> None:
        super().__init__(workspace)
        self.json_input = ""
        self.multiplier = ""
        self.mode = TransformMode.MULTIPLY
        self.routing: CarrierRouting | None = None
        self.merge: bool | None = None
        self.result: dict[str, Any] | None = None
        self.selection = self._reconciled(RealmSelection())

    # ------------------------------------------------------------------
    # Field edits
    # ------------------------------------------------------------------

    def set_input(self, text: str) -> None:
        self.json_input = text

    def set_multiplier(self, text: str) -> None:
        self.multiplier = text

    def set_mode(self, mode: TransformMode | str) -> None:
        self.mode = TransformMode(mode)

    def edit_realms(self, text: str) -> ServiceResult:
        """Save new directory text, then re-run auto-selection."""
        result = RealmService(self._workspace).save(text)
        if result.ok:
            self.selection = self._reconciled(self.selection)
        return result

    def select_realm(self, value: str) -> ServiceResult:
        """Pick a dropdown entry: ``"custom"``, a realm id, or a realm name."""
        op = "select_realm"
        try:
            self.selection = select(
                self.selection,
                value,
                self._workspace.realms.directory,
                self._workspace.settings.carrier.resource,
            )
        except RealmctlError as exc:
            return self._failure(op, exc)
        return self._selection_result(op)

    def set_custom_id(self, text: str) -> ServiceResult:
        """Type into the realm id field (custom mode only)."""
        op = "set_custom_id"
        try:
            self.selection = enter_custom_id(self.selection, text)
        except RealmctlError as exc:
            return self._failure(op, exc)
        return self._selection_result(op)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def run(self) -> ServiceResult:
        """Execute the action for the current mode."""
        if self.mode == TransformMode.SEND_DONKEYS:
            return self.send_donkeys()
        return self.multiply()

    def multiply(self) -> ServiceResult:
        result = TransformService(self._workspace).multiply(self.json_input, self.multiplier)
        return self._keep(result)

    def send_donkeys(self) -> ServiceResult:
        result = TransformService(self._workspace).send_donkeys(
            self.json_input,
            self.selection.realm_id_text(),
            routing=self.routing,
            merge=self.merge,
        )
        return self._keep(result)

    def result_text(self) -> str | None:
        """The last result as pretty-printed JSON, ready to copy."""
        if self.result is None:
            return None
        indent = self._workspace.settings.output.indent
        return json.dumps(self.result, indent=indent, ensure_ascii=False)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _keep(self, result: ServiceResult) -> ServiceResult:
        if result.ok:
            self.result = result.data
        else:
            logger.debug("Keeping previous result after failed %s", result.op)
        return result

    def _reconciled(self, selection: RealmSelection) -> RealmSelection:
        return reconcile(
            selection,
            self._workspace.realms.directory,
            self._workspace.settings.carrier.resource,
        )

    def _selection_result(self, op: str) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "selected": self.selection.value or None,
                "realm_id": self.selection.realm_id_text(),
                "locked": self.selection.id_locked,
            },
        )
