"""RealmService — view and edit the persisted realm directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from realmctl.domain.errors import RealmctlError
from realmctl.domain.selection import (
    RealmSelection,
    eligible_realms,
    reconcile,
    selector_options,
)
from realmctl.services.base import BaseService
from realmctl.services.result import ServiceResult

if TYPE_CHECKING:
    from realmctl.domain.transfers import RealmDirectory


class RealmService(BaseService):
    """Read, replace, and summarize the realm directory."""

    @property
    def _resource(self) -> str:
        return self._workspace.settings.carrier.resource

    def show(self) -> ServiceResult:
        """List every realm with its carrier eligibility."""
        directory = self._workspace.realms.directory
        resource = self._resource
        items = [
            {
                "id": realm.id,
                "name": realm.name,
                "output": list(realm.output),
                "carrier": realm.produces(resource),
            }
            for realm in directory.realms
        ]
        return ServiceResult(
            ok=True,
            op="show_realms",
            data={"items": items, "count": len(items), "resource": resource},
        )

    def save(self, text: str) -> ServiceResult:
        """Validate and persist directory text verbatim."""
        op = "save_realms"
        try:
            directory = self._workspace.realms.save(text)
        except RealmctlError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "count": len(directory.realms),
                "carriers": len(eligible_realms(directory, self._resource)),
                "key": self._workspace.realms.key,
                "path": str(self._workspace.storage_path),
            },
        )

    def export(self) -> ServiceResult:
        """The directory document as the form's text area displays it."""
        directory = self._workspace.realms.directory
        return ServiceResult(ok=True, op="export_realms", data=directory.to_wire())

    def options(self, selection: RealmSelection | None = None) -> ServiceResult:
        """Selector entries and the value the selector would settle on."""
        directory: RealmDirectory = self._workspace.realms.directory
        current = reconcile(selection or RealmSelection(), directory, self._resource)
        options = [
            {"value": opt.value, "label": opt.label}
            for opt in selector_options(directory, self._resource)
        ]
        return ServiceResult(
            ok=True,
            op="realm_options",
            data={
                "items": options,
                "selected": current.value or None,
                "realm_id": current.realm_id_text(),
            },
        )
