"""Tests for FormSession — the form state holder."""

from __future__ import annotations

import json

from realmctl.domain.selection import CUSTOM, SelectionKind
from realmctl.domain.types import TransformMode
from realmctl.infrastructure.workspace import Workspace
from realmctl.services.form import FormSession

ONE_ITEM = '{"items":[{"from":1,"to":2,"resource":"Wood","amount":100}]}'


class TestStartup:
    def test_empty_store(self, workspace: Workspace) -> None:
        form = FormSession(workspace)
        assert form.selection.kind == SelectionKind.NONE
        assert form.result is None
        assert form.mode == TransformMode.MULTIPLY

    def test_auto_selects_first_producer(self, saved_workspace: Workspace) -> None:
        form = FormSession(saved_workspace)
        assert form.selection.realm_id == 4604

    def test_corrupt_store_degrades(self, workspace: Workspace) -> None:
        workspace.storage_path.parent.mkdir(parents=True)
        workspace.storage_path.write_text(
            json.dumps({"eternum_realms_data": "{bad"}), encoding="utf-8"
        )
        form = FormSession(workspace)
        assert form.selection.kind == SelectionKind.NONE


class TestRealmEdits:
    def test_edit_triggers_auto_select(self, workspace: Workspace, realms_text: str) -> None:
        form = FormSession(workspace)
        result = form.edit_realms(realms_text)
        assert result.ok
        assert form.selection.realm_id == 4604

    def test_edit_keeps_existing_selection(
        self, saved_workspace: Workspace, realms_text: str
    ) -> None:
        form = FormSession(saved_workspace)
        form.select_realm("77")
        form.edit_realms(realms_text)
        assert form.selection.realm_id == 77

    def test_invalid_edit_changes_nothing(self, saved_workspace: Workspace) -> None:
        form = FormSession(saved_workspace)
        before = form.selection
        result = form.edit_realms("{")
        assert not result.ok
        assert form.selection == before

    def test_edit_persists(self, workspace: Workspace, realms_text: str) -> None:
        FormSession(workspace).edit_realms(realms_text)
        fresh = FormSession(Workspace(workspace.settings))
        assert fresh.selection.realm_id == 4604


class TestSelection:
    def test_select_custom_then_type(self, saved_workspace: Workspace) -> None:
        form = FormSession(saved_workspace)
        assert form.select_realm(CUSTOM).data["locked"] is False
        result = form.set_custom_id("99")
        assert result.ok
        assert result.data["realm_id"] == "99"

    def test_custom_id_locked_on_realm(self, saved_workspace: Workspace) -> None:
        form = FormSession(saved_workspace)
        result = form.set_custom_id("99")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_SELECTION"
        assert form.selection.realm_id == 4604

    def test_unknown_realm(self, saved_workspace: Workspace) -> None:
        form = FormSession(saved_workspace)
        result = form.select_realm("12")
        assert not result.ok
        assert form.selection.realm_id == 4604


class TestActions:
    def test_multiply_stores_result(self, workspace: Workspace) -> None:
        form = FormSession(workspace)
        form.set_input(ONE_ITEM)
        form.set_multiplier("1.5")
        result = form.run()
        assert result.ok
        assert form.result == {
            "items": [{"from": 1, "to": 2, "resource": "Wood", "amount": 150}]
        }

    def test_failure_keeps_previous_result(self, workspace: Workspace) -> None:
        form = FormSession(workspace)
        form.set_input(ONE_ITEM)
        form.set_multiplier("2")
        form.run()
        previous = form.result

        form.set_input("{malformed")
        result = form.run()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MALFORMED_TRANSFER_LIST"
        assert form.result == previous

    def test_send_donkeys_uses_selected_realm(
        self, saved_workspace: Workspace, transfers_text: str
    ) -> None:
        form = FormSession(saved_workspace)
        form.set_mode(TransformMode.SEND_DONKEYS)
        form.set_input(transfers_text)
        result = form.run()
        assert result.ok
        assert {item["from"] for item in result.data["items"]} == {4604}

    def test_send_donkeys_without_selection_fails(
        self, workspace: Workspace, transfers_text: str
    ) -> None:
        form = FormSession(workspace)
        form.set_mode("send-donkeys")
        form.set_input(transfers_text)
        result = form.run()
        assert result.error is not None
        assert result.error.code == "INVALID_REALM_ID"
        assert form.result is None

    def test_send_donkeys_custom_id(self, workspace: Workspace, transfers_text: str) -> None:
        form = FormSession(workspace)
        form.select_realm(CUSTOM)
        form.set_custom_id("99")
        form.set_input(transfers_text)
        result = form.send_donkeys()
        assert result.data["items"][0] == {"from": 99, "to": 10, "resource": "Donkey", "amount": 3}

    def test_routing_override(self, workspace: Workspace, transfers_text: str) -> None:
        form = FormSession(workspace)
        form.select_realm(CUSTOM)
        form.set_custom_id("1")
        form.set_input(transfers_text)
        form.routing = "destination"  # type: ignore[assignment]
        form.merge = False
        assert len(form.send_donkeys().data["items"]) == 3

    def test_result_text_pretty(self, workspace: Workspace) -> None:
        form = FormSession(workspace)
        assert form.result_text() is None
        form.set_input(ONE_ITEM)
        form.set_multiplier("1")
        form.multiply()
        text = form.result_text()
        assert text is not None
        assert text.startswith('{\n  "items": [')
        assert json.loads(text) == form.result
