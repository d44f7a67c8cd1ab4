"""Tests for operation-specific Rich renderers."""

import json

from realmctl.output.renderers import render_quiet, render_result
from realmctl.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        result = _err("multiply", "INVALID_MULTIPLIER", "Error processing data.")
        output = render_result(result)
        assert "ERROR" in output
        assert "multiply" in output
        assert "Error processing data." in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("multiply", "MALFORMED_TRANSFER_LIST", "Bad", reason="items: [required]")
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "reason: items: [required]" in output

    def test_detail_hidden_without_verbose(self) -> None:
        result = _err("multiply", "MALFORMED_TRANSFER_LIST", "Bad", reason="oops")
        assert "oops" not in render_result(result)

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="test"))


# ── Documents ────────────────────────────────────────────────────────


class TestDocumentRenderer:
    def test_export_is_raw_json(self) -> None:
        data = {"realms": [{"id": 1, "name": "[Bracketed]", "output": ["Donkey"]}]}
        output = render_result(_ok("export_realms", **data))
        assert json.loads(output) == data

    def test_long_document_not_wrapped(self) -> None:
        items = [{"from": 1, "to": 2, "resource": "R" * 200, "amount": 1}]
        output = render_result(_ok("multiply", items=items))
        assert json.loads(output) == {"items": items}


# ── Realm renderers ──────────────────────────────────────────────────


class TestRealmTable:
    def test_rows_and_footer(self) -> None:
        result = _ok(
            "show_realms",
            items=[
                {"id": 4604, "name": "Ememurd", "output": ["Donkey", "Copper"], "carrier": True},
                {"id": 12, "name": "Stonehold", "output": ["Stone"], "carrier": False},
            ],
            count=2,
            resource="Donkey",
        )
        output = render_result(result)
        assert "4604" in output
        assert "Ememurd" in output
        assert "Donkey, Copper" in output
        assert "yes" in output
        assert "2 realms" in output

    def test_empty(self) -> None:
        output = render_result(_ok("show_realms", items=[], count=0, resource="Donkey"))
        assert output == "No realms saved."


class TestOptionsRenderer:
    def test_marks_selected(self) -> None:
        result = _ok(
            "realm_options",
            items=[
                {"value": "custom", "label": "Custom"},
                {"value": "4604", "label": "Ememurd"},
            ],
            selected="4604",
            realm_id="4604",
        )
        output = render_result(result)
        marked = [line for line in output.splitlines() if "*" in line]
        assert len(marked) == 1
        assert "Ememurd" in marked[0]
        assert "Realm ID: 4604" in output

    def test_no_selection(self) -> None:
        result = _ok(
            "realm_options",
            items=[{"value": "custom", "label": "Custom"}],
            selected=None,
            realm_id="",
        )
        assert "Realm ID: (none)" in render_result(result)


class TestSaveRenderer:
    def test_fields(self) -> None:
        result = _ok(
            "save_realms",
            count=3,
            carriers=2,
            key="eternum_realms_data",
            path="/tmp/x/storage.json",
        )
        output = render_result(result)
        assert "OK" in output
        assert "save_realms" in output
        assert "carriers:" in output
        assert "eternum_realms_data" in output


class TestGenericRenderer:
    def test_fields_and_meta(self) -> None:
        result = ServiceResult(
            ok=True, op="select_realm", data={"selected": "custom"}, meta={"x": 1}
        )
        assert "custom" in render_result(result)
        assert "x: 1" in render_result(result, verbose=True)
        assert "meta" not in render_result(result)


# ── Quiet mode ───────────────────────────────────────────────────────


class TestQuiet:
    def test_document_compact(self) -> None:
        output = render_quiet(_ok("send_donkeys", items=[{"from": 1, "to": 2}]))
        assert output == '{"items":[{"from":1,"to":2}]}'

    def test_realm_ids(self) -> None:
        result = _ok("show_realms", items=[{"id": 4604}, {"id": 77}], count=2)
        assert render_quiet(result) == "4604\n77"

    def test_option_values(self) -> None:
        result = _ok("realm_options", items=[{"value": "custom"}, {"value": "77"}])
        assert render_quiet(result) == "custom\n77"

    def test_plain_ok(self) -> None:
        assert render_quiet(_ok("save_realms", count=1)) == "OK: save_realms"

    def test_error(self) -> None:
        output = render_quiet(_err("multiply", "X", "nope"))
        assert output.startswith("ERROR: multiply")
        assert "nope" in output
