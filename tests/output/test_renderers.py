"""Tests for operation-specific Rich renderers."""

from touban.output.renderers import render_quiet, render_result
from touban.services.result import ServiceError, ServiceResult

TOKEN = "ぁぃぅぇぉかがきぎくぐけげこごさざしじすずせぜそぞただちぢっつづてでとどなにぬねのはばぱひびぴふぶぷへべぺほぼぽまみむめもゃやゅゆょよらりるれろゎ"


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str) -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code=code, message=message))


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("show", "CORRUPT_BASE64", "Corrupt token"))
        assert "ERROR" in output
        assert "show" in output
        assert "Corrupt token" in output
        assert "CORRUPT_BASE64" not in output

    def test_verbose_shows_code(self) -> None:
        output = render_result(_err("show", "CORRUPT_BASE64", "Corrupt token"), verbose=True)
        assert "code: CORRUPT_BASE64" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="x"))


class TestTokenLine:
    def test_long_token_is_not_wrapped(self) -> None:
        result = _ok("remove_member", book=TOKEN, member="A")
        output = render_result(result, width=40)
        assert TOKEN in output.splitlines()

    def test_token_is_last_line(self) -> None:
        result = _ok("add_member", book=TOKEN, member={"name": "B", "count": 2})
        output = render_result(result)
        assert output.splitlines()[-1] == TOKEN
        assert "added: B" in output
        assert "count: 2" in output


class TestCreateRenderer:
    def test_create(self) -> None:
        result = _ok(
            "create",
            book=TOKEN,
            people=2,
            interval=7,
            members=[{"name": "A", "count": 0}, {"name": "B", "count": 0}],
        )
        output = render_result(result)
        assert "OK" in output
        assert "people: 2" in output
        assert "interval: 7 days" in output
        assert "members: A, B" in output

    def test_create_without_members(self) -> None:
        output = render_result(_ok("create", book=TOKEN, people=1, interval=0, members=[]))
        assert "members: (none)" in output


class TestShowRenderer:
    def test_member_table(self) -> None:
        result = _ok(
            "show",
            people=1,
            interval=3,
            members=[{"name": "たろう", "count": 4}, {"name": "はなこ", "count": 0}],
        )
        output = render_result(result)
        assert "Member" in output
        assert "たろう" in output
        assert "2 members" in output

    def test_names_are_not_markup(self) -> None:
        result = _ok(
            "show",
            people=1,
            interval=3,
            members=[{"name": "a[/b]", "count": 0}, {"name": "[bold]Bob", "count": 2}],
        )
        output = render_result(result)
        assert "a[/b]" in output
        assert "[bold]Bob" in output

    def test_empty_book(self) -> None:
        output = render_result(_ok("show", people=1, interval=3, members=[]))
        assert "members: (none)" in output


class TestAssignRenderer:
    def test_selected_table(self) -> None:
        result = _ok("assign", book=TOKEN, reset=False, selected=[{"name": "C", "count": 3}])
        output = render_result(result)
        assert "Served" in output
        assert "C" in output
        assert "reset" not in output
        assert output.splitlines()[-1] == TOKEN

    def test_reset_line(self) -> None:
        result = _ok("assign", book=TOKEN, reset=True, selected=[{"name": "C", "count": 1}])
        assert "reset: all counts were set back to 0" in render_result(result)

    def test_selected_names_are_not_markup(self) -> None:
        result = _ok("assign", book=TOKEN, reset=False, selected=[{"name": "x[/y]", "count": 1}])
        assert "x[/y]" in render_result(result)


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("mystery", answer=42))
        assert "mystery" in output
        assert "answer: 42" in output


class TestRenderQuiet:
    def test_token_only(self) -> None:
        assert render_quiet(_ok("assign", book=TOKEN, selected=[])) == TOKEN

    def test_without_token(self) -> None:
        assert render_quiet(_ok("show", people=1)) == "OK: show"

    def test_error(self) -> None:
        assert render_quiet(_err("assign", "NO_MEMBERS", "empty")) == "ERROR: assign — empty"