"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from touban.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from touban.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult, *, verbose: bool = False, width: int | None = None
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the token, if any."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.token:
        return result.token
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="touban.ok"), Text(f"  {result.op}", style="touban.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="touban.key"), Text(str(value)), sep="")


def _token(console: Console, result: ServiceResult) -> None:
    """Print the book token on a line of its own, never wrapped."""
    console.print()
    console.print(Text("  book:", style="touban.key"))
    console.print(Text(str(result.data["book"]), style="touban.token"), soft_wrap=True)


def _member_table(members: list[dict[str, Any]], *, count_header: str = "Count") -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Member", style="touban.name")
    table.add_column(count_header, style="touban.count", justify="right")
    for i, member in enumerate(members, start=1):
        # Text cells: member names are never parsed as markup.
        table.add_row(
            Text(str(i)),
            Text(str(member.get("name", ""))),
            Text(str(member.get("count", ""))),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="touban.error"),
        Text(f"  {result.op}", style="touban.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )
    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_create(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "people", d.get("people"))
    _field(console, "interval", f"{d.get('interval')} days")
    names = [m["name"] for m in d.get("members", [])]
    _field(console, "members", ", ".join(names) if names else "(none)")
    _token(console, result)


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    members = d.get("members", [])
    _field(console, "people", d.get("people"))
    _field(console, "interval", f"{d.get('interval')} days")
    if not members:
        _field(console, "members", "(none)")
        return
    console.print()
    console.print(_member_table(members))
    console.print(f"\n{len(members)} members")


def _render_add_member(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    member = result.data.get("member", {})
    _field(console, "added", member.get("name"))
    _field(console, "count", member.get("count"))
    _token(console, result)


def _render_remove_member(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    _field(console, "removed", result.data.get("member"))
    _token(console, result)


def _render_assign(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    if result.data.get("reset"):
        console.print(Text("  reset: all counts were set back to 0", style="touban.warning"))
    selected = result.data.get("selected", [])
    console.print()
    console.print(_member_table(selected, count_header="Served"))
    _token(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "create": _render_create,
    "show": _render_show,
    "add_member": _render_add_member,
    "remove_member": _render_remove_member,
    "assign": _render_assign,
}
