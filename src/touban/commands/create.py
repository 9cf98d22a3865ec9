"""Command: create a new book."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from touban.commands._base import ToubanCommand

if TYPE_CHECKING:
    from touban.commands._context import AppContext


@click.command(
    cls=ToubanCommand,
    examples="""\
  touban create --people 2 --interval 7 --members "たろう,はなこ,じろう"
  touban create --people 1 --interval 14
  touban -q create --people 2 --interval 7 --members "A,B,C\"""",
)
@click.option("--people", type=int, default=None, help="Members to assign each round (>= 1).")
@click.option(
    "--interval",
    type=click.IntRange(min=0),
    default=None,
    help="Days between rounds (advisory).",
)
@click.option("--members", default=None, help='Comma-separated names, e.g. "a,b,c".')
@click.pass_obj
def create(app: AppContext, people: int | None, interval: int | None, members: str | None) -> None:
    """Create a new とうばんのしょ and print its token."""
    defaults = app.settings.defaults
    result = app.service.create(
        people if people is not None else defaults.people,
        interval if interval is not None else defaults.interval,
        members,
    )
    app.emit(result)
