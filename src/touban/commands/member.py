"""Commands: add-member and remove-member."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from touban.commands._base import ToubanCommand, book_option

if TYPE_CHECKING:
    from touban.commands._context import AppContext


@click.command(
    "add-member",
    cls=ToubanCommand,
    examples="""\
  touban add-member --book "$BOOK" --member さぶろう
  BOOK=$(touban -q add-member --book "$BOOK" --member D)""",
)
@book_option
@click.option("--member", required=True, help="Name of the member to add.")
@click.pass_obj
def add_member(app: AppContext, token: str, member: str) -> None:
    """Add a member at the group's average count; prints the new token."""
    app.emit(app.service.add_member(token, member))


@click.command(
    "remove-member",
    cls=ToubanCommand,
    examples="""\
  touban remove-member --book "$BOOK" --member はなこ""",
)
@book_option
@click.option("--member", required=True, help="Exact name of the member to remove.")
@click.pass_obj
def remove_member(app: AppContext, token: str, member: str) -> None:
    """Remove a member; prints the new token."""
    app.emit(app.service.remove_member(token, member))
