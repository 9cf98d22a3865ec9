"""Command: show the contents of a book."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from touban.commands._base import ToubanCommand, book_option

if TYPE_CHECKING:
    from touban.commands._context import AppContext


@click.command(
    cls=ToubanCommand,
    examples="""\
  touban show --book "$BOOK"
  touban --json show --book "$BOOK\"""",
)
@book_option
@click.pass_obj
def show(app: AppContext, token: str) -> None:
    """Show people, interval and member counts stored in a token."""
    app.emit(app.service.show(token))
