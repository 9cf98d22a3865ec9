"""Command: assign this round's members."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from touban.commands._base import ToubanCommand, book_option

if TYPE_CHECKING:
    from touban.commands._context import AppContext


@click.command(
    cls=ToubanCommand,
    examples="""\
  touban assign --book "$BOOK"
  touban assign --book "$BOOK" --seed 42
  BOOK=$(touban -q assign --book "$BOOK")""",
)
@book_option
@click.option(
    "--seed",
    type=click.IntRange(min=0),
    default=None,
    help="Seed for a reproducible selection.",
)
@click.pass_obj
def assign(app: AppContext, token: str, seed: int | None) -> None:
    """Pick this round's members from those who served least."""
    app.emit(app.service.assign(token, seed=seed))
