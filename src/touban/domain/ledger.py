"""Ledger model — the book and its members.

A :class:`Book` is a value: every operation builds a new one and the caller
re-encodes it. Validation is strict (no coercion, no unknown fields) so a
decoded token either satisfies every invariant or is rejected.

INVARIANT: ``people >= 1``, every ``count`` in ``[0, MAX_COUNT]``,
member names pairwise distinct, member order is insertion order.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, ValidationError, model_validator

from touban.domain.errors import DuplicateMember, InvalidArgument

MAX_COUNT = 5


class Member(BaseModel):
    """A named participant with a bounded service counter."""

    model_config = {"frozen": True, "strict": True, "extra": "forbid"}

    name: str = Field(min_length=1)
    count: int = Field(ge=0, le=MAX_COUNT)


class Book(BaseModel):
    """The full rotation state (とうばんのしょ)."""

    model_config = {"frozen": True, "strict": True, "extra": "forbid"}

    people: int = Field(ge=1)
    interval: int = Field(ge=0)
    members: list[Member]

    @model_validator(mode="after")
    def _names_unique(self) -> Self:
        seen: set[str] = set()
        for member in self.members:
            if member.name in seen:
                raise ValueError(f"duplicate member name: {member.name!r}")
            seen.add(member.name)
        return self

    @property
    def names(self) -> list[str]:
        return [m.name for m in self.members]

    def find(self, name: str) -> Member | None:
        """Return the member called *name* (exact match), or None."""
        for member in self.members:
            if member.name == name:
                return member
        return None

    def with_members(self, members: list[Member]) -> Book:
        """Return a copy of this book holding *members*."""
        return Book(people=self.people, interval=self.interval, members=members)


def new_member(name: str, count: int) -> Member:
    """Build a member from caller input.

    Raises:
        InvalidArgument: *name* is empty or not a valid Unicode string
            (e.g. a lone surrogate from undecodable argv bytes).
    """
    try:
        return Member(name=name, count=count)
    except ValidationError as exc:
        reason = "; ".join(err["msg"] for err in exc.errors())
        raise InvalidArgument(f"invalid member name {name!r}: {reason}") from exc


def create_book(people: int, interval: int, names: list[str] | None = None) -> Book:
    """Build a fresh book with every member at count 0.

    Raises:
        InvalidArgument: ``people < 1``, ``interval < 0`` or an unusable name.
        DuplicateMember: *names* repeats a name.
    """
    if people < 1:
        raise InvalidArgument(f"people must be >= 1 (got {people})")
    if interval < 0:
        raise InvalidArgument(f"interval must be >= 0 (got {interval})")

    members: list[Member] = []
    seen: set[str] = set()
    for name in names or []:
        if not name:
            raise InvalidArgument("member names must not be empty")
        if name in seen:
            raise DuplicateMember(name)
        seen.add(name)
        members.append(new_member(name, 0))
    return Book(people=people, interval=interval, members=members)
