"""Rotation selector — who serves this round.

One round, reading every count before mutating any of them:

1. RESET: if any count has reached ``MAX_COUNT``, every count goes to 0.
2. POOL: members tied at the (post-reset) minimum count, in book order.
3. SHUFFLE: the pool is permuted by an injected :class:`Shuffler`.
4. TAKE: the first ``min(people, len(pool))`` members; no fallback to
   the next tier when the pool is short.
5. UPDATE: each selected count is incremented, wrapping past
   ``MAX_COUNT`` back to 0.

The reset (step 1) and the wrap (step 5) are independent bounding rules.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol, TypeVar

from touban.domain.errors import NoMembers
from touban.domain.ledger import MAX_COUNT, Book, Member

T = TypeVar("T")


class Shuffler(Protocol):
    """Random-permutation capability: shuffle a list in place."""

    def shuffle(self, items: list[T]) -> None: ...


class SeededShuffler:
    """Reproducible shuffles. Each instance owns its own generator."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def shuffle(self, items: list[T]) -> None:
        self._rng.shuffle(items)


class EntropyShuffler:
    """Non-reproducible shuffles drawn from the OS entropy source."""

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    def shuffle(self, items: list[T]) -> None:
        self._rng.shuffle(items)


def shuffler_for(seed: int | None) -> Shuffler:
    """Seeded shuffler when *seed* is given, entropy-backed otherwise."""
    if seed is None:
        return EntropyShuffler()
    return SeededShuffler(seed)


@dataclass(frozen=True)
class Assignment:
    """Outcome of one round.

    Attributes:
        book: The book with updated counts.
        selected: Selected members (with their new counts) in selection order.
        reset: Whether the full-cycle reset fired before selection.
    """

    book: Book
    selected: list[Member]
    reset: bool


def bump(count: int) -> int:
    """Increment a service count, wrapping past ``MAX_COUNT`` to 0."""
    count += 1
    return 0 if count > MAX_COUNT else count


def candidate_pool(members: list[Member]) -> list[int]:
    """Indices of the members tied at the minimum count, in book order."""
    lowest = min(m.count for m in members)
    return [i for i, m in enumerate(members) if m.count == lowest]


def assign(book: Book, shuffler: Shuffler) -> Assignment:
    """Run one round of selection on *book*.

    Raises:
        NoMembers: the book has no members.
    """
    if not book.members:
        raise NoMembers()

    members = list(book.members)
    reset = max(m.count for m in members) >= MAX_COUNT
    if reset:
        members = [m.model_copy(update={"count": 0}) for m in members]

    pool = candidate_pool(members)
    shuffler.shuffle(pool)
    chosen = pool[: min(book.people, len(pool))]

    selected: list[Member] = []
    for i in chosen:
        members[i] = members[i].model_copy(update={"count": bump(members[i].count)})
        selected.append(members[i])

    return Assignment(book=book.with_members(members), selected=selected, reset=reset)
