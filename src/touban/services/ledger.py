"""LedgerService — token in, ServiceResult out.

Pipeline per operation: DECODE → MUTATE → ENCODE → RESPOND.
Each operation works on its own decoded copy of the book; a failure at any
stage returns an error result and no token.
"""

from __future__ import annotations

import logging
from typing import Any

from touban.domain import codec
from touban.domain.errors import ToubanError
from touban.domain.ledger import Book, Member, create_book
from touban.domain.membership import add_member, parse_member_list, remove_member
from touban.domain.rotation import Shuffler, assign, shuffler_for
from touban.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

RESET_NOTICE = "All counts reached the cycle limit and were reset to 0"


def _member_dict(member: Member) -> dict[str, Any]:
    return {"name": member.name, "count": member.count}


def _failure(op: str, exc: ToubanError) -> ServiceResult:
    logger.debug("%s failed: %s", op, exc.code)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=str(exc)),
    )


class LedgerService:
    """Operations over a single book token.

    Holds no state between calls; every method is a pure function of its
    arguments (and, for an unseeded ``assign``, the OS entropy source).
    """

    def create(
        self,
        people: int,
        interval: int,
        members: str | list[str] | None = None,
    ) -> ServiceResult:
        """Create a new book; *members* is a list or a comma-separated string."""
        op = "create"
        names = members if isinstance(members, list) else parse_member_list(members)
        try:
            book = create_book(people, interval, names)
        except ToubanError as exc:
            return _failure(op, exc)

        logger.debug("created book people=%d interval=%d members=%d", people, interval, len(names))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "book": codec.encode(book),
                "people": book.people,
                "interval": book.interval,
                "members": [_member_dict(m) for m in book.members],
            },
        )

    def show(self, token: str) -> ServiceResult:
        """Decode *token* into a summary of the book."""
        op = "show"
        try:
            book = codec.decode(token)
        except ToubanError as exc:
            return _failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "people": book.people,
                "interval": book.interval,
                "members": [_member_dict(m) for m in book.members],
            },
        )

    def add_member(self, token: str, name: str) -> ServiceResult:
        """Add *name* at the group's average count."""
        op = "add_member"
        try:
            book, member = add_member(codec.decode(token), name)
        except ToubanError as exc:
            return _failure(op, exc)

        logger.debug("added member at count=%d", member.count)
        return ServiceResult(
            ok=True,
            op=op,
            data={"book": codec.encode(book), "member": _member_dict(member)},
        )

    def remove_member(self, token: str, name: str) -> ServiceResult:
        """Remove *name* from the book."""
        op = "remove_member"
        try:
            book = remove_member(codec.decode(token), name)
        except ToubanError as exc:
            return _failure(op, exc)

        logger.debug("removed member, %d remaining", len(book.members))
        return ServiceResult(
            ok=True,
            op=op,
            data={"book": codec.encode(book), "member": name},
        )

    def assign(
        self,
        token: str,
        *,
        seed: int | None = None,
        shuffler: Shuffler | None = None,
    ) -> ServiceResult:
        """Pick this round's members.

        An explicit *shuffler* wins over *seed*; with neither, selection draws
        from the OS entropy source.
        """
        op = "assign"
        try:
            book: Book = codec.decode(token)
            outcome = assign(book, shuffler or shuffler_for(seed))
        except ToubanError as exc:
            return _failure(op, exc)

        warnings: list[str] = []
        if outcome.reset:
            logger.info("full-cycle reset before selection")
            warnings.append(RESET_NOTICE)

        logger.debug(
            "assigned %d of %d members (seeded=%s)",
            len(outcome.selected),
            len(book.members),
            seed is not None,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "book": codec.encode(outcome.book),
                "reset": outcome.reset,
                "selected": [_member_dict(m) for m in outcome.selected],
            },
            warnings=warnings,
        )
