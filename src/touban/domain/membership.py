"""Membership rules — adding and removing members fairly."""

from __future__ import annotations

from touban.domain.errors import DuplicateMember, InvalidArgument, MemberNotFound
from touban.domain.ledger import Book, Member, new_member


def parse_member_list(raw: str | None) -> list[str]:
    """Split a comma-separated member list, trimming and dropping blanks.

    Examples:
        >>> parse_member_list("たろう, はなこ,,じろう ")
        ['たろう', 'はなこ', 'じろう']
        >>> parse_member_list(None)
        []
    """
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def starting_count(book: Book) -> int:
    """Mean of the existing counts, rounded half up (0 for an empty book).

    A newcomer starts level with the group rather than ahead of or behind it.
    """
    if not book.members:
        return 0
    total = sum(m.count for m in book.members)
    n = len(book.members)
    return (2 * total + n) // (2 * n)


def add_member(book: Book, name: str) -> tuple[Book, Member]:
    """Append *name* to the book at the group's average count.

    Raises:
        InvalidArgument: *name* is empty or not a valid Unicode string.
        DuplicateMember: a member with exactly this name exists.
    """
    if not name:
        raise InvalidArgument("member name must not be empty")
    if book.find(name) is not None:
        raise DuplicateMember(name)
    member = new_member(name, starting_count(book))
    return book.with_members([*book.members, member]), member


def remove_member(book: Book, name: str) -> Book:
    """Drop the member called *name*; survivors keep their order.

    Raises:
        MemberNotFound: no member has exactly this name.
    """
    if book.find(name) is None:
        raise MemberNotFound(name)
    return book.with_members([m for m in book.members if m.name != name])
