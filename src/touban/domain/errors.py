"""Domain error kinds.

Every failure the core can produce is a :class:`ToubanError` subclass with a
stable ``code``. The service layer turns these into ``ServiceError`` payloads.
"""

from __future__ import annotations


class ToubanError(Exception):
    """Base class for all ledger errors."""

    code = "TOUBAN_ERROR"


class InvalidArgument(ToubanError):
    code = "INVALID_ARGUMENT"


class DuplicateMember(ToubanError):
    code = "DUPLICATE_MEMBER"

    def __init__(self, name: str) -> None:
        super().__init__(f"Member already exists: {name!r}")
        self.name = name


class MemberNotFound(ToubanError):
    code = "MEMBER_NOT_FOUND"

    def __init__(self, name: str) -> None:
        super().__init__(f"Member not found: {name!r}")
        self.name = name


class NoMembers(ToubanError):
    code = "NO_MEMBERS"

    def __init__(self) -> None:
        super().__init__("The book has no members to assign")


class InvalidTokenCharacter(ToubanError):
    """A token character lies outside the 64-code-point block."""

    code = "INVALID_TOKEN_CHARACTER"

    def __init__(self, char: str, position: int) -> None:
        super().__init__(
            f"Invalid token character {char!r} (U+{ord(char):04X}) at position {position}"
        )
        self.char = char
        self.position = position


class CorruptBase64(ToubanError):
    code = "CORRUPT_BASE64"


class MalformedLedgerSchema(ToubanError):
    code = "MALFORMED_LEDGER_SCHEMA"
