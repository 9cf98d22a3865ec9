"""Token codec — Book ⇄ printable token.

Encode: Book → compact JSON bytes → base64url (no padding) → one hiragana
code point per base64 symbol. Decode is the exact inverse with each stage
validated on its own:

1. every character must lie in ``BLOCK_START .. BLOCK_START + 63``
   (:class:`InvalidTokenCharacter`, first offending character only);
2. the base64 text must decode canonically (:class:`CorruptBase64`);
3. the bytes must validate as a :class:`Book` (:class:`MalformedLedgerSchema`).

INVARIANT: ``decode(encode(book)) == book`` for every valid book.
"""

from __future__ import annotations

import base64
import binascii
import string

from pydantic import ValidationError

from touban.domain.errors import CorruptBase64, InvalidTokenCharacter, MalformedLedgerSchema
from touban.domain.ledger import Book

BLOCK_START = 0x3041  # 'ぁ' HIRAGANA LETTER SMALL A
ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"
BLOCK_SIZE = len(ALPHABET)

_TO_TOKEN: dict[str, str] = {sym: chr(BLOCK_START + i) for i, sym in enumerate(ALPHABET)}
_FROM_TOKEN: dict[str, str] = {ch: sym for sym, ch in _TO_TOKEN.items()}


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _b64decode(text: str) -> bytes:
    """Decode unpadded base64url, rejecting truncated or non-canonical input."""
    if len(text) % 4 == 1:
        raise CorruptBase64(f"Corrupt token: {len(text)} symbols cannot be valid base64")
    try:
        raw = base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))
    except (binascii.Error, ValueError) as exc:
        raise CorruptBase64(f"Corrupt token: {exc}") from exc
    # The stdlib decoder ignores stray trailing bits.
    if _b64encode(raw) != text:
        raise CorruptBase64("Corrupt token: non-canonical trailing symbol")
    return raw


def to_symbols(token: str) -> str:
    """Map token characters back to base64url symbols."""
    symbols: list[str] = []
    for position, ch in enumerate(token):
        sym = _FROM_TOKEN.get(ch)
        if sym is None:
            raise InvalidTokenCharacter(ch, position)
        symbols.append(sym)
    return "".join(symbols)


def from_symbols(b64: str) -> str:
    """Map base64url symbols to token characters."""
    return "".join(_TO_TOKEN[sym] for sym in b64)


def encode(book: Book) -> str:
    """Serialize *book* into a token. Never fails for a valid book."""
    payload = book.model_dump_json().encode("utf-8")
    return from_symbols(_b64encode(payload))


def decode(token: str) -> Book:
    """Parse *token* back into a :class:`Book`.

    Raises:
        InvalidTokenCharacter: a character is outside the hiragana block.
        CorruptBase64: the symbol stream is not valid unpadded base64url.
        MalformedLedgerSchema: the payload is not a valid book.
    """
    raw = _b64decode(to_symbols(token))
    try:
        return Book.model_validate_json(raw)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        )
        raise MalformedLedgerSchema(f"Malformed ledger data: {problems}") from exc
