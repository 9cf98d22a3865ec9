"""ServiceResult and ServiceError — the contract between core and CLI.

INVARIANT: every LedgerService operation returns a ServiceResult.
A failed result never carries a token; the caller keeps the last good one.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all ledger operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"assign"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal notices (e.g. a full-cycle reset).
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @property
    def token(self) -> str | None:
        """The updated book token, if the operation produced one."""
        return self.data.get("book")
