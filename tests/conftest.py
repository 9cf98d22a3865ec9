"""Shared pytest fixtures for touban tests."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from touban.domain import codec
from touban.domain.ledger import Book, Member


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test in an empty directory with no touban.toml or TOUBAN_* env."""
    for name in list(os.environ):
        if name.startswith("TOUBAN_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_book() -> Callable[..., Book]:
    """Build a book from ``(name, count)`` pairs."""

    def _make(
        members: list[tuple[str, int]] | None = None,
        *,
        people: int = 1,
        interval: int = 7,
    ) -> Book:
        return Book(
            people=people,
            interval=interval,
            members=[Member(name=n, count=c) for n, c in members or []],
        )

    return _make


@pytest.fixture
def make_token(make_book: Callable[..., Book]) -> Callable[..., str]:
    """Build a token from ``(name, count)`` pairs."""

    def _make(
        members: list[tuple[str, int]] | None = None,
        *,
        people: int = 1,
        interval: int = 7,
    ) -> str:
        return codec.encode(make_book(members, people=people, interval=interval))

    return _make
