"""Output mode dispatch.

The CLI renders a ServiceResult for humans (Rich), for shell pipelines
(``--quiet``: the bare token) or for machines (``--json``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from touban.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from touban.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Which output mode to use. JSON wins over quiet."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
