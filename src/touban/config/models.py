"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, touban.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DefaultsConfig(BaseModel):
    """[defaults] section — used by ``create`` when flags are omitted."""

    model_config = {"frozen": True}

    people: int = Field(default=1, ge=1)
    interval: int = Field(default=7, ge=0)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)
