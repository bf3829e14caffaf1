"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, reachctl.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from reachctl.domain.reachability import ReachStrategy

# --- reachctl.toml sections ---


class GenerateConfig(BaseModel):
    """[generate] section — random graph used when no edges are given."""

    model_config = {"frozen": True}

    edges: int = Field(default=25, ge=0)
    letters: int = Field(default=15, ge=1)
    seed: int | None = None

    @field_validator("letters")
    @classmethod
    def _clamp_letters(cls, value: int) -> int:
        return min(value, 26)


class ReachabilityConfig(BaseModel):
    """[reachability] section."""

    model_config = {"frozen": True}

    strategy: ReachStrategy = ReachStrategy.PER_SOURCE


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    true_char: str = Field(default="1", min_length=1)
    false_char: str = Field(default="0", min_length=1)
    width: int = Field(default=120, ge=40)
