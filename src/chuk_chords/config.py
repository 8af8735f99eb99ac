"""
Engine configuration.

Every option has a default, so EngineConfig() is the standard behavior.
Configuration can also be read from YAML:

    default_octave: 3
    fold_extensions: false
    alternate_styles: [jazz]
"""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from chuk_chords.constants import DEFAULT_OCTAVE, MAX_ACCIDENTALS, MAX_OCTAVE, MIN_OCTAVE
from chuk_chords.naming.style import get_naming_style


class EngineConfig(BaseModel):
    """Options for identification and naming."""

    default_octave: int = Field(
        default=DEFAULT_OCTAVE,
        ge=MIN_OCTAVE,
        le=MAX_OCTAVE,
        description="Octave for notes parsed without one",
    )
    fold_extensions: bool = Field(
        default=True,
        description="Fold left-over intervals into add/altered extensions",
    )
    prefer_root_position: bool = Field(
        default=True,
        description="Rank root position before inversions and slash chords",
    )
    max_alternate_accidentals: int = Field(
        default=1,
        ge=0,
        le=MAX_ACCIDENTALS,
        description="Most accidentals on a respelled root in alternate names",
    )
    alternate_styles: tuple[str, ...] = Field(
        default=("jazz", "ascii"),
        description="Naming styles rendered as alternate names",
    )

    model_config = {"frozen": True}

    @field_validator("alternate_styles")
    @classmethod
    def _known_styles(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for name in value:
            get_naming_style(name)
        return value


DEFAULT_CONFIG = EngineConfig()


def load_config(text: str) -> EngineConfig:
    """
    Load an EngineConfig from YAML text.

    Args:
        text: YAML mapping of option names to values; empty means defaults

    Returns:
        Validated EngineConfig

    Raises:
        pydantic.ValidationError: If an option is invalid
    """
    data: dict[str, Any] = yaml.safe_load(text) or {}
    return EngineConfig(**data)
