"""
Naming styles - how chord vocabulary is written as text.

A NamingStyle is a frozen token bundle. The standard style produces the
canonical name; jazz and ascii are built-in alternatives, and custom
styles can be loaded from YAML.
"""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import BaseModel, Field

from chuk_chords.constants import ErrorMessages


class NamingStyle(BaseModel):
    """Tokens used when rendering a chord name."""

    name: str = Field(description="Style identifier")
    description: str = Field(default="", description="What the style is for")
    minor: str = Field(default="m", description="Minor quality prefix")
    diminished: str = Field(default="dim", description="Diminished quality prefix")
    augmented: str = Field(default="aug", description="Augmented quality prefix")
    major_seventh: str = Field(default="maj", description="Written before a major seventh degree")
    half_diminished: str | None = Field(
        default=None,
        description="Prefix replacing minor + flat five on seventh chords (e.g. 'ø')",
    )
    suspended: str = Field(default="sus", description="Suspension prefix")
    add: str = Field(default="add", description="Added-tone prefix")
    flat: str = Field(default="♭", description="Flat sign in alterations")
    sharp: str = Field(default="♯", description="Sharp sign in alterations")
    ascii_roots: bool = Field(default=False, description="Spell roots and bass with b/#")
    no_third_fifth: str = Field(default="(no3,no5)", description="Suffix for a bare root")

    model_config = {"frozen": True}


STANDARD = NamingStyle(name="standard", description="Canonical chord names")

JAZZ = NamingStyle(
    name="jazz",
    description="Lead-sheet symbols",
    minor="-",
    diminished="°",
    augmented="+",
    major_seventh="Δ",
    half_diminished="ø",
)

ASCII = NamingStyle(
    name="ascii",
    description="Plain-text names without accidental glyphs",
    flat="b",
    sharp="#",
    ascii_roots=True,
)

BUILTIN_STYLES: dict[str, NamingStyle] = {
    style.name: style for style in (STANDARD, JAZZ, ASCII)
}


def get_naming_style(name: str) -> NamingStyle:
    """
    Get a built-in naming style by name.

    Args:
        name: 'standard', 'jazz' or 'ascii'

    Returns:
        The NamingStyle

    Raises:
        ValueError: If no built-in style has that name
    """
    style = BUILTIN_STYLES.get(name)
    if style is None:
        raise ValueError(ErrorMessages.UNKNOWN_STYLE.format(name=name))
    return style


def parse_naming_style(text: str) -> NamingStyle:
    """
    Parse a custom naming style from YAML.

    Keys left out fall back to the standard tokens. A 'base' key starts
    from a built-in style instead.

    Example:
        name: lead-sheet
        base: jazz
        major_seventh: maj
    """
    data: dict[str, Any] = yaml.safe_load(text) or {}
    base_name = data.pop("base", None)
    if base_name is not None:
        base = get_naming_style(base_name).model_dump()
        base.update(data)
        data = base
    return NamingStyle(**data)
