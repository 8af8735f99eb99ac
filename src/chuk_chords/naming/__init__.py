"""
Chord naming - canonical names, precise names and alternates.
"""

from chuk_chords.naming.namer import alternate_names, bass_pitch, precise_name, render_name
from chuk_chords.naming.style import (
    ASCII,
    BUILTIN_STYLES,
    JAZZ,
    STANDARD,
    NamingStyle,
    get_naming_style,
    parse_naming_style,
)

__all__ = [
    # Rendering
    "render_name",
    "precise_name",
    "alternate_names",
    "bass_pitch",
    # Styles
    "NamingStyle",
    "STANDARD",
    "JAZZ",
    "ASCII",
    "BUILTIN_STYLES",
    "get_naming_style",
    "parse_naming_style",
]
