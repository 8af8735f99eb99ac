"""
chuk-chords - symbolic chord identification and construction.

Three pure operations:
- identify(notes, bass=None): ranked chord interpretations of a note set
- build(descriptor): the notes of a structured chord, lowest first
- name(descriptor): canonical chord-symbol text

Example:
    >>> from chuk_chords import NoteSet, identify
    >>> identify(NoteSet.parse("C4 E4 G4 B♭4")).best.name
    'C7'
"""

from chuk_chords.catalog import CATALOG, CatalogEntry
from chuk_chords.config import EngineConfig, load_config
from chuk_chords.core import (
    ChordDescriptor,
    Extension,
    Interval,
    Modifier,
    NamedPitch,
    Note,
    NoteSet,
    PitchClass,
)
from chuk_chords.engine import (
    ChordIdentifier,
    Identification,
    IdentificationResult,
    IdentifyIssue,
    build,
    build_scale,
    identify,
    identify_voicing,
)
from chuk_chords.exceptions import (
    CatalogIntegrityError,
    ChordEngineError,
    InvalidOctaveRange,
    InvalidPitchSpelling,
)
from chuk_chords.naming import alternate_names, precise_name
from chuk_chords.naming import render_name as name

__version__ = "0.1.0"

__all__ = [
    # Operations
    "identify",
    "identify_voicing",
    "build",
    "build_scale",
    "name",
    "precise_name",
    "alternate_names",
    # Types
    "PitchClass",
    "NamedPitch",
    "Interval",
    "Note",
    "NoteSet",
    "Modifier",
    "Extension",
    "ChordDescriptor",
    "CatalogEntry",
    "CATALOG",
    "ChordIdentifier",
    "Identification",
    "IdentificationResult",
    "IdentifyIssue",
    # Configuration
    "EngineConfig",
    "load_config",
    # Errors
    "ChordEngineError",
    "InvalidOctaveRange",
    "InvalidPitchSpelling",
    "CatalogIntegrityError",
]
