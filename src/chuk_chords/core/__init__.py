"""
Core music primitives - the Radix layer.

These are the invariants everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- NamedPitch: One of the 49 enharmonic spellings of a pitch class
- Interval: Distance between pitches in semitones and letter steps
- Note: A spelled pitch at an octave, with a 0-127 identity
- NoteSet: Fixed-width bit-set over note identities
- Modifier / Extension: Chord-quality vocabulary
- ChordDescriptor: Root + vocabulary + voicing choices
"""

from chuk_chords.core.chord import (
    ChordDescriptor,
    ChordTone,
    Extension,
    Modifier,
    chord_tones,
    relative_pitch_classes,
)
from chuk_chords.core.interval import (
    INTERVAL_NAMES_BY_DISTANCE,
    Interval,
    names_for_distance,
    pitch_class_distance,
    semitone_distance,
)
from chuk_chords.core.note import Note, NoteSet
from chuk_chords.core.pitch import NAMED_PITCHES, NamedPitch, PitchClass

__all__ = [
    # Pitch
    "PitchClass",
    "NamedPitch",
    "NAMED_PITCHES",
    # Interval
    "Interval",
    "INTERVAL_NAMES_BY_DISTANCE",
    "names_for_distance",
    "pitch_class_distance",
    "semitone_distance",
    # Note
    "Note",
    "NoteSet",
    # Chord
    "Modifier",
    "Extension",
    "ChordTone",
    "ChordDescriptor",
    "chord_tones",
    "relative_pitch_classes",
]
