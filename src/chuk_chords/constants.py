"""
Constants and enums for the chord engine.

No magic numbers - the identity space, the reference pitch and the
issue vocabulary all live here.
"""

from enum import Enum

# Supported written octave span (scientific pitch notation)
MIN_OCTAVE = 0
MAX_OCTAVE = 9

SEMITONES_PER_OCTAVE = 12
DIATONIC_STEPS_PER_OCTAVE = 7

# Fixed-width note identity space shared with audio collaborators
NOTE_ID_WIDTH = 128
MIN_NOTE_ID = 0
MAX_NOTE_ID = NOTE_ID_WIDTH - 1

# Highest id with a default spelling inside the octave span (B9)
MAX_SPELLED_ID = (MAX_OCTAVE + 1) * SEMITONES_PER_OCTAVE - 1

# Equal temperament reference: A4 = 440 Hz
REFERENCE_FREQUENCY = 440.0
REFERENCE_NOTE_ID = 57  # A4

# Note id 48 is C4, MIDI 60
MIDI_OFFSET = 12

MAX_ACCIDENTALS = 3

DEFAULT_OCTAVE = 4


class IssueSeverity(str, Enum):
    """Severity of an identification issue."""

    WARNING = "warning"  # Results returned, but with a known limitation
    INFO = "info"  # Informational only


class IssueCode(str, Enum):
    """Conditions reported on an identification result."""

    NO_INTERPRETATION = "no_interpretation"
    AMBIGUOUS_WITHOUT_BASS_HINT = "ambiguous_without_bass_hint"


class ErrorMessages:
    """Standardized error messages."""

    OCTAVE_OUT_OF_RANGE = "Octave {octave} is outside the supported range ({low}-{high})."
    NOTE_ID_OUT_OF_RANGE = "Note id {note_id} is outside the supported range ({low}-{high})."
    UNSPELLED_NOTE_ID = "Note id {note_id} has no spelling in octaves 0-{high} (max id {limit})."
    UNKNOWN_PITCH = "Unknown pitch spelling: '{name}'."
    UNKNOWN_LETTER = "Unknown note letter: '{letter}'."
    TOO_MANY_ACCIDENTALS = "Spelling would need {accidental} accidentals (max {limit})."
    INVALID_NOTE = "Invalid note: '{text}'. Expected format like 'C4', 'F#3' or 'E♭'."
    RESPELL_MISMATCH = "Cannot respell {note} as {pitch}: different pitch class."
    INVALID_INVERSION = "Inversion {inversion} is out of range for a chord with {tones} tones."
    CONFLICTING_MODIFIERS = "Conflicting modifiers: {modifiers}."
    ROOT_ONLY_WITH_QUALITY = "A root-only chord cannot carry modifiers or extensions."
    UNKNOWN_STYLE = "Unknown naming style: '{name}'."
    CATALOG_MISMATCH = (
        "Catalog entry '{key}' declares {declared} but its chord tones give {derived}."
    )
    CATALOG_DUPLICATE = (
        "Catalog entries '{first}' and '{second}' share the interval set {intervals}."
    )


class IssueMessages:
    """Standardized identification issue messages."""

    NO_INTERPRETATION = "No catalog pattern explains these notes under any root."
    AMBIGUOUS_WITHOUT_BASS_HINT = (
        "No bass hint supplied; results are reported in root position without slash notes."
    )
