"""
Typed failures raised by the chord engine.

Runtime input problems derive from ValueError so callers can catch them
like any other bad argument. A CatalogIntegrityError means the static data
itself is broken.
"""


class ChordEngineError(ValueError):
    """Base class for recoverable chord engine failures."""


class InvalidOctaveRange(ChordEngineError):
    """A note or interval addition would leave the supported octave span."""

    def __init__(self, message: str, octave: int | None = None, note_id: int | None = None):
        super().__init__(message)
        self.octave = octave
        self.note_id = note_id


class InvalidPitchSpelling(ChordEngineError):
    """A pitch spelling is unknown or needs more than three accidentals."""


class CatalogIntegrityError(RuntimeError):
    """The static chord catalog contradicts the chord-tone algebra."""
