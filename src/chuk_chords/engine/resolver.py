"""
Inversion/Slash Resolver - places a bass hint on a candidate.

Chord tones are taken in ascending degree order (root, third, fifth,
seventh, ninth ...) regardless of how the input was voiced. A bass hint on
the root is root position; on the k-th tone it is inversion k; anywhere
else it becomes the slash note.
"""

from __future__ import annotations

from chuk_chords.constants import SEMITONES_PER_OCTAVE
from chuk_chords.core.chord import ChordDescriptor
from chuk_chords.core.note import Note
from chuk_chords.engine.candidates import Candidate


def inversion_for(descriptor: ChordDescriptor, bass: Note) -> int | None:
    """Index of the chord tone the bass sounds, in degree order, or None."""
    root_value = descriptor.root.semitone_value
    for index, tone in enumerate(descriptor.tones()):
        if (root_value + tone.semitones) % SEMITONES_PER_OCTAVE == bass.semitone_value:
            return index
    return None


def resolve(candidate: Candidate, bass: Note | None = None) -> ChordDescriptor:
    """
    Resolve a candidate against an optional bass hint.

    Args:
        candidate: Accepted root hypothesis
        bass: Lowest sounding note, if known

    Returns:
        ChordDescriptor with inversion or slash set
    """
    descriptor = candidate.descriptor
    if bass is None:
        return descriptor

    if candidate.reserved_bass is not None:
        return descriptor.with_slash(candidate.reserved_bass)

    inversion = inversion_for(descriptor, bass)
    if inversion is None:
        return descriptor.with_slash(bass)
    return descriptor.with_inversion(inversion)
