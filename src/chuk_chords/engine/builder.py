"""
Chord Builder - descriptor to an ordered list of notes.

The inverse of identification:
1. Start at the root's octave and add each chord tone's interval
   (upper tones folded into the root octave for crunchy voicing)
2. For inversion k, raise every other tone by octaves until the k-th tone
   (in degree order) is lowest
3. Sort ascending by pitch
4. Place a slash note in the octave just below the lowest chord tone

Voicing only moves tones between octaves; the pitch classes never change.
A voicing that would run past octave 9 is moved down by octaves, and a
chord with no room below it for its slash note is lifted an octave.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from chuk_chords.catalog import CATALOG
from chuk_chords.constants import DIATONIC_STEPS_PER_OCTAVE, MIN_OCTAVE, SEMITONES_PER_OCTAVE
from chuk_chords.core.chord import ChordDescriptor
from chuk_chords.core.interval import Interval
from chuk_chords.core.note import Note, NoteSet
from chuk_chords.exceptions import InvalidOctaveRange

logger = logging.getLogger(__name__)


def _raise_above(note: Note, floor: Note) -> Note:
    while note.id <= floor.id:
        note = note.transpose_octaves(1)
    return note


def _place_below(note: Note, ceiling: Note) -> Note:
    while note.id >= ceiling.id:
        note = note.transpose_octaves(-1)
    while note.id + SEMITONES_PER_OCTAVE < ceiling.id:
        note = note.transpose_octaves(1)
    return note


def _voice(descriptor: ChordDescriptor, root: Note) -> list[Note]:
    tones = [root.add(tone.voiced(descriptor.crunchy)) for tone in descriptor.tones()]
    if descriptor.inversion:
        bass = tones[descriptor.inversion]
        tones = [
            note if index == descriptor.inversion else _raise_above(note, bass)
            for index, note in enumerate(tones)
        ]
    return tones


def _fit_in_range(root: Note, voice: Callable[[Note], list[Note]]) -> list[Note]:
    while True:
        try:
            return voice(root)
        except InvalidOctaveRange:
            if root.octave == MIN_OCTAVE:
                raise
            logger.debug("No room above %s; voicing an octave lower", root.name)
            root = root.transpose_octaves(-1)


def _chord_tones(descriptor: ChordDescriptor) -> list[Note]:
    return _fit_in_range(descriptor.root, lambda root: _voice(descriptor, root))


def build(descriptor: ChordDescriptor) -> list[Note]:
    """
    Build the notes of a chord, lowest first.

    Args:
        descriptor: Chord to build; the root's octave is the starting octave

    Returns:
        Notes in ascending pitch order, each id at most once

    Raises:
        InvalidOctaveRange: If the chord cannot fit in the supported octave span
    """
    notes: dict[int, Note] = {}
    for note in sorted(_chord_tones(descriptor)):
        notes.setdefault(note.id, note)
    ordered = list(notes.values())

    if descriptor.slash is not None:
        try:
            slash = _place_below(descriptor.slash, ordered[0])
        except InvalidOctaveRange:
            ordered = [note.transpose_octaves(1) for note in ordered]
            slash = _place_below(descriptor.slash, ordered[0])
        ordered.insert(0, slash)

    logger.debug(
        "Built %s: %s",
        descriptor.root.display_name,
        " ".join(note.name for note in ordered),
    )
    return ordered


def build_note_set(descriptor: ChordDescriptor) -> NoteSet:
    """Build a chord and collect its notes into a NoteSet."""
    return NoteSet(build(descriptor))


def build_scale(descriptor: ChordDescriptor) -> list[Note]:
    """
    Spell the chord scale of a descriptor upward from its root.

    Seven-note scales use one letter per degree; the symmetric six- and
    eight-note scales use default interval spellings.

    Args:
        descriptor: Chord whose catalog entry names the scale

    Returns:
        Scale notes from the root, ascending; empty for a bare root
    """
    if descriptor.root_only:
        return []
    entry = CATALOG.find(descriptor.modifiers, descriptor.extensions)
    if entry is None or not entry.scale:
        return []
    diatonic = len(entry.scale) == DIATONIC_STEPS_PER_OCTAVE
    intervals = [
        Interval(semitones, step if diatonic else None)
        for step, semitones in enumerate(entry.scale)
    ]
    return _fit_in_range(descriptor.root, lambda root: [root.add(i) for i in intervals])
