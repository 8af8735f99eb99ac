"""
Candidate Generator - root hypotheses matched against the catalog.

For every distinct pitch class in a NoteSet, the other pitch classes are
measured against it (mod 12) and the resulting relative set is matched
against the catalog. A root is accepted only if every note is accounted
for: as the root, as a matched chord tone, or as a bass note reserved for
the resolver to place as a slash.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chuk_chords.catalog import CATALOG, CatalogMatch, ChordCatalog
from chuk_chords.constants import SEMITONES_PER_OCTAVE
from chuk_chords.core.chord import ChordDescriptor
from chuk_chords.core.note import Note, NoteSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    """
    An accepted (root, pattern) hypothesis.

    Attributes:
        root: Root note, spelled as it appears in the input
        match: Catalog match explaining the non-root notes
        reserved_bass: Bass note left out of the match, to become a slash
    """

    root: Note
    match: CatalogMatch
    reserved_bass: Note | None = None

    @property
    def descriptor(self) -> ChordDescriptor:
        """Root-position descriptor for this hypothesis."""
        return ChordDescriptor(
            root=self.root,
            modifiers=self.match.modifiers,
            extensions=self.match.extensions,
            root_only=self.match.entry.root_only,
        )


def relative_intervals(pitch_class_mask: int, root_value: int) -> frozenset[int]:
    """
    Mod-12 distances of every pitch class in a mask from a root, root excluded.

    Args:
        pitch_class_mask: 12-bit octave-normalized mask
        root_value: Semitone value of the root (0-11)

    Returns:
        Relative interval set
    """
    return frozenset(
        (pc - root_value) % SEMITONES_PER_OCTAVE
        for pc in range(SEMITONES_PER_OCTAVE)
        if pitch_class_mask >> pc & 1 and pc != root_value
    )


def root_hypotheses(note_set: NoteSet) -> list[Note]:
    """The lowest note of each distinct pitch class, in ascending order."""
    roots: dict[int, Note] = {}
    for note in note_set.notes():
        roots.setdefault(note.semitone_value, note)
    return list(roots.values())


def generate(
    note_set: NoteSet,
    bass: Note | None = None,
    fold: bool = True,
    catalog: ChordCatalog = CATALOG,
) -> list[Candidate]:
    """
    Enumerate accepted root hypotheses for a note set.

    Args:
        note_set: Notes to explain
        bass: Optional bass hint; may be reserved as a slash note
        fold: Allow left-over intervals to fold into extensions
        catalog: Catalog to match against

    Returns:
        At most one candidate per root pitch class; empty when nothing matches
    """
    if not note_set:
        return []

    mask = note_set.pitch_class_mask
    candidates: list[Candidate] = []

    for root in root_hypotheses(note_set):
        relative = relative_intervals(mask, root.semitone_value)
        match = catalog.match(relative, fold=fold)
        reserved: Note | None = None

        if match is None and bass is not None and bass.semitone_value != root.semitone_value:
            bass_interval = root.pitch_class.interval_to(bass.pitch_class).semitones
            remainder = relative - {bass_interval}
            if remainder:
                match = catalog.match(remainder, fold=fold)
                reserved = bass

        if match is None:
            logger.debug("Root %s rejected for %s", root.display_name, sorted(relative))
            continue

        logger.debug(
            "Root %s accepted as '%s' (folded: %s)",
            root.display_name,
            match.entry.key,
            [e.value for e in match.folded],
        )
        candidates.append(Candidate(root, match, reserved))

    return candidates
