"""
Chord Catalog - the static table of interval patterns.

Each entry maps a relative interval set (mod-12 distances from a root, root
excluded) to chord-quality vocabulary. Matching is subset-tolerant: an entry
whose set is contained in the input matches when every left-over interval is
an independently valid extension tone that can be folded in.

The table is compiled-in data. It is checked against the chord-tone algebra
at import time; a mismatch is a defect in the data, not an input problem.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chuk_chords.constants import ErrorMessages
from chuk_chords.core.chord import (
    Extension,
    Modifier,
    canonical_extensions,
    relative_pitch_classes,
)
from chuk_chords.exceptions import CatalogIntegrityError

logger = logging.getLogger(__name__)

# Chord scales (semitone offsets from the root)
IONIAN = (0, 2, 4, 5, 7, 9, 11)
DORIAN = (0, 2, 3, 5, 7, 9, 10)
AEOLIAN = (0, 2, 3, 5, 7, 8, 10)
MIXOLYDIAN = (0, 2, 4, 5, 7, 9, 10)
LYDIAN = (0, 2, 4, 6, 7, 9, 11)
LOCRIAN = (0, 1, 3, 5, 6, 8, 10)
MELODIC_MINOR = (0, 2, 3, 5, 7, 9, 11)
LYDIAN_DOMINANT = (0, 2, 4, 6, 7, 9, 10)
LYDIAN_AUGMENTED = (0, 2, 4, 6, 8, 9, 11)
WHOLE_TONE = (0, 2, 4, 6, 8, 10)
WHOLE_HALF_DIMINISHED = (0, 2, 3, 5, 6, 8, 9, 11)
HALF_WHOLE_DIMINISHED = (0, 1, 3, 4, 6, 7, 9, 10)
ALTERED = (0, 1, 3, 4, 6, 8, 10)


@dataclass(frozen=True)
class CatalogEntry:
    """
    One catalog pattern.

    Attributes:
        key: Stable identifier, e.g. 'dominant7'
        intervals: Declared mod-12 distances from the root (root excluded)
        modifiers: Quality modifiers the pattern implies
        extensions: Extensions the pattern implies
        description: Human-readable description
        scale: Chord scale as semitone offsets from the root
    """

    key: str
    intervals: frozenset[int]
    modifiers: tuple[Modifier, ...] = ()
    extensions: tuple[Extension, ...] = ()
    description: str = ""
    scale: tuple[int, ...] = ()

    @property
    def root_only(self) -> bool:
        """The bare-root entry: matches only a set with no other pitch class."""
        return not self.intervals

    @property
    def complexity(self) -> int:
        return len(self.modifiers) + len(self.extensions)

    @property
    def altered_count(self) -> int:
        return sum(m.is_altered for m in self.modifiers) + sum(
            e.is_altered for e in self.extensions
        )

    @property
    def has_seventh(self) -> bool:
        return Modifier.MAJOR7 in self.modifiers or any(
            m.dominant_degree for m in self.modifiers
        )


@dataclass(frozen=True)
class CatalogMatch:
    """
    A catalog entry accepted for one root hypothesis.

    `folded` are the extensions absorbed from left-over intervals.
    """

    entry: CatalogEntry
    index: int
    folded: tuple[Extension, ...] = ()

    @property
    def modifiers(self) -> tuple[Modifier, ...]:
        return self.entry.modifiers

    @property
    def extensions(self) -> tuple[Extension, ...]:
        return canonical_extensions(self.entry.extensions + self.folded)

    @property
    def complexity(self) -> int:
        return self.entry.complexity + len(self.folded)

    @property
    def altered_count(self) -> int:
        return self.entry.altered_count + sum(e.is_altered for e in self.folded)

    @property
    def sort_key(self) -> tuple[int, int, int, int]:
        """Fewer items, exact over folded, natural over altered, declaration order."""
        return (self.complexity, len(self.folded), self.altered_count, self.index)


# Extension tones that may be folded onto a matched entry:
# interval -> (extension without a seventh, extension with a seventh)
_FOLDABLE: dict[int, tuple[Extension | None, Extension | None]] = {
    2: (Extension.ADD9, Extension.ADD9),
    5: (Extension.ADD11, Extension.ADD11),
    9: (Extension.ADD6, Extension.ADD13),
    8: (None, Extension.FLAT13),
}


def _entry(
    key: str,
    intervals: set[int],
    modifiers: tuple[Modifier, ...] = (),
    extensions: tuple[Extension, ...] = (),
    description: str = "",
    scale: tuple[int, ...] = (),
) -> CatalogEntry:
    return CatalogEntry(key, frozenset(intervals), modifiers, extensions, description, scale)


M = Modifier
E = Extension

# Declaration order is the final tie-break. Keep simpler patterns first.
CATALOG_ENTRIES: tuple[CatalogEntry, ...] = (
    _entry("root", set(), description="A single pitch class; no quality implied"),
    _entry("major", {4, 7}, description="Major triad", scale=IONIAN),
    _entry("minor", {3, 7}, (M.MINOR,), description="Minor triad", scale=AEOLIAN),
    _entry("diminished", {3, 6}, (M.DIMINISHED,), description="Diminished triad", scale=LOCRIAN),
    _entry(
        "augmented", {4, 8}, (M.AUGMENTED5,), description="Augmented triad", scale=WHOLE_TONE
    ),
    _entry("flat5", {4, 6}, (M.FLAT5,), description="Major triad with a flat fifth", scale=LYDIAN),
    _entry("sus2", {2, 7}, (), (E.SUS2,), "Suspended second", IONIAN),
    _entry("sus4", {5, 7}, (), (E.SUS4,), "Suspended fourth", MIXOLYDIAN),
    _entry("dominant7", {4, 7, 10}, (M.DOMINANT7,), (), "Dominant seventh", MIXOLYDIAN),
    _entry("major7", {4, 7, 11}, (M.MAJOR7,), (), "Major seventh", IONIAN),
    _entry("minor7", {3, 7, 10}, (M.MINOR, M.DOMINANT7), (), "Minor seventh", DORIAN),
    _entry(
        "minor_major7", {3, 7, 11}, (M.MINOR, M.MAJOR7), (), "Minor-major seventh", MELODIC_MINOR
    ),
    _entry(
        "half_diminished7",
        {3, 6, 10},
        (M.MINOR, M.FLAT5, M.DOMINANT7),
        (),
        "Half-diminished seventh",
        LOCRIAN,
    ),
    _entry(
        "diminished7",
        {3, 6, 9},
        (M.DIMINISHED, M.DOMINANT7),
        (),
        "Diminished seventh",
        WHOLE_HALF_DIMINISHED,
    ),
    _entry(
        "diminished_major7",
        {3, 6, 11},
        (M.DIMINISHED, M.MAJOR7),
        (),
        "Diminished triad with a major seventh",
        WHOLE_HALF_DIMINISHED,
    ),
    _entry(
        "augmented7", {4, 8, 10}, (M.AUGMENTED5, M.DOMINANT7), (), "Augmented seventh", WHOLE_TONE
    ),
    _entry(
        "augmented_major7",
        {4, 8, 11},
        (M.AUGMENTED5, M.MAJOR7),
        (),
        "Augmented major seventh",
        LYDIAN_AUGMENTED,
    ),
    _entry(
        "dominant7_flat5",
        {4, 6, 10},
        (M.FLAT5, M.DOMINANT7),
        (),
        "Dominant seventh with a flat fifth",
        WHOLE_TONE,
    ),
    _entry(
        "dominant7_sus4",
        {5, 7, 10},
        (M.DOMINANT7,),
        (E.SUS4,),
        "Dominant seventh, suspended fourth",
        MIXOLYDIAN,
    ),
    _entry(
        "dominant7_sus2",
        {2, 7, 10},
        (M.DOMINANT7,),
        (E.SUS2,),
        "Dominant seventh, suspended second",
        MIXOLYDIAN,
    ),
    _entry("dominant9", {2, 4, 7, 10}, (M.DOMINANT9,), (), "Dominant ninth", MIXOLYDIAN),
    _entry("major9", {2, 4, 7, 11}, (M.MAJOR7, M.DOMINANT9), (), "Major ninth", IONIAN),
    _entry("minor9", {2, 3, 7, 10}, (M.MINOR, M.DOMINANT9), (), "Minor ninth", DORIAN),
    _entry("dominant11", {2, 4, 5, 7, 10}, (M.DOMINANT11,), (), "Dominant eleventh", MIXOLYDIAN),
    _entry("minor11", {2, 3, 5, 7, 10}, (M.MINOR, M.DOMINANT11), (), "Minor eleventh", DORIAN),
    _entry(
        "dominant13", {2, 4, 5, 7, 9, 10}, (M.DOMINANT13,), (), "Dominant thirteenth", MIXOLYDIAN
    ),
    _entry(
        "minor13", {2, 3, 5, 7, 9, 10}, (M.MINOR, M.DOMINANT13), (), "Minor thirteenth", DORIAN
    ),
    _entry(
        "dominant7_flat9",
        {1, 4, 7, 10},
        (M.DOMINANT7, M.FLAT9),
        (),
        "Dominant seventh, flat ninth",
        HALF_WHOLE_DIMINISHED,
    ),
    _entry(
        "dominant7_sharp9",
        {3, 4, 7, 10},
        (M.DOMINANT7, M.SHARP9),
        (),
        "Dominant seventh, sharp ninth",
        ALTERED,
    ),
    _entry(
        "dominant7_sharp11",
        {4, 6, 7, 10},
        (M.DOMINANT7, M.SHARP11),
        (),
        "Dominant seventh, sharp eleventh",
        LYDIAN_DOMINANT,
    ),
    _entry(
        "major7_sharp11",
        {4, 6, 7, 11},
        (M.MAJOR7, M.SHARP11),
        (),
        "Major seventh, sharp eleventh",
        LYDIAN,
    ),
    _entry(
        "dominant9_sharp11",
        {2, 4, 6, 7, 10},
        (M.DOMINANT9, M.SHARP11),
        (),
        "Dominant ninth, sharp eleventh",
        LYDIAN_DOMINANT,
    ),
)


class ChordCatalog:
    """
    Read-only lookup and matching over catalog entries.

    The default instance, CATALOG, is shared by every caller; nothing in it
    changes after import.
    """

    def __init__(self, entries: tuple[CatalogEntry, ...] = CATALOG_ENTRIES):
        """
        Initialize the catalog.

        Args:
            entries: Catalog entries in declaration order

        Raises:
            CatalogIntegrityError: If an entry disagrees with its chord tones
        """
        self._entries = entries
        self._by_key = {entry.key: entry for entry in entries}
        self._validate()

    @property
    def entries(self) -> tuple[CatalogEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def get_entry(self, key: str) -> CatalogEntry | None:
        """Look up an entry by key."""
        return self._by_key.get(key)

    def index_of(self, entry: CatalogEntry) -> int:
        return self._entries.index(entry)

    def find(
        self,
        modifiers: tuple[Modifier, ...],
        extensions: tuple[Extension, ...] = (),
    ) -> CatalogEntry | None:
        """
        Find the entry a modifier/extension set was built from.

        The entry's modifiers must be identical; its extensions must be a
        subset (the rest count as folded). The richest such entry wins.
        """
        best: CatalogEntry | None = None
        for entry in self._entries:
            if entry.root_only or set(entry.modifiers) != set(modifiers):
                continue
            if not set(entry.extensions) <= set(extensions):
                continue
            if best is None or len(entry.extensions) > len(best.extensions):
                best = entry
        return best

    def match(self, relative: frozenset[int], fold: bool = True) -> CatalogMatch | None:
        """
        Match a relative interval set against every entry.

        Args:
            relative: Mod-12 distances from the root hypothesis (root excluded)
            fold: Allow left-over intervals to fold into extensions

        Returns:
            The preferred match, or None if no entry explains every interval
        """
        best: CatalogMatch | None = None
        for index, entry in enumerate(self._entries):
            if entry.root_only:
                if relative:
                    continue
                folded: tuple[Extension, ...] | None = ()
            elif not entry.intervals <= relative:
                continue
            else:
                extra = relative - entry.intervals
                if extra and not fold:
                    continue
                folded = self._fold(entry, extra)
            if folded is None:
                continue
            candidate = CatalogMatch(entry, index, folded)
            if best is None or candidate.sort_key < best.sort_key:
                best = candidate
        return best

    def _fold(self, entry: CatalogEntry, extra: frozenset[int]) -> tuple[Extension, ...] | None:
        """Fold left-over intervals into extensions, or None if any is not foldable."""
        folded: list[Extension] = []
        for interval in sorted(extra):
            options = _FOLDABLE.get(interval)
            if options is None:
                return None
            extension = options[1] if entry.has_seventh else options[0]
            if extension is None or extension in entry.extensions:
                return None
            folded.append(extension)
        return canonical_extensions(folded)

    def _validate(self) -> None:
        seen: dict[frozenset[int], str] = {}
        for entry in self._entries:
            if not entry.root_only:
                derived = relative_pitch_classes(entry.modifiers, entry.extensions)
                if derived != entry.intervals:
                    raise CatalogIntegrityError(
                        ErrorMessages.CATALOG_MISMATCH.format(
                            key=entry.key,
                            declared=sorted(entry.intervals),
                            derived=sorted(derived),
                        )
                    )
            if entry.intervals in seen:
                raise CatalogIntegrityError(
                    ErrorMessages.CATALOG_DUPLICATE.format(
                        first=seen[entry.intervals],
                        second=entry.key,
                        intervals=sorted(entry.intervals),
                    )
                )
            seen[entry.intervals] = entry.key
        logger.debug("Chord catalog validated: %d entries", len(self._entries))


CATALOG = ChordCatalog()
