"""
Interval primitives and the interval calculus.

An Interval carries both a semitone count and a diatonic step count, so it
can spell the note it lands on (a major third above C is E, a diminished
fourth above C is F♭). Pattern matching only ever looks at the semitone
distance mod 12; naming and transposition use both.
"""

from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING, ClassVar

from chuk_chords.constants import DIATONIC_STEPS_PER_OCTAVE, SEMITONES_PER_OCTAVE

if TYPE_CHECKING:
    from chuk_chords.core.note import Note

# Semitones of the major/perfect interval for each diatonic step (mod 7)
_MAJOR_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Unison, fourth and fifth are perfect-type; the rest are major/minor-type
_PERFECT_STEPS = frozenset({0, 3, 4})

# Default diatonic steps for a bare semitone count (tritone reads as a fourth)
_DEFAULT_STEPS: tuple[int, ...] = (0, 1, 1, 2, 2, 3, 3, 4, 5, 5, 6, 6)

_PERFECT_QUALITIES: dict[int, str] = {
    -2: "doubly diminished",
    -1: "diminished",
    0: "perfect",
    1: "augmented",
    2: "doubly augmented",
}
_MAJOR_QUALITIES: dict[int, str] = {
    -3: "doubly diminished",
    -2: "diminished",
    -1: "minor",
    0: "major",
    1: "augmented",
    2: "doubly augmented",
}
_QUALITY_ABBREVIATIONS: dict[str, str] = {
    "doubly diminished": "dd",
    "diminished": "d",
    "minor": "m",
    "perfect": "P",
    "major": "M",
    "augmented": "A",
    "doubly augmented": "AA",
}
_NUMBER_NAMES: dict[int, str] = {
    1: "unison",
    2: "second",
    3: "third",
    4: "fourth",
    5: "fifth",
    6: "sixth",
    7: "seventh",
    8: "octave",
    9: "ninth",
    10: "tenth",
    11: "eleventh",
    12: "twelfth",
    13: "thirteenth",
    14: "fourteenth",
    15: "fifteenth",
}

# Canonical names for every mod-12 distance. The tritone is deliberately
# ambiguous; whichever catalog pattern consumes it decides the spelling.
INTERVAL_NAMES_BY_DISTANCE: dict[int, tuple[str, ...]] = {
    0: ("perfect unison",),
    1: ("minor second",),
    2: ("major second",),
    3: ("minor third",),
    4: ("major third",),
    5: ("perfect fourth",),
    6: ("augmented fourth", "diminished fifth"),
    7: ("perfect fifth",),
    8: ("minor sixth",),
    9: ("major sixth",),
    10: ("minor seventh",),
    11: ("major seventh",),
}


@total_ordering
class Interval:
    """
    Distance between pitches in semitones and diatonic steps.

    Steps count letter names: a third is 2 steps, a ninth is 8. Two intervals
    with the same semitones but different steps (augmented fourth and
    diminished fifth) are different intervals.

    Immutable and hashable.
    """

    __slots__ = ("_semitones", "_steps")
    _semitones: int
    _steps: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    AUGMENTED_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    AUGMENTED_FOURTH: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    AUGMENTED_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    DIMINISHED_SEVENTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]
    MINOR_NINTH: ClassVar[Interval]
    MAJOR_NINTH: ClassVar[Interval]
    AUGMENTED_NINTH: ClassVar[Interval]
    DIMINISHED_ELEVENTH: ClassVar[Interval]
    PERFECT_ELEVENTH: ClassVar[Interval]
    AUGMENTED_ELEVENTH: ClassVar[Interval]
    MINOR_THIRTEENTH: ClassVar[Interval]
    MAJOR_THIRTEENTH: ClassVar[Interval]
    AUGMENTED_THIRTEENTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __init__(self, semitones: int, steps: int | None = None) -> None:
        """
        Create an interval.

        Args:
            semitones: Signed semitone count
            steps: Signed diatonic step count; derived from the semitones
                when omitted (the tritone defaults to an augmented fourth)
        """
        if steps is None:
            octaves, remainder = divmod(semitones, SEMITONES_PER_OCTAVE)
            steps = _DEFAULT_STEPS[remainder] + octaves * DIATONIC_STEPS_PER_OCTAVE
        object.__setattr__(self, "_semitones", semitones)
        object.__setattr__(self, "_steps", steps)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Interval is immutable")

    @classmethod
    def between(cls, lower: Note, upper: Note) -> Interval:
        """
        Get the interval from one note to another (signed).

        Args:
            lower: The starting note
            upper: The target note

        Returns:
            Interval whose semitones and steps reproduce the target spelling
        """
        return cls(upper.id - lower.id, upper.diatonic_index - lower.diatonic_index)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    @property
    def steps(self) -> int:
        """Number of diatonic (letter) steps in this interval."""
        return self._steps

    @property
    def number(self) -> int:
        """Interval number: 1 for a unison, 3 for a third, 9 for a ninth."""
        return abs(self._steps) + 1

    @property
    def is_descending(self) -> bool:
        return self._semitones < 0 or (self._semitones == 0 and self._steps < 0)

    @property
    def is_compound(self) -> bool:
        """True for intervals wider than an octave."""
        return abs(self._steps) > DIATONIC_STEPS_PER_OCTAVE

    @property
    def quality(self) -> str:
        """Interval quality: perfect, major, minor, augmented or diminished."""
        if self.is_descending:
            return (-self).quality
        octaves, step = divmod(self._steps, DIATONIC_STEPS_PER_OCTAVE)
        deviation = self._semitones - (_MAJOR_SEMITONES[step] + octaves * SEMITONES_PER_OCTAVE)
        table = _PERFECT_QUALITIES if step in _PERFECT_STEPS else _MAJOR_QUALITIES
        return table.get(deviation, f"{deviation:+d} altered")

    @property
    def name(self) -> str:
        """Full name, e.g. 'major third' or 'augmented eleventh'."""
        if self.is_descending:
            return f"descending {(-self).name}"
        number_name = _NUMBER_NAMES.get(self.number, f"{self.number}th")
        return f"{self.quality} {number_name}"

    @property
    def short_name(self) -> str:
        """Abbreviated name, e.g. 'M3', 'd5', 'A11'."""
        if self.is_descending:
            return f"-{(-self).short_name}"
        abbreviation = _QUALITY_ABBREVIATIONS.get(self.quality, "?")
        return f"{abbreviation}{self.number}"

    def simple(self) -> Interval:
        """
        Reduce a compound interval into a single octave.

        M9 -> M2, P11 -> P4. Octaves stay octaves.
        """
        if self.is_descending or not self.is_compound:
            return self
        octaves = (self._steps - 1) // DIATONIC_STEPS_PER_OCTAVE
        return Interval(
            self._semitones - octaves * SEMITONES_PER_OCTAVE,
            self._steps - octaves * DIATONIC_STEPS_PER_OCTAVE,
        )

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 (4) -> m6 (8)
        P5 (7) -> P4 (5)
        """
        simple = self.simple()
        return Interval(
            SEMITONES_PER_OCTAVE - (simple._semitones % SEMITONES_PER_OCTAVE),
            DIATONIC_STEPS_PER_OCTAVE - (simple._steps % DIATONIC_STEPS_PER_OCTAVE),
        )

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones, self._steps + other._steps)

    def __sub__(self, other: Interval) -> Interval:
        """Subtract an interval from another."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones - other._semitones, self._steps - other._steps)

    def __neg__(self) -> Interval:
        """Negate the interval (descending instead of ascending)."""
        return Interval(-self._semitones, -self._steps)

    def __mul__(self, n: int) -> Interval:
        """Multiply an interval (e.g., two octaves)."""
        if not isinstance(n, int):
            return NotImplemented
        return Interval(self._semitones * n, self._steps * n)

    def __rmul__(self, n: int) -> Interval:
        """Right multiply."""
        return self.__mul__(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._semitones == other._semitones and self._steps == other._steps

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return (self._semitones, self._steps) < (other._semitones, other._steps)

    def __hash__(self) -> int:
        return hash((self._semitones, self._steps))

    def __repr__(self) -> str:
        for name in _CONSTANT_NAMES:
            named = getattr(Interval, name, None)
            if isinstance(named, Interval) and named == self:
                return f"Interval.{name}"
        return f"Interval({self._semitones}, {self._steps})"

    def __str__(self) -> str:
        return self.short_name


def semitone_distance(lower: Note, upper: Note) -> int:
    """Signed semitone distance between two notes (for transposition)."""
    return upper.id - lower.id


def pitch_class_distance(root: Note, other: Note) -> int:
    """Unsigned distance mod 12 from a root (for pattern matching)."""
    return (other.id - root.id) % SEMITONES_PER_OCTAVE


def names_for_distance(distance: int) -> tuple[str, ...]:
    """
    Get the canonical interval name(s) for a semitone distance.

    The distance is reduced mod 12 first. The tritone returns two names.
    """
    return INTERVAL_NAMES_BY_DISTANCE[distance % SEMITONES_PER_OCTAVE]


# Initialize class constants after class is defined
Interval.UNISON = Interval(0, 0)
Interval.MINOR_SECOND = Interval(1, 1)
Interval.MAJOR_SECOND = Interval(2, 1)
Interval.AUGMENTED_SECOND = Interval(3, 1)
Interval.MINOR_THIRD = Interval(3, 2)
Interval.MAJOR_THIRD = Interval(4, 2)
Interval.PERFECT_FOURTH = Interval(5, 3)
Interval.AUGMENTED_FOURTH = Interval(6, 3)
Interval.DIMINISHED_FIFTH = Interval(6, 4)
Interval.PERFECT_FIFTH = Interval(7, 4)
Interval.AUGMENTED_FIFTH = Interval(8, 4)
Interval.MINOR_SIXTH = Interval(8, 5)
Interval.MAJOR_SIXTH = Interval(9, 5)
Interval.DIMINISHED_SEVENTH = Interval(9, 6)
Interval.MINOR_SEVENTH = Interval(10, 6)
Interval.MAJOR_SEVENTH = Interval(11, 6)
Interval.OCTAVE = Interval(12, 7)
Interval.MINOR_NINTH = Interval(13, 8)
Interval.MAJOR_NINTH = Interval(14, 8)
Interval.AUGMENTED_NINTH = Interval(15, 8)
Interval.DIMINISHED_ELEVENTH = Interval(16, 10)
Interval.PERFECT_ELEVENTH = Interval(17, 10)
Interval.AUGMENTED_ELEVENTH = Interval(18, 10)
Interval.MINOR_THIRTEENTH = Interval(20, 12)
Interval.MAJOR_THIRTEENTH = Interval(21, 12)
Interval.AUGMENTED_THIRTEENTH = Interval(22, 12)
Interval.TRITONE = Interval.AUGMENTED_FOURTH

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.TT = Interval.TRITONE
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE

_CONSTANT_NAMES: tuple[str, ...] = (
    "UNISON",
    "MINOR_SECOND",
    "MAJOR_SECOND",
    "AUGMENTED_SECOND",
    "MINOR_THIRD",
    "MAJOR_THIRD",
    "PERFECT_FOURTH",
    "AUGMENTED_FOURTH",
    "DIMINISHED_FIFTH",
    "PERFECT_FIFTH",
    "AUGMENTED_FIFTH",
    "MINOR_SIXTH",
    "MAJOR_SIXTH",
    "DIMINISHED_SEVENTH",
    "MINOR_SEVENTH",
    "MAJOR_SEVENTH",
    "OCTAVE",
    "MINOR_NINTH",
    "MAJOR_NINTH",
    "AUGMENTED_NINTH",
    "DIMINISHED_ELEVENTH",
    "PERFECT_ELEVENTH",
    "AUGMENTED_ELEVENTH",
    "MINOR_THIRTEENTH",
    "MAJOR_THIRTEENTH",
    "AUGMENTED_THIRTEENTH",
)
