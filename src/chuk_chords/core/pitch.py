"""
Pitch primitives - PitchClass and NamedPitch.

PitchClass represents the 12 chromatic pitches (octave-independent).
NamedPitch is a spelling of a pitch class: a letter plus up to three
sharps or flats. C♯ and D♭ are different NamedPitches with the same
PitchClass.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from chuk_chords.constants import MAX_ACCIDENTALS, SEMITONES_PER_OCTAVE, ErrorMessages
from chuk_chords.exceptions import InvalidPitchSpelling

from .interval import Interval

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

LETTERS = "CDEFGAB"
LETTERS_BY_FIFTHS = "FCGDAEB"
LETTER_SEMITONES: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

ACCIDENTAL_GLYPHS: dict[int, str] = {
    -3: "♭𝄫",
    -2: "𝄫",
    -1: "♭",
    0: "",
    1: "♯",
    2: "𝄪",
    3: "♯𝄪",
}
ASCII_ACCIDENTALS: dict[int, str] = {
    -3: "bbb",
    -2: "bb",
    -1: "b",
    0: "",
    1: "#",
    2: "##",
    3: "###",
}


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is a display concern, handled by NamedPitch.
    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def interval_to(self, other: PitchClass) -> Interval:
        """Get the interval from this pitch class to another (ascending)."""
        semitones = (other.value - self.value) % SEMITONES_PER_OCTAVE
        return Interval(semitones)

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * SEMITONES_PER_OCTAVE

    def spellings(self, max_accidentals: int = MAX_ACCIDENTALS) -> list[NamedPitch]:
        """
        Get every spelling of this pitch class.

        Args:
            max_accidentals: Largest accidental count to include

        Returns:
            NamedPitches ordered by fewest accidentals, then letter
        """
        found = [
            pitch
            for pitch in NAMED_PITCHES
            if pitch.pitch_class == self and abs(pitch.accidental) <= max_accidentals
        ]
        return sorted(found, key=lambda p: (abs(p.accidental), LETTERS.index(p.letter)))

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % SEMITONES_PER_OCTAVE)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db', 'E♭'."""
        name = name.strip()

        # Try sharp names first
        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        # Try flat names
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Try full spellings (glyphs, doubles)
        pitch = _SPELLINGS.get(name)
        if pitch is not None:
            return pitch.pitch_class

        # Try enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")


@dataclass(frozen=True)
class NamedPitch:
    """
    A spelled pitch class: letter plus accidental count (-3..+3).

    The 49 spellings form one table, NAMED_PITCHES, laid out along the line
    of fifths (F♭𝄫 C♭𝄫 ... B♯𝄪). `index` is the position in that table.

    Immutable and hashable. Equality is by spelling, so C♯ != D♭ here;
    compare `pitch_class` for enharmonic equality.
    """

    letter: str
    accidental: int = 0

    def __post_init__(self) -> None:
        if self.letter not in LETTER_SEMITONES:
            raise InvalidPitchSpelling(ErrorMessages.UNKNOWN_LETTER.format(letter=self.letter))
        if abs(self.accidental) > MAX_ACCIDENTALS:
            raise InvalidPitchSpelling(
                ErrorMessages.TOO_MANY_ACCIDENTALS.format(
                    accidental=self.accidental, limit=MAX_ACCIDENTALS
                )
            )

    @property
    def index(self) -> int:
        """Position on the line of fifths (0 = F♭𝄫, 48 = B♯𝄪)."""
        return LETTERS_BY_FIFTHS.index(self.letter) + 7 * (self.accidental + MAX_ACCIDENTALS)

    @property
    def letter_index(self) -> int:
        """Diatonic position of the letter (C=0 .. B=6)."""
        return LETTERS.index(self.letter)

    @property
    def semitone_value(self) -> int:
        """Semitone value 0-11: (letter base + accidental) mod 12."""
        return (LETTER_SEMITONES[self.letter] + self.accidental) % SEMITONES_PER_OCTAVE

    @property
    def pitch_class(self) -> PitchClass:
        return PitchClass(self.semitone_value)

    @property
    def is_natural(self) -> bool:
        return self.accidental == 0

    @property
    def display_name(self) -> str:
        """Spelling with accidental glyphs, e.g. 'F♯' or 'B𝄫'."""
        return f"{self.letter}{ACCIDENTAL_GLYPHS[self.accidental]}"

    @property
    def ascii_name(self) -> str:
        """Spelling with ASCII accidentals, e.g. 'F#' or 'Bbb'."""
        return f"{self.letter}{ASCII_ACCIDENTALS[self.accidental]}"

    def transpose(self, interval: Interval) -> NamedPitch:
        """
        Spell the pitch an interval above (octave-free).

        The letter moves by the interval's diatonic steps; the accidental
        makes up the semitone difference.

        Raises:
            InvalidPitchSpelling: If more than three accidentals are needed
        """
        letter = LETTERS[(self.letter_index + interval.steps) % len(LETTERS)]
        target = (self.semitone_value + interval.semitones) % SEMITONES_PER_OCTAVE
        accidental = (target - LETTER_SEMITONES[letter]) % SEMITONES_PER_OCTAVE
        if accidental > SEMITONES_PER_OCTAVE // 2:
            accidental -= SEMITONES_PER_OCTAVE
        return NamedPitch(letter, accidental)

    def enharmonics(self, max_accidentals: int = MAX_ACCIDENTALS) -> list[NamedPitch]:
        """Other spellings of the same pitch class."""
        return [p for p in self.pitch_class.spellings(max_accidentals) if p != self]

    @classmethod
    def from_index(cls, index: int) -> NamedPitch:
        """Look up a spelling by its line-of-fifths index."""
        if not 0 <= index < len(NAMED_PITCHES):
            raise InvalidPitchSpelling(f"Named pitch index {index} out of range.")
        return NAMED_PITCHES[index]

    @classmethod
    def parse(cls, name: str) -> NamedPitch:
        """
        Parse a spelling like 'C', 'F#', 'Bb', 'E♭', 'G𝄪', 'Dx'.

        Raises:
            InvalidPitchSpelling: If the spelling is unknown
        """
        pitch = _SPELLINGS.get(name.strip())
        if pitch is None:
            raise InvalidPitchSpelling(ErrorMessages.UNKNOWN_PITCH.format(name=name))
        return pitch

    @classmethod
    def default_for(cls, pitch_class: int, prefer_flats: bool = False) -> NamedPitch:
        """Default spelling for a pitch class: natural, else sharp (or flat)."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return _SPELLINGS[names[pitch_class % SEMITONES_PER_OCTAVE]]

    def __str__(self) -> str:
        return self.display_name

    def __repr__(self) -> str:
        return f"NamedPitch('{self.display_name}')"


NAMED_PITCHES: tuple[NamedPitch, ...] = tuple(
    NamedPitch(LETTERS_BY_FIFTHS[i % 7], i // 7 - MAX_ACCIDENTALS) for i in range(49)
)


def _build_spellings() -> dict[str, NamedPitch]:
    table: dict[str, NamedPitch] = {}
    for pitch in NAMED_PITCHES:
        table[pitch.display_name] = pitch
        table[pitch.ascii_name] = pitch
    for letter in LETTERS:
        table[f"{letter}x"] = NamedPitch(letter, 2)
        table[f"{letter}♯♯"] = NamedPitch(letter, 2)
        table[f"{letter}♭♭"] = NamedPitch(letter, -2)
    return table


_SPELLINGS: dict[str, NamedPitch] = _build_spellings()
