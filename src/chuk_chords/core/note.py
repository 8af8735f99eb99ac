"""
Note primitives - Note and NoteSet.

A Note is a NamedPitch at a written octave. Its id (0-127) is the physical
pitch: enharmonic spellings of the same sound share an id, so B♯3 == C4.
NoteSet is the engine's working representation: a fixed-width bit-set over
those ids.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from functools import total_ordering

from chuk_chords.constants import (
    DEFAULT_OCTAVE,
    DIATONIC_STEPS_PER_OCTAVE,
    MAX_ACCIDENTALS,
    MAX_NOTE_ID,
    MAX_OCTAVE,
    MAX_SPELLED_ID,
    MIDI_OFFSET,
    MIN_NOTE_ID,
    MIN_OCTAVE,
    NOTE_ID_WIDTH,
    REFERENCE_FREQUENCY,
    REFERENCE_NOTE_ID,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from chuk_chords.exceptions import InvalidOctaveRange, InvalidPitchSpelling

from .interval import Interval
from .pitch import LETTER_SEMITONES, LETTERS, NamedPitch, PitchClass

_NOTE_PATTERN = re.compile(r"^\s*([A-Ga-g])([^\d\-]*)(-?\d+)?\s*$")

# Harmonics 2-8 of a fundamental, rounded to the nearest semitone
_HARMONIC_OFFSETS: tuple[int, ...] = (12, 19, 24, 28, 31, 34, 36)

_PITCH_CLASS_MASK = (1 << SEMITONES_PER_OCTAVE) - 1
_FULL_MASK = (1 << NOTE_ID_WIDTH) - 1


def _check_octave(octave: int) -> None:
    if not MIN_OCTAVE <= octave <= MAX_OCTAVE:
        raise InvalidOctaveRange(
            ErrorMessages.OCTAVE_OUT_OF_RANGE.format(
                octave=octave, low=MIN_OCTAVE, high=MAX_OCTAVE
            ),
            octave=octave,
        )


def _check_note_id(note_id: int) -> None:
    if not MIN_NOTE_ID <= note_id <= MAX_NOTE_ID:
        raise InvalidOctaveRange(
            ErrorMessages.NOTE_ID_OUT_OF_RANGE.format(
                note_id=note_id, low=MIN_NOTE_ID, high=MAX_NOTE_ID
            ),
            note_id=note_id,
        )


def _check_spelled_id(note_id: int) -> None:
    if note_id > MAX_SPELLED_ID:
        raise InvalidOctaveRange(
            ErrorMessages.UNSPELLED_NOTE_ID.format(
                note_id=note_id, high=MAX_OCTAVE, limit=MAX_SPELLED_ID
            ),
            note_id=note_id,
        )


@total_ordering
class Note:
    """
    A spelled pitch at a written octave.

    Equality, hashing and ordering use the id only, so two spellings of the
    same physical pitch are equal for set membership while keeping their
    own display text.

    Immutable and hashable.
    """

    __slots__ = ("_pitch", "_octave", "_id")
    _pitch: NamedPitch
    _octave: int
    _id: int

    def __init__(self, pitch: NamedPitch | str, octave: int = DEFAULT_OCTAVE) -> None:
        """
        Create a note.

        Args:
            pitch: Spelling, as a NamedPitch or a string like 'F#'
            octave: Written octave (0-9)

        Raises:
            InvalidOctaveRange: If the octave or resulting id is out of range
        """
        if isinstance(pitch, str):
            pitch = NamedPitch.parse(pitch)
        _check_octave(octave)
        note_id = octave * SEMITONES_PER_OCTAVE + LETTER_SEMITONES[pitch.letter] + pitch.accidental
        _check_note_id(note_id)
        object.__setattr__(self, "_pitch", pitch)
        object.__setattr__(self, "_octave", octave)
        object.__setattr__(self, "_id", note_id)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Note is immutable")

    # Construction helpers

    @classmethod
    def parse(cls, text: str, default_octave: int = DEFAULT_OCTAVE) -> Note:
        """
        Parse a single note like 'C4', 'F#3' or 'E♭' (no chord symbols).

        Args:
            text: Note text; the octave is optional
            default_octave: Octave used when the text has none

        Returns:
            The parsed Note
        """
        match = _NOTE_PATTERN.match(text)
        if not match:
            raise InvalidPitchSpelling(ErrorMessages.INVALID_NOTE.format(text=text))
        letter, accidental, octave = match.groups()
        pitch = NamedPitch.parse(f"{letter.upper()}{accidental}")
        return cls(pitch, int(octave) if octave is not None else default_octave)

    @classmethod
    def from_id(cls, note_id: int, prefer_flats: bool = False) -> Note:
        """
        Spell a note id: naturals as naturals, black keys as sharps (or flats).

        Args:
            note_id: Note identity (0-127)
            prefer_flats: Spell black keys with flats

        Returns:
            Note with that id

        Raises:
            InvalidOctaveRange: If the id is outside 0-127 or above B9
        """
        _check_note_id(note_id)
        _check_spelled_id(note_id)
        octave, semitone = divmod(note_id, SEMITONES_PER_OCTAVE)
        return cls(NamedPitch.default_for(semitone, prefer_flats), octave)

    @classmethod
    def from_midi(cls, midi_number: int, prefer_flats: bool = False) -> Note:
        """Create a note from a MIDI note number (60 = C4)."""
        return cls.from_id(midi_number - MIDI_OFFSET, prefer_flats)

    # Identity

    @property
    def pitch(self) -> NamedPitch:
        return self._pitch

    @property
    def octave(self) -> int:
        return self._octave

    @property
    def id(self) -> int:
        """Unique physical-pitch identity (0-127), usable as a bit position."""
        return self._id

    @property
    def letter(self) -> str:
        return self._pitch.letter

    @property
    def accidental(self) -> int:
        return self._pitch.accidental

    @property
    def semitone_value(self) -> int:
        return self._pitch.semitone_value

    @property
    def pitch_class(self) -> PitchClass:
        return self._pitch.pitch_class

    @property
    def display_name(self) -> str:
        """Spelling with accidental glyphs, without the octave."""
        return self._pitch.display_name

    @property
    def name(self) -> str:
        """Spelling plus written octave, e.g. 'C♯4'."""
        return f"{self._pitch.display_name}{self._octave}"

    @property
    def diatonic_index(self) -> int:
        """Letter position counted across octaves (C0 = 0, D0 = 1, C1 = 7)."""
        return self._octave * DIATONIC_STEPS_PER_OCTAVE + self._pitch.letter_index

    @property
    def frequency(self) -> float:
        """Equal-tempered frequency in Hz relative to A4 = 440 Hz."""
        return REFERENCE_FREQUENCY * 2 ** ((self._id - REFERENCE_NOTE_ID) / SEMITONES_PER_OCTAVE)

    @property
    def midi_number(self) -> int:
        return self._id + MIDI_OFFSET

    @property
    def id_mask(self) -> int:
        """This note as a single bit."""
        return 1 << self._id

    # Arithmetic

    def add(self, interval: Interval) -> Note:
        """
        Transpose by an interval, spelling the result by diatonic steps.

        C4 + M3 = E4, C4 + d4 = F♭4, E4 + m9 = F5.

        Raises:
            InvalidOctaveRange: If the result leaves the supported span
            InvalidPitchSpelling: If the spelling needs more than 3 accidentals
        """
        target_id = self._id + interval.semitones
        octave, letter_index = divmod(
            self.diatonic_index + interval.steps, DIATONIC_STEPS_PER_OCTAVE
        )
        _check_octave(octave)
        _check_note_id(target_id)
        letter = LETTERS[letter_index]
        accidental = target_id - (octave * SEMITONES_PER_OCTAVE + LETTER_SEMITONES[letter])
        if abs(accidental) > MAX_ACCIDENTALS:
            raise InvalidPitchSpelling(
                ErrorMessages.TOO_MANY_ACCIDENTALS.format(
                    accidental=accidental, limit=MAX_ACCIDENTALS
                )
            )
        return Note(NamedPitch(letter, accidental), octave)

    def interval_to(self, other: Note) -> Interval:
        """Get the interval from this note up (or down) to another."""
        return Interval.between(self, other)

    def transpose_octaves(self, octaves: int) -> Note:
        """Move by whole octaves, keeping the spelling."""
        return self.with_octave(self._octave + octaves)

    def with_octave(self, octave: int) -> Note:
        """Same spelling at another written octave."""
        return Note(self._pitch, octave)

    def respell(self, pitch: NamedPitch) -> Note:
        """
        Respell as another NamedPitch with the same physical pitch.

        The written octave shifts where needed (C4 respelled as B♯ is B♯3).
        """
        if pitch.pitch_class != self.pitch_class:
            raise InvalidPitchSpelling(
                ErrorMessages.RESPELL_MISMATCH.format(note=self.name, pitch=pitch.display_name)
            )
        base = LETTER_SEMITONES[pitch.letter] + pitch.accidental
        octave = (self._id - base) // SEMITONES_PER_OCTAVE
        return Note(pitch, octave)

    def enharmonics(self, max_accidentals: int = MAX_ACCIDENTALS) -> list[Note]:
        """Other spellings of this note that stay inside the octave span."""
        notes = []
        for pitch in self._pitch.enharmonics(max_accidentals):
            try:
                notes.append(self.respell(pitch))
            except InvalidOctaveRange:
                continue
        return notes

    def primary_harmonic_series(self) -> NoteSet:
        """
        Harmonics 2-8 of this note, rounded to the nearest semitone.

        Harmonics above B9 (the highest spelled id) are left out.
        """
        mask = 0
        for offset in _HARMONIC_OFFSETS:
            harmonic_id = self._id + offset
            if harmonic_id > MAX_SPELLED_ID:
                break
            mask |= 1 << harmonic_id
        return NoteSet.from_mask(mask)

    def __add__(self, other: Interval) -> Note:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Note | Interval) -> Interval | Note:
        """Note - Note gives the Interval between them; Note - Interval transposes down."""
        if isinstance(other, Note):
            return Interval.between(other, self)
        if isinstance(other, Interval):
            return self.add(-other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self._id == other._id

    def __lt__(self, other: Note) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self._id < other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Note('{self.name}')"

    def __str__(self) -> str:
        return self.name


class NoteSet:
    """
    Unordered fixed-width bit-set over the 128 note ids.

    Union, intersection, membership and cardinality are integer bit
    operations. The first spelling seen for each id is kept for display;
    equality and hashing look at the bits only.

    Immutable and hashable.
    """

    __slots__ = ("_mask", "_spellings")
    _mask: int
    _spellings: dict[int, Note]

    def __init__(self, notes: Iterable[Note] = ()) -> None:
        """Create a set from notes; repeated ids keep their first spelling."""
        mask = 0
        spellings: dict[int, Note] = {}
        for note in notes:
            mask |= note.id_mask
            spellings.setdefault(note.id, note)
        object.__setattr__(self, "_mask", mask)
        object.__setattr__(self, "_spellings", spellings)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("NoteSet is immutable")

    @classmethod
    def from_mask(cls, mask: int) -> NoteSet:
        """
        Create a set from a raw 128-bit mask (default spellings).

        Raises:
            InvalidOctaveRange: If a bit above B9 (id 119) is set
        """
        if mask < 0 or mask > _FULL_MASK:
            raise InvalidOctaveRange(f"Mask does not fit in {NOTE_ID_WIDTH} bits.")
        if mask >> (MAX_SPELLED_ID + 1):
            _check_spelled_id(mask.bit_length() - 1)
        note_set = cls()
        object.__setattr__(note_set, "_mask", mask)
        return note_set

    @classmethod
    def from_ids(cls, ids: Iterable[int]) -> NoteSet:
        """Create a set from note ids (default spellings)."""
        return cls(Note.from_id(note_id) for note_id in ids)

    @classmethod
    def parse(cls, text: str, default_octave: int = DEFAULT_OCTAVE) -> NoteSet:
        """Create a set from whitespace-separated notes, e.g. 'C4 E4 G4'."""
        return cls(Note.parse(token, default_octave) for token in text.split())

    @property
    def mask(self) -> int:
        """The raw 128-bit mask."""
        return self._mask

    @property
    def ids(self) -> list[int]:
        """Set note ids in ascending order."""
        return [i for i in range(NOTE_ID_WIDTH) if self._mask >> i & 1]

    @property
    def pitch_class_mask(self) -> int:
        """Octave-normalized 12-bit view of the set."""
        folded = 0
        mask = self._mask
        while mask:
            folded |= mask & _PITCH_CLASS_MASK
            mask >>= SEMITONES_PER_OCTAVE
        return folded

    @property
    def pitch_classes(self) -> list[PitchClass]:
        """Distinct pitch classes present, ascending by value."""
        folded = self.pitch_class_mask
        return [PitchClass(pc) for pc in range(SEMITONES_PER_OCTAVE) if folded >> pc & 1]

    def note(self, note_id: int) -> Note:
        """The note for an id in the set, with its recorded spelling."""
        if not self._mask >> note_id & 1:
            raise KeyError(note_id)
        return self._spellings.get(note_id) or Note.from_id(note_id)

    def notes(self) -> list[Note]:
        """Spelled notes in ascending id order."""
        return [self.note(note_id) for note_id in self.ids]

    def lowest(self) -> Note | None:
        if not self._mask:
            return None
        return self.note((self._mask & -self._mask).bit_length() - 1)

    def highest(self) -> Note | None:
        if not self._mask:
            return None
        return self.note(self._mask.bit_length() - 1)

    def with_note(self, note: Note) -> NoteSet:
        """A new set that also contains the given note."""
        return self | NoteSet([note])

    def union(self, other: NoteSet) -> NoteSet:
        merged = NoteSet()
        spellings = dict(other._spellings)
        spellings.update(self._spellings)
        object.__setattr__(merged, "_mask", self._mask | other._mask)
        object.__setattr__(merged, "_spellings", spellings)
        return merged

    def intersection(self, other: NoteSet) -> NoteSet:
        mask = self._mask & other._mask
        shared = NoteSet()
        object.__setattr__(shared, "_mask", mask)
        object.__setattr__(
            shared,
            "_spellings",
            {i: n for i, n in self._spellings.items() if mask >> i & 1},
        )
        return shared

    def __or__(self, other: NoteSet) -> NoteSet:
        if not isinstance(other, NoteSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: NoteSet) -> NoteSet:
        if not isinstance(other, NoteSet):
            return NotImplemented
        return self.intersection(other)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Note):
            return bool(self._mask >> item.id & 1)
        if isinstance(item, int):
            return 0 <= item < NOTE_ID_WIDTH and bool(self._mask >> item & 1)
        return False

    def __len__(self) -> int:
        return self._mask.bit_count()

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes())

    def __bool__(self) -> bool:
        return self._mask != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NoteSet):
            return NotImplemented
        return self._mask == other._mask

    def __hash__(self) -> int:
        return hash(self._mask)

    def __repr__(self) -> str:
        return f"NoteSet([{', '.join(repr(n) for n in self.notes())}])"

    def __str__(self) -> str:
        return " ".join(n.name for n in self.notes())
