"""
Chord primitives - Modifier, Extension, ChordTone, ChordDescriptor.

A chord is a root plus a set of modifiers (which alter the triad and add the
seventh/dominant stack) and extensions (suspensions, altered upper tones and
added tones). chord_tones() turns that vocabulary into intervals above the
root; everything else - matching, naming, building - is derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from chuk_chords.constants import ErrorMessages

from .interval import Interval
from .note import Note


class Modifier(str, Enum):
    """
    Chord-quality modifiers, in canonical rendering order.

    DOMINANT_n stacks the seventh and the natural tones up to degree n.
    """

    MINOR = "minor"
    FLAT5 = "flat5"
    AUGMENTED5 = "augmented5"
    MAJOR7 = "major7"
    DOMINANT7 = "dominant7"
    DOMINANT9 = "dominant9"
    DOMINANT11 = "dominant11"
    DOMINANT13 = "dominant13"
    FLAT9 = "flat9"
    SHARP9 = "sharp9"
    SHARP11 = "sharp11"
    DIMINISHED = "diminished"

    @property
    def dominant_degree(self) -> int | None:
        """7, 9, 11 or 13 for the dominant modifiers, else None."""
        return _DOMINANT_DEGREES.get(self)

    @property
    def is_altered(self) -> bool:
        return self in _ALTERED_MODIFIERS


class Extension(str, Enum):
    """Upper-structure extensions, in canonical rendering order."""

    SUS2 = "sus2"
    SUS4 = "sus4"
    FLAT11 = "flat11"
    FLAT13 = "flat13"
    SHARP13 = "sharp13"
    ADD2 = "add2"
    ADD4 = "add4"
    ADD6 = "add6"
    ADD9 = "add9"
    ADD11 = "add11"
    ADD13 = "add13"

    @property
    def is_altered(self) -> bool:
        return self in _ALTERED_EXTENSIONS

    @property
    def is_suspension(self) -> bool:
        return self in (Extension.SUS2, Extension.SUS4)


_DOMINANT_DEGREES: dict[Modifier, int] = {
    Modifier.DOMINANT7: 7,
    Modifier.DOMINANT9: 9,
    Modifier.DOMINANT11: 11,
    Modifier.DOMINANT13: 13,
}
_ALTERED_MODIFIERS = frozenset(
    {Modifier.FLAT5, Modifier.AUGMENTED5, Modifier.FLAT9, Modifier.SHARP9, Modifier.SHARP11}
)
_ALTERED_EXTENSIONS = frozenset({Extension.FLAT11, Extension.FLAT13, Extension.SHARP13})

# Tone added by each extension other than the suspensions: (degree, interval)
_EXTENSION_TONES: dict[Extension, tuple[int, Interval]] = {
    Extension.FLAT11: (11, Interval.DIMINISHED_ELEVENTH),
    Extension.FLAT13: (13, Interval.MINOR_THIRTEENTH),
    Extension.SHARP13: (13, Interval.AUGMENTED_THIRTEENTH),
    Extension.ADD2: (2, Interval.MAJOR_SECOND),
    Extension.ADD4: (4, Interval.PERFECT_FOURTH),
    Extension.ADD6: (6, Interval.MAJOR_SIXTH),
    Extension.ADD9: (9, Interval.MAJOR_NINTH),
    Extension.ADD11: (11, Interval.PERFECT_ELEVENTH),
    Extension.ADD13: (13, Interval.MAJOR_THIRTEENTH),
}

# Degrees above the octave; crunchy voicing pulls these into the root octave
UPPER_DEGREES = frozenset({9, 11, 13})


def canonical_modifiers(modifiers: tuple[Modifier, ...] | list[Modifier]) -> tuple[Modifier, ...]:
    """Deduplicate and sort modifiers into declaration order."""
    order = list(Modifier)
    return tuple(sorted(set(modifiers), key=order.index))


def canonical_extensions(
    extensions: tuple[Extension, ...] | list[Extension],
) -> tuple[Extension, ...]:
    """Deduplicate and sort extensions into declaration order."""
    order = list(Extension)
    return tuple(sorted(set(extensions), key=order.index))


@dataclass(frozen=True)
class ChordTone:
    """
    One tone of a chord: its scale degree and interval above the root.

    Degree 1 is the root, 3 the third, 9 the ninth and so on.
    """

    degree: int
    interval: Interval

    @property
    def is_upper(self) -> bool:
        """True for ninths, elevenths and thirteenths."""
        return self.degree in UPPER_DEGREES

    @property
    def semitones(self) -> int:
        return self.interval.semitones

    def voiced(self, crunchy: bool) -> Interval:
        """Interval to place this tone at: upper tones fold down when crunchy."""
        if crunchy and self.is_upper:
            return self.interval.simple()
        return self.interval


def chord_tones(
    modifiers: tuple[Modifier, ...] | list[Modifier],
    extensions: tuple[Extension, ...] | list[Extension] = (),
) -> tuple[ChordTone, ...]:
    """
    Derive the chord tones for a modifier/extension set.

    Returns:
        ChordTones in ascending degree order, root first
    """
    mods = set(modifiers)
    exts = set(extensions)
    tones: list[ChordTone] = [ChordTone(1, Interval.UNISON)]

    # Third, unless suspended
    if Extension.SUS2 in exts:
        tones.append(ChordTone(2, Interval.MAJOR_SECOND))
    if Extension.SUS4 in exts:
        tones.append(ChordTone(4, Interval.PERFECT_FOURTH))
    if not exts & {Extension.SUS2, Extension.SUS4}:
        minor = Modifier.MINOR in mods or Modifier.DIMINISHED in mods
        tones.append(ChordTone(3, Interval.MINOR_THIRD if minor else Interval.MAJOR_THIRD))

    # Fifth
    if Modifier.DIMINISHED in mods or Modifier.FLAT5 in mods:
        tones.append(ChordTone(5, Interval.DIMINISHED_FIFTH))
    if Modifier.AUGMENTED5 in mods:
        tones.append(ChordTone(5, Interval.AUGMENTED_FIFTH))
    if not mods & {Modifier.DIMINISHED, Modifier.FLAT5, Modifier.AUGMENTED5}:
        tones.append(ChordTone(5, Interval.PERFECT_FIFTH))

    # Seventh and the dominant stack
    degree = max((m.dominant_degree or 0 for m in mods), default=0)
    if Modifier.MAJOR7 in mods:
        tones.append(ChordTone(7, Interval.MAJOR_SEVENTH))
    elif degree:
        # A diminished triad with a seventh is the full diminished seventh
        diminished = Modifier.DIMINISHED in mods
        tones.append(
            ChordTone(7, Interval.DIMINISHED_SEVENTH if diminished else Interval.MINOR_SEVENTH)
        )

    altered_ninths = mods & {Modifier.FLAT9, Modifier.SHARP9}
    if Modifier.FLAT9 in mods:
        tones.append(ChordTone(9, Interval.MINOR_NINTH))
    if Modifier.SHARP9 in mods:
        tones.append(ChordTone(9, Interval.AUGMENTED_NINTH))
    if degree >= 9 and not altered_ninths:
        tones.append(ChordTone(9, Interval.MAJOR_NINTH))

    if Modifier.SHARP11 in mods:
        tones.append(ChordTone(11, Interval.AUGMENTED_ELEVENTH))
    elif degree >= 11:
        tones.append(ChordTone(11, Interval.PERFECT_ELEVENTH))

    if degree >= 13:
        tones.append(ChordTone(13, Interval.MAJOR_THIRTEENTH))

    for extension in exts:
        if extension in _EXTENSION_TONES:
            tone_degree, interval = _EXTENSION_TONES[extension]
            tones.append(ChordTone(tone_degree, interval))

    unique = {tone.interval: tone for tone in tones}
    return tuple(sorted(unique.values(), key=lambda t: (t.degree, t.semitones)))


def relative_pitch_classes(
    modifiers: tuple[Modifier, ...] | list[Modifier],
    extensions: tuple[Extension, ...] | list[Extension] = (),
) -> frozenset[int]:
    """Mod-12 distances of the non-root chord tones from the root."""
    return frozenset(t.semitones % 12 for t in chord_tones(modifiers, extensions)) - {0}


@dataclass(frozen=True)
class ChordDescriptor:
    """
    A structured chord: root, quality vocabulary and voicing choices.

    Every transformation returns a new descriptor; nothing mutates in place.

    Attributes:
        root: Root note; its octave is where the chord is built
        modifiers: Quality modifiers, normalized to declaration order
        extensions: Extensions, normalized to declaration order
        slash: Non-chord-tone bass note, if any
        inversion: Index of the bass chord tone in degree order (0 = root)
        crunchy: Upper tones voiced inside the root octave
        root_only: A bare root with no triad implied
    """

    root: Note
    modifiers: tuple[Modifier, ...] = ()
    extensions: tuple[Extension, ...] = ()
    slash: Note | None = None
    inversion: int = 0
    crunchy: bool = False
    root_only: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "modifiers", canonical_modifiers(self.modifiers))
        object.__setattr__(self, "extensions", canonical_extensions(self.extensions))

        if self.root_only and (self.modifiers or self.extensions):
            raise ValueError(ErrorMessages.ROOT_ONLY_WITH_QUALITY)

        # Diminished already implies the minor third and flat fifth
        conflicting = [m for m in self.modifiers if m.dominant_degree]
        if len(conflicting) < 2:
            conflicting = []
        if Modifier.DIMINISHED in self.modifiers:
            conflicting += [m for m in self.modifiers if m in (Modifier.MINOR, Modifier.FLAT5)]
        if conflicting:
            names = ", ".join(m.value for m in conflicting)
            raise ValueError(ErrorMessages.CONFLICTING_MODIFIERS.format(modifiers=names))

        tone_count = len(self.tones())
        if not 0 <= self.inversion < tone_count:
            raise ValueError(
                ErrorMessages.INVALID_INVERSION.format(inversion=self.inversion, tones=tone_count)
            )

    def tones(self) -> tuple[ChordTone, ...]:
        """Chord tones in degree order (root first)."""
        if self.root_only:
            return (ChordTone(1, Interval.UNISON),)
        return chord_tones(self.modifiers, self.extensions)

    def tone_notes(self) -> list[Note]:
        """Chord tones spelled from the root, in degree order, spread voicing."""
        return [self.root.add(tone.interval) for tone in self.tones()]

    @property
    def pitch_classes(self) -> frozenset[int]:
        """Pitch classes sounded, slash note included."""
        classes = {(self.root.semitone_value + t.semitones) % 12 for t in self.tones()}
        if self.slash is not None:
            classes.add(self.slash.semitone_value)
        return frozenset(classes)

    @property
    def bass(self) -> Note:
        """The note that sounds lowest, by spelling."""
        if self.slash is not None:
            return self.slash
        return self.root.add(self.tones()[self.inversion].interval)

    @property
    def complexity(self) -> int:
        """Total number of modifiers and extensions."""
        return len(self.modifiers) + len(self.extensions)

    @property
    def altered_count(self) -> int:
        return sum(m.is_altered for m in self.modifiers) + sum(
            e.is_altered for e in self.extensions
        )

    @property
    def has_seventh(self) -> bool:
        return any(t.degree == 7 for t in self.tones())

    def with_inversion(self, inversion: int) -> ChordDescriptor:
        return replace(self, inversion=inversion)

    def with_slash(self, slash: Note | None) -> ChordDescriptor:
        return replace(self, slash=slash)

    def with_octave(self, octave: int) -> ChordDescriptor:
        return replace(self, root=self.root.with_octave(octave))

    def with_crunchy(self, crunchy: bool) -> ChordDescriptor:
        return replace(self, crunchy=crunchy)

    def with_root(self, root: Note) -> ChordDescriptor:
        return replace(self, root=root)

    def __str__(self) -> str:
        from chuk_chords.naming.namer import render_name

        return render_name(self)
