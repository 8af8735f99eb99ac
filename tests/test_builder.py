"""
Tests for the chord builder (engine/builder.py).
"""

from chuk_chords.catalog import CATALOG
from chuk_chords.core import ChordDescriptor, Extension, Modifier, Note, NoteSet
from chuk_chords.engine import build, build_note_set, build_scale


def names(notes: list[Note]) -> list[str]:
    return [n.name for n in notes]


class TestBuild:
    """Tests for root-position building."""

    def test_major_triad(self, c_major: ChordDescriptor) -> None:
        """C major builds C4 E4 G4."""
        assert names(build(c_major)) == ["C4", "E4", "G4"]

    def test_dominant_seventh(self, c4: Note) -> None:
        """C7 spells its seventh as B♭."""
        chord = ChordDescriptor(c4, (Modifier.DOMINANT7,))
        assert names(build(chord)) == ["C4", "E4", "G4", "B♭4"]

    def test_spelling_follows_root(self) -> None:
        """E♭ minor spells G♭ and B♭."""
        chord = ChordDescriptor(Note("E♭", 3), (Modifier.MINOR,))
        assert names(build(chord)) == ["E♭3", "G♭3", "B♭3"]

    def test_spread_ninth(self, c4: Note) -> None:
        """Spread voicing keeps the ninth above the octave."""
        chord = ChordDescriptor(c4, (Modifier.DOMINANT9,))
        assert names(build(chord)) == ["C4", "E4", "G4", "B♭4", "D5"]

    def test_crunchy_ninth(self, c4: Note) -> None:
        """Crunchy voicing folds the ninth into the root octave."""
        chord = ChordDescriptor(c4, (Modifier.DOMINANT9,), crunchy=True)
        assert names(build(chord)) == ["C4", "D4", "E4", "G4", "B♭4"]

    def test_crunchy_thirteenth(self, c4: Note) -> None:
        """Crunchy thirteenth places the eleventh and thirteenth low."""
        chord = ChordDescriptor(c4, (Modifier.DOMINANT13,), crunchy=True)
        assert names(build(chord)) == ["C4", "D4", "E4", "F4", "G4", "A4", "B♭4"]

    def test_root_only(self, c4: Note) -> None:
        """A bare root builds one note."""
        assert build(ChordDescriptor(c4, root_only=True)) == [c4]

    def test_octave(self, c_major: ChordDescriptor) -> None:
        """with_octave moves the whole chord."""
        assert names(build(c_major.with_octave(2))) == ["C2", "E2", "G2"]

    def test_note_set(self, c_major: ChordDescriptor) -> None:
        """build_note_set collects the built notes."""
        assert build_note_set(c_major) == NoteSet.parse("C4 E4 G4")


class TestInversions:
    """Tests for inversions."""

    def test_first_inversion(self, c_major: ChordDescriptor) -> None:
        """First inversion rotates the root up an octave."""
        assert names(build(c_major.with_inversion(1))) == ["E4", "G4", "C5"]

    def test_second_inversion(self, c_major: ChordDescriptor) -> None:
        """Second inversion rotates the lowest two tones."""
        assert names(build(c_major.with_inversion(2))) == ["G4", "C5", "E5"]

    def test_third_inversion(self, c4: Note) -> None:
        """The seventh in the bass."""
        chord = ChordDescriptor(c4, (Modifier.DOMINANT7,), inversion=3)
        assert names(build(chord)) == ["B♭4", "C5", "E5", "G5"]

    def test_crunchy_inversion(self, c4: Note) -> None:
        """Tones folded below the bass are raised above it."""
        chord = ChordDescriptor(c4, (Modifier.DOMINANT9,), inversion=1, crunchy=True)
        assert names(build(chord)) == ["E4", "G4", "B♭4", "C5", "D5"]

    def test_inverted_tone_is_lowest(self, c4: Note) -> None:
        """The k-th tone in degree order is always the bass."""
        chord = ChordDescriptor(c4, (Modifier.DOMINANT13,))
        for inversion in range(len(chord.tones())):
            built = build(chord.with_inversion(inversion))
            assert built[0].semitone_value == chord.with_inversion(inversion).bass.semitone_value


class TestSlash:
    """Tests for slash notes."""

    def test_slash_prepended(self, c_major: ChordDescriptor) -> None:
        """The slash note sounds just below the chord."""
        chord = c_major.with_slash(Note("D", 4))
        assert names(build(chord)) == ["D3", "C4", "E4", "G4"]

    def test_low_slash_raised(self, c_major: ChordDescriptor) -> None:
        """A slash note written far below moves up to the chord."""
        chord = c_major.with_slash(Note("D", 1))
        assert names(build(chord)) == ["D3", "C4", "E4", "G4"]

    def test_slash_keeps_chord_tones(self, c_major: ChordDescriptor) -> None:
        """The slash note does not replace any chord tone."""
        built = build(c_major.with_slash(Note("F♯", 2)))
        assert names(built[1:]) == ["C4", "E4", "G4"]
        assert built[0].display_name == "F♯"


class TestRangeEdges:
    """Tests for chords at the ends of the octave span."""

    def test_tone_above_range_moves_down(self) -> None:
        """A fifth above G9 would leave the span, so the chord is voiced an octave lower."""
        assert names(build(ChordDescriptor(Note("G", 9)))) == ["G8", "B8", "D9"]

    def test_spread_ninth_at_octave_nine(self) -> None:
        """Compound tones at the top keep their pitch classes."""
        chord = ChordDescriptor(Note("C", 9), (Modifier.DOMINANT9,))
        assert names(build(chord)) == ["C8", "E8", "G8", "B♭8", "D9"]

    def test_inversion_at_octave_nine(self) -> None:
        """With no room above the bass, the bass drops an octave."""
        chord = ChordDescriptor(Note("C", 9), inversion=1)
        assert names(build(chord)) == ["E8", "G8", "C9"]

    def test_top_fits_unchanged(self) -> None:
        """A chord that fits stays where it was written."""
        chord = ChordDescriptor(Note("C", 9))
        assert names(build(chord)) == ["C9", "E9", "G9"]

    def test_slash_below_range_lifts_chord(self) -> None:
        """A slash note with no room below octave 0 lifts the chord."""
        chord = ChordDescriptor(Note("C", 0)).with_slash(Note("D", 0))
        assert names(build(chord)) == ["D0", "C1", "E1", "G1"]

    def test_bottom_inversion(self) -> None:
        """Inversions at octave 0 raise the tones below the bass."""
        chord = ChordDescriptor(Note("C", 0), (Modifier.DOMINANT7,), inversion=3)
        assert names(build(chord)) == ["B♭0", "C1", "E1", "G1"]


class TestVoicingInvariance:
    """Voicing moves octaves, never pitch classes."""

    def test_crunchy_keeps_pitch_classes(self, c4: Note) -> None:
        """Every catalog chord has the same pitch classes in both voicings."""
        for entry in CATALOG:
            chord = ChordDescriptor(
                c4, entry.modifiers, entry.extensions, root_only=entry.root_only
            )
            spread = build_note_set(chord).pitch_class_mask
            crunchy = build_note_set(chord.with_crunchy(True)).pitch_class_mask
            assert spread == crunchy, entry.key

    def test_folded_extensions(self, c4: Note) -> None:
        """Added tones keep their pitch class when crunchy."""
        chord = ChordDescriptor(c4, (Modifier.DOMINANT7,), (Extension.ADD13, Extension.ADD9))
        spread = build_note_set(chord).pitch_class_mask
        crunchy = build_note_set(chord.with_crunchy(True)).pitch_class_mask
        assert spread == crunchy


class TestScale:
    """Tests for chord scales."""

    def test_dominant_seventh_is_mixolydian(self, c4: Note) -> None:
        """C7 takes the mixolydian scale."""
        chord = ChordDescriptor(c4, (Modifier.DOMINANT7,))
        assert names(build_scale(chord)) == ["C4", "D4", "E4", "F4", "G4", "A4", "B♭4"]

    def test_minor_seventh_is_dorian(self) -> None:
        """Dm7 takes the dorian scale."""
        chord = ChordDescriptor(Note("D", 4), (Modifier.MINOR, Modifier.DOMINANT7))
        assert names(build_scale(chord)) == ["D4", "E4", "F4", "G4", "A4", "B4", "C5"]

    def test_spelling_follows_root(self) -> None:
        """Seven-note scales use one letter per degree."""
        chord = ChordDescriptor(Note("E♭", 4))
        assert names(build_scale(chord)) == ["E♭4", "F4", "G4", "A♭4", "B♭4", "C5", "D5"]

    def test_whole_tone(self, c4: Note) -> None:
        """Six-note scales use default interval spellings."""
        chord = ChordDescriptor(c4, (Modifier.AUGMENTED5,))
        assert names(build_scale(chord)) == ["C4", "D4", "E4", "F♯4", "A♭4", "B♭4"]

    def test_folded_extensions_use_base_entry(self, c4: Note) -> None:
        """C(add9) takes the major triad's scale."""
        chord = ChordDescriptor(c4, (), (Extension.ADD9,))
        assert build_scale(chord) == build_scale(ChordDescriptor(c4))

    def test_root_only(self, c4: Note) -> None:
        """A bare root has no chord scale."""
        assert build_scale(ChordDescriptor(c4, root_only=True)) == []

    def test_top_of_range(self) -> None:
        """A scale that would run past octave 9 starts an octave lower."""
        scale = build_scale(ChordDescriptor(Note("B", 9)))
        assert names(scale) == ["B8", "C♯9", "D♯9", "E9", "F♯9", "G♯9", "A♯9"]
