"""
Property tests for identification and building.

- Round-trip: building any identified chord reproduces the input pitch classes
- Idempotence: identifying a built chord with its bass ranks it first
- Singleton completeness: one bare-root reading per single pitch class
- Enharmonic invariance: respelling notes never changes the structure
"""

import pytest

from chuk_chords.catalog import CATALOG
from chuk_chords.core import ChordDescriptor, Extension, Modifier, NamedPitch, Note, NoteSet
from chuk_chords.engine import build, build_note_set, identify

VOICINGS = [
    "C4 E4 G4",
    "C4 E4 G4 B♭4",
    "C4 E♭4 G♭4",
    "C4 D4 G4",
    "C4 E4 G4 A4",
    "C4 E♭4 G♭4 A4",
    "C4 E4 G♯4",
    "D3 C4 E4 G4",
    "F♯3 C4 E4 G4",
    "B♭2 D4 F4 A♭4 C5 E5",
    "E3 G♯3 B3 D4 F4",
    "A2 C4 E4 G4 B4 D5",
]

ROOTS = ["C", "F♯", "B♭", "E", "A♭"]

# Voicings at the ends of the octave span, with their bass hint
EDGE_VOICINGS = [
    ("C9 E9 G9", "E9"),
    ("C9 E9 G9", "G9"),
    ("D9 G9 B9", "D9"),
    ("C9 D9 E9 G9 B♭9", "C9"),
    ("C0 E0 G0 F♯0", "F♯0"),
    ("C0 E0 G0 B♭0", "B♭0"),
    ("C0 D0 E0 G0", "D0"),
]


def structure(chord: ChordDescriptor) -> tuple:
    """Spelling-free view of a descriptor."""
    return (
        chord.root.semitone_value,
        chord.modifiers,
        chord.extensions,
        chord.inversion,
        chord.slash.semitone_value if chord.slash is not None else None,
        chord.root_only,
    )


class TestRoundTrip:
    """Building an identified chord gives back the input."""

    @pytest.mark.parametrize("text", VOICINGS)
    def test_without_bass(self, text: str) -> None:
        """Every interpretation rebuilds the same pitch classes."""
        notes = NoteSet.parse(text)
        for identification in identify(notes):
            built = build_note_set(identification.descriptor)
            assert built.pitch_class_mask == notes.pitch_class_mask, identification.name

    @pytest.mark.parametrize("text", VOICINGS)
    def test_with_bass(self, text: str) -> None:
        """Inversions and slash notes rebuild the same pitch classes."""
        notes = NoteSet.parse(text)
        bass = notes.lowest()
        for identification in identify(notes, bass=bass):
            built = build(identification.descriptor)
            assert NoteSet(built).pitch_class_mask == notes.pitch_class_mask
            assert built[0].semitone_value == bass.semitone_value, identification.name


    @pytest.mark.parametrize(("text", "bass"), EDGE_VOICINGS)
    def test_range_edges(self, text: str, bass: str) -> None:
        """Chords identified at octave 0 or 9 build back into range."""
        notes = NoteSet.parse(text)
        bass_note = Note.parse(bass)
        result = identify(notes, bass=bass_note)
        assert result
        for identification in result:
            built = build(identification.descriptor)
            assert NoteSet(built).pitch_class_mask == notes.pitch_class_mask
            assert built[0].semitone_value == bass_note.semitone_value, identification.name


class TestIdempotence:
    """Identifying a built chord with its bass ranks the chord first."""

    @pytest.mark.parametrize("root", ROOTS)
    def test_every_catalog_entry(self, root: str) -> None:
        """Root-position catalog chords identify as themselves."""
        for entry in CATALOG:
            chord = ChordDescriptor(
                Note(root, 3), entry.modifiers, entry.extensions, root_only=entry.root_only
            )
            built = build(chord)
            best = identify(NoteSet(built), bass=built[0]).best
            assert best is not None, entry.key
            assert structure(best.descriptor) == structure(chord), entry.key

    def test_crunchy_voicing(self) -> None:
        """Voicing does not change the identification."""
        chord = ChordDescriptor(Note("D", 3), (Modifier.MINOR, Modifier.DOMINANT9), crunchy=True)
        built = build(chord)
        best = identify(NoteSet(built), bass=built[0]).best
        assert best is not None
        assert structure(best.descriptor) == structure(chord)

    @pytest.mark.parametrize(
        "extensions",
        [(Extension.ADD9,), (Extension.ADD6,), (Extension.ADD6, Extension.ADD9)],
    )
    def test_folded_extensions(self, extensions: tuple[Extension, ...]) -> None:
        """Added-tone chords identify as themselves."""
        chord = ChordDescriptor(Note("C", 4), (), extensions)
        built = build(chord)
        best = identify(NoteSet(built), bass=built[0]).best
        assert best is not None
        assert structure(best.descriptor) == structure(chord)

    @pytest.mark.parametrize("octave", [0, 9])
    def test_every_catalog_entry_at_edges(self, octave: int) -> None:
        """Catalog chords rooted at octave 0 or 9 identify as themselves."""
        for entry in CATALOG:
            chord = ChordDescriptor(
                Note("C", octave), entry.modifiers, entry.extensions, root_only=entry.root_only
            )
            built = build(chord)
            best = identify(NoteSet(built), bass=built[0]).best
            assert best is not None, entry.key
            assert structure(best.descriptor) == structure(chord), entry.key

    def test_inversions(self) -> None:
        """Inverted triads identify with the same inversion."""
        for inversion in range(3):
            chord = ChordDescriptor(Note("C", 4), inversion=inversion)
            built = build(chord)
            best = identify(NoteSet(built), bass=built[0]).best
            assert best is not None
            assert structure(best.descriptor) == structure(chord)


class TestSingletonCompleteness:
    """A single pitch class is a bare root."""

    @pytest.mark.parametrize("note_id", [0, 13, 48, 61, 119])
    def test_single_note(self, note_id: int) -> None:
        """Exactly one candidate with no quality."""
        result = identify(NoteSet.from_ids([note_id]))
        assert len(result) == 1
        chord = result[0].descriptor
        assert chord.root.id == note_id
        assert chord.modifiers == ()
        assert chord.extensions == ()
        assert chord.root_only

    def test_octave_doublings(self) -> None:
        """Doublings of one pitch class are still a single root."""
        result = identify(NoteSet.parse("G2 G3 G5"))
        assert len(result) == 1
        assert result[0].root == Note("G", 2)


class TestEnharmonicInvariance:
    """Respelling notes changes names only."""

    @pytest.mark.parametrize("text", VOICINGS)
    def test_respelled_input(self, text: str) -> None:
        """Respelled note sets identify to the same structures."""
        notes = NoteSet.parse(text)
        respelled = NoteSet(
            next(iter(note.enharmonics(max_accidentals=2)), note) for note in notes
        )
        assert respelled == notes

        original = [structure(i.descriptor) for i in identify(notes)]
        changed = [structure(i.descriptor) for i in identify(respelled)]
        assert original == changed

    def test_respelled_root_keeps_order(self) -> None:
        """B♯ ranks as C would, so the order does not change."""
        plain = identify(NoteSet.parse("C4 D4 G4"))
        respelled = identify(NoteSet.parse("B♯3 D4 G4"))
        assert [structure(i.descriptor) for i in respelled] == [
            structure(i.descriptor) for i in plain
        ]
        assert respelled.names == ["B♯sus2", "Gsus4"]

    def test_names_differ_in_spelling_only(self) -> None:
        """B♯ D𝄪 G is the same chord as C E G under another name."""
        respelled = NoteSet(
            [Note(NamedPitch("B", 1), 3), Note(NamedPitch("D", 2), 4), Note("G", 4)]
        )
        best = identify(respelled).best
        assert best is not None
        assert best.name == "B♯"
        assert best.descriptor.modifiers == ()
