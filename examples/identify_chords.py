#!/usr/bin/env python3
"""
Example: Identifying and Building Chords.

This demonstrates both directions of the chord engine: a set of notes in,
ranked chord names out, and a structured chord in, its notes out.

Usage:
    python examples/identify_chords.py
"""

from chuk_chords import (
    ChordDescriptor,
    ChordIdentifier,
    EngineConfig,
    Modifier,
    Note,
    NoteSet,
    build,
    identify,
    identify_voicing,
    load_config,
    name,
)


def show(title: str, notes: NoteSet, bass: Note | None = None) -> None:
    """Print every interpretation of a note set."""
    result = identify(notes, bass=bass)
    bass_text = f" (bass {bass.name})" if bass else ""
    print(f"{title}: {notes}{bass_text}")
    for identification in result:
        alternates = ", ".join(identification.alternate_names)
        print(f"  {identification.name:<12} {identification.description}")
        if alternates:
            print(f"  {'':<12} also: {alternates}")
    for issue in result.issues:
        print(f"  {issue}")
    print()


def main() -> None:
    """Demonstrate identification and construction."""
    print("CHUK Chord Engine Demo")
    print("=" * 40)
    print()

    # Identification
    show("Major triad", NoteSet.parse("C4 E4 G4"))
    show("Dominant seventh", NoteSet.parse("C4 E4 G4 B♭4"))
    show("First inversion", NoteSet.parse("E3 C4 G4"), bass=Note("E", 3))
    show("Ambiguous sus", NoteSet.parse("C4 D4 G4"))
    show("Power chord", NoteSet.parse("C3 G3"))

    # Voicings use their lowest note as the bass
    voicing = [Note("A", 2), Note("C", 4), Note("E", 4), Note("G", 4)]
    print(f"Voicing {' '.join(n.name for n in voicing)} -> {identify_voicing(voicing).best}")
    print()

    # Chord scales
    best = identify(NoteSet.parse("D4 F4 A4 C5")).best
    if best is not None:
        print(f"{best.name} scale: {' '.join(n.name for n in best.scale())}")
        print()

    # Construction
    print("Building chords:")
    chords = [
        ChordDescriptor(Note("C", 4), (Modifier.DOMINANT9,)),
        ChordDescriptor(Note("C", 4), (Modifier.DOMINANT9,), crunchy=True),
        ChordDescriptor(Note("F♯", 3), (Modifier.MINOR, Modifier.FLAT5, Modifier.DOMINANT7)),
        ChordDescriptor(Note("C", 4)).with_inversion(2),
        ChordDescriptor(Note("C", 4)).with_slash(Note("D", 3)),
    ]
    for chord in chords:
        notes = " ".join(n.name for n in build(chord))
        print(f"  {name(chord):<12} -> {notes}")
    print()

    # Configuration
    config = load_config("alternate_styles: [jazz]\nfold_extensions: false\n")
    identifier = ChordIdentifier(config)
    print("Without folding, C D E G has no reading:")
    print(f"  {identifier.identify(identifier.parse_notes('C D E G'))}")
    print()
    strict = ChordIdentifier(EngineConfig(prefer_root_position=False))
    result = strict.identify(NoteSet.parse("A3 C4 E4 G4"), bass=Note("A", 3))
    print(f"Structure before bass position: {', '.join(result.names)}")


if __name__ == "__main__":
    main()
