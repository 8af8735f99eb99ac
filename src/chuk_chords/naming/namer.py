"""
Namer - renders a ChordDescriptor as chord-symbol text.

Rendering order:
    root + quality + seventh + sus + (alterations, adds) + /bass

Examples: C, Cm7, Cdim, Cm7(♭5), C7(♭9,♯11), Cmaj9, C6, C7sus4, C/E.
"""

from __future__ import annotations

import logging

from chuk_chords.constants import MAX_ACCIDENTALS
from chuk_chords.core.chord import ChordDescriptor, Extension, Modifier
from chuk_chords.core.pitch import NamedPitch
from chuk_chords.exceptions import InvalidPitchSpelling
from chuk_chords.naming.style import STANDARD, NamingStyle, get_naming_style

logger = logging.getLogger(__name__)

# Parenthesized items in rendering order: (vocabulary item, sign, number)
# sign is "flat", "sharp" or "add"
_PARENTHESIZED: tuple[tuple[Modifier | Extension, str, str], ...] = (
    (Modifier.FLAT5, "flat", "5"),
    (Modifier.AUGMENTED5, "sharp", "5"),
    (Modifier.FLAT9, "flat", "9"),
    (Modifier.SHARP9, "sharp", "9"),
    (Modifier.SHARP11, "sharp", "11"),
    (Extension.FLAT11, "flat", "11"),
    (Extension.FLAT13, "flat", "13"),
    (Extension.SHARP13, "sharp", "13"),
    (Extension.ADD2, "add", "2"),
    (Extension.ADD4, "add", "4"),
    (Extension.ADD6, "add", "6"),
    (Extension.ADD9, "add", "9"),
    (Extension.ADD11, "add", "11"),
    (Extension.ADD13, "add", "13"),
)


def _spell(pitch: NamedPitch, style: NamingStyle) -> str:
    return pitch.ascii_name if style.ascii_roots else pitch.display_name


def bass_pitch(descriptor: ChordDescriptor) -> NamedPitch | None:
    """Spelling of the bass note when it is not the root, else None."""
    if descriptor.slash is not None:
        return descriptor.slash.pitch
    if descriptor.inversion:
        tone = descriptor.tones()[descriptor.inversion]
        return descriptor.root.pitch.transpose(tone.interval)
    return None


def _core_name(descriptor: ChordDescriptor, style: NamingStyle) -> str:
    """Root plus quality text, without any bass suffix."""
    root = _spell(descriptor.root.pitch, style)
    if descriptor.root_only:
        return f"{root}{style.no_third_fifth}"

    mods = set(descriptor.modifiers)
    exts = set(descriptor.extensions)
    consumed: set[Modifier | Extension] = set()

    degree = max((m.dominant_degree or 0 for m in mods), default=0)
    major7 = Modifier.MAJOR7 in mods

    # Quality prefix
    prefix = ""
    if (
        style.half_diminished is not None
        and degree
        and not major7
        and {Modifier.MINOR, Modifier.FLAT5} <= mods
    ):
        prefix = style.half_diminished
        consumed |= {Modifier.MINOR, Modifier.FLAT5}
    elif Modifier.MINOR in mods:
        prefix = style.minor
        consumed.add(Modifier.MINOR)
    elif Modifier.DIMINISHED in mods:
        prefix = style.diminished
        consumed.add(Modifier.DIMINISHED)
    elif Modifier.AUGMENTED5 in mods:
        prefix = style.augmented
        consumed.add(Modifier.AUGMENTED5)

    # Seventh and dominant stack
    seventh = ""
    if major7:
        seventh = f"{style.major_seventh}{degree or 7}"
        if prefix:
            seventh = f"({seventh})"
    elif degree:
        seventh = str(degree)
    elif Extension.ADD6 in exts:
        seventh = "6"
        consumed.add(Extension.ADD6)

    sus = ""
    for extension in (Extension.SUS2, Extension.SUS4):
        if extension in exts:
            sus += f"{style.suspended}{extension.value[-1]}"

    items = []
    for item, sign, number in _PARENTHESIZED:
        if item in consumed or (item not in mods and item not in exts):
            continue
        token = {"flat": style.flat, "sharp": style.sharp, "add": style.add}[sign]
        items.append(f"{token}{number}")
    altered = f"({','.join(items)})" if items else ""

    return f"{root}{prefix}{seventh}{sus}{altered}"


def render_name(descriptor: ChordDescriptor, style: NamingStyle = STANDARD) -> str:
    """
    Render the name of a chord.

    Inversions and slash chords both render as '/bass'; use precise_name
    when the two must be told apart.

    Args:
        descriptor: Chord to name
        style: Token set to render with

    Returns:
        Chord-symbol text, e.g. 'Cm7(♭5)' or 'C/E'
    """
    name = _core_name(descriptor, style)
    bass = bass_pitch(descriptor)
    if bass is not None:
        name += f"/{_spell(bass, style)}"
    return name


def precise_name(descriptor: ChordDescriptor, style: NamingStyle = STANDARD) -> str:
    """
    Render an unambiguous name: '@k' for inversion k, '/X' for a slash note
    and a trailing '!' for crunchy voicing.

    C major in first inversion is 'C@1'; over a D bass it is 'C/D'.
    """
    name = _core_name(descriptor, style)
    if descriptor.inversion:
        name += f"@{descriptor.inversion}"
    if descriptor.slash is not None:
        name += f"/{_spell(descriptor.slash.pitch, style)}"
    if descriptor.crunchy:
        name += "!"
    return name


def alternate_names(
    descriptor: ChordDescriptor,
    max_accidentals: int = 1,
    styles: tuple[str, ...] = ("jazz", "ascii"),
) -> list[str]:
    """
    Other ways to write the same chord.

    Enharmonic respellings of the root come first, then the canonical
    spelling rendered in each alternate style. The canonical name itself
    and duplicates are left out.

    Args:
        descriptor: Chord to name
        max_accidentals: Most accidentals allowed on a respelled root
        styles: Names of built-in styles to render with

    Returns:
        Alternate names in a stable order
    """
    canonical = render_name(descriptor)
    names: list[str] = []

    for root in descriptor.root.enharmonics(min(max_accidentals, MAX_ACCIDENTALS)):
        try:
            names.append(render_name(descriptor.with_root(root)))
        except InvalidPitchSpelling:
            logger.debug("No spelling of %s above root %s", canonical, root.display_name)

    for style_name in styles:
        names.append(render_name(descriptor, get_naming_style(style_name)))

    unique: list[str] = []
    for name in names:
        if name != canonical and name not in unique:
            unique.append(name)
    return unique
