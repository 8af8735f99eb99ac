"""
Chord Identifier - note collection in, ranked named chords out.

Pipeline:
1. Candidate Generator: accepted (root, pattern) hypotheses
2. Resolver: inversion or slash from the bass hint
3. Ranker: best interpretation first
4. Namer: canonical, precise and alternate names

Conditions that are not failures (no interpretation, no bass hint) are
reported as issues on the result rather than raised.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from chuk_chords.catalog import CATALOG
from chuk_chords.config import DEFAULT_CONFIG, EngineConfig
from chuk_chords.constants import IssueCode, IssueMessages, IssueSeverity
from chuk_chords.core.chord import ChordDescriptor
from chuk_chords.core.note import Note, NoteSet
from chuk_chords.engine.builder import build_scale
from chuk_chords.engine.candidates import generate
from chuk_chords.engine.ranker import rank
from chuk_chords.engine.resolver import resolve
from chuk_chords.naming.namer import alternate_names, precise_name, render_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identification:
    """One interpretation of a note set."""

    descriptor: ChordDescriptor
    name: str
    alternate_names: tuple[str, ...] = ()
    description: str = ""
    precise_name: str = ""

    @property
    def root(self) -> Note:
        return self.descriptor.root

    def scale(self) -> list[Note]:
        """The chord scale spelled from the root; empty for a bare root."""
        return build_scale(self.descriptor)

    def __str__(self) -> str:
        return self.name


@dataclass
class IdentifyIssue:
    """A condition reported on an identification result."""

    severity: IssueSeverity
    code: IssueCode
    message: str

    def __str__(self) -> str:
        return f"[{self.severity.value.upper()}] {self.code.value}: {self.message}"


@dataclass
class IdentificationResult:
    """Ranked interpretations plus any issues."""

    interpretations: list[Identification] = field(default_factory=list)
    issues: list[IdentifyIssue] = field(default_factory=list)

    def add_warning(self, code: IssueCode, message: str) -> None:
        """Add a warning issue."""
        self.issues.append(IdentifyIssue(IssueSeverity.WARNING, code, message))

    def add_info(self, code: IssueCode, message: str) -> None:
        """Add an info issue."""
        self.issues.append(IdentifyIssue(IssueSeverity.INFO, code, message))

    @property
    def best(self) -> Identification | None:
        """Top-ranked interpretation, or None."""
        return self.interpretations[0] if self.interpretations else None

    @property
    def descriptors(self) -> list[ChordDescriptor]:
        return [i.descriptor for i in self.interpretations]

    @property
    def names(self) -> list[str]:
        return [i.name for i in self.interpretations]

    @property
    def codes(self) -> list[IssueCode]:
        return [i.code for i in self.issues]

    def has_issue(self, code: IssueCode) -> bool:
        return code in self.codes

    @property
    def is_empty(self) -> bool:
        return not self.interpretations

    def __len__(self) -> int:
        return len(self.interpretations)

    def __iter__(self):
        return iter(self.interpretations)

    def __getitem__(self, index: int) -> Identification:
        return self.interpretations[index]

    def __bool__(self) -> bool:
        """True when at least one interpretation was found."""
        return bool(self.interpretations)

    def __str__(self) -> str:
        lines = [i.name for i in self.interpretations]
        lines.extend(str(issue) for issue in self.issues)
        return "\n".join(lines) if lines else "No interpretation"


def _describe(descriptor: ChordDescriptor) -> str:
    if descriptor.root_only:
        entry = CATALOG.get_entry("root")
    else:
        entry = CATALOG.find(descriptor.modifiers, descriptor.extensions)
    base = entry.description if entry is not None else "Chord"
    if entry is not None:
        extra = [e.value for e in descriptor.extensions if e not in entry.extensions]
        if extra:
            base += f" with {', '.join(extra)}"
    if descriptor.slash is not None:
        base += f" over {descriptor.slash.display_name}"
    elif descriptor.inversion:
        base += f", inversion {descriptor.inversion}"
    return base


class ChordIdentifier:
    """Identifies chords under one EngineConfig."""

    def __init__(self, config: EngineConfig | None = None):
        """
        Initialize the identifier.

        Args:
            config: Engine options; defaults apply when omitted
        """
        self.config = config or DEFAULT_CONFIG

    def parse_notes(self, text: str) -> NoteSet:
        """Parse note spellings like 'C E G B♭3'; bare notes get the default octave."""
        return NoteSet.parse(text, self.config.default_octave)

    def describe(self, descriptor: ChordDescriptor) -> Identification:
        """Render every name for one descriptor."""
        return Identification(
            descriptor=descriptor,
            name=render_name(descriptor),
            alternate_names=tuple(
                alternate_names(
                    descriptor,
                    self.config.max_alternate_accidentals,
                    self.config.alternate_styles,
                )
            ),
            description=_describe(descriptor),
            precise_name=precise_name(descriptor),
        )

    def identify(
        self,
        notes: NoteSet | Iterable[Note],
        bass: Note | None = None,
    ) -> IdentificationResult:
        """
        Identify the chords a note collection can be read as.

        A bass hint that is not already in the collection is treated as
        sounding and added to it.

        Args:
            notes: Notes to identify (a NoteSet or any iterable of Notes)
            bass: Lowest sounding note, if known

        Returns:
            IdentificationResult with interpretations best first
        """
        note_set = notes if isinstance(notes, NoteSet) else NoteSet(notes)
        if bass is not None and bass not in note_set:
            note_set = note_set.with_note(bass)

        result = IdentificationResult()
        candidates = generate(note_set, bass, fold=self.config.fold_extensions)
        resolved = [(candidate, resolve(candidate, bass)) for candidate in candidates]
        ranked = rank(resolved, self.config.prefer_root_position)
        result.interpretations = [self.describe(descriptor) for _, descriptor in ranked]

        if result.is_empty:
            result.add_info(IssueCode.NO_INTERPRETATION, IssueMessages.NO_INTERPRETATION)
        elif bass is None and len(note_set.pitch_classes) > 1:
            result.add_warning(
                IssueCode.AMBIGUOUS_WITHOUT_BASS_HINT,
                IssueMessages.AMBIGUOUS_WITHOUT_BASS_HINT,
            )

        logger.debug(
            "Identified %s (bass %s): %s",
            note_set,
            bass.name if bass is not None else "none",
            result.names or "no interpretation",
        )
        return result

    def identify_voicing(self, notes: NoteSet | Iterable[Note]) -> IdentificationResult:
        """
        Identify an ordered voicing, using its lowest note as the bass hint.

        Args:
            notes: Sounding notes in any order

        Returns:
            IdentificationResult with interpretations best first
        """
        note_set = notes if isinstance(notes, NoteSet) else NoteSet(notes)
        return self.identify(note_set, note_set.lowest())


def identify(
    notes: NoteSet | Iterable[Note],
    bass: Note | None = None,
    config: EngineConfig | None = None,
) -> IdentificationResult:
    """Identify chords with a one-off ChordIdentifier (see ChordIdentifier.identify)."""
    return ChordIdentifier(config).identify(notes, bass)


def identify_voicing(
    notes: NoteSet | Iterable[Note],
    config: EngineConfig | None = None,
) -> IdentificationResult:
    """Identify a voicing using its lowest note as the bass hint."""
    return ChordIdentifier(config).identify_voicing(notes)
