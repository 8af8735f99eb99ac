"""
Chord engine - identification and construction.

- candidates: root hypotheses matched against the catalog
- resolver: bass hint to inversion or slash
- ranker: ordering of ambiguous interpretations
- builder: descriptor to notes (the inverse direction)
- identifier: the identify pipeline and its result types
"""

from chuk_chords.engine.builder import build, build_note_set, build_scale
from chuk_chords.engine.candidates import Candidate, generate, relative_intervals
from chuk_chords.engine.identifier import (
    ChordIdentifier,
    Identification,
    IdentificationResult,
    IdentifyIssue,
    identify,
    identify_voicing,
)
from chuk_chords.engine.ranker import rank, ranking_key
from chuk_chords.engine.resolver import inversion_for, resolve

__all__ = [
    # Candidates
    "Candidate",
    "generate",
    "relative_intervals",
    # Resolver
    "resolve",
    "inversion_for",
    # Ranker
    "rank",
    "ranking_key",
    # Builder
    "build",
    "build_note_set",
    "build_scale",
    # Identifier
    "ChordIdentifier",
    "Identification",
    "IdentificationResult",
    "IdentifyIssue",
    "identify",
    "identify_voicing",
]
