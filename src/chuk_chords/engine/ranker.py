"""
Ranker - orders surviving interpretations of one note set.

Ranking key, most significant first (with root position preferred):
1. No slash note
2. Root position over inversions
3. Fewer modifiers + extensions
4. Exact catalog match over folded extensions
5. Fewer altered tones
6. Root on a natural pitch class (whatever its spelling) over a black-key root
7. Catalog declaration order
8. Root pitch class
"""

from __future__ import annotations

import logging

from chuk_chords.core.chord import ChordDescriptor
from chuk_chords.core.pitch import NamedPitch
from chuk_chords.engine.candidates import Candidate

logger = logging.getLogger(__name__)

RankedCandidate = tuple[Candidate, ChordDescriptor]


def ranking_key(
    candidate: Candidate,
    descriptor: ChordDescriptor,
    prefer_root_position: bool = True,
) -> tuple[int, ...]:
    """
    Sort key for one resolved candidate; lower ranks first.

    Args:
        candidate: Accepted root hypothesis
        descriptor: The candidate resolved against the bass hint
        prefer_root_position: Rank by bass position before complexity

    Returns:
        Tuple key
    """
    match = candidate.match
    position = (int(descriptor.slash is not None), int(descriptor.inversion > 0))
    structure = (
        match.complexity,
        len(match.folded),
        match.altered_count,
        int(not NamedPitch.default_for(candidate.root.semitone_value).is_natural),
        match.index,
        candidate.root.semitone_value,
    )
    if prefer_root_position:
        return position + structure
    return structure + position


def rank(
    resolved: list[RankedCandidate],
    prefer_root_position: bool = True,
) -> list[RankedCandidate]:
    """Order resolved candidates, best first. The sort is stable."""
    ordered = sorted(
        resolved,
        key=lambda item: ranking_key(item[0], item[1], prefer_root_position),
    )
    if len(ordered) > 1:
        logger.debug(
            "Ranked %d interpretations; best root %s",
            len(ordered),
            ordered[0][1].root.display_name,
        )
    return ordered
