"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_chords.config import EngineConfig
from chuk_chords.core import ChordDescriptor, Note
from chuk_chords.engine import ChordIdentifier


@pytest.fixture
def identifier() -> ChordIdentifier:
    """Identifier with default options."""
    return ChordIdentifier()


@pytest.fixture
def no_fold_identifier() -> ChordIdentifier:
    """Identifier that only accepts exact catalog matches."""
    return ChordIdentifier(EngineConfig(fold_extensions=False))


@pytest.fixture
def c4() -> Note:
    """Middle C."""
    return Note("C", 4)


@pytest.fixture
def c_major(c4: Note) -> ChordDescriptor:
    """C major triad in root position."""
    return ChordDescriptor(c4)
