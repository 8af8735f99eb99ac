"""
Tests for the chord catalog.

Tests cover:
- Catalog integrity against the chord-tone algebra
- Exact and subset-tolerant matching
- Match preference order
"""

import pytest

from chuk_chords.catalog import CATALOG, CatalogEntry, ChordCatalog
from chuk_chords.catalog.registry import MIXOLYDIAN
from chuk_chords.core import Extension, Modifier, relative_pitch_classes
from chuk_chords.exceptions import CatalogIntegrityError


class TestCatalogIntegrity:
    """Tests for the static table."""

    def test_size(self) -> None:
        """The catalog ships its full table."""
        assert len(CATALOG) == 32

    def test_declared_sets_match_chord_tones(self) -> None:
        """Every declared interval set agrees with chord_tones()."""
        for entry in CATALOG:
            if entry.root_only:
                continue
            assert entry.intervals == relative_pitch_classes(entry.modifiers, entry.extensions)

    def test_interval_sets_unique(self) -> None:
        """No two entries share an interval set."""
        sets = [entry.intervals for entry in CATALOG]
        assert len(sets) == len(set(sets))

    def test_intervals_in_range(self) -> None:
        """Relative intervals are mod-12 distances, root excluded."""
        for entry in CATALOG:
            assert all(1 <= i <= 11 for i in entry.intervals)

    def test_mismatch_raises(self) -> None:
        """An entry that disagrees with its chord tones is a data defect."""
        bad = CatalogEntry("bad", frozenset({3, 7}))
        with pytest.raises(CatalogIntegrityError, match="bad"):
            ChordCatalog((bad,))

    def test_duplicate_raises(self) -> None:
        """Two entries with the same set are a data defect."""
        first = CatalogEntry("first", frozenset({4, 7}))
        second = CatalogEntry("second", frozenset({4, 7}))
        with pytest.raises(CatalogIntegrityError, match="second"):
            ChordCatalog((first, second))

    def test_integrity_error_is_not_value_error(self) -> None:
        """Data defects are not input problems."""
        assert not issubclass(CatalogIntegrityError, ValueError)

    def test_entry_metadata(self) -> None:
        """Entries carry a description and chord scale."""
        entry = CATALOG.get_entry("dominant7")
        assert entry is not None
        assert entry.description == "Dominant seventh"
        assert entry.scale == MIXOLYDIAN
        assert CATALOG.get_entry("missing") is None


class TestCatalogMatch:
    """Tests for matching relative interval sets."""

    def test_exact_match(self) -> None:
        """An exact set matches with nothing folded."""
        match = CATALOG.match(frozenset({4, 7}))
        assert match is not None
        assert match.entry.key == "major"
        assert match.folded == ()

    def test_empty_set_is_root_only(self) -> None:
        """A lone root matches the bare-root entry."""
        match = CATALOG.match(frozenset())
        assert match is not None
        assert match.entry.root_only

    def test_fold_add9(self) -> None:
        """A left-over major second folds into add9."""
        match = CATALOG.match(frozenset({2, 4, 7}))
        assert match is not None
        assert match.entry.key == "major"
        assert match.extensions == (Extension.ADD9,)

    def test_fold_sixth_without_seventh(self) -> None:
        """A major sixth folds into add6 on a triad."""
        match = CATALOG.match(frozenset({4, 7, 9}))
        assert match is not None
        assert match.extensions == (Extension.ADD6,)

    def test_fold_thirteenth_with_seventh(self) -> None:
        """A major sixth folds into add13 over a seventh."""
        match = CATALOG.match(frozenset({4, 7, 9, 10}))
        assert match is not None
        assert match.entry.key == "dominant7"
        assert match.extensions == (Extension.ADD13,)

    def test_flat13_needs_seventh(self) -> None:
        """A minor sixth only folds when a seventh is present."""
        match = CATALOG.match(frozenset({4, 7, 8, 10}))
        assert match is not None
        assert match.extensions == (Extension.FLAT13,)
        assert CATALOG.match(frozenset({4, 7, 8})) is None

    def test_unfoldable_rejected(self) -> None:
        """A left-over tone that is not an extension rejects the root."""
        assert CATALOG.match(frozenset({4, 7, 11, 1, 6})) is None

    def test_power_chord_rejected(self) -> None:
        """A bare fifth is not a catalog pattern."""
        assert CATALOG.match(frozenset({7})) is None
        assert CATALOG.match(frozenset({4})) is None

    def test_fold_disabled(self) -> None:
        """Without folding only exact sets match."""
        assert CATALOG.match(frozenset({2, 4, 7}), fold=False) is None
        assert CATALOG.match(frozenset({4, 7}), fold=False) is not None

    def test_exact_beats_folded(self) -> None:
        """Diminished seventh beats diminished + add6."""
        match = CATALOG.match(frozenset({3, 6, 9}))
        assert match is not None
        assert match.entry.key == "diminished7"
        assert match.folded == ()

    def test_exact_beats_folded_at_equal_complexity(self) -> None:
        """Major ninth beats major seventh + add9."""
        match = CATALOG.match(frozenset({2, 4, 7, 11}))
        assert match is not None
        assert match.entry.key == "major9"

    def test_fewer_items_win(self) -> None:
        """Dominant eleven beats dominant nine + add11."""
        match = CATALOG.match(frozenset({2, 4, 5, 7, 10}))
        assert match is not None
        assert match.entry.key == "dominant11"
        assert match.complexity == 1

    def test_find_by_vocabulary(self) -> None:
        """find() maps vocabulary back to its entry."""
        entry = CATALOG.find((Modifier.MINOR, Modifier.FLAT5, Modifier.DOMINANT7))
        assert entry is not None
        assert entry.key == "half_diminished7"
        folded = CATALOG.find((), (Extension.ADD9,))
        assert folded is not None
        assert folded.key == "major"
