"""
Chord catalog - interval patterns to chord-quality vocabulary.

The catalog is a fixed table of relative interval sets. Matching is
subset-tolerant: left-over intervals fold into extensions when they are
valid extension tones on their own.
"""

from chuk_chords.catalog.registry import (
    CATALOG,
    CATALOG_ENTRIES,
    CatalogEntry,
    CatalogMatch,
    ChordCatalog,
)

__all__ = [
    "CATALOG",
    "CATALOG_ENTRIES",
    "CatalogEntry",
    "CatalogMatch",
    "ChordCatalog",
]
