"""Chord types and the interval patterns that build chords from a root."""

from __future__ import annotations

from typing import ClassVar

from .interval import Interval
from .pitch import Pitch

__all__ = ["ChordType", "ChordPattern"]


class ChordType:
    """A kind of chord, such as a major or a minor triad."""


class ChordPattern:
    """The intervals above a root that make up a chord of a given type."""

    PATTERN: ClassVar[tuple[Interval, ...]] = ()
    chord_type: ClassVar[type[ChordType]] = ChordType

    def apply(self, root: Pitch) -> list[Pitch]:
        """The pitches of the chord built on ``root``, in pattern order."""
        return root.apply_pattern(self.PATTERN)