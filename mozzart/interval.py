"""Musical intervals measured in semitones."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "Interval",
    "PERFECT_UNISON",
    "MINOR_SECOND",
    "MAJOR_SECOND",
    "MINOR_THIRD",
    "MAJOR_THIRD",
    "PERFECT_FOURTH",
    "DIMINISHED_FIFTH",
    "PERFECT_FIFTH",
    "MINOR_SIXTH",
    "MAJOR_SIXTH",
    "MINOR_SEVENTH",
    "MAJOR_SEVENTH",
    "PERFECT_OCTAVE",
]

_MAX_SEMITONES = 255


@dataclass(frozen=True)
class Interval:
    """The distance between two pitches, counted in semitones (0-255)."""

    semitones: int

    def __post_init__(self) -> None:
        if isinstance(self.semitones, bool) or not isinstance(self.semitones, int):
            raise TypeError(
                f"interval semitones must be an int, not {type(self.semitones).__name__}"
            )
        if not 0 <= self.semitones <= _MAX_SEMITONES:
            raise ValueError(
                f"interval semitones must be between 0 and {_MAX_SEMITONES}, "
                f"got {self.semitones}"
            )


PERFECT_UNISON = Interval(0)
MINOR_SECOND = Interval(1)
MAJOR_SECOND = Interval(2)
MINOR_THIRD = Interval(3)
MAJOR_THIRD = Interval(4)
PERFECT_FOURTH = Interval(5)
DIMINISHED_FIFTH = Interval(6)
PERFECT_FIFTH = Interval(7)
MINOR_SIXTH = Interval(8)
MAJOR_SIXTH = Interval(9)
MINOR_SEVENTH = Interval(10)
MAJOR_SEVENTH = Interval(11)
PERFECT_OCTAVE = Interval(12)