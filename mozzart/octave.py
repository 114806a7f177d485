"""Musical octaves, numbered as in MIDI (middle C lies in octave 4)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pitch import Pitch

__all__ = [
    "Octave",
    "SEMITONES_PER_OCTAVE",
    "OC",
    "O0",
    "O1",
    "O2",
    "O3",
    "O4",
    "O5",
    "O6",
    "O7",
    "O8",
    "O9",
    "OCTAVES",
]

SEMITONES_PER_OCTAVE = 12

_MIN_VALUE = -128
_MAX_VALUE = 127


@dataclass(frozen=True, order=True)
class Octave:
    """An octave number; -1 is the lowest octave and 4 holds middle C."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"octave value must be an int, not {type(self.value).__name__}"
            )
        if not _MIN_VALUE <= self.value <= _MAX_VALUE:
            raise ValueError(
                f"octave value must be between {_MIN_VALUE} and {_MAX_VALUE}, "
                f"got {self.value}"
            )

    def is_canonical(self) -> bool:
        """True for the lowest, negative octave."""
        return self.value < 0

    def update_octave(self, pitch: Pitch) -> Pitch:
        """Return ``pitch`` moved into this octave."""
        return pitch.with_octave(self)

    def to_pitch(self, canonical: Pitch) -> Pitch:
        """Place a pitch class (a canonical pitch) in this octave."""
        if not canonical.is_canonical():
            raise ValueError(f"{canonical} is not a canonical pitch")
        return canonical.with_octave(self)

    def pitches(self) -> list[Pitch]:
        """The twelve chromatic pitches of this octave, from C to B."""
        from .pitch import Pitch

        return [self.to_pitch(Pitch(n)) for n in range(SEMITONES_PER_OCTAVE)]

    def __str__(self) -> str:
        return str(self.value)


OC = Octave(-1)
O0 = Octave(0)
O1 = Octave(1)
O2 = Octave(2)
O3 = Octave(3)
O4 = Octave(4)
O5 = Octave(5)
O6 = Octave(6)
O7 = Octave(7)
O8 = Octave(8)
O9 = Octave(9)

OCTAVES = (OC, O0, O1, O2, O3, O4, O5, O6, O7, O8, O9)