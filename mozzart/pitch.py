"""Musical pitches numbered as MIDI notes (middle C is 60)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .interval import Interval
from .octave import (
    O0,
    O1,
    O2,
    O3,
    O4,
    O5,
    O6,
    O7,
    O8,
    O9,
    SEMITONES_PER_OCTAVE,
    Octave,
)

_MAX_SEMITONES = 255

_PITCH_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

_CONSTANT_NAMES = (
    "C",
    "CSHARP",
    "DFLAT",
    "D",
    "DSHARP",
    "EFLAT",
    "E",
    "F",
    "FSHARP",
    "GFLAT",
    "G",
    "GSHARP",
    "AFLAT",
    "A",
    "ASHARP",
    "BFLAT",
    "B",
)

__all__ = [
    "Pitch",
    *_CONSTANT_NAMES,
    "PITCHES",
    *(f"{name}{octave}" for octave in range(10) for name in _CONSTANT_NAMES),
    *(f"PITCHES{octave}" for octave in range(10)),
]


@dataclass(frozen=True, order=True)
class Pitch:
    """A pitch as a MIDI note number (0-255); 0 is C-1 and 60 is C4."""

    semitones: int

    def __post_init__(self) -> None:
        if isinstance(self.semitones, bool) or not isinstance(self.semitones, int):
            raise TypeError(
                f"pitch semitones must be an int, not {type(self.semitones).__name__}"
            )
        if not 0 <= self.semitones <= _MAX_SEMITONES:
            raise ValueError(
                f"pitch semitones must be between 0 and {_MAX_SEMITONES}, "
                f"got {self.semitones}"
            )

    def from_canonical(self, octave: Octave) -> Pitch:
        """Place this pitch class (which must be canonical) in ``octave``."""
        if not self.is_canonical():
            raise ValueError(f"{self} is not a canonical pitch")
        return self.with_octave(octave)

    def with_octave(self, octave: Octave) -> Pitch:
        """The pitch of the same class as this one, in ``octave``."""
        offset = (octave.value + 1) * SEMITONES_PER_OCTAVE
        return Pitch(self.canonical().semitones + offset)

    def canonical(self) -> Pitch:
        """The pitch class of this pitch, as a pitch between 0 and 11."""
        return Pitch(self.semitones % SEMITONES_PER_OCTAVE)

    def is_canonical(self) -> bool:
        """True when the pitch lies within the first twelve semitones."""
        return self.semitones < SEMITONES_PER_OCTAVE

    def octave(self) -> Octave:
        """The octave that holds this pitch."""
        return Octave(self.semitones // SEMITONES_PER_OCTAVE - 1)

    def transpose(self, interval: Interval) -> Pitch:
        """Raise this pitch by ``interval``."""
        return Pitch(self.semitones + interval.semitones)

    def apply_pattern(self, pattern: Iterable[Interval]) -> list[Pitch]:
        """Transpose this pitch by each interval of ``pattern``, in order."""
        return [self.transpose(interval) for interval in pattern]

    def __str__(self) -> str:
        name = _PITCH_NAMES[self.canonical().semitones]
        if self.is_canonical():
            return name
        return f"{name}{self.octave()}"


def _pitches_in(octave: Octave) -> tuple[Pitch, ...]:
    base = SEMITONES_PER_OCTAVE * (octave.value + 1)
    return tuple(Pitch(base + step) for step in range(SEMITONES_PER_OCTAVE))


C = Pitch(0)
CSHARP = Pitch(1)
DFLAT = CSHARP
D = Pitch(2)
DSHARP = Pitch(3)
EFLAT = DSHARP
E = Pitch(4)
F = Pitch(5)
FSHARP = Pitch(6)
GFLAT = FSHARP
G = Pitch(7)
GSHARP = Pitch(8)
AFLAT = GSHARP
A = Pitch(9)
ASHARP = Pitch(10)
BFLAT = ASHARP
B = Pitch(11)

PITCHES = (C, CSHARP, D, DSHARP, E, F, FSHARP, G, GSHARP, A, ASHARP, B)

C0, CSHARP0, D0, DSHARP0, E0, F0, FSHARP0, G0, GSHARP0, A0, ASHARP0, B0 = PITCHES0 = (
    _pitches_in(O0)
)
DFLAT0, EFLAT0, GFLAT0, AFLAT0, BFLAT0 = CSHARP0, DSHARP0, FSHARP0, GSHARP0, ASHARP0

C1, CSHARP1, D1, DSHARP1, E1, F1, FSHARP1, G1, GSHARP1, A1, ASHARP1, B1 = PITCHES1 = (
    _pitches_in(O1)
)
DFLAT1, EFLAT1, GFLAT1, AFLAT1, BFLAT1 = CSHARP1, DSHARP1, FSHARP1, GSHARP1, ASHARP1

C2, CSHARP2, D2, DSHARP2, E2, F2, FSHARP2, G2, GSHARP2, A2, ASHARP2, B2 = PITCHES2 = (
    _pitches_in(O2)
)
DFLAT2, EFLAT2, GFLAT2, AFLAT2, BFLAT2 = CSHARP2, DSHARP2, FSHARP2, GSHARP2, ASHARP2

C3, CSHARP3, D3, DSHARP3, E3, F3, FSHARP3, G3, GSHARP3, A3, ASHARP3, B3 = PITCHES3 = (
    _pitches_in(O3)
)
DFLAT3, EFLAT3, GFLAT3, AFLAT3, BFLAT3 = CSHARP3, DSHARP3, FSHARP3, GSHARP3, ASHARP3

C4, CSHARP4, D4, DSHARP4, E4, F4, FSHARP4, G4, GSHARP4, A4, ASHARP4, B4 = PITCHES4 = (
    _pitches_in(O4)
)
DFLAT4, EFLAT4, GFLAT4, AFLAT4, BFLAT4 = CSHARP4, DSHARP4, FSHARP4, GSHARP4, ASHARP4

C5, CSHARP5, D5, DSHARP5, E5, F5, FSHARP5, G5, GSHARP5, A5, ASHARP5, B5 = PITCHES5 = (
    _pitches_in(O5)
)
DFLAT5, EFLAT5, GFLAT5, AFLAT5, BFLAT5 = CSHARP5, DSHARP5, FSHARP5, GSHARP5, ASHARP5

C6, CSHARP6, D6, DSHARP6, E6, F6, FSHARP6, G6, GSHARP6, A6, ASHARP6, B6 = PITCHES6 = (
    _pitches_in(O6)
)
DFLAT6, EFLAT6, GFLAT6, AFLAT6, BFLAT6 = CSHARP6, DSHARP6, FSHARP6, GSHARP6, ASHARP6

C7, CSHARP7, D7, DSHARP7, E7, F7, FSHARP7, G7, GSHARP7, A7, ASHARP7, B7 = PITCHES7 = (
    _pitches_in(O7)
)
DFLAT7, EFLAT7, GFLAT7, AFLAT7, BFLAT7 = CSHARP7, DSHARP7, FSHARP7, GSHARP7, ASHARP7

C8, CSHARP8, D8, DSHARP8, E8, F8, FSHARP8, G8, GSHARP8, A8, ASHARP8, B8 = PITCHES8 = (
    _pitches_in(O8)
)
DFLAT8, EFLAT8, GFLAT8, AFLAT8, BFLAT8 = CSHARP8, DSHARP8, FSHARP8, GSHARP8, ASHARP8

C9, CSHARP9, D9, DSHARP9, E9, F9, FSHARP9, G9, GSHARP9, A9, ASHARP9, B9 = PITCHES9 = (
    _pitches_in(O9)
)
DFLAT9, EFLAT9, GFLAT9, AFLAT9, BFLAT9 = CSHARP9, DSHARP9, FSHARP9, GSHARP9, ASHARP9