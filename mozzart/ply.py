"""Pattern-based composition: generic patterns applied to transposable values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

__all__ = [
    "Transposable",
    "Pattern",
    "ScaleType",
    "ScalePattern",
    "Pitch",
    "Interval",
    "Octave",
    "Scale",
    "MajorScaleType",
    "MajorScalePattern",
]

_SEMITONES_PER_OCTAVE = 12


def _check_int(name: str, value: Any, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


class Transposable(ABC):
    """Something that can be shifted by a distance."""

    @abstractmethod
    def transpose(self, other: Any) -> Any:
        """Return this value shifted by ``other``."""


class Pattern:
    """A fixed sequence of distances, applied to a root one by one."""

    PATTERN: ClassVar[tuple[Any, ...]] = ()

    def apply(self, root: Transposable) -> list[Any]:
        """Transpose ``root`` by every distance of the pattern, in order."""
        return [root.transpose(distance) for distance in self.PATTERN]


class ScaleType:
    """A kind of scale, identified by its name."""

    name: ClassVar[str] = ""


class ScalePattern(Pattern):
    """A pattern of intervals that builds a scale of a given type."""

    scale_type: ClassVar[type[ScaleType]] = ScaleType

    def to_scale(self, root: Pitch) -> Scale:
        """Build the scale that starts on ``root``."""
        return Scale(self.apply(root), self.scale_type)


@dataclass(frozen=True, order=True, repr=False)
class Interval:
    """A distance in semitones (0-255)."""

    semitones: int

    def __post_init__(self) -> None:
        _check_int("interval semitones", self.semitones, 0, 255)

    def __repr__(self) -> str:
        return f"Interval({self.semitones})"


@dataclass(frozen=True, order=True, repr=False)
class Octave:
    """A distance in whole octaves (-128 to 127)."""

    value: int

    def __post_init__(self) -> None:
        _check_int("octave value", self.value, -128, 127)

    def __repr__(self) -> str:
        return f"Octave({self.value})"


@dataclass(frozen=True, order=True, repr=False)
class Pitch(Transposable):
    """A pitch as a MIDI-style semitone number (0-255)."""

    semitones: int

    def __post_init__(self) -> None:
        _check_int("pitch semitones", self.semitones, 0, 255)

    def transpose(self, other: Interval | Octave) -> Pitch:
        """Shift by an interval, or by a number of octaves."""
        if isinstance(other, Interval):
            return Pitch(self.semitones + other.semitones)
        if isinstance(other, Octave):
            return Pitch(self.semitones + other.value * _SEMITONES_PER_OCTAVE)
        raise TypeError(f"cannot transpose a pitch by {type(other).__name__}")

    def __repr__(self) -> str:
        return f"Pitch({self.semitones})"


@dataclass(frozen=True)
class Scale:
    """A sequence of pitches together with the type of scale they form."""

    pitches: tuple[Pitch, ...]
    scale_type: type[ScaleType]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pitches", tuple(self.pitches))

    def root(self) -> Pitch:
        """The first pitch of the scale."""
        return self.pitches[0]

    def name(self) -> str:
        """The root followed by the scale type's name."""
        return f"{self.root()!r} {self.scale_type.name}"


class MajorScaleType(ScaleType):
    name = "major"


class MajorScalePattern(ScalePattern):
    PATTERN = (
        Interval(0),
        Interval(2),
        Interval(4),
        Interval(5),
        Interval(7),
        Interval(9),
        Interval(11),
    )
    scale_type = MajorScaleType