"""Scale types, scale patterns and the scales they produce."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .interval import Interval
from .pitch import Pitch

__all__ = ["ScaleType", "ScalePattern", "Scale"]


class ScaleType:
    """A kind of scale, identified by its name."""

    name: ClassVar[str] = ""


@dataclass(frozen=True)
class Scale:
    """A sequence of pitches together with the type of scale they form."""

    pitches: tuple[Pitch, ...]
    scale_type: type[ScaleType]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pitches", tuple(self.pitches))

    def root(self) -> Pitch:
        """The first pitch of the scale."""
        if not self.pitches:
            raise IndexError("scale has no pitches")
        return self.pitches[0]

    def name(self) -> str:
        """The name of the scale's type."""
        return self.scale_type.name

    def __str__(self) -> str:
        return f"{self.root()} {self.name()}"


class ScalePattern:
    """The intervals above a root that make up a scale of a given type."""

    PATTERN: ClassVar[tuple[Interval, ...]] = ()
    scale_type: ClassVar[type[ScaleType]] = ScaleType

    def apply(self, root: Pitch) -> Scale:
        """Build the scale that this pattern gives from ``root``."""
        return Scale(tuple(root.apply_pattern(self.PATTERN)), self.scale_type)