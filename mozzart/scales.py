"""Ready-made scale types and patterns: heptatonic, hexatonic and pentatonic."""

from __future__ import annotations

from .interval import (
    DIMINISHED_FIFTH,
    MAJOR_SECOND,
    MAJOR_SEVENTH,
    MAJOR_SIXTH,
    MAJOR_THIRD,
    MINOR_SEVENTH,
    MINOR_SIXTH,
    MINOR_THIRD,
    PERFECT_FIFTH,
    PERFECT_FOURTH,
    PERFECT_UNISON,
)
from .scale import ScalePattern, ScaleType

__all__ = [
    "HarmonicMajorScaleType",
    "HarmonicMajorScalePattern",
    "HarmonicMinorScaleType",
    "HarmonicMinorScalePattern",
    "MajorScaleType",
    "MajorScalePattern",
    "MelodicMinorScaleType",
    "MelodicMinorScalePattern",
    "NaturalMinorScaleType",
    "NaturalMinorScalePattern",
    "BluesScaleType",
    "BluesScalePattern",
    "PentatonicMajorScaleType",
    "PentatonicMajorScalePattern",
    "PentatonicMinorScaleType",
    "PentatonicMinorScalePattern",
]


class HarmonicMajorScaleType(ScaleType):
    """The harmonic major scale: a major scale with a lowered sixth."""

    name = "harmonic major"


class HarmonicMajorScalePattern(ScalePattern):
    """Root, M2, M3, P4, P5, m6, M7."""

    PATTERN = (
        PERFECT_UNISON,
        MAJOR_SECOND,
        MAJOR_THIRD,
        PERFECT_FOURTH,
        PERFECT_FIFTH,
        MINOR_SIXTH,
        MAJOR_SEVENTH,
    )
    scale_type = HarmonicMajorScaleType


class HarmonicMinorScaleType(ScaleType):
    """The harmonic minor scale: a natural minor scale with a raised seventh."""

    name = "harmonic minor"


class HarmonicMinorScalePattern(ScalePattern):
    """Root, M2, m3, P4, P5, m6, M7."""

    PATTERN = (
        PERFECT_UNISON,
        MAJOR_SECOND,
        MINOR_THIRD,
        PERFECT_FOURTH,
        PERFECT_FIFTH,
        MINOR_SIXTH,
        MAJOR_SEVENTH,
    )
    scale_type = HarmonicMinorScaleType


class MajorScaleType(ScaleType):
    """The major scale."""

    name = "major"


class MajorScalePattern(ScalePattern):
    """Root, M2, M3, P4, P5, M6, M7."""

    PATTERN = (
        PERFECT_UNISON,
        MAJOR_SECOND,
        MAJOR_THIRD,
        PERFECT_FOURTH,
        PERFECT_FIFTH,
        MAJOR_SIXTH,
        MAJOR_SEVENTH,
    )
    scale_type = MajorScaleType


class MelodicMinorScaleType(ScaleType):
    """The melodic minor scale, in its ascending form."""

    name = "melodic minor"


class MelodicMinorScalePattern(ScalePattern):
    """Root, M2, m3, P4, P5, M6, M7."""

    PATTERN = (
        PERFECT_UNISON,
        MAJOR_SECOND,
        MINOR_THIRD,
        PERFECT_FOURTH,
        PERFECT_FIFTH,
        MAJOR_SIXTH,
        MAJOR_SEVENTH,
    )
    scale_type = MelodicMinorScaleType


class NaturalMinorScaleType(ScaleType):
    """The natural minor scale."""

    name = "natural minor"


class NaturalMinorScalePattern(ScalePattern):
    """Root, M2, m3, P4, P5, m6, m7."""

    PATTERN = (
        PERFECT_UNISON,
        MAJOR_SECOND,
        MINOR_THIRD,
        PERFECT_FOURTH,
        PERFECT_FIFTH,
        MINOR_SIXTH,
        MINOR_SEVENTH,
    )
    scale_type = NaturalMinorScaleType


class BluesScaleType(ScaleType):
    """The six-note blues scale."""

    name = "blues"


class BluesScalePattern(ScalePattern):
    """Root, m3, P4, d5, P5, m7."""

    PATTERN = (
        PERFECT_UNISON,
        MINOR_THIRD,
        PERFECT_FOURTH,
        DIMINISHED_FIFTH,
        PERFECT_FIFTH,
        MINOR_SEVENTH,
    )
    scale_type = BluesScaleType


class PentatonicMajorScaleType(ScaleType):
    """The major pentatonic scale."""

    name = "pentatonic major"


class PentatonicMajorScalePattern(ScalePattern):
    """Root, M2, M3, P5, M6."""

    PATTERN = (
        PERFECT_UNISON,
        MAJOR_SECOND,
        MAJOR_THIRD,
        PERFECT_FIFTH,
        MAJOR_SIXTH,
    )
    scale_type = PentatonicMajorScaleType


class PentatonicMinorScaleType(ScaleType):
    """The minor pentatonic scale."""

    name = "pentatonic minor"


class PentatonicMinorScalePattern(ScalePattern):
    """Root, m3, P4, P5, m7."""

    PATTERN = (
        PERFECT_UNISON,
        MINOR_THIRD,
        PERFECT_FOURTH,
        PERFECT_FIFTH,
        MINOR_SEVENTH,
    )
    scale_type = PentatonicMinorScaleType