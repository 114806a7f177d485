"""Music theory building blocks: pitches, intervals, octaves, scales and chords."""

__version__ = "0.1.0"

__all__ = ["chord", "interval", "octave", "pitch", "ply", "scale", "scales"]