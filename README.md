# mozzart

A small music theory library built on MIDI note numbers. It has no
dependencies outside the standard library. The `test` extra installs pytest
and hypothesis for running the test suite.

## Modules

- `mozzart.interval`: `Interval`, a distance between pitches in semitones
  (0 to 255), and the constants `PERFECT_UNISON`, `MINOR_SECOND`,
  `MAJOR_SECOND`, `MINOR_THIRD`, `MAJOR_THIRD`, `PERFECT_FOURTH`,
  `DIMINISHED_FIFTH`, `PERFECT_FIFTH`, `MINOR_SIXTH`, `MAJOR_SIXTH`,
  `MINOR_SEVENTH`, `MAJOR_SEVENTH` and `PERFECT_OCTAVE`.
- `mozzart.octave`: `Octave`, an octave number, with the constants `OC`
  (octave -1) and `O0` to `O9`, the tuple `OCTAVES`, and
  `SEMITONES_PER_OCTAVE` (12).
- `mozzart.pitch`: `Pitch`, a pitch given by its MIDI note number (0 to 255;
  middle C, `C4`, is 60), and named constants for every pitch class and every
  pitch in octaves 0 to 9.
- `mozzart.scale`: `ScaleType`, `ScalePattern` and `Scale`.
- `mozzart.scales`: ready-made scale types and patterns.
- `mozzart.chord`: `ChordType` and `ChordPattern`, for describing chords as
  interval patterns above a root.
- `mozzart.ply`: a separate, self-contained set of generic classes for
  applying patterns to anything that can be transposed.

## Pitches

```python
from mozzart.interval import MAJOR_THIRD, PERFECT_OCTAVE
from mozzart.octave import O5
from mozzart.pitch import C, C4, C5, E4, FSHARP5

C4.semitones                       # 60
C4.transpose(MAJOR_THIRD) == E4    # True
C4.transpose(PERFECT_OCTAVE) == C5 # True
C4.octave()                        # Octave(value=4)
C4.canonical() == C                # True
C4.with_octave(O5) == C5           # True
C.from_canonical(O5) == C5         # True
str(C4), str(FSHARP5), str(C)      # ('C4', 'F#5', 'C')
C4.apply_pattern([MAJOR_THIRD])    # [Pitch(semitones=64)]
```

A pitch's octave is `semitones // 12 - 1` and its canonical form (pitch
class) is `semitones % 12`. A pitch from 0 to 11 is canonical and prints
without an octave number; names always use sharps (`C#`, `D#`, `F#`, `G#`,
`A#`). The flat constants (`DFLAT4`, `EFLAT4`, …) are the same objects as the
matching sharps.

`Pitch.from_canonical` and `Octave.to_pitch` raise `ValueError` when given a
pitch that is not canonical. Creating a `Pitch` or `Interval` outside 0–255,
including by transposing past 255, raises `ValueError`; a non-integer value
raises `TypeError`.

## Octaves

```python
from mozzart.octave import O4, OC
from mozzart.pitch import C, C1

OC.is_canonical()       # True  (only negative octaves are canonical)
O4.is_canonical()       # False
O4.to_pitch(C)          # C4
O4.update_octave(C1)    # C4
O4.pitches()            # [C4, C#4, ..., B4] as Pitch objects
str(O4)                 # '4'
```

Octaves compare and sort by their number.

## Scales

A `ScalePattern` subclass holds a tuple of intervals above the root in
`PATTERN` and a `ScaleType` subclass in `scale_type`. Calling `apply` on an
instance gives a `Scale`:

```python
from mozzart.pitch import C4
from mozzart.scales import MajorScalePattern

scale = MajorScalePattern().apply(C4)
[str(p) for p in scale.pitches]   # ['C4', 'D4', 'E4', 'F4', 'G4', 'A4', 'B4']
scale.root()                      # C4
scale.name()                      # 'major'
str(scale)                        # 'C4 major'
```

`Scale.root()` raises `IndexError` for a scale with no pitches.

`mozzart.scales` provides these patterns, each with its own scale type:

| Pattern                        | Name               | Intervals                  |
|--------------------------------|--------------------|----------------------------|
| `MajorScalePattern`            | major              | P1 M2 M3 P4 P5 M6 M7       |
| `NaturalMinorScalePattern`     | natural minor      | P1 M2 m3 P4 P5 m6 m7       |
| `HarmonicMinorScalePattern`    | harmonic minor     | P1 M2 m3 P4 P5 m6 M7       |
| `MelodicMinorScalePattern`     | melodic minor      | P1 M2 m3 P4 P5 M6 M7       |
| `HarmonicMajorScalePattern`    | harmonic major     | P1 M2 M3 P4 P5 m6 M7       |
| `BluesScalePattern`            | blues              | P1 m3 P4 d5 P5 m7          |
| `PentatonicMajorScalePattern`  | pentatonic major   | P1 M2 M3 P5 M6             |
| `PentatonicMinorScalePattern`  | pentatonic minor   | P1 m3 P4 P5 m7             |

The melodic minor pattern is its ascending form.

## Chords

`ChordPattern` is a base class: define `PATTERN` (and, if wanted,
`chord_type`) in a subclass, then `apply` returns the chord's pitches in
pattern order.

```python
from mozzart.chord import ChordPattern, ChordType
from mozzart.interval import MAJOR_THIRD, PERFECT_FIFTH, PERFECT_UNISON
from mozzart.pitch import C4

class MajorTriad(ChordType):
    pass

class MajorTriadPattern(ChordPattern):
    PATTERN = (PERFECT_UNISON, MAJOR_THIRD, PERFECT_FIFTH)
    chord_type = MajorTriad

MajorTriadPattern().apply(C4)   # [C4, E4, G4] as Pitch objects
```

## `mozzart.ply`

A standalone module with its own `Pitch`, `Interval`, `Octave`, `Scale`,
`ScaleType` and pattern classes. A `Pattern` transposes any `Transposable`
root by each entry of its `PATTERN`. Here a `Pitch` can be transposed by an
`Interval` or by a whole number of octaves:

```python
from mozzart.ply import Interval, MajorScalePattern, Octave, Pitch

Pitch(60).transpose(Interval(7))    # Pitch(67)
Pitch(60).transpose(Octave(1))      # Pitch(72)

scale = MajorScalePattern().to_scale(Pitch(60))
scale.root()                        # Pitch(60)
scale.name()                        # 'Pitch(60) major'
```

Its classes are not interchangeable with those of the other modules.

## What it does not do

This is a library of values and patterns only. It has no command-line
tool, plays and records no audio, and reads and writes no MIDI or other
files. It offers no ready-made chord patterns: `mozzart.chord` gives only the
base classes for defining them.