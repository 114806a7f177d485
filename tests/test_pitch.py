import pytest
from hypothesis import given
from hypothesis import strategies as st

from mozzart import pitch as p
from mozzart.interval import (
    DIMINISHED_FIFTH,
    MAJOR_SECOND,
    MAJOR_SEVENTH,
    MAJOR_SIXTH,
    MAJOR_THIRD,
    MINOR_THIRD,
    PERFECT_FIFTH,
    PERFECT_FOURTH,
    PERFECT_OCTAVE,
    PERFECT_UNISON,
)
from mozzart.octave import (
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
    OC,
    SEMITONES_PER_OCTAVE,
    Octave,
)
from mozzart.pitch import Pitch

OCTAVE_FOUR = [
    p.C4, p.CSHARP4, p.D4, p.DSHARP4, p.E4, p.F4,
    p.FSHARP4, p.G4, p.GSHARP4, p.A4, p.ASHARP4, p.B4,
]
OCTAVE_FIVE = [
    p.C5, p.CSHARP5, p.D5, p.DSHARP5, p.E5, p.F5,
    p.FSHARP5, p.G5, p.GSHARP5, p.A5, p.ASHARP5, p.B5,
]
INTERVALS = [
    PERFECT_UNISON, MAJOR_SECOND, MAJOR_THIRD, PERFECT_FOURTH,
    PERFECT_FIFTH, MAJOR_SIXTH, MAJOR_SEVENTH, PERFECT_OCTAVE,
]


@given(st.sampled_from(OCTAVE_FOUR + OCTAVE_FIVE))
def test_pitch_semitones_roundtrip(pitch):
    assert Pitch(pitch.semitones) == pitch


@given(
    st.sampled_from(OCTAVE_FOUR),
    st.sampled_from(INTERVALS),
    st.sampled_from(INTERVALS),
)
def test_pitch_transposition_commutative(pitch, first, second):
    forward = pitch.transpose(first).transpose(second)
    assert forward == pitch.transpose(second).transpose(first)
    assert forward == Pitch(pitch.semitones + first.semitones + second.semitones)


@given(st.sampled_from(OCTAVE_FOUR))
def test_pitch_transposition_associative(pitch):
    assert pitch.transpose(MAJOR_SECOND).transpose(MAJOR_THIRD) == pitch.transpose(
        DIMINISHED_FIFTH
    )
    assert pitch.transpose(MAJOR_THIRD).transpose(PERFECT_FOURTH) == pitch.transpose(
        MAJOR_SIXTH
    )
    assert pitch.transpose(DIMINISHED_FIFTH) == Pitch(pitch.semitones + 6)


@given(st.sampled_from(OCTAVE_FOUR))
def test_pitch_canonical_form(pitch):
    canonical = pitch.canonical()
    assert canonical.is_canonical()
    assert canonical == Pitch(pitch.semitones % SEMITONES_PER_OCTAVE)
    assert (
        canonical.semitones % SEMITONES_PER_OCTAVE
        == pitch.semitones % SEMITONES_PER_OCTAVE
    )


@given(st.sampled_from(OCTAVE_FOUR), st.sampled_from(INTERVALS))
def test_pitch_transposition_bounds(pitch, interval):
    transposed = pitch.transpose(interval)
    assert transposed.semitones <= 127
    assert transposed <= Pitch(127)


@pytest.mark.parametrize(
    "pitches, octave",
    [
        (p.PITCHES, OC),
        (p.PITCHES0, O0),
        (p.PITCHES1, O1),
        (p.PITCHES2, O2),
        (p.PITCHES3, O3),
        (p.PITCHES4, O4),
        (p.PITCHES5, O5),
        (p.PITCHES6, O6),
        (p.PITCHES7, O7),
        (p.PITCHES8, O8),
        (p.PITCHES9, O9),
    ],
)
def test_all_pitches(pitches, octave):
    assert len(pitches) == SEMITONES_PER_OCTAVE
    for index, pitch in enumerate(pitches):
        assert pitch.canonical().semitones == index
        assert pitch.octave() == octave
        assert pitch.is_canonical() == octave.is_canonical()


def test_transpose():
    assert p.C.transpose(PERFECT_UNISON) == p.C
    assert p.C.transpose(MAJOR_SECOND) == p.D
    assert p.C.transpose(MINOR_THIRD) == p.EFLAT
    assert p.C.transpose(PERFECT_FOURTH) == p.F


@pytest.mark.parametrize(
    "pitch, text",
    [
        (p.C, "C"), (p.CSHARP, "C#"), (p.D, "D"), (p.DSHARP, "D#"),
        (p.E, "E"), (p.F, "F"), (p.FSHARP, "F#"), (p.G, "G"),
        (p.GSHARP, "G#"), (p.A, "A"), (p.ASHARP, "A#"), (p.B, "B"),
        (p.C4, "C4"), (p.CSHARP4, "C#4"), (p.D4, "D4"), (p.DSHARP4, "D#4"),
        (p.E4, "E4"), (p.F4, "F4"), (p.FSHARP4, "F#4"), (p.G4, "G4"),
        (p.GSHARP4, "G#4"), (p.A4, "A4"), (p.ASHARP4, "A#4"), (p.B4, "B4"),
    ],
)
def test_display(pitch, text):
    assert str(pitch) == text


def test_from_canonical():
    assert p.C.from_canonical(O4) == p.C4
    assert p.CSHARP.from_canonical(O4) == p.CSHARP4
    assert p.D.from_canonical(O5) == p.D5
    assert p.DSHARP.from_canonical(O6) == p.DSHARP6


def test_from_canonical_rejects_non_canonical():
    with pytest.raises(ValueError):
        p.C4.from_canonical(O5)


def test_with_octave():
    assert p.C1.with_octave(O4) == p.C4
    assert p.CSHARP2.with_octave(O5) == p.CSHARP5
    assert p.D3.with_octave(O6) == p.D6
    assert p.DSHARP4.with_octave(O7) == p.DSHARP7


def test_with_octave_below_lowest_fails():
    with pytest.raises(ValueError):
        p.C.with_octave(Octave(-2))


def test_apply_pattern():
    assert p.C4.apply_pattern([MAJOR_SECOND, PERFECT_FOURTH]) == [p.D4, p.F4]


def test_apply_pattern_accepts_generator():
    assert p.C4.apply_pattern(i for i in (MAJOR_THIRD, PERFECT_FIFTH)) == [p.E4, p.G4]


def test_benchmark_operations():
    assert p.C4.semitones == 60
    assert p.C4.canonical() == p.C
    assert p.C4.is_canonical() is False
    assert p.C4.octave() == O4
    assert p.C4.transpose(PERFECT_FIFTH) == p.G4
    assert p.C4.transpose(MAJOR_THIRD) == p.E4
    assert p.C4.transpose(PERFECT_OCTAVE) == p.C5


def test_known_midi_numbers():
    assert p.A4 == Pitch(69)
    assert p.C0 == Pitch(12)
    assert p.G9 == Pitch(127)
    assert Pitch(69).semitones == p.A4.semitones == 69


def test_enharmonic_aliases():
    assert p.DFLAT4 == p.CSHARP4 == Pitch(61)
    assert p.EFLAT4 == p.DSHARP4 == Pitch(63)
    assert p.GFLAT4 == p.FSHARP4 == Pitch(66)
    assert p.AFLAT4 == p.GSHARP4 == Pitch(68)
    assert p.BFLAT4 == p.ASHARP4 == Pitch(70)


def test_melody_transposition():
    melody = [p.C4, p.E4, p.G4, p.C5]
    transposed = [n.transpose(PERFECT_FIFTH) for n in melody]
    assert transposed == [p.G4, p.B4, p.D5, p.G5]
    assert transposed == [Pitch(67), Pitch(71), Pitch(74), Pitch(79)]


def test_ordering():
    assert p.C4 < p.D4 < p.C5
    assert Pitch(60) < Pitch(62) < Pitch(72)
    assert sorted([Pitch(67), Pitch(60), Pitch(64)]) == [p.C4, p.E4, p.G4]


def test_transpose_overflow_raises():
    with pytest.raises(ValueError):
        Pitch(250).transpose(PERFECT_OCTAVE)


@pytest.mark.parametrize("value", [-1, 256])
def test_out_of_range_semitones(value):
    with pytest.raises(ValueError):
        Pitch(value)


@pytest.mark.parametrize("value", [1.5, "60", True])
def test_non_int_semitones(value):
    with pytest.raises(TypeError):
        Pitch(value)