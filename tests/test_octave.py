import pytest

from mozzart.octave import (
    O0,
    O4,
    O9,
    OC,
    OCTAVES,
    SEMITONES_PER_OCTAVE,
    Octave,
)
from mozzart.pitch import Pitch


def test_octaves():
    for i, octave in enumerate(OCTAVES):
        assert Octave(i - 1) == octave
        assert octave.value == i - 1
        assert Octave(i - 1).is_canonical() == (i == 0)


def test_octave_values():
    assert Octave(-1).value == OC.value == -1
    assert Octave(0).value == O0.value == 0
    assert Octave(4).value == O4.value == 4
    assert Octave(9).value == O9.value == 9


def test_is_canonical():
    assert not O4.is_canonical()
    assert OC.is_canonical()
    assert not O0.is_canonical()


def test_constructed_octave_equals_constant():
    assert Octave(4) == O4
    assert Octave(-1) == OC


def test_ordering():
    assert sorted(reversed(OCTAVES)) == list(OCTAVES)
    assert OC < O0 < O4 < O9
    assert Octave(-1) < Octave(0) < Octave(9)


def test_display():
    assert str(OC) == "-1"
    assert str(O4) == "4"
    assert str(Octave(9)) == "9"


def test_update_octave():
    assert O4.update_octave(Pitch(24)) == Pitch(60)


def test_to_pitch():
    assert O4.to_pitch(Pitch(0)) == Pitch(60)
    assert O0.to_pitch(Pitch(0)) == Pitch(12)


def test_to_pitch_rejects_non_canonical():
    with pytest.raises(ValueError):
        O4.to_pitch(Pitch(60))


def test_pitches():
    pitches = O4.pitches()
    assert len(pitches) == SEMITONES_PER_OCTAVE
    assert pitches[0] == Pitch(60)
    assert pitches[11] == Pitch(71)


@pytest.mark.parametrize("octave", OCTAVES)
def test_pitches_belong_to_octave(octave):
    pitches = octave.pitches()
    assert all(p.octave() == octave for p in pitches)
    assert [p.canonical() for p in pitches] == [
        Pitch(n) for n in range(SEMITONES_PER_OCTAVE)
    ]


@pytest.mark.parametrize("value", [-129, 128])
def test_out_of_range_rejected(value):
    with pytest.raises(ValueError):
        Octave(value)


def test_non_int_rejected():
    with pytest.raises(TypeError):
        Octave("4")