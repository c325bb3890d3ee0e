import io

import pytest

from heavens_stdout.talk import TYPING_SPEED, Typewriter, type_out


def test_typewriter_yields_every_character_in_order():
    assert list(Typewriter("abc")) == ["a", "b", "c"]


def test_typewriter_joined_round_trip():
    text = "Hello there, mortal."
    assert "".join(Typewriter(text, 7)) == text
    assert len(Typewriter(text, 7)) == len(text)


def test_typewriter_interval_follows_speed():
    assert Typewriter("x", 4).interval == pytest.approx(0.25)
    assert Typewriter("x").interval == pytest.approx(1 / TYPING_SPEED)


@pytest.mark.parametrize("speed", [0, -3])
def test_typewriter_rejects_non_positive_speed(speed):
    with pytest.raises(ValueError):
        Typewriter("x", speed)


def test_type_out_writes_whole_text_and_sleeps_per_character():
    stream = io.StringIO()
    delays = []
    type_out("god", stream, 10, delays.append)
    assert stream.getvalue() == "god"
    assert delays == [pytest.approx(0.1)] * 3


def test_type_out_empty_text_does_nothing():
    stream = io.StringIO()
    delays = []
    type_out("", stream, sleep=delays.append)
    assert stream.getvalue() == ""
    assert delays == []


def test_type_out_rejects_bad_speed():
    with pytest.raises(ValueError):
        type_out("x", io.StringIO(), 0, lambda _: None)