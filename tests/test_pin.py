"""Tests for pin construction, validation and value semantics."""

import pytest

from pinlayout.core import (
    BothEdges,
    EndAndSize,
    Fill,
    Inset,
    PinError,
    SizeAndMiddle,
    Span,
    StartAndSize,
    pin,
    resolve_span,
)


@pytest.mark.parametrize(
    "kwargs,expected",
    [
        ({"start": 20, "end": 30}, BothEdges(Inset(20), Inset(30))),
        ({"start_fraction": 0.15, "end_fraction": 0.2}, BothEdges(Inset(0.15, True), Inset(0.2, True))),
        ({"start": 5, "end_fraction": 0.5}, BothEdges(Inset(5), Inset(0.5, True))),
        ({"start_fraction": 0.3, "size": 70}, StartAndSize(Inset(0.3, True), 70)),
        ({"start": 10, "size": 40}, StartAndSize(Inset(10), 40)),
        ({"end": 10, "size": 30}, EndAndSize(Inset(10), 30)),
        ({"end_fraction": 0.25, "size": 30}, EndAndSize(Inset(0.25, True), 30)),
        ({"size": 80, "middle": 0.5}, SizeAndMiddle(80, 0.5)),
        ({}, Fill()),
    ],
)
def test_pin_builds_matching_variant(kwargs, expected):
    """Test that each legal field combination maps to its variant."""
    assert pin(**kwargs) == expected


@pytest.mark.parametrize(
    "kwargs,expected",
    [
        ({"start": 20}, Fill(start=Inset(20))),
        ({"end_fraction": 0.4}, Fill(end=Inset(0.4, True))),
        ({"size": 50}, Fill(size=50)),
    ],
)
def test_incomplete_pin_fills(kwargs, expected):
    """Test that legal but incomplete combinations fill the axis and keep their values."""
    p = pin(**kwargs)
    assert p == expected
    assert p != Fill()
    assert resolve_span(p, 200) == Span(0, 200)
    for key, value in kwargs.items():
        assert p.fields()[key] == value


def test_incomplete_pins_stay_distinct():
    assert pin(start=20) != pin(end=5)
    assert pin(start=20) != pin(start_fraction=20)
    assert len({pin(start=20), pin(start=20), pin(size=20)}) == 2


def test_incomplete_pin_repr_keeps_values():
    text = repr(pin(start=20))
    assert "start: 20" in text
    assert "size: None" in text


@pytest.mark.parametrize(
    "kwargs,message",
    [
        ({"start": 10, "start_fraction": 0.1}, "start and start_fraction"),
        ({"end": 10, "end_fraction": 0.1}, "end and end_fraction"),
        ({"middle": 0.5}, "size value is required"),
        ({"size": 10, "middle": 0.5, "start": 5}, "Only a size value"),
        ({"size": 10, "middle": 0.5, "end_fraction": 0.1}, "Only a size value"),
        ({"size": 10, "start": 5, "end": 5}, "both start and end"),
        ({"size": 10, "start_fraction": 0.1, "end": 5}, "both start and end"),
    ],
)
def test_forbidden_combinations_raise(kwargs, message):
    """Test that every forbidden combination fails at construction."""
    with pytest.raises(PinError, match=message):
        pin(**kwargs)


def test_pin_error_is_value_error():
    with pytest.raises(ValueError):
        pin(start=1, start_fraction=0.1)


def test_structural_equality_and_hash():
    """Test that equal pins compare and hash equal."""
    a = pin(start=20, end=30)
    b = pin(start=20, end=30)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_absolute_and_fraction_insets_differ():
    assert pin(start=0.5, size=10) != pin(start_fraction=0.5, size=10)
    assert pin(start=20, end=30) != pin(start=30, end=20)


def test_pins_are_immutable():
    p = pin(size=80, middle=0.5)
    with pytest.raises(AttributeError):
        p.size = 10


def test_inset_resolve():
    assert Inset.absolute(20).resolve(200) == 20
    assert Inset.relative(0.25).resolve(200) == pytest.approx(50)


def test_fields_view():
    """Test the six-field view used for diagnostics."""
    assert pin(start_fraction=0.3, size=70).fields() == {
        "start": None,
        "start_fraction": 0.3,
        "end": None,
        "end_fraction": None,
        "size": 70,
        "middle": None,
    }
    assert set(Fill().fields().values()) == {None}


def test_repr_lists_fields():
    text = repr(pin(start=20, end=30))
    assert text.startswith("Pin(")
    assert "start: 20" in text
    assert "end: 30" in text
    assert "middle: None" in text
