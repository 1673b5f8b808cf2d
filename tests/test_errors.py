import datetime as dt
import queue

import pytest

from should.errors import (
    AssertionFailure,
    ExpectedCountInvalid,
    Kind,
    KindMismatch,
    TypeMismatch,
    failure,
    is_float,
    is_integer,
    is_numeric,
    is_time,
    kind_of,
    validate_expected,
    validate_kind,
    validate_type,
)

MOMENT = dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc)


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, Kind.NONE),
        (True, Kind.BOOL),
        (3, Kind.INT),
        (2.5, Kind.FLOAT),
        ("s", Kind.STRING),
        (b"x", Kind.BYTES),
        ([1], Kind.SEQUENCE),
        ((1,), Kind.SEQUENCE),
        ({}, Kind.MAPPING),
        ({1}, Kind.SET),
        (queue.Queue(), Kind.QUEUE),
        (len, Kind.CALLABLE),
        (MOMENT, Kind.TIME),
        (dt.timedelta(seconds=1), Kind.DURATION),
        (object(), Kind.OTHER),
    ],
)
def test_kind_of(value, kind):
    assert kind_of(value) is kind


@pytest.mark.parametrize(
    "value, numeric, integer, floating, time",
    [
        (1, True, True, False, False),
        (1.5, True, False, True, False),
        (True, False, False, False, False),
        ("1", False, False, False, False),
        (MOMENT, False, False, False, True),
        (None, False, False, False, False),
    ],
)
def test_predicates(value, numeric, integer, floating, time):
    assert (is_numeric(value), is_integer(value), is_float(value), is_time(value)) == (
        numeric,
        integer,
        floating,
        time,
    )


def test_validate_expected_plural_message():
    with pytest.raises(ExpectedCountInvalid) as info:
        validate_expected(1, ("a", "b"))
    assert str(info.value) == "expected count invalid: got 2 values, want 1"


def test_validate_expected_singular_message():
    with pytest.raises(ExpectedCountInvalid) as info:
        validate_expected(0, ("a",))
    assert str(info.value) == "expected count invalid: got 1 value, want 0"


def test_validate_type_message():
    with pytest.raises(TypeMismatch) as info:
        validate_type(1, bool)
    assert str(info.value) == "type mismatch: got int, want bool"


def test_validate_type_tuple_message():
    with pytest.raises(TypeMismatch) as info:
        validate_type("x", (list, tuple))
    assert info.value.message == "got str, want list or tuple"


def test_validate_kind_message():
    with pytest.raises(KindMismatch) as info:
        validate_kind(42, [Kind.STRING, Kind.SEQUENCE])
    assert info.value.message == "got int, want one of [string, sequence]"


def test_assertion_failure_is_an_assertion_error():
    err = AssertionFailure("x")
    assert isinstance(err, AssertionError)
    assert str(err) == "assertion failure: x"
    assert err.message == "x"


def test_failure_includes_test_frames():
    err = failure("boom")
    text = str(err)
    assert text.startswith("assertion failure: boom\nStack: (filtered)\n> ")
    assert "test_errors.py" in text
    assert err.message.startswith("boom")