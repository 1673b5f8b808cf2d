import datetime as dt
from dataclasses import dataclass

import pytest

from should.equal import equal, not_equal, report
from should.errors import AssertionFailure, ExpectedCountInvalid, ShouldError

OK = "ok"
MAX_UINT64 = 2**64 - 1


def outcome(call):
    try:
        call()
    except ShouldError as err:
        return type(err)
    return OK


@dataclass
class HasA:
    A: str = ""


@dataclass
class HasB:
    B: str = ""


def returns_none():
    return None


NOW = dt.datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=dt.timezone.utc)


@pytest.mark.parametrize("expected", [(), ("EXPECTED", "EXTRA")])
def test_equal_expected_count_invalid(expected):
    assert outcome(lambda: equal("actual", *expected)) is ExpectedCountInvalid


@pytest.mark.parametrize(
    "actual, expected, result",
    [
        (1, 2, AssertionFailure),
        (1, 1, OK),
        (1, 1.0, OK),
        (NOW.astimezone(dt.timezone.utc), NOW.astimezone(), OK),
        (NOW, NOW + dt.timedelta(microseconds=1), AssertionFailure),
        (HasA(), HasB(), AssertionFailure),
        (HasA(), HasA(), OK),
        (b"hi", b"bye", AssertionFailure),
        (b"hi", b"hi", OK),
        (-1, MAX_UINT64, AssertionFailure),
        (MAX_UINT64, -1, AssertionFailure),
        (returns_none(), None, OK),
        ([1], (1,), AssertionFailure),
        (True, 1, AssertionFailure),
    ],
)
def test_equal(actual, expected, result):
    assert outcome(lambda: equal(actual, expected)) == result


@pytest.mark.parametrize("expected", [(), ("EXPECTED", "EXTRA")])
def test_not_equal_expected_count_invalid(expected):
    assert outcome(lambda: not_equal("actual", *expected)) is ExpectedCountInvalid


def test_not_equal_fails_on_equal_values():
    with pytest.raises(AssertionFailure, match="to not equal: 1"):
        not_equal(1, 1)


def test_not_equal_passes_on_different_values():
    assert not_equal(1, 2) is None


def test_equal_failure_carries_report():
    with pytest.raises(AssertionFailure) as info:
        equal(1, 2)
    assert "Expected: (int) 2\nActual:   (int) 1" in str(info.value)


def test_report_same_types():
    assert report(1, 2) == (
        "\nExpected: (int) 2\nActual:   (int) 1\n" + " " * 16 + "^"
    )


def test_report_pads_types():
    assert report(1, 1.5) == (
        "\nExpected: (float) 1.5\n"
        "Actual:   (int)   1\n"
        "           ^^^^^^  "
    )