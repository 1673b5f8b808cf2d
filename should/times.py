"""Assertions on datetime values: before, after, on and within a tolerance."""

from __future__ import annotations

import datetime as _dt

from .equal import equal
from .errors import AssertionFailure, failure, validate_expected, validate_type
from .ordering import be_greater_than, be_less_than


def _validate_pair(actual, args) -> None:
    validate_expected(1, args)
    validate_type(actual, _dt.datetime)
    validate_type(args[0], _dt.datetime)


def happen_after(actual, *args) -> None:
    """Assert that the datetime *actual* is later than the expected datetime."""
    _validate_pair(actual, args)
    be_greater_than(actual, args[0])


def happen_before(actual, *args) -> None:
    """Assert that the datetime *actual* is earlier than the expected datetime."""
    _validate_pair(actual, args)
    be_less_than(actual, args[0])


def happen_on(actual, *args) -> None:
    """Assert that *actual* and the expected datetime denote the same instant."""
    _validate_pair(actual, args)
    equal(actual, *args)


def not_happen_on(actual, *args) -> None:
    """Assert that *actual* and the expected datetime denote different instants."""
    try:
        happen_on(actual, *args)
    except AssertionFailure:
        return
    raise failure(
        "\n"
        f"  expected:     {args[0]!r}\n"
        f"  to not equal: {actual!r}\n"
        "  (but it did)"
    )


def happen_within(actual, *args) -> None:
    """Assert that *actual* lies within a timedelta of a target datetime.

    The expected values are the tolerance (a timedelta) followed by the
    target (a datetime).
    """
    validate_expected(2, args)
    validate_type(actual, _dt.datetime)
    validate_type(args[0], _dt.timedelta)
    validate_type(args[1], _dt.datetime)
    tolerance, target = args
    diff = abs(actual - target)
    if diff > tolerance:
        raise failure(
            "\n"
            f"Actual: {actual}\n"
            f"Target: {target}\n"
            f"Max:    {tolerance}\n"
            f"Diff:   {diff}"
        )