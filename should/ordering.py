"""Ordering assertions: less than, greater than and their inclusive forms."""

from __future__ import annotations

from .equal import equal
from .errors import (
    AssertionFailure,
    Kind,
    ShouldError,
    TypeMismatch,
    failure,
    is_numeric,
    is_time,
    kind_of,
    validate_expected,
)


def _holds(assertion, actual, *args) -> bool:
    try:
        assertion(actual, *args)
    except AssertionFailure:
        return False
    return True


def _comparable(a, b) -> bool:
    if kind_of(a) is Kind.STRING and kind_of(b) is Kind.STRING:
        return True
    if is_numeric(a) and is_numeric(b):
        return True
    return is_time(a) and is_time(b)


def _mismatch(a, b) -> TypeMismatch:
    return TypeMismatch(
        f"could not compare [{type(a).__name__}] and [{type(b).__name__}]"
    )


def be_less_than(actual, *args) -> None:
    """Assert that *actual* is less than the expected value.

    Both values must be strings, numbers or datetimes.
    """
    validate_expected(1, args)
    expected = args[0]
    if not _comparable(actual, expected):
        raise _mismatch(actual, expected)
    try:
        less = actual < expected
    except TypeError:
        raise _mismatch(actual, expected) from None
    if not less:
        raise failure(f"{actual} was not less than {expected}")


def not_be_less_than(actual, *args) -> None:
    """Assert that *actual* is not less than the expected value."""
    try:
        be_less_than(actual, *args)
    except AssertionFailure:
        return
    raise failure(
        "\n"
        f"  expected:            {args[0]!r}\n"
        f"  to not be less than: {actual!r}\n"
        "  (but it was)"
    )


def be_greater_than(actual, *args) -> None:
    """Assert that *actual* is greater than the expected value.

    Both values must be strings, numbers or datetimes.
    """
    less = _holds(be_less_than, actual, *args)
    if less or _holds(equal, actual, args[0]):
        raise failure(f"{actual} was not greater than {args[0]}")


def not_be_greater_than(actual, *args) -> None:
    """Assert that *actual* is not greater than the expected value."""
    try:
        be_greater_than(actual, *args)
    except AssertionFailure:
        return
    raise failure(
        "\n"
        f"  expected:               {args[0]!r}\n"
        f"  to not be greater than: {actual!r}\n"
        "  (but it was)"
    )


def be_less_than_or_equal_to(actual, *args) -> None:
    """Assert that *actual* is less than or equal to the expected value."""
    try:
        equal(actual, *args)
        return
    except ShouldError:
        pass
    if not _holds(be_less_than, actual, *args):
        raise failure(f"{actual} was not less than or equal to {args[0]}")


def not_be_less_than_or_equal_to(actual, *args) -> None:
    """Assert that *actual* is greater than the expected value."""
    try:
        be_less_than_or_equal_to(actual, *args)
    except AssertionFailure:
        return
    raise failure(
        "\n"
        f"  expected:                        {args[0]!r}\n"
        f"  to not be less than or equal to: {actual!r}\n"
        "  (but it was)"
    )


def be_greater_than_or_equal_to(actual, *args) -> None:
    """Assert that *actual* is greater than or equal to the expected value."""
    try:
        equal(actual, *args)
        return
    except ShouldError:
        pass
    if not _holds(be_greater_than, actual, *args):
        raise failure(f"{actual} was not greater than or equal to {args[0]}")


def not_be_greater_than_or_equal_to(actual, *args) -> None:
    """Assert that *actual* is less than the expected value."""
    try:
        be_greater_than_or_equal_to(actual, *args)
    except AssertionFailure:
        return
    raise failure(
        "\n"
        f"  expected:                           {args[0]!r}\n"
        f"  to not be greater than or equal to: {actual!r}\n"
        "  (but it was)"
    )