"""Assertions on containers: membership, first and last items, and length."""

from __future__ import annotations

from .equal import equal
from .errors import (
    AssertionFailure,
    Kind,
    failure,
    kind_of,
    validate_expected,
    validate_kind,
)

_CONTAINER_KINDS = (Kind.MAPPING, Kind.SEQUENCE, Kind.BYTES, Kind.SET, Kind.STRING)
_ORDERED_KINDS = (Kind.SEQUENCE, Kind.BYTES, Kind.STRING)
_SIZED_KINDS = (
    Kind.MAPPING,
    Kind.QUEUE,
    Kind.SEQUENCE,
    Kind.BYTES,
    Kind.SET,
    Kind.STRING,
)


def _equals(expected, item) -> bool:
    try:
        equal(expected, item)
    except AssertionFailure:
        return False
    return True


def _length(value) -> int:
    if kind_of(value) is Kind.QUEUE:
        return value.qsize()
    return len(value)


def _contains(container, item) -> bool:
    kind = kind_of(container)
    if kind is Kind.STRING:
        validate_kind(item, (Kind.STRING,))
        return item in container
    if kind is Kind.MAPPING:
        try:
            return item in container
        except TypeError:
            return False
    return any(_equals(item, member) for member in container)


def contain(actual, *args) -> None:
    """Assert that *actual* contains the expected value.

    Mappings are searched by key, strings by substring, and other
    containers by member.
    """
    validate_expected(1, args)
    validate_kind(actual, _CONTAINER_KINDS)
    expected = args[0]
    if not _contains(actual, expected):
        raise failure(
            "\n"
            f"   item absent: {expected!r}\n"
            f"   within:      {actual!r}"
        )


def not_contain(actual, *args) -> None:
    """Assert that *actual* does not contain the expected value."""
    try:
        contain(actual, *args)
    except AssertionFailure:
        return
    raise failure(
        "\n"
        f"item found: {args[0]!r}\n"
        f"within:     {actual!r}"
    )


def be_in(actual, *args) -> None:
    """Assert that *actual* is a member of the expected container."""
    validate_expected(1, args)
    contain(args[0], actual)


def not_be_in(actual, *args) -> None:
    """Assert that *actual* is not a member of the expected container."""
    validate_expected(1, args)
    not_contain(args[0], actual)


def start_with(actual, *args) -> None:
    """Assert that the sequence or string *actual* starts with the expected value."""
    validate_expected(1, args)
    validate_kind(actual, _ORDERED_KINDS)
    expected = args[0]
    if kind_of(actual) is Kind.STRING:
        validate_kind(expected, (Kind.STRING,))
        ok = actual.startswith(expected)
    else:
        ok = _length(actual) > 0 and _equals(expected, actual[0])
    if not ok:
        raise failure(
            "\n"
            f"   proposed prefix: {expected!r}\n"
            f"   not a prefix of: {actual!r}"
        )


def end_with(actual, *args) -> None:
    """Assert that the sequence or string *actual* ends with the expected value."""
    validate_expected(1, args)
    validate_kind(actual, _ORDERED_KINDS)
    expected = args[0]
    if kind_of(actual) is Kind.STRING:
        validate_kind(expected, (Kind.STRING,))
        ok = actual.endswith(expected)
    else:
        ok = _length(actual) > 0 and _equals(expected, actual[-1])
    if not ok:
        raise failure(
            "\n"
            f"   proposed suffix: {expected!r}\n"
            f"   not a suffix of: {actual!r}"
        )


def be_empty(actual, *args) -> None:
    """Assert that *actual* has a length of zero."""
    validate_expected(0, args)
    validate_kind(actual, _SIZED_KINDS)
    length = _length(actual)
    if length:
        name = type(actual).__name__
        raise failure(f"got len({name}) == {length}, want empty {name}")


def not_be_empty(actual, *args) -> None:
    """Assert that *actual* has a length greater than zero."""
    try:
        be_empty(actual, *args)
    except AssertionFailure:
        return
    name = type(actual).__name__
    raise failure(f"got empty {name}, want non-empty {name}")


def have_length(actual, *args) -> None:
    """Assert that *actual* has the expected integer length."""
    validate_expected(1, args)
    validate_kind(actual, _SIZED_KINDS)
    validate_kind(args[0], (Kind.INT,))
    expected_length = int(args[0])
    actual_length = _length(actual)
    if actual_length != expected_length:
        raise failure(f"got length of {actual_length}, want {expected_length}")