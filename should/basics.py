"""Assertions on booleans, None, datetime order, raised exceptions and error chains."""

from __future__ import annotations

import datetime as _dt
from collections.abc import Callable
from itertools import pairwise

from .errors import (
    AssertionFailure,
    failure,
    validate_expected,
    validate_type,
)


def be_true(actual, *args) -> None:
    """Assert that *actual* is the boolean True."""
    validate_expected(0, args)
    validate_type(actual, bool)
    if not actual:
        raise failure("got <false>, want <true>")


def be_false(actual, *args) -> None:
    """Assert that *actual* is the boolean False."""
    validate_expected(0, args)
    validate_type(actual, bool)
    if actual:
        raise failure("got <true>, want <false>")


def be_nil(actual, *args) -> None:
    """Assert that *actual* is None."""
    validate_expected(0, args)
    if actual is not None:
        raise failure(f"got {actual!r}, want <nil>")


def not_be_nil(actual, *args) -> None:
    """Assert that *actual* is not None."""
    try:
        be_nil(actual, *args)
    except AssertionFailure:
        return
    raise failure("got nil, want non-<nil>")


def be_chronological(actual, *args) -> None:
    """Assert that *actual* is a list or tuple of datetimes in chronological order."""
    validate_expected(0, args)
    validate_type(actual, (list, tuple))
    for item in actual:
        validate_type(item, _dt.datetime)
    if any(later < earlier for earlier, later in pairwise(actual)):
        raise failure(f"expected to be chronological: {list(actual)!r}")


def not_be_chronological(actual, *args) -> None:
    """Assert that the datetimes in *actual* are out of chronological order."""
    try:
        be_chronological(actual, *args)
    except AssertionFailure:
        return
    raise failure(
        f"want non-chronological times, got chronological times: {list(actual)!r}"
    )


def not_panic(actual, *args) -> None:
    """Call *actual* and assert that it returns without raising."""
    validate_expected(0, args)
    validate_type(actual, Callable)
    try:
        actual()
    except Exception as err:
        raise failure(
            f"provided func should not have panicked but it did with: {err!r}"
        ) from err


def panic(actual, *args) -> None:
    """Call *actual* and assert that it raises an exception."""
    try:
        not_panic(actual, *args)
    except AssertionFailure:
        return
    raise failure("provided func did not panic as expected")


def _wraps(outer: BaseException, inner: BaseException) -> bool:
    pending = [outer]
    seen: set[int] = set()
    while pending:
        err = pending.pop()
        if err is inner:
            return True
        if id(err) in seen:
            continue
        seen.add(id(err))
        pending.extend(e for e in (err.__cause__, err.__context__) if e is not None)
        pending.extend(
            e for e in getattr(err, "exceptions", ()) if isinstance(e, BaseException)
        )
    return False


def wrap_error(actual, *args) -> None:
    """Assert that the exception *actual* is, or was caused by, the expected exception."""
    validate_expected(1, args)
    inner = args[0]
    validate_type(inner, BaseException)
    validate_type(actual, BaseException)
    if not _wraps(actual, inner):
        raise AssertionFailure(
            "\n"
            f"\t            outer err: ({actual})\n"
            f"\tshould wrap inner err: ({inner})"
        )