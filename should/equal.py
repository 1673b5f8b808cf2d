"""Equality assertion and its failure report."""

from __future__ import annotations

from .errors import AssertionFailure, failure, is_numeric, is_time, validate_expected


def _numeric_equal(a, b) -> bool:
    return a == b


def _deep_equal(a, b) -> bool:
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        return False


# Each entry: (applies to the pair, passes for the pair). The first that
# applies decides the outcome.
_EQUALITY_SPECS = (
    (lambda a, b: is_numeric(a) and is_numeric(b), _numeric_equal),
    (lambda a, b: is_time(a) and is_time(b), lambda a, b: a == b),
    (lambda a, b: type(a) is type(b), _deep_equal),
)


def _format(value) -> str:
    if is_numeric(value) or is_time(value):
        return str(value)
    return repr(value)


def _diff(a: str, b: str) -> str:
    return "".join(" " if x == y else "^" for x, y in zip(a, b))


def report(actual, expected) -> str:
    """Describe how *actual* differs from *expected*."""
    a_type = f"({type(actual).__name__})"
    b_type = f"({type(expected).__name__})"
    width = max(len(a_type), len(b_type))
    a_type = a_type.ljust(width)
    b_type = b_type.ljust(width)
    a_format = _format(actual)
    b_format = _format(expected)
    type_diff = _diff(b_type, a_type)
    value_diff = _diff(b_format, a_format)

    parts = [
        "\n",
        f"Expected: {b_type} {b_format}\n",
        f"Actual:   {a_type} {a_format}\n",
        f"          {type_diff} {value_diff}",
    ]
    first = value_diff.find("^")
    if first > 40:
        start = first - 20
        parts.append(f"\nInitial discrepancy at index {first}:\n")
        parts.append(f"... {b_format[start:]}\n")
        parts.append(f"... {a_format[start:]}\n")
        parts.append(f"    {value_diff[start:]}")
    return "".join(parts)


def equal(actual, *args) -> None:
    """Assert that *actual* equals the single expected value.

    Numbers compare by value regardless of type, datetimes by instant,
    everything else must share a type and compare equal.
    """
    validate_expected(1, args)
    expected = args[0]
    for applies, passes in _EQUALITY_SPECS:
        if not applies(actual, expected):
            continue
        if passes(actual, expected):
            return
        break
    raise failure(report(actual, expected))


def not_equal(actual, *args) -> None:
    """Assert that *actual* does not equal the single expected value."""
    try:
        equal(actual, *args)
    except AssertionFailure:
        return
    raise failure(
        "\n"
        f"  expected:     {args[0]!r}\n"
        f"  to not equal: {actual!r}\n"
        "  (but it did)"
    )