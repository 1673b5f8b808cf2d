"""Error types, value kinds and argument validation shared by the assertions."""

from __future__ import annotations

import datetime as _dt
import numbers
import os
import queue
import traceback
from collections.abc import Iterable, Mapping, Sequence, Set
from enum import Enum


class ShouldError(Exception):
    """Base class of every error raised by an assertion."""

    label = "should error"

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(f"{self.label}: {message}")


class ExpectedCountInvalid(ShouldError):
    """The assertion received the wrong number of expected values."""

    label = "expected count invalid"


class TypeMismatch(ShouldError):
    """A value had a type the assertion cannot work with."""

    label = "type mismatch"


class KindMismatch(ShouldError):
    """A value had a kind the assertion cannot work with."""

    label = "kind mismatch"


class AssertionFailure(ShouldError, AssertionError):
    """The assertion was evaluated and did not hold."""

    label = "assertion failure"


class Kind(Enum):
    """Broad classification of values, used to pick how they are compared."""

    NONE = "none"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BYTES = "bytes"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SET = "set"
    QUEUE = "queue"
    CALLABLE = "callable"
    TIME = "time"
    DURATION = "duration"
    OTHER = "other"


def kind_of(value) -> Kind:
    """Return the kind of *value*."""
    if value is None:
        return Kind.NONE
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, numbers.Integral):
        return Kind.INT
    if isinstance(value, numbers.Real):
        return Kind.FLOAT
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Kind.BYTES
    if isinstance(value, _dt.datetime):
        return Kind.TIME
    if isinstance(value, _dt.timedelta):
        return Kind.DURATION
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, (queue.Queue, queue.SimpleQueue)):
        return Kind.QUEUE
    if isinstance(value, Set):
        return Kind.SET
    if isinstance(value, Sequence):
        return Kind.SEQUENCE
    if callable(value):
        return Kind.CALLABLE
    return Kind.OTHER


def is_numeric(value) -> bool:
    return kind_of(value) in (Kind.INT, Kind.FLOAT)


def is_integer(value) -> bool:
    return kind_of(value) is Kind.INT


def is_float(value) -> bool:
    return kind_of(value) is Kind.FLOAT


def is_time(value) -> bool:
    return kind_of(value) is Kind.TIME


def _is_test_file(filename: str) -> bool:
    name = os.path.basename(filename)
    return name.startswith("test_") or name.endswith("_test.py")


def _stack() -> str:
    """Describe the frames of the current stack that belong to test files."""
    lines: list[str] = []
    for frame in traceback.extract_stack():
        if not _is_test_file(frame.filename):
            continue
        lines.append(f"{frame.name}()")
        lines.append(f"\t{frame.filename}:{frame.lineno}")
        if frame.line:
            lines.append(f"  {frame.line}")
    if not lines:
        return ""
    return "> " + "\n> ".join(lines)


def failure(message: str) -> AssertionFailure:
    """Build an AssertionFailure, annotated with the calling test frames."""
    trace = _stack()
    if trace:
        message += f"\nStack: (filtered)\n{trace}"
    return AssertionFailure(message)


def validate_expected(count: int, expected) -> None:
    """Raise ExpectedCountInvalid unless *expected* holds exactly *count* values."""
    length = len(expected)
    if length != count:
        plural = "" if length == 1 else "s"
        raise ExpectedCountInvalid(f"got {length} value{plural}, want {count}")


def _type_label(expected_type) -> str:
    if isinstance(expected_type, tuple):
        return " or ".join(t.__name__ for t in expected_type)
    return expected_type.__name__


def validate_type(actual, expected_type) -> None:
    """Raise TypeMismatch unless *actual* is an instance of *expected_type*."""
    if not isinstance(actual, expected_type):
        raise TypeMismatch(
            f"got {type(actual).__name__}, want {_type_label(expected_type)}"
        )


def validate_kind(actual, kinds: Iterable[Kind]) -> None:
    """Raise KindMismatch unless the kind of *actual* is one of *kinds*."""
    kinds = tuple(kinds)
    kind = kind_of(actual)
    if kind not in kinds:
        wanted = ", ".join(k.value for k in kinds)
        raise KindMismatch(f"got {kind.value}, want one of [{wanted}]")