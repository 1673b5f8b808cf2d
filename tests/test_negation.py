import datetime as dt

import pytest

from should.errors import AssertionFailure, ExpectedCountInvalid, TypeMismatch
from should.negation import NOT

A = dt.datetime(2024, 3, 1, 12, 0, 0)
B = A + dt.timedelta(microseconds=1)


def _boom():
    raise RuntimeError("boo")


def test_negated_equal():
    assert NOT.equal(1, 2) is None
    with pytest.raises(AssertionFailure):
        NOT.equal(1, 1)


def test_negated_be_nil():
    assert NOT.be_nil("not nil") is None
    with pytest.raises(AssertionFailure):
        NOT.be_nil(None)


def test_negated_be_chronological():
    assert NOT.be_chronological([B, A]) is None
    with pytest.raises(AssertionFailure):
        NOT.be_chronological([A, B])


def test_negated_panic():
    assert NOT.panic(lambda: None) is None
    with pytest.raises(AssertionFailure):
        NOT.panic(_boom)


def test_negated_be_less_than():
    assert NOT.be_less_than(2, 1) is None
    with pytest.raises(AssertionFailure):
        NOT.be_less_than(1, 2)


def test_negated_be_greater_than():
    assert NOT.be_greater_than(1, 1) is None
    with pytest.raises(AssertionFailure):
        NOT.be_greater_than(2, 1)


def test_negated_be_less_than_or_equal_to():
    assert NOT.be_less_than_or_equal_to(2, 1) is None
    with pytest.raises(AssertionFailure):
        NOT.be_less_than_or_equal_to(1, 1)


def test_negated_be_greater_than_or_equal_to():
    assert NOT.be_greater_than_or_equal_to(1, 2) is None
    with pytest.raises(AssertionFailure):
        NOT.be_greater_than_or_equal_to(2, 2)


def test_negated_contain():
    assert NOT.contain("", "no") is None
    with pytest.raises(AssertionFailure):
        NOT.contain("integrate", "rat")


def test_negated_be_in():
    assert NOT.be_in("no", "yes") is None
    with pytest.raises(AssertionFailure):
        NOT.be_in("rat", "integrate")


def test_negated_be_empty():
    assert NOT.be_empty([""]) is None
    with pytest.raises(AssertionFailure):
        NOT.be_empty([])


def test_negated_happen_on():
    assert NOT.happen_on(A, B) is None
    with pytest.raises(AssertionFailure):
        NOT.happen_on(A, A)


def test_negated_keeps_count_errors():
    with pytest.raises(ExpectedCountInvalid):
        NOT.equal(1)
    with pytest.raises(ExpectedCountInvalid):
        NOT.be_nil(None, "EXTRA")


def test_negated_keeps_type_errors():
    with pytest.raises(TypeMismatch):
        NOT.happen_on(1, A)
    with pytest.raises(TypeMismatch):
        NOT.panic("wrong type")