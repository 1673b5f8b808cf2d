"""Negated assertions, grouped under the NOT namespace."""

from __future__ import annotations

from .basics import not_be_chronological, not_be_nil, not_panic
from .containers import not_be_empty, not_be_in, not_contain
from .equal import not_equal
from .ordering import (
    not_be_greater_than,
    not_be_greater_than_or_equal_to,
    not_be_less_than,
    not_be_less_than_or_equal_to,
)
from .times import not_happen_on


class Negated:
    """Namespace of the negated assertions; use the NOT instance."""

    def equal(self, actual, *args) -> None:
        not_equal(actual, *args)

    def be_nil(self, actual, *args) -> None:
        not_be_nil(actual, *args)

    def be_chronological(self, actual, *args) -> None:
        not_be_chronological(actual, *args)

    def panic(self, actual, *args) -> None:
        not_panic(actual, *args)

    def be_less_than(self, actual, *args) -> None:
        not_be_less_than(actual, *args)

    def be_greater_than(self, actual, *args) -> None:
        not_be_greater_than(actual, *args)

    def be_less_than_or_equal_to(self, actual, *args) -> None:
        not_be_less_than_or_equal_to(actual, *args)

    def be_greater_than_or_equal_to(self, actual, *args) -> None:
        not_be_greater_than_or_equal_to(actual, *args)

    def contain(self, actual, *args) -> None:
        not_contain(actual, *args)

    def be_in(self, actual, *args) -> None:
        not_be_in(actual, *args)

    def be_empty(self, actual, *args) -> None:
        not_be_empty(actual, *args)

    def happen_on(self, actual, *args) -> None:
        not_happen_on(actual, *args)


NOT = Negated()