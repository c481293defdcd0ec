"""
Predicates that decide whether a number is passed on to the observers.
"""

from abc import ABC, abstractmethod


class NumberFilter(ABC):
    """Base class for number filters. Filters hold no mutable state."""

    @abstractmethod
    def keep(self, number: int) -> bool:
        """Return True if the number passes the filter."""
        pass

    def __repr__(self):
        return f"{type(self).__name__}()"


class EvenFilter(NumberFilter):
    def keep(self, number: int) -> bool:
        return number % 2 == 0


class OddFilter(NumberFilter):
    def keep(self, number: int) -> bool:
        return number % 2 != 0


class GreaterThanFilter(NumberFilter):
    """Keeps numbers strictly greater than the threshold."""

    def __init__(self, threshold: int):
        self._threshold = threshold

    @property
    def threshold(self) -> int:
        return self._threshold

    def keep(self, number: int) -> bool:
        return number > self._threshold

    def __repr__(self):
        return f"GreaterThanFilter(threshold={self._threshold})"

    def __eq__(self, other):
        if not isinstance(other, GreaterThanFilter):
            return NotImplemented
        return self._threshold == other._threshold

    def __hash__(self):
        return hash((GreaterThanFilter, self._threshold))
