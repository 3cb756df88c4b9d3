"""Cost models used to rank layouts.

A cost factory produces cost values for the two primitive layout
events: printing a run of text and breaking a line. The values it
produces must support ``<=`` and ``+``; nothing else is assumed about
them.
"""
from abc import ABC, abstractmethod


class CostFactory(ABC):

    @abstractmethod
    def text_cost(self, width, col, length):
        """Cost of a text run of ``length`` characters starting at
        column ``col`` when lines should not exceed ``width``."""

    @abstractmethod
    def newline_cost(self, indent):
        """Cost of a line break followed by ``indent`` spaces."""


class DefaultCost:
    """Pair of an overflow penalty and a line count, ordered
    lexicographically with the overflow penalty first."""
    __slots__ = ('overflow', 'height')

    def __init__(self, overflow, height):
        self.overflow = overflow
        self.height = height

    @classmethod
    def zero(cls):
        return cls(0, 0)

    def _key(self):
        return (self.overflow, self.height)

    def __add__(self, other):
        if not isinstance(other, DefaultCost):
            return NotImplemented
        return DefaultCost(
            self.overflow + other.overflow,
            self.height + other.height,
        )

    def __eq__(self, other):
        if not isinstance(other, DefaultCost):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __lt__(self, other):
        if not isinstance(other, DefaultCost):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other):
        if not isinstance(other, DefaultCost):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other):
        if not isinstance(other, DefaultCost):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other):
        if not isinstance(other, DefaultCost):
            return NotImplemented
        return self._key() >= other._key()

    def __repr__(self):
        return f'DefaultCost({self.overflow!r}, {self.height!r})'


class DefaultCostFactory(CostFactory):
    """Penalizes every character past the width limit, more heavily the
    further it is from the limit, and counts lines to break ties.

    The n-th overflowing character costs ``2n - 1``, so a run that
    overflows by ``k`` characters in total costs ``k ** 2`` no matter how
    it is split into pieces.
    """

    def text_cost(self, width, col, length):
        stop = col + length
        if stop <= width:
            return DefaultCost.zero()

        start = max(width, col)
        a = start - width
        b = stop - start
        return DefaultCost(b * (2 * a + b), 0)

    def newline_cost(self, indent):
        return DefaultCost(0, 1)
