"""Candidate layouts and sets of them.

A ``Measure`` is one way to lay out a document from a given column:
where it ends, what it costs and the choice-free document that
produces it. A ``Front`` holds every candidate worth keeping, sorted by
ending column; a ``Tainted`` set stands in for candidates that are
known to break the width limit and is only computed on demand.
"""
from .doc import Concat


class Measure:
    __slots__ = ('last_column', 'cost', 'layout')

    def __init__(self, last_column, cost, layout):
        self.last_column = last_column
        self.cost = cost
        self.layout = layout

    def dominates(self, other):
        return (
            self.last_column <= other.last_column and
            self.cost <= other.cost
        )

    def concat(self, other):
        return Measure(
            other.last_column,
            self.cost + other.cost,
            Concat(self.layout, other.layout),
        )

    def with_layout(self, layout):
        return Measure(self.last_column, self.cost, layout)

    def __repr__(self):
        return (
            f'Measure(last_column={self.last_column!r}, '
            f'cost={self.cost!r}, layout={self.layout!r})'
        )


class MeasureSet:
    __slots__ = ()

    def map_layout(self, fn):
        raise NotImplementedError


class Front(MeasureSet):
    """Measures in strictly increasing ``last_column`` order, none of
    which dominates another."""
    __slots__ = ('measures', )

    def __init__(self, measures):
        assert measures, 'a front is never empty'
        self.measures = measures

    def best(self):
        """Returns the cheapest measure.

        Along a front costs decrease as ending columns increase, so this
        is the last one.
        """
        return self.measures[-1]

    def map_layout(self, fn):
        return Front([m.with_layout(fn(m.layout)) for m in self.measures])

    def __iter__(self):
        return iter(self.measures)

    def __len__(self):
        return len(self.measures)

    def __repr__(self):
        return f'Front({self.measures!r})'


_UNFORCED = object()


class Tainted(MeasureSet):
    """Deferred fallback for a document that can't be laid out within
    the width limit. ``force`` calls ``thunk`` at most once."""
    __slots__ = ('_thunk', '_value')

    def __init__(self, thunk):
        self._thunk = thunk
        self._value = _UNFORCED

    @property
    def forced(self):
        return self._value is not _UNFORCED

    def force(self):
        if self._value is _UNFORCED:
            self._value = self._thunk()
            self._thunk = None
        return self._value

    def map_layout(self, fn):
        def thunk():
            measure = self.force()
            return measure.with_layout(fn(measure.layout))
        return Tainted(thunk)

    def __repr__(self):
        state = 'forced' if self.forced else 'unforced'
        return f'Tainted(<{state}>)'


def force_best(measure_set):
    """Returns the best measure of a front, or the fallback of a tainted
    set."""
    if isinstance(measure_set, Tainted):
        return measure_set.force()
    return measure_set.best()


def merge(a, b):
    """Merges two measure sets for the same document position, keeping
    only the measures that no other measure dominates."""
    if isinstance(a, Tainted):
        if isinstance(b, Tainted):
            return a
        return b
    if isinstance(b, Tainted):
        return a

    lefts = a.measures
    rights = b.measures
    i = j = 0
    result = []
    while i < len(lefts) and j < len(rights):
        left = lefts[i]
        right = rights[j]
        if left.dominates(right):
            j += 1
        elif right.dominates(left):
            i += 1
        elif left.last_column < right.last_column:
            result.append(left)
            i += 1
        else:
            result.append(right)
            j += 1

    result.extend(lefts[i:])
    result.extend(rights[j:])
    return Front(result)


def merge_all(measure_sets):
    result = None
    for measure_set in measure_sets:
        if result is None:
            result = measure_set
        else:
            result = merge(result, measure_set)
    assert result is not None, 'nothing to merge'
    return result
