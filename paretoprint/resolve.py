"""Optimal layout search.

For every sub-document and every context it is reached in (starting
column and indentation) the resolver computes the Pareto front of its
possible layouts: the cheapest layout for each ending column that is
worth distinguishing. Fronts are combined bottom-up, merged at
``Choice`` nodes and multiplied out at ``Concat`` nodes.

Sub-documents that can't fit the width limit are not discarded, but
their fronts are only computed if nothing else fits either.
"""
from .cost import DefaultCostFactory
from .doc import (
    Align,
    Annotated,
    Choice,
    Concat,
    Nest,
    Newline,
    Text,
)
from .measure import (
    Front,
    Measure,
    Tainted,
    force_best,
    merge,
)


def process_concat(left, resolve_right):
    """Combines the measure set of the left side of a concatenation with
    the right side, which ``resolve_right`` resolves from the ending
    column of a given left measure."""
    if isinstance(left, Tainted):
        def thunk():
            left_measure = left.force()
            right_measure = force_best(resolve_right(left_measure))
            return left_measure.concat(right_measure)
        return Tainted(thunk)

    result = None
    for left_measure in left.measures:
        combined = _concat_measure(left_measure, resolve_right(left_measure))
        result = combined if result is None else merge(result, combined)
    return result


def _concat_measure(left_measure, right):
    if isinstance(right, Tainted):
        return Tainted(lambda: left_measure.concat(right.force()))

    # The right front is already sorted by ending column, so a combined
    # measure can only be dominated by the last one kept.
    kept = []
    for right_measure in right.measures:
        measure = left_measure.concat(right_measure)
        if kept and kept[-1].cost <= measure.cost:
            continue
        kept.append(measure)
    return Front(kept)


class Resolver:
    """Resolves documents against one width limit and cost model.

    Results are memoized by document identity and context, so a
    resolver must only be used while the documents it has seen are
    alive.
    """

    def __init__(self, width, cost_factory=None):
        if cost_factory is None:
            cost_factory = DefaultCostFactory()
        self.width = width
        self.cost_factory = cost_factory
        self._memo = {}

    def resolve(self, doc, col, indent):
        key = (id(doc), col, indent)
        try:
            return self._memo[key]
        except KeyError:
            pass

        if self.exceeds(doc, col, indent):
            result = Tainted(
                lambda: force_best(self._resolve(doc, col, indent))
            )
        else:
            result = self._resolve(doc, col, indent)

        self._memo[key] = result
        return result

    def exceeds(self, doc, col, indent):
        if indent > self.width:
            return True
        if isinstance(doc, Text):
            return col + len(doc.value) > self.width
        return col > self.width

    def _resolve(self, doc, col, indent):
        if isinstance(doc, Text):
            length = len(doc.value)
            return Front([
                Measure(
                    col + length,
                    self.cost_factory.text_cost(self.width, col, length),
                    doc,
                )
            ])
        elif isinstance(doc, Newline):
            return Front([
                Measure(indent, self.cost_factory.newline_cost(indent), doc)
            ])
        elif isinstance(doc, Concat):
            rhs = doc.rhs
            return process_concat(
                self.resolve(doc.lhs, col, indent),
                lambda measure: self.resolve(rhs, measure.last_column, indent),
            )
        elif isinstance(doc, Choice):
            return merge(
                self.resolve(doc.lhs, col, indent),
                self.resolve(doc.rhs, col, indent),
            )
        elif isinstance(doc, Nest):
            n = doc.indent
            return (
                self.resolve(doc.doc, col, indent + n)
                .map_layout(lambda layout: Nest(n, layout))
            )
        elif isinstance(doc, Align):
            return (
                self.resolve(doc.doc, col, col)
                .map_layout(Align)
            )
        elif isinstance(doc, Annotated):
            annotation = doc.annotation
            return (
                self.resolve(doc.doc, col, indent)
                .map_layout(lambda layout: Annotated(layout, annotation))
            )

        raise TypeError(
            f"Got {repr(doc)} of type {type(doc).__name__}, "
            "expected 'Doc'"
        )


def resolve(doc, col, indent, width, cost_factory=None):
    """Returns the measure set of ``doc`` laid out from column ``col``
    with indentation ``indent`` and lines at most ``width`` wide."""
    return Resolver(width, cost_factory).resolve(doc, col, indent)
