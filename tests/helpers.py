from itertools import product

from paretoprint.doc import (
    Align,
    Annotated,
    Choice,
    Concat,
    Nest,
)
from paretoprint.measure import Front, Measure


def expansions(doc):
    """Yields every choice-free document obtained by picking one side of
    each Choice in ``doc``."""
    if isinstance(doc, Choice):
        yield from expansions(doc.lhs)
        yield from expansions(doc.rhs)
    elif isinstance(doc, Concat):
        for lhs, rhs in product(
            list(expansions(doc.lhs)),
            list(expansions(doc.rhs))
        ):
            yield Concat(lhs, rhs)
    elif isinstance(doc, Nest):
        for inner in expansions(doc.doc):
            yield Nest(doc.indent, inner)
    elif isinstance(doc, Align):
        for inner in expansions(doc.doc):
            yield Align(inner)
    elif isinstance(doc, Annotated):
        for inner in expansions(doc.doc):
            yield Annotated(inner, doc.annotation)
    else:
        yield doc


def measure_keys(measure_set):
    return [(m.last_column, m.cost) for m in measure_set.measures]


def front(*pairs):
    from paretoprint.doc import NIL
    return Front([Measure(col, cost, NIL) for col, cost in pairs])


def assert_valid_front(measure_set):
    measures = measure_set.measures
    assert measures
    for prev, curr in zip(measures, measures[1:]):
        assert prev.last_column < curr.last_column
    for i, a in enumerate(measures):
        for j, b in enumerate(measures):
            if i != j:
                assert not a.dominates(b)
