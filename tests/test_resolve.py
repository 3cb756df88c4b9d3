import pytest

from paretoprint.api import (
    align,
    choice,
    concat,
    group,
    nest,
    sep,
    text,
    BREAK,
    NIL,
    NL,
)
from paretoprint.cost import DefaultCost, DefaultCostFactory
from paretoprint.doc import Choice, Text
from paretoprint.measure import Front, Measure, Tainted
from paretoprint.render import render, render_lines
from paretoprint.resolve import Resolver, process_concat, resolve

from .helpers import assert_valid_front, expansions, measure_keys


def c(overflow, height):
    return DefaultCost(overflow, height)


def call(name, *args):
    return group(concat([
        name,
        '(',
        nest(2, concat([BREAK, concat(_commas(args))])),
        BREAK,
        ')',
    ]))


def _commas(args):
    for i, arg in enumerate(args):
        if i:
            yield ','
            yield NL
        yield arg


SAMPLE_DOCS = [
    sep(['aaa', 'bbb', 'ccc']),
    call('f', 'xx', call('g', 'yyy', 'z'), 'www'),
    concat(['let ', align(sep(['a1', 'b22', 'c333']))]),
    choice(
        concat(['abc', NL, 'de']),
        concat(['ab', align(concat(['cd', NL, 'e']))]),
        'abcdefgh',
    ),
    nest(3, concat(['x', NL, sep(['pp', 'qq']), NL, 'y'])),
]


def resolved_fronts():
    for doc in SAMPLE_DOCS:
        for width in (3, 6, 9, 14, 40):
            yield doc, width, resolve(doc, 0, 0, width)


def test_text():
    result = resolve(Text('abc'), 2, 0, 10)
    assert measure_keys(result) == [(5, c(0, 0))]


def test_newline_ends_at_indentation():
    result = resolve(NL, 7, 4, 10)
    assert measure_keys(result) == [(4, c(0, 1))]


def test_nest_and_align_keep_layout_structure():
    result = resolve(text('ab') + align(NL + text('c')), 0, 0, 10)
    assert measure_keys(result) == [(3, c(0, 1))]
    assert render(result.best().layout) == 'ab\n  c'

    result = resolve(nest(4, NL + text('c')), 0, 0, 10)
    assert measure_keys(result) == [(5, c(0, 1))]
    assert render(result.best().layout) == '\n    c'


def test_fronts_are_pareto_fronts():
    for doc, width, result in resolved_fronts():
        if isinstance(result, Front):
            assert_valid_front(result)


def test_front_layouts_fit_width():
    for doc, width, result in resolved_fronts():
        if isinstance(result, Front):
            for measure in result:
                lines = render_lines(measure.layout)
                assert all(len(line) <= width for line in lines)
                assert len(lines[-1]) == measure.last_column


def test_best_is_optimal():
    factory = DefaultCostFactory()
    for doc, width, result in resolved_fronts():
        costs = []
        for layout in expansions(doc):
            candidate = Resolver(width, factory).resolve(layout, 0, 0)
            if isinstance(candidate, Front):
                assert len(candidate) == 1
                costs.append(candidate.best().cost)

        if costs:
            assert isinstance(result, Front)
            assert result.best().cost == min(costs)
        else:
            assert isinstance(result, Tainted)


def test_empty_text_is_concatenation_identity():
    doc = call('f', 'xx', call('g', 'yyy', 'z'))
    for width in (8, 10, 40):
        assert measure_keys(resolve(NIL + doc, 0, 0, width)) == (
            measure_keys(resolve(doc, 0, 0, width))
        )


def test_empty_text_is_concatenation_identity_when_tainted():
    doc = call('f', 'xx', call('g', 'yyy', 'z'))
    with_nil = resolve(NIL + doc, 0, 0, 6)
    without = resolve(doc, 0, 0, 6)
    assert isinstance(with_nil, Tainted)
    assert isinstance(without, Tainted)

    forced_with_nil = with_nil.force()
    forced_without = without.force()
    assert forced_with_nil.last_column == forced_without.last_column
    assert forced_with_nil.cost == forced_without.cost


def test_choice_picks_narrower_fit():
    result = resolve(Choice(Text('short'), Text('toolong!!')), 0, 0, 5)
    assert isinstance(result, Front)
    assert render(result.best().layout) == 'short'


def test_everything_exceeding_is_tainted():
    doc = Choice(Text('toolong!!'), Text('waytoolong'))
    result = resolve(doc, 0, 0, 5)
    assert isinstance(result, Tainted)
    measure = result.force()
    assert render(measure.layout) == 'toolong!!'
    assert measure.cost == c(16, 0)


def test_indentation_past_width_is_tainted():
    result = resolve(nest(8, NL + text('a')), 0, 0, 5)
    assert isinstance(result, Tainted)
    assert render(result.force().layout) == '\n        a'


def test_exceeding_branch_is_never_computed():
    lengths = []

    class RecordingCostFactory(DefaultCostFactory):
        def text_cost(self, width, col, length):
            lengths.append(length)
            return super().text_cost(width, col, length)

    doc = Choice(Text('short'), Text('toolong!!') + NL + Text('x'))
    result = Resolver(5, RecordingCostFactory()).resolve(doc, 0, 0)
    assert render(result.best().layout) == 'short'
    assert 9 not in lengths


def test_tainted_rest_of_line_falls_back_to_break():
    doc = concat(['aaaa', choice('bb', concat([NL, 'bb']))])
    result = resolve(doc, 0, 0, 5)
    assert isinstance(result, Front)
    assert render(result.best().layout) == 'aaaa\nbb'


def test_shared_subdocuments_are_resolved_once():
    calls = []

    class CountingCostFactory(DefaultCostFactory):
        def text_cost(self, width, col, length):
            calls.append((col, length))
            return super().text_cost(width, col, length)

    shared = text('abc')
    doc = choice(concat([shared, shared]), concat([shared, NL, shared]))
    Resolver(20, CountingCostFactory()).resolve(doc, 0, 0)
    assert sorted(calls) == [(0, 3), (3, 3)]


def test_process_concat_merges_per_left_results():
    left = Front([
        Measure(2, c(0, 1), Text('ab')),
        Measure(4, c(0, 0), Text('abcd')),
    ])

    def resolve_right(measure):
        col = measure.last_column
        return Front([
            Measure(col + 1, c(0, 2), Text('x')),
            Measure(col + 5, c(0, 0), Text('xxxxx')),
        ])

    result = process_concat(left, resolve_right)
    assert measure_keys(result) == [
        (3, c(0, 3)),
        (5, c(0, 2)),
        (7, c(0, 1)),
        (9, c(0, 0)),
    ]
    assert_valid_front(result)


class MaxCost:
    """Cost whose accumulation keeps the largest value."""
    __slots__ = ('value', )

    def __init__(self, value):
        self.value = value

    def __add__(self, other):
        return MaxCost(max(self.value, other.value))

    def __le__(self, other):
        return self.value <= other.value

    def __eq__(self, other):
        return self.value == other.value

    def __repr__(self):
        return f'MaxCost({self.value!r})'


def test_process_concat_drops_right_alternatives_dominated_after_combining():
    left = Front([Measure(1, MaxCost(3), Text('a'))])

    def resolve_right(measure):
        col = measure.last_column
        return Front([
            Measure(col + 1, MaxCost(2), Text('b')),
            Measure(col + 5, MaxCost(1), Text('bbbbb')),
        ])

    result = process_concat(left, resolve_right)
    assert measure_keys(result) == [(2, MaxCost(3))]


def test_process_concat_with_tainted_left():
    left = Tainted(lambda: Measure(7, c(4, 0), Text('abcdefg')))

    def resolve_right(measure):
        return Tainted(
            lambda: Measure(measure.last_column + 1, c(1, 0), Text('x'))
        )

    result = process_concat(left, resolve_right)
    assert isinstance(result, Tainted)
    assert not left.forced
    measure = result.force()
    assert measure.last_column == 8
    assert measure.cost == c(5, 0)
    assert render(measure.layout) == 'abcdefgx'


def test_process_concat_with_tainted_right():
    left = Front([Measure(2, c(0, 0), Text('ab'))])
    result = process_concat(
        left,
        lambda measure: Tainted(
            lambda: Measure(9, c(9, 0), Text('x' * 7))
        ),
    )
    assert isinstance(result, Tainted)
    assert render(result.force().layout) == 'abxxxxxxx'


def test_unknown_node_is_rejected():
    with pytest.raises(TypeError):
        Resolver(79).resolve(object(), 0, 0)
