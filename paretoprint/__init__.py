# -*- coding: utf-8 -*-

"""Top-level package for paretoprint."""

__version__ = '0.1.0'

import sys

from .api import (
    align,
    annotate,
    cast_doc,
    choice,
    concat,
    flatten,
    group,
    hang,
    hsep,
    nest,
    sep,
    text,
    vsep,
    NIL,
    NL,
    BREAK,
    HARDLINE,
    SPACE,
)
from .cost import CostFactory, DefaultCost, DefaultCostFactory
from .doc import Doc, is_choice_free
from .extras.color import ColorScheme, render_colored
from .printer import PrintResult, best_measure, print_doc
from .render import (
    default_render_to_stream,
    layout_to_sdocs,
    render,
    render_lines,
)
from .resolve import Resolver, resolve
from .utils import intersperse


__all__ = [
    'PrettyPrinter',
    'pformat',
    'pprint',
    'cpprint',
    'ColorScheme',
    'render_colored',
    'print_doc',
    'best_measure',
    'PrintResult',
    'resolve',
    'Resolver',
    'render',
    'render_lines',
    'layout_to_sdocs',
    'default_render_to_stream',
    'CostFactory',
    'DefaultCost',
    'DefaultCostFactory',
    'Doc',
    'is_choice_free',
    'align',
    'annotate',
    'cast_doc',
    'choice',
    'concat',
    'flatten',
    'group',
    'hang',
    'hsep',
    'nest',
    'sep',
    'text',
    'vsep',
    'NIL',
    'NL',
    'BREAK',
    'HARDLINE',
    'SPACE',
    'intersperse',
]


class PrettyPrinter:
    """Binds layout options once for repeated printing."""

    def __init__(self, width=79, col=0, *, cost_factory=None):
        self.width = width
        self.col = col
        self.cost_factory = cost_factory

    def pprint(self, doc, stream=None, *, end='\n'):
        pprint(
            doc,
            stream,
            width=self.width,
            col=self.col,
            cost_factory=self.cost_factory,
            end=end,
        )

    def pformat(self, doc):
        return pformat(
            doc,
            width=self.width,
            col=self.col,
            cost_factory=self.cost_factory,
        )

    def print_doc(self, doc):
        return print_doc(
            cast_doc(doc),
            col=self.col,
            width=self.width,
            cost_factory=self.cost_factory,
        )


def pformat(
    doc,
    width=79,
    col=0,
    *,
    cost_factory=None
):
    return print_doc(
        cast_doc(doc),
        col=col,
        width=width,
        cost_factory=cost_factory,
    ).text


def pprint(
    doc,
    stream=None,
    width=79,
    col=0,
    *,
    cost_factory=None,
    end='\n'
):
    measure, _ = best_measure(
        cast_doc(doc),
        width=width,
        col=col,
        cost_factory=cost_factory,
    )
    if stream is None:
        stream = sys.stdout
    default_render_to_stream(stream, layout_to_sdocs(measure.layout, col))
    if end:
        stream.write(end)


def cpprint(
    doc,
    stream=None,
    width=79,
    col=0,
    *,
    cost_factory=None,
    style=None,
    token_map=None,
    end='\n'
):
    """Like ``pprint``, but colors annotated parts with the pygments
    ``style``. ``token_map`` maps annotation values to pygments token
    types and defaults to one covering ``syntax.Token``. Requires the
    'pygments' and 'colorful' packages."""
    scheme = ColorScheme(style=style, token_map=token_map)
    measure, _ = best_measure(
        cast_doc(doc),
        width=width,
        col=col,
        cost_factory=cost_factory,
    )
    if stream is None:
        stream = sys.stdout
    stream.write(render_colored(measure.layout, col, scheme))
    if end:
        stream.write(end)
