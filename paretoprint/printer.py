import logging
from collections import namedtuple

from .measure import Tainted
from .render import render
from .resolve import Resolver

logger = logging.getLogger(__name__)


PrintResult = namedtuple('PrintResult', ['text', 'tainted', 'cost'])


def best_measure(doc, width, col=0, cost_factory=None):
    """Resolves ``doc`` and returns a ``(measure, tainted)`` pair, where
    ``tainted`` is True when no layout fits within ``width``."""
    measure_set = Resolver(width, cost_factory).resolve(doc, col, 0)

    if isinstance(measure_set, Tainted):
        logger.debug(
            'No layout fits in width %d, falling back to a tainted layout',
            width,
        )
        return measure_set.force(), True

    logger.debug(
        'Resolved a front of %d measure(s) in width %d',
        len(measure_set),
        width,
    )
    return measure_set.best(), False


def print_doc(doc, col=0, width=79, cost_factory=None):
    """Lays out ``doc`` starting at column ``col`` and renders it.

    Returns a ``PrintResult`` with the rendered text, whether the layout
    had to exceed ``width`` and its total cost.
    """
    measure, tainted = best_measure(
        doc,
        width=width,
        col=col,
        cost_factory=cost_factory,
    )
    return PrintResult(render(measure.layout, col), tainted, measure.cost)
