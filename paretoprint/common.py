"""Documents and combinators shared by pretty-printers built on top of
the layout engine: annotated punctuation and the bracketed shapes of
sequences and calls."""
from .api import (
    align,
    annotate,
    choice,
    concat,
    flatten,
    group,
    nest,
    NL,
    BREAK,
)
from .syntax import Token
from .utils import intersperse


COMMA = annotate(Token.PUNCTUATION, ',')
COLON = annotate(Token.PUNCTUATION, ':')
ELLIPSIS = annotate(Token.PUNCTUATION, '...')

LPAREN = annotate(Token.PUNCTUATION, '(')
RPAREN = annotate(Token.PUNCTUATION, ')')

LBRACKET = annotate(Token.PUNCTUATION, '[')
RBRACKET = annotate(Token.PUNCTUATION, ']')

LBRACE = annotate(Token.PUNCTUATION, '{')
RBRACE = annotate(Token.PUNCTUATION, '}')

ASSIGN_OP = annotate(Token.OPERATOR, '=')


def identifier(s):
    return annotate(Token.NAME_FUNCTION, s)


def comment(text):
    return annotate(Token.COMMENT_SINGLE, concat(['# ', text]))


def bracket(indent, left, child, right):
    """Lays out ``child`` between ``left`` and ``right``, either inline
    or on its own indented lines."""
    return concat([
        left,
        nest(indent, concat([BREAK, child])),
        BREAK,
        right
    ])


def sequence_of_docs(indent, left, docs, right, dangle=False):
    sep = concat([COMMA, NL])
    separated_els = list(intersperse(sep, docs))

    if dangle:
        separated_els.append(COMMA)

    return group(bracket(indent, left, concat(separated_els), right))


def build_fncall(
    fndoc,
    argdocs=(),
    kwargdocs=(),
    indent=4,
    hug_sole_arg=False
):
    """Builds a doc that looks like a function call,
    from docs that represent the function, arguments
    and keyword arguments.

    Besides the single-line form and the form with
    one argument per indented line, the arguments may
    also be aligned to the column after the opening
    parenthesis:

    > indented
    frozenset(
        1,
        2
    )
    > aligned
    frozenset(1,
              2)

    If ``hug_sole_arg`` is True, and the represented
    functional call is done with a single non-keyword
    argument, the function call parentheses will hug
    the sole argument doc without newlines and indentation
    in break mode:

    frozenset([
        1,
        2,
    ])
    """
    if isinstance(fndoc, str):
        fndoc = identifier(fndoc)

    argsep = concat([COMMA, NL])

    kwargdocs = [
        concat([binding, ASSIGN_OP, doc])
        for binding, doc in kwargdocs
    ]

    argdocs = list(argdocs)
    if not (argdocs or kwargdocs):
        return concat([fndoc, LPAREN, RPAREN])

    if hug_sole_arg and not kwargdocs and len(argdocs) == 1:
        return concat([fndoc, LPAREN, argdocs[0], RPAREN])

    args = concat(intersperse(argsep, [*argdocs, *kwargdocs]))

    return choice(
        concat([fndoc, LPAREN, flatten(args), RPAREN]),
        concat([fndoc, LPAREN, align(args), RPAREN]),
        concat([
            fndoc,
            LPAREN,
            nest(indent, concat([BREAK, args])),
            BREAK,
            RPAREN
        ]),
    )
