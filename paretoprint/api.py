from .doc import (
    Align,
    Annotated,
    Choice,
    Concat,
    Doc,
    Nest,
    Newline,
    Text,
    docs_equal,
    NIL,
    NL,
    BREAK,
    HARDLINE,
    SPACE,
)
from .utils import intersperse


def text(x):
    if not isinstance(x, str):
        raise TypeError("Argument to text function must be a str")
    if x == "":
        return NIL
    return Text(x)


def cast_doc(doc):
    """Casts value to doc, if possible."""
    if isinstance(doc, Doc):
        return doc
    elif isinstance(doc, str):
        return text(doc)

    raise ValueError(doc)


def concat(docs):
    """Returns a concatenation of the documents in the iterable argument.

    The concatenation is built as a balanced tree, so long sequences
    don't produce deeply nested documents."""
    docs = [cast_doc(doc) for doc in docs]
    if not docs:
        return NIL

    while len(docs) > 1:
        paired = [
            Concat(docs[i], docs[i + 1])
            for i in range(0, len(docs) - 1, 2)
        ]
        if len(docs) % 2:
            paired.append(docs[-1])
        docs = paired
    return docs[0]


def nest(i, doc):
    return Nest(i, cast_doc(doc))


def align(doc):
    """Sets the indentation of every new line in ``doc`` to the column
    ``doc`` starts at."""
    return Align(cast_doc(doc))


def hang(i, doc):
    return align(nest(i, doc))


def choice(*docs):
    """Gives the layout algorithm alternative renderings of the same
    content; the cheapest one under the cost model is used. Ties go to
    the alternative listed first."""
    if not docs:
        raise ValueError("choice requires at least one document")

    docs = [cast_doc(doc) for doc in docs]
    result = docs[-1]
    for doc in reversed(docs[:-1]):
        result = Choice(doc, result)
    return result


def annotate(annotation, doc):
    """Annotates ``doc`` with the arbitrary value ``annotation``"""
    return Annotated(cast_doc(doc), annotation)


def flatten(doc):
    """Returns ``doc`` with every flattenable line break replaced by its
    flat text, e.g. ``NL`` by a space and ``BREAK`` by nothing.
    ``HARDLINE`` is kept."""
    doc = cast_doc(doc)
    if isinstance(doc, Newline):
        if doc.flat is None:
            return doc
        return text(doc.flat)
    elif isinstance(doc, Concat):
        return Concat(flatten(doc.lhs), flatten(doc.rhs))
    elif isinstance(doc, Choice):
        lhs = flatten(doc.lhs)
        rhs = flatten(doc.rhs)
        # Both sides of a flattened group are the same flat document;
        # keeping one stops nested groups from doubling in size.
        if docs_equal(lhs, rhs):
            return lhs
        return Choice(lhs, rhs)
    elif isinstance(doc, Nest):
        return Nest(doc.indent, flatten(doc.doc))
    elif isinstance(doc, Align):
        return Align(flatten(doc.doc))
    elif isinstance(doc, Annotated):
        return Annotated(flatten(doc.doc), doc.annotation)
    return doc


def group(doc):
    """Lets the layout algorithm choose between ``doc`` on a single line
    and ``doc`` as is. The single-line version wins ties."""
    doc = cast_doc(doc)
    return Choice(flatten(doc), doc)


def hsep(docs):
    return concat(intersperse(SPACE, docs))


def vsep(docs):
    return concat(intersperse(NL, docs))


def sep(docs):
    """Separates ``docs`` by spaces if they fit on one line, by line
    breaks otherwise."""
    return group(vsep(docs))
