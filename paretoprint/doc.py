class Doc:
    __slots__ = ()

    def __add__(self, other):
        return Concat(self, other)

    def __or__(self, other):
        return Choice(self, other)


class Text(Doc):
    __slots__ = ('value', )

    def __init__(self, value):
        if not isinstance(value, str):
            raise TypeError(
                f"Got {repr(value)} of type {type(value).__name__}, "
                "expected 'str'"
            )
        if '\n' in value:
            raise ValueError(
                f"Text can't contain line breaks, got {repr(value)}"
            )
        self.value = value

    def __repr__(self):
        return f'Text({repr(self.value)})'


class Newline(Doc):
    """A line break. ``flat`` is what the break turns into when the
    document is flattened, ``None`` if it must never be flattened."""
    __slots__ = ('flat', )

    def __init__(self, flat=' '):
        self.flat = flat

    def __repr__(self):
        return f'Newline({repr(self.flat)})'


class Concat(Doc):
    __slots__ = ('lhs', 'rhs')

    def __init__(self, lhs, rhs):
        _check_doc(lhs)
        _check_doc(rhs)
        self.lhs = lhs
        self.rhs = rhs

    def __repr__(self):
        return f'Concat({repr(self.lhs)}, {repr(self.rhs)})'


class Nest(Doc):
    __slots__ = ('indent', 'doc')

    def __init__(self, indent, doc):
        assert isinstance(indent, int)
        _check_doc(doc)

        self.indent = indent
        self.doc = doc

    def __repr__(self):
        return f'Nest({repr(self.indent)}, {repr(self.doc)})'


class Align(Doc):
    __slots__ = ('doc', )

    def __init__(self, doc):
        _check_doc(doc)
        self.doc = doc

    def __repr__(self):
        return f'Align({repr(self.doc)})'


class Choice(Doc):
    __slots__ = ('lhs', 'rhs')

    def __init__(self, lhs, rhs):
        _check_doc(lhs)
        _check_doc(rhs)
        self.lhs = lhs
        self.rhs = rhs

    def __repr__(self):
        return f'Choice({repr(self.lhs)}, {repr(self.rhs)})'


class Annotated(Doc):
    __slots__ = ('doc', 'annotation')

    def __init__(self, doc, annotation):
        _check_doc(doc)
        self.doc = doc
        self.annotation = annotation

    def __repr__(self):
        return f'Annotated({repr(self.doc)}, {repr(self.annotation)})'


def _check_doc(doc):
    if not isinstance(doc, Doc):
        raise TypeError(
            f"Got {repr(doc)} of type {type(doc).__name__}, "
            "expected 'Doc'"
        )


def is_choice_free(doc):
    """Returns True if ``doc`` contains no ``Choice`` node, i.e. it has
    exactly one rendering."""
    stack = [doc]
    while stack:
        doc = stack.pop()
        if isinstance(doc, Choice):
            return False
        elif isinstance(doc, Concat):
            stack.append(doc.lhs)
            stack.append(doc.rhs)
        elif isinstance(doc, (Nest, Align, Annotated)):
            stack.append(doc.doc)
    return True



def docs_equal(a, b):
    """Structural equality of two documents."""
    stack = [(a, b)]
    while stack:
        a, b = stack.pop()
        if a is b:
            continue
        if type(a) is not type(b):
            return False
        if isinstance(a, Text):
            if a.value != b.value:
                return False
        elif isinstance(a, Newline):
            if a.flat != b.flat:
                return False
        elif isinstance(a, (Concat, Choice)):
            stack.append((a.lhs, b.lhs))
            stack.append((a.rhs, b.rhs))
        elif isinstance(a, Nest):
            if a.indent != b.indent:
                return False
            stack.append((a.doc, b.doc))
        elif isinstance(a, Align):
            stack.append((a.doc, b.doc))
        elif isinstance(a, Annotated):
            if a.annotation != b.annotation:
                return False
            stack.append((a.doc, b.doc))
    return True


NIL = Text('')
NL = Newline(' ')
BREAK = Newline('')
HARDLINE = Newline(None)
SPACE = Text(' ')
