from io import StringIO

from .doc import (
    Align,
    Annotated,
    Choice,
    Concat,
    Nest,
    Newline,
    Text,
)
from .sdoc import (
    SLine,
    SMetaPush,
    SMetaPop,
)


def layout_to_sdocs(doc, col=0):
    """Yields the stream of text, line and annotation tokens of a
    choice-free document whose first line starts at column ``col``."""
    # Items are (indent, doc) pairs, or SMetaPop tokens that close
    # an annotation once its contents have been emitted.
    stack = [(0, doc)]
    while stack:
        item = stack.pop()
        if isinstance(item, SMetaPop):
            yield item
            continue

        indent, doc = item
        if isinstance(doc, Text):
            if doc.value:
                col += len(doc.value)
                yield doc.value
        elif isinstance(doc, Newline):
            col = indent
            yield SLine(indent)
        elif isinstance(doc, Concat):
            stack.append((indent, doc.rhs))
            stack.append((indent, doc.lhs))
        elif isinstance(doc, Nest):
            stack.append((indent + doc.indent, doc.doc))
        elif isinstance(doc, Align):
            stack.append((col, doc.doc))
        elif isinstance(doc, Annotated):
            yield SMetaPush(doc.annotation)
            stack.append(SMetaPop(doc.annotation))
            stack.append((indent, doc.doc))
        elif isinstance(doc, Choice):
            raise AssertionError(
                'Choice reached the renderer; only resolved layouts '
                'can be rendered'
            )
        else:
            raise TypeError(
                f"Got {repr(doc)} of type {type(doc).__name__}, "
                "expected 'Doc'"
            )


def default_render_to_stream(stream, sdocs, newline='\n', separator=' '):
    for sdoc in sdocs:
        if isinstance(sdoc, str):
            stream.write(sdoc)
        elif isinstance(sdoc, SLine):
            stream.write(newline + separator * sdoc.indent)


def default_render_to_str(sdocs, newline='\n', separator=' '):
    stream = StringIO()
    default_render_to_stream(stream, sdocs, newline, separator)
    return stream.getvalue()


def render(doc, col=0):
    return default_render_to_str(layout_to_sdocs(doc, col))


def render_lines(doc, col=0):
    return render(doc, col).split('\n')
