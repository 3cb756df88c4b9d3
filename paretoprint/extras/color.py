"""Colored rendering of resolved layouts.

Annotations in a layout are mapped to pygments token types, styled
with a pygments style and written as ANSI escapes with colorful. The
default mapping covers ``syntax.Token``; callers can map their own
annotation values instead.
"""
from io import StringIO

from ..render import layout_to_sdocs
from ..sdoc import (
    SLine,
    SMetaPush,
    SMetaPop,
)
from ..syntax import Token

try:
    import colorful
    from pygments import styles
    from pygments.token import string_to_tokentype
except ImportError:
    _COLOR_DEPS_INSTALLED = False
else:
    _COLOR_DEPS_INSTALLED = True


DEFAULT_TOKEN_MAP = {
    Token.COMMENT_SINGLE: 'Comment.Single',
    Token.KEYWORD_CONSTANT: 'Keyword.Constant',
    Token.NAME_BUILTIN: 'Name.Builtin',
    Token.NAME_ENTITY: 'Name.Entity',
    Token.NAME_FUNCTION: 'Name.Function',
    Token.LITERAL_STRING: 'String',
    Token.STRING_AFFIX: 'String.Affix',
    Token.STRING_ESCAPE: 'String.Escape',
    Token.NUMBER_BINARY: 'Number.Bin',
    Token.NUMBER_INT: 'Number.Integer',
    Token.NUMBER_FLOAT: 'Number.Float',
    Token.OPERATOR: 'Operator',
    Token.PUNCTUATION: 'Punctuation',
}

DEFAULT_STYLE = 'monokai'


def _require_color_deps():
    if not _COLOR_DEPS_INSTALLED:
        raise ImportError(
            "'pygments' and 'colorful' packages must be "
            "installed to use colored output."
        )


def _palette_color(hexcode):
    # colorful only resolves named colors; every hex code gets its own
    # palette entry. Names can't contain underscores.
    name = f'paretoprint{hexcode.lstrip("#").lower()}'
    colorful.update_palette({name: f'#{hexcode.lstrip("#")}'})
    return name


class ColorScheme:
    """Maps annotation values to colorful styles.

    ``style`` is a pygments style class or the name of one.
    ``token_map`` maps annotation values to pygments token types, given
    either as ``pygments.token`` objects or dotted names such as
    ``'Name.Function'``. Annotations missing from the map stay
    uncolored.
    """

    def __init__(self, style=None, token_map=None):
        _require_color_deps()

        if style is None:
            style = DEFAULT_STYLE
        if isinstance(style, str):
            style = styles.get_style_by_name(style)

        self.style = style
        self.token_map = DEFAULT_TOKEN_MAP if token_map is None else token_map
        self._colors = {}

    def color_for(self, annotation):
        """Returns the colorful style for ``annotation``, or None."""
        try:
            return self._colors[annotation]
        except KeyError:
            pass
        except TypeError:
            # unhashable annotations can't be in the map either
            return None

        tokentype = self.token_map.get(annotation)
        color = None
        if tokentype is not None:
            color = self._style_tokentype(string_to_tokentype(tokentype))
        self._colors[annotation] = color
        return color

    def _style_tokentype(self, tokentype):
        attrs = self.style.style_for_token(tokentype)

        parts = [
            modifier
            for attr, modifier in (
                ('bold', 'bold'),
                ('italic', 'italic'),
                ('underline', 'underlined'),
            )
            if attrs[attr]
        ]
        if attrs['color']:
            parts.append(_palette_color(attrs['color']))
        if attrs['bgcolor']:
            parts.extend(['on', _palette_color(attrs['bgcolor'])])

        if not parts:
            return None
        return getattr(colorful, '_'.join(parts))


def colored_render_to_stream(
    stream,
    sdocs,
    scheme=None,
    newline='\n',
    separator=' '
):
    """Writes ``sdocs`` to ``stream``, coloring annotated parts with
    ``scheme``. Colors nest: leaving an annotation restores the color
    of the enclosing one."""
    _require_color_deps()

    if scheme is None:
        scheme = ColorScheme()

    # One entry per open annotation; None for uncolored ones.
    open_colors = []

    for sdoc in sdocs:
        if isinstance(sdoc, str):
            stream.write(sdoc)
        elif isinstance(sdoc, SLine):
            stream.write(newline + separator * sdoc.indent)
        elif isinstance(sdoc, SMetaPush):
            color = scheme.color_for(sdoc.value)
            open_colors.append(color)
            if color is not None:
                stream.write(str(color))
        elif isinstance(sdoc, SMetaPop):
            if open_colors.pop() is None:
                continue
            enclosing = [c for c in open_colors if c is not None]
            if enclosing:
                stream.write(str(enclosing[-1]))
            else:
                stream.write(str(colorful.reset))


def render_colored(layout, col=0, scheme=None):
    """Renders a resolved, choice-free layout to a string with ANSI
    colors."""
    stream = StringIO()
    colored_render_to_stream(stream, layout_to_sdocs(layout, col), scheme)
    return stream.getvalue()
