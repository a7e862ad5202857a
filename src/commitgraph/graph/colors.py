"""
Index based colorization of rendered rows.

Colors are applied as a decorator pass over the structured fields of a
:class:`~commitgraph.graph.text.RenderRow`; nothing is found again by scanning
the plain text. Spans are produced with :func:`click.style`, so
:func:`click.unstyle` of a decorated line gives back the plain line exactly.
"""
import re
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import click

from .text import Field, RenderRow
from ..constants import SEP_FIELD

__all__ = ('ColorAssigner', 'parse_color', 'parse_palette', 'DEFAULT_THEME')

ColorToken = Union[str, int, Tuple[int, int, int]]

_HexColorRE = re.compile(r'#([0-9a-fA-F]{6})\Z')

DEFAULT_THEME = {
    'hash': '#00E5FF',
    'message': '#E6EDF3',
    'refs': '#FF6D00',
    'meta': '#8B949E',
    'success': '#3FB950',
    'error': '#F85149',
}


def parse_color(token: ColorToken) -> ColorToken:
    """Normalize one color token to something :func:`click.style` accepts.

    Parameters
    ----------
    token : Union[str, int, Tuple[int, int, int]]
        a click color name (``'green'``, ``'bright_blue'``), a 256 color index,
        an ``(r, g, b)`` tuple or a ``'#RRGGBB'`` hex string.

    Returns
    -------
    Union[str, int, Tuple[int, int, int]]
        the token, with hex strings converted to ``(r, g, b)`` tuples.

    Raises
    ------
    ValueError
        if the token does not name a color.
    """
    if isinstance(token, bool):
        raise ValueError(f'color token {token!r} is not valid')
    if isinstance(token, str):
        token = token.strip()
        if token.startswith('#'):
            match = _HexColorRE.match(token)
            if match is None:
                raise ValueError(f'hex color {token!r} must have the form #RRGGBB')
            digits = match.group(1)
            return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))
        token = token.lower()
    elif isinstance(token, int):
        if not 0 <= token <= 255:
            raise ValueError(f'256 color index {token} out of range [0, 255]')
    elif isinstance(token, (tuple, list)) and len(token) == 3:
        token = tuple(int(c) for c in token)
        if not all(0 <= c <= 255 for c in token):
            raise ValueError(f'rgb color {token} components must be in [0, 255]')
    else:
        raise ValueError(f'color token {token!r} of type {type(token)} is not valid')

    try:
        click.style('', fg=token)
    except TypeError:
        raise ValueError(f'unknown color {token!r}') from None
    return token


def parse_palette(palette: Iterable[ColorToken]) -> Tuple[ColorToken, ...]:
    if isinstance(palette, (str, bytes)):
        raise ValueError(f'palette must be a sequence of color tokens, not {palette!r}')
    parsed = tuple(parse_color(token) for token in palette)
    if not parsed:
        raise ValueError('palette must contain at least one color')
    return parsed


class ColorAssigner(object):
    """Maps lane indices to palette entries and wraps row fields in color spans.

    Lane ``i`` is always drawn in ``palette[i % len(palette)]``. The color
    follows the column, not the branch: a recycled lane keeps the color of its
    index.
    """

    def __init__(self,
                 palette: Sequence[ColorToken],
                 theme: Optional[Mapping[str, ColorToken]] = None):
        self.palette = parse_palette(palette)
        merged = dict(DEFAULT_THEME)
        if theme:
            merged.update({k: v for k, v in theme.items()
                           if k in DEFAULT_THEME and v is not None})
        self.theme = {k: parse_color(v) for k, v in merged.items()}

    def lane_color(self, index: int) -> ColorToken:
        return self.palette[index % len(self.palette)]

    def _lanes(self, cells: Iterable[str]) -> str:
        out = []
        for index, cell in enumerate(cells):
            if cell.strip():
                out.append(click.style(cell, fg=self.lane_color(index)))
            else:
                out.append(cell)
        return ''.join(out)

    def style_field(self, kind: Field, txt: str) -> str:
        if kind is Field.REFS:
            return click.style(txt, fg=self.theme['refs'], bold=True)
        elif kind is Field.HASH:
            return click.style(txt, fg=self.theme['hash'])
        elif kind is Field.MESSAGE:
            return click.style(txt, fg=self.theme['message'])
        else:
            return click.style(txt, fg=self.theme['meta'])

    def decorate(self, row: RenderRow) -> List[str]:
        """Colorized counterparts of ``row.lines()``, one string per line.
        """
        head = self._lanes(row.cells) + SEP_FIELD.join(
            self.style_field(kind, txt) for kind, txt in row.segments())
        lines = [head]
        padding = self._lanes(row.padding)
        for detail in row.details:
            lines.append(padding + self.style_field(Field.DETAIL, detail))
        return lines

    def success(self, txt: str) -> str:
        return click.style(txt, fg=self.theme['success'])

    def error(self, txt: str) -> str:
        return click.style(txt, fg=self.theme['error'])

    def highlight(self, txt: str) -> str:
        return click.style(txt, fg=self.theme['refs'], bold=True)

    def muted(self, txt: str) -> str:
        return click.style(txt, fg=self.theme['meta'])
