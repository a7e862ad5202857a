from enum import Enum
from typing import NamedTuple, Union

__all__ = ('GraphStyle', 'GlyphSet', 'GLYPH_SETS', 'glyphs_for')


class GraphStyle(Enum):
    ASCII = 'ascii'
    UNICODE = 'unicode'
    COMPACT = 'compact'
    DETAILED = 'detailed'

    @classmethod
    def parse(cls, value: Union[str, 'GraphStyle']) -> 'GraphStyle':
        """Accept a GraphStyle or its (case-insensitive) name.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(f'style must be str or GraphStyle, not {type(value)}')
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ', '.join(s.value for s in cls)
            raise ValueError(f'style {value!r} is not one of: {valid}') from None

    @property
    def detailed(self) -> bool:
        return self is GraphStyle.DETAILED


class GlyphSet(NamedTuple):
    """Characters used to draw one lane cell.

    Attributes:
        vertical     -- line passing straight through the row.
        horizontal   -- edge crossing a cell, and the spacer of a linked cell.
        corner_right -- edge ending in a newly opened lane right of the commit.
        corner_left  -- edge ending in a newly opened lane left of the commit.
        join_right   -- edge merging into an existing lane right of the commit.
        join_left    -- edge merging into an existing lane left of the commit.
        merge        -- commit marker of a commit with more than one parent.
        commit       -- commit marker.
        space        -- empty cell.
    """
    vertical: str
    horizontal: str
    corner_right: str
    corner_left: str
    join_right: str
    join_left: str
    merge: str
    commit: str
    space: str = ' '


UNICODE_GLYPHS = GlyphSet(
    vertical='│',
    horizontal='─',
    corner_right='╮',
    corner_left='╭',
    join_right='┤',
    join_left='├',
    merge='◉',
    commit='●',
)

ASCII_GLYPHS = GlyphSet(
    vertical='|',
    horizontal='-',
    corner_right='\\',
    corner_left='/',
    join_right='|',
    join_left='|',
    merge='*',
    commit='o',
)

# compact drops pass-through lines, only commits and edges are drawn
COMPACT_GLYPHS = GlyphSet(
    vertical=' ',
    horizontal='-',
    corner_right='.',
    corner_left='.',
    join_right='|',
    join_left='|',
    merge='*',
    commit='•',
)

GLYPH_SETS = {
    GraphStyle.ASCII: ASCII_GLYPHS,
    GraphStyle.UNICODE: UNICODE_GLYPHS,
    GraphStyle.COMPACT: COMPACT_GLYPHS,
    GraphStyle.DETAILED: UNICODE_GLYPHS,
}


def glyphs_for(style: Union[str, GraphStyle]) -> GlyphSet:
    return GLYPH_SETS[GraphStyle.parse(style)]
