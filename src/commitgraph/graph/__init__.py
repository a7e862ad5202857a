from .colors import ColorAssigner, parse_color, parse_palette
from .engine import Graph, RenderOptions, render, render_branches, render_lines
from .lanes import ColumnAllocator, Edge, Lane, LaneState, Step
from .rows import Cell, Frame, RowRenderer
from .styles import GLYPH_SETS, GlyphSet, GraphStyle, glyphs_for
from .text import Field, RenderRow, TextCompositor

__all__ = (
    'Cell',
    'ColorAssigner',
    'ColumnAllocator',
    'Edge',
    'Field',
    'Frame',
    'GLYPH_SETS',
    'GlyphSet',
    'Graph',
    'GraphStyle',
    'Lane',
    'LaneState',
    'RenderOptions',
    'RenderRow',
    'RowRenderer',
    'Step',
    'TextCompositor',
    'glyphs_for',
    'parse_color',
    'parse_palette',
    'render',
    'render_branches',
    'render_lines',
)
