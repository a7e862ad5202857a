from enum import Enum
from typing import List, NamedTuple, Tuple

from .lanes import Step
from .styles import GlyphSet

__all__ = ('Cell', 'Frame', 'RowRenderer')


class Cell(Enum):  # pylint: disable=too-few-public-methods
    BLANK = 0
    VERTICAL = 1
    HORIZONTAL = 2
    CORNER_RIGHT = 3
    CORNER_LEFT = 4
    JOIN_RIGHT = 5
    JOIN_LEFT = 6
    MERGE = 7
    COMMIT = 8


class Frame(NamedTuple):
    """Cells of one row, lane 0 first.

    ``links[i]`` is True when the spacer following cell ``i`` is part of a
    horizontal edge.
    """
    cells: Tuple[Cell, ...]
    links: Tuple[bool, ...]

    @property
    def width(self) -> int:
        return len(self.cells)


class RowRenderer(object):
    """Turns allocator steps into lane-grid prefixes for a single glyph set.
    """

    def __init__(self, glyphs: GlyphSet):
        self.glyphs = glyphs
        self._glyph_map = {
            Cell.BLANK: glyphs.space,
            Cell.VERTICAL: glyphs.vertical,
            Cell.HORIZONTAL: glyphs.horizontal,
            Cell.CORNER_RIGHT: glyphs.corner_right,
            Cell.CORNER_LEFT: glyphs.corner_left,
            Cell.JOIN_RIGHT: glyphs.join_right,
            Cell.JOIN_LEFT: glyphs.join_left,
            Cell.MERGE: glyphs.merge,
            Cell.COMMIT: glyphs.commit,
        }

    def frame(self, step: Step) -> Frame:
        """Lay out the cells for the row of the commit in ``step``.

        A horizontal edge only fills cells that are otherwise blank; a lane
        passing through the row keeps its vertical glyph.
        """
        columns = [step.column, *step.passthrough, *(e.column for e in step.edges)]
        width = max(columns) + 1
        cells: List[Cell] = [Cell.BLANK] * width
        links: List[bool] = [False] * width

        for index in step.passthrough:
            cells[index] = Cell.VERTICAL
        cells[step.column] = Cell.MERGE if step.merge else Cell.COMMIT

        for edge in step.edges:
            if edge.column == step.column:
                continue
            lo, hi = sorted((step.column, edge.column))
            for index in range(lo + 1, hi):
                if cells[index] is Cell.BLANK:
                    cells[index] = Cell.HORIZONTAL
            for index in range(lo, hi):
                links[index] = True

            to_right = edge.column > step.column
            if edge.joined:
                cells[edge.column] = Cell.JOIN_RIGHT if to_right else Cell.JOIN_LEFT
            else:
                cells[edge.column] = Cell.CORNER_RIGHT if to_right else Cell.CORNER_LEFT

        return Frame(cells=tuple(cells), links=tuple(links))

    def glyph(self, cell: Cell) -> str:
        return self._glyph_map[cell]

    def spacer(self, linked: bool) -> str:
        return self.glyphs.horizontal if linked else self.glyphs.space

    def cell_strings(self, frame: Frame) -> List[str]:
        """Two-character string per lane: glyph followed by its spacer.
        """
        return [self.glyph(cell) + self.spacer(linked)
                for cell, linked in zip(frame.cells, frame.links)]

    def prefix(self, frame: Frame) -> str:
        return ''.join(self.cell_strings(frame))

    def padding_frame(self, step: Step) -> Frame:
        """Frame for a continuation line drawn under the commit's row.

        Every lane still open after the commit is drawn as a vertical line.
        """
        if not step.continuing:
            return Frame(cells=(), links=())
        width = max(step.continuing) + 1
        cells = [Cell.BLANK] * width
        for index in step.continuing:
            cells[index] = Cell.VERTICAL
        return Frame(cells=tuple(cells), links=(False,) * width)

    def padding(self, step: Step) -> str:
        return self.prefix(self.padding_frame(step))
