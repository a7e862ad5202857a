import logging
import sys
from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence, Union

from .colors import ColorAssigner, ColorToken
from .lanes import ColumnAllocator
from .rows import RowRenderer
from .styles import GraphStyle, glyphs_for
from .text import RenderRow, TextCompositor
from ..constants import DEFAULT_WIDTH, MIN_WIDTH
from ..records import BranchRef, CommitNode

logger = logging.getLogger(__name__)

__all__ = ('RenderOptions', 'render', 'render_lines', 'render_branches', 'Graph')


class RenderOptions(NamedTuple):
    """Validated options of a single render call.
    """
    style: GraphStyle = GraphStyle.UNICODE
    width: int = DEFAULT_WIDTH
    palette: Optional[Sequence[ColorToken]] = None
    detailed: bool = False
    show_meta: bool = False

    @classmethod
    def create(cls,
               style: Union[str, GraphStyle] = GraphStyle.UNICODE,
               width: int = DEFAULT_WIDTH,
               palette: Optional[Sequence[ColorToken]] = None,
               *,
               detailed: bool = False,
               show_meta: bool = False) -> 'RenderOptions':
        style = GraphStyle.parse(style)
        if isinstance(width, bool) or not isinstance(width, int):
            raise TypeError(f'width must be an int, not {type(width)}')
        if width < MIN_WIDTH:
            logger.debug(f'width {width} below minimum, clamped to {MIN_WIDTH}')
            width = MIN_WIDTH
        if palette is not None:
            palette = tuple(palette)
        return cls(style=style,
                   width=width,
                   palette=palette,
                   detailed=bool(detailed) or style.detailed,
                   show_meta=bool(show_meta))

    @classmethod
    def from_config(cls, **overrides) -> 'RenderOptions':
        """Options taken from the ``render`` / ``theme`` configuration sections.

        Keyword arguments which are not None take precedence over the
        configured values. ``color`` selects whether ``theme.palette`` is used;
        an explicit ``palette`` implies ``color=True``.
        """
        from .. import config

        opts = {
            'style': config.get('render.style', GraphStyle.UNICODE.value),
            'width': config.get('render.width', DEFAULT_WIDTH),
            'detailed': config.get('render.detailed', False),
            'show_meta': config.get('render.show_meta', False),
        }
        color = config.get('render.color', False)
        palette = config.get('theme.palette', None)
        for key, value in overrides.items():
            if value is None:
                continue
            if key == 'color':
                color = value
            elif key == 'palette':
                palette = value
                color = True
            else:
                opts[key] = value
        return cls.create(palette=palette if color else None, **opts)


def _check_commit(commit) -> CommitNode:
    if not isinstance(commit, CommitNode):
        raise TypeError(f'expected CommitNode, got {type(commit)}: {commit!r}')
    return commit


def _rows(commits: Iterable[CommitNode], opts: RenderOptions) -> Iterator[RenderRow]:
    allocator = ColumnAllocator()
    renderer = RowRenderer(glyphs_for(opts.style))
    compositor = TextCompositor(opts.width, detailed=opts.detailed, show_meta=opts.show_meta)

    for commit in commits:
        step = allocator.advance(_check_commit(commit))
        frame = renderer.frame(step)
        padding = renderer.cell_strings(renderer.padding_frame(step)) if opts.detailed else ()
        yield compositor.compose(commit, renderer.cell_strings(frame), padding)
    allocator.finish()


def render(commits: Iterable[CommitNode],
           style: Union[str, GraphStyle] = GraphStyle.UNICODE,
           width: int = DEFAULT_WIDTH,
           *,
           detailed: bool = False,
           show_meta: bool = False) -> Iterator[RenderRow]:
    """Lay out ``commits`` and yield one :class:`RenderRow` per commit.

    Rows come out lazily and in input order. Every call starts from a fresh
    lane table, so the same inputs always give the same rows and calls may run
    side by side. Options are checked before the first row is produced.

    Parameters
    ----------
    commits : Iterable[CommitNode]
        commits in display order (children before parents). Parents may point
        to commits anywhere in, or entirely outside of, the sequence.
    style : Union[str, GraphStyle], optional
        glyph set: 'ascii', 'unicode', 'compact' or 'detailed' (the default is
        'unicode'). 'detailed' draws unicode glyphs and turns on ``detailed``.
    width : int, optional
        maximum length of a graph line; values below 20 are raised to 20. (the
        default is 80)
    detailed : bool, optional, kwarg only
        add author and date continuation lines under every commit.
    show_meta : bool, optional, kwarg only
        append ``<author> Mon D`` after the message.

    Returns
    -------
    Iterator[RenderRow]
        structured rows; ``row.text`` is the plain graph line.
    """
    opts = RenderOptions.create(style, width, detailed=detailed, show_meta=show_meta)
    return _rows(commits, opts)


def render_lines(commits: Iterable[CommitNode],
                 style: Union[str, GraphStyle] = GraphStyle.UNICODE,
                 width: int = DEFAULT_WIDTH,
                 palette: Optional[Sequence[ColorToken]] = None,
                 *,
                 detailed: bool = False,
                 show_meta: bool = False,
                 theme: Optional[dict] = None) -> Iterator[str]:
    """Text lines of the rendered graph, colorized when ``palette`` is given.
    """
    opts = RenderOptions.create(style, width, palette, detailed=detailed, show_meta=show_meta)
    colors = ColorAssigner(opts.palette, theme) if opts.palette is not None else None
    return _lines(_rows(commits, opts), colors)


def _lines(rows: Iterable[RenderRow], colors: Optional[ColorAssigner]) -> Iterator[str]:
    for row in rows:
        if colors is None:
            yield from row.lines()
        else:
            yield from colors.decorate(row)


def render_branches(branches: Iterable[BranchRef],
                    style: Union[str, GraphStyle] = GraphStyle.UNICODE,
                    palette: Optional[Sequence[ColorToken]] = None,
                    *,
                    theme: Optional[dict] = None) -> List[str]:
    """One line per branch, the current branch marked with the commit glyph.

    Branches that diverged from their upstream get an
    ``[N ahead, M behind]`` suffix.
    """
    glyphs = glyphs_for(style)
    colors = ColorAssigner(palette, theme) if palette is not None else None

    lines = []
    for branch in branches:
        if not isinstance(branch, BranchRef):
            raise TypeError(f'expected BranchRef, got {type(branch)}: {branch!r}')
        marker = glyphs.commit if branch.current else glyphs.space
        head = f'{marker}{glyphs.space}{branch.name}'
        if colors is not None:
            head = colors.highlight(head) if branch.current else colors.muted(head)

        counts = []
        if branch.ahead > 0:
            counts.append((f'{branch.ahead} ahead', 'success'))
        if branch.behind > 0:
            counts.append((f'{branch.behind} behind', 'error'))
        if counts:
            if colors is None:
                info = ', '.join(txt for txt, _ in counts)
            else:
                info = ', '.join(getattr(colors, kind)(txt) for txt, kind in counts)
            head = f'{head} [{info}]'
        lines.append(head)
    return lines


class Graph(object):
    """Prints a rendered commit graph to a file handle.

    Thin convenience wrapper over :func:`render_lines` which keeps the
    options of one view together.
    """

    def __init__(self,
                 fh=None,
                 style: Union[str, GraphStyle] = GraphStyle.UNICODE,
                 width: int = DEFAULT_WIDTH,
                 palette: Optional[Sequence[ColorToken]] = None,
                 *,
                 detailed: bool = False,
                 show_meta: bool = False,
                 theme: Optional[dict] = None):
        if fh is None:
            self.outfile = sys.stdout
        else:
            self.outfile = fh
        self.opts = RenderOptions.create(style, width, palette,
                                         detailed=detailed, show_meta=show_meta)
        self.theme = theme

    @property
    def use_color(self) -> bool:
        return self.opts.palette is not None

    def lines(self, commits: Iterable[CommitNode]) -> Iterator[str]:
        return render_lines(commits,
                            self.opts.style,
                            self.opts.width,
                            self.opts.palette,
                            detailed=self.opts.detailed,
                            show_meta=self.opts.show_meta,
                            theme=self.theme)

    def show_nodes(self, commits: Iterable[CommitNode]) -> int:
        """Write every line of the graph followed by a newline.

        Returns
        -------
        int
            number of lines written.
        """
        written = 0
        for line in self.lines(commits):
            self.outfile.write(line)
            self.outfile.write('\n')
            written += 1
        return written
