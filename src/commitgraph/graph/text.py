from datetime import datetime
from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Tuple

from ..constants import (
    DETAIL_INDENT,
    ELLIPSIS,
    MIN_MESSAGE_BUDGET,
    MIN_WIDTH,
    REF_HEAD,
    SEP_FIELD,
    SEP_REF,
)
from ..records import CommitNode

__all__ = ('Field', 'RenderRow', 'TextCompositor', 'format_refs', 'format_meta')


class Field(Enum):  # pylint: disable=too-few-public-methods
    REFS = 'refs'
    HASH = 'hash'
    MESSAGE = 'message'
    META = 'meta'
    DETAIL = 'detail'


class RenderRow(NamedTuple):
    """One output unit per commit, fields kept apart for the color pass.

    Attributes:
        cells     -- lane-grid strings, two characters per lane.
        refs      -- formatted ref list, '' when the commit has none.
        hash      -- short hash.
        message   -- message, shortened with an ellipsis when ``truncated``.
        meta      -- trailing author / date summary, '' unless requested.
        truncated -- True if the message was shortened to fit the width.
        padding   -- lane-grid strings drawn in front of each detail line.
        details   -- continuation lines (author, date) in detailed mode.
    """
    cells: Tuple[str, ...]
    refs: str
    hash: str
    message: str
    meta: str = ''
    truncated: bool = False
    padding: Tuple[str, ...] = ()
    details: Tuple[str, ...] = ()

    @property
    def graph(self) -> str:
        return ''.join(self.cells)

    @property
    def padding_graph(self) -> str:
        return ''.join(self.padding)

    def segments(self) -> List[Tuple[Field, str]]:
        """Non-empty text fields following the lane grid, in display order.
        """
        fields = ((Field.REFS, self.refs),
                  (Field.HASH, self.hash),
                  (Field.MESSAGE, self.message),
                  (Field.META, self.meta))
        return [(kind, txt) for kind, txt in fields if txt]

    @property
    def text(self) -> str:
        return self.graph + SEP_FIELD.join(txt for _, txt in self.segments())

    def lines(self) -> Iterator[str]:
        yield self.text
        for detail in self.details:
            yield self.padding_graph + detail

    def __str__(self):
        return '\n'.join(self.lines())


def _summary(message: str) -> str:
    # rows are single text lines
    return message.splitlines()[0] if message else ''


def format_refs(refs: Iterable[str]) -> str:
    """``(a, b)`` list of the refs worth showing; HEAD and blanks are dropped.
    """
    shown = [ref for ref in refs if ref and ref != REF_HEAD]
    if not shown:
        return ''
    return f'({SEP_REF.join(shown)})'


def format_meta(commit: CommitNode) -> str:
    parts = []
    if commit.author:
        parts.append(f'<{commit.author}>')
    if commit.date is not None:
        parts.append(f'{commit.date:%b} {commit.date.day}')
    return SEP_FIELD.join(parts)


def format_date(date: datetime) -> str:
    """git style timestamp, day of month not padded: ``Mon Jan 2 15:04:05 2006``
    """
    return f'{date:%a %b} {date.day} {date:%H:%M:%S %Y}'


def format_details(commit: CommitNode) -> Tuple[str, ...]:
    details = []
    if commit.author or commit.email:
        who = commit.author
        if commit.email:
            who = f'{who} <{commit.email}>'.strip()
        details.append(f'{DETAIL_INDENT}Author: {who}')
    if commit.date is not None:
        details.append(f'{DETAIL_INDENT}Date: {format_date(commit.date)}')
    return tuple(details)


class TextCompositor(object):
    """Appends commit text to a lane grid and fits the result to a width.

    Only the message is ever shortened. When less than
    ``MIN_MESSAGE_BUDGET`` characters would be left for it, the row is kept
    whole rather than cut down to a stub.
    """

    def __init__(self, width: int, *, detailed: bool = False, show_meta: bool = False):
        self.width = max(width, MIN_WIDTH)
        self.detailed = detailed
        self.show_meta = show_meta

    def compose(self,
                commit: CommitNode,
                cells: Iterable[str],
                padding: Iterable[str] = ()) -> RenderRow:
        row = RenderRow(cells=tuple(cells),
                        refs=format_refs(commit.refs),
                        hash=commit.short_hash,
                        message=_summary(commit.message),
                        meta=format_meta(commit) if self.show_meta else '')
        if self.detailed:
            row = row._replace(padding=tuple(padding), details=format_details(commit))
        return self.fit(row)

    def fit(self, row: RenderRow) -> RenderRow:
        overflow = len(row.text) - self.width
        if overflow <= 0 or not row.message:
            return row

        budget = len(row.message) - overflow - len(ELLIPSIS)
        if budget < MIN_MESSAGE_BUDGET:
            return row
        return row._replace(message=row.message[:budget] + ELLIPSIS, truncated=True)
