"""Lane (column) bookkeeping for one render pass.

Lanes live in an arena indexed by column number. A separate mapping records
which lane carries which hash: the hash is the next commit expected on that
line of history. Nothing here is shared between render calls; every call of
:func:`commitgraph.graph.engine.render` builds its own allocator.
"""
import heapq
import logging
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Tuple

from ..records import CommitNode

logger = logging.getLogger(__name__)

__all__ = ('LaneState', 'Lane', 'Edge', 'Step', 'ColumnAllocator')


class LaneState(Enum):  # pylint: disable=too-few-public-methods
    UNALLOCATED = 0
    ACTIVE = 1
    TERMINATED = 2


class Lane(object):
    """A single line of history occupying one column.

    Attributes:
        index -- column the lane is drawn in.
        owner -- hash of the commit the line currently leads to.
        state -- LaneState; only ever moves forward.
    """

    __slots__ = ('index', 'owner', 'state')

    def __init__(self, index: int):
        self.index = index
        self.owner = None
        self.state = LaneState.UNALLOCATED

    def activate(self, owner: str):
        if self.state is not LaneState.UNALLOCATED:
            raise RuntimeError(f'lane {self.index} cannot be activated from {self.state}')
        self.owner = owner
        self.state = LaneState.ACTIVE

    def terminate(self):
        if self.state is not LaneState.ACTIVE:
            raise RuntimeError(f'lane {self.index} cannot be terminated from {self.state}')
        self.state = LaneState.TERMINATED

    @property
    def active(self) -> bool:
        return self.state is LaneState.ACTIVE

    def __repr__(self):
        return f'{self.__class__.__name__}(index={self.index}, owner={self.owner!r}, state={self.state.name})'


class Edge(NamedTuple):
    """Connection drawn from a commit's column to one of its parents' lanes.

    ``joined`` is True when the parent already owned a lane before this row
    (a merge-in edge), False when the lane was opened for the parent.
    """
    column: int
    joined: bool


class Step(NamedTuple):
    """Lane changes produced by advancing over a single commit.
    """
    column: int
    merge: bool
    passthrough: Tuple[int, ...]
    edges: Tuple[Edge, ...]
    continuing: Tuple[int, ...]
    released: Tuple[int, ...]


class ColumnAllocator(object):
    """Assigns lanes to lines of history as commits are processed in row order.

    New lanes always take the lowest free column, so a terminated column is
    handed out again before the graph grows wider.
    """

    def __init__(self):
        self._lanes: List[Lane] = []
        self._owners: Dict[str, int] = {}
        self._free: List[int] = []
        self._seen = set()

    @property
    def width(self) -> int:
        """Number of columns the arena has ever grown to.
        """
        return len(self._lanes)

    def lane(self, index: int) -> Lane:
        return self._lanes[index]

    def active_lanes(self) -> List[Lane]:
        return [lane for lane in self._lanes if lane.active]

    def owner_of(self, commit_hash: str) -> Optional[int]:
        return self._owners.get(commit_hash)

    def _allocate(self, commit_hash: str) -> int:
        if self._free:
            index = heapq.heappop(self._free)
        else:
            index = len(self._lanes)
            self._lanes.append(None)
        lane = Lane(index)
        lane.activate(commit_hash)
        self._lanes[index] = lane
        self._owners[commit_hash] = index
        return index

    def _release(self, index: int):
        lane = self._lanes[index]
        lane.terminate()
        if self._owners.get(lane.owner) == index:
            del self._owners[lane.owner]
        heapq.heappush(self._free, index)

    def column_for(self, commit_hash: str) -> int:
        """Column of the lane carrying ``commit_hash``, allocating one if needed.
        """
        index = self._owners.get(commit_hash)
        if index is None:
            index = self._allocate(commit_hash)
        return index

    def advance(self, commit: CommitNode) -> Step:
        """Move every line of history past ``commit``.

        The first parent continues in the commit's own column when it is not
        already carried by another lane. Further parents get new lanes, left
        to right in listed order. Parents already carried by a lane produce a
        merge-in edge instead of a new lane. The commit's column is released
        when no parent continued in it.
        """
        if commit.hash in self._seen:
            logger.debug(f'commit {commit.short_hash} appears more than once; layout is best effort')
        self._seen.add(commit.hash)

        column = self.column_for(commit.hash)
        own = self._lanes[column]
        passthrough = tuple(lane.index for lane in self._lanes
                            if lane is not None and lane.active and lane.index != column)

        # the commit is drawn now, nothing below waits for it anymore
        del self._owners[commit.hash]

        parents = list(dict.fromkeys(p for p in commit.parents if p))
        edges = []
        continued = False
        for position, parent in enumerate(parents):
            target = self._owners.get(parent)
            if target is not None:
                if target != column:
                    edges.append(Edge(target, joined=True))
                continue
            if position == 0:
                own.owner = parent
                self._owners[parent] = column
                continued = True
                continue
            edges.append(Edge(self._allocate(parent), joined=False))

        released = ()
        if not continued:
            self._release(column)
            released = (column,)

        continuing = tuple(lane.index for lane in self._lanes
                           if lane is not None and lane.active)
        return Step(column=column,
                    merge=len(parents) > 1,
                    passthrough=passthrough,
                    edges=tuple(edges),
                    continuing=continuing,
                    released=released)

    def finish(self) -> List[Lane]:
        """Lanes still open once the input is exhausted.

        These lead to parents outside the supplied window; they were drawn to
        the bottom of the output and are not an error.
        """
        open_lanes = self.active_lanes()
        if open_lanes:
            logger.debug(f'{len(open_lanes)} lane(s) lead outside the window: '
                         f'{[lane.owner for lane in open_lanes]}')
        return open_lanes
