__version__ = '0.1.0'
__all__ = ('CommitNode', 'BranchRef', 'make_commit', 'GraphStyle', 'RenderRow',
           'Graph', 'render', 'render_lines', 'render_branches')

from .records import BranchRef, CommitNode, make_commit
from .graph import Graph, GraphStyle, RenderRow, render, render_branches, render_lines
