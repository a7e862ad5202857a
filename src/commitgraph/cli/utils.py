from typing import List, Tuple

import click
import yaml

from ..graph.colors import parse_color
from ..graph.styles import GraphStyle
from ..records import BranchRef, CommitNode, branch_from_mapping, commit_from_mapping


class StyleType(click.ParamType):
    """Custom type for click accepting a graph style name in any letter case
    """
    name = 'style'

    def convert(self, value, param, ctx):
        if isinstance(value, GraphStyle):
            return value
        try:
            return GraphStyle.parse(value)
        except (TypeError, ValueError) as e:
            self.fail(str(e), param, ctx)

    def get_metavar(self, param, *args, **kwargs):
        return f'[{"|".join(s.value for s in GraphStyle)}]'


class PaletteType(click.ParamType):
    """Custom type for click parsing a comma separated list of color tokens

    Each token is a click color name, a 256 color index or a ``#RRGGBB`` hex
    string, e.g. ``--palette 'green,#00B4A6,214'``.
    """
    name = 'palette'

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value
        tokens = [tok.strip() for tok in str(value).split(',') if tok.strip()]
        if not tokens:
            self.fail(f'palette {value!r} has no colors', param, ctx)
        parsed = []
        for tok in tokens:
            try:
                parsed.append(parse_color(int(tok) if tok.isdigit() else tok))
            except ValueError as e:
                self.fail(str(e), param, ctx)
        return tuple(parsed)


def load_document(stream) -> Tuple[List[CommitNode], List[BranchRef]]:
    """Decode commit and branch records from a YAML or JSON document.

    The document is either a list of commit mappings, or a mapping holding a
    ``commits`` list and an optional ``branches`` list. An empty document
    holds no records.

    Raises
    ------
    ValueError
        if the document cannot be parsed or has an unexpected shape.
    """
    try:
        doc = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise ValueError(f'could not parse history document: {e}') from None

    if doc is None:
        return [], []
    if isinstance(doc, list):
        raw_commits, raw_branches = doc, []
    elif isinstance(doc, dict):
        raw_commits = doc.get('commits') or []
        raw_branches = doc.get('branches') or []
    else:
        raise ValueError(f'history document must be a list or mapping, not {type(doc).__name__}')

    if not isinstance(raw_commits, list) or not isinstance(raw_branches, list):
        raise ValueError('`commits` and `branches` must be lists of records')

    commits = [commit_from_mapping(rec) for rec in raw_commits]
    branches = [branch_from_mapping(rec) for rec in raw_branches]
    return commits, branches
