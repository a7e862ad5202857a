"""
Immutable records handed to the rendering engine.

The engine never decodes history itself; callers build :class:`CommitNode`
values (directly, or from decoded YAML / JSON documents via
:func:`commit_from_mapping`) and pass them in.
"""
from datetime import datetime, timezone
from typing import Iterable, List, Mapping, NamedTuple, Optional, Tuple

from .constants import SHORT_HASH_LEN

__all__ = ('CommitNode', 'BranchRef', 'make_commit',
           'commit_from_mapping', 'branch_from_mapping')


class CommitNode(NamedTuple):
    """A single commit record, in the order the caller wants it drawn.

    ``parents`` holds 0 hashes for a root, 1 for a normal commit and 2 or
    more for a merge. Empty strings in ``parents`` are ignored by the engine.
    """
    hash: str
    short_hash: str
    message: str = ''
    author: str = ''
    email: str = ''
    date: Optional[datetime] = None
    refs: Tuple[str, ...] = ()
    parents: Tuple[str, ...] = ()

    @property
    def is_merge(self) -> bool:
        return len([p for p in self.parents if p]) > 1


class BranchRef(NamedTuple):
    """Branch pointer summary used by the branch list renderer.
    """
    name: str
    current: bool = False
    ahead: int = 0
    behind: int = 0


def make_commit(hash: str,
                parents: Iterable[str] = (),
                message: str = '',
                *,
                short_hash: str = None,
                author: str = '',
                email: str = '',
                date: Optional[datetime] = None,
                refs: Iterable[str] = ()) -> CommitNode:
    """Build a :class:`CommitNode`, deriving the short hash when not given.

    Parameters
    ----------
    hash : str
        unique identifier of the commit.
    parents : Iterable[str], optional
        parent hashes, first parent first. (the default is (), a root commit)
    message : str, optional
        one line commit summary. Only the first line of a multi-line message is
        kept.
    short_hash : str, optional, kwarg only
        display form of the hash (the default is None, which takes the first 7
        characters of ``hash``).

    Returns
    -------
    CommitNode
        immutable commit record.
    """
    if not isinstance(hash, str) or not hash:
        raise ValueError(f'commit hash must be a non-empty string, not {hash!r}')
    if isinstance(parents, str):
        raise TypeError(f'parents must be a sequence of hashes, not str {parents!r}')
    if short_hash is None:
        short_hash = hash[:SHORT_HASH_LEN]
    summary = message.splitlines()[0] if message else ''
    return CommitNode(hash=hash,
                      short_hash=short_hash,
                      message=summary,
                      author=author,
                      email=email,
                      date=date,
                      refs=tuple(refs),
                      parents=tuple(parents))


def _parse_date(value) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            raise ValueError(f'date {value!r} is not an ISO-8601 timestamp') from None
    raise ValueError(f'date {value!r} of type {type(value)} is not supported')


def _as_str_list(value, field: str) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        # "a, b" style ref strings, as printed by `git log --format=%D`
        return [v.strip() for v in value.split(',')]
    try:
        return [str(v) if v is not None else '' for v in value]
    except TypeError:
        raise ValueError(f'{field} must be a list of strings, not {value!r}') from None


def commit_from_mapping(data: Mapping) -> CommitNode:
    """Decode one commit record from a mapping loaded out of YAML / JSON.

    Recognized keys are ``hash`` (required), ``short_hash``, ``message``,
    ``author``, ``email``, ``date`` (ISO-8601 string, epoch seconds or a
    datetime), ``refs`` and ``parents``.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f'commit record must be a mapping, not {type(data)}')
    if 'hash' not in data:
        raise ValueError(f'commit record {dict(data)!r} has no `hash` key')

    short_hash = data.get('short_hash')
    return make_commit(str(data['hash']),
                       parents=_as_str_list(data.get('parents'), 'parents'),
                       message=str(data.get('message') or ''),
                       short_hash=str(short_hash) if short_hash else None,
                       author=str(data.get('author') or ''),
                       email=str(data.get('email') or ''),
                       date=_parse_date(data.get('date')),
                       refs=_as_str_list(data.get('refs'), 'refs'))


def branch_from_mapping(data: Mapping) -> BranchRef:
    if not isinstance(data, Mapping) or 'name' not in data:
        raise ValueError(f'branch record {data!r} must be a mapping with a `name` key')
    try:
        ahead = int(data.get('ahead') or 0)
        behind = int(data.get('behind') or 0)
    except (TypeError, ValueError):
        raise ValueError(f'ahead/behind counts of branch {data["name"]!r} must be integers') from None
    return BranchRef(name=str(data['name']),
                     current=bool(data.get('current', False)),
                     ahead=ahead,
                     behind=behind)
