from datetime import datetime, timezone

import pytest

from commitgraph import make_commit


@pytest.fixture()
def merge_commits():
    """c3 -> c2 (merge of c1a and c1b) -> c1a -> c1b, newest first
    """
    return [
        make_commit('c3', ['c2'], 'Add readme'),
        make_commit('c2', ['c1a', 'c1b'], 'Merge feature'),
        make_commit('c1a', [], 'Fix parser'),
        make_commit('c1b', [], 'Start feature'),
    ]


@pytest.fixture()
def linear_commits():
    hashes = [f'{i:040x}' for i in range(10, 0, -1)]
    commits = []
    for idx, digest in enumerate(hashes):
        parents = hashes[idx + 1:idx + 2]
        commits.append(make_commit(digest, parents, f'commit number {len(hashes) - idx}'))
    return commits


@pytest.fixture()
def dated_commit():
    return make_commit('5d1ab7e0c3f2',
                       ['0aa1'],
                       'Tune lane allocation',
                       author='Ada Lovelace',
                       email='ada@example.com',
                       date=datetime(2024, 3, 5, 14, 7, 9, tzinfo=timezone.utc),
                       refs=['HEAD', 'main', 'origin/main'])


@pytest.fixture()
def history_file(tmp_path):
    """Write a yaml history document to disk, returning its path.
    """
    def _writer(contents: str, name='history.yml'):
        pth = tmp_path / name
        pth.write_text(contents, encoding='utf-8')
        return str(pth)
    return _writer
