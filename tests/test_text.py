import pytest


def test_format_refs_drops_head_and_blanks():
    from commitgraph.graph.text import format_refs
    assert format_refs(['HEAD', 'main', '', 'origin/main']) == '(main, origin/main)'
    assert format_refs(['HEAD']) == ''
    assert format_refs([]) == ''


def test_format_meta(dated_commit):
    from commitgraph.graph.text import format_meta
    assert format_meta(dated_commit) == '<Ada Lovelace> Mar 5'
    assert format_meta(dated_commit._replace(author='')) == 'Mar 5'
    assert format_meta(dated_commit._replace(author='', date=None)) == ''


def test_format_details(dated_commit):
    from commitgraph.graph.text import format_details
    assert format_details(dated_commit) == (
        '  Author: Ada Lovelace <ada@example.com>',
        '  Date: Tue Mar 5 14:07:09 2024',
    )
    assert format_details(dated_commit._replace(author='', email='', date=None)) == ()


def test_compose_orders_fields(dated_commit):
    from commitgraph.graph import TextCompositor
    row = TextCompositor(80).compose(dated_commit, ['● '])
    assert row.text == '● (main, origin/main) 5d1ab7e Tune lane allocation'
    assert row.truncated is False
    assert row.details == ()


def test_compose_with_meta(dated_commit):
    from commitgraph.graph import TextCompositor
    row = TextCompositor(100, show_meta=True).compose(dated_commit, ['● '])
    assert row.text == '● (main, origin/main) 5d1ab7e Tune lane allocation <Ada Lovelace> Mar 5'


def test_compose_detailed_lines(dated_commit):
    from commitgraph.graph import TextCompositor
    row = TextCompositor(80, detailed=True).compose(dated_commit, ['● '], ['│ '])
    assert list(row.lines()) == [
        '● (main, origin/main) 5d1ab7e Tune lane allocation',
        '│   Author: Ada Lovelace <ada@example.com>',
        '│   Date: Tue Mar 5 14:07:09 2024',
    ]
    assert str(row) == '\n'.join(row.lines())


def test_empty_fields_leave_no_double_spaces():
    from commitgraph import make_commit
    from commitgraph.graph import TextCompositor
    row = TextCompositor(80).compose(make_commit('abcdef12'), ['o '])
    assert row.text == 'o abcdef1'


def test_fit_truncates_message_to_exact_width():
    from commitgraph import make_commit
    from commitgraph.graph import TextCompositor
    commit = make_commit('abc1234', message='x' * 40)
    row = TextCompositor(30).compose(commit, ['● '])
    assert row.truncated is True
    assert len(row.text) == 30
    assert row.message == 'x' * 17 + '...'


def test_fit_keeps_row_when_budget_too_small():
    from commitgraph import make_commit
    from commitgraph.graph import TextCompositor
    commit = make_commit('abc1234', message='y' * 30)
    row = TextCompositor(20).compose(commit, ['● '])
    assert row.truncated is False
    assert row.message == 'y' * 30
    assert len(row.text) == 40


def test_fit_never_touches_refs_or_hash():
    from commitgraph import make_commit
    from commitgraph.graph import TextCompositor
    commit = make_commit('abc1234', message='z' * 50, refs=['feature/very-long-branch-name'])
    row = TextCompositor(60).compose(commit, ['● '])
    assert row.refs == '(feature/very-long-branch-name)'
    assert row.hash == 'abc1234'
    assert row.truncated is True
    assert len(row.text) == 60


@pytest.mark.parametrize('width', [5, 19, 20])
def test_compositor_width_floor(width):
    from commitgraph.graph import TextCompositor
    assert TextCompositor(width).width == 20


def test_large_width_never_truncates(linear_commits):
    from commitgraph.graph import TextCompositor
    comp = TextCompositor(10_000)
    for commit in linear_commits:
        assert comp.compose(commit, ['● ']).truncated is False


@pytest.mark.parametrize('when,expected', [
    ((2006, 1, 2, 15, 4, 5), 'Mon Jan 2 15:04:05 2006'),
    ((2024, 11, 23, 0, 0, 9), 'Sat Nov 23 00:00:09 2024'),
])
def test_format_date_does_not_pad_day(when, expected):
    from datetime import datetime
    from commitgraph.graph.text import format_date
    assert format_date(datetime(*when)) == expected


def test_compose_keeps_first_message_line():
    from commitgraph import CommitNode
    from commitgraph.graph import TextCompositor
    commit = CommitNode(hash='a', short_hash='a', message='one\ntwo\n\nthree')
    row = TextCompositor(80).compose(commit, ['● '])
    assert row.message == 'one'
    assert row.text == '● a one'
