import pytest


def prefixes(commits, style='unicode'):
    from commitgraph.graph import ColumnAllocator, RowRenderer, glyphs_for
    alloc = ColumnAllocator()
    renderer = RowRenderer(glyphs_for(style))
    return [renderer.prefix(renderer.frame(alloc.advance(c))) for c in commits]


@pytest.mark.parametrize('style,expected', [
    ('unicode', ['● ', '◉─╮ ', '● │ ', '  ● ']),
    ('ascii', ['o ', '*-\\ ', 'o | ', '  o ']),
    ('compact', ['• ', '*-. ', '•   ', '  • ']),
])
def test_merge_scenario_prefixes(merge_commits, style, expected):
    assert prefixes(merge_commits, style) == expected


@pytest.mark.parametrize('style,glyph', [('unicode', '● '), ('ascii', 'o ')])
def test_linear_history_prefix_is_constant(linear_commits, style, glyph):
    assert set(prefixes(linear_commits, style)) == {glyph}


def test_join_into_lane_on_the_right():
    from commitgraph import make_commit
    commits = [make_commit('m', ['a', 'b']), make_commit('a', ['b']), make_commit('b', [])]
    assert prefixes(commits) == ['◉─╮ ', '●─┤ ', '  ● ']
    assert prefixes(commits, 'ascii') == ['*-\\ ', 'o-| ', '  o ']


def test_join_into_lane_on_the_left():
    from commitgraph import make_commit
    commits = [make_commit('m', ['a', 'b']), make_commit('b', ['a']), make_commit('a', [])]
    assert prefixes(commits) == ['◉─╮ ', '├─● ', '● ']
    assert prefixes(commits, 'ascii') == ['*-\\ ', '|-o ', 'o ']


def test_new_lane_opened_on_the_left():
    from commitgraph import make_commit
    commits = [
        make_commit('m', ['a', 'b']),
        make_commit('a', []),
        make_commit('b', ['c', 'd']),
    ]
    assert prefixes(commits) == ['◉─╮ ', '● │ ', '╭─◉ ']
    assert prefixes(commits, 'ascii') == ['*-\\ ', 'o | ', '/-* ']


def test_octopus_merge():
    from commitgraph import make_commit
    commits = [make_commit('m', ['a', 'b', 'c'])]
    assert prefixes(commits) == ['◉─╮─╮ ']


def test_vertical_line_wins_over_crossing_edge():
    from commitgraph import make_commit
    commits = [make_commit('top', ['a', 'b']), make_commit('a', ['x', 'y'])]
    assert prefixes(commits) == ['◉─╮ ', '◉─│─╮ ']
    assert prefixes(commits, 'ascii') == ['*-\\ ', '*-|-\\ ']


def test_dangling_parent_draws_continuing_line():
    from commitgraph import make_commit
    commits = [make_commit('m', ['a', 'outside']), make_commit('a', []), make_commit('z', [])]
    assert prefixes(commits) == ['◉─╮ ', '● │ ', '● │ ']


def test_frame_width_and_links(merge_commits):
    from commitgraph.graph import Cell, ColumnAllocator, RowRenderer, glyphs_for
    alloc = ColumnAllocator()
    renderer = RowRenderer(glyphs_for('unicode'))
    alloc.advance(merge_commits[0])
    frame = renderer.frame(alloc.advance(merge_commits[1]))
    assert frame.width == 2
    assert frame.cells == (Cell.MERGE, Cell.CORNER_RIGHT)
    assert frame.links == (True, False)
    assert len(renderer.prefix(frame)) == 2 * frame.width


def test_padding_draws_open_lanes(merge_commits):
    from commitgraph.graph import ColumnAllocator, RowRenderer, glyphs_for
    alloc = ColumnAllocator()
    renderer = RowRenderer(glyphs_for('unicode'))
    padding = [renderer.padding(alloc.advance(c)) for c in merge_commits]
    assert padding == ['│ ', '│ │ ', '  │ ', '']
