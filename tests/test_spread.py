import io

import pytest

from asatools.spread import main, max_jumps, parse_graph


def _chain(n):
    return [(i, i + 1) for i in range(1, n)]


def test_chain_counts_every_step():
    n = 6
    assert max_jumps(n, _chain(n)) == n - 1


def test_cycle_has_no_jumps():
    n = 5
    edges = _chain(n) + [(n, 1)]
    assert max_jumps(n, edges) == 0


def test_no_edges():
    assert max_jumps(4, []) == 0


def test_cycle_collapses_to_single_group():
    with_cycle = [(1, 2), (2, 3), (3, 1), (3, 4), (4, 5)]
    collapsed = [(1, 4), (4, 5)]
    assert max_jumps(5, with_cycle) == max_jumps(5, collapsed)


def test_reversing_edges_keeps_result():
    edges = [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5), (5, 6), (6, 5), (2, 7)]
    reversed_edges = [(v, u) for u, v in edges]
    assert max_jumps(7, edges) == max_jumps(7, reversed_edges)


def test_diamond_takes_longest_branch():
    edges = [(1, 2), (1, 3), (3, 6), (2, 4), (4, 5), (5, 6)]
    assert max_jumps(6, edges) == 4


def test_result_independent_of_edge_order():
    edges = [(1, 2), (2, 3), (3, 2), (3, 4), (5, 1), (4, 6)]
    assert max_jumps(6, edges) == max_jumps(6, list(reversed(edges)))


def test_long_chain_does_not_overflow_stack():
    n = 20000
    assert max_jumps(n, _chain(n)) == n - 1


def test_out_of_range_vertex_rejected():
    with pytest.raises(ValueError):
        max_jumps(3, [(1, 4)])


def test_parse_graph_round_trip():
    assert parse_graph("3 2\n1 2\n2 3\n") == (3, [(1, 2), (2, 3)])


@pytest.mark.parametrize("text", ["", "3", "3 2\n1 2\n", "3 1\na b"])
def test_parse_graph_rejects_bad_text(text):
    with pytest.raises(ValueError):
        parse_graph(text)


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n1 2\n2 3\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == str(max_jumps(3, [(1, 2), (2, 3)]))


def test_main_fails_on_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3"))
    assert main([]) == 1
    assert capsys.readouterr().out == ""