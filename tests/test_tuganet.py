import random

import pytest

from asatools.tuganet import Network, format_network, generate_network, main


def _components(network):
    parent = list(range(network.vertex_count + 1))

    def find(x):
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for u, v in network.edges:
        parent[find(u)] = find(v)
    sizes = {}
    for vertex in range(1, network.vertex_count + 1):
        root = find(vertex)
        sizes[root] = sizes.get(root, 0) + 1
    return sorted(sizes.values())


@pytest.mark.parametrize("seed", range(10))
def test_edges_are_simple_and_in_range(seed):
    network = generate_network(30, 60, 4, 5, 10, random.Random(seed))
    assert network.vertex_count == 30
    for u, v in network.edges:
        assert 1 <= u < v <= 30
    assert len(set(network.edges)) == len(network.edges)


@pytest.mark.parametrize("seed", range(10))
def test_components_match_subnetworks(seed):
    network = generate_network(40, 50, 5, 3, 12, random.Random(seed))
    sizes = _components(network)
    assert len(sizes) == 5
    assert sum(sizes) == 40
    assert all(3 <= size <= 12 for size in sizes)


@pytest.mark.parametrize("seed", range(10))
def test_zero_target_keeps_only_connecting_edges(seed):
    network = generate_network(20, 0, 4, 2, 8, random.Random(seed))
    assert 20 - 4 <= network.edge_count <= 20


def test_target_reached_when_room_is_plenty():
    network = generate_network(50, 60, 1, 50, 50, random.Random(3))
    assert network.edge_count == 60


def test_all_singletons_have_no_edges():
    network = generate_network(6, 10, 6, 1, 1, random.Random(1))
    assert network.edges == []
    assert _components(network) == [1] * 6


def test_same_seed_same_network():
    first = generate_network(25, 40, 3, 2, 10, random.Random(42))
    second = generate_network(25, 40, 3, 2, 10, random.Random(42))
    assert first == second


@pytest.mark.parametrize(
    "args",
    [
        (3, 5, 4, 1, 10),
        (10, 5, 2, 6, 5),
        (10, 5, 3, 4, 10),
        (30, 5, 2, 1, 10),
    ],
)
def test_invalid_parameters_raise(args):
    with pytest.raises(ValueError):
        generate_network(*args, rng=random.Random(0))


def test_format_network_layout():
    text = format_network(Network(3, [(1, 2), (2, 3)]))
    assert text == "3 2\n1 2\n2 3\n"


def test_format_header_matches_edges():
    network = generate_network(15, 20, 2, 3, 10, random.Random(7))
    lines = format_network(network).splitlines()
    assert lines[0] == f"15 {network.edge_count}"
    assert len(lines) == network.edge_count + 1
    assert [tuple(map(int, line.split())) for line in lines[1:]] == network.edges


def test_main_prints_network(capsys):
    assert main(["12", "15", "3", "2", "6", "9"]) == 0
    out = capsys.readouterr().out.splitlines()
    vertices, edge_count = map(int, out[0].split())
    assert vertices == 12
    assert edge_count == len(out) - 1


def test_main_is_deterministic_with_seed(capsys):
    main(["12", "15", "3", "2", "6", "9"])
    first = capsys.readouterr().out
    main(["12", "15", "3", "2", "6", "9"])
    assert capsys.readouterr().out == first


def test_main_rejects_bad_parameters(capsys):
    assert main(["2", "5", "4"]) == 1
    assert "SubN cannot be bigger than V" in capsys.readouterr().err