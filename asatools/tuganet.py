"""Random social-network instances made of disconnected sub-networks.

Individuals are split into sub-networks whose sizes lie between a minimum and
a maximum. Each sub-network is first made connected as a cycle, a line or a
tree. Further random connections inside sub-networks are then added until the
requested number of connections is reached or too many attempts hit existing
ones. Individual identifiers are shuffled before the network is returned.
"""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field

DEFAULT_MIN_SIZE = 1
DEFAULT_MAX_SIZE = 10


@dataclass
class Network:
    """An undirected network of ``vertex_count`` individuals numbered from 1."""

    vertex_count: int
    edges: list[tuple[int, int]] = field(default_factory=list)

    @property
    def edge_count(self) -> int:
        return len(self.edges)


class _Builder:
    def __init__(self, vertex_count: int, rng: random.Random) -> None:
        self.rng = rng
        self.adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
        self.neighbours: list[set[int]] = [set() for _ in range(vertex_count)]
        self.edge_count = 0

    def add_edge(self, u: int, v: int) -> None:
        self.adjacency[u].append(v)
        self.neighbours[u].add(v)
        self.adjacency[v].append(u)
        self.neighbours[v].add(u)
        self.edge_count += 1


def _validate(vertices: int, subnets: int, min_size: int, max_size: int) -> None:
    if vertices < 0:
        raise ValueError(f"number of individuals must not be negative: {vertices}")
    if subnets <= 0:
        raise ValueError(f"number of sub-networks must be positive: {subnets}")
    if subnets > vertices:
        raise ValueError("SubN cannot be bigger than V")
    if min_size <= 0:
        raise ValueError(f"minimal sub-network size must be positive: {min_size}")
    if max_size < min_size:
        raise ValueError("m cannot be bigger than M")
    if subnets * min_size > vertices:
        raise ValueError("V cannot be smaller than SubN * m")
    if subnets * max_size < vertices:
        raise ValueError("V cannot be bigger than SubN * M")


def _distribute(
    vertices: int, subnets: int, min_size: int, max_size: int, rng: random.Random
) -> list[int]:
    sizes = [min_size] * subnets
    assigned = min_size * subnets
    while assigned < vertices:
        net = rng.randrange(subnets)
        while sizes[net] >= max_size:
            net = (net + 1) % subnets
        sizes[net] += 1
        assigned += 1
    return sizes


def _connect_subnets(builder: _Builder, sizes: list[int], starts: list[int]) -> None:
    rng = builder.rng
    for size, first in zip(sizes, starts):
        if size == 1:
            continue
        last = first + size
        shape = rng.randrange(3)
        if shape in (0, 1):
            for j in range(first, last - 1):
                builder.add_edge(j, j + 1)
            if shape == 0 and size > 2:
                builder.add_edge(last - 1, first)
        else:
            children = rng.randrange(3) + 1
            parent = first
            for j in range(first + 1, last):
                builder.add_edge(parent, j)
                children -= 1
                if children == 0:
                    children = rng.randrange(3) + 1
                    parent += 1


def _add_remaining(
    builder: _Builder, target: int, sizes: list[int], starts: list[int]
) -> None:
    remaining = target - builder.edge_count
    if remaining <= 0 or all(size == 1 for size in sizes):
        return
    rng = builder.rng
    tries = 10 * remaining
    while remaining > 0:
        net = rng.randrange(len(sizes))
        size = sizes[net]
        if size == 1:
            continue
        u = rng.randrange(size) + starts[net]
        v = rng.randrange(size) + starts[net]
        if u == v:
            continue
        if v not in builder.neighbours[u]:
            builder.add_edge(u, v)
            remaining -= 1
        else:
            tries -= 1
            if tries == 0:
                break


def generate_network(
    vertices: int,
    edges: int,
    subnets: int,
    min_size: int = DEFAULT_MIN_SIZE,
    max_size: int = DEFAULT_MAX_SIZE,
    rng: random.Random | None = None,
) -> Network:
    """Generate a random network of ``subnets`` disconnected sub-networks.

    ``edges`` is the number of connections aimed at; the result may hold more
    when connecting the sub-networks already takes more, or fewer when free
    pairs become too hard to find.
    """
    _validate(vertices, subnets, min_size, max_size)
    rng = rng if rng is not None else random.Random()

    sizes = _distribute(vertices, subnets, min_size, max_size, rng)
    starts = []
    offset = 0
    for size in sizes:
        starts.append(offset)
        offset += size

    builder = _Builder(vertices, rng)
    _connect_subnets(builder, sizes, starts)
    _add_remaining(builder, edges, sizes, starts)

    mapping = list(range(vertices))
    for _ in range(vertices):
        u = rng.randrange(vertices)
        v = rng.randrange(vertices)
        mapping[u], mapping[v] = mapping[v], mapping[u]

    result = [
        (mapping[u] + 1, mapping[v] + 1)
        for u, neighbours in enumerate(builder.adjacency)
        for v in neighbours
        if mapping[u] < mapping[v]
    ]
    return Network(vertices, result)


def format_network(network: Network) -> str:
    """Render a network as ``V E`` followed by one ``u v`` line per connection."""
    lines = [f"{network.vertex_count} {network.edge_count}"]
    lines.extend(f"{u} {v}" for u, v in network.edges)
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Generate a network from command-line parameters and print it."""
    parser = argparse.ArgumentParser(
        description="Generate a random social network made of sub-networks."
    )
    parser.add_argument("V", type=int, help="number of individuals in the social network")
    parser.add_argument("E", type=int, help="number of connections between individuals")
    parser.add_argument("SubN", type=int, help="number of sub-networks")
    parser.add_argument(
        "m", type=int, nargs="?", default=DEFAULT_MIN_SIZE,
        help="minimal number of individuals per sub-network",
    )
    parser.add_argument(
        "M", type=int, nargs="?", default=DEFAULT_MAX_SIZE,
        help="maximal number of individuals per sub-network",
    )
    parser.add_argument("seed", type=int, nargs="?", help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    try:
        network = generate_network(args.V, args.E, args.SubN, args.m, args.M, rng)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(format_network(network))
    return 0


if __name__ == "__main__":
    sys.exit(main())