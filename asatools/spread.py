"""Longest chain of infections a disease can make through a contact network.

Individuals who reach each other in both directions belong to one group and
infect each other at no cost; a jump counts each step between groups. The
answer is the length of the longest path in the graph of groups.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

Edge = tuple[int, int]


def _adjacency(vertex_count: int, edges: Iterable[Edge]) -> tuple[list[list[int]], list[Edge]]:
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative: {vertex_count}")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count + 1)]
    edge_list = []
    for u, v in edges:
        for vertex in (u, v):
            if not 1 <= vertex <= vertex_count:
                raise ValueError(f"vertex {vertex} is outside 1..{vertex_count}")
        adjacency[u].append(v)
        edge_list.append((u, v))
    return adjacency, edge_list


def _finish_order(adjacency: list[list[int]]) -> list[int]:
    """Return vertices in increasing order of depth-first finishing time."""
    visited = [False] * len(adjacency)
    order: list[int] = []
    for start in range(1, len(adjacency)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                order.append(vertex)
    return order


def _components(adjacency: list[list[int]], edges: list[Edge]) -> tuple[list[int], int]:
    """Label strongly connected components, numbered in topological order."""
    transposed: list[list[int]] = [[] for _ in adjacency]
    for u, v in edges:
        transposed[v].append(u)
    component = [0] * len(adjacency)
    count = 0
    for root in reversed(_finish_order(adjacency)):
        if component[root]:
            continue
        count += 1
        component[root] = count
        stack = [root]
        while stack:
            vertex = stack.pop()
            for neighbour in transposed[vertex]:
                if not component[neighbour]:
                    component[neighbour] = count
                    stack.append(neighbour)
    return component, count


def max_jumps(vertex_count: int, edges: Iterable[Edge]) -> int:
    """Return the largest number of jumps between groups along any path.

    Vertices are numbered from 1 to ``vertex_count``; each edge ``(u, v)``
    means that ``u`` can infect ``v``.
    """
    adjacency, edge_list = _adjacency(vertex_count, edges)
    component, count = _components(adjacency, edge_list)
    incoming: list[list[int]] = [[] for _ in range(count + 1)]
    for u, v in edge_list:
        if component[u] != component[v]:
            incoming[component[v]].append(component[u])
    distance = [0] * (count + 1)
    for current in range(1, count + 1):
        distance[current] = max((distance[p] + 1 for p in incoming[current]), default=0)
    return max(distance)


def parse_graph(text: str) -> tuple[int, list[Edge]]:
    """Parse ``vertices edges`` followed by one ``u v`` pair per edge."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"input must consist of integers: {exc}") from None
    if len(numbers) < 2:
        raise ValueError("expected number of vertices and edges")
    vertex_count, edge_count = numbers[:2]
    if edge_count < 0:
        raise ValueError(f"number of edges must not be negative: {edge_count}")
    values = numbers[2:]
    if len(values) < 2 * edge_count:
        raise ValueError(f"expected {edge_count} edges of two integers each")
    it = iter(values[: 2 * edge_count])
    return vertex_count, list(zip(it, it))


def main(argv: list[str] | None = None) -> int:
    """Read a contact network from standard input and print the longest spread."""
    parser = argparse.ArgumentParser(
        description="Compute the largest number of jumps a disease can make."
    )
    parser.parse_args(argv)
    try:
        vertex_count, edges = parse_graph(sys.stdin.read())
        result = max_jumps(vertex_count, edges)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())