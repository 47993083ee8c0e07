"""Single-source shortest paths over an adjacency matrix."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

INF = 9999
MAX_VERTICES = 20


def shortest_distances(matrix: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return the shortest distance from ``source`` to every vertex.

    A weight of 0 means there is no edge. Vertices that cannot be reached
    keep the distance ``INF``.
    """
    n = len(matrix)
    if n > MAX_VERTICES:
        raise ValueError(f"at most {MAX_VERTICES} vertices are supported")
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= source < n:
        raise IndexError(f"source vertex {source} is out of range")

    dist = [INF] * n
    visited = [False] * n
    dist[source] = 0
    for _ in range(n - 1):
        # Among unvisited vertices with the smallest distance, the last one wins.
        u = max((v for v in range(n) if not visited[v]), key=lambda v: (-dist[v], v))
        visited[u] = True
        for v, weight in enumerate(matrix[u]):
            if not visited[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def _label(index: int) -> str:
    return chr(ord("A") + index)


def format_distances(distances: Sequence[int], source: int) -> str:
    lines = [f"Vertex\tShortest Distance from Source {source}"]
    lines.extend(f"{_label(i)}\t{d}" for i, d in enumerate(distances))
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read a weighted adjacency matrix from standard input and run Dijkstra."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        print(f"Enter number of vertices (max {MAX_VERTICES}): ", end="")
        n = int(next(tokens))
        print("Enter adjacency matrix (0 for no edge):")
        matrix = []
        for i in range(n):
            print(f"From vertex {_label(i)}:")
            matrix.append([int(next(tokens)) for _ in range(n)])
        print("Enter source vertex (0 for A, 1 for B, ...): ", end="")
        source = int(next(tokens))
        distances = shortest_distances(matrix, source)
    except (StopIteration, ValueError, IndexError) as exc:
        print(f"\nInvalid input: {exc or 'unexpected end of input'}", file=sys.stderr)
        return 1
    print(format_distances(distances, source), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())