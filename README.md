# algodemos

Five small console demonstrations of classic algorithms. Each can also be
imported and used as a library. The package has no dependencies outside the
standard library.

| Command | Module | What it shows |
|---|---|---|
| `algodemos-influence` | `algodemos.influence` | Depth-first search with discovery/finish timestamps over a "who follows whom" graph |
| `algodemos-quickselect` | `algodemos.quickselect` | Finding the k-th largest element with QuickSelect |
| `algodemos-citynav` | `algodemos.citynav` | Breadth-first search over a road network where roads can be blocked |
| `algodemos-dijkstra` | `algodemos.dijkstra` | Single-source shortest distances from an adjacency matrix |
| `algodemos-huffman` | `algodemos.huffman` | Huffman coding of a string, with its lower-case vowels masked as `*` first |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

`algodemos-influence` builds a five-user sample graph (0 follows 1 and 2,
1 follows 3, 2 follows 4). It prints the adjacency list, then runs a
timestamped DFS from user 0 and prints each step. After that it prints a
table of timestamps, an influence analysis and a reachability report.

`algodemos-quickselect` reads from standard input the number of elements,
the elements and `k`. It traces each partition step of QuickSelect, then
prints the array sorted in descending order as a check. It finishes with
three built-in examples. It exits with status 1 on malformed input or an
out-of-range `k`.

`algodemos-citynav` builds a sample city of six intersections and eight roads
and shows a menu read from standard input. The menu lets you check
reachability, find a shortest path, count connected components, block or
unblock a road, show the network and run a built-in test sequence. Option 8
or the end of input exits.

`algodemos-dijkstra` reads the number of vertices (at most 20), an adjacency
matrix in which 0 means no edge, and a source vertex. It prints the shortest
distance to every vertex, with the vertices labelled `A`, `B`, … in order.
Unreachable vertices show `9999`. On invalid input it exits with status 1.

`algodemos-huffman` reads one line of text and keeps at most its first 99
characters. It replaces every lower-case vowel with `*`, then prints the
Huffman code of each symbol in code-point order and the encoded bit string.
An empty line exits with status 1.

## Library use

```python
from algodemos.influence import FollowGraph, analyze_influence
from algodemos.quickselect import kth_largest
from algodemos.citynav import build_sample_city
from algodemos.dijkstra import shortest_distances
from algodemos.huffman import mask_vowels, count_symbols, build_huffman_tree, generate_codes, encode

graph = FollowGraph(5)
graph.add_follow(0, 1)
graph.add_follow(0, 2)
result = graph.dfs(0)                 # DfsResult: discovery, finish, trace
print(result.reachable(), result.unreachable())
print(analyze_influence(result))      # InfluenceReport

print(kth_largest([3, 2, 1, 5, 6, 4], 2))   # 5

city = build_sample_city()
print(city.shortest_path(0, 4), city.connected_components())
city.block_road(1, 2)                 # raises RoadNotFoundError if no such road
print(city.is_reachable(0, 4))

print(shortest_distances([[0, 4, 1], [4, 0, 2], [1, 2, 0]], 0))

text = mask_vowels("hello world")
codes = generate_codes(build_huffman_tree(count_symbols(text)))
print(encode(text, codes))
```

Errors are raised as exceptions:

- out-of-range users or intersections raise `IndexError`;
- an invalid `k`, or a non-square or oversized matrix, raises `ValueError`;
- an empty or non-positive frequency table raises `ValueError`;
- `encode` raises `ValueError` for a character that has no code.

The `format_*` functions (`format_graph`, `format_timestamps`,
`format_influence`, `format_reachability`, `format_network`,
`format_distances`) return the report text that the commands print.

## Limits

The graphs live only in memory. Nothing is saved between runs, and the
influence and city commands always start from their built-in sample
networks, so they cannot load a graph of your own.