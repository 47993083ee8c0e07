"""Road network navigation: reachability, shortest paths and components with BFS."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator

MAX_INTERSECTIONS = 100
MAX_ROADS = 1000

SAMPLE_INTERSECTIONS = 6
SAMPLE_ROADS = [(0, 1), (0, 2), (1, 2), (1, 3), (2, 3), (2, 4), (3, 4), (5, 5)]


class RoadNotFoundError(LookupError):
    """Raised when no road joins the two given intersections."""

    def __init__(self, a: int, b: int) -> None:
        super().__init__(f"Road between intersections {a} and {b} not found")
        self.a = a
        self.b = b


class CityGraph:
    """Undirected road network whose roads can be blocked and unblocked."""

    def __init__(self, num_intersections: int) -> None:
        if not 0 <= num_intersections <= MAX_INTERSECTIONS:
            raise ValueError(
                f"number of intersections must be between 0 and {MAX_INTERSECTIONS}"
            )
        self.num_intersections = num_intersections
        # Each entry is (destination, road id), most recently added first.
        self._roads: list[list[tuple[int, int]]] = [[] for _ in range(num_intersections)]
        self._blocked: list[bool] = []

    @property
    def num_roads(self) -> int:
        return len(self._blocked)

    def _check(self, intersection: int) -> None:
        if not 0 <= intersection < self.num_intersections:
            raise IndexError(
                f"intersection {intersection} is out of range "
                f"0..{self.num_intersections - 1}"
            )

    def add_road(self, a: int, b: int) -> int:
        """Join ``a`` and ``b`` with a new open road and return its id."""
        self._check(a)
        self._check(b)
        if self.num_roads >= MAX_ROADS:
            raise ValueError(f"at most {MAX_ROADS} roads are supported")
        road_id = self.num_roads
        self._roads[a].insert(0, (b, road_id))
        self._roads[b].insert(0, (a, road_id))
        self._blocked.append(False)
        return road_id

    def _find_road(self, a: int, b: int) -> int:
        self._check(a)
        self._check(b)
        for destination, road_id in self._roads[a]:
            if destination == b:
                return road_id
        raise RoadNotFoundError(a, b)

    def block_road(self, a: int, b: int) -> int:
        """Block the road between ``a`` and ``b`` and return its id."""
        road_id = self._find_road(a, b)
        self._blocked[road_id] = True
        return road_id

    def unblock_road(self, a: int, b: int) -> int:
        """Reopen the road between ``a`` and ``b`` and return its id."""
        road_id = self._find_road(a, b)
        self._blocked[road_id] = False
        return road_id

    def is_blocked(self, road_id: int) -> bool:
        if not 0 <= road_id < self.num_roads:
            raise IndexError(f"road {road_id} does not exist")
        return self._blocked[road_id]

    def neighbors(self, intersection: int) -> list[tuple[int, int]]:
        """Pairs of (destination, road id) leaving ``intersection``, newest first."""
        self._check(intersection)
        return list(self._roads[intersection])

    def _open_neighbors(self, intersection: int) -> Iterator[int]:
        for destination, road_id in self._roads[intersection]:
            if not self._blocked[road_id]:
                yield destination

    def _reachability(self, start: int, end: int) -> tuple[bool, list[int]]:
        self._check(start)
        self._check(end)
        if start == end:
            return True, []
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbor in self._open_neighbors(current):
                if neighbor in visited:
                    continue
                if neighbor == end:
                    return True, order
                visited.add(neighbor)
                queue.append(neighbor)
        return False, order

    def is_reachable(self, start: int, end: int) -> bool:
        """True if ``end`` can be reached from ``start`` over open roads."""
        return self._reachability(start, end)[0]

    def _path_search(self, start: int, end: int) -> tuple[list[int] | None, list[int]]:
        self._check(start)
        self._check(end)
        if start == end:
            return [start], []
        parent: dict[int, int | None] = {start: None}
        queue = deque([start])
        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            if current == end:
                break
            for neighbor in self._open_neighbors(current):
                if neighbor not in parent:
                    parent[neighbor] = current
                    queue.append(neighbor)
        if end not in parent:
            return None, order
        path: list[int] = []
        node: int | None = end
        while node is not None:
            path.append(node)
            node = parent[node]
        path.reverse()
        return path, order

    def shortest_path(self, start: int, end: int) -> list[int] | None:
        """Fewest-roads path from ``start`` to ``end``, or None if unreachable."""
        return self._path_search(start, end)[0]

    def connected_components(self) -> list[list[int]]:
        """Groups of intersections joined by open roads, in BFS discovery order."""
        visited: set[int] = set()
        components: list[list[int]] = []
        for first in range(self.num_intersections):
            if first in visited:
                continue
            visited.add(first)
            component = [first]
            queue = deque([first])
            while queue:
                current = queue.popleft()
                for neighbor in self._open_neighbors(current):
                    if neighbor not in visited:
                        visited.add(neighbor)
                        queue.append(neighbor)
                        component.append(neighbor)
            components.append(component)
        return components


def format_network(city: CityGraph) -> str:
    lines = ["", "=== CITY ROAD NETWORK ==="]
    for intersection in range(city.num_intersections):
        roads = city.neighbors(intersection)
        if roads:
            listed = "".join(
                f"{dest} {'(BLOCKED)' if city.is_blocked(road_id) else '(OPEN)'} "
                for dest, road_id in roads
            )
        else:
            listed = "(no roads)"
        lines.append(f"Intersection {intersection} connects to: {listed}")
    return "\n".join(lines) + "\n\n"


def build_sample_city() -> CityGraph:
    """The six-intersection demonstration network."""
    city = CityGraph(SAMPLE_INTERSECTIONS)
    for a, b in SAMPLE_ROADS:
        city.add_road(a, b)
    return city


def _joined(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def _traced_reachable(city: CityGraph, start: int, end: int) -> bool:
    found, order = city._reachability(start, end)
    if start != end:
        outcome = f"-> {end} (FOUND!)" if found else "(NOT REACHABLE)"
        print(f"BFS Traversal for reachability from {start} to {end}: "
              f"{_joined(order)}{outcome}")
    return found


def _traced_shortest(city: CityGraph, start: int, end: int) -> int | None:
    path, order = city._path_search(start, end)
    if start == end:
        return 0
    print(f"BFS for shortest path from {start} to {end}:")
    reached = bool(order) and order[-1] == end
    print(f"Traversal order: {_joined(order)}", end="")
    if reached:
        print("(DESTINATION REACHED!)")
    if path is None:
        return None
    print("Shortest path: " + " -> ".join(str(node) for node in path))
    return len(path) - 1


def _traced_components(city: CityGraph) -> int:
    print("=== CONNECTED COMPONENTS ANALYSIS ===")
    components = city.connected_components()
    for number, component in enumerate(components, start=1):
        print(f"Component {number}: {_joined(component)}")
    return len(components)


def _traced_change(city: CityGraph, a: int, b: int, block: bool) -> None:
    action = city.block_road if block else city.unblock_road
    try:
        road_id = action(a, b)
    except RoadNotFoundError as exc:
        print(exc)
        return
    state = "blocked" if block else "unblocked"
    print(f"Road {road_id} between intersections {a} and {b} has been {state}")


def _print_travel(city: CityGraph, start: int, end: int) -> None:
    answer = "YES" if _traced_reachable(city, start, end) else "NO"
    print(f"Can travel from {start} to {end}? {answer}")


def _run_tests(city: CityGraph) -> None:
    print("=== COMPREHENSIVE TESTING ===\n")
    print("Test 1: Reachability Analysis")
    _print_travel(city, 0, 4)
    _print_travel(city, 1, 5)
    print()

    print("Test 2: Shortest Path Analysis")
    for start, end in [(0, 4), (1, 3)]:
        distance = _traced_shortest(city, start, end)
        shown = -1 if distance is None else distance
        print(f"Shortest distance from {start} to {end}: {shown} roads")
    print()

    print("Test 3: Connected Components")
    print(f"Total connected components: {_traced_components(city)}\n")

    print("Test 4: Blocking Roads and Re-testing")
    _traced_change(city, 1, 2, block=True)
    _traced_change(city, 2, 3, block=True)
    print(format_network(city), end="")
    print("After blocking roads:")
    _print_travel(city, 0, 4)
    print(f"Connected components after blocking: {_traced_components(city)}\n")

    print("Test 5: Unblocking Roads")
    _traced_change(city, 1, 2, block=False)
    _traced_change(city, 2, 3, block=False)
    print("After unblocking roads:")
    print(f"Connected components after unblocking: {_traced_components(city)}")


_MENU = """
=== SMART CITY NAVIGATION SYSTEM ===
1. Check reachability between two intersections
2. Find shortest path between two intersections
3. Count connected components
4. Block a road
5. Unblock a road
6. Display city network
7. Run comprehensive tests
8. Exit
Choose an option: """


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError from None
    return int(token)


def _prompt_int(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="", flush=True)
    return _read_int(tokens)


def _valid(city: CityGraph, *intersections: int) -> bool:
    if all(0 <= i < city.num_intersections for i in intersections):
        return True
    print("Invalid intersection numbers!")
    return False


def _handle(city: CityGraph, choice: int | None, tokens: Iterator[str]) -> None:
    if choice in (1, 2):
        start = _prompt_int(tokens, "Enter start intersection: ")
        end = _prompt_int(tokens, "Enter end intersection: ")
        if not _valid(city, start, end):
            return
        if choice == 1:
            reachable = _traced_reachable(city, start, end)
            print(f"Result: {'REACHABLE' if reachable else 'NOT REACHABLE'}")
        else:
            distance = _traced_shortest(city, start, end)
            if distance is None:
                print("No path exists!")
            else:
                print(f"Shortest distance: {distance} roads")
    elif choice == 3:
        print(f"Total connected components: {_traced_components(city)}")
    elif choice in (4, 5):
        verb = "block" if choice == 4 else "unblock"
        a = _prompt_int(tokens, f"Enter intersections to {verb} road (int1 int2): ")
        b = _read_int(tokens)
        if _valid(city, a, b):
            _traced_change(city, a, b, block=choice == 4)
    elif choice == 6:
        print(format_network(city), end="")
    elif choice == 7:
        _run_tests(city)
    else:
        print("Invalid choice! Please try again.")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Interactive navigation over a sample city road network."
    )
    parser.parse_args(argv)

    print("=== SMART CITY NAVIGATION SYSTEM ===")
    print("Graph-based Road Network Analysis\n")
    print("Creating sample city network...")
    city = CityGraph(SAMPLE_INTERSECTIONS)
    for a, b in SAMPLE_ROADS:
        road_id = city.add_road(a, b)
        print(f"Road {road_id} added between intersections {a} and {b}")
    print(format_network(city), end="")

    tokens = _tokens(sys.stdin)
    while True:
        print(_MENU, end="", flush=True)
        try:
            choice: int | None = _read_int(tokens)
        except EOFError:
            print()
            return 0
        except ValueError:
            choice = None
        if choice == 8:
            print("Exiting Smart City Navigation System...")
            return 0
        try:
            _handle(city, choice, tokens)
        except EOFError:
            print()
            return 0
        except ValueError:
            print("Invalid input!")


if __name__ == "__main__":
    raise SystemExit(main())