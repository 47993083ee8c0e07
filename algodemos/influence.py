"""Depth-first search with discovery and finish times over a follower graph."""

from __future__ import annotations

import argparse
import itertools
from dataclasses import dataclass


@dataclass(frozen=True)
class DfsResult:
    """Timestamps and trace produced by a depth-first search."""

    start: int
    num_users: int
    discovery: dict[int, int]
    finish: dict[int, int]
    trace: tuple[str, ...]

    def duration(self, user: int) -> int | None:
        """Finish time minus discovery time, or None if the user was not visited."""
        if user not in self.discovery:
            return None
        return self.finish[user] - self.discovery[user]

    def reachable(self) -> list[int]:
        """Visited users in ascending order."""
        return sorted(self.discovery)

    def unreachable(self) -> list[int]:
        """Users the search never reached, in ascending order."""
        return [user for user in range(self.num_users) if user not in self.discovery]


@dataclass(frozen=True)
class InfluenceReport:
    """Summary of which users look influential according to DFS timestamps."""

    deepest_user: int
    max_discovery: int
    most_influential: int
    min_duration: int
    leaves: list[int]


class FollowGraph:
    """Directed graph in which an edge ``a -> b`` means user ``a`` follows ``b``."""

    def __init__(self, num_users: int) -> None:
        if num_users < 0:
            raise ValueError("number of users must not be negative")
        self.num_users = num_users
        self._follows: list[list[int]] = [[] for _ in range(num_users)]

    def _check(self, user: int) -> None:
        if not 0 <= user < self.num_users:
            raise IndexError(f"user {user} is out of range 0..{self.num_users - 1}")

    def add_follow(self, src: int, dest: int) -> None:
        """Record that ``src`` follows ``dest``; the newest follow is listed first."""
        self._check(src)
        self._check(dest)
        self._follows[src].insert(0, dest)

    def following(self, user: int) -> list[int]:
        """Users followed by ``user``, most recently added first."""
        self._check(user)
        return list(self._follows[user])

    def dfs(self, start: int) -> DfsResult:
        """Run a depth-first search from ``start`` recording timestamps."""
        self._check(start)
        clock = itertools.count(1)
        discovery: dict[int, int] = {}
        finish: dict[int, int] = {}
        trace: list[str] = []

        def discover(user: int) -> None:
            discovery[user] = next(clock)
            trace.append(f"User {user}: Discovered at time {discovery[user]}")

        discover(start)
        stack = [(start, iter(self._follows[start]))]
        while stack:
            user, pending = stack[-1]
            for adjacent in pending:
                if adjacent in discovery:
                    trace.append(f"  User {user} follows User {adjacent} (already visited)")
                    continue
                trace.append(f"  User {user} follows User {adjacent} (exploring...)")
                discover(adjacent)
                stack.append((adjacent, iter(self._follows[adjacent])))
                break
            else:
                stack.pop()
                finish[user] = next(clock)
                trace.append(f"User {user}: Finished at time {finish[user]}")

        return DfsResult(start, self.num_users, discovery, finish, tuple(trace))


def analyze_influence(result: DfsResult) -> InfluenceReport:
    """Find the deepest user, the shortest-lived user and the leaf users."""
    visited = result.reachable()
    deepest = max(visited, key=lambda user: result.discovery[user])
    most_influential = min(visited, key=result.duration)
    return InfluenceReport(
        deepest_user=deepest,
        max_discovery=result.discovery[deepest],
        most_influential=most_influential,
        min_duration=result.duration(most_influential),
        leaves=[user for user in visited if result.duration(user) == 1],
    )


def format_graph(graph: FollowGraph) -> str:
    lines = ["=== ADJACENCY LIST REPRESENTATION ==="]
    for user in range(graph.num_users):
        follows = graph.following(user)
        listed = "".join(f"{dest} " for dest in follows) if follows else "(no one)"
        lines.append(f"User {user} follows: {listed}")
    return "\n".join(lines) + "\n\n"


def format_timestamps(result: DfsResult) -> str:
    lines = [
        "=== DFS TIMESTAMPS RESULTS ===",
        "User\tDiscovery Time\tFinish Time\tDuration\tStatus",
        "----\t--------------\t-----------\t--------\t------",
    ]
    for user in range(result.num_users):
        duration = result.duration(user)
        if duration is None:
            lines.append(f"{user}\t-\t\t-\t\t-\t\tNot Reachable")
        else:
            lines.append(
                f"{user}\t{result.discovery[user]}\t\t{result.finish[user]}"
                f"\t\t{duration}\t\tVisited"
            )
    return "\n".join(lines) + "\n\n"


def format_influence(report: InfluenceReport) -> str:
    lines = [
        "=== INFLUENTIAL USER ANALYSIS ===",
        "Analysis Results:",
        f"1. Most deeply nested user: User {report.deepest_user} "
        f"(discovered at time {report.max_discovery})",
        "   → This user is deep in the connection chain, likely influential",
        f"2. User with shortest exploration duration: User {report.most_influential} "
        f"(duration: {report.min_duration})",
        "   → This suggests a leaf node - potentially most influential",
        "3. Leaf nodes (don't follow anyone - highly influential):",
    ]
    lines.extend(f"   → User {user} (leaf node)" for user in report.leaves)
    return "\n".join(lines) + "\n\n"


def format_reachability(result: DfsResult) -> str:
    reachable = "".join(f"{user} " for user in result.reachable())
    unreachable = result.unreachable()
    missing = (
        "".join(f"{user} " for user in unreachable)
        if unreachable
        else "None - all users are reachable!"
    )
    return (
        "=== REACHABILITY ANALYSIS ===\n"
        f"Users reachable from User {result.start}: {reachable}\n"
        f"Users NOT reachable from User {result.start}: {missing}\n\n"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Analyse a sample follower graph with timestamped DFS."
    )
    parser.parse_args(argv)

    print("=== SOCIAL MEDIA USER CONNECTION ANALYSIS ===")
    print("Using DFS with Timestamps to Identify Influential Users\n")

    graph = FollowGraph(5)
    for src, dest in [(0, 1), (0, 2), (1, 3), (2, 4)]:
        graph.add_follow(src, dest)

    print(format_graph(graph), end="")
    print("=== DFS TRAVERSAL WITH TIMESTAMPS ===")
    print("Starting DFS from User 0:\n")
    result = graph.dfs(0)
    print("\n".join(result.trace))
    print()
    print(format_timestamps(result), end="")
    print(format_influence(analyze_influence(result)), end="")
    print(format_reachability(result), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())