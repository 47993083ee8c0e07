"""Find the k-th largest element with QuickSelect."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, MutableSequence


def ordinal_suffix(n: int) -> str:
    """Return "st", "nd" or "rd" for 1, 2 and 3, and "th" otherwise."""
    return {1: "st", 2: "nd", 3: "rd"}.get(n, "th")


def partition(values: MutableSequence[int], low: int, high: int) -> int:
    """Partition ``values[low:high+1]`` in descending order around its last element.

    Elements not smaller than the pivot end up to its left. Returns the
    pivot's final index.
    """
    if not 0 <= low <= high < len(values):
        raise IndexError(f"invalid partition range [{low}, {high}]")
    pivot = values[high]
    store = low
    for j in range(low, high):
        if values[j] >= pivot:
            values[store], values[j] = values[j], values[store]
            store += 1
    values[store], values[high] = values[high], values[store]
    return store


def _select(
    values: MutableSequence[int], k: int, log: Callable[[str], None] = lambda _: None
) -> int:
    low, high = 0, len(values) - 1
    while low <= high:
        log(
            f"  QuickSelect called: range [{low}, {high}], "
            f"looking for {k}{ordinal_suffix(k)} largest"
        )
        log(f"    Partitioning range [{low}, {high}] with pivot = {values[high]}")
        pivot_index = partition(values, low, high)
        shown = "".join(
            f"[{v}] " if index == pivot_index else f"{v} "
            for index, v in enumerate(values[low : high + 1], start=low)
        )
        log(f"    After partition: {shown}")
        position = pivot_index - low + 1
        log(f"    Pivot at index {pivot_index} is in position {position}")
        if position == k:
            log(f"    Found! {k}{ordinal_suffix(k)} largest element is {values[pivot_index]}")
            return values[pivot_index]
        if position > k:
            log(f"    Searching left partition for {k}{ordinal_suffix(k)} largest")
            high = pivot_index - 1
        else:
            k -= position
            log(f"    Searching right partition for {k}{ordinal_suffix(k)} largest")
            low = pivot_index + 1
    raise ValueError("k is out of range")


def kth_largest(values: Iterable[int], k: int) -> int:
    """Return the k-th largest value (1-based) without modifying ``values``."""
    data = list(values)
    if not 1 <= k <= len(data):
        raise ValueError(f"k must be between 1 and {len(data)}, got {k}")
    return _select(data, k)


def _format_array(values: Iterable[int], message: str) -> str:
    return f"{message}: " + "".join(f"{v} " for v in values)


def _find_traced(values: list[int], k: int) -> int:
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}, got {k}")
    print(f"=== FINDING {k}{ordinal_suffix(k).upper()} LARGEST ELEMENT ===")
    data = list(values)
    print(_format_array(data, "Original array"))
    return _select(data, k, print)


def _demonstrate(values: list[int], k: int) -> None:
    suffix = ordinal_suffix(k)
    print("=== ALGORITHM DEMONSTRATION ===")
    print(f"Problem: Find the {k}{suffix} largest element in the array")
    print("Approach: QuickSelect (Divide and Conquer)\n")
    print(_format_array(values, "Input array"))
    print(f"k = {k}\n")
    result = _find_traced(values, k)
    print("\n=== VERIFICATION ===")
    ordered = sorted(values, reverse=True)
    print(_format_array(ordered, "Sorted array (descending)"))
    print(f"The {k}{suffix} largest element is: {result}")
    print(f"Verification: sortedArr[{k - 1}] = {ordered[k - 1]} ✓")


_COMPLEXITY = """
=== TIME COMPLEXITY ANALYSIS ===
QuickSelect Algorithm:
• Best Case: O(n) - When pivot divides array into equal halves
• Average Case: O(n) - Expected linear time
• Worst Case: O(n²) - When pivot is always the smallest/largest

Recurrence Relation:
• T(n) = T(n/2) + O(n) in average case
• T(n) = T(n-1) + O(n) in worst case

Space Complexity: O(log n) for recursion stack (average case)

Advantage over full sorting:
• QuickSelect: O(n) average case
• Full QuickSort: O(n log n)"""

_EXAMPLES = [([3, 2, 1, 5, 6, 4], 2), ([3, 2, 3, 1, 2, 4, 5, 5, 6], 4), ([1], 1)]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read n, n integers and k from standard input and find the k-th largest."
    )
    parser.parse_args(argv)

    print("=== KTH LARGEST ELEMENT USING QUICKSELECT ===")
    print("Divide and Conquer Approach\n")
    tokens = iter(sys.stdin.read().split())
    try:
        print("Enter number of elements: ", end="")
        n = int(next(tokens))
        print(f"Enter {n} elements: ", end="")
        values = [int(next(tokens)) for _ in range(n)]
        print("Enter k (for kth largest): ", end="")
        k = int(next(tokens))
        print("\n")
        _demonstrate(values, k)
    except (StopIteration, ValueError) as exc:
        print(f"\nInvalid input: {exc or 'unexpected end of input'}", file=sys.stderr)
        return 1

    print(_COMPLEXITY)
    print("=== ADDITIONAL TEST CASES ===")
    for number, (example, example_k) in enumerate(_EXAMPLES, start=1):
        print(f"\nTest {number}: " + _format_array(example, "Array"))
        result = _find_traced(example, example_k)
        print(f"k = {example_k}, Result = {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())