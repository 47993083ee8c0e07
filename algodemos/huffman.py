"""Huffman coding of text whose lower-case vowels are masked with '*'."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

VOWELS = frozenset("aeiou")
MAX_INPUT = 99


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a symbol."""

    freq: int
    symbol: str | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class _MinHeap:
    """Binary min-heap on node frequency with a fixed tie-breaking order."""

    def __init__(self, nodes: Iterable[HuffmanNode]) -> None:
        self._items = list(nodes)
        for i in range((len(self._items) - 2) // 2, -1, -1):
            self._sift_down(i)

    def __len__(self) -> int:
        return len(self._items)

    def _sift_down(self, i: int) -> None:
        items = self._items
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < len(items) and items[child].freq < items[smallest].freq:
                    smallest = child
            if smallest == i:
                return
            items[i], items[smallest] = items[smallest], items[i]
            i = smallest

    def pop(self) -> HuffmanNode:
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return top

    def push(self, node: HuffmanNode) -> None:
        items = self._items
        items.append(node)
        i = len(items) - 1
        while i and node.freq < items[(i - 1) // 2].freq:
            items[i] = items[(i - 1) // 2]
            i = (i - 1) // 2
        items[i] = node


def mask_vowels(text: str) -> str:
    """Replace every lower-case vowel with '*'."""
    return "".join("*" if ch in VOWELS else ch for ch in text)


def count_symbols(text: str) -> dict[str, int]:
    """Count each character, ordered by code point."""
    counts = Counter(text)
    return {ch: counts[ch] for ch in sorted(counts)}


def build_huffman_tree(frequencies: Mapping[str, int]) -> HuffmanNode:
    """Build a Huffman tree; symbols enter the heap in the mapping's order."""
    if not frequencies:
        raise ValueError("cannot build a Huffman tree without symbols")
    if any(freq <= 0 for freq in frequencies.values()):
        raise ValueError("symbol frequencies must be positive")
    heap = _MinHeap(HuffmanNode(freq, symbol) for symbol, freq in frequencies.items())
    while len(heap) > 1:
        left = heap.pop()
        right = heap.pop()
        heap.push(HuffmanNode(left.freq + right.freq, None, left, right))
    return heap.pop()


def generate_codes(root: HuffmanNode) -> dict[str, str]:
    """Map each leaf symbol to its bit string ('0' for left, '1' for right)."""
    codes: dict[str, str] = {}
    stack = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = prefix
            continue
        if node.right is not None:
            stack.append((node.right, prefix + "1"))
        if node.left is not None:
            stack.append((node.left, prefix + "0"))
    return codes


def encode(text: str, codes: Mapping[str, str]) -> str:
    """Concatenate the codes of the characters of ``text``."""
    try:
        return "".join(codes[ch] for ch in text)
    except KeyError as exc:
        raise ValueError(f"no code for symbol {exc.args[0]!r}") from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read a line from standard input, mask vowels and Huffman-encode it."
    )
    parser.parse_args(argv)

    print(f"Enter a string (max {MAX_INPUT + 1} chars): ", end="")
    text = sys.stdin.readline()[:MAX_INPUT].split("\n", 1)[0]
    masked = mask_vowels(text)
    frequencies = count_symbols(masked)
    if not frequencies:
        print("\nNothing to encode.", file=sys.stderr)
        return 1
    codes = generate_codes(build_huffman_tree(frequencies))

    print("\nHuffman Codes:")
    for symbol in frequencies:
        print(f"Character '{symbol}': {codes[symbol]}")
    print("\nEncoded Binary String:")
    print(encode(masked, codes))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())