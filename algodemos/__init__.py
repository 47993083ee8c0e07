"""Traceable demonstrations of DFS, BFS, QuickSelect, Dijkstra and Huffman coding."""

__version__ = "0.1.0"
__all__ = ["influence", "quickselect", "citynav", "dijkstra", "huffman"]