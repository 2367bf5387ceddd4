"""Classic algorithms and data structures: sorting, binary searching, a binary search tree, a linked list, LCS and BFS."""

__version__ = "0.1.0"
__all__ = ["bfs", "bst", "lcs", "linked_list", "searching", "sorting"]