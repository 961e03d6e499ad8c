"""Classic algorithms and data structures in plain Python.

Sorting, graph search, linked lists, tries, binary trees, string checks,
integer helpers, array problems and a Tower of Hanoi solver.
"""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "graphs",
    "hanoi",
    "linked_list",
    "numbers",
    "sorting",
    "strings",
    "trees",
    "trie",
]