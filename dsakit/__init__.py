"""Classic data structures and algorithms for study and teaching.

Sorting, searching, linked lists, stacks, queues, trees and graph
algorithms, each in its own submodule.
"""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "avl_tree",
    "bst",
    "circular_doubly_linked_list",
    "circular_linked_list",
    "doubly_linked_list",
    "dynamic_stack",
    "euler",
    "graph",
    "linked_list",
    "mst",
    "paths",
    "priority_queue",
    "searching",
    "shortest_paths",
    "sorting",
]