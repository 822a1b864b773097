"""Classic data structures: linked lists, stacks, search trees and AVL trees."""

__version__ = "0.1.0"

__all__ = ["linked_list", "stack", "search_tree", "avl_tree"]