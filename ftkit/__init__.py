"""Character, memory, string, linked-list, line-reading and printf helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "linked_list", "line_reader", "printf"]