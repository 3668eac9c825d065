"""Helpers for ASCII characters, byte buffers, strings, a linked list, chunked line reading and printf-style formatting."""

__version__ = "0.1.0"

__all__ = ["chars", "memory", "text", "strutil", "line_reader", "linked_list", "printf"]