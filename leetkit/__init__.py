"""Classic algorithms and data structures: sorts, a priority queue, list containers and problems."""

__version__ = "0.1.0"
__all__ = ["heap", "linked", "sorting", "problems"]