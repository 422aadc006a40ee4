"""Linked lists, queues, stacks and a small threaded counter."""

__version__ = "0.1.0"
__all__ = ["indexed_list", "containers", "counter_threads"]