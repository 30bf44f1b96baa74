"""Segmented LRU and 2Q caches built on a bounded LRU segment."""

__version__ = "0.1.0"
__all__ = ["core", "results", "segmented", "two_queue"]