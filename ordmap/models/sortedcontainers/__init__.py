"""
Sorted container implementations.
"""

from ordmap.models.sortedcontainers.ordered_map import OrderedMap

__all__ = ["OrderedMap"]
