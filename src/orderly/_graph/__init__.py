"""Graph module providing dependency ordering.

This module contains:
- collect_dependencies: Builds the elements to sort and their dependency index
- topological_sort: Flat, stable ordering of elements by dependencies
- topological_region_sort: Ordering of elements into independent regions
"""

from ._algorithms import topological_region_sort, topological_sort
from ._closure import DependencyClosure, DependencyFunction, collect_dependencies
from ._index import DependencyIndex

__all__ = [
    "DependencyClosure",
    "DependencyFunction",
    "DependencyIndex",
    "collect_dependencies",
    "topological_region_sort",
    "topological_sort",
]
