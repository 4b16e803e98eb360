"""Stable topological ordering of elements by their dependencies."""

__all__ = [
    "DependencyClosure",
    "DependencyFunction",
    "DependencyIndex",
    "GraphDocument",
    "GraphDocumentError",
    "UnsatisfiableDependencyGraph",
    "collect_dependencies",
    "export_order_to_toml",
    "export_regions_to_toml",
    "load_graph_document",
    "parse_graph_document",
    "topological_region_sort",
    "topological_sort",
]

from ._errors import UnsatisfiableDependencyGraph
from ._graph import (
    DependencyClosure,
    DependencyFunction,
    DependencyIndex,
    collect_dependencies,
    topological_region_sort,
    topological_sort,
)
from ._io import (
    GraphDocument,
    GraphDocumentError,
    export_order_to_toml,
    export_regions_to_toml,
    load_graph_document,
    parse_graph_document,
)
