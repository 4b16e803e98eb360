"""Ordering functions for CLI commands.

This module provides pure functions over graph documents.
These are the functional core - no I/O, no Rich rendering.
"""

from dataclasses import dataclass, field

from orderly._errors import UnsatisfiableDependencyGraph
from orderly._graph import collect_dependencies, topological_region_sort, topological_sort
from orderly._io import GraphDocument

from .config import OrderlyConfig


@dataclass(frozen=True, slots=True)
class CheckReport:
    """Outcome of checking a graph document."""

    element_count: int
    edge_count: int
    include_dependencies: bool
    remaining: tuple[str, ...] = ()
    external: dict[str, list[str]] = field(default_factory=dict)

    @property
    def satisfiable(self) -> bool:
        """Whether every element could be placed."""
        return not self.remaining


def resolve_include_dependencies(
    flag: bool | None,  # noqa: FBT001
    document: GraphDocument,
    config: OrderlyConfig,
) -> bool:
    """Pick the include flag: command line, then document, then config."""
    if flag is not None:
        return flag
    if document.graph.include_dependencies is not None:
        return document.graph.include_dependencies
    if config.include_dependencies is not None:
        return config.include_dependencies
    return False


def sort_document(document: GraphDocument, *, include_dependencies: bool) -> list[str]:
    """Sort the elements of a document.

    Raises:
        UnsatisfiableDependencyGraph: If no ordering exists.

    """
    return topological_sort(document.seed_elements(), document.dependencies_of, include_dependencies)


def region_sort_document(document: GraphDocument, *, include_dependencies: bool) -> list[list[str]]:
    """Sort the elements of a document into regions.

    Raises:
        UnsatisfiableDependencyGraph: If no ordering exists.

    """
    return topological_region_sort(document.seed_elements(), document.dependencies_of, include_dependencies)


def check_document(document: GraphDocument, *, include_dependencies: bool) -> CheckReport:
    """Check whether a document can be ordered.

    External dependencies (dependencies outside the sorted elements) are
    listed so that the caller can tell them apart from cycles.
    """
    closure = collect_dependencies(document.seed_elements(), document.dependencies_of, include_dependencies)
    sorted_elements = set(closure.pending)
    external = {
        element: missing
        for element in closure.pending
        if (missing := [dep for dep in document.dependencies_of(element) if dep not in sorted_elements])
    }

    remaining: tuple[str, ...] = ()
    try:
        sort_document(document, include_dependencies=include_dependencies)
    except UnsatisfiableDependencyGraph as e:
        remaining = tuple(e.elements)

    return CheckReport(
        element_count=len(closure.pending),
        edge_count=closure.index.edge_count(),
        include_dependencies=include_dependencies,
        remaining=remaining,
        external=external,
    )
