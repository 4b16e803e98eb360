"""Topological sorting of elements by their dependencies."""

import logging
from collections.abc import Callable, Hashable, Iterable, MutableSequence

from orderly._errors import UnsatisfiableDependencyGraph

from ._closure import DependencyFunction, collect_dependencies
from ._index import DependencyIndex

logger = logging.getLogger(__name__)


def _pop_first_leaf[T: Hashable](pending: list[T], index: DependencyIndex[T]) -> T:
    for position, element in enumerate(pending):
        if element not in index:
            return pending.pop(position)
    raise UnsatisfiableDependencyGraph(pending)


def _pop_leaves[T: Hashable](pending: list[T], index: DependencyIndex[T]) -> list[T]:
    leaves = [element for element in pending if element not in index]
    if not leaves:
        raise UnsatisfiableDependencyGraph(pending)
    pending[:] = [element for element in pending if element in index]
    return leaves


def topological_sort[T: Hashable, S: MutableSequence](
    elements: Iterable[T],
    dependencies: DependencyFunction[T],
    include_dependencies: bool = False,  # noqa: FBT001, FBT002
    *,
    result_factory: Callable[[], S] = list,
) -> S:
    """Sort elements so that every element comes after its dependencies.

    The sort is stable: elements that become ready at the same time keep
    their relative order from ``elements`` (or from the breadth-first
    discovery order when dependencies are included).

    Args:
        elements: Elements to sort.
        dependencies: Function computing the elements an element depends on.
        include_dependencies: Whether dependencies that are not in
            ``elements`` are transitively added to the result.
        result_factory: Builds the empty sequence the result is appended to.

    Returns:
        The sorted elements.

    Raises:
        UnsatisfiableDependencyGraph: If the dependencies are cyclic, or refer
            to elements that are neither sorted nor included.

    Example:
        >>> deps = {"a": [], "b": ["a"], "c": ["a", "b"]}
        >>> topological_sort(["c", "b", "a"], deps.__getitem__)
        ['a', 'b', 'c']

    """
    closure = collect_dependencies(elements, dependencies, include_dependencies)
    pending, index = closure.pending, closure.index

    results = result_factory()
    while pending:
        leaf = _pop_first_leaf(pending, index)
        results.append(leaf)
        index.remove_value(leaf)

    logger.debug(f"Sorted {len(results)} elements")
    return results


def topological_region_sort[T: Hashable, R: MutableSequence, S: MutableSequence](
    elements: Iterable[T],
    dependencies: DependencyFunction[T],
    include_dependencies: bool = False,  # noqa: FBT001, FBT002
    *,
    result_factory: Callable[[], S] = list,
    region_factory: Callable[[], R] = list,
) -> S:
    """Sort elements into regions of mutually independent elements.

    A region holds every element whose dependencies all lie in earlier
    regions at the time it is extracted. Elements inside a region keep their
    relative input order.

    Args:
        elements: Elements to sort.
        dependencies: Function computing the elements an element depends on.
        include_dependencies: Whether dependencies that are not in
            ``elements`` are transitively added to the result.
        result_factory: Builds the empty sequence the regions are appended to.
        region_factory: Builds the empty sequence of each region.

    Returns:
        The regions, dependencies first.

    Raises:
        UnsatisfiableDependencyGraph: If the dependencies are cyclic, or refer
            to elements that are neither sorted nor included.

    """
    closure = collect_dependencies(elements, dependencies, include_dependencies)
    pending, index = closure.pending, closure.index

    results = result_factory()
    while pending:
        leaves = _pop_leaves(pending, index)
        region = region_factory()
        for leaf in leaves:
            region.append(leaf)
        results.append(region)
        index.remove_values(leaves)

    logger.debug(f"Sorted elements into {len(results)} regions")
    return results
