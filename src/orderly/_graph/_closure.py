"""Collection of the elements to sort and their dependency edges."""

import logging
from collections import deque
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field

from ._index import DependencyIndex

logger = logging.getLogger(__name__)

type DependencyFunction[T] = Callable[[T], Iterable[T]]


@dataclass(slots=True)
class DependencyClosure[T: Hashable]:
    """Working state of one sort call.

    Attributes:
        pending: Elements still to place, without duplicates. Seed order when
            dependencies are taken as given, breadth-first discovery order
            when they are included.
        index: Outstanding dependencies of every pending element.
        visited: Every element whose dependencies have been computed.

    """

    pending: list[T] = field(default_factory=list)
    index: DependencyIndex[T] = field(default_factory=DependencyIndex)
    visited: set[T] = field(default_factory=set)


def collect_dependencies[T: Hashable](
    elements: Iterable[T],
    dependencies: DependencyFunction[T],
    include_dependencies: bool,  # noqa: FBT001
) -> DependencyClosure[T]:
    """Build the pending elements and the dependency index of a sort.

    Args:
        elements: Elements to sort.
        dependencies: Function computing the elements an element depends on.
            It is called at most once per distinct element.
        include_dependencies: Whether dependencies outside ``elements`` are
            transitively added to the elements to sort. When false, such
            dependencies are still indexed and can never be satisfied.

    Returns:
        A fresh DependencyClosure owned by the caller.

    """
    closure: DependencyClosure[T] = DependencyClosure()

    if not include_dependencies:
        for element in elements:
            if element in closure.visited:
                continue
            closure.visited.add(element)
            closure.pending.append(element)
            closure.index.put_all(element, dependencies(element))
    else:
        # FIFO traversal keeps the discovery order, hence the sort, stable.
        queue: deque[T] = deque(elements)
        while queue:
            element = queue.popleft()
            if element in closure.visited:
                continue
            closure.visited.add(element)
            closure.pending.append(element)
            for dependency in dependencies(element):
                closure.index.put(element, dependency)
                if dependency not in closure.visited:
                    queue.append(dependency)

    logger.debug(
        f"Collected {len(closure.pending)} elements with {closure.index.edge_count()} dependency edges "
        f"(include_dependencies={include_dependencies})",
    )
    return closure
