"""Multimap of outstanding dependencies used while sorting."""

from collections.abc import Hashable, Iterable, Iterator


class DependencyIndex[T: Hashable]:
    """Mutable multimap from a dependent element to its unplaced dependencies.

    An element is a key exactly when it still has at least one outstanding
    dependency. Removing the last dependency of an element drops its entry,
    which turns the element into a leaf.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[T, set[T]] = {}

    def put(self, element: T, dependency: T) -> None:
        """Record that ``element`` depends on ``dependency``."""
        self._entries.setdefault(element, set()).add(dependency)

    def put_all(self, element: T, dependencies: Iterable[T]) -> None:
        """Record every dependency of ``element``."""
        for dependency in dependencies:
            self.put(element, dependency)

    def dependencies_of(self, element: T) -> frozenset[T]:
        """Get the outstanding dependencies of an element (empty for leaves)."""
        return frozenset(self._entries.get(element, ()))

    def remove_value(self, dependency: T) -> None:
        """Remove ``dependency`` from every entry, pruning emptied entries."""
        emptied = []
        for element, dependencies in self._entries.items():
            dependencies.discard(dependency)
            if not dependencies:
                emptied.append(element)
        for element in emptied:
            del self._entries[element]

    def remove_values(self, dependencies: Iterable[T]) -> None:
        """Remove several placed elements at once."""
        placed = set(dependencies)
        emptied = []
        for element, outstanding in self._entries.items():
            outstanding -= placed
            if not outstanding:
                emptied.append(element)
        for element in emptied:
            del self._entries[element]

    def edge_count(self) -> int:
        """Count the outstanding (dependent, dependency) pairs."""
        return sum(len(dependencies) for dependencies in self._entries.values())

    def __contains__(self, element: object) -> bool:
        return element in self._entries

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DependencyIndex({self._entries!r})"
