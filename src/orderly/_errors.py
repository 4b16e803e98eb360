"""Errors raised by the ordering engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class UnsatisfiableDependencyGraph(ValueError):
    """Raised when no placement order satisfies the dependency graph.

    Either the elements form a cycle, or some element depends on an element
    that is not part of the elements to sort (and dependencies were not
    included). Both causes produce the same error; inspect ``elements`` to
    tell them apart.

    Attributes:
        elements: Every element still pending when the sort got stuck, in
            pending order.

    """

    def __init__(self, elements: Iterable[object]) -> None:
        self.elements = tuple(elements)
        super().__init__(f"Cyclic or external dependencies for elements {list(self.elements)!r}")
