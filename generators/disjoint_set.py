"""Union-find over hashable element ids."""

from typing import Hashable, Iterable


class DisjointSet:
    """Disjoint set forest with path compression and union by size."""

    def __init__(self, elements: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}
        for element in elements:
            self.make_set(element)

    def make_set(self, element: Hashable) -> None:
        """Add element as a singleton set; no-op if it is already present."""
        if element not in self._parent:
            self._parent[element] = element
            self._size[element] = 1

    def __contains__(self, element: Hashable) -> bool:
        return element in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, element: Hashable) -> Hashable:
        """Return the representative of element's set.

        Raises:
            KeyError: If element was never added.
        """
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets holding a and b.

        Returns:
            True if they were in different sets, False if already joined.
        """
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)

    def groups(self) -> list[list[Hashable]]:
        """Members of each set, sets ordered by first insertion."""
        grouped: dict[Hashable, list[Hashable]] = {}
        for element in self._parent:
            grouped.setdefault(self.find(element), []).append(element)
        return list(grouped.values())
