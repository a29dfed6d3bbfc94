"""
Array-based Union-Find (disjoint-set) structure for Hex connectivity.

Elements are dense integers: board cells use their row-major index and the
two virtual edge nodes of a color sit right after the last cell. Keeping
the forest in plain lists means a copy is two list copies, which is what
search code needs when it clones a game per worker.
"""

from typing import List


class ArrayDSU:
    """
    Union-Find with path compression and union by size.

    Only unions are supported; Hex never removes stones, so the structure
    grows monotonically.
    """

    __slots__ = ("size", "parent", "size_array")

    def __init__(self, size: int):
        """
        Initialize DSU for given size.

        Args:
            size: Total number of elements (board cells + edge nodes)
        """
        self.size = size
        self.parent: List[int] = list(range(size))
        self.size_array: List[int] = [1] * size

    def find(self, x: int) -> int:
        """Find root with path compression."""
        parent = self.parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """
        Union two sets by size.

        Returns:
            True if union was performed, False if already connected
        """
        x_root = self.find(x)
        y_root = self.find(y)

        if x_root == y_root:
            return False

        if self.size_array[x_root] < self.size_array[y_root]:
            x_root, y_root = y_root, x_root

        self.parent[y_root] = x_root
        self.size_array[x_root] += self.size_array[y_root]
        return True

    def connected(self, x: int, y: int) -> bool:
        """Check if two elements are connected."""
        return self.find(x) == self.find(y)

    def copy(self) -> "ArrayDSU":
        """Create an independent copy of this DSU."""
        new_dsu = ArrayDSU.__new__(ArrayDSU)
        new_dsu.size = self.size
        new_dsu.parent = self.parent.copy()
        new_dsu.size_array = self.size_array.copy()
        return new_dsu
