from typing import List


class DisjointSet:
    """
    Union-find arena with one node per cell (index = y * width + x).
    Path halving on lookup, union by size.
    """

    def __init__(self, size: int = 0):
        self.parents: List[int] = list(range(size))
        self.sizes: List[int] = [1] * size

    def new_node(self) -> int:
        node = len(self.parents)
        self.parents.append(node)
        self.sizes.append(1)
        return node

    def find(self, node: int) -> int:
        parents = self.parents
        while parents[node] != node:
            parents[node] = parents[parents[node]]
            node = parents[node]
        return node

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def connect(self, a: int, b: int) -> bool:
        """Merges the sets of a and b. Returns False if they were already joined."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.sizes[root_a] < self.sizes[root_b]:
            root_a, root_b = root_b, root_a
        self.parents[root_b] = root_a
        self.sizes[root_a] += self.sizes[root_b]
        return True

    def __len__(self) -> int:
        return len(self.parents)
