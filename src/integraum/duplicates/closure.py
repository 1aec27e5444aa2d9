"""Transitive closure over duplicate pairs.

If (1, 2) and (2, 3) are duplicates then so is (1, 3). Clusters are found with
a disjoint-set forest, and every pair inside a cluster is emitted.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from itertools import combinations

from integraum.duplicates.models import Duplicate


class UnionFind:
    """Disjoint sets of row ids with path compression and union by rank."""

    def __init__(self) -> None:
        self.parent: dict[int, int] = {}
        self.rank: dict[int, int] = {}

    def find(self, x: int) -> int:
        if x not in self.parent:
            self.parent[x] = x
            self.rank[x] = 0
            return x

        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> int:
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return root_x

        if self.rank[root_x] < self.rank[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        if self.rank[root_x] == self.rank[root_y]:
            self.rank[root_x] += 1
        return root_x

    def components(self) -> list[list[int]]:
        """Connected components, each sorted, ordered by smallest member."""
        groups: dict[int, list[int]] = defaultdict(list)
        for element in sorted(self.parent):
            groups[self.find(element)].append(element)
        return sorted(groups.values(), key=lambda members: members[0])


def transitive_closure(duplicates: Iterable[Duplicate]) -> set[Duplicate]:
    """Close a set of duplicate pairs under transitivity.

    Input pairs are returned unchanged. Inferred pairs are flagged and carry the
    lowest similarity among the input pairs of their cluster.
    """
    given = {duplicate: duplicate for duplicate in duplicates}
    if len(given) <= 1:
        return set(given)

    forest = UnionFind()
    for duplicate in given:
        forest.union(duplicate.index1, duplicate.index2)

    weakest: dict[int, float] = {}
    for duplicate in given:
        root = forest.find(duplicate.index1)
        weakest[root] = min(weakest.get(root, duplicate.similarity), duplicate.similarity)

    closed: set[Duplicate] = set()
    for members in forest.components():
        root = forest.find(members[0])
        for first, second in combinations(members, 2):
            pair = Duplicate(first, second, weakest[root], inferred=True)
            closed.add(given.get(pair, pair))
    return closed
