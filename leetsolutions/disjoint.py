"""Disjoint-set union and the puzzles built on it."""

from __future__ import annotations

from typing import Iterable, Sequence


class DisjointSet:
    """Union-find over the integers ``0 .. size - 1`` with path compression."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} out of range")
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def union(self, i: int, j: int) -> bool:
        """Merge the sets of ``i`` and ``j``; return False if already joined."""
        root_i = self.find(i)
        root_j = self.find(j)
        if root_i == root_j:
            return False
        self._parent[root_j] = root_i
        return True


def are_connected(n: int, threshold: int, queries: Iterable[Sequence[int]]) -> list[bool]:
    """Whether each queried pair of cities is linked by divisors above ``threshold``."""
    cities = DisjointSet(n + 1)
    for divisor in range(threshold + 1, n + 1):
        for multiple in range(2 * divisor, n + 1, divisor):
            cities.union(divisor, multiple)
    return [cities.find(a) == cities.find(b) for a, b, *_ in queries]


def latest_day_to_cross(row: int, col: int, cells: Sequence[Sequence[int]]) -> int:
    """Last day on which land still connects the top row to the bottom row.

    ``cells`` lists, one per day, the 1-based cell that floods that day.
    """
    top = row * col
    bottom = top + 1
    land = DisjointSet(row * col + 2)
    dry: set[tuple[int, int]] = set()
    for day in range(len(cells) - 1, -1, -1):
        r, c = cells[day][0] - 1, cells[day][1] - 1
        dry.add((r, c))
        here = r * col + c
        for nr, nc in ((r, c + 1), (r, c - 1), (r + 1, c), (r - 1, c)):
            if 0 <= nr < row and 0 <= nc < col and (nr, nc) in dry:
                land.union(here, nr * col + nc)
        if r == 0:
            land.union(top, here)
        if r == row - 1:
            land.union(bottom, here)
        if land.find(top) == land.find(bottom):
            return day
    return 0


def find_redundant_connection(edges: Sequence[Sequence[int]]) -> list[int]:
    """The first edge that closes a cycle in an undirected graph, or ``[]``."""
    size = max((node for edge in edges for node in edge[:2]), default=0) + 1
    graph = DisjointSet(size)
    for edge in edges:
        if not graph.union(edge[0], edge[1]):
            return list(edge)
    return []


def find_redundant_directed_connection(edges: Sequence[Sequence[int]]) -> list[int]:
    """The edge to remove so a directed graph on nodes ``1 .. n`` becomes a rooted tree."""
    size = max((node for edge in edges for node in edge[:2]), default=0) + 1
    parent_of: dict[int, int] = {}
    second_parent: list[int] | None = None
    first_parent: list[int] | None = None
    for edge in edges:
        child = edge[1]
        if parent_of.get(child, 0) != 0:
            second_parent = list(edge)
            first_parent = [parent_of[child], child]
        parent_of[child] = edge[0]

    graph = DisjointSet(size)
    for edge in edges:
        if second_parent is not None and list(edge[:2]) == second_parent[:2]:
            continue
        if not graph.union(edge[0], edge[1]):
            return list(edge) if second_parent is None else first_parent
    return second_parent if second_parent is not None else []


def remove_stones(stones: Sequence[Sequence[int]]) -> int:
    """Most stones removable when a stone may go if another shares its row or column."""
    n = len(stones)
    groups = DisjointSet(n)
    first_in_row: dict[int, int] = {}
    first_in_col: dict[int, int] = {}
    for index, (x, y, *_) in enumerate(stones):
        if x in first_in_row:
            groups.union(index, first_in_row[x])
        else:
            first_in_row[x] = index
        if y in first_in_col:
            groups.union(index, first_in_col[y])
        else:
            first_in_col[y] = index
    components = sum(1 for index in range(n) if groups.find(index) == index)
    return n - components