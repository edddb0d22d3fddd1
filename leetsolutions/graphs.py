"""Graph puzzles: course scheduling, prerequisites, bridges, flights and forests."""

from __future__ import annotations

import math
from collections import defaultdict, deque
from typing import Iterable, Iterator, Optional, Sequence

from leetsolutions.structures import MaxPriorityQueue, TreeNode


def schedule_course(courses: Iterable[Sequence[int]]) -> int:
    """Most courses that can be taken, each given as ``[duration, last_day]``."""
    taken = MaxPriorityQueue()
    time = 0
    for duration, last_day, *_ in sorted(courses, key=lambda course: course[1]):
        if time + duration <= last_day:
            taken.push(duration, last_day)
            time += duration
        elif taken:
            longest, _ = taken.peek()
            if longest > duration and time - longest + duration <= last_day:
                taken.pop()
                taken.push(duration, last_day)
                time += duration - longest
    return len(taken)


def check_if_prerequisite(
    num_courses: int,
    prerequisites: Sequence[Sequence[int]],
    queries: Sequence[Sequence[int]],
) -> list[bool]:
    """For each query ``[u, v]``, whether course ``u`` is a prerequisite of ``v``.

    A prerequisite ``[a, b]`` means ``a`` must be taken before ``b``.
    """
    if not prerequisites or not queries:
        return [False] * len(queries)
    pending = [0] * num_courses
    followers: defaultdict[int, list[int]] = defaultdict(list)
    for before, after, *_ in prerequisites:
        pending[after] += 1
        followers[before].append(after)

    required: list[set[int]] = [set() for _ in range(num_courses)]
    ready = deque(course for course, count in enumerate(pending) if count == 0)
    while ready:
        course = ready.popleft()
        for follower in followers[course]:
            pending[follower] -= 1
            required[follower].add(course)
            required[follower] |= required[course]
            if pending[follower] <= 0:
                ready.append(follower)

    return [before in required[after] for before, after, *_ in queries]


def critical_connections(n: int, connections: Iterable[Sequence[int]]) -> list[list[int]]:
    """Bridges of the network reachable from server 0, as ``[parent, child]`` pairs."""
    if n < 1:
        raise ValueError("n must be at least 1")
    adjacent: list[list[int]] = [[] for _ in range(n)]
    for u, v, *_ in connections:
        adjacent[u].append(v)
        adjacent[v].append(u)

    order = [0] * n
    low = [0] * n
    counter = 1
    order[0] = low[0] = counter
    bridges: list[list[int]] = []
    stack: list[tuple[int, int, Iterator[int]]] = [(0, -1, iter(adjacent[0]))]
    while stack:
        u, parent, neighbours = stack[-1]
        for v in neighbours:
            if v == parent:
                continue
            if order[v] == 0:
                counter += 1
                order[v] = low[v] = counter
                stack.append((v, u, iter(adjacent[v])))
                break
            low[u] = min(low[u], order[v])
        else:
            stack.pop()
            if stack:
                above = stack[-1][0]
                low[above] = min(low[above], low[u])
                if low[u] > order[above]:
                    bridges.append([above, u])
    return bridges


def find_cheapest_price(
    n: int, flights: Iterable[Sequence[int]], src: int, dst: int, k: int
) -> int:
    """Cheapest fare from ``src`` to ``dst`` with at most ``k`` stops, or -1."""
    routes: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for origin, target, price, *_ in flights:
        routes[origin].append((target, price))

    cheapest_at = [math.inf] * n
    best = math.inf
    pending = deque([(src, 0, 0)])
    while pending:
        city, hops, total = pending.popleft()
        if city == dst:
            best = min(best, total)
            continue
        if hops > k or cheapest_at[city] < total:
            continue
        cheapest_at[city] = min(cheapest_at[city], total)
        pending.extend((target, hops + 1, total + price) for target, price in routes[city])
    return -1 if best == math.inf else int(best)


def _detach(node: TreeNode, doomed: set[int]) -> Iterator[TreeNode]:
    left, right = node.left, node.right
    if node.val in doomed:
        node.left = node.right = None
        yield from (child for child in (left, right) if child and child.val not in doomed)
    if left is not None:
        yield from _detach(left, doomed)
        if left.val in doomed:
            node.left = None
    if right is not None:
        yield from _detach(right, doomed)
        if right.val in doomed:
            node.right = None


def del_nodes(root: Optional[TreeNode], to_delete: Iterable[int]) -> list[TreeNode]:
    """Delete nodes with the given values and return the roots of what remains."""
    if root is None:
        return []
    doomed = set(to_delete)
    forest = [] if root.val in doomed else [root]
    forest.extend(_detach(root, doomed))
    return forest