"""Reachability and connected-component puzzles."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence


def forward_counts(
    followings: Sequence[Iterable[int]],
    max_level: int,
    queries: Iterable[int],
) -> list[int]:
    """Count the users who may forward a post within ``max_level`` hops.

    ``followings[i]`` lists the users that user ``i + 1`` follows; a post by a
    user reaches their followers, then the followers' followers, and so on.
    """
    user_count = len(followings)
    fans: list[list[int]] = [[] for _ in range(user_count + 1)]
    for follower, followed_ids in enumerate(followings, start=1):
        for followed in followed_ids:
            if not 1 <= followed <= user_count:
                raise ValueError(f"unknown user {followed}")
            fans[followed].append(follower)

    results = []
    for user in queries:
        if not 1 <= user <= user_count:
            raise ValueError(f"unknown user {user}")
        seen = {user}
        frontier = [user]
        for _ in range(max_level):
            reached = []
            for member in frontier:
                for fan in fans[member]:
                    if fan not in seen:
                        seen.add(fan)
                        reached.append(fan)
            if not reached:
                break
            frontier = reached
        results.append(len(seen) - 1)
    return results


_NEIGHBOUR_STEPS = (
    (-1, 0, 0),
    (1, 0, 0),
    (0, -1, 0),
    (0, 1, 0),
    (0, 0, -1),
    (0, 0, 1),
)


def stroke_volume(slices: Sequence[Sequence[Sequence[int]]], threshold: int) -> int:
    """Sum the sizes of the face-connected regions of 1s holding at least ``threshold`` voxels.

    ``slices[l][m][n]`` is the voxel in row ``m``, column ``n`` of slice ``l``.
    """
    filled = {
        (layer, row, column)
        for layer, plane in enumerate(slices)
        for row, line in enumerate(plane)
        for column, value in enumerate(line)
        if value == 1
    }
    total = 0
    while filled:
        start = filled.pop()
        size = 1
        queue = deque([start])
        while queue:
            layer, row, column = queue.popleft()
            for dl, dm, dn in _NEIGHBOUR_STEPS:
                neighbour = (layer + dl, row + dm, column + dn)
                if neighbour in filled:
                    filled.remove(neighbour)
                    size += 1
                    queue.append(neighbour)
        if size >= threshold:
            total += size
    return total


class _DisjointSet:
    def __init__(self, members: Iterable[int]) -> None:
        self._parent = {member: member for member in members}
        self.pieces = len(self._parent)

    def find(self, member: int) -> int:
        root = member
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[member] != root:
            self._parent[member], member = root, self._parent[member]
        return root

    def union(self, a: int, b: int) -> bool:
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_b] = root_a
        self.pieces -= 1
        return True


def critical_cities(
    city_count: int, highways: Iterable[tuple[int, int, int, int]]
) -> list[int]:
    """Find the cities whose loss would cost most to reconnect the others.

    Each highway is ``(city, city, repair cost, status)``; a status of 0 marks
    a destroyed highway that may be repaired. A city whose loss cannot be
    repaired at all counts as the most costly. Returns an empty list when no
    city's loss needs any repair.
    """
    working: list[tuple[int, int]] = []
    destroyed: list[tuple[int, int, int]] = []
    for first, second, cost, status in highways:
        for city in (first, second):
            if not 1 <= city <= city_count:
                raise ValueError(f"unknown city {city}")
        if status:
            working.append((first, second))
        else:
            destroyed.append((first, second, cost))
    destroyed.sort(key=lambda highway: highway[2])

    highest: float = 0
    attention: list[int] = []
    for enemy in range(1, city_count + 1):
        pieces = _DisjointSet(city for city in range(1, city_count + 1) if city != enemy)
        for first, second in working:
            if enemy not in (first, second):
                pieces.union(first, second)
        total: float = 0
        for first, second, cost in destroyed:
            if pieces.pieces <= 1:
                break
            if enemy in (first, second):
                continue
            if pieces.union(first, second):
                total += cost
        if pieces.pieces > 1:
            total = math.inf
        if total > highest:
            highest = total
            attention = [enemy]
        elif total > 0 and total == highest:
            attention.append(enemy)
    return attention