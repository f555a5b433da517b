"""Optimisation puzzles: exact payment, greedy sales, scheduling and network flow."""

from __future__ import annotations

import functools
import math
from collections import deque
from collections.abc import Hashable, Iterable, Sequence


def pay_exact(coins: Iterable[int], amount: int) -> list[int] | None:
    """Pick coins that add up to exactly ``amount``.

    The chosen coins come back in ascending order; among all exact payments
    the one that is smallest when read in that order wins. Returns ``None``
    when no selection pays the amount exactly.
    """
    values = sorted(coins)
    if any(value <= 0 for value in values):
        raise ValueError("coin values must be positive")
    if amount < 0:
        raise ValueError("amount must not be negative")

    # best[i][cap]: the largest sum not above cap using coins values[i:]
    best: list[list[int]] = [[0] * (amount + 1)]
    for coin in reversed(values):
        below = best[-1]
        best.append(
            [
                below[cap] if cap < coin else max(below[cap - coin] + coin, below[cap])
                for cap in range(amount + 1)
            ]
        )
    best.reverse()

    if best[0][amount] != amount:
        return None
    chosen = []
    cap = amount
    for following, coin in zip(best[1:], values):
        if cap >= coin and following[cap - coin] + coin >= following[cap]:
            chosen.append(coin)
            cap -= coin
    return chosen


def mooncake_profit(
    inventories: Sequence[float], prices: Sequence[float], demand: int
) -> float:
    """Return the largest profit from selling ``demand`` tons of mooncakes.

    ``inventories[i]`` tons of kind ``i`` sell for ``prices[i]`` in total; any
    part of a stock sells at the same rate. The remaining demand is kept as a
    whole number of tons.
    """
    if len(inventories) != len(prices):
        raise ValueError("need one price per inventory")
    if any(inventory <= 0 for inventory in inventories):
        raise ValueError("inventories must be positive")
    kinds = sorted(
        zip(inventories, prices), key=lambda kind: kind[1] / kind[0], reverse=True
    )
    profit = 0.0
    remaining = demand
    for inventory, price in kinds:
        if remaining <= 0:
            break
        rate = price / inventory
        if remaining <= inventory:
            profit += rate * remaining
            remaining = 0
        else:
            profit += rate * inventory
            remaining = math.trunc(remaining - inventory)
    return profit


def max_project_profit(projects: Iterable[tuple[int, int, int]]) -> int:
    """Return the largest profit from projects done one at a time from day 0.

    Each project is ``(profit, duration, deadline)`` and must finish by its
    deadline.
    """
    ordered = sorted(projects, key=lambda project: project[2], reverse=True)
    if not ordered:
        return 0

    @functools.cache
    def best(index: int, deadline: int) -> int:
        if index == len(ordered):
            return 0
        profit, duration, due = ordered[index]
        skip = best(index + 1, deadline)
        begin = min(deadline, due) - duration
        if begin >= 0:
            return max(skip, best(index + 1, begin) + profit)
        return skip

    return best(0, ordered[0][2])


def max_flow(
    source: Hashable, sink: Hashable, edges: Iterable[tuple[Hashable, Hashable, int]]
) -> int:
    """Return the maximum flow from ``source`` to ``sink`` over directed edges.

    Each edge is ``(from, to, capacity)``; augmenting paths are found by
    breadth-first search.
    """
    residual: dict[Hashable, dict[Hashable, int]] = {source: {}, sink: {}}
    for start, end, capacity in edges:
        if capacity < 0:
            raise ValueError("capacities must not be negative")
        forward = residual.setdefault(start, {})
        forward[end] = forward.get(end, 0) + capacity
        residual.setdefault(end, {}).setdefault(start, 0)
    if source == sink:
        return 0

    total = 0
    while True:
        parent: dict[Hashable, Hashable] = {source: source}
        queue = deque([source])
        while queue and sink not in parent:
            node = queue.popleft()
            for neighbour, capacity in residual[node].items():
                if capacity > 0 and neighbour not in parent:
                    parent[neighbour] = node
                    queue.append(neighbour)
        if sink not in parent:
            return total
        path = []
        node = sink
        while node != source:
            path.append((parent[node], node))
            node = parent[node]
        bottleneck = min(residual[start][end] for start, end in path)
        for start, end in path:
            residual[start][end] -= bottleneck
            residual[end][start] += bottleneck
        total += bottleneck