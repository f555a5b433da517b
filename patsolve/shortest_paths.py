"""Shortest-path puzzles on weighted undirected graphs."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from itertools import count

NO_SOLUTION = "No Solution"
DEFAULT_DESTINATION = "ROM"

_Place = tuple[bool, int]


@dataclass(frozen=True)
class StationChoice:
    """The recommended gas station with its nearest and average house distance."""

    station: int
    min_distance: float
    average_distance: float

    def __str__(self) -> str:
        return f"G{self.station}\n{self.min_distance:.1f} {self.average_distance:.1f}"


def _parse_place(name: str, house_count: int, station_count: int) -> _Place:
    text = str(name).strip()
    if text.startswith("G"):
        is_station, index, limit = True, int(text[1:]), station_count
    else:
        is_station, index, limit = False, int(text), house_count
    if not 1 <= index <= limit:
        raise ValueError(f"unknown place {name!r}")
    return is_station, index


def _distances(
    graph: Mapping[_Place, list[tuple[_Place, int]]], source: _Place
) -> dict[_Place, int]:
    distances = {source: 0}
    done: set[_Place] = set()
    heap = [(0, source)]
    while heap:
        distance, place = heapq.heappop(heap)
        if place in done:
            continue
        done.add(place)
        for neighbour, length in graph.get(place, ()):
            if neighbour in done:
                continue
            candidate = distance + length
            if candidate < distances.get(neighbour, math.inf):
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distances


def choose_gas_station(
    house_count: int,
    station_count: int,
    roads: Iterable[tuple[str, str, int]],
    service_range: int,
) -> StationChoice | None:
    """Pick the station farthest from its nearest house that still serves every house.

    Places are named ``"3"`` for house 3 and ``"G2"`` for station 2. Ties go to
    the smaller average distance, then to the lower station number. Returns
    ``None`` when no station reaches every house within ``service_range``.
    """
    if house_count < 1 or station_count < 1:
        raise ValueError("at least one house and one station are needed")
    graph: defaultdict[_Place, list[tuple[_Place, int]]] = defaultdict(list)
    for first, second, length in roads:
        a = _parse_place(first, house_count, station_count)
        b = _parse_place(second, house_count, station_count)
        graph[a].append((b, length))
        graph[b].append((a, length))

    best: StationChoice | None = None
    for station in range(1, station_count + 1):
        distances = _distances(graph, (True, station))
        to_houses = [
            distances.get((False, house), math.inf)
            for house in range(1, house_count + 1)
        ]
        if any(distance > service_range for distance in to_houses):
            continue
        choice = StationChoice(
            station, float(min(to_houses)), sum(to_houses) / house_count
        )
        if (
            best is None
            or choice.min_distance > best.min_distance
            or (
                choice.min_distance == best.min_distance
                and choice.average_distance < best.average_distance
            )
        ):
            best = choice
    return best


@dataclass(frozen=True)
class RouteReport:
    """The cheapest, happiest route and the number of cheapest routes."""

    route_count: int
    cost: int
    happiness: int
    average_happiness: int
    path: tuple[str, ...]

    def __str__(self) -> str:
        return (
            f"{self.route_count} {self.cost} {self.happiness} {self.average_happiness}\n"
            + "->".join(self.path)
        )


def happiest_route(
    start: str,
    happiness: Mapping[str, int],
    routes: Iterable[tuple[str, str, int]],
    destination: str = DEFAULT_DESTINATION,
) -> RouteReport:
    """Find the cheapest route from ``start`` to ``destination``.

    Among the cheapest routes the one gathering most happiness wins, then the
    one with the highest integer average happiness per city after the start.
    The start city brings no happiness.
    """
    joy = dict(happiness)
    joy[start] = 0
    graph: defaultdict[str, list[tuple[str, int]]] = defaultdict(list)
    for first, second, cost in routes:
        for city in (first, second):
            if city not in joy:
                raise ValueError(f"unknown city {city!r}")
        graph[first].append((second, cost))
        graph[second].append((first, cost))
    if destination not in joy:
        raise ValueError(f"unknown city {destination!r}")

    cost_to = {start: 0}
    route_count = {start: 1}
    gathered = {start: 0}
    steps = {start: 0}
    average = {start: 0}
    previous: dict[str, str] = {}
    done: set[str] = set()
    order = count()
    heap = [(0, 0, 0, next(order), start)]
    while heap:
        *_, city = heapq.heappop(heap)
        if city in done:
            continue
        done.add(city)
        for neighbour, cost in graph[city]:
            if neighbour in done:
                continue
            new_cost = cost_to[city] + cost
            new_happiness = gathered[city] + joy[neighbour]
            new_steps = steps[city] + 1
            new_average = new_happiness // new_steps
            known_cost = cost_to.get(neighbour, math.inf)
            if new_cost < known_cost:
                route_count[neighbour] = route_count[city]
            elif new_cost == known_cost:
                route_count[neighbour] += route_count[city]
                better = new_happiness > gathered[neighbour] or (
                    new_happiness == gathered[neighbour]
                    and new_average > average[neighbour]
                )
                if not better:
                    continue
            else:
                continue
            cost_to[neighbour] = new_cost
            gathered[neighbour] = new_happiness
            steps[neighbour] = new_steps
            average[neighbour] = new_average
            previous[neighbour] = city
            heapq.heappush(
                heap, (new_cost, -new_happiness, -new_average, next(order), neighbour)
            )

    if destination not in cost_to:
        raise ValueError(f"{destination!r} cannot be reached from {start!r}")
    path = [destination]
    while path[-1] in previous:
        path.append(previous[path[-1]])
    path.reverse()
    return RouteReport(
        route_count[destination],
        cost_to[destination],
        gathered[destination],
        average[destination],
        tuple(path),
    )