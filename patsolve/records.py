"""Puzzles about record keeping: sets, hash tables, parking logs and linked lists."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, replace

END_OF_LIST = -1


def set_similarity(first: Iterable[int], second: Iterable[int]) -> float:
    """Return the shared distinct values as a percentage of all distinct values."""
    a, b = set(first), set(second)
    union = a | b
    if not union:
        raise ValueError("both sets are empty")
    return len(a & b) / len(union) * 100


def _is_prime(number: int) -> bool:
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, math.isqrt(number) + 1))


def quadratic_probe(table_size: int, numbers: Iterable[int]) -> list[int | None]:
    """Insert numbers into a hash table with quadratic probing.

    The table size is raised to the next prime; each number gets the slot it
    lands in, or ``None`` when no slot can be found. A slot holding 0 counts
    as empty.
    """
    if table_size < 1:
        raise ValueError("table size must be positive")
    size = table_size
    while not _is_prime(size):
        size += 1
    table = [0] * size
    positions: list[int | None] = []
    for number in numbers:
        start = number % size
        slot = next(
            (
                index
                for index in ((start + step * step) % size for step in range(size))
                if table[index] == 0
            ),
            None,
        )
        if slot is not None:
            table[slot] = number
        positions.append(slot)
    return positions


def _to_seconds(time: str) -> int:
    parts = time.split(":")
    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        raise ValueError(f"not a hh:mm:ss time: {time!r}")
    hours, minutes, seconds = map(int, parts)
    return hours * 3600 + minutes * 60 + seconds


def _format_seconds(seconds: int) -> str:
    hours, rest = divmod(seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


@dataclass(frozen=True)
class ParkingRecord:
    """A car passing the campus gate at ``time`` (``hh:mm:ss``), going ``in`` or ``out``."""

    plate: str
    time: str
    status: str

    def __post_init__(self) -> None:
        if self.status not in ("in", "out"):
            raise ValueError(f"status must be 'in' or 'out', not {self.status!r}")
        _to_seconds(self.time)

    @property
    def seconds(self) -> int:
        return _to_seconds(self.time)


def _paired_records(records: Iterable[ParkingRecord]) -> list[ParkingRecord]:
    ordered = sorted(records, key=lambda record: record.seconds)
    pending: dict[str, int] = {}
    kept = [False] * len(ordered)
    for index, record in enumerate(ordered):
        if record.status == "in":
            pending[record.plate] = index
        elif record.plate in pending:
            kept[pending.pop(record.plate)] = True
            kept[index] = True
    return [record for record, keep in zip(ordered, kept) if keep]


def parking_report(
    records: Iterable[ParkingRecord], queries: Iterable[str]
) -> tuple[list[int], list[str], str]:
    """Count the parked cars at each query time and find who parked longest.

    An ``in`` pairs with the next ``out`` of the same car; an earlier unpaired
    ``in`` and an ``out`` with no ``in`` are ignored. Queries are answered in
    the order given. Returns the counts, the sorted plates with the longest
    total parking time, and that time.
    """
    remaining = deque(_paired_records(records))
    parked: dict[str, int] = {}
    totals: dict[str, int] = {}
    longest = 0
    longest_plates: set[str] = set()

    def process(record: ParkingRecord) -> None:
        nonlocal longest
        if record.status == "in":
            parked.setdefault(record.plate, record.seconds)
            return
        total = totals.get(record.plate, 0) + record.seconds - parked.pop(record.plate)
        totals[record.plate] = total
        if total > longest:
            longest = total
            longest_plates.clear()
            longest_plates.add(record.plate)
        elif total == longest:
            longest_plates.add(record.plate)

    counts = []
    for query in queries:
        limit = _to_seconds(query)
        while remaining and remaining[0].seconds <= limit:
            process(remaining.popleft())
        counts.append(len(parked))
    while remaining:
        process(remaining.popleft())
    return counts, sorted(longest_plates), _format_seconds(longest)


@dataclass(frozen=True)
class ListNode:
    """A node of a linked list held by address; -1 marks the end."""

    address: int
    value: int
    next_address: int

    def __str__(self) -> str:
        following = (
            str(END_OF_LIST) if self.next_address == END_OF_LIST else f"{self.next_address:05d}"
        )
        return f"{self.address:05d} {self.value} {following}"


def _relink(nodes: list[ListNode]) -> list[ListNode]:
    addresses = [node.address for node in nodes[1:]] + [END_OF_LIST]
    return [replace(node, next_address=address) for node, address in zip(nodes, addresses)]


def deduplicate_list(
    head: int, nodes: Iterable[ListNode]
) -> tuple[list[ListNode], list[ListNode]]:
    """Split a linked list into nodes with new absolute values and the duplicates.

    Both parts keep their original order and are relinked as lists of their own.
    """
    by_address = {node.address: node for node in nodes}
    chain: list[ListNode] = []
    visited: set[int] = set()
    address = head
    while address != END_OF_LIST:
        if address not in by_address:
            raise ValueError(f"unknown address {address:05d}")
        if address in visited:
            raise ValueError("the list contains a cycle")
        visited.add(address)
        node = by_address[address]
        chain.append(node)
        address = node.next_address

    seen: set[int] = set()
    kept: list[ListNode] = []
    removed: list[ListNode] = []
    for node in chain:
        magnitude = abs(node.value)
        (removed if magnitude in seen else kept).append(node)
        seen.add(magnitude)
    return _relink(kept), _relink(removed)