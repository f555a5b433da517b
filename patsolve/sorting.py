"""Puzzles about sorting algorithms and ordered sequences."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Iterable, Sequence

INSERTION_SORT = "Insertion Sort"
MERGE_SORT = "Merge Sort"
HEAP_SORT = "Heap Sort"


def swap_sort_count(permutation: Iterable[int]) -> int:
    """Count the swaps with 0 needed to sort a permutation of ``0..n-1``."""
    values = list(permutation)
    if sorted(values) != list(range(len(values))):
        raise ValueError("expected a permutation of 0..n-1")
    if not values:
        return 0
    count = 0
    checked = 0
    while True:
        if values[0] != 0:
            target = values[0]
            values[0], values[target] = values[target], target
            count += 1
            continue
        while checked < len(values) and values[checked] == checked:
            checked += 1
        if checked == len(values):
            return count
        values[0], values[checked] = values[checked], values[0]
        count += 1


def longest_perfect_subsequence(numbers: Iterable[int], p: int) -> int:
    """Return the size of the largest subset whose maximum is at most ``p`` times its minimum."""
    values = sorted(numbers)
    best = 0
    for start, smallest in enumerate(values):
        end = bisect_right(values, smallest * p)
        best = max(best, end - start)
    return best


def _check_lengths(original: Sequence[int], partial: Sequence[int]) -> None:
    if len(original) != len(partial):
        raise ValueError("both sequences must have the same length")


def identify_insertion_or_merge(
    original: Sequence[int], partial: Sequence[int]
) -> tuple[str, list[int]]:
    """Tell whether ``partial`` is an insertion or merge sort step and run one more."""
    _check_lengths(original, partial)
    length = len(partial)
    sequence = list(partial)
    last_changed = length - 1
    while last_changed >= 0 and sequence[last_changed] == original[last_changed]:
        last_changed -= 1
    descent = next(
        (i for i in range(1, length) if sequence[i] < sequence[i - 1]), length
    )
    if descent > last_changed:
        sequence[: descent + 1] = sorted(sequence[: descent + 1])
        return INSERTION_SORT, sequence

    if descent < 2:
        raise ValueError("the sequence is not an intermediate merge sort state")
    run = 1 << (descent.bit_length() - 1)
    for start in range(run, length, run):
        end = min(start + run, length)
        inner = next(
            (y for y in range(start + 1, end) if sequence[y] < sequence[y - 1]),
            None,
        )
        if inner is not None:
            run = 1 << ((inner - start).bit_length() - 1)
            break
    for start in range(0, length, 2 * run):
        sequence[start : start + 2 * run] = sorted(sequence[start : start + 2 * run])
    return MERGE_SORT, sequence


def _sift_down(heap: list[int], node: int, size: int) -> None:
    while True:
        left, right = 2 * node + 1, 2 * node + 2
        if (
            left < size
            and heap[left] > heap[node]
            and (right >= size or heap[left] > heap[right])
        ):
            child = left
        elif (
            right < size
            and heap[right] > heap[node]
            and (left >= size or heap[right] > heap[left])
        ):
            child = right
        else:
            return
        heap[node], heap[child] = heap[child], heap[node]
        node = child


def identify_insertion_or_heap(
    original: Sequence[int], partial: Sequence[int]
) -> tuple[str, list[int]]:
    """Tell whether ``partial`` is an insertion or heap sort step and run one more."""
    _check_lengths(original, partial)
    length = len(partial)
    sequence = list(partial)
    mid = length - 1
    while mid >= 0 and sequence[mid] == original[mid]:
        mid -= 1
    is_insertion = all(sequence[i] <= sequence[i + 1] for i in range(max(mid, 0)))

    if is_insertion:
        current = mid
        position = 0
        while True:
            current += 1
            if current >= length:
                break
            position = next(
                (i for i in range(current) if sequence[i] >= sequence[current]),
                current,
            )
            if position != current:
                break
        if current < length:
            sequence.insert(position, sequence.pop(current))
        return INSERTION_SORT, sequence

    end = length - 1
    while end >= 0 and sequence[end] >= sequence[0]:
        end -= 1
    if end < 0:
        raise ValueError("the sequence is not an intermediate heap sort state")
    sequence[0], sequence[end] = sequence[end], sequence[0]
    _sift_down(sequence, 0, end)
    return HEAP_SORT, sequence


def pivot_candidates(numbers: Iterable[int]) -> list[int]:
    """Return the elements that could have been a quicksort pivot, in order.

    Such an element is larger than everything before it and no larger than
    anything after it.
    """
    values = list(numbers)
    if any(value <= 0 for value in values):
        raise ValueError("numbers must be positive")
    minima_after: list[float] = []
    running = math.inf
    for value in reversed(values):
        minima_after.append(running)
        running = min(running, value)
    minima_after.reverse()
    result = []
    largest_before = 0
    for value, smallest_after in zip(values, minima_after):
        if largest_before < value <= smallest_after:
            result.append(value)
        largest_before = max(largest_before, value)
    return result