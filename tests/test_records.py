import pytest
from hypothesis import given
from hypothesis import strategies as st

from patsolve.records import (
    ListNode,
    ParkingRecord,
    deduplicate_list,
    parking_report,
    quadratic_probe,
    set_similarity,
)


def test_similarity_identical_sets():
    assert set_similarity([1, 2, 3], [3, 2, 1]) == 100.0


def test_similarity_disjoint_sets():
    assert set_similarity([1, 2], [3, 4]) == 0.0


def test_similarity_overlap_ignores_duplicates():
    assert set_similarity([1, 2, 3, 3], [2, 3, 4]) == pytest.approx(50.0)


def test_similarity_empty():
    with pytest.raises(ValueError):
        set_similarity([], [])


@given(st.sets(st.integers(0, 9), min_size=1), st.sets(st.integers(0, 9)))
def test_similarity_symmetric_and_bounded(a, b):
    value = set_similarity(a, b)
    assert value == pytest.approx(set_similarity(b, a))
    assert 0 <= value <= 100


def test_probe_sample():
    assert quadratic_probe(4, [10, 6, 4, 15]) == [0, 1, 4, None]


def test_probe_rejects_empty_table():
    with pytest.raises(ValueError):
        quadratic_probe(0, [1])


@given(st.integers(1, 30), st.lists(st.integers(1, 1000), max_size=40))
def test_probe_slots_unique_and_in_range(size, numbers):
    slots = quadratic_probe(size, numbers)
    placed = [slot for slot in slots if slot is not None]
    assert len(slots) == len(numbers)
    assert len(placed) == len(set(placed))
    assert all(0 <= slot < 2 * size + 2 for slot in placed)


PLATE_A = "TEST0001"
PLATE_B = "TEST0002"


def _records():
    return [
        ParkingRecord(PLATE_A, "01:00:00", "in"),
        ParkingRecord(PLATE_B, "02:00:00", "in"),
        ParkingRecord(PLATE_B, "02:30:00", "out"),
        ParkingRecord(PLATE_A, "03:00:00", "out"),
    ]


def test_parking_counts_and_longest():
    counts, plates, longest = parking_report(
        _records(), ["00:00:00", "02:00:00", "02:45:00", "05:00:00"]
    )
    assert counts == [0, 2, 1, 0]
    assert plates == [PLATE_A]
    assert longest == "02:00:00"


def test_parking_ignores_unpaired_records():
    noisy = _records() + [
        ParkingRecord(PLATE_A, "00:30:00", "in"),
        ParkingRecord(PLATE_B, "04:00:00", "out"),
        ParkingRecord(PLATE_B, "06:00:00", "in"),
    ]
    queries = ["01:30:00", "02:15:00", "23:59:59"]
    assert parking_report(noisy, queries) == parking_report(_records(), queries)


def test_parking_tie_lists_both_sorted():
    records = [
        ParkingRecord(PLATE_B, "01:00:00", "in"),
        ParkingRecord(PLATE_B, "02:00:00", "out"),
        ParkingRecord(PLATE_A, "03:00:00", "in"),
        ParkingRecord(PLATE_A, "04:00:00", "out"),
    ]
    _, plates, _ = parking_report(records, [])
    assert plates == sorted([PLATE_A, PLATE_B])


def test_parking_bad_status():
    with pytest.raises(ValueError):
        ParkingRecord(PLATE_A, "01:00:00", "parked")


def test_parking_bad_time():
    with pytest.raises(ValueError):
        ParkingRecord(PLATE_A, "1 o'clock", "in")


def test_list_node_format():
    assert str(ListNode(5, 3, -1)) == "00005 3 -1"
    assert str(ListNode(100, -7, 23854)) == "00100 -7 23854"


def _sample_nodes():
    return [
        ListNode(99999, -7, 87654),
        ListNode(23854, -15, 0),
        ListNode(87654, 15, -1),
        ListNode(0, -15, 99999),
        ListNode(100, 21, 23854),
    ]


def test_deduplicate_sample():
    kept, removed = deduplicate_list(100, _sample_nodes())
    assert [str(node) for node in kept] == [
        "00100 21 23854",
        "23854 -15 99999",
        "99999 -7 -1",
    ]
    assert [str(node) for node in removed] == ["00000 -15 87654", "87654 15 -1"]


def test_deduplicate_unknown_head():
    with pytest.raises(ValueError):
        deduplicate_list(12345, _sample_nodes())


def test_deduplicate_cycle():
    with pytest.raises(ValueError):
        deduplicate_list(1, [ListNode(1, 1, 2), ListNode(2, 2, 1)])


def _links_are_consistent(part):
    expected = [node.address for node in part[1:]] + [-1]
    return [node.next_address for node in part] == expected


@given(st.lists(st.integers(-5, 5), min_size=1, max_size=15))
def test_deduplicate_invariants(values):
    addresses = list(range(10, 10 + len(values)))
    following = addresses[1:] + [-1]
    nodes = [ListNode(a, v, n) for a, v, n in zip(addresses, values, following)]
    kept, removed = deduplicate_list(addresses[0], nodes)
    assert len(kept) + len(removed) == len(values)
    assert len({abs(node.value) for node in kept}) == len(kept)
    assert {abs(node.value) for node in kept} == {abs(v) for v in values}
    assert _links_are_consistent(kept)
    assert not removed or _links_are_consistent(removed)