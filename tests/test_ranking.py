import pytest

from patsolve.ranking import (
    Applicant,
    Candidate,
    RankEntry,
    admit_graduates,
    classify_candidates,
    rank_contest,
    students_in_range,
)


def test_classify_orders_categories():
    candidates = [
        Candidate("4", 65, 75),
        Candidate("3", 70, 65),
        Candidate("5", 50, 90),
        Candidate("2", 85, 70),
        Candidate("1", 90, 90),
    ]
    ranked = classify_candidates(candidates, 60, 80)
    assert [c.student_id for c in ranked] == ["1", "2", "3", "4"]


def test_classify_tie_breaks_by_virtue_then_id():
    candidates = [
        Candidate("b", 90, 90),
        Candidate("a", 90, 90),
        Candidate("c", 95, 85),
    ]
    ranked = classify_candidates(candidates, 60, 80)
    assert [c.student_id for c in ranked] == ["c", "a", "b"]


def test_classify_drops_everyone_below_low():
    assert classify_candidates([Candidate("x", 10, 100)], 60, 80) == []


def test_students_in_range_sorted_and_swapped_bounds():
    students = [("Tom", "CS1", 95), ("Joe", "Math2", 60), ("Ann", "Bio3", 80)]
    assert students_in_range(students, 100, 70) == [("Tom", "CS1"), ("Ann", "Bio3")]


def test_students_in_range_none():
    assert students_in_range([("Tom", "CS1", 95)], 10, 20) == []


def test_rank_contest_scores_and_hidden_user():
    entries = rank_contest(3, [10, 20], [(1, 1, 10), (1, 2, -1), (2, 1, 5), (3, 2, -1)])
    assert [e.user_id for e in entries] == [1, 2]
    assert entries[0].scores == (10, 0)
    assert entries[1].scores == (5, None)
    assert [e.total for e in entries] == [10, 5]


def test_rank_entry_formatting():
    entry = RankEntry(1, 2, 5, (5, None))
    assert str(entry) == "1 00002 5 5 -"


def test_rank_contest_ties_share_rank():
    entries = rank_contest(3, [10], [(3, 1, 7), (1, 1, 7), (2, 1, 3)])
    assert [e.user_id for e in entries] == [1, 3, 2]
    assert entries[0].rank == entries[1].rank
    assert entries[2].rank == len(entries)


def test_rank_contest_keeps_best_score():
    entries = rank_contest(1, [10], [(1, 1, 8), (1, 1, 3)])
    assert entries[0].scores == (8,)


def test_rank_contest_rejects_unknown_user():
    with pytest.raises(ValueError):
        rank_contest(1, [10], [(2, 1, 5)])


def test_admit_graduates_by_preference():
    applicants = [
        Applicant(100, 100, (0, 1)),
        Applicant(90, 90, (0, 1)),
        Applicant(80, 80, (0, 1)),
    ]
    assert admit_graduates([1, 1], applicants) == [[0], [1]]


def test_admit_graduates_tie_exceeds_quota():
    applicants = [Applicant(90, 80, (0,)), Applicant(90, 80, (0,))]
    assert admit_graduates([1], applicants) == [[0, 1]]


def test_admit_graduates_full_school_rejects_lower():
    applicants = [Applicant(80, 80, (0,)), Applicant(90, 90, (0,))]
    assert admit_graduates([1], applicants) == [[1]]


def test_admit_graduates_rejects_unknown_school():
    with pytest.raises(ValueError):
        admit_graduates([1], [Applicant(1, 1, (3,))])