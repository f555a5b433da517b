"""Ranking and admission puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    """A person judged on virtue and talent."""

    student_id: str
    virtue: int
    talent: int

    @property
    def total(self) -> int:
        return self.virtue + self.talent


def _category(candidate: Candidate, high: int) -> int:
    virtue_high = candidate.virtue >= high
    talent_high = candidate.talent >= high
    if virtue_high and talent_high:
        return 0
    if virtue_high:
        return 1
    if not talent_high and candidate.virtue >= candidate.talent:
        return 2
    return 3


def classify_candidates(
    candidates: Iterable[Candidate], low: int, high: int
) -> list[Candidate]:
    """Rank the candidates who pass ``low``: sages, noblemen, fools, then small men.

    Within a class the order is total descending, virtue descending, id ascending.
    """
    passed = [c for c in candidates if c.virtue >= low and c.talent >= low]
    return sorted(
        passed,
        key=lambda c: (_category(c, high), -c.total, -c.virtue, c.student_id),
    )


def students_in_range(
    students: Iterable[tuple[str, str, int]], low: int, high: int
) -> list[tuple[str, str]]:
    """Return ``(name, id)`` of students graded within the bounds, best first.

    The bounds may be given in either order.
    """
    if low > high:
        low, high = high, low
    chosen = [student for student in students if low <= student[2] <= high]
    chosen.sort(key=lambda student: -student[2])
    return [(name, student_id) for name, student_id, _ in chosen]


@dataclass(frozen=True)
class RankEntry:
    """One line of a contest ranklist; ``None`` marks a problem never submitted."""

    rank: int
    user_id: int
    total: int
    scores: tuple[int | None, ...]

    def __str__(self) -> str:
        shown = " ".join("-" if score is None else str(score) for score in self.scores)
        return f"{self.rank} {self.user_id:05d} {self.total} {shown}"


@dataclass
class _User:
    user_id: int
    scores: list[int | None]
    shown: bool = False
    solved: int = 0

    @property
    def total(self) -> int:
        return sum(score for score in self.scores if score is not None)


def rank_contest(
    user_count: int,
    full_marks: Sequence[int],
    submissions: Iterable[tuple[int, int, int]],
) -> list[RankEntry]:
    """Build the ranklist from ``(user, problem, score)`` submissions.

    Users and problems are numbered from 1; a score of -1 marks a submission
    that did not compile. Users with no compiling submission are left out but
    still take their place in the ranking.
    """
    users = [_User(user_id, [None] * len(full_marks)) for user_id in range(1, user_count + 1)]
    for user_id, problem_id, score in submissions:
        if not 1 <= user_id <= user_count:
            raise ValueError(f"unknown user {user_id}")
        if not 1 <= problem_id <= len(full_marks):
            raise ValueError(f"unknown problem {problem_id}")
        user = users[user_id - 1]
        if score == -1:
            score = 0
        else:
            user.shown = True
        best = user.scores[problem_id - 1]
        if best is not None and score <= best:
            continue
        if score == full_marks[problem_id - 1]:
            user.solved += 1
        user.scores[problem_id - 1] = score

    users.sort(key=lambda u: (-u.total, -u.solved, u.user_id))
    entries = []
    rank = 1
    previous_total = None
    for position, user in enumerate(users, start=1):
        total = user.total
        if previous_total is not None and total < previous_total:
            rank = position
        previous_total = total
        if user.shown:
            entries.append(RankEntry(rank, user.user_id, total, tuple(user.scores)))
    return entries


@dataclass(frozen=True)
class Applicant:
    """A graduate applicant with entrance and interview grades and school choices."""

    ge: int
    gi: int
    choices: tuple[int, ...]

    @property
    def final_grade(self) -> float:
        return (self.ge + self.gi) / 2


def admit_graduates(
    quotas: Sequence[int], applicants: Sequence[Applicant]
) -> list[list[int]]:
    """Assign applicants to schools by grade and preference.

    Returns, per school, the sorted indices of admitted applicants. A school
    over its quota still takes an applicant tied with its last admission.
    """
    for applicant in applicants:
        for choice in applicant.choices:
            if not 0 <= choice < len(quotas):
                raise ValueError(f"unknown school {choice}")
    filled = [0] * len(quotas)
    admits: list[list[int]] = [[] for _ in quotas]
    order = sorted(
        range(len(applicants)),
        key=lambda i: (-(applicants[i].ge + applicants[i].gi), -applicants[i].ge, i),
    )
    for index in order:
        applicant = applicants[index]
        for school in applicant.choices:
            if filled[school] < quotas[school]:
                filled[school] += 1
                admits[school].append(index)
                break
            if filled[school] == quotas[school]:
                if admits[school]:
                    last = applicants[admits[school][-1]]
                    if (last.ge + last.gi, last.ge) == (applicant.ge + applicant.gi, applicant.ge):
                        admits[school].append(index)
                        break
                filled[school] += 1
    return [sorted(admitted) for admitted in admits]