from __future__ import annotations

from cvreport.core import sort_ranking
from cvreport.schemas import ComparisonEntry


def build_matrix(*entries: tuple[str, int | None]) -> list[ComparisonEntry]:
    return [ComparisonEntry(candidate_name=name, rank=rank) for name, rank in entries]


def test_sort_ranking_orders_by_rank():
    matrix = build_matrix(("B", 2), ("A", 1))

    ordered = sort_ranking(matrix)

    assert [entry.candidate_name for entry in ordered] == ["A", "B"]
    assert [entry.candidate_name for entry in matrix] == ["B", "A"]


def test_sort_ranking_is_stable_and_idempotent():
    matrix = build_matrix(("C", 5), ("A", 2), ("B", 2), ("D", 9))

    once = sort_ranking(matrix)
    twice = sort_ranking(once)

    assert [entry.candidate_name for entry in once] == ["A", "B", "C", "D"]
    assert once == twice


def test_sort_ranking_places_missing_rank_last():
    matrix = build_matrix(("X", None), ("A", 3), ("B", 1))

    assert [entry.candidate_name for entry in sort_ranking(matrix)] == ["B", "A", "X"]
