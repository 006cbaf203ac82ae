"""Rank ordering of the comparison matrix."""

from __future__ import annotations

from typing import Iterable

from ..schemas import ComparisonEntry


def _rank_key(entry: ComparisonEntry) -> tuple[bool, int]:
    return (entry.rank is None, entry.rank if entry.rank is not None else 0)


def sort_ranking(matrix: Iterable[ComparisonEntry]) -> list[ComparisonEntry]:
    """Return a new list ordered by ascending rank; ties keep input order.

    Entries without a rank are placed after every ranked entry.
    """
    return sorted(matrix, key=_rank_key)
