"""Query-independent shortcuts that skip term matching.

These rank by score only and never use the ordered-term rules.
"""

import heapq
from typing import Mapping, Optional

from .ranking import Candidate, rank, rank_key

DEFAULT_LIMIT = 10


def _candidates(table: Mapping[str, float]):
    return (Candidate(path, score) for path, score in table.items())


def best_entry(table: Mapping[str, float]) -> Optional[Candidate]:
    """The single highest scored entry, or None for an empty table."""
    return min(_candidates(table), key=rank_key, default=None)


def top_entries(table: Mapping[str, float], limit: int = DEFAULT_LIMIT) -> list[Candidate]:
    """The `limit` highest scored entries, ranked."""
    return heapq.nsmallest(limit, _candidates(table), key=rank_key)


def _fold_separators(text: str) -> str:
    return text.replace("\\", " ").replace("/", " ").lower()


def prefix_or_contains(
    table: Mapping[str, float], raw: str, limit: int = DEFAULT_LIMIT
) -> list[Candidate]:
    """Top entries starting with `raw`, else top entries containing it.

    Both checks are case-insensitive. The contains check treats "/" and
    "\\" as spaces on both sides, so "alice projects" finds
    "/home/alice/projects".
    """
    raw = raw.strip()
    if not raw:
        return top_entries(table, limit)

    needle = raw.lower()
    starts = [c for c in _candidates(table) if c.path.lower().startswith(needle)]
    if starts:
        return rank(starts)[:limit]

    folded = _fold_separators(raw)
    contains = [c for c in _candidates(table) if folded in _fold_separators(c.path)]
    return rank(contains)[:limit]
