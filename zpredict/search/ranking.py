"""Deterministic ordering of matched candidates."""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Candidate:
    path: str
    score: float


def rank_key(candidate: Candidate) -> tuple:
    # Raw path last so paths differing only in case still have a fixed order
    return (-candidate.score, candidate.path.lower(), candidate.path)


def rank(candidates: Iterable[Candidate]) -> list[Candidate]:
    """Order by score descending, then path ascending (case-insensitive)."""
    return sorted(candidates, key=rank_key)
