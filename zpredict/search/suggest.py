"""Turning ranked paths into the text shown to the user."""

import re
from dataclasses import dataclass
from enum import Enum

from .ranking import Candidate
from .tokenize import TokenizerMode


class SuggestionStyle(Enum):
    """VERBATIM shows "cd <path>"; QUERY keeps what was typed and completes the last fragment."""

    VERBATIM = "verbatim"
    QUERY = "query"


@dataclass(frozen=True)
class Suggestion:
    text: str
    path: str
    score: float


def _splitter(separators: tuple[str, ...]) -> re.Pattern:
    chars = "".join(re.escape(s) for s in separators)
    return re.compile(f"[{chars}\\s]+")


class SuggestionFormatter:
    """Format candidates as suggestions with a fixed command prefix."""

    def __init__(
        self,
        prefix: str = "cd ",
        style: SuggestionStyle = SuggestionStyle.VERBATIM,
        tokenizer_mode: TokenizerMode = TokenizerMode.SEPARATORS,
    ):
        self.prefix = prefix
        self.style = style
        # Query and path are split at the same granularity
        self._split = _splitter(tokenizer_mode.separators)

    def complete_query(self, query: str, path: str) -> str:
        """Replace the last fragment of the query with the last component of the path.

        Earlier fragments are kept exactly as typed:
            ("proj ba", "/home/me/proj/Backend") -> "proj Backend"
        """
        query_parts = [p for p in self._split.split(query) if p]
        path_parts = [p for p in self._split.split(path) if p]
        if query_parts and path_parts:
            query_parts[-1] = path_parts[-1]
        return " ".join(query_parts)

    def format(self, candidate: Candidate, query: str = "") -> Suggestion:
        if self.style is SuggestionStyle.QUERY:
            body = self.complete_query(query, candidate.path)
        else:
            body = candidate.path
        return Suggestion(self.prefix + body, candidate.path, candidate.score)

    def format_all(self, candidates: list[Candidate], query: str = "") -> list[Suggestion]:
        return [self.format(c, query) for c in candidates]
