"""Matching and ranking for directory suggestions.

This package contains:
- tokenize.py: Query tokenizing
- filter.py: Ordered term matching of one path
- ranking.py: Deterministic candidate ordering
- suggest.py: Suggestion text formatting
- fast_paths.py: Best entry and prefix/contains shortcuts
- matcher.py: The full pipeline
"""

from .fast_paths import best_entry, prefix_or_contains, top_entries
from .filter import LastComponentMode, PathFilter
from .matcher import MatchOptions, Matcher
from .ranking import Candidate, rank
from .suggest import Suggestion, SuggestionFormatter, SuggestionStyle
from .tokenize import Term, TokenizerMode, last_keyword, tokenize

__all__ = [
    "best_entry",
    "prefix_or_contains",
    "top_entries",
    "LastComponentMode",
    "PathFilter",
    "MatchOptions",
    "Matcher",
    "Candidate",
    "rank",
    "Suggestion",
    "SuggestionFormatter",
    "SuggestionStyle",
    "Term",
    "TokenizerMode",
    "last_keyword",
    "tokenize",
]
