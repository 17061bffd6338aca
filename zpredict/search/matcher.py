"""Query matching pipeline: tokenize, filter, rank, format."""

from dataclasses import dataclass
from typing import Mapping, Optional, Protocol

from ..config import get_setting, load_config
from .filter import LastComponentMode, PathFilter
from .ranking import Candidate, rank
from .suggest import Suggestion, SuggestionFormatter, SuggestionStyle
from .tokenize import TokenizerMode, tokenize


class Cancellation(Protocol):
    """Anything with is_set(), e.g. threading.Event."""

    def is_set(self) -> bool: ...


@dataclass(frozen=True)
class MatchOptions:
    """Selects the matcher behaviour.

    Defaults: separator-only tokenizing, partial last-component check,
    verbatim suggestions.
    """

    tokenizer: TokenizerMode = TokenizerMode.SEPARATORS
    last_component: LastComponentMode = LastComponentMode.PARTIAL
    suggestion: SuggestionStyle = SuggestionStyle.VERBATIM
    prefix: str = "cd "
    limit: Optional[int] = None

    @classmethod
    def from_config(cls, config: dict | None = None) -> "MatchOptions":
        if config is None:
            config = load_config()
        return cls(
            tokenizer=TokenizerMode(get_setting("tokenizer", config)),
            last_component=LastComponentMode(get_setting("last_component", config)),
            suggestion=SuggestionStyle(get_setting("suggestion", config)),
            prefix=get_setting("command", config) + " ",
        )


def _cancelled(cancel: Optional[Cancellation]) -> bool:
    return cancel is not None and cancel.is_set()


class Matcher:
    """Match a query against one score table snapshot."""

    def __init__(self, options: MatchOptions | None = None):
        self.options = options or MatchOptions()
        self.formatter = SuggestionFormatter(
            prefix=self.options.prefix,
            style=self.options.suggestion,
            tokenizer_mode=self.options.tokenizer,
        )

    def candidates(
        self,
        query: str,
        table: Mapping[str, float],
        cancel: Optional[Cancellation] = None,
    ) -> list[Candidate]:
        """Ranked candidates passing the filter; [] for a blank query or on cancel."""
        terms = tokenize(query, self.options.tokenizer)
        if not terms:
            return []

        path_filter = PathFilter(terms, self.options.last_component, self.options.tokenizer)
        matches = []
        for path, score in table.items():
            if _cancelled(cancel):
                return []
            if path_filter.accepts(path):
                matches.append(Candidate(path, score))

        ranked = rank(matches)
        if self.options.limit is not None:
            ranked = ranked[: self.options.limit]
        return ranked

    def match(
        self,
        query: str,
        table: Mapping[str, float],
        cancel: Optional[Cancellation] = None,
    ) -> list[Suggestion]:
        """Suggestions for `query`, best first."""
        ranked = self.candidates(query, table, cancel)
        if _cancelled(cancel):
            return []
        return self.formatter.format_all(ranked, query.strip())
