"""Predictor interface for interactive hosts, and the zoxide-backed implementation."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional, Sequence

from .config import get_setting, load_config
from .database import ScoreStore, ScoreTable, fetch_scores
from .refresh import RefreshTask
from .search import (
    Candidate,
    MatchOptions,
    Matcher,
    Suggestion,
    best_entry,
    prefix_or_contains,
)
from .search.fast_paths import DEFAULT_LIMIT
from .search.matcher import Cancellation
from .utils import log_debug


class FeedbackKind(Enum):
    SUGGESTION_DISPLAYED = "suggestion_displayed"
    SUGGESTION_ACCEPTED = "suggestion_accepted"
    COMMAND_LINE_ACCEPTED = "command_line_accepted"
    COMMAND_LINE_EXECUTED = "command_line_executed"


class MatchStrategy(Enum):
    """How a typed argument is turned into suggestions.

    ORDERED: full ordered-term matching.
    PREFIX: top entries starting with the argument, else containing it.
    """

    ORDERED = "ordered"
    PREFIX = "prefix"


class Predictor(ABC):
    """What a host needs from a suggestion provider."""

    name: str = ""
    description: str = ""

    @abstractmethod
    def get_suggestions(
        self, input_text: str, cancel: Optional[Cancellation] = None
    ) -> list[Suggestion]:
        """Suggestions for the current command line, best first."""

    def can_accept_feedback(self, kind: FeedbackKind) -> bool:
        return False

    def on_suggestion_displayed(self, session: int, count_or_index: int) -> None:
        pass

    def on_suggestion_accepted(self, session: int, accepted: str) -> None:
        pass

    def on_command_line_accepted(self, history: Sequence[str]) -> None:
        pass

    def on_command_line_executed(self, command_line: str, success: bool) -> None:
        pass

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class ZoxidePredictor(Predictor):
    """Suggest directories for "cd <query>" from zoxide's scores.

    - "cd " with nothing else: the single best directory
    - "cd <query>": matched with the configured strategy
    - anything else: no suggestions
    """

    name = "zoxide"
    description = "Directory suggestions ranked by zoxide frecency"

    def __init__(
        self,
        store: ScoreStore,
        options: MatchOptions | None = None,
        strategy: MatchStrategy = MatchStrategy.ORDERED,
        limit: int = DEFAULT_LIMIT,
        refresh_task: RefreshTask | None = None,
    ):
        self.store = store
        self.options = options or MatchOptions()
        self.strategy = strategy
        self.limit = limit
        self.matcher = Matcher(self.options)
        self.refresh_task = refresh_task

    @classmethod
    def from_config(
        cls, store: ScoreStore, config: dict | None = None, refresh_task: RefreshTask | None = None
    ) -> "ZoxidePredictor":
        if config is None:
            config = load_config()
        return cls(
            store,
            options=MatchOptions.from_config(config),
            strategy=MatchStrategy(get_setting("strategy", config)),
            limit=get_setting("limit", config),
            refresh_task=refresh_task,
        )

    @classmethod
    def start(
        cls, config: dict | None = None, fetch: Callable[[], ScoreTable] = fetch_scores
    ) -> "ZoxidePredictor":
        """Predictor with its own store, refreshed every `refresh_interval` seconds.

        Call close() (or use it as a context manager) to stop refreshing.
        """
        if config is None:
            config = load_config()
        store = ScoreStore()
        task = RefreshTask(store, fetch, interval=get_setting("refresh_interval", config))
        predictor = cls.from_config(store, config, refresh_task=task)
        task.start()
        return predictor

    @property
    def prefix(self) -> str:
        return self.options.prefix

    def extract_query(self, input_text: str) -> Optional[str]:
        """The argument typed after the command, or None if this is not our command."""
        if not input_text.startswith(self.prefix):
            return None
        return input_text[len(self.prefix):].strip()

    def _verbatim(self, candidate: Candidate) -> Suggestion:
        return Suggestion(self.prefix + candidate.path, candidate.path, candidate.score)

    def get_suggestions(
        self, input_text: str, cancel: Optional[Cancellation] = None
    ) -> list[Suggestion]:
        query = self.extract_query(input_text)
        if query is None:
            return []

        table = self.store.snapshot()

        if not query:
            best = best_entry(table)
            return [self._verbatim(best)] if best is not None else []

        if self.strategy is MatchStrategy.PREFIX:
            candidates = prefix_or_contains(table, query, self.limit)
            if cancel is not None and cancel.is_set():
                return []
            # Shortcut results always show the real path
            return [self._verbatim(c) for c in candidates]

        return self.matcher.match(query, table, cancel)

    def can_accept_feedback(self, kind: FeedbackKind) -> bool:
        return True

    def on_suggestion_displayed(self, session: int, count_or_index: int) -> None:
        log_debug(f"Suggestion displayed (session {session}, {count_or_index})")

    def on_suggestion_accepted(self, session: int, accepted: str) -> None:
        log_debug(f"Suggestion accepted (session {session}): {accepted}")

    def on_command_line_accepted(self, history: Sequence[str]) -> None:
        log_debug(f"Command line accepted ({len(history)} history entries)")

    def on_command_line_executed(self, command_line: str, success: bool) -> None:
        log_debug(f"Command line executed (success={success}): {command_line}")

    def close(self) -> None:
        if self.refresh_task is not None:
            self.refresh_task.stop()
