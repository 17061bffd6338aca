"""Ordered term matching of a single candidate path."""

from enum import Enum

from .tokenize import Term, TokenizerMode, last_keyword

# All recognized separators are folded onto this one for matching.
NORMAL_SEPARATOR = "/"


class LastComponentMode(Enum):
    """How the last path component is checked against the last keyword."""

    EXACT = "exact"
    PARTIAL = "partial"


def normalize_path(path: str, mode: TokenizerMode = TokenizerMode.SEPARATORS) -> str:
    """Case-fold a path and fold every recognized separator onto "/"."""
    normalized = path.casefold()
    for sep in mode.separators:
        if sep != NORMAL_SEPARATOR:
            normalized = normalized.replace(sep, NORMAL_SEPARATOR)
    return normalized


def path_components(normalized: str) -> list[str]:
    return [c for c in normalized.split(NORMAL_SEPARATOR) if c]


class PathFilter:
    """Accept or reject candidate paths for one tokenized query.

    Terms must appear in the path in the order typed, with a cursor that
    only moves forward:
    - a separator term consumes the next separator at or after the cursor
    - a literal term consumes its leftmost occurrence at or after the cursor

    The last path component must then equal (EXACT) or contain (PARTIAL)
    the last keyword, case-insensitively.
    """

    def __init__(
        self,
        terms: list[Term],
        mode: LastComponentMode = LastComponentMode.PARTIAL,
        tokenizer_mode: TokenizerMode = TokenizerMode.SEPARATORS,
    ):
        if not terms:
            raise ValueError("PathFilter needs at least one term")
        self.mode = mode
        self.tokenizer_mode = tokenizer_mode
        # None marks a separator term
        self._needles = [None if t.is_separator else t.text.casefold() for t in terms]
        self.keyword = last_keyword(terms).casefold()

    def accepts(self, path: str) -> bool:
        if not path:
            return False
        normalized = normalize_path(path, self.tokenizer_mode)

        pos = 0
        for needle in self._needles:
            if needle is None:
                found = normalized.find(NORMAL_SEPARATOR, pos)
                if found == -1:
                    return False
                pos = found + 1
                continue
            found = normalized.find(needle, pos)
            if found == -1:
                return False
            pos = found + len(needle)

        components = path_components(normalized)
        if not components:
            return False
        last_component = components[-1]

        if self.mode is LastComponentMode.EXACT:
            return last_component == self.keyword
        return self.keyword in last_component

    __call__ = accepts
