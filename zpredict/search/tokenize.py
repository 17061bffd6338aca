"""Query tokenizing: split a typed query into ordered literal and separator terms."""

from dataclasses import dataclass
from enum import Enum

PATH_SEPARATORS = ("/", "\\")


class TokenizerMode(Enum):
    """Which characters act as separator markers.

    SEPARATORS: only "/" and "\\"; whitespace just delimits literals.
    SEPARATORS_AND_SPACE: a bare space is a separator marker too.
    """

    SEPARATORS = "separators"
    SEPARATORS_AND_SPACE = "separators_and_space"

    @property
    def separators(self) -> tuple[str, ...]:
        if self is TokenizerMode.SEPARATORS_AND_SPACE:
            return PATH_SEPARATORS + (" ",)
        return PATH_SEPARATORS


@dataclass(frozen=True)
class Term:
    """One unit of a tokenized query."""

    text: str
    is_separator: bool = False

    @classmethod
    def literal(cls, text: str) -> "Term":
        return cls(text, False)

    @classmethod
    def separator(cls, char: str) -> "Term":
        return cls(char, True)


def tokenize(query: str, mode: TokenizerMode = TokenizerMode.SEPARATORS) -> list[Term]:
    """Split a query into terms, keeping order.

    Every separator character becomes its own term. Runs of other
    non-whitespace characters become literal terms. Casing is preserved.

    Examples (default mode):
        "proj/ba"   -> [proj] [/] [ba]
        "foo bar"   -> [foo] [bar]
        "  "        -> []
    """
    separators = mode.separators
    query = query.strip()

    terms: list[Term] = []
    i, n = 0, len(query)
    while i < n:
        char = query[i]
        if char in separators:
            terms.append(Term.separator(char))
            i += 1
            continue
        if char.isspace():
            i += 1
            continue

        start = i
        while i < n and query[i] not in separators and not query[i].isspace():
            i += 1
        literal = query[start:i].strip()
        if literal:
            terms.append(Term.literal(literal))
    return terms


def last_keyword(terms: list[Term]) -> str:
    """The trailing fragment of the final term, checked against the last path component.

    A query ending in a separator ("proj/") has no trailing fragment, so
    the separator itself is the keyword and no component can contain it.
    """
    if not terms:
        return ""
    last = terms[-1]
    text = last.text
    for sep in PATH_SEPARATORS[1:]:
        text = text.replace(sep, PATH_SEPARATORS[0])
    pieces = [p for p in text.split(PATH_SEPARATORS[0]) if p]
    return pieces[-1] if pieces else last.text
