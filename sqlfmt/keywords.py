# sqlfmt/keywords.py
# Ordered keyword set shared by the normalizer and the layout engine.
# Matching is case-insensitive; spaces inside multi-word keywords
# ("GROUP BY") match any run of whitespace.

from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

# ------------------------------ Config ---------------------------------------

DEFAULT_KEYWORD_LIST: Tuple[str, ...] = (
    "SELECT", "FROM", "WHERE", "GROUP BY", "ORDER BY",
    "HAVING", "LIMIT", "JOIN", "INNER JOIN", "LEFT JOIN",
    "RIGHT JOIN", "FULL JOIN", "ON", "AS", "AND", "OR", "UNION",
    "INSERT", "INTO", "VALUES", "UPDATE", "SET", "DELETE",
)

def _keyword_pattern(word: str) -> re.Pattern[str]:
    """Whole-word, case-insensitive pattern; inner spaces become \\s+."""
    body = r'\s+'.join(re.escape(part) for part in word.split(" "))
    # ASCII-only \b and case folding: "ſelect" is not SELECT
    return re.compile(r'\b' + body + r'\b', re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class KeywordSet:
    """Immutable ordered keyword list plus its compiled (pattern, canonical) pairs."""

    words: Tuple[str, ...]
    patterns: Tuple[Tuple[re.Pattern[str], str], ...] = field(init=False, repr=False, compare=False)
    _lookup: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        canon = tuple(" ".join(w.split()).upper() for w in self.words)
        object.__setattr__(self, "words", canon)
        object.__setattr__(self, "patterns", tuple((_keyword_pattern(w), w) for w in canon))
        object.__setattr__(self, "_lookup", frozenset(canon))

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "KeywordSet":
        return cls(tuple(words))

    def __contains__(self, token: object) -> bool:
        if not isinstance(token, str):
            return False
        return token.isascii() and token.upper() in self._lookup

    def as_list(self) -> List[str]:
        return list(self.words)


DEFAULT_KEYWORDS = KeywordSet(DEFAULT_KEYWORD_LIST)
