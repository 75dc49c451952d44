# sqlfmt/tokenizer.py
# Splits normalized SQL into flat, classified tokens.
# Tokens:
#   {"type": "OPEN_PAREN"|"CLOSE_PAREN"|"COMMA"|"SEMICOLON"|"KEYWORD"|"TEXT",
#    "value": str}
#
# Splitting happens on whitespace, so "GROUP BY" arrives as two tokens and is
# never classified as a single keyword.

from __future__ import annotations
import re
from typing import Dict, Iterator

from .keywords import DEFAULT_KEYWORDS, KeywordSet

# ------------------------------ Patterns -------------------------------------

SPLIT_RE = re.compile(r'(\s+|\(|\)|,|;)')

PUNCTUATION = {
    "(": "OPEN_PAREN",
    ")": "CLOSE_PAREN",
    ",": "COMMA",
    ";": "SEMICOLON",
}


def classify(value: str, keywords: KeywordSet = DEFAULT_KEYWORDS) -> str:
    kind = PUNCTUATION.get(value)
    if kind:
        return kind
    if value in keywords:
        return "KEYWORD"
    return "TEXT"


def tokenize(text: str, keywords: KeywordSet = DEFAULT_KEYWORDS) -> Iterator[Dict[str, str]]:
    for piece in SPLIT_RE.split(text or ""):
        value = piece.strip()
        if not value:
            continue
        yield {"type": classify(value, keywords), "value": value}
