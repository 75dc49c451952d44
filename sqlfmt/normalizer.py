# sqlfmt/normalizer.py
# Keyword normalizer.
# - Collapses every whitespace run to one space and trims the ends.
# - Re-cases each keyword occurrence per policy: upper | lower | keep.
# - Keywords are applied in declared order; later ones see earlier rewrites.

from __future__ import annotations
import re
from typing import Callable

from .keywords import DEFAULT_KEYWORDS, KeywordSet

KEYWORD_CASES = ("upper", "lower", "keep")

_WS = re.compile(r'\s+')


def collapse_whitespace(text: str) -> str:
    return _WS.sub(" ", text or "").strip()


def _replacer(canonical: str, keyword_case: str) -> Callable[[re.Match[str]], str]:
    if keyword_case == "upper":
        return lambda m: canonical
    if keyword_case == "lower":
        lowered = canonical.lower()
        return lambda m: lowered
    # keep (and anything unrecognized): the match is consumed but unchanged
    return lambda m: m.group(0)


def normalize_keywords(
    query: str,
    keyword_case: str = "upper",
    keywords: KeywordSet = DEFAULT_KEYWORDS,
) -> str:
    formatted = collapse_whitespace(query)
    for pattern, canonical in keywords.patterns:
        formatted = pattern.sub(_replacer(canonical, keyword_case), formatted)
    return formatted
