# sqlfmt/formatter.py
"""Formatting entry point: keyword normalization followed by layout.

``format_sql`` is total over strings. It never raises for odd input: empty
text formats to ``""``, unbalanced parentheses clamp the indent at zero, and
unknown keyword-case policies behave like ``"keep"``.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from .keywords import DEFAULT_KEYWORDS, KeywordSet
from .layout import layout
from .normalizer import normalize_keywords

DEFAULT_INDENT_SIZE = 2
DEFAULT_KEYWORD_CASE = "upper"


@dataclass(frozen=True)
class FormatOptions:
    indent_size: int = DEFAULT_INDENT_SIZE
    keyword_case: str = DEFAULT_KEYWORD_CASE  # "upper" | "lower" | "keep"
    keywords: KeywordSet = field(default=DEFAULT_KEYWORDS)

    @property
    def indent_unit(self) -> str:
        return " " * max(0, self.indent_size)

    def merged(self, **overrides: Any) -> "FormatOptions":
        """Copy with every override that is not None applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def format_sql(sql: str, options: Optional[FormatOptions] = None, **overrides: Any) -> str:
    """
    Re-case keywords and re-lay-out ``sql``.

    Options come from ``options`` (defaults when omitted); keyword arguments
    ``indent_size``, ``keyword_case`` and ``keywords`` override single fields:

        >>> format_sql("SELECT 1", keyword_case="lower")
        'select 1'
    """
    opts = (options or FormatOptions()).merged(**overrides)
    normalized = normalize_keywords(sql, opts.keyword_case, opts.keywords)
    return layout(normalized, opts.indent_unit, opts.keywords)
