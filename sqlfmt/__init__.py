# sqlfmt/__init__.py
# Rule-based SQL text formatter: keyword re-casing plus newline/indent layout.

__version__ = "0.3.0"

from .keywords import DEFAULT_KEYWORDS, DEFAULT_KEYWORD_LIST, KeywordSet  # noqa: E402
from .normalizer import KEYWORD_CASES, normalize_keywords  # noqa: E402
from .tokenizer import tokenize  # noqa: E402
from .layout import layout  # noqa: E402
from .formatter import FormatOptions, format_sql  # noqa: E402

__all__ = [
    "DEFAULT_KEYWORDS",
    "DEFAULT_KEYWORD_LIST",
    "FormatOptions",
    "KEYWORD_CASES",
    "KeywordSet",
    "format_sql",
    "layout",
    "normalize_keywords",
    "tokenize",
    "__version__",
]
