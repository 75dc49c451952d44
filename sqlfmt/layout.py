# sqlfmt/layout.py
# Layout engine: one left-to-right pass over tokens with a single depth counter.
#
#   "("      -> rstrip, " (\n", indent at depth+1        depth += 1
#   ")"      -> "\n", indent at depth-1, ")"             depth -= 1 (floor 0)
#   ","      -> rstrip, ",\n", indent at depth
#   ";"      -> rstrip, ";\n"
#   keyword  -> newline unless at line start, indent at depth, token + " "
#   other    -> token + " "

from __future__ import annotations
from typing import Dict, Iterable, List

from .keywords import DEFAULT_KEYWORDS, KeywordSet
from .tokenizer import tokenize


class _Buffer:
    """Output buffer that supports trimming trailing whitespace in place."""

    def __init__(self) -> None:
        self._parts: List[str] = []

    def append(self, s: str) -> None:
        if s:
            self._parts.append(s)

    def rstrip(self) -> None:
        while self._parts:
            last = self._parts[-1].rstrip()
            if last:
                self._parts[-1] = last
                return
            self._parts.pop()

    def at_line_start(self) -> bool:
        return not self._parts or self._parts[-1].endswith("\n")

    def getvalue(self) -> str:
        return "".join(self._parts)


def layout_tokens(tokens: Iterable[Dict[str, str]], indent_unit: str = "  ") -> str:
    out = _Buffer()
    depth = 0

    for tok in tokens:
        kind = tok["type"]
        value = tok["value"]

        if kind == "OPEN_PAREN":
            out.rstrip()
            depth += 1
            out.append(" (\n" + indent_unit * depth)
        elif kind == "CLOSE_PAREN":
            depth = max(0, depth - 1)
            out.append("\n" + indent_unit * depth + ")")
        elif kind == "COMMA":
            out.rstrip()
            out.append(",\n" + indent_unit * depth)
        elif kind == "SEMICOLON":
            out.rstrip()
            out.append(";\n")
        elif kind == "KEYWORD":
            prefix = "" if out.at_line_start() else "\n"
            out.append(prefix + indent_unit * depth + value + " ")
        else:
            out.append(value + " ")

    return out.getvalue().strip()


def layout(normalized: str, indent_unit: str = "  ", keywords: KeywordSet = DEFAULT_KEYWORDS) -> str:
    return layout_tokens(tokenize(normalized, keywords), indent_unit)
