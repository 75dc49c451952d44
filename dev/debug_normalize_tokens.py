import sys, json
from pathlib import Path
import os

# ---- make 'sqlfmt' importable no matter where we run this file from ----
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from sqlfmt.normalizer import normalize_keywords
from sqlfmt.tokenizer import tokenize
from sqlfmt.layout import layout

def visible(s: str) -> str:
    return s.replace(" ", "·").replace("\t", "⇥")

def main(p: str, keyword_case: str = "upper"):
    text = Path(p).read_text(encoding="utf-8")
    norm = normalize_keywords(text, keyword_case)

    print("=== Normalized text (with visible spaces) ===")
    print(visible(norm))

    print("\n=== Tokens ===")
    for t in tokenize(norm):
        print(json.dumps(t, ensure_ascii=False))

    print("\n=== Layout (with visible spaces) ===")
    for i, line in enumerate(layout(norm).splitlines(), 1):
        print(f"{i:02d}  {visible(line)}")

if __name__ == "__main__":
    if len(sys.argv) not in (2, 3):
        print("usage: python dev/debug_normalize_tokens.py <query.sql> [upper|lower|keep]")
        sys.exit(2)
    main(*sys.argv[1:])
