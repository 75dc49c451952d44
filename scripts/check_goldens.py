from __future__ import annotations
import argparse, sys
from pathlib import Path

# Ensure project root (which contains `sqlfmt/`) is on sys.path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlfmt.formatter import format_sql  # noqa: E402

EXAMPLES = ROOT / "Examples"


def golden_path_for(path: Path) -> Path:
    return Path(str(path) + ".golden")


def render(path: Path) -> str:
    return format_sql(path.read_text(encoding="utf-8")) + "\n"


def check_example(path: Path, update: bool = False) -> int:
    new_text = render(path)
    golden = golden_path_for(path)
    if update:
        golden.write_text(new_text, encoding="utf-8")
        print(f"[UPDATED] {golden.name}")
        return 0
    if not golden.exists():
        print(f"[ERROR] Missing golden: {golden}. Create via: python scripts/check_goldens.py --update")
        return 1
    if golden.read_text(encoding="utf-8") == new_text:
        print(f"[OK] {path.name} matches golden.")
        return 0
    print(f"[FAIL] Output changed for {path.name}.")
    print(f"       Review, then update via: python scripts/check_goldens.py --update")
    return 2


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="check_goldens")
    ap.add_argument("--examples", default=str(EXAMPLES), help="Directory holding *.sql examples.")
    ap.add_argument("--update", action="store_true", help="Rewrite goldens from current output.")
    args = ap.parse_args(argv)

    base = Path(args.examples)
    if not base.exists():
        print(f"[ERROR] {base} not found.")
        return 1
    rc = 0
    for p in sorted(base.glob("*.sql")):
        rc |= check_example(p, update=args.update)
    return 1 if rc else 0


if __name__ == "__main__":
    raise SystemExit(main())
