# tests/test_goldens.py
from __future__ import annotations
import importlib.util
import shutil
from pathlib import Path

import pytest

from sqlfmt.formatter import format_sql

EXAMPLES = Path(__file__).resolve().parents[1] / "Examples"


def _load_check_goldens(scripts_dir: Path):
    spec = importlib.util.spec_from_file_location("check_goldens", scripts_dir / "check_goldens.py")
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)  # type: ignore[union-attr]
    return mod


@pytest.mark.parametrize("sql_path", sorted(EXAMPLES.glob("*.sql")), ids=lambda p: p.name)
def test_example_matches_golden(sql_path: Path):
    golden = Path(str(sql_path) + ".golden").read_text(encoding="utf-8")
    assert format_sql(sql_path.read_text(encoding="utf-8")) + "\n" == golden


def test_check_goldens_script_passes_on_repo_examples(scripts_dir: Path, capsys):
    mod = _load_check_goldens(scripts_dir)
    assert mod.main([]) == 0
    assert "[FAIL]" not in capsys.readouterr().out


def test_check_goldens_script_detects_drift_and_updates(tmp_path: Path, scripts_dir: Path, capsys):
    mod = _load_check_goldens(scripts_dir)
    shutil.copy(EXAMPLES / "select_in_list.sql", tmp_path / "q.sql")
    (tmp_path / "q.sql.golden").write_text("stale\n", encoding="utf-8")

    assert mod.main(["--examples", str(tmp_path)]) == 1
    assert "[FAIL] Output changed for q.sql." in capsys.readouterr().out

    assert mod.main(["--examples", str(tmp_path), "--update"]) == 0
    assert mod.main(["--examples", str(tmp_path)]) == 0


def test_check_goldens_script_reports_missing_golden(tmp_path: Path, scripts_dir: Path, capsys):
    mod = _load_check_goldens(scripts_dir)
    (tmp_path / "q.sql").write_text("select 1", encoding="utf-8")
    assert mod.main(["--examples", str(tmp_path)]) == 1
    assert "Missing golden" in capsys.readouterr().out
