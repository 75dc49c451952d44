# tests/conftest.py
# Ensure the project root (the folder that contains 'sqlfmt' and 'tests') is on sys.path
# so that `from sqlfmt...` imports work during pytest collection and execution,
# even without an editable install.

import sys
import pathlib

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)

if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

# Sanity check: make sure 'sqlfmt' is importable and looks like a package
try:
    import sqlfmt  # noqa: F401
except Exception as e:
    has_pkg = (ROOT / "sqlfmt" / "__init__.py").is_file()
    raise RuntimeError(
        f"Failed to import 'sqlfmt' from {ROOT_STR}. "
        f"sqlfmt/__init__.py exists: {has_pkg}"
    ) from e


@pytest.fixture
def scripts_dir() -> pathlib.Path:
    return ROOT / "scripts"
