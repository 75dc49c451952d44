# sqlfmt/errors.py
# Error types raised outside the formatting core (config loading, CLI input).
from __future__ import annotations
from typing import Optional


class SqlFmtError(Exception):
    pass


class ConfigError(SqlFmtError):
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class InputError(SqlFmtError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path
        self.reason = reason
