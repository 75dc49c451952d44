# sqlfmt/config.py
# JSON config loader for sql-fmt.
# - Validates against the bundled Draft 2020-12 schema (no network, no $ref).
# - Maps camelCase config keys onto FormatOptions fields.
# - Precedence: defaults < config file < command-line flags (see cli.py).

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
from jsonschema import Draft202012Validator

from .errors import ConfigError
from .formatter import FormatOptions
from .keywords import KeywordSet

SCHEMAS = Path(__file__).resolve().parent / "Schemas"
CONFIG_SCHEMA_PATH = SCHEMAS / "sqlfmt-config.schema.json"


def load_schema() -> Dict[str, Any]:
    # BOM-safe read
    return json.loads(CONFIG_SCHEMA_PATH.read_text(encoding="utf-8-sig"))


def _fmt_error(err: jsonschema.ValidationError) -> str:
    where = "/".join(str(p) for p in err.absolute_path) or "<root>"
    return f"{where}: {err.message}"


def validation_errors(data: Any, schema: Optional[Dict[str, Any]] = None) -> List[str]:
    """Return schema violations as 'path: message' strings, sorted by path."""
    validator = Draft202012Validator(schema or load_schema())
    errs = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
    return [_fmt_error(e) for e in errs]


def options_from_dict(data: Dict[str, Any], base: Optional[FormatOptions] = None) -> FormatOptions:
    errs = validation_errors(data)
    if errs:
        raise ConfigError("invalid config:\n- " + "\n- ".join(errs))
    keywords = KeywordSet.from_words(data["keywords"]) if "keywords" in data else None
    return (base or FormatOptions()).merged(
        indent_size=data.get("indentSize"),
        keyword_case=data.get("keywordCase"),
        keywords=keywords,
    )


def load_config(path: Path, base: Optional[FormatOptions] = None) -> FormatOptions:
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(getattr(e, "strerror", None) or str(e), str(path)) from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON: {e}", str(path)) from e
    try:
        return options_from_dict(data, base)
    except ConfigError as e:
        raise ConfigError(str(e), str(path)) from e
