# tests/test_layout.py
from sqlfmt.keywords import KeywordSet
from sqlfmt.layout import layout, layout_tokens

def test_keyword_starts_new_line_and_keeps_trailing_space():
    assert layout("SELECT a FROM t") == "SELECT a \nFROM t"

def test_nested_parentheses_indent_and_dedent():
    assert layout("SELECT (a, (b))") == "SELECT (\n  a, (\n    b \n  )\n)"

def test_custom_indent_unit():
    assert layout("a (b)", "    ") == "a (\n    b \n)"

def test_zero_indent_unit():
    assert layout("a (b)", "") == "a (\nb \n)"

def test_semicolon_ends_line_and_next_keyword_has_no_blank_line():
    assert layout("a; b") == "a;\nb"
    assert layout("a; SELECT b") == "a;\nSELECT b"

def test_excess_close_paren_clamps_depth_at_zero():
    out = layout("a ) ) b")
    assert out == "a \n)\n)b"
    assert all(not line.startswith(" ") for line in out.splitlines())

def test_unclosed_paren_leaves_indent_raised():
    assert layout("f (x") == "f (\n  x"

def test_keyword_right_after_open_paren():
    assert layout("in (SELECT x)") == "in (\n  \n  SELECT x \n)"

def test_layout_uses_given_keyword_set():
    kws = KeywordSet.from_words(["TOP"])
    assert layout("SELECT TOP 5", "  ", kws) == "SELECT \nTOP 5"

def test_layout_tokens_accepts_prebuilt_tokens():
    toks = [
        {"type": "KEYWORD", "value": "SELECT"},
        {"type": "TEXT", "value": "1"},
        {"type": "SEMICOLON", "value": ";"},
    ]
    assert layout_tokens(toks) == "SELECT 1;"

def test_empty():
    assert layout("") == ""
