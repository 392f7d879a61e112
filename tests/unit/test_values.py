import pytest

import json_parser as jp
from json_value import KEYWORDS, Kind, keyword_value, kind_of

@pytest.mark.parametrize("text,kind", [
    ('{"a": 1}', Kind.OBJECT),
    ("[1]", Kind.ARRAY),
    ('"s"', Kind.STRING),
    ("bare", Kind.STRING),
    ("-1", Kind.NUMBER),
    ("5", Kind.NUMBER),
    ("true", Kind.TRUE),
    ("false", Kind.FALSE),
    ("null", Kind.NULL),
    ("", Kind.NULL),
])
def test_dispatch_on_first_character(text, kind):
    assert kind_of(jp.parse(text)) is kind

def test_kind_of_checks_bool_before_number():
    assert kind_of(True) is Kind.TRUE
    assert kind_of(False) is Kind.FALSE
    assert kind_of(0.0) is Kind.NUMBER

def test_kind_of_rejects_foreign_values():
    with pytest.raises(TypeError) as ei:
        kind_of(1)
    assert "not a document value: int" in str(ei.value)
    with pytest.raises(TypeError):
        kind_of((1, 2))

def test_keyword_value():
    assert keyword_value("true") is True
    assert keyword_value("false") is False
    assert keyword_value("null") is None
    assert keyword_value("nil") == "nil"
    assert keyword_value("") == ""

def test_keyword_table_is_exact():
    assert set(KEYWORDS) == {"true", "false", "null"}

def test_parse_value_does_not_skip_whitespace():
    # dispatch sees the blank, so the digits are read as a bareword
    p = jp.Parser(" 1")
    assert p.parse_value() == "1"
