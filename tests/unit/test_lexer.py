import pytest

from json_errors import TokenizeError
from lexer import tokenize

def test_structural_characters_are_single_tokens():
    assert tokenize('{"a":[1,2]}') == ["{", '"a"', ":", "[", "1", ",", "2", "]", "}"]

def test_whitespace_is_dropped():
    assert tokenize(' {\n\t"a" :\r\n true } ') == ["{", '"a"', ":", "true", "}"]

def test_whitespace_inside_string_is_kept():
    assert tokenize('[" a\tb "]') == ["[", '" a\tb "', "]"]

def test_whitespace_splits_bare_spans():
    assert tokenize("[1 2]") == ["[", "1", "2", "]"]

def test_escapes_left_unresolved():
    assert tokenize(r'["\"\\\/é"]') == ["[", r'"\"\\\/é"', "]"]

def test_escaped_backslash_then_quote_closes_string():
    assert tokenize(r'["a\\"]') == ["[", r'"a\\"', "]"]

def test_structural_characters_inside_string_are_literal():
    assert tokenize('["{,:}"]') == ["[", '"{,:}"', "]"]

def test_bare_span_before_quote_is_flushed():
    assert tokenize('[12"ab"]') == ["[", "12", '"ab"', "]"]

def test_trailing_bare_span_is_kept():
    assert tokenize("[1] 2") == ["[", "1", "]", "2"]

def test_unterminated_string_is_kept():
    assert tokenize('["abc') == ["[", '"abc']

def test_empty_input_has_no_tokens():
    assert tokenize("") == []
    assert tokenize(" \n\t ") == []

@pytest.mark.parametrize("bad", [r'["\x"]', r'["\0"]', r'["\ "]', '["\\\n"]', r'["\U0041"]'])
def test_invalid_escape_indicator(bad):
    with pytest.raises(TokenizeError) as ei:
        tokenize(bad)
    assert "invalid escape character" in str(ei.value)

def test_invalid_escape_reports_offset():
    with pytest.raises(TokenizeError) as ei:
        tokenize('["ab\\q"]')
    assert "offset 5" in str(ei.value)
