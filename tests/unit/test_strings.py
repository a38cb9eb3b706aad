import pytest

import json_checker as jc

@pytest.mark.parametrize("text", [
    '[""]',
    '["plain"]',
    r'["\"\\\/\b\f\n\r\t"]',
    r'["Aꯍꯍ\u0000"]',
    '["café 世界 \U0001F600"]',
    '["\U0010FFFF"]',
    '["~\x7f"]',
    '{"": ""}',
])
def test_valid_strings(text):
    jc.check(text)

def test_invalid_hex_escape_reports_character():
    bad = '["\\u12GZ"]'
    with pytest.raises(jc.GrammarError) as ei:
        jc.check(bad)
    msg = str(ei.value)
    assert "expected hex digit, got 'G'" in msg
    assert "escape > hex" in msg

def test_short_unicode_escape_hits_closing_quote():
    with pytest.raises(jc.GrammarError) as ei:
        jc.check('["\\u12"]')
    assert "expected hex digit, got '\"'" in str(ei.value)

def test_unicode_escape_at_end_of_input():
    with pytest.raises(jc.JSONCheckError):
        jc.check('["\\u12')

def test_invalid_single_escape_is_a_tokenize_error():
    with pytest.raises(jc.TokenizeError):
        jc.check('["\\q"]')

@pytest.mark.parametrize("ctrl", ["\x00", "\x01", "\t", "\n", "\x1f"])
def test_control_characters_rejected(ctrl):
    with pytest.raises(jc.GrammarError) as ei:
        jc.check(f'["a{ctrl}b"]')
    assert "expected character" in str(ei.value)

def test_unterminated_string_rejected():
    with pytest.raises(jc.GrammarError) as ei:
        jc.check('["abc')
    assert 'expected string ending with "' in str(ei.value)

def test_escaped_quote_does_not_terminate():
    with pytest.raises(jc.GrammarError) as ei:
        jc.check('["abc\\"')
    assert 'expected string ending with "' in str(ei.value)

def test_lone_quote_rejected():
    with pytest.raises(jc.GrammarError):
        jc.check('["')

def test_single_quotes_are_not_strings():
    assert not jc.is_valid("['single quote']")
