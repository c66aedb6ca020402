from __future__ import annotations

import pytest

from casekit.segment import DELIMITER, DIGIT, LETTER, LOWER, UPPER, classify, segment


@pytest.mark.parametrize(
    "value, expected",
    [
        ("fooBar", ("foo", "Bar")),
        ("PascalCaseInput", ("Pascal", "Case", "Input")),
        ("XMLHttpRequest", ("XML", "Http", "Request")),
        ("ABCDef", ("ABC", "Def")),
        ("getHTTPResponseCode", ("get", "HTTP", "Response", "Code")),
        ("version2alpha", ("version", "2", "alpha")),
        ("1st", ("1", "st")),
        ("a1B", ("a", "1", "B")),
        ("user_id_42", ("user", "id", "42")),
        ("  multiple   separators___and--spaces ", ("multiple", "separators", "and", "spaces")),
        ("SCREEN_NAME", ("SCREEN", "NAME")),
        ("μVariableName", ("μ", "Variable", "Name")),
    ],
)
def test_segment_boundaries(value, expected):
    assert segment(value) == expected


@pytest.mark.parametrize("value", ["", "   ", "!!!", "-_- ... ---"])
def test_segment_without_word_characters_is_empty(value):
    assert segment(value) == ()


def test_segment_tokens_never_contain_delimiters():
    for word in segment("a-b_c.d e/f(g)h"):
        assert word.isalnum()


def test_uppercase_run_alone_is_single_word():
    assert segment("HTTP") == ("HTTP",)


def test_acronym_split_keeps_last_capital_with_lowercase_tail():
    assert segment("IDs") == ("I", "Ds")


def test_classify_unicode():
    assert classify("aB1é-中") == [LOWER, UPPER, DIGIT, LOWER, DELIMITER, LETTER]


def test_ascii_fallback_treats_other_scripts_as_delimiters():
    assert classify("aZ9é", unicode=False) == [LOWER, UPPER, DIGIT, DELIMITER]
    assert segment("helloМирWorld", unicode=False) == ("hello", "World")
    assert segment("helloМирWorld") == ("hello", "Мир", "World")
