import pytest
from main import lex
from tokens import MULTI_CHAR_OPERATORS


def test_lexer_splits_declaration_line():
    assert lex("int agency12@r = 5;") == ["int", "agency12@r", "=", "5", ";"]


@pytest.mark.parametrize("op", MULTI_CHAR_OPERATORS)
def test_multi_char_operator_is_one_token(op):
    assert lex(f"  {op}  ") == [op]


def test_multi_char_operator_without_spaces():
    assert lex("a<=b") == ["a", "<=", "b"]
    assert lex("x+++y") == ["x", "++", "+", "y"]


def test_preprocessor_line_is_tokenized_not_expanded():
    assert lex("#include <stdio.h>") == ["#", "include", "<", "stdio", ".", "h", ">"]


def test_prefix_characters():
    # `#` and `!` are single-character tokens before they can open a name.
    assert lex("#abcd12@r") == ["#", "abcd12@r"]
    assert lex("!abcd12@r") == ["!", "abcd12@r"]
    assert lex("@abcd12@r") == ["@abcd12@r"]
    assert lex("a != b") == ["a", "!=", "b"]


def test_numbers_swallow_dots():
    assert lex("3.14.15;") == ["3.14.15", ";"]
    assert lex("12abc") == ["12", "abc"]


def test_string_literals():
    assert lex('printf("hello world");') == ["printf", "(", '"hello world"', ")", ";"]
    assert lex('x = "abc') == ["x", "=", '"abc']
    assert lex('""') == ['""']


def test_char_literals():
    assert lex("c = 'a';") == ["c", "=", "'a'", ";"]
    assert lex("''") == ["''"]
    assert lex("'ab'") == ["'a", "b", "'"]


def test_unknown_characters_are_single_tokens():
    assert lex("$ ? `") == ["$", "?", "`"]


def test_blank_lines_have_no_tokens():
    assert lex("") == []
    assert lex("   \t ") == []


def test_every_non_whitespace_character_is_consumed():
    src = "int a1 = b[2] + 'c' ; /x $"
    tokens = lex(src)
    assert "".join(tokens) == "".join(src.split())
