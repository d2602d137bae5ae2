"""Token categories and character classifiers for the lexical analyzer.

This module defines the `TokenCategory` enum for every bucket a lexeme can be
routed to, a small `Token` dataclass pairing a lexeme with its category, and
the fixed symbol alphabet used by the scanner, the categorizer and the
declaration recognizer (keywords, data-type keywords, operator characters,
brackets, separators and special symbols).

All predicates here are pure functions of the lexeme text.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
import string


class TokenCategory(Enum):
    KEYWORD = auto()
    MULTI_CHAR_OPERATOR = auto()
    OPERATOR = auto()
    SEPARATOR = auto()
    BRACKET = auto()
    SPECIAL_SYMBOL = auto()
    STRING_LITERAL = auto()
    CHAR_LITERAL = auto()
    NUMERIC_LITERAL = auto()
    # Valid declared names; filled by the declaration recognizer, not the
    # categorizer.
    IDENTIFIER = auto()
    UNCLASSIFIED = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    lexeme: str
    category: TokenCategory

    def __repr__(self) -> str:
        return f"Token({self.category}, {repr(self.lexeme)})"


KEYWORDS = frozenset(
    {
        "int",
        "float",
        "char",
        "double",
        "return",
        "if",
        "else",
        "for",
        "while",
        "void",
        "do",
        "switch",
        "case",
        "default",
        "break",
        "continue",
        "struct",
        "typedef",
        "include",
        "define",
        "unsigned",
        "const",
        "static",
        "long",
        "short",
        "signed",
    }
)

# Subset of KEYWORDS that may open a declaration line.
DATA_TYPES = frozenset(
    {
        "int",
        "float",
        "char",
        "double",
        "void",
        "unsigned",
        "const",
        "static",
        "long",
        "short",
        "signed",
    }
)

MULTI_CHAR_OPERATORS = (
    "++",
    "--",
    "==",
    "!=",
    "<=",
    ">=",
    "&&",
    "||",
    "+=",
    "-=",
    "*=",
    "/=",
)

OPERATOR_CHARS = "+-*/%=<>!&|^~"
BRACKET_CHARS = "(){}[]"
SEPARATOR_CHARS = ",;:"
SPECIAL_SYMBOL_CHARS = "#."
IDENTIFIER_PREFIX_CHARS = "#@!"

LETTERS = string.ascii_letters
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
WHITESPACE = " \t\n\r\v\f"


def _is_char_in(ch: str, alphabet: str) -> bool:
    return len(ch) == 1 and ch in alphabet


def is_keyword(word: str) -> bool:
    return word in KEYWORDS


def is_data_type(word: str) -> bool:
    return word in DATA_TYPES


def is_multi_char_operator(word: str) -> bool:
    return word in MULTI_CHAR_OPERATORS


def is_operator_char(ch: str) -> bool:
    return _is_char_in(ch, OPERATOR_CHARS)


def is_operator_string(word: str) -> bool:
    """True for a single operator character or a multi-char operator."""
    return is_operator_char(word) or is_multi_char_operator(word)


def is_bracket(ch: str) -> bool:
    return _is_char_in(ch, BRACKET_CHARS)


def is_separator(ch: str) -> bool:
    return _is_char_in(ch, SEPARATOR_CHARS)


def is_special_symbol(ch: str) -> bool:
    return _is_char_in(ch, SPECIAL_SYMBOL_CHARS)


def is_letter(ch: str) -> bool:
    return _is_char_in(ch, LETTERS)


def is_digit(ch: str) -> bool:
    return _is_char_in(ch, DIGITS)


def is_lowercase(ch: str) -> bool:
    return _is_char_in(ch, LOWERCASE)


def is_whitespace(ch: str) -> bool:
    return _is_char_in(ch, WHITESPACE)


def is_identifier_start(ch: str) -> bool:
    return is_letter(ch) or ch == "_" or _is_char_in(ch, IDENTIFIER_PREFIX_CHARS)


def is_identifier_char(ch: str) -> bool:
    return is_letter(ch) or is_digit(ch) or _is_char_in(ch, "_@!")
