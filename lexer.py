"""
Line scanner for the lexical analyzer.

Overview:
- This module implements a small hand-written scanner that turns one
    comment-stripped source line into an ordered list of raw lexemes. No
    category is attached here; see `categorizer.py` for that.
- It recognizes the two-character operators listed in
    `tokens.MULTI_CHAR_OPERATORS`, single operator/separator/bracket/special
    characters, identifier-shaped runs, numeric runs, string literals and
    character literals. Anything else becomes a one-character token.

Examples:
    Input:  "int agency12@r = 5;"
    Tokens: ["int", "agency12@r", "=", "5", ";"]

Implementation notes:
- The scanner is a simple stateful loop over `self.pos` and
    `self.current_char`, longest match first.
- Two-character operators are checked before single characters so `+=` is
    not lexed as `+` `=`.
- Single operator/special characters are checked before identifier runs, so
    `#` and `!` are standalone tokens even though they may also open an
    identifier run.
- Numeric runs swallow every `.`, so `1.2.3` is a single (malformed) token.
- Unterminated string and character literals end at the end of the line.
    Nothing in here raises.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import (
    is_bracket,
    is_digit,
    is_identifier_char,
    is_identifier_start,
    is_multi_char_operator,
    is_operator_char,
    is_separator,
    is_special_symbol,
    is_whitespace,
)


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.current_char = self.text[self.pos] if self.text else None

    def advance(self) -> None:
        """Advance to next character."""
        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_whitespace(self) -> None:
        while self.current_char is not None and is_whitespace(self.current_char):
            self.advance()

    def consume_while(self, predicate) -> str:
        """Consume the maximal run of characters accepted by `predicate`."""
        start = self.pos
        while self.current_char is not None and predicate(self.current_char):
            self.advance()
        return self.text[start : self.pos]

    def word(self) -> str:
        """Identifier, keyword or prefixed name such as `@abcd12@r`."""
        first = self.current_char
        self.advance()
        return first + self.consume_while(is_identifier_char)

    def number(self) -> str:
        return self.consume_while(lambda ch: is_digit(ch) or ch == ".")

    def string_literal(self) -> str:
        start = self.pos
        self.advance()  # opening quote
        while self.current_char is not None and self.current_char != '"':
            self.advance()
        if self.current_char == '"':
            self.advance()
        return self.text[start : self.pos]

    def char_literal(self) -> str:
        start = self.pos
        self.advance()  # opening quote
        if self.current_char is not None and self.current_char != "'":
            self.advance()
        if self.current_char == "'":
            self.advance()
        return self.text[start : self.pos]

    def get_next_token(self) -> Optional[str]:
        """Return the next lexeme, or None at end of line."""
        while self.current_char is not None:
            if is_whitespace(self.current_char):
                self.skip_whitespace()
                continue

            # Two-character operators first so `==` is not lexed as `=` `=`.
            peek = self.peek_char()
            if peek is not None and is_multi_char_operator(self.current_char + peek):
                lexeme = self.current_char + peek
                self.advance()
                self.advance()
                return lexeme

            ch = self.current_char
            if (
                is_operator_char(ch)
                or is_separator(ch)
                or is_bracket(ch)
                or is_special_symbol(ch)
            ):
                self.advance()
                return ch

            if is_identifier_start(ch):
                return self.word()

            if is_digit(ch):
                return self.number()

            match ch:
                case '"':
                    return self.string_literal()
                case "'":
                    return self.char_literal()

            # Unrecognized character: a one-character token of its own.
            self.advance()
            return ch

        return None

    def tokenize(self) -> List[str]:
        """Return all lexemes of the line."""
        tokens = []
        while True:
            token = self.get_next_token()
            if token is None:
                break
            tokens.append(token)
        return tokens


def tokenize_line(line: str) -> List[str]:
    return Lexer(line).tokenize()
