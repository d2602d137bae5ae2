"""Declaration recognition over one line of tokens.

A line is a declaration when it starts with one or more data-type keywords
(`int`, `unsigned`, `const`, ...) and has at least one token after them. The
keywords are joined with single spaces to form the declared type. The first
token after them decides the shape:

- followed by `(`: a function declaration, and that token is its name;
- otherwise: a variable declaration list such as `int abcd12@r = 5, efgh34@r;`.

Candidate names go through `is_valid_identifier`. Valid names are added to
the valid set and to the symbol table; invalid ones to the invalid set. In a
variable list, `=` and the single token after it become the initializer of
the name before it. Tokens that cannot be a name attempt at all (keywords,
operators, punctuation, numbers, quoted literals) are skipped without being
reported.

This is one greedy left-to-right pass per line, not a grammar: there is no
backtracking and nothing is carried over between lines.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
from categorizer import OrderedSet
from identifiers import is_valid_identifier
from symbols import SymbolTable
from tokens import (
    is_bracket,
    is_data_type,
    is_digit,
    is_keyword,
    is_operator_string,
    is_separator,
    is_special_symbol,
)

FUNCTION = "function"
VARIABLE = "variable"


@dataclass
class Declaration:
    """What one declaration line contributed."""

    kind: str
    declared_type: str
    line: int
    valid_names: List[str] = field(default_factory=list)
    invalid_names: List[str] = field(default_factory=list)


def could_be_name(token: str) -> bool:
    """False for tokens that are plainly not an attempt at a name."""
    if not token or is_keyword(token) or is_operator_string(token):
        return False
    first = token[0]
    return not (
        is_bracket(first)
        or is_separator(first)
        or is_special_symbol(first)
        or is_digit(first)
        or first in "\"'"
    )


class DeclarationRecognizer:
    def __init__(
        self,
        symbol_table: SymbolTable,
        valid_identifiers: OrderedSet[str],
        invalid_identifiers: OrderedSet[str],
    ):
        self.symbol_table = symbol_table
        self.valid_identifiers = valid_identifiers
        self.invalid_identifiers = invalid_identifiers

    def process(self, tokens: List[str], line: int) -> Optional[Declaration]:
        """Inspect one line's tokens; return None if it declares nothing."""
        type_parts = []
        pos = 0
        while pos < len(tokens) and is_data_type(tokens[pos]):
            type_parts.append(tokens[pos])
            pos += 1

        if not type_parts or pos == len(tokens):
            return None

        declared_type = " ".join(type_parts)
        if pos + 1 < len(tokens) and tokens[pos + 1] == "(":
            decl = Declaration(FUNCTION, declared_type, line)
            self._function(tokens[pos], decl)
        else:
            decl = Declaration(VARIABLE, declared_type, line)
            self._variables(tokens, pos, decl)
        return decl

    def _accept(self, name: str, initializer: Optional[str], decl: Declaration) -> None:
        self.valid_identifiers.add(name)
        self.symbol_table.declare(name, decl.declared_type, initializer, decl.line)
        decl.valid_names.append(name)

    def _reject(self, name: str, decl: Declaration) -> None:
        self.invalid_identifiers.add(name)
        decl.invalid_names.append(name)

    def _function(self, name: str, decl: Declaration) -> None:
        if is_valid_identifier(name):
            self._accept(name, None, decl)
        else:
            self._reject(name, decl)

    def _variables(self, tokens: List[str], pos: int, decl: Declaration) -> None:
        while pos < len(tokens):
            token = tokens[pos]
            if token == ",":
                pos += 1
                continue
            if token == ";":
                break

            if not is_valid_identifier(token):
                if could_be_name(token):
                    self._reject(token, decl)
                pos += 1
                continue

            pos += 1
            initializer = None
            if pos < len(tokens) and tokens[pos] == "=":
                pos += 1
                if pos < len(tokens):
                    initializer = tokens[pos]
                    pos += 1
            self._accept(token, initializer, decl)
