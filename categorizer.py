"""Token categorization.

`classify_token(lexeme)` maps one raw lexeme from the scanner to exactly one
`TokenCategory`, testing categories in a fixed priority order:

    keyword -> multi-char operator -> operator -> separator -> bracket
    -> special symbol -> string literal -> character literal
    -> numeric literal -> unclassified

`TokenBuckets` accumulates lexemes per category in `OrderedSet`s, so each
bucket holds every lexeme once, in order of first appearance.

Identifiers are never produced here: declared names are reported through the
declaration recognizer's identifier sets instead, so a plain word such as
`printf` ends up among the unclassified tokens.
"""

from __future__ import annotations
from typing import Dict, Generic, Iterable, Iterator, List, TypeVar
from tokens import (
    Token,
    TokenCategory,
    is_bracket,
    is_digit,
    is_keyword,
    is_multi_char_operator,
    is_operator_string,
    is_separator,
    is_special_symbol,
)

T = TypeVar("T")


class OrderedSet(Generic[T]):
    """Insertion-ordered set; adding an existing item is a no-op."""

    def __init__(self, items: Iterable[T] = ()):
        self._items: Dict[T, None] = {}
        for item in items:
            self.add(item)

    def add(self, item: T) -> bool:
        """Add `item`; return True if it was not present before."""
        if item in self._items:
            return False
        self._items[item] = None
        return True

    def snapshot(self) -> List[T]:
        return list(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"OrderedSet({self.snapshot()!r})"


def _quoted(lexeme: str, quote: str) -> bool:
    return lexeme.startswith(quote) and lexeme.endswith(quote)


def classify_token(lexeme: str) -> TokenCategory:
    if is_keyword(lexeme):
        return TokenCategory.KEYWORD
    if is_multi_char_operator(lexeme):
        return TokenCategory.MULTI_CHAR_OPERATOR
    if is_operator_string(lexeme):
        return TokenCategory.OPERATOR
    if is_separator(lexeme):
        return TokenCategory.SEPARATOR
    if is_bracket(lexeme):
        return TokenCategory.BRACKET
    if is_special_symbol(lexeme):
        return TokenCategory.SPECIAL_SYMBOL
    if _quoted(lexeme, '"'):
        return TokenCategory.STRING_LITERAL
    if _quoted(lexeme, "'"):
        return TokenCategory.CHAR_LITERAL
    if lexeme and is_digit(lexeme[0]):
        return TokenCategory.NUMERIC_LITERAL
    return TokenCategory.UNCLASSIFIED


# Categories that get a bucket; IDENTIFIER is reported from the declarations.
BUCKET_CATEGORIES = tuple(c for c in TokenCategory if c is not TokenCategory.IDENTIFIER)

QUOTED_CATEGORIES = (TokenCategory.STRING_LITERAL, TokenCategory.CHAR_LITERAL)


class TokenBuckets:
    def __init__(self):
        self.buckets: Dict[TokenCategory, OrderedSet[str]] = {
            category: OrderedSet() for category in BUCKET_CATEGORIES
        }
        # String and character literals interleaved in first-seen order.
        self.quoted: OrderedSet[str] = OrderedSet()

    def add(self, lexeme: str) -> Token:
        """Classify `lexeme` and record it in its bucket."""
        category = classify_token(lexeme)
        self.buckets[category].add(lexeme)
        if category in QUOTED_CATEGORIES:
            self.quoted.add(lexeme)
        return Token(lexeme, category)

    def add_all(self, lexemes: Iterable[str]) -> List[Token]:
        return [self.add(lexeme) for lexeme in lexemes if lexeme]

    def get(self, category: TokenCategory) -> List[str]:
        """Read-only snapshot of one bucket."""
        if category not in self.buckets:
            raise KeyError(f"No bucket for {category}")
        return self.buckets[category].snapshot()

    def quoted_literals(self) -> List[str]:
        """String and character literals together, in order of appearance."""
        return self.quoted.snapshot()

    def snapshot(self) -> Dict[TokenCategory, List[str]]:
        return {category: bucket.snapshot() for category, bucket in self.buckets.items()}
