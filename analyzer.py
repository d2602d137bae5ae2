"""Single-pass analysis session.

`AnalysisSession` owns all state accumulated while reading one source file:
the comment state carried between lines, the token buckets, the valid and
invalid identifier sets and the symbol table. Feed it lines with
`process_line` (or a whole stream with `analyze_lines`) and read the results
back through the snapshot helpers, e.g.:

    session = AnalysisSession()
    session.analyze_lines(["int agency12@r = 5;"])
    session.valid_identifiers.snapshot()   # ['agency12@r']
"""

from __future__ import annotations
from dataclasses import dataclass
import io
from typing import Iterable, List, Optional
from categorizer import OrderedSet, TokenBuckets
from comments import OUTSIDE, CommentState, strip_comments
from declarations import Declaration, DeclarationRecognizer
from lexer import tokenize_line
from symbols import SymbolTable
from tokens import Token


@dataclass
class LineResult:
    """Per-line outcome, mostly useful for tracing and tests."""

    line: int
    text: str
    tokens: List[Token]
    declaration: Optional[Declaration] = None


class AnalysisSession:
    def __init__(self):
        self.comment_state: CommentState = OUTSIDE
        self.buckets = TokenBuckets()
        self.valid_identifiers: OrderedSet[str] = OrderedSet()
        self.invalid_identifiers: OrderedSet[str] = OrderedSet()
        self.symbol_table = SymbolTable()
        self.recognizer = DeclarationRecognizer(
            self.symbol_table, self.valid_identifiers, self.invalid_identifiers
        )
        self.line_count = 0

    def process_line(self, raw: str, line: Optional[int] = None) -> LineResult:
        """Analyze one physical line. `line` defaults to the next line number."""
        self.line_count = line if line is not None else self.line_count + 1
        text, self.comment_state = strip_comments(
            raw.rstrip("\n"), self.comment_state
        )

        lexemes = tokenize_line(text)
        if not lexemes:
            return LineResult(self.line_count, text, [])

        # Declarations first, then categories, over the same lexemes.
        declaration = self.recognizer.process(lexemes, self.line_count)
        tokens = self.buckets.add_all(lexemes)
        return LineResult(self.line_count, text, tokens, declaration)

    def analyze_lines(self, lines: Iterable[str]) -> List[LineResult]:
        return [self.process_line(raw) for raw in lines]

    @property
    def unterminated_comment(self) -> bool:
        """True if the input ended inside a block comment."""
        return self.comment_state.inside_block

    @property
    def has_invalid_identifiers(self) -> bool:
        return len(self.invalid_identifiers) > 0


def analyze_text(text: str) -> AnalysisSession:
    """Convenience: analyze a whole source string.

    Lines are split the way a file opened in text mode splits them: on line
    feeds, CR LF pairs and lone carriage returns only.
    """
    session = AnalysisSession()
    session.analyze_lines(io.StringIO(text, newline=None))
    return session
