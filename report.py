"""Plain-text report for a finished analysis session.

`ReportRenderer.render(session)` returns the whole report as a string:

- a title banner,
- valid and invalid identifiers with their counts,
- the token listings by category,
- the symbol table as a fixed-width table,
- a closing banner.

Every listing is `[a, b, c]` in order of first appearance. The renderer only
reads snapshots from the session and never changes it.
"""

from __future__ import annotations
from typing import List, Optional, Sequence
from analyzer import AnalysisSession
from symbols import SymbolRecord
from tokens import TokenCategory

BANNER_WIDTH = 51

# (label, category) in report order. IDENTIFIER lists the valid declared
# names; STRING_LITERAL lists string and character literals together.
CATEGORY_SECTIONS = (
    ("Keywords", TokenCategory.KEYWORD),
    ("Identifiers", TokenCategory.IDENTIFIER),
    ("Numeric", TokenCategory.NUMERIC_LITERAL),
    ("String Literals", TokenCategory.STRING_LITERAL),
    ("Multi-char Operators", TokenCategory.MULTI_CHAR_OPERATOR),
    ("Operators", TokenCategory.OPERATOR),
    ("Separators", TokenCategory.SEPARATOR),
    ("Brackets", TokenCategory.BRACKET),
    ("Special Symbols", TokenCategory.SPECIAL_SYMBOL),
    ("Others", TokenCategory.UNCLASSIFIED),
)

NAME_WIDTH, TYPE_WIDTH, VALUE_WIDTH, LINE_WIDTH = 15, 21, 14, 4


def format_listing(items: Sequence[str]) -> str:
    return "[" + ", ".join(items) + "]"


class ReportRenderer:
    @staticmethod
    def banner(*lines: str) -> List[str]:
        out = ["*" * BANNER_WIDTH]
        for text in lines:
            out.append("*" + text.center(BANNER_WIDTH - 2) + "*")
        out.append("*" * BANNER_WIDTH)
        return out

    @staticmethod
    def symbol_row(record: SymbolRecord) -> str:
        return (
            f"| {record.name:<{NAME_WIDTH}} | {record.declared_type:<{TYPE_WIDTH}} "
            f"| {record.initializer:<{VALUE_WIDTH}} | {record.declared_at_line:<{LINE_WIDTH}} |"
        )

    @staticmethod
    def print_symbol_table(records: Sequence[SymbolRecord]) -> str:
        header = (
            f"| {'Name':<{NAME_WIDTH}} | {'DataType':<{TYPE_WIDTH}} "
            f"| {'Value':<{VALUE_WIDTH}} | {'Line':<{LINE_WIDTH}} |"
        )
        rule = "-" * len(header)
        lines = [rule, header, rule]
        lines.extend(ReportRenderer.symbol_row(r) for r in records)
        lines.append(rule)
        return "\n".join(lines)

    @staticmethod
    def render(session: AnalysisSession, subtitle: Optional[str] = None) -> str:
        lines = []
        title = ["LEXICAL ANALYSIS REPORT"]
        if subtitle:
            title.append(subtitle)
        lines.extend(ReportRenderer.banner(*title))
        lines.append("")

        valid = session.valid_identifiers.snapshot()
        invalid = session.invalid_identifiers.snapshot()
        lines.append(
            f"Valid Variables/Identifiers (Count: {len(valid)}): {format_listing(valid)}"
        )
        lines.append("")
        lines.append(
            f"Invalid Variables/Identifiers (Count: {len(invalid)}): {format_listing(invalid)}"
        )
        lines.append("")

        lines.append("=========== TOKENS BY CATEGORY ===========")
        lines.append("")
        buckets = session.buckets.snapshot()
        buckets[TokenCategory.IDENTIFIER] = valid
        buckets[TokenCategory.STRING_LITERAL] = session.buckets.quoted_literals()
        for label, category in CATEGORY_SECTIONS:
            items = buckets[category]
            lines.append(f"{label}: {format_listing(items)}")
            lines.append("")

        lines.append("=========== SYMBOL TABLE ===========")
        lines.append(ReportRenderer.print_symbol_table(session.symbol_table.records()))
        lines.append("")
        lines.extend(ReportRenderer.banner("END OF REPORT"))
        return "\n".join(lines) + "\n"
