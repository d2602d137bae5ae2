from analyzer import AnalysisSession, analyze_text
from lexer import Lexer


def lex(text: str):
    """Return the lexemes of one comment-free line."""
    return Lexer(text).tokenize()


def analyze(*lines: str) -> AnalysisSession:
    """Convenience: run a fresh session over the given source lines."""
    return analyze_text("\n".join(lines))
