from __future__ import annotations
from typing import List, Optional
import os

from analyzer import AnalysisSession, LineResult
from identifiers import IdentifierCheck, check_identifier, explain_identifier
from lexer import tokenize_line
from report import ReportRenderer


def lex(line: str) -> List[str]:
    """Tokenize one comment-free line."""
    return tokenize_line(line)


def print_line_result(result: LineResult) -> None:
    lexemes = " ".join(repr(t.lexeme) for t in result.tokens)
    print(f"  {result.line:4}: {lexemes}")
    decl = result.declaration
    if decl is not None:
        print(
            f"        {decl.kind} declaration ({decl.declared_type}): "
            f"valid={decl.valid_names} invalid={decl.invalid_names}"
        )


def analyze_file(
    source_path: str,
    output_path: str,
    *,
    encoding: str = "latin-1",
    print_tokens: bool = False,
) -> AnalysisSession:
    """Analyze `source_path` line by line and write the report to `output_path`.

    The report is rendered and encoded before `output_path` is opened, so a
    source that cannot be read or decoded (`OSError`, `UnicodeError`) leaves
    an existing report untouched.
    """
    session = AnalysisSession()
    with open(source_path, "r", encoding=encoding) as src:
        if print_tokens:
            print(f"Tokens of {source_path}:")
        for raw in src:
            result = session.process_line(raw)
            if print_tokens and result.tokens:
                print_line_result(result)

    report = ReportRenderer.render(session, subtitle=os.path.basename(source_path))
    data = report.encode(encoding)
    with open(output_path, "wb") as out:
        out.write(data)
    return session


def report_identifier(name: str) -> IdentifierCheck:
    """Print the verdict for one candidate name with its reasons."""
    check = check_identifier(name)
    print(f'\nChecking variable: "{name}"')
    print("Valid identifier!" if check.valid else "Invalid identifier!")
    print("Reason:")
    for reason in explain_identifier(check):
        print(f"  - {reason}")
    return check


def interactive_mode() -> None:
    """Run the identifier validation REPL reading names from stdin."""
    print("\n" + "=" * 40)
    print("Variable Declaration Validity Check")
    print("=" * 40)
    print("(type 'quit' to exit)")

    while True:
        try:
            text = input("\nEnter variable/identifier name to validate: ").strip()
            if text.lower() in ("quit", "exit", "q", "n", "no"):
                print("Exiting validation mode.")
                break

            if not text:
                continue

            report_identifier(text)

        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break
        except Exception as e:
            print(f"Unexpected error: {e}")


def render_grammar(path: str, fmt: str, candidate: Optional[str]) -> None:
    from graphviz import CalledProcessError, ExecutableNotFound
    from grammar_viz import render_grammar_dot, write_and_render

    trace = check_identifier(candidate) if candidate else None
    try:
        rendered = write_and_render(path, fmt=fmt, trace=trace)
        print(f"Wrote identifier automaton to {rendered}")
    except (ExecutableNotFound, CalledProcessError):
        # fallback: write dot source
        dot = render_grammar_dot(trace)
        with open(f"{path}.dot", "w", encoding="utf-8") as fh:
            fh.write(dot.source)
        print(f"Wrote DOT to {path}.dot ({fmt} render failed)")


if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(
        description="Lexical analysis of a source file and identifier name validation"
    )
    parser.add_argument(
        "--file", "-f", dest="file", help="Path to source file to analyze"
    )
    parser.add_argument(
        "--output",
        "-o",
        dest="output",
        default="output.txt",
        help="Path to write the analysis report (default: output.txt)",
    )
    parser.add_argument(
        "--encoding",
        dest="encoding",
        default="latin-1",
        help="Encoding of the source file and report (default: latin-1)",
    )
    parser.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start the interactive identifier validator (after analysis, if --file is given)",
    )
    parser.add_argument(
        "--print-tokens",
        dest="print_tokens",
        action="store_true",
        help="Print each line's tokens and declarations",
    )
    parser.add_argument(
        "--viz-grammar",
        dest="viz_grammar",
        help="Path (without extension) to write a Graphviz diagram of the identifier automaton",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--trace-identifier",
        dest="trace_identifier",
        help="Highlight the path this name takes through the automaton diagram",
    )

    args = parser.parse_args()

    if not (args.file or args.interactive or args.viz_grammar):
        parser.print_help()
        sys.exit(0)

    if args.file:
        try:
            session = analyze_file(
                args.file,
                args.output,
                encoding=args.encoding,
                print_tokens=args.print_tokens,
            )
        except (OSError, UnicodeError) as e:
            print(f"Failed to analyze {args.file} into {args.output}: {e}")
            sys.exit(1)

        if session.has_invalid_identifiers:
            print(
                f"Invalid identifiers found in {args.file}. "
                "Please remove or correct them to make the code valid."
            )
        print("\n" + "=" * 30)
        print("Lexical analysis completed.")
        print(f"See '{args.output}' for detailed token categories and symbol table.")
        print("=" * 30)

    if args.viz_grammar:
        render_grammar(args.viz_grammar, args.viz_format, args.trace_identifier)

    if args.interactive:
        interactive_mode()
