"""Graphviz diagram of the identifier naming automaton.

`render_grammar_dot(trace=None)` returns a `graphviz.Digraph` (not rendered)
with one node per phase of `identifiers.check_identifier`:

    start -> prefix -> letters -> digits -> at -> accept

plus a `reject` sink. Passing an `IdentifierCheck` as `trace` highlights the
states that candidate reached; its final state is filled green when it is
accepted and red when it is rejected. `write_and_render` writes the file to
disk and needs the Graphviz `dot` binary.
"""

from typing import List, Optional
from graphviz import Digraph
from identifiers import (
    MAX_DIGITS,
    MAX_LETTERS,
    MAX_RUN,
    MIN_DIGITS,
    MIN_LETTERS,
    IdentifierCheck,
)

STATES = ("start", "prefix", "letters", "digits", "at", "accept", "reject")

EDGES = (
    ("start", "prefix", "# @ !"),
    ("start", "letters", "a-z"),
    ("prefix", "letters", "a-z"),
    ("letters", "letters", f"a-z\\n({MIN_LETTERS}-{MAX_LETTERS}, run <= {MAX_RUN})"),
    ("letters", "digits", "0-9"),
    ("digits", "digits", f"0-9\\n({MIN_DIGITS}-{MAX_DIGITS}, run <= {MAX_RUN})"),
    ("digits", "at", "@"),
    ("at", "accept", "r"),
)

HIGHLIGHT = "#ffe9a8"
ACCEPT_FILL = "#c8f7c5"
REJECT_FILL = "#ffc9c9"


def trace_states(check: IdentifierCheck) -> List[str]:
    """States visited by `check`, ending in `accept` or `reject`."""
    states = ["start"]
    if check.prefix:
        states.append("prefix")
    if check.letter_count:
        states.append("letters")
    if check.digit_count:
        states.append("digits")
    if check.has_suffix:
        states.extend(["at", "accept"])
    if not check.valid:
        if states[-1] == "accept":
            states.pop()
        states.append("reject")
    return states


def render_grammar_dot(trace: Optional[IdentifierCheck] = None) -> Digraph:
    """Return a graphviz.Digraph of the naming automaton."""
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="LR")
    if trace is not None:
        dot.attr(label=f"candidate: {trace.text}", labelloc="t")

    visited = trace_states(trace) if trace is not None else []
    final = visited[-1] if visited else None

    for state in STATES:
        attrs = {"shape": "doublecircle" if state == "accept" else "circle"}
        if state == final:
            attrs["style"] = "filled"
            attrs["fillcolor"] = ACCEPT_FILL if state == "accept" else REJECT_FILL
        elif state in visited:
            attrs["style"] = "filled"
            attrs["fillcolor"] = HIGHLIGHT
        elif state == "reject":
            attrs["style"] = "dashed"
        dot.node(state, label=state, **attrs)

    for src, dst, label in EDGES:
        dot.edge(src, dst, label=label)
    dot.edge("start", "reject", label="other", style="dashed")
    dot.edge("accept", "reject", label="any", style="dashed")

    return dot


def write_and_render(
    out_path: str, fmt: str = "svg", trace: Optional[IdentifierCheck] = None
) -> str:
    """Render the automaton to `out_path` (without extension).

    Returns the path of the rendered file. Requires Graphviz installed.
    """
    dot = render_grammar_dot(trace)
    dot.format = fmt
    # render appends the extension itself
    return dot.render(out_path, cleanup=True)
