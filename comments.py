"""Comment stripping for line-by-line analysis.

`strip_comments(line, state)` removes `/* ... */` block comments and `//`
line comments from one physical line. Whether the previous line left a block
comment open is carried in a `CommentState` that the caller threads from one
line to the next, so each call is a pure function of its inputs.

Block comments are handled before line comments, and both searches are plain
substring searches (quotes are not respected). Two consequences follow:

- `a // note /* x` keeps `a` but leaves the state inside a block comment.
- `a /* b */ c` keeps only `a`: the closing `*/` is only searched for on the
  following lines.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

BLOCK_OPEN = "/*"
BLOCK_CLOSE = "*/"
LINE_COMMENT = "//"


@dataclass(frozen=True)
class CommentState:
    inside_block: bool = False


OUTSIDE = CommentState(False)
INSIDE = CommentState(True)


def strip_comments(line: str, state: CommentState = OUTSIDE) -> Tuple[str, CommentState]:
    """Return the comment-free part of `line` and the state for the next line."""
    if state.inside_block:
        end = line.find(BLOCK_CLOSE)
        if end == -1:
            return "", INSIDE
        line = line[end + len(BLOCK_CLOSE) :]
        state = OUTSIDE

    start = line.find(BLOCK_OPEN)
    if start != -1:
        line = line[:start]
        state = INSIDE

    comment = line.find(LINE_COMMENT)
    if comment != -1:
        line = line[:comment]

    return line, state
