"""Identifier naming grammar.

A declared name is valid when it is, in order and with nothing else around:

- an optional single leading `#`, `@` or `!`,
- 4 to 7 lowercase ASCII letters, no letter repeated three times in a row,
- 2 to 4 ASCII digits, no digit repeated three times in a row,
- the literal suffix `@r`.

Examples: `agency12@r`, `#tokyo23@r`, `!abba1212@r` are valid;
`agencyzz12@r` (8 letters), `aaab12@r` (run of three), `abcd12@r_x`
(trailing text) are not.

The check is a fixed-order automaton (prefix, letters, digits, suffix). Each
phase consumes the maximal run of its own character class and the next phase
starts where it stopped; there is no backtracking between phases.

`check_identifier` returns an `IdentifierCheck` breakdown that the
interactive validator uses to explain a verdict; `is_valid_identifier` is the
plain predicate used during file analysis.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
from tokens import IDENTIFIER_PREFIX_CHARS, is_digit, is_lowercase

MIN_LETTERS, MAX_LETTERS = 4, 7
MIN_DIGITS, MAX_DIGITS = 2, 4
MAX_RUN = 2
SUFFIX = "@r"

MIN_LENGTH = MIN_LETTERS + MIN_DIGITS + len(SUFFIX)
MAX_LENGTH = 1 + MAX_LETTERS + MAX_DIGITS + len(SUFFIX)


@dataclass(frozen=True)
class IdentifierCheck:
    """Phase-by-phase breakdown of one candidate name."""

    text: str
    prefix: Optional[str]
    letter_count: int
    letters_run_ok: bool
    digit_count: int
    digits_run_ok: bool
    has_suffix: bool
    trailing: str = ""

    @property
    def letters_ok(self) -> bool:
        return MIN_LETTERS <= self.letter_count <= MAX_LETTERS and self.letters_run_ok

    @property
    def digits_ok(self) -> bool:
        return MIN_DIGITS <= self.digit_count <= MAX_DIGITS and self.digits_run_ok

    @property
    def length_ok(self) -> bool:
        return MIN_LENGTH <= len(self.text) <= MAX_LENGTH

    @property
    def valid(self) -> bool:
        return (
            self.length_ok
            and self.letters_ok
            and self.digits_ok
            and self.has_suffix
            and not self.trailing
        )


def _scan_run(text: str, pos: int, accept: Callable[[str], bool]) -> Tuple[int, int, bool]:
    """Consume a maximal run from `pos`.

    Returns the end position, the number of characters consumed and whether
    no character repeated more than `MAX_RUN` times in a row.
    """
    count = 0
    run = 0
    prev = None
    run_ok = True
    while pos < len(text) and accept(text[pos]):
        ch = text[pos]
        run = run + 1 if ch == prev else 1
        if run > MAX_RUN:
            run_ok = False
        prev = ch
        count += 1
        pos += 1
    return pos, count, run_ok


def check_identifier(text: str) -> IdentifierCheck:
    """Run every phase of the automaton over `text` and record what it saw."""
    pos = 0
    prefix = None
    if text and text[0] in IDENTIFIER_PREFIX_CHARS:
        prefix = text[0]
        pos = 1

    pos, letter_count, letters_run_ok = _scan_run(text, pos, is_lowercase)
    pos, digit_count, digits_run_ok = _scan_run(text, pos, is_digit)

    has_suffix = text.startswith(SUFFIX, pos)
    trailing = text[pos + len(SUFFIX) :] if has_suffix else ""

    return IdentifierCheck(
        text=text,
        prefix=prefix,
        letter_count=letter_count,
        letters_run_ok=letters_run_ok,
        digit_count=digit_count,
        digits_run_ok=digits_run_ok,
        has_suffix=has_suffix,
        trailing=trailing,
    )


def is_valid_identifier(text: str) -> bool:
    if not MIN_LENGTH <= len(text) <= MAX_LENGTH:
        return False
    return check_identifier(text).valid


def explain_identifier(check: IdentifierCheck) -> List[str]:
    """Human-readable reasons behind the verdict in `check`."""
    if check.valid:
        if check.prefix:
            prefix_line = f"Optional leading character (#, @, !): Present ({check.prefix})"
        else:
            prefix_line = "Optional leading character (#, @, !): Not present"
        return [
            prefix_line,
            f"Lowercase letters (a-z) count: {check.letter_count} "
            f"(required {MIN_LETTERS}-{MAX_LETTERS})",
            "No more than two consecutive same letters: Yes",
            f"Digits (0-9) count: {check.digit_count} "
            f"(required {MIN_DIGITS}-{MAX_DIGITS})",
            "No more than two consecutive same digits: Yes",
            f'Ends with "{SUFFIX}": Yes',
        ]

    reasons = []
    if not MIN_LETTERS <= check.letter_count <= MAX_LETTERS:
        reasons.append(
            f"Lowercase letters count not in {MIN_LETTERS} to {MAX_LETTERS} "
            f"(found {check.letter_count})"
        )
    if not check.letters_run_ok:
        reasons.append("More than two consecutive same letters found")
    if not MIN_DIGITS <= check.digit_count <= MAX_DIGITS:
        reasons.append(
            f"Digits count not in {MIN_DIGITS} to {MAX_DIGITS} "
            f"(found {check.digit_count})"
        )
    if not check.digits_run_ok:
        reasons.append("More than two consecutive same digits found")
    if not check.has_suffix:
        reasons.append(f'Does not end with "{SUFFIX}"')
    if check.trailing:
        reasons.append(f'Unexpected characters after "{SUFFIX}": "{check.trailing}"')
    if check.prefix is None and not (check.text and is_lowercase(check.text[0])):
        reasons.append(
            "Must start with optional '#', '@', '!' followed by lowercase letters"
        )
    return reasons
