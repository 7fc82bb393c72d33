"""
Instructor-name recognizer.

In the catalog every course description ends with the instructor line, e.g.

    ... Prerequisite(s): course 1.
    J. Smith

so a name like "J. Smith" (or "J. Smith Jones", "J. Smith-Jones", or several
names joined by commas) is what tells the parser that a course is over.
"""

from __future__ import annotations

from typing import Optional

from slugplan.scanners import (
    char,
    newline,
    one_of,
    optional,
    skip_blanks,
)

# Prose fragments that look like "X. Word" but are not instructors
LOOKALIKES = ("I. Readings", "A. The")

_NAME_DELIMITERS = " -,\n"
_SECOND_NAME_DELIMITERS = " ,\n"


def _capitalized_word(text: str, pos: int, stop_chars: str) -> Optional[int]:
    """
    Upper-case letter, lower-case letter, then lower-case letters up to (not
    including) one of stop_chars. Fails if anything else shows up first.
    """
    if pos >= len(text) or not text[pos].isupper():
        return None
    pos += 1
    if pos >= len(text) or not text[pos].islower():
        return None
    pos += 1
    n = len(text)
    while pos < n:
        c = text[pos]
        if c in stop_chars:
            return pos
        if not c.islower():
            return None
        pos += 1
    return None


def _second_name(text: str, pos: int) -> Optional[int]:
    pos = one_of(text, pos, " -")
    if pos is None:
        return None
    pos = optional(newline(text, pos), pos)
    if text.startswith("Revised", pos):
        return None
    return _capitalized_word(text, pos, _SECOND_NAME_DELIMITERS)


def instructor_name(text: str, pos: int) -> Optional[int]:
    """
    Recognize one instructor name starting at pos.

    After the name comes either a comma (more instructors follow; the comma is
    left for the caller) or trailing spaces and a line break, which are
    consumed. Returns the position after the name or its terminator, or None.
    """
    for fake in LOOKALIKES:
        if text.startswith(fake, pos):
            return None

    if pos >= len(text) or not text[pos].isupper():
        return None
    pos = char(text, pos + 1, ".")
    if pos is None:
        return None

    # one or more whitespace characters between initial and surname
    start = pos
    while pos < len(text) and text[pos].isspace():
        pos += 1
    if pos == start:
        return None

    pos = _capitalized_word(text, pos, _NAME_DELIMITERS)
    if pos is None:
        return None

    pos = optional(_second_name(text, pos), pos)

    if char(text, pos, ",") is not None:
        return pos
    return newline(text, skip_blanks(text, pos))

