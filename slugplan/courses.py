"""
Course record parser.

One catalog course reads roughly like:

    110A. Topics in Anthropology: Language and Culture. Description text
    that goes on for a while. Prerequisite(s): course 1, 2; or consent.
    J. Smith, A. Jones

The number comes first, then the name (up to the first period), then free
text in which an optional "Prerequisite(s): " label starts the prerequisite
fragments, and finally the instructor line that ends the course.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from slugplan.boundaries import course_header, extra_heading, new_page
from slugplan.instructors import instructor_name
from slugplan.model import CourseRecord, Subject
from slugplan.scanners import (
    char,
    digits,
    letters,
    literal,
    looking_at,
    optional,
    remove_newlines,
    skip_whitespace,
    take_while,
    whitespace_char,
)

PREREQ_LABEL = "Prerequisite(s): "

# space , ? ! " & ( ) : + - / ' newline en-dash
NAME_PUNCTUATION = " ,?!\"&():+-/'\n–"
FRAGMENT_DELIMITERS = ",;."

# Only positions holding whitespace (a possible course end) or the label
# itself can stop the prerequisite search.
_PREREQ_CANDIDATE = re.compile(r"\s|" + re.escape(PREREQ_LABEL))


# ---------------------------------------------------------------------------
# Course end (instructor line)
# ---------------------------------------------------------------------------


def _the_staff(text: str, pos: int) -> Optional[int]:
    end = literal(text, pos, "The")
    if end is None:
        return None
    return literal(text, skip_whitespace(text, end), "Staff")


def _instructor_entry(text: str, pos: int) -> Optional[Tuple[int, bool]]:
    """
    One entry of the instructor line: whitespace, then a name or "The Staff".

    Returns (end, more) where more is True when a name was cut short by a
    comma; end is then past the comma and another entry must follow.
    """
    end = whitespace_char(text, pos)
    if end is None:
        return None
    end = skip_whitespace(text, end)

    after = instructor_name(text, end)
    if after is not None:
        comma = char(text, after, ",")
        if comma is not None:
            return comma, True
        return after, False

    after = _the_staff(text, end)
    if after is None:
        return None
    return after, False


def course_end(text: str, pos: int) -> Optional[int]:
    """
    Whitespace, then an instructor name or "The Staff", optionally followed by
    ", " and more instructors, then trailing whitespace.

    A name followed by a comma needs another entry after it. A complete entry
    may be followed by a comma; if nothing parses after that comma, the line
    ends at the last complete entry.
    """
    last_complete: Optional[int] = None
    while True:
        entry = _instructor_entry(text, pos)
        if entry is None:
            return last_complete
        end, more = entry
        if more:
            pos = end
            continue

        last_complete = skip_whitespace(text, end)
        comma = char(text, end, ",")
        if comma is None:
            return last_complete
        pos = comma


# ---------------------------------------------------------------------------
# Course pieces
# ---------------------------------------------------------------------------


def course_begin(text: str, pos: int) -> int:
    pos = skip_whitespace(text, pos)
    pos = optional(course_header(text, pos), pos)
    return skip_whitespace(text, pos)


def course_number(text: str, pos: int) -> Optional[Tuple[str, int]]:
    """
    Digits plus an optional letter suffix, terminated by a period: "110A."
    """
    num = digits(text, pos)
    if num is None:
        return None
    suffix, end = letters(text, num[1])
    end = char(text, end, ".")
    if end is None:
        return None
    return num[0] + suffix, end


def _is_name_char(c: str) -> bool:
    return c.isalnum() or c in NAME_PUNCTUATION


def course_name(text: str, pos: int) -> Optional[Tuple[str, int]]:
    """
    Returns (raw name, position right after the terminating period).
    """
    taken = take_while(text, pos, _is_name_char, min_count=1)
    if taken is None:
        return None
    name, end = taken
    end = char(text, end, ".")
    if end is None:
        return None
    return name, end


def _fragment(text: str, pos: int) -> Optional[Tuple[str, int]]:
    start = pos
    n = len(text)
    while True:
        if looking_at(course_end, text, pos):
            return text[start:pos], pos
        if pos >= n:
            return None
        if text[pos] in FRAGMENT_DELIMITERS:
            return text[start:pos], pos + 1
        pos += 1


def _prerequisite_clause(text: str, pos: int) -> Optional[Tuple[List[str], int]]:
    end = literal(text, pos, PREREQ_LABEL)
    if end is None:
        return None

    fragments: List[str] = []
    while not looking_at(course_end, text, end):
        got = _fragment(text, end)
        if got is None:
            return None
        fragment, end = got
        fragments.append(fragment)
    return fragments, end


def course_prerequisites(text: str, pos: int) -> Optional[Tuple[List[str], int]]:
    """
    Scan forward for either the prerequisite label or the end of the course.

    Returns (fragments, position of the course end) or None if the input runs
    out first. A course without the label yields an empty list.
    """
    while True:
        m = _PREREQ_CANDIDATE.search(text, pos)
        if m is None:
            return None
        pos = m.start()

        clause = _prerequisite_clause(text, pos)
        if clause is not None:
            return clause
        if looking_at(course_end, text, pos):
            return [], pos
        pos += 1


# ---------------------------------------------------------------------------
# Whole course
# ---------------------------------------------------------------------------


def _clean(s: str) -> str:
    return remove_newlines(s).strip()


def get_course(text: str, pos: int, subject: Subject) -> Optional[Tuple[CourseRecord, int]]:
    """
    Parse one course of the given subject starting at pos.

    Returns (record, position after the course) or None. A page break or one
    of the subject's sub-headings right after the course is swallowed.
    """
    pos = course_begin(text, pos)

    num = course_number(text, pos)
    if num is None:
        return None
    number, pos = num

    got_name = course_name(text, pos)
    if got_name is None:
        return None
    name, pos = got_name

    got_prereqs = course_prerequisites(text, pos)
    if got_prereqs is None:
        return None
    prereqs, pos = got_prereqs

    end = course_end(text, pos)
    if end is None:
        return None
    pos = optional(new_page(text, end, subject), end)

    if subject.extra_headings:
        pos = optional(extra_heading(text, pos, subject), pos)

    record = CourseRecord(
        number=number,
        name=_clean(name),
        prerequisites=tuple(_clean(p) for p in prereqs),
    )
    return record, pos
