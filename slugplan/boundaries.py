"""
Section header & boundary recognizers.

A subject section in the catalog looks like:

    ANTHROPOLOGY
    PROGRAM COURSES                <- both words optional
    Lower-Division Courses         <- course-level header (required)
    1. Introduction ...
    ...
    * Not offered in 2014-15       <- or a "Revised: 06/01/14" footer,
                                      or simply the next subject header

Page breaks inside a section repeat the page number and the subject's section
label; new_page() swallows them.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional, Tuple

from slugplan.model import Subject
from slugplan.scanners import (
    char,
    digits,
    exact_digits,
    first_of,
    literal,
    newline,
    one_of,
    optional,
    skip_blanks,
    skip_whitespace,
)
from slugplan.subjects import all_subjects, header_text, subject_for_header
from slugplan.trie import PrefixTrie

NOT_OFFERED = "* Not offered"


@lru_cache(maxsize=1)
def header_trie() -> PrefixTrie:
    """
    Trie over every subject header. The registry is static, so build it once.
    """
    return PrefixTrie(header_text(s) for s in all_subjects())


def any_subject_header(text: str, pos: int) -> Optional[Tuple[str, int]]:
    return header_trie().match(text, pos)


# ---------------------------------------------------------------------------
# Course-level header
# ---------------------------------------------------------------------------


def _upper_division_caps(text: str, pos: int) -> Optional[int]:
    end = literal(text, pos, "UPPER")
    if end is None:
        return None
    end = one_of(text, end, " -")
    if end is None:
        return None
    return literal(text, end, "DIVISION COURSES")


def course_header(text: str, pos: int) -> Optional[int]:
    """
    "Lower-Division Courses" / "Upper-Division Courses" / "Graduate Courses",
    either Title-Case or ALL-CAPS ("UPPER DIVISION COURSES" is also seen).
    """
    return first_of(
        text,
        pos,
        lambda t, p: literal(t, p, "LOWER-DIVISION COURSES"),
        lambda t, p: literal(t, p, "Lower-Division Courses"),
        _upper_division_caps,
        lambda t, p: literal(t, p, "Upper-Division Courses"),
        lambda t, p: literal(t, p, "GRADUATE COURSES"),
        lambda t, p: literal(t, p, "Graduate Courses"),
    )


# ---------------------------------------------------------------------------
# Section start / end
# ---------------------------------------------------------------------------


def subject_begin(text: str, pos: int) -> Optional[Tuple[Subject, int]]:
    """
    Recognize a subject header followed by its course-level header.

    Returns (subject, position after the course-level header) or None.
    """
    matched = any_subject_header(text, pos)
    if matched is None:
        return None
    header, end = matched

    end = skip_whitespace(text, end)
    end = optional(literal(text, end, "PROGRAM"), end)
    end = skip_whitespace(text, end)
    end = optional(literal(text, end, "COURSES"), end)
    end = skip_whitespace(text, end)
    end = course_header(text, end)
    if end is None:
        return None

    # the trie holds only registry headers
    return subject_for_header(header), end


def revised_footer(text: str, pos: int) -> Optional[int]:
    """
    "Revised: MM/DD/YY" or "Revised: MM/DD/YYYY" (the colon is optional).
    """
    end = literal(text, pos, "Revised")
    if end is None:
        return None
    end = optional(char(text, end, ":"), end)
    end = char(text, end, " ")
    if end is None:
        return None
    for _ in range(2):
        part = exact_digits(text, end, 2)
        if part is None:
            return None
        end = char(text, part[1], "/")
        if end is None:
            return None
    year = exact_digits(text, end, 4) or exact_digits(text, end, 2)
    if year is None:
        return None
    return year[1]


def subject_end(text: str, pos: int) -> Optional[int]:
    """
    End of a subject section.

    Consumes "* Not offered" or a "Revised:" footer. The start of the next
    subject header (or the end of the input) also ends the section but is left
    for the caller to consume.
    """
    end = skip_whitespace(text, pos)
    consumed = first_of(
        text,
        end,
        lambda t, p: literal(t, p, NOT_OFFERED),
        revised_footer,
    )
    if consumed is not None:
        return consumed
    if end >= len(text):
        return end
    if any_subject_header(text, end) is not None:
        return end
    return None


# ---------------------------------------------------------------------------
# Page breaks and per-subject sub-headings
# ---------------------------------------------------------------------------


def new_page(text: str, pos: int, subject: Subject) -> Optional[int]:
    """
    Page break inside a section: optional page number line, then the section
    label, trailing spaces and a line break.
    """
    _, after_number = digits(text, pos, min_count=0)
    end = optional(newline(text, after_number), pos)

    end = literal(text, end, subject.section_label)
    if end is None:
        return None
    return newline(text, skip_blanks(text, end))


def extra_heading(text: str, pos: int, subject: Subject) -> Optional[int]:
    """
    One of the subject's in-section sub-headings (e.g. Art History regions).
    """
    for heading in subject.extra_headings:
        end = literal(text, pos, heading)
        if end is not None:
            return end
    return None
