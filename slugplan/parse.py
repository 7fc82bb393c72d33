"""
Parsing (catalog text -> SubjectMap).

- Reads catalog text (a .txt file, or the text layer of a .pdf)
- Finds every subject section and parses its courses
- Writes the result to data/processed/courses.json (see storage.py)

Important rules (DO NOT CHANGE):
- Unparseable text is skipped one character at a time, never an error
- A subject that appears twice keeps only its LAST section's courses
"""

from __future__ import annotations

import sys

from pathlib import Path

from typing import Dict, List, Optional, Tuple

import argparse

from slugplan.boundaries import header_trie, subject_begin, subject_end
from slugplan.courses import get_course
from slugplan.model import CourseRecord, Subject, SubjectMap
from slugplan.pdf_text import DEFAULT_FIRST_PAGE, extract_text
from slugplan.storage import store_subject_map
from slugplan.subjects import all_subjects

__all__ = [
    "get_subject_map",
    "get_subject_map_from_text",
    "parse_catalog",
    "read_catalog_text",
]


# ---------------------------------------------------------------------------
# Section collection (CORE LOGIC)
# ---------------------------------------------------------------------------


def _collect_courses(
    text: str,
    pos: int,
    subject: Subject,
) -> Optional[Tuple[List[CourseRecord], int]]:
    """
    Parse courses until the section ends.

    The end marker is checked before every course. A course that does not
    parse abandons the whole section (the caller then moves on by one char).
    """
    courses: List[CourseRecord] = []
    while True:
        end = subject_end(text, pos)
        if end is not None:
            return courses, end

        got = get_course(text, pos, subject)
        if got is None:
            return None
        course, pos = got
        courses.append(course)


def _next_section(text: str, pos: int) -> Optional[Tuple[Subject, List[CourseRecord], int]]:
    begin = subject_begin(text, pos)
    if begin is None:
        return None
    subject, pos = begin

    collected = _collect_courses(text, pos, subject)
    if collected is None:
        return None
    courses, pos = collected
    return subject, courses, pos


def _scan_document(text: str) -> Dict[Subject, List[CourseRecord]]:
    found: Dict[Subject, List[CourseRecord]] = {}

    trie = header_trie()
    starts = trie.first_chars()
    anywhere = trie.matches_empty()

    pos = 0
    n = len(text)
    while pos < n:
        # positions that cannot start a header are skipped without trying
        if anywhere or text[pos] in starts:
            section = _next_section(text, pos)
            if section is not None:
                subject, courses, end = section
                # last section wins
                found[subject] = courses
                if end > pos:
                    pos = end
                    continue
        pos += 1

    return found


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_subject_map_from_text(text: str, source: str = "<text>") -> SubjectMap:
    """
    Parse already-extracted catalog text into a SubjectMap.

    source is only used to label diagnostics. Never raises for bad input:
    text that does not parse is skipped, so the worst case is an empty map.
    """
    found = _scan_document(text)
    if not found:
        print(f"[parse] {source}: no subject sections found", file=sys.stderr)

    # same traversal order as the registry
    return {s: found[s] for s in all_subjects() if s in found}


def read_catalog_text(
    path: str | Path,
    first_page: int = DEFAULT_FIRST_PAGE,
    last_page: Optional[int] = None,
) -> str:
    """
    Return the catalog text behind path: PDFs go through the text extractor,
    anything else is read as UTF-8 text. Returns "" if the file cannot be read.
    """
    p = Path(path)
    if p.suffix.lower() == ".pdf":
        return extract_text(p, first_page=first_page, last_page=last_page)

    try:
        return p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"[parse] cannot read {p}: {e}", file=sys.stderr)
        return ""


def get_subject_map(
    path: str | Path,
    first_page: int = DEFAULT_FIRST_PAGE,
    last_page: Optional[int] = None,
) -> SubjectMap:
    """
    Read and parse one catalog file. The file name labels diagnostics.
    """
    text = read_catalog_text(path, first_page=first_page, last_page=last_page)
    return get_subject_map_from_text(text, source=Path(path).name)


def parse_catalog(
    path: str | Path,
    out_path: str | Path | None = None,
    first_page: int = DEFAULT_FIRST_PAGE,
    last_page: Optional[int] = None,
    dry_run: bool = False,
) -> Tuple[SubjectMap, List[str]]:
    """
    Parse one catalog file and store its courses.

    Returns the SubjectMap and the stored course ids (empty on dry_run).
    """
    subject_map = get_subject_map(path, first_page=first_page, last_page=last_page)

    print("SOURCE  :", Path(path).resolve())
    print("SUBJECTS:", len(subject_map))
    for subject, courses in subject_map.items():
        print(f"  {subject.prefix:<5} {subject.display_name}: {len(courses)} courses")

    if dry_run:
        return subject_map, []

    ids = store_subject_map(subject_map, out_path)
    return subject_map, ids


# ---------------------------------------------------------------------------
# CLI connection
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    # Argument parser for CLI usage
    p = argparse.ArgumentParser(
        prog="slugplan.parse",
        description="Parse a course catalog (PDF or text) into JSON"
    )

    p.add_argument("file", type=Path, help="Catalog .pdf or .txt file")

    # First page to read from a PDF (0-based)
    p.add_argument("--first-page", type=int, default=DEFAULT_FIRST_PAGE)

    # Last page to read from a PDF (0-based, inclusive; default: last page)
    p.add_argument("--last-page", type=int, default=None)

    # Optional output file
    p.add_argument("--out", type=Path, default=None)

    p.add_argument("--dry-run", action="store_true", help="Parse only, do not store")

    return p


def main(argv: list[str] | None = None) -> None:
    # Parse CLI arguments
    args = build_parser().parse_args(argv)

    _, ids = parse_catalog(
        args.file,
        out_path=args.out,
        first_page=args.first_page,
        last_page=args.last_page,
        dry_run=args.dry_run,
    )

    if not args.dry_run:
        print(f"Parsing finished. {len(ids)} courses stored.")


# Entry point for CLI execution
if __name__ == "__main__":
    main()
