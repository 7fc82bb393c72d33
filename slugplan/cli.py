"""
CLI (Command Line Interface).

This module provides the terminal commands, e.g.:

    slugplan fetch <index_url>
    slugplan parse <catalog.pdf>
    slugplan courses [--subject ANTH]
    slugplan show <course_id>
    slugplan subjects

Note:
- Parsing logic lives in slugplan/parse.py, storage in slugplan/storage.py
- Listings are rendered as rich tables; everything else prints plain text
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

import requests
from rich import box
from rich.console import Console
from rich.table import Table

from slugplan.parse import parse_catalog
from slugplan.pdf_text import DEFAULT_FIRST_PAGE
from slugplan.scrape import download_catalogs
from slugplan.storage import get_course, load_courses
from slugplan.subjects import all_subjects, find_subject

console = Console()


def _prereq_text(course: dict[str, Any]) -> str:
    prereqs = course.get("prerequisites", [])
    if not isinstance(prereqs, list) or not prereqs:
        return "-"
    return "; ".join(str(p) for p in prereqs if str(p).strip()) or "-"


def _cmd_fetch(args: argparse.Namespace) -> int:
    """
    Download all catalog PDFs linked from an index page.
    """
    url = (args.index_url or "").strip()
    if not url:
        print("Please provide an index URL.")
        return 1

    try:
        paths = download_catalogs(url, raw_dir=args.raw_dir, refresh=args.refresh, sleep_seconds=args.sleep)
    except requests.RequestException as e:
        print(f"[fetch] {e}")
        return 1

    print(f"Cached {len(paths)} catalog files.")
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    """
    Parse one catalog file and store its courses.
    """
    path = Path(args.file)
    if not path.exists():
        print(f"File not found: {path}")
        return 1

    subject_map, ids = parse_catalog(
        path,
        out_path=args.out,
        first_page=args.first_page,
        last_page=args.last_page,
        dry_run=args.dry_run,
    )

    if not subject_map:
        print("No subjects found.")
        return 0

    if not args.dry_run:
        print(f"Stored {len(ids)} courses.")
    return 0


def _cmd_courses(args: argparse.Namespace) -> int:
    """
    List stored courses, ordered by subject then number.
    """
    courses = load_courses(args.db)

    if args.subject:
        subject = find_subject(args.subject)
        if subject is None:
            print(f"Unknown subject: {args.subject}")
            return 1
        courses = [c for c in courses if c.get("prefix") == subject.prefix]

    if not courses:
        print("No courses stored. Run 'slugplan parse <catalog>' first.")
        return 0

    table = Table(title=f"Courses ({len(courses)})", box=box.SIMPLE_HEAVY)
    table.add_column("ID", style="bold")
    table.add_column("Subject")
    table.add_column("Name")
    table.add_column("Prerequisites", overflow="fold")
    for c in courses:
        table.add_row(
            str(c.get("course_id", "")),
            str(c.get("subject", "")),
            str(c.get("name", "") or "(no name)"),
            _prereq_text(c),
        )
    console.print(table)
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    """
    Print one stored course.
    """
    cid = (args.course_id or "").strip()
    if not cid:
        print("Please provide a course_id.")
        return 1

    course = get_course(cid, args.db)
    if course is None:
        print(f"Unknown course: {cid.upper()}")
        return 1

    print(f"{course.get('course_id')} | {course.get('subject')} {course.get('number')}")
    print(f"  Name         : {course.get('name')}")
    print(f"  Prerequisites: {_prereq_text(course)}")
    return 0


def _cmd_subjects(args: argparse.Namespace) -> int:
    """
    List the subject registry.
    """
    table = Table(title="Subjects", box=box.SIMPLE_HEAVY)
    table.add_column("Prefix", style="bold")
    table.add_column("Name")
    table.add_column("Section label")
    for s in all_subjects():
        table.add_row(s.prefix, s.display_name, s.section_label)
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="slugplan", description="SlugPlan course catalog CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    p_fetch = sub.add_parser("fetch", help="Download catalog PDFs from an index page")
    p_fetch.add_argument("index_url", type=str, help="Page that links the catalog PDFs")
    p_fetch.add_argument("--refresh", action="store_true", help="Re-fetch existing files")
    p_fetch.add_argument("--sleep", type=float, default=0.2, help="Sleep seconds between requests")
    p_fetch.add_argument("--raw-dir", type=Path, default=None, help="Download directory")

    p_parse = sub.add_parser("parse", help="Parse a catalog .pdf/.txt and store its courses")
    p_parse.add_argument("file", type=str, help="Catalog file")
    p_parse.add_argument("--first-page", type=int, default=DEFAULT_FIRST_PAGE, help="First PDF page (0-based)")
    p_parse.add_argument("--last-page", type=int, default=None, help="Last PDF page (0-based, inclusive)")
    p_parse.add_argument("--out", type=Path, default=None, help="Output courses.json")
    p_parse.add_argument("--dry-run", action="store_true", help="Parse only, do not store")

    p_courses = sub.add_parser("courses", help="Browse stored courses")
    p_courses.add_argument("--subject", type=str, default=None, help="Filter by prefix or subject name")
    p_courses.add_argument("--db", type=Path, default=None, help="courses.json to read")

    p_show = sub.add_parser("show", help="Show one stored course")
    p_show.add_argument("course_id", type=str, help="Course ID (e.g. ANTH__110A)")
    p_show.add_argument("--db", type=Path, default=None, help="courses.json to read")

    sub.add_parser("subjects", help="List known subjects")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "fetch":
        raise SystemExit(_cmd_fetch(args))
    if args.command == "parse":
        raise SystemExit(_cmd_parse(args))
    if args.command == "courses":
        raise SystemExit(_cmd_courses(args))
    if args.command == "show":
        raise SystemExit(_cmd_show(args))
    if args.command == "subjects":
        raise SystemExit(_cmd_subjects(args))

    raise SystemExit(2)
