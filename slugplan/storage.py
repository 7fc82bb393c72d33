"""
Persistent storage for parsed catalog courses.

This module manages the file:

    data/processed/courses.json

Each stored record is one course:

    {"course_id": "ANTH__110A", "subject": "Anthropology", "prefix": "ANTH",
     "number": "110A", "name": "...", "prerequisites": ["...", ...]}

Re-parsing a catalog replaces records with the same course_id, so the file
can be rebuilt from several catalog files one after another.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from slugplan.model import SubjectMap


def _default_courses_path() -> Path:
    """
    Return the default path of courses.json inside the package.

    Using a function instead of a constant makes testing easier,
    because tests can override the path.
    """
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "processed" / "courses.json"


def make_course_id(prefix: str, number: str) -> str:
    return f"{prefix.strip().upper()}__{number.strip().upper()}"


def _number_key(number: str) -> tuple[int, str]:
    # "9" < "10" < "10A" < "110"
    m = re.match(r"(\d+)(.*)", number)
    if not m:
        return (0, number)
    return (int(m.group(1)), m.group(2))


def _sort_key(record: dict[str, Any]) -> tuple[str, tuple[int, str]]:
    return (str(record.get("subject", "")), _number_key(str(record.get("number", ""))))


def load_courses(path: str | Path | None = None) -> list[dict[str, Any]]:
    """
    Load stored course records.

    Returns an empty list if the file does not exist or is invalid,
    so callers never crash on a fresh checkout.
    """
    courses_path = Path(path) if path is not None else _default_courses_path()

    # First run: nothing parsed yet
    if not courses_path.exists():
        return []

    try:
        data = json.loads(courses_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError):
        return []

    records = data.get("courses", []) if isinstance(data, dict) else []
    if not isinstance(records, list):
        return []
    return [r for r in records if isinstance(r, dict) and r.get("course_id")]


def get_course(course_id: str, path: str | Path | None = None) -> dict[str, Any] | None:
    """
    Look up one stored course by id (case-insensitive).
    """
    cid = course_id.strip().upper()
    for record in load_courses(path):
        if str(record.get("course_id", "")).upper() == cid:
            return record
    return None


def store_subject_map(subject_map: SubjectMap, path: str | Path | None = None) -> list[str]:
    """
    Store every course of subject_map and return one course_id per course,
    subjects first, then courses, in SubjectMap order.

    Creates parent directories if needed.
    """
    courses_path = Path(path) if path is not None else _default_courses_path()
    courses_path.parent.mkdir(parents=True, exist_ok=True)

    by_id: dict[str, dict[str, Any]] = {r["course_id"]: r for r in load_courses(courses_path)}

    ids: list[str] = []
    for subject, courses in subject_map.items():
        for course in courses:
            cid = make_course_id(subject.prefix, course.number)
            record = {"course_id": cid, "subject": subject.display_name, "prefix": subject.prefix}
            record.update(course.to_dict())
            by_id[cid] = record
            ids.append(cid)

    payload = {"courses": sorted(by_id.values(), key=_sort_key)}
    courses_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return ids
