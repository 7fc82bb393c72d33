"""
Central data model definitions used across the project.

This module defines the canonical structure of Subject and CourseRecord objects so that:
- the parser, the storage layer and the CLI share the same field names
- parsed catalog data stays immutable once it leaves the parser
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Subject:
    """
    One catalog discipline (department) from the fixed registry in subjects.py.

    extra_headings lists in-section sub-heading literals that may appear right
    after a course and carry no data (only Art History uses them today).
    """

    key: str
    display_name: str
    prefix: str
    section_label: str
    extra_headings: Tuple[str, ...] = field(default=(), compare=False)


@dataclass(frozen=True)
class CourseRecord:
    """
    Represents one catalog entry as extracted from the document text.
    """

    number: str
    name: str
    prerequisites: Tuple[str, ...] = ()

    def to_dict(self) -> Dict:
        return {
            "number": self.number,
            "name": self.name,
            "prerequisites": list(self.prerequisites),
        }


# Subject -> courses in the order they were encountered (last section wins)
SubjectMap = Dict[Subject, List[CourseRecord]]

