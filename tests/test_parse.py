"""
Tests for the document driver (catalog text -> SubjectMap).

Documented behavior covered here:
- text without subject headers yields an empty map, never an error
- a subject that appears twice keeps only its LAST section (last-write-wins)
- a course that does not parse abandons its whole section
"""

import contextlib
import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from slugplan.model import CourseRecord
from slugplan.parse import get_subject_map, get_subject_map_from_text
from slugplan.subjects import find_subject

ENGLISH = find_subject("ENGL")
PHYSICS = find_subject("PHYS")
ANTH = find_subject("ANTH")

TWO_SUBJECTS = (
    "ENGLISH\nLower-Division Courses\n"
    "1. Composition.\nThe Staff\n"
    "PHYSICS\nUpper-Division Courses\n"
    "101. Mechanics. Prerequisite(s): course 5A.\nJ. Smith\n"
    "Revised: 06/01/14\n"
)


class TestExamples(unittest.TestCase):
    def test_course_with_prerequisites(self) -> None:
        text = (
            "ENGLISH\nLower-Division Courses\n"
            "1. Composition. Prerequisite(s): none, satisfactory score.\n\n  J. Smith\n"
        )
        result = get_subject_map_from_text(text)
        self.assertEqual(
            result,
            {ENGLISH: [CourseRecord("1", "Composition", ("none", "satisfactory score"))]},
        )

    def test_course_taught_by_the_staff(self) -> None:
        text = "ENGLISH\nLower-Division Courses\n1. Composition.  The Staff\n"
        result = get_subject_map_from_text(text)
        self.assertEqual(result, {ENGLISH: [CourseRecord("1", "Composition", ())]})

    def test_no_subject_header(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            self.assertEqual(get_subject_map_from_text("Just some text.\n1. Foo.\nThe Staff\n"), {})
            self.assertEqual(get_subject_map_from_text(""), {})

    def test_many_joint_instructors(self) -> None:
        text = (
            "ENGLISH\nLower-Division Courses\n1. Composition.\n"
            + ", ".join(["J. Smith"] * 600)
            + "\n"
        )
        result = get_subject_map_from_text(text)
        self.assertEqual(result, {ENGLISH: [CourseRecord("1", "Composition", ())]})


class TestDocumentDriver(unittest.TestCase):
    def test_courses_in_source_order(self) -> None:
        text = (
            "Page 3\nIntroduction to the catalog.\n"
            "ANTHROPOLOGY\nPROGRAM COURSES\nLower-Division Courses\n"
            "1. Introduction to Biological Anthropology. Human evolution.\nA. Brown\n"
            "2. Cultural Anthropology. Prerequisite(s): course 1.\nThe Staff\n"
            "Upper-Division Courses\n"
            "110A. Topics in Anthropology. Seminar.\nJ. Smith, A. Brown\n"
            "* Not offered in 2014-15\n"
            "Index\n"
        )
        result = get_subject_map_from_text(text)
        self.assertEqual(list(result), [ANTH])
        self.assertEqual([c.number for c in result[ANTH]], ["1", "2", "110A"])
        self.assertEqual(result[ANTH][1].prerequisites, ("course 1",))

    def test_section_ends_at_next_header(self) -> None:
        result = get_subject_map_from_text(TWO_SUBJECTS)
        self.assertEqual(list(result), [ENGLISH, PHYSICS])
        self.assertEqual(result[ENGLISH], [CourseRecord("1", "Composition", ())])
        self.assertEqual(result[PHYSICS], [CourseRecord("101", "Mechanics", ("course 5A",))])

    def test_duplicate_subject_last_section_wins(self) -> None:
        text = (
            "ENGLISH\nLower-Division Courses\n1. Composition.\nThe Staff\n* Not offered\n"
            "Some filler text.\n"
            "ENGLISH\nLower-Division Courses\n2. Poetry.\nThe Staff\n"
        )
        result = get_subject_map_from_text(text)
        self.assertEqual(result, {ENGLISH: [CourseRecord("2", "Poetry", ())]})

    def test_malformed_course_drops_section(self) -> None:
        text = (
            "ENGLISH\nLower-Division Courses\n1. Composition.\nThe Staff\n"
            "not a course at all\n"
        )
        with contextlib.redirect_stderr(io.StringIO()):
            self.assertEqual(get_subject_map_from_text(text), {})

    def test_page_break_inside_section(self) -> None:
        text = (
            "ENGLISH\nLower-Division Courses\n"
            "1. Composition.\nJ. Smith\n"
            "57\nEnglish \n"
            "2. Poetry. Prerequisite(s): course\n1.\nThe Staff\n"
        )
        result = get_subject_map_from_text(text)
        self.assertEqual([c.name for c in result[ENGLISH]], ["Composition", "Poetry"])
        self.assertEqual(result[ENGLISH][1].prerequisites, ("course1",))

    def test_no_line_breaks_in_output(self) -> None:
        result = get_subject_map_from_text(TWO_SUBJECTS.replace("Mechanics", "Classical\nMechanics"))
        for courses in result.values():
            for course in courses:
                self.assertNotIn("\n", course.name)
                for fragment in course.prerequisites:
                    self.assertNotIn("\n", fragment)
        self.assertEqual(result[PHYSICS][0].name, "ClassicalMechanics")

    def test_parse_is_idempotent(self) -> None:
        self.assertEqual(get_subject_map_from_text(TWO_SUBJECTS), get_subject_map_from_text(TWO_SUBJECTS))

    def test_empty_result_names_the_source(self) -> None:
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            result = get_subject_map_from_text("Index\n", source="catalog.txt")
        self.assertEqual(result, {})
        self.assertIn("catalog.txt", err.getvalue())


class TestFileEntryPoints(unittest.TestCase):
    def test_text_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "catalog.txt"
            p.write_text(TWO_SUBJECTS, encoding="utf-8")
            result = get_subject_map(p)
        self.assertEqual(list(result), [ENGLISH, PHYSICS])

    def test_missing_file_is_empty(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            with contextlib.redirect_stderr(io.StringIO()):
                result = get_subject_map(Path(d) / "missing.txt")
        self.assertEqual(result, {})

    def test_pdf_goes_through_extractor(self) -> None:
        with mock.patch("slugplan.parse.extract_text", return_value=TWO_SUBJECTS) as extract:
            result = get_subject_map("catalog.pdf", first_page=0, last_page=4)
        extract.assert_called_once_with(Path("catalog.pdf"), first_page=0, last_page=4)
        self.assertEqual(list(result), [ENGLISH, PHYSICS])


if __name__ == "__main__":
    unittest.main()
