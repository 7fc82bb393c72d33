"""
Tests for the instructor-name recognizer and the instructor line that
ends a course (single names, joint instructors, "The Staff").
"""

import unittest

from slugplan.courses import course_end
from slugplan.instructors import instructor_name


def _match(text: str):
    return instructor_name(text, 0)


class TestInstructorName(unittest.TestCase):
    def test_simple_name(self) -> None:
        self.assertEqual(_match("J. Smith\n"), 9)

    def test_trailing_spaces_before_line_break(self) -> None:
        text = "J. Smith   \nnext"
        self.assertEqual(_match(text), text.index("next"))

    def test_double_names(self) -> None:
        self.assertEqual(_match("J. Smith-Jones\n"), 15)
        self.assertEqual(_match("J. Smith Jones\n"), 15)

    def test_name_must_end_with_line_break_or_comma(self) -> None:
        self.assertIsNone(_match("J. Smith"))
        self.assertIsNone(_match("J. Smith is teaching\n"))

    def test_comma_is_left_for_the_caller(self) -> None:
        self.assertEqual(_match("J. Smith, A. Jones\n"), 8)

    def test_revised_is_not_a_second_name(self) -> None:
        self.assertIsNone(_match("J. Smith Revised\n"))

    def test_lookalikes_rejected(self) -> None:
        self.assertIsNone(_match("I. Readings\n"))
        self.assertIsNone(_match("A. The\n"))

    def test_requires_capitalized_surname(self) -> None:
        self.assertIsNone(_match("j. smith\n"))
        self.assertIsNone(_match("J. smith\n"))
        self.assertIsNone(_match("J. McDonald\n"))


class TestInstructorLine(unittest.TestCase):
    def test_joint_instructors(self) -> None:
        text = "\nJ. Smith, A. Jones\n"
        self.assertEqual(course_end(text, 0), len(text))
        text = "\nJ. Smith, The Staff\n"
        self.assertEqual(course_end(text, 0), len(text))

    def test_name_before_comma_needs_another_instructor(self) -> None:
        self.assertIsNone(course_end("\nJ. Smith, nobody\n", 0))

    def test_staff_before_comma_ends_line_without_it(self) -> None:
        self.assertEqual(course_end("\nThe Staff, nobody\n", 0), 10)
        # a broken chain falls back to the last complete entry
        text = "\nThe Staff, J. Smith, nobody\n"
        self.assertEqual(course_end(text, 0), text.index(","))

    def test_long_list_of_joint_instructors(self) -> None:
        text = "\n" + ", ".join(["J. Smith"] * 2000) + "\n"
        self.assertEqual(course_end(text, 0), len(text))


if __name__ == "__main__":
    unittest.main()
