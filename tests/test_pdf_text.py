import contextlib
import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from slugplan.pdf_text import extract_text, looks_like_image_only, select_pages

PAGES = [f"page {i} " + "text " * 20 for i in range(6)]


class TestPdfText(unittest.TestCase):
    def test_missing_file_returns_empty_string(self) -> None:
        err = io.StringIO()
        with tempfile.TemporaryDirectory() as d:
            with contextlib.redirect_stderr(err):
                text = extract_text(Path(d) / "missing.pdf")
        self.assertEqual(text, "")
        self.assertIn("[extract]", err.getvalue())

    def test_broken_pdf_returns_empty_string(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "broken.pdf"
            p.write_bytes(b"this is not a pdf")
            with contextlib.redirect_stderr(io.StringIO()):
                self.assertEqual(extract_text(p), "")

    def test_select_pages(self) -> None:
        self.assertEqual(select_pages(PAGES, 3, None), PAGES[3:])
        self.assertEqual(select_pages(PAGES, 1, 2), PAGES[1:3])
        self.assertEqual(select_pages(PAGES, -5, 0), PAGES[:1])

    def test_page_range_is_joined_in_order(self) -> None:
        with mock.patch("slugplan.pdf_text.extract_pages", return_value=PAGES):
            text = extract_text("catalog.pdf", first_page=1, last_page=2)
        self.assertEqual(text, PAGES[1] + "\n" + PAGES[2])

    def test_image_only_heuristic(self) -> None:
        self.assertTrue(looks_like_image_only([]))
        self.assertTrue(looks_like_image_only(["", " ", "x" * 100, "", ""]))
        self.assertFalse(looks_like_image_only(PAGES))

    def test_image_only_pdf_warns(self) -> None:
        err = io.StringIO()
        with mock.patch("slugplan.pdf_text.extract_pages", return_value=["", "", "", "", ""]):
            with contextlib.redirect_stderr(err):
                extract_text("scan.pdf")
        self.assertIn("image-only", err.getvalue())


if __name__ == "__main__":
    unittest.main()
