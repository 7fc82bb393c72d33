# PDF text extraction for catalog files

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

from pypdf import PdfReader
from pypdf.errors import PyPdfError

# The first three pages of a catalog are cover, contents and introduction
DEFAULT_FIRST_PAGE = 3


def extract_pages(pdf_path: str | Path) -> List[str]:
    """
    Extract text per page using pypdf.

    Notes:
    - Returns empty strings for image-only pages (scans).
    - Raises on unreadable files; extract_text() is the tolerant wrapper.
    """
    reader = PdfReader(str(pdf_path))
    return [page.extract_text() or "" for page in reader.pages]


def looks_like_image_only(pages_text: List[str], min_chars_per_page: int = 40) -> bool:
    """
    Heuristic: if >=80% pages have fewer than min_chars_per_page characters, treat as image-only.
    """
    if not pages_text:
        return True
    low = sum(1 for t in pages_text if len(t.strip()) < min_chars_per_page)
    return (low / max(len(pages_text), 1)) >= 0.8


def select_pages(pages_text: List[str], first_page: int, last_page: Optional[int]) -> List[str]:
    """
    Pages first_page .. last_page (0-based, inclusive). None means up to the last page.
    """
    first = max(first_page, 0)
    if last_page is None:
        return pages_text[first:]
    return pages_text[first:last_page + 1]


def extract_text(
    pdf_path: str | Path,
    first_page: int = DEFAULT_FIRST_PAGE,
    last_page: Optional[int] = None,
) -> str:
    """
    Return the visible text of a page range as one string, pages joined by
    line breaks in reading order.

    Never raises for a bad PDF: the error is printed and "" is returned.
    """
    try:
        pages = extract_pages(pdf_path)
    except (OSError, PyPdfError, ValueError) as e:
        print(f"[extract] failed to read {pdf_path}: {e}", file=sys.stderr)
        return ""

    selected = select_pages(pages, first_page, last_page)
    if selected and looks_like_image_only(selected):
        print(
            f"[extract] warning: {pdf_path} looks image-only (no text layer); "
            "run it through OCR first",
            file=sys.stderr,
        )
    return "\n".join(selected)
