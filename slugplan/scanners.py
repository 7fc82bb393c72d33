"""
Primitive scanners shared by all catalog recognizers.

Conventions:
- A scanner is called as scanner(text, pos).
- "Skip" scanners return the new position, or None when they do not match.
- "Take" scanners return (value, new_position), or None.
- A scanner that returns None has consumed nothing. Callers simply keep
  using the old position, so every failed branch backtracks for free.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

Skip = Callable[[str, int], Optional[int]]
Take = Tuple[str, int]


def skip_whitespace(text: str, pos: int) -> int:
    """
    Skip any run of whitespace (including line breaks). Always succeeds.
    """
    n = len(text)
    while pos < n and text[pos].isspace():
        pos += 1
    return pos


def skip_blanks(text: str, pos: int) -> int:
    """
    Skip plain spaces only (not tabs, not line breaks). Always succeeds.
    """
    n = len(text)
    while pos < n and text[pos] == " ":
        pos += 1
    return pos


def whitespace_char(text: str, pos: int) -> Optional[int]:
    if pos < len(text) and text[pos].isspace():
        return pos + 1
    return None


def newline(text: str, pos: int) -> Optional[int]:
    if text.startswith("\n", pos):
        return pos + 1
    return None


def char(text: str, pos: int, c: str) -> Optional[int]:
    if text.startswith(c, pos):
        return pos + 1
    return None


def one_of(text: str, pos: int, chars: str) -> Optional[int]:
    if pos < len(text) and text[pos] in chars:
        return pos + 1
    return None


def literal(text: str, pos: int, s: str) -> Optional[int]:
    """
    Match an exact string. All-or-nothing.
    """
    if text.startswith(s, pos):
        return pos + len(s)
    return None


def take_while(
    text: str,
    pos: int,
    pred: Callable[[str], bool],
    min_count: int = 0,
) -> Optional[Take]:
    """
    Take the longest run of characters satisfying pred (greedy, no backtracking).
    """
    start = pos
    n = len(text)
    while pos < n and pred(text[pos]):
        pos += 1
    if pos - start < min_count:
        return None
    return text[start:pos], pos


def digits(text: str, pos: int, min_count: int = 1) -> Optional[Take]:
    return take_while(text, pos, _is_digit, min_count)


def exact_digits(text: str, pos: int, count: int) -> Optional[Take]:
    end = pos + count
    chunk = text[pos:end]
    if len(chunk) == count and all(_is_digit(c) for c in chunk):
        return chunk, end
    return None


def letters(text: str, pos: int) -> Take:
    start = pos
    n = len(text)
    while pos < n and text[pos].isalpha():
        pos += 1
    return text[start:pos], pos


def first_of(text: str, pos: int, *scanners: Skip) -> Optional[int]:
    """
    Ordered choice: the first scanner that matches wins.
    """
    for scanner in scanners:
        end = scanner(text, pos)
        if end is not None:
            return end
    return None


def optional(end: Optional[int], pos: int) -> int:
    """
    Turn a failed optional element into "matched nothing at pos".
    """
    return pos if end is None else end


def looking_at(scanner: Skip, text: str, pos: int) -> bool:
    """
    Lookahead: does scanner match here? Never consumes.
    """
    return scanner(text, pos) is not None


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def remove_newlines(s: str) -> str:
    return s.replace("\n", "")
