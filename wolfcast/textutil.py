"""Small text helpers: integer parsing and formatting, character classes,
C-style comparisons and word sorting."""

from __future__ import annotations

from typing import Iterable, Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def atoi(text: str) -> int:
    """Parse a leading signed decimal integer, skipping control and space
    characters first; return 0 when no digits follow."""
    stripped = text.lstrip("".join(chr(i) for i in range(1, 33)))
    sign = 1
    if stripped.startswith("-"):
        sign = -1
        stripped = stripped[1:]
    elif stripped.startswith("+"):
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not is_digit(ch):
            break
        digits.append(ch)
    if not digits:
        return 0
    return sign * int("".join(digits))


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading '-' when negative."""
    return str(int(n))


def int_len(n: int) -> int:
    """Number of decimal digits in ``n``, ignoring its sign."""
    return len(str(abs(int(n))))


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space to tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def compare_strings(s1: str, s2: str) -> int:
    """Compare two strings character by character.

    Returns the code difference at the first mismatch, treating the end of
    a string as code 0; returns 0 for equal strings.
    """
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    tail1 = ord(s1[len(s2)]) if len(s1) > len(s2) else 0
    tail2 = ord(s2[len(s1)]) if len(s2) > len(s1) else 0
    return tail1 - tail2


def compare_bytes(b1: bytes, b2: bytes, n: int) -> int:
    """Compare at most ``n`` bytes, stopping early at a zero byte.

    Bytes past the end of either sequence count as zero. Returns the
    difference of the first pair that differs or holds a zero, else 0.
    """
    def at(data: bytes, i: int) -> int:
        return data[i] if i < len(data) else 0

    for i in range(n):
        a, b = at(b1, i), at(b2, i)
        if a != b or not a:
            return a - b
    return 0


def contains_char(letter: str, text: str | None) -> bool:
    """True if ``letter`` occurs in ``text``; an empty or NUL letter never does."""
    if not letter or letter == "\0" or not text:
        return False
    return letter in text


def contains_in_order(text: str | None, letters: str | None) -> bool:
    """True if every character of ``letters`` appears in ``text`` in order."""
    if text is None or letters is None:
        return False
    remaining = iter(text)
    return all(ch in remaining for ch in letters)


def sort_words(words: Iterable[str]) -> list[str]:
    """Return the words sorted in ascending character-code order."""
    return sorted(words)


def sort_words_desc(words: Iterable[str]) -> list[str]:
    """Return the words sorted in descending character-code order."""
    return sorted(words, reverse=True)


def prefix_before(text: str, c: str) -> str:
    """Return the part of ``text`` before the first occurrence of ``c``."""
    if not c or c == "\0":
        return text
    return text.split(c, 1)[0]