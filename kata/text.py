"""String exercises: counting, sorting, copying and palindromes."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "LetterCounts",
    "count_letters",
    "sort_characters",
    "copy_string",
    "string_length",
    "is_palindrome_string",
    "is_vowel",
]

_LOWER_VOWELS = frozenset("aeiou")
_VOWELS = frozenset("aeiouAEIOU")


@dataclass(frozen=True)
class LetterCounts:
    """Counts of lowercase vowels, lowercase consonants and spaces."""

    vowels: int = 0
    consonants: int = 0
    spaces: int = 0


def count_letters(line: str) -> LetterCounts:
    """Count lowercase vowels, lowercase consonants and spaces in ``line``.

    Uppercase letters, digits and other characters are not counted.
    """
    vowels = consonants = spaces = 0
    for ch in line:
        if ch in _LOWER_VOWELS:
            vowels += 1
        elif "a" <= ch <= "z":
            consonants += 1
        elif ch == " ":
            spaces += 1
    return LetterCounts(vowels=vowels, consonants=consonants, spaces=spaces)


def sort_characters(text: str) -> str:
    """Characters of ``text`` in ascending code-point order."""
    return "".join(sorted(text))


def copy_string(text: str) -> str:
    """A copy of ``text``."""
    return "".join(text)


def string_length(text: str) -> int:
    """Number of characters in ``text``."""
    return sum(1 for _ in text)


def is_palindrome_string(text: str) -> bool:
    """True if ``text`` reads the same backwards."""
    return text == text[::-1]


def is_vowel(ch: str) -> bool:
    """True if the single character ``ch`` is a vowel of either case."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch in _VOWELS