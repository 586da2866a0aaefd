"""
Romance-language vowel classification.

Deciding whether a grapheme is a "vowel" is language dependent. For the
Romance languages the basic vowels are a, e, i, o, u, but:
- Uppercase versions are also vowels
- Accented versions are also vowels
- "Sometimes y, sometimes w": context decides, so callers may pass extras

A codepoint is decomposed with Unicode Normalization Form KD and only the
first codepoint of the decomposition is tested against the vowel set.
"Á" decomposes to "A" + combining acute and is a vowel. "Æ" has no
decomposition and is not. "Ĳ" decomposes to "I" + "J" and is.

All functions are pure and safe to call from any thread.
"""

from __future__ import annotations

import unicodedata
from typing import AbstractSet, Iterable, Union

from .models import Codepoint, as_char, as_char_set

CodepointLike = Union[str, int, Codepoint]

# Built once at import; never mutated.
BASE_VOWELS: frozenset[str] = frozenset("aeiouAEIOU")


def decompose_starting(c: CodepointLike) -> str:
    """
    Return the first codepoint of the NFKD decomposition of ``c``.

    Examples:
        "á" → "a"
        "Å" → "A"
        "ª" → "a"   (compatibility mapping)
        "x" → "x"
    """
    char = as_char(c)
    decomposed = unicodedata.normalize("NFKD", char)
    if not decomposed:  # pragma: no cover - every codepoint decomposes to at least itself
        raise AssertionError(f"empty NFKD decomposition for U+{ord(char):04X}")
    return decomposed[0]


def is_romance_vowel_with(c: CodepointLike, vowels: AbstractSet[str]) -> bool:
    return decompose_starting(c) in vowels


def is_romance_vowel(c: CodepointLike) -> bool:
    """
    Return True if ``c`` appears to be a vowel in a Romance language.

    The leading codepoint of the NFKD decomposition must be one of
    a, e, i, o, u or their uppercase forms.

    Raises:
        InvalidCodepointError: if ``c`` is not a single Unicode scalar value
    """
    return is_romance_vowel_with(c, BASE_VOWELS)


def is_romance_vowel_including(c: CodepointLike, extra_vowels: Iterable[CodepointLike]) -> bool:
    """
    Behave as is_romance_vowel, but also treat ``extra_vowels`` as vowels.

    Extras are compared against the decomposed codepoint, so list them in
    their base form: "y" matches "ý", while an extra "ý" matches nothing.
    Neither ``extra_vowels`` nor BASE_VOWELS is modified.

    Example:
        is_romance_vowel_including("y", {"y", "Y", "w", "W"})  → True
    """
    vowels = BASE_VOWELS.union(as_char_set(extra_vowels))
    return is_romance_vowel_with(c, vowels)


class RomanceVowelClassifier:
    """
    Vowel test bound to a fixed set of extra vowels.

    The extras are copied at construction, so later changes to the
    caller's collection do not affect the classifier.
    """

    def __init__(self, extra_vowels: Iterable[CodepointLike] = ()) -> None:
        self._extra_vowels = as_char_set(extra_vowels)

    @property
    def extra_vowels(self) -> AbstractSet[str]:
        return self._extra_vowels

    def is_vowel(self, c: CodepointLike) -> bool:
        if not self._extra_vowels:
            return is_romance_vowel(c)
        return is_romance_vowel_including(c, self._extra_vowels)

    __call__ = is_vowel

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RomanceVowelClassifier):
            return NotImplemented
        return self._extra_vowels == other._extra_vowels

    def __hash__(self) -> int:
        return hash(self._extra_vowels)

    def __repr__(self) -> str:
        extras = "".join(sorted(self._extra_vowels))
        return f"RomanceVowelClassifier(extra_vowels={extras!r})"
