"""
Codepoint value type.

A Codepoint wraps exactly one Unicode scalar value. Validation happens here,
at construction, so the classification functions only ever see genuine
scalar values.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import AbstractSet, Iterable, Optional, Union

MAX_CODEPOINT = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)


class InvalidCodepointError(ValueError):
    """Raised when a value cannot be interpreted as a single Unicode scalar value."""


@dataclass(frozen=True)
class Codepoint:
    """
    A single Unicode scalar value.

    Example:
        Codepoint("á").is_romance_vowel()  -> True
        Codepoint.from_value(0x79).is_romance_vowel_including({"y"})  -> True

    The type is final: the vowel contract only makes sense for real scalar
    values, so subclasses are refused.
    """
    char: str
    """The codepoint as a one-character string"""

    def __init_subclass__(cls, **kwargs: object) -> None:
        raise TypeError("Codepoint cannot be subclassed")

    def __post_init__(self) -> None:
        if not isinstance(self.char, str):
            raise InvalidCodepointError(f"expected str, got {type(self.char).__name__}")
        if len(self.char) != 1:
            raise InvalidCodepointError(f"expected exactly one codepoint, got {len(self.char)}: {self.char!r}")
        if ord(self.char) in SURROGATE_RANGE:
            raise InvalidCodepointError(f"surrogate U+{ord(self.char):04X} is not a scalar value")

    @classmethod
    def from_value(cls, value: Union[str, int, "Codepoint"]) -> "Codepoint":
        """
        Build a Codepoint from a one-character string, an integer scalar value
        or another Codepoint.

        Raises:
            InvalidCodepointError: for out-of-range integers, surrogates,
                strings that are not exactly one codepoint, or other types
        """
        if isinstance(value, Codepoint):
            return value
        # bool is an int subclass but never a meaningful codepoint
        if isinstance(value, int) and not isinstance(value, bool):
            if not 0 <= value <= MAX_CODEPOINT:
                raise InvalidCodepointError(f"{value:#x} is outside the Unicode codespace")
            if value in SURROGATE_RANGE:
                raise InvalidCodepointError(f"surrogate U+{value:04X} is not a scalar value")
            return cls(chr(value))
        if isinstance(value, str):
            return cls(value)
        raise InvalidCodepointError(f"cannot interpret {type(value).__name__} as a codepoint")

    @property
    def value(self) -> int:
        return ord(self.char)

    @property
    def name(self) -> Optional[str]:
        return unicodedata.name(self.char, None)

    def is_romance_vowel(self) -> bool:
        from .vowels import is_romance_vowel

        return is_romance_vowel(self)

    def is_romance_vowel_including(self, extra_vowels: Iterable[str]) -> bool:
        from .vowels import is_romance_vowel_including

        return is_romance_vowel_including(self, extra_vowels)

    def __str__(self) -> str:
        return self.char

    def __repr__(self) -> str:
        return f"Codepoint(U+{self.value:04X} {self.char!r})"


def as_char(value: Union[str, int, Codepoint]) -> str:
    """Coerce a codepoint-like value to its one-character string."""
    if isinstance(value, str) and len(value) == 1 and ord(value) not in SURROGATE_RANGE:
        return value
    return Codepoint.from_value(value).char


def as_char_set(values: Iterable[Union[str, int, Codepoint]]) -> AbstractSet[str]:
    """Coerce an iterable of codepoint-like values to a fresh frozenset of characters."""
    return frozenset(as_char(v) for v in values)
