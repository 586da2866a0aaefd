"""
Core domain layer for is-vowel.

This package contains the pure classification logic with no external
dependencies. Nothing here performs I/O or logs.
"""

from __future__ import annotations

from .models import Codepoint, InvalidCodepointError
from .vowels import (
    BASE_VOWELS,
    RomanceVowelClassifier,
    decompose_starting,
    is_romance_vowel,
    is_romance_vowel_including,
    is_romance_vowel_with,
)

__all__ = [
    "BASE_VOWELS",
    "Codepoint",
    "InvalidCodepointError",
    "RomanceVowelClassifier",
    "decompose_starting",
    "is_romance_vowel",
    "is_romance_vowel_including",
    "is_romance_vowel_with",
]
