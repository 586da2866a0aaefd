"Romance-language vowel test for single Unicode codepoints."

from importlib import metadata

from .core.models import Codepoint, InvalidCodepointError
from .core.vowels import (
    BASE_VOWELS,
    RomanceVowelClassifier,
    is_romance_vowel,
    is_romance_vowel_including,
)

__all__ = [
    "BASE_VOWELS",
    "Codepoint",
    "InvalidCodepointError",
    "RomanceVowelClassifier",
    "__version__",
    "is_romance_vowel",
    "is_romance_vowel_including",
]


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return metadata.version("is-vowel")
        except metadata.PackageNotFoundError:  # pragma: no cover - during editable dev installs
            return "0.0.0"
    raise AttributeError(name)
