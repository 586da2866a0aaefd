"""
Optional settings for is-vowel.

The classification core never reads these settings. They exist for callers
that want their extra vowels and pinned Unicode version in a YAML file.
"""

from __future__ import annotations

import logging
import unicodedata
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .core.models import Codepoint
from .core.vowels import RomanceVowelClassifier

logger = logging.getLogger(__name__)

CONFIG_NAMES = ("is-vowel.yaml", "is-vowel.yml")


class ConfigError(Exception):
    """Raised when settings cannot be loaded or contradict the running interpreter."""


def normalize_unicode_version(value: str) -> str:
    """
    Expand a Unicode version to major.minor.micro form.

    "14" and "14.0" both become "14.0.0", matching unicodedata.unidata_version.
    """
    parts = value.split(".")
    if len(parts) > 3 or not all(p.isdigit() for p in parts):
        raise ValueError(f"invalid Unicode version: {value!r}")
    numbers = [int(p) for p in parts] + [0] * (3 - len(parts))
    return ".".join(str(n) for n in numbers)


class VowelSettings(BaseModel):
    extra_vowels: List[str] = Field(default_factory=list)
    unicode_version: Optional[str] = None
    strict_unicode_version: bool = False

    @field_validator("extra_vowels")
    @classmethod
    def _single_codepoints(cls, values: List[str]) -> List[str]:
        # InvalidCodepointError is a ValueError, which pydantic reports per item
        return [Codepoint(v).char for v in values]

    @field_validator("unicode_version", mode="before")
    @classmethod
    def _version_as_text(cls, value: object) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        if not text:
            return None
        return normalize_unicode_version(text)

    def build_classifier(self) -> RomanceVowelClassifier:
        return RomanceVowelClassifier(self.extra_vowels)


class Settings(BaseModel):
    vowels: VowelSettings = VowelSettings()

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigError(f"{path}: expected a mapping at the top level, got {type(raw).__name__}")
        settings = cls.model_validate(raw)
        logger.debug("Loaded settings from %s", path)
        check_unicode_version(settings)
        return settings


def check_unicode_version(settings: Settings) -> bool:
    """
    Compare the pinned Unicode version with the interpreter's UCD.

    Decomposition tables change between Unicode releases, so a pinned
    version documents which tables the configured extras were checked
    against. Returns True when no pin is set or the versions agree.
    """
    pinned = settings.vowels.unicode_version
    if pinned is None:
        return True
    actual = unicodedata.unidata_version
    if pinned == normalize_unicode_version(actual):
        return True
    message = f"Unicode version mismatch: settings pin {pinned}, interpreter provides {actual}"
    if settings.vowels.strict_unicode_version:
        raise ConfigError(message)
    logger.warning(message)
    return False


def find_config(explicit_path: Optional[Path]) -> Path:
    if explicit_path:
        return explicit_path
    cwd = Path.cwd()
    for candidate in (cwd / name for name in CONFIG_NAMES):
        if candidate.exists():
            return candidate
    raise FileNotFoundError("Could not find is-vowel.yaml - pass a path explicitly.")
