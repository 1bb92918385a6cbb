"""Utility functions for kaddu application."""

import random
import unicodedata

from pyuca import Collator

from .config import LANGUAGES, LANGUAGE_DISPLAY_NAMES
from .errors import UnsupportedLanguage

_collator = None


def shuffled(items, rng: random.Random = None) -> list:
    """Return a uniformly random permutation of items (Fisher-Yates)."""
    result = list(items)
    (rng or random).shuffle(result)
    return result


def fold(text: str) -> str:
    """Drop diacritics and case: "École" -> "ecole"."""
    decomposed = unicodedata.normalize('NFD', text)
    stripped = ''.join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()


def collation_key(text: str) -> tuple:
    """Sort key that ignores case and diacritics, like a 'base' collator.

    Letters without a decomposition keep their own place in the Unicode
    collation order: ŋ sorts after n, ɓ after b, ɗ after d.
    """
    global _collator
    if _collator is None:
        # Loads the bundled allkeys table on first use
        _collator = Collator()
    return _collator.sort_key(fold(text))


def display_language_name(language: str) -> str:
    """Human readable name for a language code."""
    code = language.lower()
    if code in LANGUAGE_DISPLAY_NAMES:
        return LANGUAGE_DISPLAY_NAMES[code]
    return code[:1].upper() + code[1:]


def require_language(language: str) -> str:
    """Return language if supported, raise UnsupportedLanguage otherwise."""
    if language not in LANGUAGES:
        raise UnsupportedLanguage(language)
    return language
