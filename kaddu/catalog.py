"""Word catalog loading."""

import json
import logging
import os

from .config import LANGUAGES
from .errors import CatalogError
from .models import CatalogEntry

logger = logging.getLogger(__name__)


class Catalog:
    """Read-only sequence of catalog entries."""

    def __init__(self, entries: list[CatalogEntry]):
        self._entries = tuple(entries)

    @property
    def entries(self) -> tuple:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, index):
        return self._entries[index]


def parse_catalog(data: dict) -> Catalog:
    """Build a Catalog from a decoded words document.

    Expected shape: {"words": [{"id", "gloss_fr", "forms": {lang: word}}]}.
    Forms for unknown languages are dropped, missing ones are left absent.
    """
    if not isinstance(data, dict) or 'words' not in data:
        raise CatalogError("Catalog document has no 'words' field")
    words = data['words']
    if not isinstance(words, list) or not words:
        raise CatalogError("Catalog 'words' must be a non-empty list")

    entries = []
    seen_ids = set()
    for position, item in enumerate(words):
        if not isinstance(item, dict):
            raise CatalogError(f"Catalog entry #{position} is not an object")
        item_id = item.get('id')
        gloss = item.get('gloss_fr')
        forms = item.get('forms', {})
        if not item_id or not isinstance(item_id, str):
            raise CatalogError(f"Catalog entry #{position} has no id")
        if gloss is None:
            raise CatalogError(f"Catalog entry {item_id!r} has no gloss_fr")
        if not isinstance(forms, dict):
            raise CatalogError(f"Catalog entry {item_id!r}: forms must be an object")
        if item_id in seen_ids:
            raise CatalogError(f"Duplicate catalog id {item_id!r}")
        seen_ids.add(item_id)

        for lang in LANGUAGES:
            if forms.get(lang) is not None and not isinstance(forms[lang], str):
                raise CatalogError(f"Catalog entry {item_id!r}: {lang} form must be a string")
        kept = {lang: forms[lang] for lang in LANGUAGES if forms.get(lang)}
        missing = [lang for lang in LANGUAGES if lang not in kept]
        if missing:
            logger.debug(f"Entry {item_id} has no form for: {', '.join(missing)}")
        entries.append(CatalogEntry(item_id, str(gloss), kept))

    return Catalog(entries)


def load_catalog(path: str) -> Catalog:
    """Load the catalog from a JSON file. Raises CatalogError on any failure."""
    if not os.path.exists(path):
        raise CatalogError(f"Catalog file not found at {path}")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e

    catalog = parse_catalog(data)
    logger.info(f"Loaded {len(catalog)} words from {path}")
    return catalog
