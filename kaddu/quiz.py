"""Question sampling and answer option building."""

import logging
import random

from .config import LANGUAGES, QUESTION_COUNT
from .models import Option, Question
from .utils import collation_key, shuffled

logger = logging.getLogger(__name__)


def sample_questions(catalog, count: int = QUESTION_COUNT,
                     rng: random.Random = None) -> list[Question]:
    """Pick count random entries from the catalog as fresh questions.

    If the catalog is smaller than count, every entry is used and a warning
    is logged; callers read the real size from the returned list.
    """
    entries = list(catalog)
    if len(entries) < count:
        logger.warning(
            f"Catalog has {len(entries)} words, fewer than the {count} questions "
            f"requested; using {len(entries)}"
        )
    return [Question(entry) for entry in shuffled(entries, rng)[:count]]


def deduplicate_options(options: list[Option], target_language: str) -> list[Option]:
    """Collapse options sharing the same word text.

    The first occurrence of a word is kept, unless a later duplicate belongs
    to the target language, in which case it takes the kept slot.
    """
    seen = {}
    result = []
    for option in options:
        if option.word in seen:
            index = seen[option.word]
            if option.language == target_language and result[index].language != target_language:
                result[index] = option
        else:
            seen[option.word] = len(result)
            result.append(option)
    return result


def sort_options(options: list[Option]) -> list[Option]:
    """Sort options by word, ignoring case and accents."""
    return sorted(options, key=lambda option: collation_key(option.word))


def build_options(question: Question, target_language: str,
                  languages=LANGUAGES, rng: random.Random = None) -> list[Option]:
    """Answer buttons for a question: one per distinct word form, sorted.

    The target language is always present exactly once.
    """
    candidates = [Option(lang, question.form(lang)) for lang in languages]
    candidates = shuffled(candidates, rng)
    return sort_options(deduplicate_options(candidates, target_language))
