"""Domain models for kaddu application."""

import enum
from types import MappingProxyType

from .config import IMAGE_PATH, PRONUNCIATION_PATH


class GameState(enum.Enum):
    """Screens of a quiz session."""
    MENU = 'menu'
    LANGUAGE_SELECTED = 'language_selected'
    IN_QUESTION = 'in_question'
    AWAITING_RETRY = 'awaiting_retry'
    ADVANCING = 'advancing'
    FINISHED = 'finished'


class OutcomeKind(enum.Enum):
    CORRECT = 'correct'
    INCORRECT = 'incorrect'


class CatalogEntry:
    """One quiz item: an image id, a French gloss and its word forms.

    Entries are read-only and shared by every session.
    """

    def __init__(self, id: str, gloss: str, forms: dict = None):
        self._id = id
        self._gloss = gloss
        self._forms = MappingProxyType(dict(forms or {}))

    @property
    def id(self) -> str:
        return self._id

    @property
    def gloss(self) -> str:
        return self._gloss

    @property
    def forms(self):
        return self._forms

    def form(self, language: str) -> str:
        """Word form for a language, empty string when missing."""
        return self._forms.get(language) or ''

    @property
    def image_path(self) -> str:
        return IMAGE_PATH.format(id=self._id)

    def pronunciation_path(self, language: str) -> str:
        return PRONUNCIATION_PATH.format(language=language, id=self._id)

    def __repr__(self) -> str:
        return f"CatalogEntry(id={self._id!r}, gloss={self._gloss!r})"


class Question:
    """A catalog entry being asked in one session."""

    def __init__(self, entry: CatalogEntry):
        self.entry = entry
        self.attempted = False

    @property
    def id(self) -> str:
        return self.entry.id

    @property
    def gloss(self) -> str:
        return self.entry.gloss

    def form(self, language: str) -> str:
        return self.entry.form(language)

    def __repr__(self) -> str:
        return f"Question(id={self.id!r}, attempted={self.attempted})"


class Option:
    """One answer button: a language and its word form."""

    __slots__ = ('language', 'word')

    def __init__(self, language: str, word: str):
        self.language = language
        self.word = word

    def to_dict(self) -> dict:
        return {'language': self.language, 'word': self.word}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return (self.language, self.word) == (other.language, other.word)

    def __hash__(self) -> int:
        return hash((self.language, self.word))

    def __repr__(self) -> str:
        return f"Option({self.language!r}, {self.word!r})"


class Outcome:
    """Result of answering a question.

    For a correct answer language/word are the target language and its form,
    for an incorrect one they are what the player clicked.
    """

    def __init__(self, kind: OutcomeKind, language: str, word: str, item_id: str,
                 first_try: bool = False):
        self.kind = kind
        self.language = language
        self.word = word
        self.item_id = item_id
        self.first_try = first_try

    @property
    def correct(self) -> bool:
        return self.kind is OutcomeKind.CORRECT

    def to_dict(self) -> dict:
        return {
            'kind': self.kind.value,
            'correct': self.correct,
            'language': self.language,
            'word': self.word,
            'item_id': self.item_id,
            'first_try': self.first_try
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Outcome':
        return cls(
            OutcomeKind(data['kind']),
            data['language'],
            data.get('word', ''),
            data['item_id'],
            data.get('first_try', False)
        )

    def __repr__(self) -> str:
        return (f"Outcome({self.kind.value}, language={self.language!r}, "
                f"item_id={self.item_id!r}, first_try={self.first_try})")
