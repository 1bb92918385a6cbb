"""Quiz session state machine."""

import logging
import random

from .config import LANGUAGES, QUESTION_COUNT
from .errors import CatalogError, InvalidTransition
from .feedback import FeedbackDispatcher
from .models import GameState, Option, Outcome, OutcomeKind, Question
from .quiz import build_options, sample_questions
from .utils import require_language

logger = logging.getLogger(__name__)


class QuizSession:
    """One player's game: menu, language choice, 20 questions, final score.

    Every operation checks the current state first and raises
    InvalidTransition without touching anything when it is not allowed.
    """

    def __init__(self, catalog, dispatcher: FeedbackDispatcher = None,
                 rng: random.Random = None, question_count: int = QUESTION_COUNT):
        self.catalog = catalog
        self.dispatcher = dispatcher
        self.rng = rng
        self.requested_count = question_count
        self.state = GameState.MENU
        self.target_language = None
        self.questions: list[Question] = []
        self.current_index = 0
        self.first_try_correct = 0
        self.options: list[Option] = []
        self.last_outcome: Outcome | None = None

    # ------------------------------------------------------------------
    # Derived state

    @property
    def question_count(self) -> int:
        """Questions in the running game, or the count a new game would have."""
        if self.questions:
            return len(self.questions)
        return min(self.requested_count, len(self.catalog))

    @property
    def score(self) -> int:
        return self.first_try_correct

    @property
    def current_question(self) -> Question | None:
        if self.state in (GameState.IN_QUESTION, GameState.AWAITING_RETRY, GameState.ADVANCING):
            return self.questions[self.current_index]
        return None

    @property
    def is_finished(self) -> bool:
        return self.state is GameState.FINISHED

    @property
    def needs_leave_confirmation(self) -> bool:
        """True while a game is under way and leaving would lose it."""
        return 0 < self.current_index < len(self.questions)

    # ------------------------------------------------------------------
    # Transitions

    def _require(self, operation: str, *states: GameState) -> None:
        if self.state not in states:
            raise InvalidTransition(operation, self.state)

    def select_language(self, language: str) -> None:
        """Choose the language to be quizzed on."""
        self._require('select a language', GameState.MENU, GameState.FINISHED)
        self.target_language = require_language(language)
        self._clear_game()
        self.state = GameState.LANGUAGE_SELECTED
        logger.debug(f"Language selected: {language}")

    def start(self) -> None:
        """Sample a fresh set of questions and show the first one."""
        self._require('start', GameState.LANGUAGE_SELECTED, GameState.FINISHED)
        self._begin()

    def restart(self) -> None:
        """Start over with new questions, keeping the target language."""
        if self.target_language is None:
            raise InvalidTransition('restart', self.state)
        self._cancel_feedback()
        self._begin()

    def answer(self, language_clicked: str, word_clicked: str) -> Outcome:
        """Evaluate a clicked option.

        Only the first answer on a question can score: any wrong click marks
        the question as attempted for the rest of the game.
        """
        self._require('answer', GameState.IN_QUESTION, GameState.AWAITING_RETRY)
        require_language(language_clicked)
        question = self.questions[self.current_index]

        if language_clicked == self.target_language:
            first_try = not question.attempted
            if first_try:
                self.first_try_correct += 1
            question.attempted = True
            outcome = Outcome(
                OutcomeKind.CORRECT,
                self.target_language,
                question.form(self.target_language),
                question.id,
                first_try
            )
            self.state = GameState.ADVANCING
        else:
            question.attempted = True
            outcome = Outcome(
                OutcomeKind.INCORRECT,
                language_clicked,
                word_clicked,
                question.id
            )
            self.state = GameState.AWAITING_RETRY

        self.last_outcome = outcome
        logger.debug(
            f"Question {self.current_index + 1}/{len(self.questions)} ({question.id}): "
            f"{outcome.kind.value}, score {self.first_try_correct}"
        )
        if self.dispatcher is not None:
            self.dispatcher.dispatch(outcome)
        return outcome

    def dismiss_retry(self) -> None:
        """Close the wrong-answer popup and try the same question again."""
        self._require('dismiss', GameState.AWAITING_RETRY)
        self._cancel_feedback()
        self.last_outcome = None
        self.state = GameState.IN_QUESTION

    def advance(self) -> None:
        """Move past a correctly answered question."""
        self._require('advance', GameState.ADVANCING)
        self._cancel_feedback()
        self.last_outcome = None
        self.current_index += 1
        if self.current_index == len(self.questions):
            self.options = []
            self.state = GameState.FINISHED
            logger.info(
                f"Game finished in {self.target_language}: "
                f"{self.first_try_correct}/{len(self.questions)}"
            )
        else:
            self._load_options()
            self.state = GameState.IN_QUESTION

    def return_to_menu(self) -> None:
        """Abandon the current game, if any."""
        self._cancel_feedback()
        self.target_language = None
        self._clear_game()
        self.state = GameState.MENU

    # ------------------------------------------------------------------
    # Helpers

    def _begin(self) -> None:
        questions = sample_questions(self.catalog, self.requested_count, self.rng)
        if not questions:
            raise CatalogError("Cannot start a game with an empty catalog")
        self.questions = questions
        self.current_index = 0
        self.first_try_correct = 0
        self.last_outcome = None
        self._load_options()
        self.state = GameState.IN_QUESTION
        logger.info(f"Game started in {self.target_language} with {len(self.questions)} questions")

    def _load_options(self) -> None:
        self.options = build_options(
            self.questions[self.current_index], self.target_language, LANGUAGES, self.rng
        )

    def _clear_game(self) -> None:
        self.questions = []
        self.current_index = 0
        self.first_try_correct = 0
        self.options = []
        self.last_outcome = None

    def _cancel_feedback(self) -> None:
        if self.dispatcher is not None:
            self.dispatcher.cancel_pending()
