from .models import CatalogEntry, Question, Option, Outcome, OutcomeKind, GameState
from .interfaces import AudioBackend, Scheduler, ScheduledCall
from .errors import KadduError, CatalogError, UnsupportedLanguage, InvalidTransition, AssetMissing
from .catalog import Catalog, load_catalog, parse_catalog
from .quiz import sample_questions, build_options, deduplicate_options, sort_options
from .feedback import FeedbackCue, FeedbackDispatcher, ThreadingScheduler, plan_feedback
from .session import QuizSession
from .views import render, language_list
from .utils import shuffled, fold, collation_key, display_language_name
from .config import (
    LANGUAGES, QUESTION_COUNT, RETRY_PRONUNCIATION_DELAY_MS, CATALOG_PATH
)

__all__ = [
    'CatalogEntry', 'Question', 'Option', 'Outcome', 'OutcomeKind', 'GameState',
    'AudioBackend', 'Scheduler', 'ScheduledCall',
    'KadduError', 'CatalogError', 'UnsupportedLanguage', 'InvalidTransition', 'AssetMissing',
    'Catalog', 'load_catalog', 'parse_catalog',
    'sample_questions', 'build_options', 'deduplicate_options', 'sort_options',
    'FeedbackCue', 'FeedbackDispatcher', 'ThreadingScheduler', 'plan_feedback',
    'QuizSession',
    'render', 'language_list',
    'shuffled', 'fold', 'collation_key', 'display_language_name',
    'LANGUAGES', 'QUESTION_COUNT', 'RETRY_PRONUNCIATION_DELAY_MS', 'CATALOG_PATH'
]
