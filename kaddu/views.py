"""View models: what each screen shows, independent of how it is drawn."""

from .config import LANGUAGES
from .models import GameState
from .utils import display_language_name

# Interface text (French)
MENU_TITLE = 'Choisissez une langue'
SELECT_TITLE = 'Trouvez {count} mots en {language}'
START_LABEL = 'Aller'
PROGRESS_LABEL = 'Question {number} / {count}'
CORRECT_TITLE = 'Correct'
INCORRECT_TITLE = 'Incorrect'
NEXT_LABEL = 'Prochaine question'
RETRY_LABEL = 'Essayer encore'
FINISHED_TITLE = 'Félicitations !'
FINISHED_TEXT = 'Vous avez terminé le quiz.'
SCORE_NOTE = 'Seules les réponses correctes dès le premier essai ont été comptées.'
MENU_LABEL = 'Retour au menu'
REPLAY_LABEL = 'Rejouer'


def language_list() -> list[dict]:
    """Menu entries for every supported language."""
    return [{'code': code, 'name': display_language_name(code)} for code in LANGUAGES]


def _popup(session) -> dict | None:
    outcome = session.last_outcome
    if outcome is None:
        return None
    question = session.current_question
    return {
        'correct': outcome.correct,
        'title': CORRECT_TITLE if outcome.correct else INCORRECT_TITLE,
        'language': outcome.language,
        'language_name': display_language_name(outcome.language),
        'word': outcome.word,
        'item_id': outcome.item_id,
        'image': question.entry.image_path,
        'audio': question.entry.pronunciation_path(outcome.language),
        'action': 'advance' if outcome.correct else 'dismiss',
        'action_label': NEXT_LABEL if outcome.correct else RETRY_LABEL,
    }


def render(session) -> dict:
    """Build the view model for the session's current screen."""
    state = session.state
    view = {
        'screen': state.value,
        'confirm_leave': session.needs_leave_confirmation,
    }

    if state is GameState.MENU:
        view.update(title=MENU_TITLE, languages=language_list())

    elif state is GameState.LANGUAGE_SELECTED:
        language = session.target_language
        view.update(
            title=SELECT_TITLE.format(
                count=session.question_count, language=display_language_name(language)
            ),
            language=language,
            question_count=session.question_count,
            action_label=START_LABEL,
        )

    elif state is GameState.FINISHED:
        view.update(
            title=FINISHED_TITLE,
            text=FINISHED_TEXT,
            language=session.target_language,
            score=session.score,
            question_count=session.question_count,
            note=SCORE_NOTE,
            menu_label=MENU_LABEL,
            replay_label=REPLAY_LABEL,
        )

    else:
        question = session.current_question
        view.update(
            language=session.target_language,
            progress=PROGRESS_LABEL.format(
                number=session.current_index + 1, count=session.question_count
            ),
            index=session.current_index,
            question_count=session.question_count,
            gloss=question.gloss,
            image=question.entry.image_path,
            options=[option.to_dict() for option in session.options],
            popup=_popup(session),
        )

    return view
