"""FastAPI server for kaddu application."""

import logging
import os
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from kaddu.catalog import Catalog, load_catalog
from kaddu.config import CATALOG_PATH, QUESTION_COUNT
from kaddu.errors import CatalogError, InvalidTransition, UnsupportedLanguage
from kaddu.feedback import plan_feedback
from kaddu.session import QuizSession
from kaddu.views import language_list, render

logger = logging.getLogger(__name__)

# Paths
PROJECT_ROOT = Path(__file__).parent.parent
ASSETS_DIR = Path(os.environ.get('KADDU_ASSETS', PROJECT_ROOT))
ASSET_FOLDERS = ('images', 'audio', 'sounds')


# Pydantic models for API
class UserRequest(BaseModel):
    user_id: str = "default"


class LanguageRequest(BaseModel):
    language: str
    user_id: str = "default"


class AnswerRequest(BaseModel):
    language: str
    word: str = ""
    user_id: str = "default"


class LanguageInfo(BaseModel):
    code: str
    name: str


class AnswerResponse(BaseModel):
    outcome: dict
    feedback: list[dict]
    view: dict


# Global state (in production, use proper DI)
catalog: Catalog = None
user_sessions: dict[str, QuizSession] = {}


app = FastAPI(title="Kaddu API", description="Casamance languages vocabulary quiz API")

# Mount asset folders that exist
for folder in ASSET_FOLDERS:
    if (ASSETS_DIR / folder).is_dir():
        app.mount(f"/{folder}", StaticFiles(directory=ASSETS_DIR / folder), name=folder)


def get_session(user_id: str = "default") -> QuizSession:
    """Get or create the game session for a user."""
    if catalog is None:
        raise HTTPException(status_code=503, detail="Word catalog not loaded")
    if user_id not in user_sessions:
        user_sessions[user_id] = QuizSession(catalog, question_count=QUESTION_COUNT)
        logger.info(f"New session for {user_id}")
    return user_sessions[user_id]


def apply(user_id: str, operation: str, *args):
    """Run a session transition, mapping domain errors to HTTP errors."""
    session = get_session(user_id)
    try:
        return getattr(session, operation)(*args)
    except UnsupportedLanguage as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InvalidTransition as e:
        logger.warning(f"Rejected {operation} for {user_id}: {e}")
        raise HTTPException(status_code=409, detail=str(e))


@app.on_event("startup")
async def startup():
    """Load the word catalog. The server refuses to start without it."""
    global catalog

    catalog_path = os.environ.get('KADDU_CATALOG', str(PROJECT_ROOT / CATALOG_PATH))
    try:
        catalog = load_catalog(catalog_path)
    except CatalogError as e:
        raise RuntimeError(
            f"Cannot start without a word catalog: {e}. "
            "Set KADDU_CATALOG to the path of words.json"
        ) from e


@app.get("/")
async def root():
    """Health check."""
    return {
        "service": "kaddu",
        "status": "ok",
        "words": len(catalog) if catalog is not None else 0
    }


@app.get("/api/languages", response_model=list[LanguageInfo])
async def get_languages():
    """List the supported languages with their display names."""
    return language_list()


@app.get("/api/session")
async def get_view(user_id: str = "default"):
    """Current screen of a user's game."""
    return render(get_session(user_id))


@app.post("/api/session/language")
async def select_language(request: LanguageRequest):
    """Choose the quiz language."""
    apply(request.user_id, 'select_language', request.language)
    return render(get_session(request.user_id))


@app.post("/api/session/start")
async def start_game(request: UserRequest):
    """Start a game with freshly sampled questions."""
    apply(request.user_id, 'start')
    return render(get_session(request.user_id))


@app.post("/api/session/answer", response_model=AnswerResponse)
async def submit_answer(request: AnswerRequest):
    """Evaluate a clicked option and describe the audio feedback to play."""
    outcome = apply(request.user_id, 'answer', request.language, request.word)
    return AnswerResponse(
        outcome=outcome.to_dict(),
        feedback=[cue.to_dict() for cue in plan_feedback(outcome)],
        view=render(get_session(request.user_id))
    )


@app.post("/api/session/dismiss")
async def dismiss_retry(request: UserRequest):
    """Close the wrong-answer popup."""
    apply(request.user_id, 'dismiss_retry')
    return render(get_session(request.user_id))


@app.post("/api/session/advance")
async def advance(request: UserRequest):
    """Go to the next question, or to the final score."""
    apply(request.user_id, 'advance')
    return render(get_session(request.user_id))


@app.post("/api/session/restart")
async def restart(request: UserRequest):
    """Play again in the same language."""
    apply(request.user_id, 'restart')
    return render(get_session(request.user_id))


@app.post("/api/session/menu")
async def return_to_menu(request: UserRequest):
    """Abandon the game and go back to the language menu.

    Drops the user's session; the next request starts a fresh one.
    """
    session = get_session(request.user_id)
    session.return_to_menu()
    del user_sessions[request.user_id]
    logger.info(f"Session closed for {request.user_id}")
    return render(session)


def create_app():
    """Factory function for creating the app (useful for testing)."""
    return app
