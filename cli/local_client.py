"""In-process game client with the same interface as KadduAPIClient."""

from kaddu.catalog import Catalog
from kaddu.feedback import plan_feedback
from kaddu.session import QuizSession
from kaddu.views import render


class LocalGameClient:
    """Runs the quiz session directly, without a server."""

    def __init__(self, catalog: Catalog, rng=None):
        self.catalog = catalog
        self.game = QuizSession(catalog, rng=rng)

    def describe(self) -> str:
        return f"local catalog ({len(self.catalog)} words)"

    def health_check(self) -> dict:
        return {'service': 'kaddu', 'status': 'ok', 'words': len(self.catalog)}

    def get_view(self) -> dict:
        return render(self.game)

    def select_language(self, language: str) -> dict:
        self.game.select_language(language)
        return render(self.game)

    def start(self) -> dict:
        self.game.start()
        return render(self.game)

    def answer(self, language: str, word: str) -> dict:
        outcome = self.game.answer(language, word)
        return {
            'outcome': outcome.to_dict(),
            'feedback': [cue.to_dict() for cue in plan_feedback(outcome)],
            'view': render(self.game)
        }

    def dismiss(self) -> dict:
        self.game.dismiss_retry()
        return render(self.game)

    def advance(self) -> dict:
        self.game.advance()
        return render(self.game)

    def restart(self) -> dict:
        self.game.restart()
        return render(self.game)

    def menu(self) -> dict:
        self.game.return_to_menu()
        return render(self.game)
