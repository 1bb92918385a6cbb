"""Console UI for kaddu application."""

import requests

from kaddu.errors import KadduError
from kaddu.feedback import FeedbackDispatcher
from kaddu.models import Outcome

CLIENT_ERRORS = (requests.RequestException, KadduError)

YES = ('o', 'oui', 'y', 'yes')


class ConsoleUI:
    """Console user interface for kaddu application."""

    def __init__(self, client, dispatcher: FeedbackDispatcher = None):
        self.client = client
        self.dispatcher = dispatcher

    def print_menu(self, view: dict):
        """Print the language menu."""
        print('\n' + '=' * 40)
        print(view['title'])
        print('=' * 40)
        for number, language in enumerate(view['languages'], start=1):
            print(f'  {number:2d}. {language["name"]}')
        print('=' * 40)

    def print_language_selected(self, view: dict):
        print('\n' + '-' * 40)
        print(view['title'])
        print('-' * 40)
        print(f'[Entrée] {view["action_label"]}   [menu] Retour au menu')

    def print_question(self, view: dict):
        """Print the current question and its options."""
        print('\n' + '=' * 40)
        print(view['progress'])
        print('=' * 40)
        print(f'\n  {view["gloss"]}')
        print(f'  ({view["image"]})\n')
        for number, option in enumerate(view['options'], start=1):
            print(f'  {number:2d}. {option["word"] or "-"}')
        print()

    def print_popup(self, popup: dict):
        """Print the feedback shown after an answer."""
        print('-' * 40)
        print(popup['title'])
        print(popup['language_name'])
        print(popup['word'])
        print('-' * 40)
        print(f'[Entrée] {popup["action_label"]}   [son] Réécouter')

    def print_final(self, view: dict):
        """Print the final score."""
        print('\n' + '=' * 40)
        print(view['title'])
        print(view['text'])
        print(f'\n    {view["score"]} / {view["question_count"]}\n')
        print(view['note'])
        print('=' * 40)
        print(f'[Entrée] {view["replay_label"]}   [menu] {view["menu_label"]}')

    def play_feedback(self, outcome: dict):
        """Start the audio feedback for an answer outcome."""
        if self.dispatcher is not None:
            self.dispatcher.dispatch(Outcome.from_dict(outcome))

    def stop_feedback(self):
        if self.dispatcher is not None:
            self.dispatcher.cancel_pending()

    def replay_pronunciation(self, popup: dict):
        if self.dispatcher is None:
            print(f'({popup["audio"]})')
            return
        try:
            self.dispatcher.backend.play_pronunciation(popup['language'], popup['item_id'])
        except Exception as e:
            print(f"Audio unavailable: {e}")

    def confirm_leave(self, view: dict) -> bool:
        """Ask before abandoning a game in progress."""
        if not view.get('confirm_leave'):
            return True
        answer = input('Une partie est en cours. Quitter quand même ? (o/n) ').strip().lower()
        return answer in YES

    def handle_menu(self, view: dict) -> dict | None:
        self.print_menu(view)
        choice = input('==> ').strip().lower()
        if choice == 'exit':
            return None
        languages = view['languages']
        if choice.isdigit() and 1 <= int(choice) <= len(languages):
            return self.client.select_language(languages[int(choice) - 1]['code'])
        print('Choix invalide.')
        return view

    def handle_language_selected(self, view: dict) -> dict | None:
        self.print_language_selected(view)
        choice = input('==> ').strip().lower()
        if choice == 'exit':
            return None
        if choice == 'menu':
            return self.client.menu()
        return self.client.start()

    def handle_question(self, view: dict) -> dict | None:
        self.print_question(view)
        choice = input('==> ').strip().lower()
        if choice == 'exit':
            return None if self.confirm_leave(view) else view
        if choice == 'menu':
            return self.client.menu() if self.confirm_leave(view) else view
        options = view['options']
        if choice.isdigit() and 1 <= int(choice) <= len(options):
            option = options[int(choice) - 1]
            result = self.client.answer(option['language'], option['word'])
            self.play_feedback(result['outcome'])
            return result['view']
        print('Choix invalide.')
        return view

    def handle_popup(self, view: dict) -> dict | None:
        popup = view['popup']
        self.print_popup(popup)
        choice = input('==> ').strip().lower()
        if choice == 'exit':
            return None if self.confirm_leave(view) else view
        if choice == 'menu':
            if not self.confirm_leave(view):
                return view
            self.stop_feedback()
            return self.client.menu()
        if choice == 'son':
            self.replay_pronunciation(popup)
            return view
        self.stop_feedback()
        if popup['action'] == 'advance':
            return self.client.advance()
        return self.client.dismiss()

    def handle_finished(self, view: dict) -> dict | None:
        self.print_final(view)
        choice = input('==> ').strip().lower()
        if choice == 'exit':
            return None
        if choice == 'menu':
            return self.client.menu()
        return self.client.restart()

    def step(self, view: dict) -> dict | None:
        """Show one screen, read one command. Returns the next view, None to quit."""
        screen = view['screen']
        if screen == 'menu':
            return self.handle_menu(view)
        if screen == 'language_selected':
            return self.handle_language_selected(view)
        if screen == 'finished':
            return self.handle_finished(view)
        if view.get('popup'):
            return self.handle_popup(view)
        return self.handle_question(view)

    def run(self):
        """Run the main application loop."""
        try:
            health = self.client.health_check()
            print(f"Connected to {self.client.describe()} ({health['words']} words)")
        except CLIENT_ERRORS as e:
            print(f"Error: Cannot reach {self.client.describe()}: {e}")
            print("Make sure the server is running: python run_server.py")
            return

        print('Commands: a number to choose, "menu" for the language menu, "exit" to quit')
        view = self.client.get_view()
        while view is not None:
            try:
                view = self.step(view)
            except CLIENT_ERRORS as e:
                print(f"Error: {e}")
                view = self.client.get_view()

        self.stop_feedback()
        print('Au revoir !')
