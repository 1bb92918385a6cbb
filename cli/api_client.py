"""REST API client for kaddu server."""

import requests


class KadduAPIClient:
    """Client for communicating with the kaddu REST API."""

    def __init__(self, base_url: str = "http://localhost:8000", user_id: str = "default"):
        self.base_url = base_url.rstrip('/')
        self.user_id = user_id
        self.session = requests.Session()

    def describe(self) -> str:
        return f"kaddu server at {self.base_url}"

    def _get(self, endpoint: str, params: dict = None) -> dict:
        """Make a GET request."""
        if params is None:
            params = {}
        params['user_id'] = self.user_id
        response = self.session.get(f"{self.base_url}{endpoint}", params=params)
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict = None) -> dict:
        """Make a POST request."""
        if data is None:
            data = {}
        data['user_id'] = self.user_id
        response = self.session.post(f"{self.base_url}{endpoint}", json=data)
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        response = self.session.get(f"{self.base_url}/")
        response.raise_for_status()
        return response.json()

    def get_view(self) -> dict:
        """Get the current screen."""
        return self._get("/api/session")

    def select_language(self, language: str) -> dict:
        return self._post("/api/session/language", {'language': language})

    def start(self) -> dict:
        return self._post("/api/session/start")

    def answer(self, language: str, word: str) -> dict:
        """Submit a clicked option. Returns {outcome, feedback, view}."""
        return self._post("/api/session/answer", {'language': language, 'word': word})

    def dismiss(self) -> dict:
        return self._post("/api/session/dismiss")

    def advance(self) -> dict:
        return self._post("/api/session/advance")

    def restart(self) -> dict:
        return self._post("/api/session/restart")

    def menu(self) -> dict:
        return self._post("/api/session/menu")
