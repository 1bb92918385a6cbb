"""Tests for the kaddu HTTP API."""

import asyncio
import os
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

import server.app as server_app

from mocks import make_catalog


class TestServerAPI(unittest.TestCase):
    """Tests for the session endpoints."""

    def setUp(self):
        server_app.catalog = make_catalog(25)
        server_app.user_sessions.clear()
        self.client = TestClient(server_app.app)

    def tearDown(self):
        server_app.catalog = None
        server_app.user_sessions.clear()

    def post(self, endpoint: str, **data):
        return self.client.post(f"/api/session/{endpoint}", json=data)

    def start_game(self, user_id: str = "default") -> dict:
        self.post("language", language="wolof", user_id=user_id)
        response = self.post("start", user_id=user_id)
        self.assertEqual(response.status_code, 200)
        return response.json()

    def test_health_check(self):
        data = self.client.get("/").json()
        self.assertEqual(data['service'], 'kaddu')
        self.assertEqual(data['words'], 25)

    def test_languages(self):
        languages = self.client.get("/api/languages").json()
        self.assertEqual(len(languages), 14)
        self.assertIn({'code': 'saafisaafi', 'name': 'Saafi-Saafi'}, languages)

    def test_initial_view_is_menu(self):
        view = self.client.get("/api/session").json()
        self.assertEqual(view['screen'], 'menu')

    def test_unsupported_language(self):
        response = self.post("language", language="english")
        self.assertEqual(response.status_code, 400)

    def test_invalid_transition(self):
        response = self.post("start")
        self.assertEqual(response.status_code, 409)
        response = self.post("answer", language="wolof", word="x")
        self.assertEqual(response.status_code, 409)

    def test_game_round(self):
        view = self.start_game()
        self.assertEqual(view['screen'], 'in_question')
        self.assertEqual(view['progress'], 'Question 1 / 20')

        target = next(o for o in view['options'] if o['language'] == 'wolof')
        wrong = next(o for o in view['options'] if o['language'] != 'wolof')

        data = self.post("answer", **wrong).json()
        self.assertEqual(data['outcome']['kind'], 'incorrect')
        self.assertEqual([c['kind'] for c in data['feedback']], ['failure_tone', 'pronunciation'])
        self.assertEqual(data['feedback'][1]['delay_ms'], 400)
        self.assertEqual(data['view']['popup']['action'], 'dismiss')

        self.assertEqual(self.post("advance").status_code, 409)
        view = self.post("dismiss").json()
        self.assertIsNone(view['popup'])

        data = self.post("answer", **target).json()
        self.assertTrue(data['outcome']['correct'])
        self.assertFalse(data['outcome']['first_try'])
        self.assertEqual(data['feedback'][0]['path'], 'sounds/ding.mp3')

        view = self.post("advance").json()
        self.assertEqual(view['progress'], 'Question 2 / 20')
        self.assertTrue(view['confirm_leave'])

    def test_restart_and_menu(self):
        self.start_game()
        view = self.post("restart").json()
        self.assertEqual(view['progress'], 'Question 1 / 20')
        view = self.post("menu").json()
        self.assertEqual(view['screen'], 'menu')
        self.assertNotIn('default', server_app.user_sessions)
        self.assertEqual(self.post("restart").status_code, 409)

    def test_menu_releases_session(self):
        for user_id in ('awa', 'moussa', 'fatou'):
            self.start_game(user_id=user_id)
            self.post("menu", user_id=user_id)
        self.assertEqual(server_app.user_sessions, {})
        view = self.client.get("/api/session", params={'user_id': 'awa'}).json()
        self.assertEqual(view['screen'], 'menu')

    def test_sessions_are_per_user(self):
        self.start_game(user_id="awa")
        view = self.client.get("/api/session", params={'user_id': 'moussa'}).json()
        self.assertEqual(view['screen'], 'menu')
        view = self.client.get("/api/session", params={'user_id': 'awa'}).json()
        self.assertEqual(view['screen'], 'in_question')

    def test_catalog_not_loaded(self):
        server_app.catalog = None
        response = self.client.get("/api/session")
        self.assertEqual(response.status_code, 503)

    def test_startup_fails_without_catalog(self):
        with patch.dict(os.environ, {'KADDU_CATALOG': '/nonexistent/words.json'}):
            with self.assertRaises(RuntimeError):
                asyncio.run(server_app.startup())


if __name__ == '__main__':
    unittest.main()
