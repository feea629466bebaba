from __future__ import annotations

import unittest
from unittest import mock

import config
from app import create_app
from leaf_service import ACCOMPLISHMENT_REPLIES, GRATITUDE_REPLIES, SUPPORT_REPLIES
from models import db
from storage import MemoryStorage


class AppTests(unittest.TestCase):
    def setUp(self) -> None:
        # No API key: Leaf answers from the canned lists
        patcher = mock.patch.object(config, "OPENAI_API_KEY", "")
        patcher.start()
        self.addCleanup(patcher.stop)

        self.storage = MemoryStorage()
        self.app = create_app(
            {"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite://", "STORAGE": self.storage}
        )
        self.client = self.app.test_client()

    def tearDown(self) -> None:
        with self.app.app_context():
            db.drop_all()

    def test_health(self) -> None:
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        body = resp.get_json()
        self.assertTrue(body["ok"])
        self.assertTrue(body["db_ok"])
        self.assertFalse(body["ai_enabled"])
        self.assertTrue(body["time"].endswith("+00:00"))

    def test_record_returns_simulated_transcription(self) -> None:
        resp = self.client.post("/thoughts/record")
        self.assertEqual(resp.status_code, 200)
        self.assertIn("overwhelmed", resp.get_json()["transcription"])

    def test_thought_flow(self) -> None:
        text = self.client.post("/thoughts/record").get_json()["transcription"]
        resp = self.client.post("/thoughts", json={"text": text})
        self.assertEqual(resp.status_code, 200)
        reply = resp.get_json()
        self.assertEqual(reply["tone"], "negative")
        self.assertIn(reply["message"], SUPPORT_REPLIES)

        entries = self.client.get("/thoughts/entries").get_json()
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0]["text"], text)
        self.assertEqual(entries[0]["aiResponse"], reply["message"])
        self.assertEqual(entries[0]["tone"], "negative")

    def test_gratitude_and_accomplishment_flow(self) -> None:
        gratitude = self.client.post("/gratitude", json={"text": "Grateful for the sunset"}).get_json()
        self.assertEqual(set(gratitude), {"message"})
        self.assertIn(gratitude["message"], GRATITUDE_REPLIES)

        forest = self.client.post("/accomplishments", json={"text": "I completed my first 5K"}).get_json()
        self.assertIn(forest["message"], ACCOMPLISHMENT_REPLIES)

        garden = self.client.get("/garden").get_json()
        self.assertEqual((garden["petals"], garden["trees"], garden["plants"], garden["seeds"]), (1, 1, 0, 0))

    def test_newest_entry_first(self) -> None:
        self.client.post("/gratitude", json={"text": "one"})
        self.client.post("/gratitude", json={"text": "two"})
        entries = self.client.get("/gratitude/entries").get_json()
        self.assertEqual([e["text"] for e in entries], ["two", "one"])

    def test_missing_text_is_rejected(self) -> None:
        resp = self.client.post("/gratitude", json={"text": "   "})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("error", resp.get_json())
        self.assertEqual(self.storage.items, {})

    def test_malformed_bodies_are_rejected(self) -> None:
        for payload in (["hi"], {"text": 5}, {"text": None}, "just a string"):
            resp = self.client.post("/thoughts", json=payload)
            self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.storage.items, {})

    def test_unknown_category(self) -> None:
        self.assertEqual(self.client.post("/dreams", json={"text": "x"}).status_code, 404)
        self.assertEqual(self.client.get("/dreams/entries").status_code, 404)
        self.assertEqual(self.client.post("/dreams/record").status_code, 404)


if __name__ == "__main__":
    unittest.main()
