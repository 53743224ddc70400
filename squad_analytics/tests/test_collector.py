"""
Unit tests for the PubgCollector class.
"""

import unittest
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock, patch

import requests

from squad_analytics.collector import PubgCollector
from squad_analytics.errors import DataFormatError, TransportError
from squad_analytics.models import Player


def mock_response(status_code=200, payload=None):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


class TestPubgCollector(unittest.TestCase):
    """Test cases for PubgCollector."""

    def setUp(self):
        """Set up test fixtures."""
        self.session = Mock()
        self.key_manager = Mock()
        self.key_manager.get_headers.return_value = {
            "Authorization": "Bearer test-key",
            "Accept": "application/vnd.api+json"
        }
        self.collector = PubgCollector(
            key_manager=self.key_manager,
            session=self.session,
            shard="steam",
            timeout=5
        )

    def test_get_players(self):
        """Player lookup sends the name filter and parses the response."""
        self.session.get.return_value = mock_response(payload={
            "data": [{
                "id": "account.aaa",
                "attributes": {"name": "A"},
                "relationships": {"matches": {"data": [{"type": "match", "id": "m1"}]}}
            }]
        })

        players = self.collector.get_players(["A", "B"])

        self.assertEqual(players, [Player(name="A", id="account.aaa", match_ids=("m1",))])
        args, kwargs = self.session.get.call_args
        self.assertTrue(args[0].endswith("/shards/steam/players"))
        self.assertEqual(kwargs["params"], {"filter[playerNames]": "A,B"})
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer test-key")
        self.assertEqual(kwargs["headers"]["Accept"], "application/vnd.api+json")
        self.assertEqual(kwargs["timeout"], 5)
        self.assertEqual(self.collector.stats["requests_made"], 1)
        self.assertEqual(self.collector.stats["requests_failed"], 0)

    def test_get_match(self):
        """Match fetch returns the included entities."""
        included = [{"type": "participant", "id": "p1",
                     "attributes": {"stats": {"name": "A", "kills": 1, "timeSurvived": 10}}}]
        self.session.get.return_value = mock_response(payload={"data": {"id": "m1"}, "included": included})

        entities = self.collector.get_match("m1")

        self.assertEqual(entities, included)
        args, _ = self.session.get.call_args
        self.assertTrue(args[0].endswith("/shards/steam/matches/m1"))

    def test_unauthorized_raises_transport_error(self):
        self.session.get.return_value = mock_response(status_code=401)

        with self.assertRaises(TransportError) as ctx:
            self.collector.get_players(["A"])

        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(self.collector.stats["requests_failed"], 1)

    def test_not_found_raises_transport_error(self):
        self.session.get.return_value = mock_response(status_code=404)
        with self.assertRaises(TransportError):
            self.collector.get_players(["Nobody"])

    def test_rate_limit_raises_transport_error(self):
        self.session.get.return_value = mock_response(status_code=429)
        with self.assertRaises(TransportError) as ctx:
            self.collector.get_match("m1")
        self.assertEqual(ctx.exception.status_code, 429)

    def test_network_failure_not_retried(self):
        """A failed request is reported once, without retry."""
        self.session.get.side_effect = requests.exceptions.ConnectionError("Network error")

        with self.assertRaises(TransportError):
            self.collector.get_match("m1")

        self.assertEqual(self.session.get.call_count, 1)
        self.assertEqual(self.collector.stats["requests_failed"], 1)

    def test_invalid_json(self):
        response = mock_response()
        response.json.side_effect = ValueError("Expecting value")
        self.session.get.return_value = response

        with self.assertRaises(DataFormatError):
            self.collector.get_match("m1")

    def test_malformed_match_payload(self):
        self.session.get.return_value = mock_response(payload={"data": {"id": "m1"}})
        with self.assertRaises(DataFormatError):
            self.collector.get_match("m1")

    def test_request_counters_under_worker_threads(self):
        """Counters stay exact when matches are fetched concurrently."""
        self.session.get.return_value = mock_response(payload={"data": {"id": "m1"}, "included": []})

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(self.collector.get_match, [f"m{i}" for i in range(200)]))

        self.assertEqual(self.collector.stats["requests_made"], 200)
        self.assertEqual(self.collector.stats["requests_failed"], 0)

    @patch("squad_analytics.collector.PubgKeyManager")
    def test_key_manager_created_once(self, mock_key_manager):
        mock_key_manager.return_value.get_headers.return_value = {"Authorization": "Bearer k"}
        self.session.get.return_value = mock_response(payload={"data": {"id": "m1"}, "included": []})
        collector = PubgCollector(session=self.session)

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(collector.get_match, [f"m{i}" for i in range(50)]))

        mock_key_manager.assert_called_once_with()

    def test_close_releases_session(self):
        self.collector.close()
        self.session.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
