"""
PUBG API Collector Module
Handles data collection from the PUBG developer API for player and match data.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

import requests

from auth.key_manager import PubgKeyManager
from squad_analytics.config import (
    REQUEST_TIMEOUT,
    get_match_url,
    get_players_url
)
from squad_analytics.errors import DataFormatError, TransportError
from squad_analytics.models import Player
from squad_analytics.parser import PubgParser

logger = logging.getLogger(__name__)


class PubgCollector:
    """Reads players and matches from the PUBG API."""

    def __init__(self, key_manager: Optional[PubgKeyManager] = None,
                 session: Optional[requests.Session] = None,
                 shard: Optional[str] = None,
                 timeout: float = REQUEST_TIMEOUT):
        """
        Initialize the collector.

        Args:
            key_manager: PubgKeyManager supplying the API key; created on first use if omitted
            session: requests session to reuse across calls
            shard: Platform shard; defaults to the configured PUBG_SHARD
            timeout: Per-request timeout in seconds
        """
        self.key_manager = key_manager
        self.session = session or requests.Session()
        self.shard = shard
        self.timeout = timeout

        # Statistics tracking
        self.stats = {
            "requests_made": 0,
            "requests_failed": 0
        }
        self.lock = threading.Lock()

    def _headers(self) -> Dict[str, str]:
        with self.lock:
            if self.key_manager is None:
                self.key_manager = PubgKeyManager()
            return self.key_manager.get_headers()

    def _count(self, key: str):
        # Match fetches may run on worker threads
        with self.lock:
            self.stats[key] += 1

    def _make_api_request(self, url: str, params: Optional[Dict] = None) -> Dict:
        """
        Make a single API request.

        Args:
            url: The API endpoint URL
            params: Query string parameters

        Returns:
            Decoded JSON document
        """
        headers = self._headers()
        self._count("requests_made")

        try:
            response = self.session.get(url, headers=headers, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            self._count("requests_failed")
            raise TransportError(f"Request to {url} failed: {e}", url=url) from e

        if response.status_code in (401, 403):
            self._count("requests_failed")
            raise TransportError(
                f"API key rejected ({response.status_code}) for {url}",
                status_code=response.status_code, url=url
            )

        if response.status_code == 429:
            self._count("requests_failed")
            raise TransportError(f"Rate limit exceeded for {url}", status_code=429, url=url)

        if response.status_code != 200:
            self._count("requests_failed")
            raise TransportError(
                f"Unexpected status {response.status_code} for {url}",
                status_code=response.status_code, url=url
            )

        try:
            return response.json()
        except ValueError as e:
            raise DataFormatError(f"Response from {url} is not valid JSON") from e

    def get_players(self, names: Iterable[str]) -> List[Player]:
        """
        Resolve player names to account ids and recent match ids.

        Args:
            names: Player names (case-sensitive)

        Returns:
            List of Player objects as returned by the API
        """
        names = list(names)
        url = get_players_url(self.shard)
        logger.info(f"Fetching players: {', '.join(names)}")

        payload = self._make_api_request(url, params={"filter[playerNames]": ",".join(names)})
        players = PubgParser.parse_players_response(payload)

        logger.info(f"Found {len(players)} players")
        return players

    def get_match(self, match_id: str) -> List[Dict]:
        """
        Fetch the entity records of one match.

        Args:
            match_id: PUBG match id

        Returns:
            List of entity records from the match `included` array
        """
        url = get_match_url(match_id, self.shard)
        logger.debug(f"Fetching match {match_id}")

        payload = self._make_api_request(url)
        return PubgParser.parse_match_entities(payload)

    def close(self):
        """Release the underlying HTTP session."""
        self.session.close()
