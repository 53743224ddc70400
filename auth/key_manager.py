"""
API key manager for the PUBG developer API.
Resolves the key from the environment (local .env or CI secrets) or from
auth/config.json, and builds authenticated request headers.
"""

import os
import json
import logging
import requests
from pathlib import Path
from typing import Optional, Dict

from auth.config import ACCEPT_HEADER, STATUS_URL

logger = logging.getLogger(__name__)


class PubgKeyManager:
    """Loads the PUBG API key and produces request headers."""

    def __init__(self, api_key: Optional[str] = None, key_file: Optional[Path] = None):
        """
        Initialize key manager.

        Args:
            api_key: Explicit key; skips environment and file lookup
            key_file: JSON file holding {"apiKey": "..."}; defaults to auth/config.json
        """
        self.key_file = key_file or Path(__file__).parent / 'config.json'
        self.api_key = api_key or self._load_key()

    def _load_key(self) -> str:
        """Load the key from the environment, then from the key file."""
        env_key = os.getenv('PUBG_API_KEY')
        if env_key:
            return env_key

        if self.key_file.exists():
            with open(self.key_file, 'r') as f:
                data = json.load(f)
            file_key = data.get('apiKey')
            if file_key:
                logger.debug(f"Using API key from {self.key_file}")
                return file_key

        raise ValueError(
            "No PUBG API key found. Set PUBG_API_KEY in the environment or .env file, "
            f"or create {self.key_file} with an \"apiKey\" entry."
        )

    def get_headers(self) -> Dict[str, str]:
        """Headers for an authenticated JSON:API request."""
        return {
            'Authorization': f'Bearer {self.api_key}',
            'Accept': ACCEPT_HEADER
        }

    def test_key(self) -> bool:
        """Check the key against the API status endpoint."""
        try:
            response = requests.get(STATUS_URL, headers=self.get_headers(), timeout=10)
            return response.status_code == 200
        except requests.exceptions.RequestException as e:
            logger.error(f"Key test failed: {e}")
            return False


if __name__ == "__main__":
    print("Testing PUBG API key...")

    try:
        manager = PubgKeyManager()
        print(f"API key loaded: {manager.api_key[:12]}...")

        if manager.test_key():
            print("[OK] Key is valid and the API is reachable")
        else:
            print("[FAIL] Key test failed")

    except ValueError as e:
        print(f"[ERROR] {e}")
