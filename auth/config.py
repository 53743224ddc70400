"""
Authentication configuration for the PUBG developer API.
Loads the API key and endpoint settings from the environment or a .env file.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# ---- API KEY ----
# Optional here; PubgKeyManager falls back to auth/config.json when unset
PUBG_API_KEY = os.getenv('PUBG_API_KEY')

# ---- API ENDPOINTS ----
PUBG_BASE_URL = os.getenv('PUBG_BASE_URL', 'https://api.pubg.com').rstrip('/')
PUBG_SHARD = os.getenv('PUBG_SHARD', 'steam')
STATUS_URL = f"{PUBG_BASE_URL}/status"

# JSON:API media type required by the PUBG API
ACCEPT_HEADER = 'application/vnd.api+json'

__all__ = [
    'PUBG_API_KEY', 'PUBG_BASE_URL', 'PUBG_SHARD',
    'STATUS_URL', 'ACCEPT_HEADER'
]
