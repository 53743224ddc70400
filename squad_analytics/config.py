"""
Configuration settings for the Squad Analytics module.

This module centralizes all configuration parameters for match collection,
aggregation, and reporting.
"""

import os

from auth.config import PUBG_BASE_URL, PUBG_SHARD

# ============================================
# API Configuration
# ============================================

# Request timeout
REQUEST_TIMEOUT = 30  # Seconds

# Match fetches run one at a time unless raised
MAX_CONCURRENT_WORKERS = 1

# Entity type carrying per-player stats inside a match payload
PARTICIPANT_TYPE = "participant"

# ============================================
# Roster Configuration
# ============================================

DEFAULT_ROSTER = ["Canalhabis", "N4M3-V1U", "OpaiTaON", "v1nns"]

# ============================================
# Aggregation Configuration
# ============================================

# Fractional digits kept on averages
AVERAGE_DECIMALS = 3

# Marker shown for players without any shared-match records
NO_DATA_MARKER = "no data"

# ============================================
# Logging Configuration
# ============================================

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEBUG_MODE = os.getenv("SQUAD_DEBUG", "false").lower() == "true"

# ============================================
# Environment Variables
# ============================================

if os.getenv("SQUAD_ROSTER"):
    DEFAULT_ROSTER = [name.strip() for name in os.getenv("SQUAD_ROSTER").split(",") if name.strip()]

if os.getenv("SQUAD_REQUEST_TIMEOUT"):
    REQUEST_TIMEOUT = float(os.getenv("SQUAD_REQUEST_TIMEOUT"))

if os.getenv("SQUAD_WORKERS"):
    MAX_CONCURRENT_WORKERS = int(os.getenv("SQUAD_WORKERS"))

# ============================================
# Helper Functions
# ============================================

def get_shard_url(shard=None):
    """Get the base URL for shard-scoped endpoints."""
    return f"{PUBG_BASE_URL}/shards/{shard or PUBG_SHARD}"

def get_players_url(shard=None):
    """Get the player lookup endpoint."""
    return f"{get_shard_url(shard)}/players"

def get_match_url(match_id, shard=None):
    """Get the endpoint for a single match."""
    return f"{get_shard_url(shard)}/matches/{match_id}"

def get_log_level():
    """Resolve the log level name, honouring SQUAD_DEBUG."""
    return "DEBUG" if DEBUG_MODE else DEFAULT_LOG_LEVEL
