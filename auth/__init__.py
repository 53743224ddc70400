"""
API key handling for the PUBG developer API.
"""

from .key_manager import PubgKeyManager

__all__ = ["PubgKeyManager"]
