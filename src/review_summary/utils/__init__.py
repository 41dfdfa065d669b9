"""Utility modules for the review summary service."""

from .clock import Clock, utc_now
from .hashing import hash_text

__all__ = ["Clock", "hash_text", "utc_now"]
