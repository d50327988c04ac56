"""Bounded caches."""
from .message_cache import MessageCache

__all__ = ["MessageCache"]
