"""
Storage Module - Durable session persistence.

The whole session is one JSON blob under a fixed storage key. It is
rewritten after every change; a blob that can't be read is treated as
if there were none.
"""

from .schema import PersistedSession, PersistedPlayer
from .store import SessionStore, STORAGE_KEY

__all__ = [
    "PersistedSession",
    "PersistedPlayer",
    "SessionStore",
    "STORAGE_KEY",
]
