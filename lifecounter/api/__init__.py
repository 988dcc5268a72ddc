"""
API Module - In-process interface for the presentation layer.

A UI forwards user intents here and redraws from the returned views.
There is no network surface; everything runs in the caller's process.
"""

from .schemas import (
    PaletteEntry,
    CommanderDamageRow,
    PlayerView,
    BoardView,
    IntentResponse,
)
from .service import BoardService

__all__ = [
    "PaletteEntry",
    "CommanderDamageRow",
    "PlayerView",
    "BoardView",
    "IntentResponse",
    "BoardService",
]
