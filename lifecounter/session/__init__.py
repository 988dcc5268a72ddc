"""
Session Module - The live tracker session.

A controller owns exactly one Session for the lifetime of the process.
It is loaded from disk at startup and saved after every change.
"""

from .controller import SessionController

__all__ = [
    "SessionController",
]
