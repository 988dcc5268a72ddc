"""
Lifecounter - Commander life tracking engine

A small, persistent state engine for tabletop sessions of 1-6 players.
The engine provides:
- Player and session state (life, poison, commander damage)
- Roster management and resets
- Commander damage that always moves life with it
- A death predicate recomputed on demand
- Durable storage of the whole session as one JSON blob
"""

__version__ = "0.1.0"
