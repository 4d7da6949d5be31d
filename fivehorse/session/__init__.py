"""Game session bookkeeping for interactive play."""

from .game import GameMode, GameSession, SessionConfig

__all__ = ["GameMode", "GameSession", "SessionConfig"]
