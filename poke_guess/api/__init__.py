"""
PokeGuess — REST API

FastAPI сервер гри.

Запуск:
    uvicorn poke_guess.api.main:app --reload --port 8000
    python scripts/run_api.py
"""

from .config import APIConfig, config
from .dependencies import AppState, GameSession, SessionManager, app_state, session_manager

__all__ = [
    "APIConfig",
    "config",
    "AppState",
    "GameSession",
    "SessionManager",
    "app_state",
    "session_manager",
]
