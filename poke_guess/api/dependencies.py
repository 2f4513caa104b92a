"""
PokeGuess — API Dependencies

Dependency Injection для FastAPI.
Один провайдер ростера на процес, окремий GameEngine на кожну сесію.
"""

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Dict, Optional
import threading
import uuid

from fastapi import HTTPException

from poke_guess.config import PokeGuessConfig, get_default_config
from poke_guess.dataset import (
    AggregatedDataProvider,
    DataProvider,
    DataUnavailableError,
    SampleDataProvider,
)
from poke_guess.game_engine import GameEngine

from .config import config


class AppState:
    """
    Стан застосунку: спільний (лише для читання) провайдер ростера.
    """

    def __init__(self):
        self.provider: Optional[DataProvider] = None
        self.game_config: PokeGuessConfig = get_default_config()
        self.data_source: Optional[str] = None
        self.roster_size: int = 0
        self.error: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self.provider is not None

    def initialize(
        self,
        data_dir: Optional[str] = None,
        provider: Optional[DataProvider] = None,
        game_config: Optional[PokeGuessConfig] = None
    ) -> None:
        """
        Завантажити ростер.

        Args:
            data_dir: Директорія агрегованих даних (None → вбудований ростер)
            provider: Готовий провайдер (має пріоритет над data_dir)
            game_config: Конфігурація гри

        Raises:
            DataUnavailableError: ростер недоступний
        """
        with self._lock:
            if game_config is not None:
                self.game_config = game_config

            if provider is None:
                if data_dir:
                    provider = AggregatedDataProvider(
                        data_dir, self.game_config.data, verbose=self.game_config.verbose
                    )
                    source = data_dir
                else:
                    provider = SampleDataProvider()
                    source = "sample"
            else:
                source = provider.__class__.__name__

            try:
                roster = provider.load_entities()
            except DataUnavailableError as e:
                self.error = str(e)
                raise

            self.provider = provider
            self.data_source = source
            self.roster_size = len(roster)
            self.error = None

            print(f"   ✅ Roster: {self.roster_size} Pokemon ({source})")

    def reset(self) -> None:
        """Скинути стан (провайдер і кеші)"""
        with self._lock:
            if self.provider is not None:
                self.provider.clear_cache()
            self.provider = None
            self.data_source = None
            self.roster_size = 0
            self.error = None

    def create_engine(self, language: Optional[str] = None) -> GameEngine:
        """Новий движок для сесії (провайдер спільний)"""
        if self.provider is None:
            raise DataUnavailableError(self.error or "Roster is not loaded")

        game_config = self.game_config
        if language and language != game_config.question_engine.language:
            game_config = replace(
                game_config,
                question_engine=replace(game_config.question_engine, language=language),
            )

        return GameEngine(self.provider, config=game_config)

    def get_health(self) -> Dict[str, object]:
        return {
            "roster_loaded": self.is_initialized,
            "roster_size": self.roster_size,
            "data_source": self.data_source,
            "error": self.error,
        }


class GameSession:
    """
    Сесія гри: власний GameEngine та lock для послідовної обробки відповідей.
    """

    def __init__(self, session_id: str, engine: GameEngine, language: str):
        self.session_id = session_id
        self.engine = engine
        self.language = language
        self.lock = threading.Lock()

        self.created_at = datetime.now()
        self.updated_at = datetime.now()

    def touch(self) -> None:
        self.updated_at = datetime.now()


class SessionManager:
    """
    Менеджер сесій гри.
    Зберігає активні сесії в пам'яті.
    """

    def __init__(
        self,
        max_sessions: int = 1000,
        session_timeout_minutes: int = 60
    ):
        self.max_sessions = max_sessions
        self.session_timeout_minutes = session_timeout_minutes
        self.sessions: Dict[str, GameSession] = {}
        self.lock = threading.Lock()

    def create_session(self, engine: GameEngine, language: str = "en") -> GameSession:
        """Створити нову сесію"""
        session_id = str(uuid.uuid4())[:8]
        session = GameSession(session_id, engine, language)

        with self.lock:
            # Очистка старих сесій
            self._cleanup_old_sessions()

            self.sessions[session_id] = session

        return session

    def get_session(self, session_id: str) -> Optional[GameSession]:
        """Отримати сесію"""
        return self.sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        """Видалити сесію"""
        with self.lock:
            if session_id in self.sessions:
                del self.sessions[session_id]
                return True
        return False

    def get_active_count(self) -> int:
        """Кількість активних сесій"""
        return len(self.sessions)

    def clear(self) -> None:
        with self.lock:
            self.sessions.clear()

    def _cleanup_old_sessions(self):
        """Видалити застарілі сесії та найстаріші понад ліміт"""
        timeout = timedelta(minutes=self.session_timeout_minutes)
        now = datetime.now()

        expired = [
            sid for sid, session in self.sessions.items()
            if now - session.updated_at > timeout
        ]

        for sid in expired:
            del self.sessions[sid]

        if len(self.sessions) >= self.max_sessions:
            by_age = sorted(self.sessions.values(), key=lambda s: s.updated_at)
            overflow = len(self.sessions) - self.max_sessions + 1
            for session in by_age[:overflow]:
                del self.sessions[session.session_id]


# Глобальні менеджери
app_state = AppState()
session_manager = SessionManager(
    max_sessions=config.max_sessions,
    session_timeout_minutes=config.session_timeout_minutes,
)


# Dependency functions для FastAPI
def get_app_state() -> AppState:
    """Dependency: стан застосунку (ростер завантажується за потреби)"""
    if not app_state.is_initialized:
        try:
            app_state.initialize(data_dir=config.data_dir)
        except DataUnavailableError as e:
            raise HTTPException(status_code=503, detail=str(e))
    return app_state


def get_sessions() -> SessionManager:
    """Dependency: отримати менеджер сесій"""
    return session_manager


def get_game_session(session_id: str) -> GameSession:
    """Dependency: сесія за id (404, якщо немає)"""
    session = session_manager.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return session
