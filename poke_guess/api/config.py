"""
PokeGuess — API Configuration

Налаштування FastAPI сервера та шлях до даних.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class APIConfig:
    """Конфігурація API сервера"""

    # Сервер
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True
    reload: bool = True

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # Директорія з агрегованими даними (None → вбудований ростер)
    data_dir: Optional[str] = None

    # Мова питань за замовчуванням
    default_language: str = "en"

    # Сесії
    max_sessions: int = 1000
    session_timeout_minutes: int = 60

    # API
    api_prefix: str = "/api"
    api_version: str = "v1"
    api_title: str = "PokeGuess API"
    api_description: str = "Гра: вгадай покемона за 20 питань"

    def __post_init__(self):
        """Автоматичне визначення директорії даних"""
        if self.data_dir is None:
            current = Path(__file__).parent.parent.parent

            possible_roots = [
                current,
                Path.cwd(),
            ]

            for root in possible_roots:
                data_dir = root / "data" / "aggregated"
                if (data_dir / "minimal-pokemon.json").exists():
                    self.data_dir = str(data_dir)
                    break

    @property
    def router_prefix(self) -> str:
        return f"{self.api_prefix}/{self.api_version}"

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Створити конфігурацію з environment variables"""
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            debug=os.getenv("API_DEBUG", "true").lower() == "true",
            data_dir=os.getenv("DATA_DIR"),
            default_language=os.getenv("DEFAULT_LANGUAGE", "en"),
            max_sessions=int(os.getenv("MAX_SESSIONS", "1000")),
            session_timeout_minutes=int(os.getenv("SESSION_TIMEOUT_MINUTES", "60")),
        )


# Глобальна конфігурація
config = APIConfig.from_env()
