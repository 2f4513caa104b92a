"""PokeGuess — Модуль конфігурації"""
from .settings import (
    PokeGuessConfig,
    get_default_config,
    QuestionEngineConfig,
    DataConfig,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "PokeGuessConfig",
    "get_default_config",
    "QuestionEngineConfig",
    "DataConfig",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
