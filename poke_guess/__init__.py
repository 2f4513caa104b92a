"""
PokeGuess — Гра "вгадай покемона"

Архітектура: Стратегії питань + Вибір найрівнішого розбиття + Машина станів гри

Модулі:
- config: Конфігурація системи
- schemas: Pydantic моделі (Pokemon, Question, знімки стану)
- dataset: Провайдери ростера, таблиця типів, індекс еволюцій
- question_engine: Стратегії, реєстр та вибір питань
- game_engine: Цикл гри та пояснення виключень
- api: Backend API
"""

__version__ = "1.0.0"

from .config import PokeGuessConfig, get_default_config
