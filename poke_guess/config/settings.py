"""
PokeGuess — Налаштування системи

Всі параметри гри зібрані в dataclass-и для:
- Типізації
- Легкого доступу через config.question_engine.max_questions
- Серіалізації в YAML/JSON
"""

from dataclasses import dataclass, field
from typing import Any, Dict


# =============================================================================
# QUESTION ENGINE CONFIGURATION
# =============================================================================

@dataclass
class QuestionEngineConfig:
    """Параметри механізму питань"""

    max_questions: int = 20             # Бюджет питань за гру
    max_selection_attempts: int = 10    # Спроби вибору з повторним скиданням типів
    small_population_size: int = 3      # До цього розміру поріг за найменшим значенням

    # Мова текстів питань ("en" або "uk")
    language: str = "en"


# =============================================================================
# DATA CONFIGURATION
# =============================================================================

@dataclass
class DataConfig:
    """Шляхи до агрегованих даних"""

    data_dir: str = "data/aggregated"
    minimal_file: str = "minimal-pokemon.json"
    types_file: str = "all-types.json"
    evolution_chains_file: str = "all-evolution-chains.json"


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class PokeGuessConfig:
    """
    Головна конфігурація PokeGuess

    Приклад використання:
        config = PokeGuessConfig()
        print(config.question_engine.max_questions)  # 20
        print(config.data.data_dir)                  # data/aggregated
    """

    # Метадані
    version: str = "1.0.0"
    project_name: str = "PokeGuess"

    # Компоненти
    question_engine: QuestionEngineConfig = field(default_factory=QuestionEngineConfig)
    data: DataConfig = field(default_factory=DataConfig)

    # Діагностичний вивід
    verbose: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PokeGuessConfig":
        """Створити конфігурацію зі словника (наприклад, з YAML)"""
        data = dict(data or {})
        question_engine = QuestionEngineConfig(**data.pop("question_engine", {}) or {})
        data_config = DataConfig(**data.pop("data", {}) or {})

        return cls(
            question_engine=question_engine,
            data=data_config,
            **data
        )


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> PokeGuessConfig:
    """Отримати конфігурацію за замовчуванням"""
    return PokeGuessConfig()
