"""
PokeGuess — Схеми питань

Pydantic моделі для:
- StrategyType: вимір, за яким поставлено питання
- AnswerType: відповідь гравця (yes / no / unknown)
- Question: одне питання так/ні
- AnsweredQuestion: питання разом з відповіддю
"""

from enum import Enum
from typing import Optional, Tuple, Union
from pydantic import BaseModel, Field, model_validator


class StrategyType(str, Enum):
    """Тип стратегії (порядок = порядок реєстру)"""
    WEIGHT = "weight"
    HEIGHT = "height"
    TYPE = "type"
    COLOR = "color"
    GENERATION = "generation"
    LEGENDARY = "legendary"
    MYTHICAL = "mythical"
    BABY = "baby"
    EVOLUTION = "evolution"
    WEAKNESS = "weakness"
    STRENGTH = "strength"


_ANSWER_MAP = {
    # English
    "yes": "yes",
    "y": "yes",
    "true": "yes",
    "1": "yes",
    "no": "no",
    "n": "no",
    "false": "no",
    "0": "no",
    "unknown": "unknown",
    "u": "unknown",
    "skip": "unknown",
    "?": "unknown",
    "don't know": "unknown",

    # Ukrainian
    "так": "yes",
    "ні": "no",
    "не знаю": "unknown",
    "пропустити": "unknown",
}


class AnswerType(str, Enum):
    """Тип відповіді на питання"""
    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, answer: Union[str, bool, int, "AnswerType"]) -> "AnswerType":
        """
        Парсити відповідь у AnswerType.

        Args:
            answer: AnswerType, bool, 1/0 або текст ("yes", "так", "skip" ...)

        Returns:
            AnswerType

        Raises:
            ValueError: якщо текст або число не розпізнано
        """
        if isinstance(answer, cls):
            return answer

        if isinstance(answer, bool):
            return cls.YES if answer else cls.NO

        if isinstance(answer, int):
            if answer == 1:
                return cls.YES
            elif answer == 0:
                return cls.NO
            raise ValueError(f"Unrecognised answer: {answer!r}")

        if isinstance(answer, str):
            value = _ANSWER_MAP.get(answer.strip().lower())
            if value is not None:
                return cls(value)

        raise ValueError(f"Unrecognised answer: {answer!r}")

    @property
    def is_decisive(self) -> bool:
        """Чи звужує відповідь популяцію (yes / no)"""
        return self is not AnswerType.UNKNOWN


class Question(BaseModel):
    """
    Питання так/ні для гравця.

    Залежно від стратегії заповнюється не більше одного з полів
    threshold / category / flag.
    """
    text: str = Field(..., description="Текст питання для відображення")
    strategy: StrategyType = Field(..., description="Стратегія, що згенерувала питання")

    threshold: Optional[int] = Field(default=None, description="Числовий поріг")
    category: Optional[str] = Field(default=None, description="Категоріальне значення")
    flag: Optional[bool] = Field(default=None, description="Маркер булевого прапорця")

    @model_validator(mode='after')
    def check_single_value(self) -> "Question":
        values = [v for v in (self.threshold, self.category, self.flag) if v is not None]
        if len(values) > 1:
            raise ValueError("question may carry at most one of threshold/category/flag")
        return self

    @property
    def key(self) -> Tuple[str, str]:
        """Ключ для виявлення повторів: (тип стратегії, текст)"""
        return (self.strategy.value, self.text)

    def __repr__(self) -> str:
        return f"Question({self.strategy.value}: '{self.text}')"

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "text": "Is your Pokémon heavier than 6.9 kg?",
                "strategy": "weight",
                "threshold": 69,
            }
        }


class AnsweredQuestion(BaseModel):
    """Запис питання-відповідь в історії гри"""
    question: Question
    response: AnswerType

    class Config:
        frozen = True
