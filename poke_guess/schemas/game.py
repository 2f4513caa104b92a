"""
PokeGuess — Схеми стану гри

Pydantic моделі для:
- CompletionReason: причина завершення гри
- GameStateSnapshot: знімок стану для UI (копія, а не посилання)
- EliminationReason / EliminationExplanation: пояснення виключення
- PokemonSuggestion: легка проєкція для автодоповнення
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

from .pokemon import Pokemon
from .question import AnswerType, AnsweredQuestion, Question


class CompletionReason(str, Enum):
    """Причина завершення гри"""
    SINGLE_CANDIDATE = "single_candidate"               # Залишився один кандидат
    NO_CANDIDATES = "no_candidates"                     # Кандидатів не залишилось
    QUESTION_LIMIT = "question_limit"                   # Вичерпано бюджет питань
    NO_INFORMATIVE_QUESTION = "no_informative_question" # Немає корисних питань


class GameStateSnapshot(BaseModel):
    """
    Знімок стану гри.

    Повертається як нова копія при кожному виклику; зміна знімка
    не впливає на внутрішній стан движка.
    """
    current_question: Optional[Question] = None
    answered_history: List[AnsweredQuestion] = Field(default_factory=list)
    remaining_count: int = 0
    is_complete: bool = False
    guessed_entity: Optional[Pokemon] = None
    completion_reason: Optional[CompletionReason] = None
    questions_asked: int = 0


class EliminationReason(BaseModel):
    """Одне питання, що виключило покемона"""
    question_text: str
    response: AnswerType
    reason: str = Field(..., description="Пояснення для людини")


class EliminationExplanation(BaseModel):
    """Результат пояснення: чому покемона було виключено"""
    found: bool
    matched_entity: Optional[Pokemon] = None
    eliminated_by: List[EliminationReason] = Field(default_factory=list)
    still_possible: bool = Field(
        default=False,
        description="Чи залишається покемон серед кандидатів"
    )


class PokemonSuggestion(BaseModel):
    """Проєкція для автодоповнення"""
    id: int
    name: str
    display_name: str
