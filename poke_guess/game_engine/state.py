"""
PokeGuess — Стан гри

GameState зберігає стан однієї гри:
- Поточне питання (або None)
- Історію питань та відповідей
- Поточних кандидатів
- Статус завершення та здогадку
- Облік використаних типів стратегій і заданих питань
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Set, Tuple
import uuid

from poke_guess.schemas import (
    AnswerType,
    AnsweredQuestion,
    CompletionReason,
    GameStateSnapshot,
    Pokemon,
    Question,
    StrategyType,
)


@dataclass
class GameState:
    """
    Стан гри. Належить лише GameEngine.

    Приклад:
        state = GameState(possible=roster)

        state.current_question = question
        state.record_answer(question, AnswerType.YES)

        snapshot = state.to_snapshot()
        print(snapshot.remaining_count)
    """

    # Ідентифікатор
    session_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])

    # Питання
    current_question: Optional[Question] = None
    answers: List[AnsweredQuestion] = field(default_factory=list)

    # Кандидати (замінюються цілком при фільтрації)
    possible: List[Pokemon] = field(default_factory=list)

    # Завершення
    is_complete: bool = False
    guessed: Optional[Pokemon] = None
    completion_reason: Optional[CompletionReason] = None

    # Облік питань
    used_strategy_types: Set[StrategyType] = field(default_factory=set)
    asked_keys: Set[Tuple[str, str]] = field(default_factory=set)

    # Timestamps
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def questions_asked(self) -> int:
        return len(self.answers)

    @property
    def remaining_count(self) -> int:
        return len(self.possible)

    @property
    def is_awaiting_answer(self) -> bool:
        return not self.is_complete and self.current_question is not None

    def record_answer(self, question: Question, response: AnswerType) -> AnsweredQuestion:
        """Додати запис в історію (лише додавання)"""
        entry = AnsweredQuestion(question=question, response=response)
        self.answers.append(entry)
        self.touch()
        return entry

    def complete(self, reason: CompletionReason, guessed: Optional[Pokemon]) -> None:
        """Перейти в завершений стан"""
        self.is_complete = True
        self.current_question = None
        self.completion_reason = reason
        self.guessed = guessed
        self.touch()

    def touch(self) -> None:
        self.updated_at = datetime.now()

    def to_snapshot(self) -> GameStateSnapshot:
        """Нова копія стану для UI"""
        return GameStateSnapshot(
            current_question=self.current_question,
            answered_history=list(self.answers),
            remaining_count=self.remaining_count,
            is_complete=self.is_complete,
            guessed_entity=self.guessed.model_copy(deep=True) if self.guessed else None,
            completion_reason=self.completion_reason,
            questions_asked=self.questions_asked,
        )
