"""
PokeGuess — Пояснення виключення

EliminationExplainer відповідає на питання "чому гра не вгадала X?":
знаходить покемона за назвою та проходить історію відповідей,
записуючи кожне питання, фільтр якого відкинув би цього покемона.
"""

from typing import List, Optional, Sequence

from poke_guess.question_engine import StrategyRegistry
from poke_guess.schemas import (
    AnsweredQuestion,
    EliminationExplanation,
    EliminationReason,
    Pokemon,
)


class EliminationExplainer:
    """
    Пояснювач виключення покемонів.

    Приклад використання:
        explainer = EliminationExplainer(registry)

        result = explainer.explain("Pikachu", roster, history)
        if result.found:
            for reason in result.eliminated_by:
                print(f"{reason.question_text} → {reason.response.value}: {reason.reason}")
    """

    def __init__(self, registry: StrategyRegistry):
        self.registry = registry

    @staticmethod
    def find(name: str, roster: Sequence[Pokemon]) -> Optional[Pokemon]:
        """Точний пошук за назвою без урахування регістру"""
        needle = name.strip().lower()
        if not needle:
            return None
        for pokemon in roster:
            if pokemon.name == needle:
                return pokemon
        return None

    def explain(
        self,
        name: str,
        roster: Sequence[Pokemon],
        history: Sequence[AnsweredQuestion],
        remaining: Optional[Sequence[Pokemon]] = None
    ) -> EliminationExplanation:
        """
        Пояснити, чому покемон був виключений.

        Args:
            name: Назва, введена гравцем
            roster: Повний ростер
            history: Історія питань та відповідей
            remaining: Поточні кандидати (для still_possible)

        Returns:
            EliminationExplanation (порожній eliminated_by — теж коректний результат)
        """
        pokemon = self.find(name, roster)
        if pokemon is None:
            return EliminationExplanation(found=False)

        reasons: List[EliminationReason] = []

        for entry in history:
            # "Не знаю" ніколи не виключає
            if not entry.response.is_decisive:
                continue

            strategy = self.registry.get(entry.question.strategy)
            if strategy.filter([pokemon], entry.question, entry.response):
                continue

            reasons.append(EliminationReason(
                question_text=entry.question.text,
                response=entry.response,
                reason=strategy.explain(pokemon, entry.question, entry.response),
            ))

        still_possible = False
        if remaining is not None:
            still_possible = any(p.id == pokemon.id for p in remaining)

        return EliminationExplanation(
            found=True,
            matched_entity=pokemon.model_copy(deep=True),
            eliminated_by=reasons,
            still_possible=still_possible,
        )
