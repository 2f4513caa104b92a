"""
PokeGuess — Модуль Question Engine

Генерує питання так/ні та обирає те, що ділить популяцію
кандидатів найрівніше (score = |yes - no|).

Компоненти:
- QuestionStrategy та варіанти: генерація питань і фільтрація популяції
- StrategyRegistry: Впорядкований реєстр стратегій
- QuestionSelector: Вибір питання без повторів і однобічних розбиттів
- QuestionTextGenerator: Тексти питань (en / uk)

Приклад використання:
    from poke_guess.question_engine import QuestionSelector, StrategyRegistry
    from poke_guess.schemas import AnswerType

    registry = StrategyRegistry.default()
    selector = QuestionSelector(registry)

    used_types, asked_keys = set(), set()
    result = selector.select(population, used_types, asked_keys)

    if result.found:
        print(f"Питання: {result.question.text}")

        strategy = registry.get(result.question.strategy)
        population = strategy.filter(population, result.question, AnswerType.YES)
"""

from .text import (
    QuestionTextGenerator,
    format_tenths,
)

from .strategies import (
    QuestionStrategy,
    NumericThresholdStrategy,
    MembershipStrategy,
    BooleanFlagStrategy,
    EvolutionStrategy,
)

from .registry import StrategyRegistry

from .selector import (
    QuestionSelector,
    SelectionResult,
)


__all__ = [
    # Text
    "QuestionTextGenerator",
    "format_tenths",

    # Strategies
    "QuestionStrategy",
    "NumericThresholdStrategy",
    "MembershipStrategy",
    "BooleanFlagStrategy",
    "EvolutionStrategy",

    # Registry
    "StrategyRegistry",

    # Selector
    "QuestionSelector",
    "SelectionResult",
]
