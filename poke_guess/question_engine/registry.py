"""
PokeGuess — Реєстр стратегій

Впорядкована таблиця StrategyType → QuestionStrategy.
Селектор обходить реєстр у порядку реєстрації; новий вимір
додається одним викликом register().
"""

from typing import Dict, Iterator, List, Optional

from poke_guess.schemas import StrategyType

from .strategies import (
    QuestionStrategy,
    NumericThresholdStrategy,
    MembershipStrategy,
    BooleanFlagStrategy,
    EvolutionStrategy,
)
from .text import QuestionTextGenerator


class StrategyRegistry:
    """
    Реєстр стратегій питань.

    Приклад використання:
        registry = StrategyRegistry.default()

        for strategy in registry:
            question = strategy.generate(population)

        weight = registry.get(StrategyType.WEIGHT)
    """

    def __init__(self):
        self._strategies: Dict[StrategyType, QuestionStrategy] = {}

    def register(self, strategy: QuestionStrategy) -> "StrategyRegistry":
        """Додати (або замінити) стратегію для її типу"""
        self._strategies[strategy.strategy_type] = strategy
        return self

    def get(self, strategy_type: StrategyType) -> QuestionStrategy:
        """
        Стратегія за типом.

        Raises:
            KeyError: тип не зареєстровано
        """
        return self._strategies[StrategyType(strategy_type)]

    @property
    def types(self) -> List[StrategyType]:
        return list(self._strategies.keys())

    def __iter__(self) -> Iterator[QuestionStrategy]:
        return iter(list(self._strategies.values()))

    def __len__(self) -> int:
        return len(self._strategies)

    def __contains__(self, strategy_type: StrategyType) -> bool:
        return strategy_type in self._strategies

    @classmethod
    def default(
        cls,
        text_generator: Optional[QuestionTextGenerator] = None,
        small_population_size: int = 3
    ) -> "StrategyRegistry":
        """
        Стандартний набір стратегій у порядку StrategyType.

        Args:
            text_generator: Генератор текстів (за замовчуванням англійська)
            small_population_size: Межа "малої" популяції для числових стратегій
        """
        text_gen = text_generator or QuestionTextGenerator()
        registry = cls()

        registry.register(NumericThresholdStrategy(
            StrategyType.WEIGHT, "weight", text_gen, small_population_size
        ))
        registry.register(NumericThresholdStrategy(
            StrategyType.HEIGHT, "height", text_gen, small_population_size
        ))
        registry.register(MembershipStrategy(StrategyType.TYPE, lambda p: p.types, text_gen))
        registry.register(MembershipStrategy(StrategyType.COLOR, lambda p: [p.color], text_gen))
        registry.register(MembershipStrategy(
            StrategyType.GENERATION, lambda p: [str(p.generation)], text_gen
        ))
        registry.register(BooleanFlagStrategy(StrategyType.LEGENDARY, "is_legendary", text_gen))
        registry.register(BooleanFlagStrategy(StrategyType.MYTHICAL, "is_mythical", text_gen))
        registry.register(BooleanFlagStrategy(StrategyType.BABY, "is_baby", text_gen))
        registry.register(EvolutionStrategy(text_gen))
        registry.register(MembershipStrategy(
            StrategyType.WEAKNESS, lambda p: p.weaknesses, text_gen
        ))
        registry.register(MembershipStrategy(
            StrategyType.STRENGTH, lambda p: p.strengths, text_gen
        ))

        return registry

    def __repr__(self) -> str:
        return f"StrategyRegistry({[t.value for t in self._strategies]})"
