"""
PokeGuess — Стратегії питань

Кожна стратегія відповідає одному виміру покемона і вміє:
- generate(): запропонувати питання для поточної популяції (або None)
- filter(): звузити популяцію за відповіддю yes / no / unknown
- explain(): пояснити, чому конкретний покемон не відповідає відповіді

Варіанти:
- NumericThresholdStrategy: вага, зріст ("важчий за X?")
- MembershipStrategy: тип, колір, покоління, слабкості, сильні сторони
- BooleanFlagStrategy: легендарний, міфічний, малюк
- EvolutionStrategy: "еволюціонує з" / "еволюціонує в"

Стратегії ніколи не кидають винятків на коректних даних:
відсутність корисного розбиття = None.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from poke_guess.schemas import AnswerType, Pokemon, Question, StrategyType

from .text import QuestionTextGenerator, format_tenths


class QuestionStrategy(ABC):
    """
    Базова стратегія питань.

    Підкласи реалізують generate() та matches(); filter() і split()
    спільні для всіх варіантів.
    """

    def __init__(
        self,
        strategy_type: StrategyType,
        text_generator: Optional[QuestionTextGenerator] = None
    ):
        self.strategy_type = strategy_type
        self.text_generator = text_generator or QuestionTextGenerator()

    @abstractmethod
    def generate(self, population: Sequence[Pokemon]) -> Optional[Question]:
        """Питання для популяції або None, якщо корисного питання немає"""

    @abstractmethod
    def matches(self, pokemon: Pokemon, question: Question) -> bool:
        """Чи відповідає покемон на питання "так" """

    @abstractmethod
    def explain(self, pokemon: Pokemon, question: Question, answer: AnswerType) -> str:
        """Пояснення невідповідності покемона відповіді гравця"""

    def filter(
        self,
        population: Sequence[Pokemon],
        question: Question,
        answer: AnswerType
    ) -> List[Pokemon]:
        """
        Звузити популяцію за відповіддю.

        Args:
            population: Поточні кандидати
            question: Питання цієї стратегії
            answer: yes → ті, що відповідають; no → решта; unknown → без змін

        Returns:
            Новий список (порядок зберігається)
        """
        answer = AnswerType.parse(answer)
        if not answer.is_decisive:
            return list(population)

        keep = answer is AnswerType.YES
        return [p for p in population if self.matches(p, question) == keep]

    def split(self, population: Sequence[Pokemon], question: Question) -> Tuple[int, int]:
        """Розміри (yes, no) популяції для питання"""
        yes_count = sum(1 for p in population if self.matches(p, question))
        return yes_count, len(population) - yes_count

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.strategy_type.value})"


class NumericThresholdStrategy(QuestionStrategy):
    """
    Питання "значення більше за поріг?".

    - n < 2: питання немає
    - n ≤ small_population_size: поріг = найменше значення, потім друге
      найменше; якщо обидва дають однобічне розбиття, питання немає
    - інакше: поріг = значення з індексом n // 2 відсортованої популяції

    yes ⇒ value > threshold, no ⇒ value <= threshold
    """

    def __init__(
        self,
        strategy_type: StrategyType,
        attribute: str,
        text_generator: Optional[QuestionTextGenerator] = None,
        small_population_size: int = 3
    ):
        super().__init__(strategy_type, text_generator)
        self.attribute = attribute
        self.small_population_size = small_population_size

    def _value(self, pokemon: Pokemon) -> int:
        return getattr(pokemon, self.attribute)

    def _make_question(self, threshold: int) -> Question:
        return Question(
            text=self.text_generator.question(self.strategy_type.value, threshold),
            strategy=self.strategy_type,
            threshold=threshold,
        )

    def generate(self, population: Sequence[Pokemon]) -> Optional[Question]:
        n = len(population)
        if n < 2:
            return None

        values = sorted(self._value(p) for p in population)

        if n <= self.small_population_size:
            for threshold in values[:2]:
                yes_count = sum(1 for v in values if v > threshold)
                if 0 < yes_count < n:
                    return self._make_question(threshold)
            return None

        return self._make_question(values[n // 2])

    def matches(self, pokemon: Pokemon, question: Question) -> bool:
        return self._value(pokemon) > question.threshold

    def explain(self, pokemon: Pokemon, question: Question, answer: AnswerType) -> str:
        return self.text_generator.reason(
            self.strategy_type.value,
            answer,
            name=pokemon.display_name,
            value=question.threshold,
            actual=format_tenths(self._value(pokemon)),
        )


class MembershipStrategy(QuestionStrategy):
    """
    Питання "чи належить покемон до категорії X?".

    Для кожного значення рахується кількість покемонів, що його мають
    (один раз на покемона). Обирається значення з кількістю, найближчою
    до n / 2; при рівності перемагає перше знайдене.

    Приклад:
        strategy = MembershipStrategy(StrategyType.TYPE, lambda p: p.types)
        question = strategy.generate(population)
        print(question.category)  # 'fire'
    """

    def __init__(
        self,
        strategy_type: StrategyType,
        values_of: Callable[[Pokemon], Iterable[str]],
        text_generator: Optional[QuestionTextGenerator] = None
    ):
        super().__init__(strategy_type, text_generator)
        self.values_of = values_of

    def _values(self, pokemon: Pokemon) -> List[str]:
        values: List[str] = []
        for value in self.values_of(pokemon):
            if value not in values:
                values.append(value)
        return values

    def count_values(self, population: Sequence[Pokemon]) -> Dict[str, int]:
        """Частоти значень у порядку першої появи"""
        counts: Dict[str, int] = {}
        for pokemon in population:
            for value in self._values(pokemon):
                counts[value] = counts.get(value, 0) + 1
        return counts

    def generate(self, population: Sequence[Pokemon]) -> Optional[Question]:
        counts = self.count_values(population)
        if not counts:
            return None

        half = len(population) / 2
        best_value = None
        best_distance = None

        for value, count in counts.items():
            distance = abs(count - half)
            if best_distance is None or distance < best_distance:
                best_value = value
                best_distance = distance

        return Question(
            text=self.text_generator.question(self.strategy_type.value, best_value),
            strategy=self.strategy_type,
            category=best_value,
        )

    def matches(self, pokemon: Pokemon, question: Question) -> bool:
        return question.category in self._values(pokemon)

    def explain(self, pokemon: Pokemon, question: Question, answer: AnswerType) -> str:
        return self.text_generator.reason(
            self.strategy_type.value,
            answer,
            name=pokemon.display_name,
            value=question.category,
            actual=", ".join(self._values(pokemon)) or "-",
        )


class BooleanFlagStrategy(QuestionStrategy):
    """Питання про прапорець (legendary / mythical / baby); лише якщо обидві частини непорожні"""

    def __init__(
        self,
        strategy_type: StrategyType,
        attribute: str,
        text_generator: Optional[QuestionTextGenerator] = None
    ):
        super().__init__(strategy_type, text_generator)
        self.attribute = attribute

    def generate(self, population: Sequence[Pokemon]) -> Optional[Question]:
        flagged = sum(1 for p in population if getattr(p, self.attribute))
        if flagged == 0 or flagged == len(population):
            return None

        return Question(
            text=self.text_generator.question(self.strategy_type.value),
            strategy=self.strategy_type,
            flag=True,
        )

    def matches(self, pokemon: Pokemon, question: Question) -> bool:
        return bool(getattr(pokemon, self.attribute))

    def explain(self, pokemon: Pokemon, question: Question, answer: AnswerType) -> str:
        return self.text_generator.reason(
            self.strategy_type.value, answer, name=pokemon.display_name
        )


class EvolutionStrategy(QuestionStrategy):
    """
    Питання про еволюцію. Два підвиди:
    - evolved_from: покемон еволюціонує з іншого (is_evolved)
    - evolves_into: з покемона еволюціонує інший (has_evolution)

    Обирається підвид з меншим |yes - no|; при рівності evolved_from.
    Якщо обране розбиття однобічне, питання немає.
    """

    EVOLVED_FROM = "evolved_from"
    EVOLVES_INTO = "evolves_into"

    def __init__(self, text_generator: Optional[QuestionTextGenerator] = None):
        super().__init__(StrategyType.EVOLUTION, text_generator)

    @classmethod
    def _check(cls, pokemon: Pokemon, category: str) -> bool:
        if category == cls.EVOLVED_FROM:
            return pokemon.is_evolved
        if category == cls.EVOLVES_INTO:
            return pokemon.has_evolution
        raise ValueError(f"Unknown evolution question category: {category!r}")

    def generate(self, population: Sequence[Pokemon]) -> Optional[Question]:
        n = len(population)
        best_category = None
        best_yes = 0
        best_diff = None

        for category in (self.EVOLVED_FROM, self.EVOLVES_INTO):
            yes_count = sum(1 for p in population if self._check(p, category))
            diff = abs(yes_count - (n - yes_count))
            if best_diff is None or diff < best_diff:
                best_category = category
                best_yes = yes_count
                best_diff = diff

        if best_yes == 0 or best_yes == n:
            return None

        return Question(
            text=self.text_generator.question(best_category),
            strategy=self.strategy_type,
            category=best_category,
        )

    def matches(self, pokemon: Pokemon, question: Question) -> bool:
        return self._check(pokemon, question.category)

    def _kind(self, question: Question) -> str:
        return question.category

    def explain(self, pokemon: Pokemon, question: Question, answer: AnswerType) -> str:
        actual = None
        if pokemon.evolves_from:
            actual = pokemon.evolves_from[:1].upper() + pokemon.evolves_from[1:]

        return self.text_generator.reason(
            self._kind(question), answer, name=pokemon.display_name, actual=actual
        )
