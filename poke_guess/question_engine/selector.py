"""
PokeGuess — Вибір питання

QuestionSelector обирає питання з найрівнішим розбиттям популяції.

Алгоритм:
1. Популяція ≤ 1 або вичерпано бюджет питань → зупинка
2. Кандидати = стратегії, тип яких ще не використано в цьому раунді
   (якщо таких немає, облік використаних типів скидається)
3. Для кожного кандидата: пропускаємо None, вже задані питання
   (ключ (тип, текст)) та однобічні розбиття
4. Score = |yes - no|, мінімум перемагає; при рівності перший у реєстрі
5. Нічого не знайдено → скидаємо облік типів і повторюємо
   (не більше max_attempts спроб; невдалий прохід по всьому реєстру
   завершує спроби)
6. Успіх → тип позначається використаним, ключ питання записується
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple

from poke_guess.config import PokeGuessConfig
from poke_guess.schemas import CompletionReason, Pokemon, Question, StrategyType

from .registry import StrategyRegistry
from .strategies import QuestionStrategy
from .text import QuestionTextGenerator


@dataclass
class SelectionResult:
    """Результат вибору питання"""
    question: Optional[Question] = None
    yes_count: int = 0
    no_count: int = 0

    # Кількість проходів по реєстру
    attempts: int = 0

    # Заповнюється, якщо питання немає
    stop_reason: Optional[CompletionReason] = None

    @property
    def found(self) -> bool:
        return self.question is not None

    @property
    def score(self) -> int:
        return abs(self.yes_count - self.no_count)


class QuestionSelector:
    """
    Вибір найкращого питання для популяції.

    Приклад використання:
        selector = QuestionSelector(StrategyRegistry.default())

        used_types, asked_keys = set(), set()
        result = selector.select(population, used_types, asked_keys, questions_asked=0)

        if result.found:
            print(result.question.text, result.yes_count, result.no_count)
        else:
            print(result.stop_reason)
    """

    def __init__(
        self,
        registry: Optional[StrategyRegistry] = None,
        max_questions: int = 20,
        max_attempts: int = 10,
        verbose: bool = False
    ):
        """
        Args:
            registry: Реєстр стратегій (за замовчуванням стандартний)
            max_questions: Бюджет питань за гру
            max_attempts: Максимум проходів зі скиданням типів
            verbose: Виводити хід вибору
        """
        self.registry = registry or StrategyRegistry.default()
        self.max_questions = max_questions
        self.max_attempts = max_attempts
        self.verbose = verbose

    @classmethod
    def from_config(
        cls,
        config: PokeGuessConfig,
        registry: Optional[StrategyRegistry] = None
    ) -> "QuestionSelector":
        """Створити з конфігурації"""
        qe = config.question_engine
        if registry is None:
            registry = StrategyRegistry.default(
                QuestionTextGenerator(qe.language),
                small_population_size=qe.small_population_size,
            )
        return cls(
            registry=registry,
            max_questions=qe.max_questions,
            max_attempts=qe.max_selection_attempts,
            verbose=config.verbose,
        )

    def select(
        self,
        population: Sequence[Pokemon],
        used_types: Set[StrategyType],
        asked_keys: Set[Tuple[str, str]],
        questions_asked: int = 0
    ) -> SelectionResult:
        """
        Обрати наступне питання.

        При успіху змінює передані used_types та asked_keys.

        Args:
            population: Поточні кандидати
            used_types: Типи стратегій, використані в цьому раунді
            asked_keys: Ключі (тип, текст) усіх заданих питань
            questions_asked: Скільки питань уже задано

        Returns:
            SelectionResult з питанням або причиною зупинки
        """
        n = len(population)

        if n == 0:
            return SelectionResult(stop_reason=CompletionReason.NO_CANDIDATES)
        if n == 1:
            return SelectionResult(stop_reason=CompletionReason.SINGLE_CANDIDATE)
        if questions_asked >= self.max_questions:
            if self.verbose:
                print(f"⚠ Question limit reached ({self.max_questions})")
            return SelectionResult(stop_reason=CompletionReason.QUESTION_LIMIT)

        attempts = 0
        while attempts < self.max_attempts:
            attempts += 1

            candidates = [s for s in self.registry if s.strategy_type not in used_types]
            if not candidates:
                used_types.clear()
                candidates = list(self.registry)

            if self.verbose:
                print(f"\n🔍 Attempt {attempts}: {len(candidates)} strategies, population {n}")

            best = self._scan(population, candidates, asked_keys)

            if best is not None:
                strategy, question, yes_count, no_count = best
                used_types.add(strategy.strategy_type)
                asked_keys.add(question.key)

                if self.verbose:
                    print(f"✓ Selected: {question.text} (yes={yes_count}, no={no_count})")

                return SelectionResult(
                    question=question,
                    yes_count=yes_count,
                    no_count=no_count,
                    attempts=attempts,
                )

            # Повний реєстр нічого не дав, повтор не допоможе
            if len(candidates) == len(self.registry):
                break

            used_types.clear()

        if self.verbose:
            print(f"⚠ No informative question after {attempts} attempt(s)")

        return SelectionResult(
            attempts=attempts,
            stop_reason=CompletionReason.NO_INFORMATIVE_QUESTION,
        )

    def _scan(
        self,
        population: Sequence[Pokemon],
        candidates: List[QuestionStrategy],
        asked_keys: Set[Tuple[str, str]]
    ) -> Optional[Tuple[QuestionStrategy, Question, int, int]]:
        """Один прохід по кандидатах; найкраще (стратегія, питання, yes, no) або None"""
        best = None
        best_score = None

        for strategy in candidates:
            name = strategy.strategy_type.value
            question = strategy.generate(population)

            if question is None:
                if self.verbose:
                    print(f"   - {name}: no question")
                continue

            if question.key in asked_keys:
                if self.verbose:
                    print(f"   - {name}: already asked '{question.text}'")
                continue

            yes_count, no_count = strategy.split(population, question)
            if yes_count == 0 or no_count == 0:
                if self.verbose:
                    print(f"   - {name}: one-sided split ({yes_count}/{no_count})")
                continue

            score = abs(yes_count - no_count)
            if self.verbose:
                print(f"   - {name}: '{question.text}' yes={yes_count} no={no_count} score={score}")

            if best_score is None or score < best_score:
                best = (strategy, question, yes_count, no_count)
                best_score = score

        return best
