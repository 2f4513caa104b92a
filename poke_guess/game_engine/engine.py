"""
PokeGuess — Движок гри

GameEngine керує циклом гри:
1. start_new_game(): повний ростер → перше питання
2. answer_question(): відповідь → фільтрація → наступне питання
3. Завершення: один кандидат / немає кандидатів / бюджет питань /
   немає корисних питань → здогадка = перший кандидат

Стани:
    NotStarted → AwaitingAnswer ⇄ (цикл) → Complete

Єдина межа вводу-виводу: initialize() (завантаження ростера).
Після цього всі операції синхронні та детерміновані.
"""

from typing import Any, Dict, List, Optional, Union

from poke_guess.config import PokeGuessConfig, get_default_config
from poke_guess.dataset import DataProvider, DataUnavailableError, EvolutionIndex
from poke_guess.question_engine import (
    QuestionSelector,
    QuestionTextGenerator,
    StrategyRegistry,
)
from poke_guess.schemas import (
    AnswerType,
    CompletionReason,
    EliminationExplanation,
    GameStateSnapshot,
    Pokemon,
    PokemonSuggestion,
)

from .explainer import EliminationExplainer
from .state import GameState


class GameEngine:
    """
    Движок гри "вгадай покемона".

    Приклад використання:
        from poke_guess.dataset import SampleDataProvider

        engine = GameEngine(SampleDataProvider())
        snapshot = engine.start_new_game()

        while not snapshot.is_complete:
            print(snapshot.current_question.text)
            engine.answer_question(input("> "))
            snapshot = engine.get_game_state()

        print(f"Ваш покемон: {snapshot.guessed_entity.display_name}")
    """

    def __init__(
        self,
        provider: DataProvider,
        config: Optional[PokeGuessConfig] = None,
        registry: Optional[StrategyRegistry] = None,
        selector: Optional[QuestionSelector] = None
    ):
        """
        Args:
            provider: Провайдер ростера
            config: Конфігурація (за замовчуванням get_default_config())
            registry: Реєстр стратегій (за замовчуванням з config)
            selector: Селектор питань (за замовчуванням з config)
        """
        self.provider = provider
        self.config = config or get_default_config()
        self.verbose = self.config.verbose

        if registry is None:
            qe = self.config.question_engine
            registry = StrategyRegistry.default(
                QuestionTextGenerator(qe.language),
                small_population_size=qe.small_population_size,
            )
        self.registry = registry
        self.selector = selector or QuestionSelector.from_config(self.config, registry)
        self.explainer = EliminationExplainer(self.registry)

        self._roster: Optional[List[Pokemon]] = None
        self._evolution_index: Optional[EvolutionIndex] = None
        self._state: Optional[GameState] = None

    # === Завантаження ===

    @property
    def is_initialized(self) -> bool:
        return self._roster is not None

    def initialize(self) -> List[Pokemon]:
        """
        Завантажити ростер (один раз).

        Raises:
            DataUnavailableError: провайдер не надав даних
        """
        if self._roster is None:
            roster = self.provider.load_entities()
            if not roster:
                raise DataUnavailableError("Data provider returned an empty roster")

            self._roster = list(roster)
            self._evolution_index = None

            if self.verbose:
                print(f"✓ Engine initialized: {len(self._roster)} Pokemon")

        return self._roster

    # === Цикл гри ===

    @property
    def state(self) -> Optional[GameState]:
        return self._state

    def start_new_game(self) -> GameStateSnapshot:
        """
        Почати нову гру (попередня гра відкидається).

        Raises:
            DataUnavailableError: ростер недоступний; попередній стан не змінюється
        """
        roster = self.initialize()

        self._state = GameState(possible=list(roster))

        if self.verbose:
            print(f"\n🎮 New game {self._state.session_id}: {len(roster)} candidates")

        self._ask_next_question()
        return self.get_game_state()

    def answer_question(self, response: Union[AnswerType, str, bool, int]) -> bool:
        """
        Обробити відповідь на поточне питання.

        Args:
            response: yes / no / unknown (див. AnswerType.parse)

        Returns:
            False, якщо гра не почата, завершена або питання немає (no-op)

        Raises:
            ValueError: відповідь не розпізнано
        """
        state = self._state
        if state is None or not state.is_awaiting_answer:
            return False

        answer = AnswerType.parse(response)
        question = state.current_question
        state.record_answer(question, answer)

        if answer.is_decisive:
            strategy = self.registry.get(question.strategy)
            before = state.remaining_count
            state.possible = strategy.filter(state.possible, question, answer)

            if self.verbose:
                print(f"   {question.text} → {answer.value}: {before} → {state.remaining_count}")

        state.current_question = None
        self._ask_next_question()
        return True

    def _ask_next_question(self) -> None:
        state = self._state
        result = self.selector.select(
            state.possible,
            state.used_strategy_types,
            state.asked_keys,
            state.questions_asked,
        )

        if result.found:
            state.current_question = result.question
            state.touch()
        else:
            self._complete(result.stop_reason)

    def _complete(self, reason: CompletionReason) -> None:
        state = self._state
        guessed = None

        if state.possible:
            first = state.possible[0]
            guessed = self.provider.load_entity_by_id(first.id) or first

        state.complete(reason, guessed)

        if self.verbose:
            name = guessed.display_name if guessed else "None"
            print(f"🏁 Game complete ({reason.value}): {name}")

    # === Стан ===

    def get_game_state(self) -> GameStateSnapshot:
        """Знімок стану (нова копія при кожному виклику)"""
        if self._state is None:
            return GameStateSnapshot()
        return self._state.to_snapshot()

    def get_remaining_count(self) -> int:
        return self._state.remaining_count if self._state else 0

    def is_game_complete(self) -> bool:
        return bool(self._state and self._state.is_complete)

    # === Пояснення та довідка ===

    def explain_elimination(self, name: str) -> EliminationExplanation:
        """Чому покемон name не був вгаданий"""
        roster = self._roster or []
        history = self._state.answers if self._state else []
        remaining = self._state.possible if self._state else None
        return self.explainer.explain(name, roster, history, remaining)

    def get_all_pokemon(self) -> List[Pokemon]:
        return [p.model_copy(deep=True) for p in self.initialize()]

    def get_all_entities_for_suggestion(self) -> List[PokemonSuggestion]:
        """Легка проєкція ростера для автодоповнення"""
        return [
            PokemonSuggestion(id=p.id, name=p.name, display_name=p.display_name)
            for p in self.initialize()
        ]

    def search_suggestions(self, query: str, limit: int = 10) -> List[PokemonSuggestion]:
        """
        Підказки для автодоповнення.

        Args:
            query: Частина назви (мінімум 2 символи)
            limit: Максимум результатів
        """
        needle = query.strip().lower()
        if len(needle) < 2:
            return []

        matches = [
            s for s in self.get_all_entities_for_suggestion()
            if needle in s.display_name.lower()
        ]
        return matches[:limit]

    def get_evolution_tree(self, pokemon: Union[Pokemon, str]) -> Dict[str, Any]:
        """
        Дерево еволюцій від базової форми.

        Returns:
            {"name": str, "evolutions": [...]}
        """
        if self._evolution_index is None:
            self._evolution_index = EvolutionIndex.from_pokemon(self.initialize())

        name = pokemon.name if isinstance(pokemon, Pokemon) else pokemon.strip().lower()
        return self._evolution_index.build_tree(name)
