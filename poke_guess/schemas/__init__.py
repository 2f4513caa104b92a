"""
PokeGuess — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації даних.

Компоненти:
- pokemon.py: Pokemon
- question.py: StrategyType, AnswerType, Question, AnsweredQuestion
- game.py: CompletionReason, GameStateSnapshot, EliminationExplanation

Приклад використання:
    from poke_guess.schemas import Pokemon, Question, StrategyType

    pikachu = Pokemon(id=25, name="Pikachu", weight=60, height=4, types=["electric"])
    print(pikachu.name)         # pikachu
    print(pikachu.display_name) # Pikachu

    question = Question(
        text="Is your Pokémon heavier than 6 kg?",
        strategy=StrategyType.WEIGHT,
        threshold=60,
    )
    print(question.key)  # ('weight', 'Is your Pokémon heavier than 6 kg?')
"""

from .pokemon import (
    Pokemon,
    UNKNOWN_COLOR,
    REGION_NAMES,
    region_name,
)

from .question import (
    StrategyType,
    AnswerType,
    Question,
    AnsweredQuestion,
)

from .game import (
    CompletionReason,
    GameStateSnapshot,
    EliminationReason,
    EliminationExplanation,
    PokemonSuggestion,
)


__all__ = [
    # Pokemon
    "Pokemon",
    "UNKNOWN_COLOR",
    "REGION_NAMES",
    "region_name",

    # Question
    "StrategyType",
    "AnswerType",
    "Question",
    "AnsweredQuestion",

    # Game
    "CompletionReason",
    "GameStateSnapshot",
    "EliminationReason",
    "EliminationExplanation",
    "PokemonSuggestion",
]
