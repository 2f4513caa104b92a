"""
PokeGuess — Модуль Game Engine

Компоненти:
- GameEngine: Цикл гри (питання → відповідь → звуження → здогадка)
- GameState: Стан однієї гри
- EliminationExplainer: Пояснення, чому покемона було виключено

Приклад використання:
    from poke_guess.dataset import SampleDataProvider
    from poke_guess.game_engine import GameEngine

    engine = GameEngine(SampleDataProvider())
    engine.start_new_game()

    engine.answer_question("yes")
    engine.answer_question("не знаю")

    state = engine.get_game_state()
    print(state.remaining_count)

    explanation = engine.explain_elimination("pikachu")
"""

from .state import GameState
from .explainer import EliminationExplainer
from .engine import GameEngine


__all__ = [
    "GameState",
    "EliminationExplainer",
    "GameEngine",
]
