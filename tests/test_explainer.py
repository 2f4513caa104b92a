"""
Тести для EliminationExplainer та GameEngine.explain_elimination

Запуск: pytest tests/test_explainer.py -v
"""


def _pokemon(pokemon_id, name, weight=10, height=10, types=("normal",), **kwargs):
    from poke_guess.schemas import Pokemon

    return Pokemon(
        id=pokemon_id,
        name=name,
        weight=weight,
        height=height,
        types=list(types),
        **kwargs
    )


def _pair_engine(language="en"):
    from poke_guess.config import PokeGuessConfig
    from poke_guess.dataset import InMemoryDataProvider
    from poke_guess.game_engine import GameEngine

    config = PokeGuessConfig()
    config.question_engine.language = language

    provider = InMemoryDataProvider([_pokemon(1, "a", weight=10), _pokemon(2, "b", weight=90)])
    return GameEngine(provider, config=config)


def test_unknown_name():
    """Тест: покемона немає в ростері"""
    engine = _pair_engine()
    engine.start_new_game()

    result = engine.explain_elimination("nonexistent")

    assert result.found is False
    assert result.matched_entity is None
    assert result.eliminated_by == []

    assert engine.explain_elimination("   ").found is False

    print("✓ Unknown name → found=False")


def test_eliminated_pokemon():
    """Тест: відповідь yes на 'важчий за 1 кг' виключає 'a'"""
    from poke_guess.schemas import AnswerType

    engine = _pair_engine()
    engine.start_new_game()
    engine.answer_question("yes")

    result = engine.explain_elimination("a")

    assert result.found
    assert result.matched_entity.id == 1
    assert result.still_possible is False
    assert len(result.eliminated_by) == 1

    reason = result.eliminated_by[0]
    assert reason.question_text == "Is your Pokémon heavier than 1 kg?"
    assert reason.response == AnswerType.YES
    assert reason.reason == "A weighs 1 kg, which is not more than 1 kg"

    print(f"✓ {reason.question_text} → {reason.response.value}: {reason.reason}")


def test_still_possible():
    """Тест: покемон, що залишився, не має причин виключення"""
    engine = _pair_engine()
    engine.start_new_game()
    engine.answer_question("yes")

    result = engine.explain_elimination(" B ")

    assert result.found
    assert result.matched_entity.name == "b"
    assert result.eliminated_by == []
    assert result.still_possible is True

    print("✓ Guessed Pokemon → still_possible")


def test_unknown_never_eliminates():
    """Тест: 'не знаю' ніколи не є причиною виключення"""
    engine = _pair_engine()
    engine.start_new_game()
    engine.answer_question("unknown")

    for name in ("a", "b"):
        result = engine.explain_elimination(name)
        assert result.found
        assert result.eliminated_by == []
        assert result.still_possible is True

    print("✓ unknown answers eliminate nobody")


def test_explainer_direct():
    """Тест EliminationExplainer без движка: декілька причин"""
    from poke_guess.game_engine import EliminationExplainer
    from poke_guess.question_engine import StrategyRegistry
    from poke_guess.schemas import AnswerType, AnsweredQuestion, Question, StrategyType

    registry = StrategyRegistry.default()
    explainer = EliminationExplainer(registry)

    charmander = _pokemon(4, "charmander", weight=85, types=["fire"], color="red")
    roster = [charmander, _pokemon(7, "squirtle", weight=90, types=["water"], color="blue")]

    history = [
        AnsweredQuestion(
            question=Question(text="Is your Pokémon a Water type?", strategy=StrategyType.TYPE, category="water"),
            response=AnswerType.YES,
        ),
        AnsweredQuestion(
            question=Question(text="Is your Pokémon mainly red?", strategy=StrategyType.COLOR, category="red"),
            response=AnswerType.NO,
        ),
        AnsweredQuestion(
            question=Question(text="Is your Pokémon legendary?", strategy=StrategyType.LEGENDARY, flag=True),
            response=AnswerType.NO,
        ),
        AnsweredQuestion(
            question=Question(text="Is your Pokémon taller than 5 m?", strategy=StrategyType.HEIGHT, threshold=50),
            response=AnswerType.UNKNOWN,
        ),
    ]

    result = explainer.explain("CHARMANDER", roster, history)

    assert result.found
    assert [r.reason for r in result.eliminated_by] == [
        "Charmander is not a Water type (types: fire)",
        "Charmander is red",
    ]
    # Без remaining still_possible = False
    assert result.still_possible is False

    assert EliminationExplainer.find("squirtle", roster).id == 7
    assert EliminationExplainer.find("squirt", roster) is None

    print(f"✓ Direct explain: {len(result.eliminated_by)} reasons")


def test_ukrainian_reason():
    """Тест українського пояснення"""
    engine = _pair_engine(language="uk")
    engine.start_new_game()
    engine.answer_question("так")

    result = engine.explain_elimination("a")

    assert result.eliminated_by[0].reason == "A важить 1 кг, тобто не більше 1 кг"

    print(f"✓ uk: {result.eliminated_by[0].reason}")


def test_explain_before_game():
    """Тест пояснення до початку гри"""
    engine = _pair_engine()

    result = engine.explain_elimination("a")

    # Ростер ще не завантажено
    assert result.found is False

    print("✓ Explain before start → found=False")
