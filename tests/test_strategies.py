"""
Тести для стратегій питань (question_engine.strategies, registry, text)

Запуск: pytest tests/test_strategies.py -v
Або демо: python tests/test_strategies.py
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


def test_numeric_two_entities():
    """Тест числової стратегії: дві особини, поріг = найменше значення"""
    from poke_guess.question_engine import NumericThresholdStrategy
    from poke_guess.schemas import AnswerType, StrategyType

    a = _pokemon(1, "a", weight=10)
    b = _pokemon(2, "b", weight=90)
    strategy = NumericThresholdStrategy(StrategyType.WEIGHT, "weight")

    question = strategy.generate([a, b])

    assert question.threshold == 10
    assert question.strategy == StrategyType.WEIGHT
    assert question.text == "Is your Pokémon heavier than 1 kg?"
    assert strategy.split([a, b], question) == (1, 1)

    assert strategy.filter([a, b], question, AnswerType.YES) == [b]
    assert strategy.filter([a, b], question, AnswerType.NO) == [a]

    print(f"✓ {question.text} → yes: [b], no: [a]")


def test_numeric_small_population():
    """Тест малої популяції: однобічне розбиття → None"""
    from poke_guess.question_engine import NumericThresholdStrategy
    from poke_guess.schemas import StrategyType

    strategy = NumericThresholdStrategy(StrategyType.HEIGHT, "height")

    assert strategy.generate([]) is None
    assert strategy.generate([_pokemon(1, "a", height=5)]) is None

    same = [_pokemon(1, "a", height=5), _pokemon(2, "b", height=5), _pokemon(3, "c", height=5)]
    assert strategy.generate(same) is None

    mixed = [_pokemon(1, "a", height=9), _pokemon(2, "b", height=5), _pokemon(3, "c", height=5)]
    question = strategy.generate(mixed)
    assert question.threshold == 5
    assert question.text == "Is your Pokémon taller than 0.5 m?"

    print(f"✓ Small population: {question.text}")


def test_numeric_median():
    """Тест медіани для популяції > 3"""
    from poke_guess.question_engine import NumericThresholdStrategy
    from poke_guess.schemas import AnswerType, StrategyType

    population = [
        _pokemon(i + 1, f"p{i}", weight=w)
        for i, w in enumerate([50, 10, 40, 20, 30])
    ]
    strategy = NumericThresholdStrategy(StrategyType.WEIGHT, "weight")

    question = strategy.generate(population)

    assert question.threshold == 30
    kept = strategy.filter(population, question, AnswerType.YES)
    assert [p.weight for p in kept] == [50, 40]

    # Порядок популяції зберігається
    rest = strategy.filter(population, question, AnswerType.NO)
    assert [p.weight for p in rest] == [10, 20, 30]

    print(f"✓ Median threshold: {question.threshold}")


def test_membership_half_split():
    """Тест категоріальної стратегії: fire/fire/water/water → fire"""
    from poke_guess.question_engine import MembershipStrategy
    from poke_guess.schemas import AnswerType, StrategyType

    population = [
        _pokemon(1, "f1", types=["fire"]),
        _pokemon(2, "f2", types=["fire"]),
        _pokemon(3, "w1", types=["water"]),
        _pokemon(4, "w2", types=["water"]),
    ]
    strategy = MembershipStrategy(StrategyType.TYPE, lambda p: p.types)

    assert strategy.count_values(population) == {"fire": 2, "water": 2}

    question = strategy.generate(population)
    assert question.category == "fire"
    assert question.text == "Is your Pokémon a Fire type?"

    remaining = strategy.filter(population, question, AnswerType.NO)
    assert [p.name for p in remaining] == ["w1", "w2"]

    print(f"✓ {question.text} → no: {[p.name for p in remaining]}")


def test_membership_closest_to_half():
    """Тест вибору значення, найближчого до n / 2"""
    from poke_guess.question_engine import MembershipStrategy
    from poke_guess.schemas import StrategyType

    population = [
        _pokemon(1, "a", types=["grass", "poison"]),
        _pokemon(2, "b", types=["grass", "poison"]),
        _pokemon(3, "c", types=["grass"]),
        _pokemon(4, "d", types=["grass"]),
        _pokemon(5, "e", types=["fire"]),
        _pokemon(6, "f", types=["water"]),
    ]
    strategy = MembershipStrategy(StrategyType.TYPE, lambda p: p.types)

    # grass=4, poison=2, fire=1, water=1; n/2 = 3 → grass і poison рівновіддалені, grass перший
    question = strategy.generate(population)
    assert question.category == "grass"

    assert strategy.generate([]) is None

    print(f"✓ Closest to half: {question.category}")


def test_membership_set_valued():
    """Тест стратегії слабкостей (значення рахується один раз на покемона)"""
    from poke_guess.question_engine import MembershipStrategy
    from poke_guess.schemas import AnswerType, StrategyType

    population = [
        _pokemon(1, "a", weaknesses=["ground", "rock"]),
        _pokemon(2, "b", weaknesses=["ground"]),
        _pokemon(3, "c", weaknesses=["water"]),
        _pokemon(4, "d", weaknesses=[]),
    ]
    strategy = MembershipStrategy(StrategyType.WEAKNESS, lambda p: p.weaknesses)

    assert strategy.count_values(population) == {"ground": 2, "rock": 1, "water": 1}

    question = strategy.generate(population)
    assert question.category == "ground"
    assert question.text == "Is your Pokémon weak against Ground moves?"

    kept = strategy.filter(population, question, AnswerType.YES)
    assert [p.name for p in kept] == ["a", "b"]

    print(f"✓ {question.text}")


def test_boolean_flag():
    """Тест стратегії прапорців"""
    from poke_guess.question_engine import BooleanFlagStrategy
    from poke_guess.schemas import AnswerType, StrategyType

    strategy = BooleanFlagStrategy(StrategyType.LEGENDARY, "is_legendary")

    plain = [_pokemon(1, "a"), _pokemon(2, "b")]
    assert strategy.generate(plain) is None

    legends = [_pokemon(1, "a", is_legendary=True), _pokemon(2, "b", is_legendary=True)]
    assert strategy.generate(legends) is None

    mixed = [_pokemon(1, "a"), _pokemon(2, "b", is_legendary=True), _pokemon(3, "c")]
    question = strategy.generate(mixed)

    assert question.flag is True
    assert question.text == "Is your Pokémon legendary?"
    assert [p.name for p in strategy.filter(mixed, question, AnswerType.YES)] == ["b"]
    assert [p.name for p in strategy.filter(mixed, question, AnswerType.NO)] == ["a", "c"]

    print(f"✓ {question.text}")


def test_evolution_strategy():
    """Тест стратегії еволюцій: вибір рівнішого підвиду"""
    from poke_guess.question_engine import EvolutionStrategy
    from poke_guess.schemas import AnswerType

    strategy = EvolutionStrategy()

    # evolved_from: 2/2, evolves_into: 1/3 → evolved_from
    population = [
        _pokemon(1, "a", has_evolution=True),
        _pokemon(2, "b", evolves_from="a"),
        _pokemon(3, "c", evolves_from="x"),
        _pokemon(4, "d"),
    ]
    question = strategy.generate(population)
    assert question.category == "evolved_from"
    assert [p.name for p in strategy.filter(population, question, AnswerType.YES)] == ["b", "c"]

    # evolved_from: 1/3, evolves_into: 2/2 → evolves_into
    population = [
        _pokemon(1, "a", has_evolution=True),
        _pokemon(2, "b", has_evolution=True, evolves_from="a"),
        _pokemon(3, "c"),
        _pokemon(4, "d"),
    ]
    question = strategy.generate(population)
    assert question.category == "evolves_into"
    assert question.text == "Can your Pokémon evolve into another Pokémon?"
    assert [p.name for p in strategy.filter(population, question, AnswerType.NO)] == ["c", "d"]

    # Рівність → evolved_from
    population = [
        _pokemon(1, "a", has_evolution=True),
        _pokemon(2, "b", evolves_from="a"),
    ]
    assert strategy.generate(population).category == "evolved_from"

    # Однобічне розбиття → None
    assert strategy.generate([_pokemon(1, "a"), _pokemon(2, "b")]) is None

    print("✓ EvolutionStrategy: evolved_from / evolves_into")


def test_filter_unknown():
    """Тест: unknown не змінює популяцію"""
    from poke_guess.question_engine import NumericThresholdStrategy
    from poke_guess.schemas import AnswerType, StrategyType

    population = [_pokemon(1, "a", weight=10), _pokemon(2, "b", weight=90)]
    strategy = NumericThresholdStrategy(StrategyType.WEIGHT, "weight")
    question = strategy.generate(population)

    result = strategy.filter(population, question, AnswerType.UNKNOWN)

    assert result == population
    assert result is not population
    assert strategy.filter(population, question, "не знаю") == population

    print("✓ unknown → population unchanged")


def test_explain():
    """Тест пояснень невідповідності"""
    from poke_guess.question_engine import (
        NumericThresholdStrategy, MembershipStrategy, BooleanFlagStrategy, EvolutionStrategy
    )
    from poke_guess.schemas import AnswerType, StrategyType

    a = _pokemon(1, "a", weight=10)
    b = _pokemon(2, "b", weight=90)
    weight = NumericThresholdStrategy(StrategyType.WEIGHT, "weight")
    question = weight.generate([a, b])

    assert weight.explain(a, question, AnswerType.YES) == "A weighs 1 kg, which is not more than 1 kg"
    assert weight.explain(b, question, AnswerType.NO) == "B weighs 9 kg, which is more than 1 kg"

    fire = _pokemon(3, "charmander", types=["fire"])
    water = _pokemon(4, "squirtle", types=["water"])
    types = MembershipStrategy(StrategyType.TYPE, lambda p: p.types)
    question = types.generate([fire, water])
    assert types.explain(water, question, AnswerType.YES) == "Squirtle is not a Fire type (types: water)"

    legendary = BooleanFlagStrategy(StrategyType.LEGENDARY, "is_legendary")
    question = legendary.generate([a, _pokemon(5, "mewtwo", is_legendary=True)])
    assert legendary.explain(a, question, AnswerType.YES) == "A is not legendary"

    evolution = EvolutionStrategy()
    ivysaur = _pokemon(6, "ivysaur", evolves_from="bulbasaur")
    question = evolution.generate([ivysaur, _pokemon(7, "bulbasaur", has_evolution=True)])
    assert evolution.explain(ivysaur, question, AnswerType.NO) == "Ivysaur evolves from Bulbasaur"

    print("✓ Explanations generated")


def test_text_generator_languages():
    """Тест текстів питань (en / uk)"""
    import pytest
    from poke_guess.question_engine import QuestionTextGenerator, format_tenths

    en = QuestionTextGenerator("en")
    uk = QuestionTextGenerator("uk")

    assert format_tenths(69) == "6.9"
    assert format_tenths(100) == "10"
    assert format_tenths(4600) == "460"

    assert en.question("weight", 69) == "Is your Pokémon heavier than 6.9 kg?"
    assert en.question("generation", "2") == "Is your Pokémon from generation 2 (Johto)?"
    assert en.question("color", "yellow") == "Is your Pokémon mainly yellow?"
    assert uk.question("weight", 69) == "Ваш покемон важчий за 6.9 кг?"
    assert uk.question("legendary") == "Ваш покемон легендарний?"

    with pytest.raises(ValueError):
        QuestionTextGenerator("de")

    print(f"✓ en: {en.question('type', 'fire')}")
    print(f"✓ uk: {uk.question('type', 'fire')}")


def test_registry_default():
    """Тест стандартного реєстру"""
    from poke_guess.question_engine import StrategyRegistry, EvolutionStrategy
    from poke_guess.schemas import StrategyType

    registry = StrategyRegistry.default()

    assert len(registry) == 11
    assert registry.types == list(StrategyType)
    assert [s.strategy_type for s in registry] == list(StrategyType)
    assert isinstance(registry.get(StrategyType.EVOLUTION), EvolutionStrategy)
    assert registry.get("weight").strategy_type == StrategyType.WEIGHT
    assert StrategyType.COLOR in registry

    print(f"✓ {registry}")


def test_registry_register():
    """Тест додавання нового виміру"""
    from poke_guess.question_engine import StrategyRegistry, MembershipStrategy
    from poke_guess.schemas import StrategyType

    registry = StrategyRegistry()
    registry.register(MembershipStrategy(StrategyType.COLOR, lambda p: [p.color]))
    registry.register(MembershipStrategy(StrategyType.TYPE, lambda p: p.types))

    assert registry.types == [StrategyType.COLOR, StrategyType.TYPE]

    population = [
        _pokemon(1, "a", color="red"),
        _pokemon(2, "b", color="blue"),
    ]
    question = registry.get(StrategyType.COLOR).generate(population)
    assert question.category == "red"

    print(f"✓ Custom registry: {registry}")


def test_generation_strategy():
    """Тест стратегії покоління (категорія як рядок)"""
    from poke_guess.question_engine import StrategyRegistry
    from poke_guess.schemas import AnswerType, StrategyType

    registry = StrategyRegistry.default()
    strategy = registry.get(StrategyType.GENERATION)

    population = [
        _pokemon(1, "a", generation=1),
        _pokemon(2, "b", generation=2),
    ]
    question = strategy.generate(population)

    assert question.category == "1"
    assert question.text == "Is your Pokémon from generation 1 (Kanto)?"
    assert [p.name for p in strategy.filter(population, question, AnswerType.NO)] == ["b"]

    print(f"✓ {question.text}")


def demo():
    """Повна демонстрація стратегій"""
    print("=" * 60)
    print("PokeGuess — Демонстрація стратегій питань")
    print("=" * 60)

    try:
        print("\n--- 1. Numeric ---")
        test_numeric_two_entities()
        test_numeric_small_population()
        test_numeric_median()

        print("\n--- 2. Membership ---")
        test_membership_half_split()
        test_membership_closest_to_half()
        test_membership_set_valued()
        test_generation_strategy()

        print("\n--- 3. Flags & Evolution ---")
        test_boolean_flag()
        test_evolution_strategy()

        print("\n--- 4. Filter / Explain / Text ---")
        test_filter_unknown()
        test_explain()
        test_text_generator_languages()

        print("\n--- 5. Registry ---")
        test_registry_default()
        test_registry_register()

        print("\n" + "=" * 60)
        print("✅ Всі тести пройдено успішно!")
        print("=" * 60)

        return True

    except Exception as e:
        print(f"\n❌ ПОМИЛКА: {e}")
        import traceback
        traceback.print_exc()
        return False


if __name__ == "__main__":
    demo()
