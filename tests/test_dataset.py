"""
Тести для модуля dataset

Запуск: pytest tests/test_dataset.py -v
Або демо: python tests/test_dataset.py
"""

import json
import tempfile
from pathlib import Path

import pytest


def _write_json(path: Path, data) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f)


def test_type_chart_default():
    """Тест стандартної таблиці типів"""
    from poke_guess.dataset import TypeChart

    chart = TypeChart.default()

    assert len(chart) == 18
    assert chart.has_type("fairy")

    weaknesses, strengths = chart.effectiveness(["water"])
    assert weaknesses == ["grass", "electric"]
    assert strengths == ["fire", "ground", "rock"]

    print(f"✓ Water: weak to {weaknesses}, strong against {strengths}")


def test_type_chart_dual_type():
    """Тест подвійного типу: опір прибирає слабкість"""
    from poke_guess.dataset import TypeChart

    chart = TypeChart.default()

    weaknesses, _ = chart.effectiveness(["water", "ground"])
    assert weaknesses == ["grass"]

    # Normal не отримує шкоди від ghost, тому ghost/normal не вразливий до ghost
    weaknesses, _ = chart.effectiveness(["ghost", "normal"])
    assert "ghost" not in weaknesses
    assert "fighting" not in weaknesses

    # Невідомі типи пропускаються
    assert chart.effectiveness(["shadow"]) == ([], [])

    print(f"✓ Water/Ground: weak to {chart.effectiveness(['water', 'ground'])[0]}")


def test_type_chart_from_api():
    """Тест таблиці з даних PokeAPI"""
    from poke_guess.dataset import TypeChart

    data = {
        "10": {
            "name": "fire",
            "damage_relations": {
                "double_damage_from": [{"name": "water"}, {"name": "rock"}],
                "half_damage_from": [{"name": "grass"}],
                "no_damage_from": [],
                "double_damage_to": [{"name": "grass"}],
            },
        },
        "11": {
            "name": "rock",
            "damage_relations": {
                "double_damage_from": [{"name": "water"}],
                "half_damage_from": [{"name": "fire"}],
                "no_damage_from": [],
                "double_damage_to": [{"name": "fire"}],
            },
        },
    }

    chart = TypeChart.from_api(data)

    assert chart.type_names == ["fire", "rock"]
    assert chart.effectiveness(["fire"]) == (["water", "rock"], ["grass"])
    assert chart.effectiveness(["fire", "rock"]) == (["water", "rock"], ["grass", "fire"])

    print(f"✓ TypeChart.from_api: {chart}")


def test_evolution_index():
    """Тест індексу еволюцій"""
    from poke_guess.dataset import EvolutionIndex

    index = EvolutionIndex.from_pairs([
        ("bulbasaur", None),
        ("ivysaur", "bulbasaur"),
        ("venusaur", "ivysaur"),
        ("eevee", None),
        ("vaporeon", "eevee"),
        ("jolteon", "eevee"),
    ])

    assert index.has_evolution("bulbasaur")
    assert index.has_evolution("ivysaur")
    assert not index.has_evolution("venusaur")
    assert index.is_evolved("venusaur")
    assert not index.is_evolved("eevee")

    assert index.descendants("bulbasaur") == ["ivysaur", "venusaur"]
    assert index.base_of("venusaur") == "bulbasaur"
    assert index.chain_members("ivysaur") == ["bulbasaur", "ivysaur", "venusaur"]
    assert index.children("eevee") == ["vaporeon", "jolteon"]
    assert index.find_cycles() == []

    tree = index.build_tree("jolteon")
    assert tree == {
        "name": "eevee",
        "evolutions": [
            {"name": "vaporeon", "evolutions": []},
            {"name": "jolteon", "evolutions": []},
        ],
    }

    print(f"✓ {index}")


def test_evolution_index_cycles():
    """Тест захисту від циклів"""
    from poke_guess.dataset import EvolutionIndex

    index = EvolutionIndex.from_pairs([
        ("a", "b"),
        ("b", "a"),
        ("c", "a"),
    ])

    assert index.find_cycles() == ["a", "b"]

    # Обходи завершуються
    assert index.base_of("c") in ("a", "b")
    assert set(index.descendants("a")) == {"b", "c"}

    tree = index.build_tree("c")
    assert tree["name"] in ("a", "b")

    print(f"✓ Cycles detected: {index.find_cycles()}")


def test_children_from_chains():
    """Тест розгортання ланцюжків PokeAPI"""
    from poke_guess.dataset import children_from_chains

    chains = {
        "67": {
            "id": 67,
            "chain": {
                "species": {"name": "eevee"},
                "evolves_to": [
                    {"species": {"name": "vaporeon"}, "evolves_to": []},
                    {"species": {"name": "jolteon"}, "evolves_to": []},
                ],
            },
        },
        "1": {
            "id": 1,
            "chain": {
                "species": {"name": "bulbasaur"},
                "evolves_to": [
                    {
                        "species": {"name": "ivysaur"},
                        "evolves_to": [{"species": {"name": "venusaur"}, "evolves_to": []}],
                    }
                ],
            },
        },
        "99": {"id": 99},
    }

    children = children_from_chains(chains)

    assert children["eevee"] == ["vaporeon", "jolteon"]
    assert children["bulbasaur"] == ["ivysaur"]
    assert children["ivysaur"] == ["venusaur"]
    assert "venusaur" not in children

    print(f"✓ Chains → {len(children)} parents")


def test_hydrate_records():
    """Тест гідратації записів"""
    from poke_guess.dataset import hydrate_records

    records = {
        "pichu": {
            "id": 172, "name": "pichu", "weight": 20, "height": 3, "types": ["electric"],
            "generation": 2, "isBaby": True, "color": "yellow",
            "evolves_from_species": None, "evolution_chain_id": 10,
        },
        "pikachu": {
            "id": 25, "name": "Pikachu", "weight": 60, "height": 4,
            "types": [{"slot": 1, "type": {"name": "electric"}}],
            "generation": 1, "color": "", "evolves_from_species": {"name": "pichu", "url": "-"},
            "evolution_chain_id": 10,
        },
    }

    pichu, pikachu = hydrate_records(records)

    assert pichu.is_baby is True
    assert pichu.has_evolution is True
    assert pichu.generation == 2

    assert pikachu.name == "pikachu"
    assert pikachu.types == ["electric"]
    assert pikachu.color == "unknown"
    assert pikachu.evolves_from == "pichu"
    assert pikachu.has_evolution is False
    assert pikachu.weaknesses == ["ground"]
    assert pikachu.strengths == ["water", "flying"]

    print(f"✓ Hydrated: {pichu}, {pikachu}")


def test_hydrate_with_chain_children():
    """Тест has_evolution з даних ланцюжків (нащадок поза ростером)"""
    from poke_guess.dataset import hydrate_records

    records = [
        {"id": 133, "name": "eevee", "weight": 65, "height": 3, "types": ["normal"]},
    ]

    without_chains = hydrate_records(records)
    with_chains = hydrate_records(records, chain_children={"eevee": ["vaporeon"]})

    assert without_chains[0].has_evolution is False
    assert with_chains[0].has_evolution is True

    print("✓ has_evolution from chain data")


def test_hydrate_duplicates():
    """Тест дублікатів id / назв"""
    from poke_guess.dataset import hydrate_records

    base = {"weight": 10, "height": 1, "types": ["normal"]}

    with pytest.raises(ValueError):
        hydrate_records([{"id": 1, "name": "a", **base}, {"id": 1, "name": "b", **base}])

    with pytest.raises(ValueError):
        hydrate_records([{"id": 1, "name": "a", **base}, {"id": 2, "name": "A", **base}])

    print("✓ Duplicates rejected")


def test_sample_provider():
    """Тест вбудованого ростера"""
    from poke_guess.dataset import SampleDataProvider, SAMPLE_POKEMON

    provider = SampleDataProvider()
    roster = provider.load_entities()

    assert len(roster) == len(SAMPLE_POKEMON) == 22
    assert [p.id for p in roster] == [r["id"] for r in SAMPLE_POKEMON]

    by_name = {p.name: p for p in roster}
    assert by_name["bulbasaur"].has_evolution is True
    assert by_name["venusaur"].has_evolution is False
    assert by_name["pichu"].is_baby is True
    assert by_name["pichu"].has_evolution is True
    assert by_name["snorlax"].is_evolved is True
    assert by_name["mewtwo"].is_legendary is True
    assert by_name["mew"].is_mythical is True
    assert by_name["bulbasaur"].weaknesses == ["flying", "fire", "ice", "psychic"]

    assert provider.load_entity_by_id(25).name == "pikachu"
    assert provider.load_entity_by_id(9999) is None

    # Копія, а не внутрішній список
    roster.clear()
    assert len(provider.load_entities()) == 22

    print(f"✓ SampleDataProvider: {len(provider)} Pokemon")


def test_in_memory_provider_empty():
    """Тест порожнього ростера"""
    from poke_guess.dataset import InMemoryDataProvider, DataUnavailableError

    provider = InMemoryDataProvider([])

    with pytest.raises(DataUnavailableError):
        provider.load_entities()

    assert issubclass(DataUnavailableError, RuntimeError)

    print("✓ Empty roster → DataUnavailableError")


def test_aggregated_provider():
    """Тест провайдера агрегованих файлів"""
    from poke_guess.dataset import AggregatedDataProvider, DataUnavailableError, SAMPLE_POKEMON

    with tempfile.TemporaryDirectory() as tmp:
        data_dir = Path(tmp)
        _write_json(data_dir / "minimal-pokemon.json", {r["name"]: r for r in SAMPLE_POKEMON[:3]})
        _write_json(data_dir / "all-evolution-chains.json", {
            "1": {
                "chain": {
                    "species": {"name": "bulbasaur"},
                    "evolves_to": [{"species": {"name": "ivysaur"}, "evolves_to": [
                        {"species": {"name": "venusaur"}, "evolves_to": []}
                    ]}],
                }
            }
        })

        provider = AggregatedDataProvider(data_dir)
        roster = provider.load_entities()

        assert [p.name for p in roster] == ["bulbasaur", "ivysaur", "venusaur"]
        assert roster[1].has_evolution is True
        assert provider.load_entity_by_id(3).name == "venusaur"

        # Кеш: другий виклик не читає файл
        (data_dir / "minimal-pokemon.json").unlink()
        assert len(provider.load_entities()) == 3

        provider.clear_cache()
        with pytest.raises(DataUnavailableError):
            provider.load_entities()

    print(f"✓ AggregatedDataProvider: {len(roster)} Pokemon, cache cleared")


def test_aggregated_provider_errors():
    """Тест помилок завантаження"""
    from poke_guess.dataset import AggregatedDataProvider, DataUnavailableError

    with pytest.raises(DataUnavailableError):
        AggregatedDataProvider("/nonexistent/data/dir").load_entities()

    with tempfile.TemporaryDirectory() as tmp:
        data_dir = Path(tmp)

        (data_dir / "minimal-pokemon.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(DataUnavailableError):
            AggregatedDataProvider(data_dir).load_entities()

        _write_json(data_dir / "minimal-pokemon.json", {})
        with pytest.raises(DataUnavailableError):
            AggregatedDataProvider(data_dir).load_entities()

        _write_json(data_dir / "minimal-pokemon.json", [{"id": 1, "name": "x", "types": []}])
        with pytest.raises(DataUnavailableError):
            AggregatedDataProvider(data_dir).load_entities()

    print("✓ Missing / malformed / empty data → DataUnavailableError")


def demo():
    """Повна демонстрація модуля dataset"""
    print("=" * 60)
    print("PokeGuess — Демонстрація модуля dataset")
    print("=" * 60)

    try:
        print("\n--- 1. TypeChart ---")
        test_type_chart_default()
        test_type_chart_dual_type()
        test_type_chart_from_api()

        print("\n--- 2. EvolutionIndex ---")
        test_evolution_index()
        test_evolution_index_cycles()
        test_children_from_chains()

        print("\n--- 3. Hydration ---")
        test_hydrate_records()
        test_hydrate_with_chain_children()
        test_hydrate_duplicates()

        print("\n--- 4. Providers ---")
        test_sample_provider()
        test_in_memory_provider_empty()
        test_aggregated_provider()
        test_aggregated_provider_errors()

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
