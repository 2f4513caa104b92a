"""
PokeGuess — Модуль даних (dataset)

Завантаження та гідратація ростера покемонів.

Компоненти:
- DataProvider: Базовий інтерфейс провайдера
- InMemoryDataProvider / SampleDataProvider / AggregatedDataProvider
- TypeChart: Таблиця ефективності типів (weaknesses / strengths)
- EvolutionIndex: Індекс еволюцій (has_evolution, дерево еволюцій)
- hydrate_records: Сирі записи → Pokemon

Приклад використання:
    from poke_guess.dataset import SampleDataProvider, TypeChart

    provider = SampleDataProvider()
    roster = provider.load_entities()
    print(roster[0].weaknesses)  # ['flying', 'fire', 'ice', 'psychic']

    chart = TypeChart.default()
    print(chart.effectiveness(["water"]))
"""

from .type_chart import (
    TypeChart,
    TypeRelations,
    ATTACK_TABLE,
)

from .evolution import (
    EvolutionIndex,
    children_from_chains,
)

from .hydration import (
    hydrate_records,
    normalize_record,
)

from .provider import (
    DataUnavailableError,
    DataProvider,
    InMemoryDataProvider,
    SampleDataProvider,
    AggregatedDataProvider,
)

from .sample_data import SAMPLE_POKEMON


__all__ = [
    # Type chart
    "TypeChart",
    "TypeRelations",
    "ATTACK_TABLE",

    # Evolution
    "EvolutionIndex",
    "children_from_chains",

    # Hydration
    "hydrate_records",
    "normalize_record",

    # Providers
    "DataUnavailableError",
    "DataProvider",
    "InMemoryDataProvider",
    "SampleDataProvider",
    "AggregatedDataProvider",
    "SAMPLE_POKEMON",
]
