"""
PokeGuess — Провайдери даних

Джерела ростера для движка гри:
- InMemoryDataProvider: готовий список Pokemon (тести, фікстури)
- SampleDataProvider: вбудований демонстраційний ростер
- AggregatedDataProvider: агреговані JSON файли (minimal-pokemon.json,
  all-types.json, all-evolution-chains.json)

Кеші зберігаються в полях екземпляра, а не на рівні модуля,
тому різні провайдери (і тести) не впливають один на одного.

Приклад використання:
    from poke_guess.dataset import AggregatedDataProvider

    provider = AggregatedDataProvider("data/aggregated")
    roster = provider.load_entities()
    pikachu = provider.load_entity_by_id(25)

    provider.clear_cache()  # Перечитати файли при наступному виклику
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from poke_guess.config import DataConfig
from poke_guess.schemas import Pokemon

from .evolution import children_from_chains
from .hydration import hydrate_records
from .sample_data import SAMPLE_POKEMON
from .type_chart import TypeChart


class DataUnavailableError(RuntimeError):
    """Провайдер не може надати ростер (немає файлів, пошкоджені дані, порожній ростер)"""
    pass


class DataProvider(ABC):
    """
    Базовий клас провайдера даних.

    Движок гри викликає load_entities() один раз при ініціалізації
    та load_entity_by_id() при завершенні гри.
    """

    @abstractmethod
    def load_entities(self) -> List[Pokemon]:
        """
        Повний гідратований ростер у стабільному порядку.

        Raises:
            DataUnavailableError: дані недоступні
        """

    def load_entity_by_id(self, pokemon_id: int) -> Optional[Pokemon]:
        """Знайти покемона за id (None, якщо немає)"""
        for pokemon in self.load_entities():
            if pokemon.id == pokemon_id:
                return pokemon
        return None

    def clear_cache(self) -> None:
        """Скинути кеші провайдера"""
        pass


class InMemoryDataProvider(DataProvider):
    """Провайдер над готовим списком Pokemon"""

    def __init__(self, pokemon: List[Pokemon]):
        self._pokemon = list(pokemon)
        self._by_id = {p.id: p for p in self._pokemon}

    def load_entities(self) -> List[Pokemon]:
        if not self._pokemon:
            raise DataUnavailableError("Roster is empty")
        return list(self._pokemon)

    def load_entity_by_id(self, pokemon_id: int) -> Optional[Pokemon]:
        return self._by_id.get(pokemon_id)

    def __len__(self) -> int:
        return len(self._pokemon)


class SampleDataProvider(InMemoryDataProvider):
    """
    Вбудований демонстраційний ростер (покоління 1 + Pichu).

    Приклад:
        provider = SampleDataProvider()
        print(len(provider))  # 22
    """

    def __init__(self, type_chart: Optional[TypeChart] = None, verbose: bool = False):
        super().__init__(
            hydrate_records(SAMPLE_POKEMON, type_chart=type_chart, verbose=verbose)
        )


class AggregatedDataProvider(DataProvider):
    """
    Провайдер агрегованих JSON файлів.

    Обов'язковий файл: minimal-pokemon.json.
    Необов'язкові: all-types.json (інакше вбудована таблиця типів)
    та all-evolution-chains.json (додаткові ребра еволюцій).
    """

    def __init__(
        self,
        data_dir: Optional[Union[str, Path]] = None,
        config: Optional[DataConfig] = None,
        verbose: bool = False
    ):
        """
        Args:
            data_dir: Директорія з агрегованими файлами (за замовчуванням з config)
            config: Конфігурація імен файлів
            verbose: Виводити прогрес
        """
        self.config = config or DataConfig()
        self.data_dir = Path(data_dir) if data_dir is not None else Path(self.config.data_dir)
        self.verbose = verbose

        # Кеші
        self._pokemon: Optional[List[Pokemon]] = None
        self._by_id: Dict[int, Pokemon] = {}
        self._type_chart: Optional[TypeChart] = None

    @property
    def minimal_path(self) -> Path:
        return self.data_dir / self.config.minimal_file

    @property
    def types_path(self) -> Path:
        return self.data_dir / self.config.types_file

    @property
    def chains_path(self) -> Path:
        return self.data_dir / self.config.evolution_chains_file

    def _read_json(self, path: Path) -> Any:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise DataUnavailableError(f"Data file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise DataUnavailableError(f"Malformed JSON in {path}: {e}") from e

    def load_type_chart(self) -> TypeChart:
        """Таблиця типів з all-types.json або вбудована"""
        if self._type_chart is not None:
            return self._type_chart

        if self.types_path.exists():
            try:
                self._type_chart = TypeChart.from_api(self._read_json(self.types_path))
            except (KeyError, TypeError, AttributeError) as e:
                raise DataUnavailableError(f"Malformed type data in {self.types_path}: {e}") from e
            if self.verbose:
                print(f"✓ Type chart loaded: {len(self._type_chart)} types")
        else:
            self._type_chart = TypeChart.default()
            if self.verbose:
                print(f"⚠ {self.types_path.name} not found, using built-in type chart")

        return self._type_chart

    def _load_chain_children(self) -> Dict[str, List[str]]:
        if not self.chains_path.exists():
            return {}
        try:
            return children_from_chains(self._read_json(self.chains_path))
        except (KeyError, TypeError, AttributeError) as e:
            raise DataUnavailableError(f"Malformed evolution chains in {self.chains_path}: {e}") from e

    def load_entities(self) -> List[Pokemon]:
        if self._pokemon is not None:
            return list(self._pokemon)

        if self.verbose:
            print(f"📦 Loading roster from {self.data_dir}...")

        records = self._read_json(self.minimal_path)
        if not records:
            raise DataUnavailableError(f"Roster is empty: {self.minimal_path}")

        try:
            pokemon = hydrate_records(
                records,
                type_chart=self.load_type_chart(),
                chain_children=self._load_chain_children(),
                verbose=self.verbose,
            )
        except (ValueError, KeyError, TypeError) as e:
            raise DataUnavailableError(f"Invalid roster data in {self.minimal_path}: {e}") from e

        self._pokemon = pokemon
        self._by_id = {p.id: p for p in pokemon}

        if self.verbose:
            print(f"✓ Loaded {len(pokemon)} Pokemon")

        return list(pokemon)

    def load_entity_by_id(self, pokemon_id: int) -> Optional[Pokemon]:
        if self._pokemon is None:
            self.load_entities()
        return self._by_id.get(pokemon_id)

    def clear_cache(self) -> None:
        self._pokemon = None
        self._by_id = {}
        self._type_chart = None
