"""
PokeGuess — Гідратація записів ростера

Перетворює сирі записи мінімального набору даних у моделі Pokemon:
- нормалізує ключі (camelCase / snake_case)
- обчислює weaknesses / strengths за таблицею типів
- обчислює has_evolution за індексом еволюцій
- перевіряє унікальність id та назв

Структура запису (minimal-pokemon.json):
{
  "id": 25, "name": "pikachu", "weight": 60, "height": 4,
  "types": ["electric"], "generation": 1,
  "isLegendary": false, "isMythical": false, "isBaby": false,
  "color": "yellow", "evolves_from_species": "pichu", "evolution_chain_id": 10
}
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from poke_guess.schemas import Pokemon
from .type_chart import TypeChart
from .evolution import EvolutionIndex


_FIELD_ALIASES = {
    "is_legendary": ("is_legendary", "isLegendary"),
    "is_mythical": ("is_mythical", "isMythical"),
    "is_baby": ("is_baby", "isBaby"),
    "evolves_from": ("evolves_from", "evolves_from_species", "evolvesFromSpecies"),
    "evolution_chain_id": ("evolution_chain_id", "evolutionChainId"),
}


def _pick(record: Dict[str, Any], keys: Iterable[str], default: Any = None) -> Any:
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return default


def normalize_record(record: Dict[str, Any]) -> Dict[str, Any]:
    """Привести сирий запис до полів моделі Pokemon (без похідних полів)"""
    evolves_from = _pick(record, _FIELD_ALIASES["evolves_from"])
    # Дані PokeAPI можуть містити {"name": ..., "url": ...}
    if isinstance(evolves_from, dict):
        evolves_from = evolves_from.get("name")

    types = record.get("types", [])
    types = [t["type"]["name"] if isinstance(t, dict) else t for t in types]

    return {
        "id": record["id"],
        "name": record["name"],
        "weight": record.get("weight", 0),
        "height": record.get("height", 0),
        "types": types,
        "generation": record.get("generation", 1),
        "color": record.get("color"),
        "is_legendary": bool(_pick(record, _FIELD_ALIASES["is_legendary"], False)),
        "is_mythical": bool(_pick(record, _FIELD_ALIASES["is_mythical"], False)),
        "is_baby": bool(_pick(record, _FIELD_ALIASES["is_baby"], False)),
        "evolves_from": evolves_from,
        "evolution_chain_id": _pick(record, _FIELD_ALIASES["evolution_chain_id"]),
    }


def hydrate_records(
    records: Union[Dict[str, Dict[str, Any]], List[Dict[str, Any]]],
    type_chart: Optional[TypeChart] = None,
    chain_children: Optional[Dict[str, List[str]]] = None,
    verbose: bool = False
) -> List[Pokemon]:
    """
    Створити повністю гідратований ростер.

    Args:
        records: Сирі записи (словник як у minimal-pokemon.json або список)
        type_chart: Таблиця типів (за замовчуванням стандартна)
        chain_children: Додаткові ребра parent → children (з ланцюжків PokeAPI)
        verbose: Виводити прогрес

    Returns:
        Список Pokemon у порядку записів

    Raises:
        ValueError: дублікати id / назв або некоректні записи
    """
    if isinstance(records, dict):
        records = list(records.values())

    chart = type_chart or TypeChart.default()
    normalized = [normalize_record(r) for r in records]

    # Індекс будується один раз на весь ростер
    index = EvolutionIndex.from_pairs(
        (r["name"], r["evolves_from"]) for r in normalized
    )
    if chain_children:
        index.merge_children(chain_children)

    cycles = index.find_cycles()
    if cycles and verbose:
        print(f"⚠ Evolution cycles detected: {cycles}")

    pokemon: List[Pokemon] = []
    seen_ids = set()
    seen_names = set()

    for i, data in enumerate(normalized):
        weaknesses, strengths = chart.effectiveness(
            t.strip().lower() for t in data["types"]
        )
        entry = Pokemon(
            **data,
            has_evolution=index.has_evolution(data["name"].strip().lower()),
            weaknesses=weaknesses,
            strengths=strengths,
        )

        if entry.id in seen_ids:
            raise ValueError(f"Duplicate id at index {i}: {entry.id}")
        if entry.name in seen_names:
            raise ValueError(f"Duplicate name at index {i}: {entry.name}")
        seen_ids.add(entry.id)
        seen_names.add(entry.name)

        pokemon.append(entry)

        if verbose and (i + 1) % 100 == 0:
            print(f"  Enhanced {i + 1}/{len(normalized)} Pokemon with type effectiveness...")

    if verbose:
        print(f"✓ Hydrated {len(pokemon)} Pokemon")

    return pokemon
