"""
PokeGuess — Таблиця ефективності типів

Обчислює похідні множини weaknesses / strengths для покемона
за його типами.

Правило:
    weaknesses = ∪ double_damage_from − (∪ half_damage_from ∪ no_damage_from)
    strengths  = ∪ double_damage_to

Формат даних PokeAPI (all-types.json):
{
  "10": {
    "name": "fire",
    "damage_relations": {
      "double_damage_from": [{"name": "water", "url": ...}, ...],
      "half_damage_from": [...],
      "no_damage_from": [...],
      "double_damage_to": [...],
      ...
    }
  },
  ...
}
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple


# Атакуючий тип → (×2 проти, ×0.5 проти, ×0 проти)
ATTACK_TABLE: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...], Tuple[str, ...]]] = {
    "normal": ((), ("rock", "steel"), ("ghost",)),
    "fighting": (
        ("normal", "ice", "rock", "dark", "steel"),
        ("poison", "flying", "psychic", "bug", "fairy"),
        ("ghost",),
    ),
    "flying": (("grass", "fighting", "bug"), ("electric", "rock", "steel"), ()),
    "poison": (("grass", "fairy"), ("poison", "ground", "rock", "ghost"), ("steel",)),
    "ground": (
        ("fire", "electric", "poison", "rock", "steel"),
        ("grass", "bug"),
        ("flying",),
    ),
    "rock": (("fire", "ice", "flying", "bug"), ("fighting", "ground", "steel"), ()),
    "bug": (
        ("grass", "psychic", "dark"),
        ("fire", "fighting", "poison", "flying", "ghost", "steel", "fairy"),
        (),
    ),
    "ghost": (("psychic", "ghost"), ("dark",), ("normal",)),
    "steel": (("ice", "rock", "fairy"), ("fire", "water", "electric", "steel"), ()),
    "fire": (
        ("grass", "ice", "bug", "steel"),
        ("fire", "water", "rock", "dragon"),
        (),
    ),
    "water": (("fire", "ground", "rock"), ("water", "grass", "dragon"), ()),
    "grass": (
        ("water", "ground", "rock"),
        ("fire", "grass", "poison", "flying", "bug", "dragon", "steel"),
        (),
    ),
    "electric": (("water", "flying"), ("electric", "grass", "dragon"), ("ground",)),
    "psychic": (("fighting", "poison"), ("psychic", "steel"), ("dark",)),
    "ice": (
        ("grass", "ground", "flying", "dragon"),
        ("fire", "water", "ice", "steel"),
        (),
    ),
    "dragon": (("dragon",), ("steel",), ("fairy",)),
    "dark": (("psychic", "ghost"), ("fighting", "dark", "fairy"), ()),
    "fairy": (("fighting", "dragon", "dark"), ("fire", "poison", "steel"), ()),
}


def _append_unique(target: List[str], values: Iterable[str]) -> None:
    for value in values:
        if value not in target:
            target.append(value)


@dataclass
class TypeRelations:
    """Відношення шкоди для одного типу (з точки зору захисту та атаки)"""
    name: str
    double_damage_from: List[str] = field(default_factory=list)
    half_damage_from: List[str] = field(default_factory=list)
    no_damage_from: List[str] = field(default_factory=list)
    double_damage_to: List[str] = field(default_factory=list)


class TypeChart:
    """
    Таблиця типів.

    Приклад використання:
        chart = TypeChart.default()

        weaknesses, strengths = chart.effectiveness(["water", "ground"])
        print(weaknesses)  # ['grass']
    """

    def __init__(self, relations: Dict[str, TypeRelations]):
        self._relations = relations

    @classmethod
    def default(cls) -> "TypeChart":
        """Стандартна таблиця 18 типів"""
        return cls.from_attack_table(ATTACK_TABLE)

    @classmethod
    def from_attack_table(
        cls,
        table: Dict[str, Tuple[Iterable[str], Iterable[str], Iterable[str]]]
    ) -> "TypeChart":
        """
        Побудувати таблицю з атакуючої перспективи.

        Args:
            table: {attacker: (double_to, half_to, no_to)}
        """
        relations = {name: TypeRelations(name=name) for name in table}

        for attacker, (double_to, half_to, no_to) in table.items():
            _append_unique(relations[attacker].double_damage_to, double_to)

            for defender in double_to:
                relations.setdefault(defender, TypeRelations(name=defender))
                _append_unique(relations[defender].double_damage_from, [attacker])
            for defender in half_to:
                relations.setdefault(defender, TypeRelations(name=defender))
                _append_unique(relations[defender].half_damage_from, [attacker])
            for defender in no_to:
                relations.setdefault(defender, TypeRelations(name=defender))
                _append_unique(relations[defender].no_damage_from, [attacker])

        return cls(relations)

    @classmethod
    def from_api(cls, data: Dict[str, dict]) -> "TypeChart":
        """
        Побудувати таблицю з агрегованих даних PokeAPI.

        Args:
            data: {type_id: {"name": ..., "damage_relations": {...}}}
        """
        relations = {}

        for entry in data.values():
            name = entry["name"].strip().lower()
            damage = entry.get("damage_relations", {})

            def names(key: str) -> List[str]:
                return [t["name"].strip().lower() for t in damage.get(key, [])]

            relations[name] = TypeRelations(
                name=name,
                double_damage_from=names("double_damage_from"),
                half_damage_from=names("half_damage_from"),
                no_damage_from=names("no_damage_from"),
                double_damage_to=names("double_damage_to"),
            )

        return cls(relations)

    @property
    def type_names(self) -> List[str]:
        return list(self._relations.keys())

    def get(self, type_name: str) -> TypeRelations:
        return self._relations[type_name]

    def has_type(self, type_name: str) -> bool:
        return type_name in self._relations

    def effectiveness(self, pokemon_types: Iterable[str]) -> Tuple[List[str], List[str]]:
        """
        Обчислити слабкості та сильні сторони для комбінації типів.

        Невідомі типи пропускаються.

        Returns:
            (weaknesses, strengths) у порядку першої появи
        """
        weaknesses: List[str] = []
        strengths: List[str] = []
        protected = set()

        for type_name in pokemon_types:
            relations = self._relations.get(type_name)
            if relations is None:
                continue

            _append_unique(weaknesses, relations.double_damage_from)
            _append_unique(strengths, relations.double_damage_to)
            protected.update(relations.half_damage_from)
            protected.update(relations.no_damage_from)

        weaknesses = [w for w in weaknesses if w not in protected]
        return weaknesses, strengths

    def __len__(self) -> int:
        return len(self._relations)

    def __repr__(self) -> str:
        return f"TypeChart(types={len(self._relations)})"
