"""
PokeGuess — Індекс еволюцій

Будує карту суміжності name → [names, що еволюціонують з name]
один раз на завантаження ростера. Всі обходи ітеративні і
захищені множиною відвіданих вершин від випадкових циклів у даних.

Формат ланцюжків PokeAPI (all-evolution-chains.json):
{
  "1": {
    "id": 1,
    "chain": {
      "species": {"name": "bulbasaur", "url": ...},
      "evolves_to": [
        {"species": {"name": "ivysaur"}, "evolves_to": [...]}
      ]
    }
  },
  ...
}
"""

from collections import deque
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple


def children_from_chains(chains: Dict[str, dict]) -> Dict[str, List[str]]:
    """
    Розгорнути ланцюжки PokeAPI у карту parent → children.

    Args:
        chains: {chain_id: {"chain": {...}}}

    Returns:
        {parent_name: [child_name, ...]}
    """
    children: Dict[str, List[str]] = {}

    for chain_data in chains.values():
        root = chain_data.get("chain")
        if not root:
            continue

        stack = [root]
        seen_nodes: Set[int] = set()

        while stack:
            node = stack.pop()
            if id(node) in seen_nodes:
                continue
            seen_nodes.add(id(node))

            parent = node["species"]["name"].strip().lower()
            for evolution in node.get("evolves_to", []):
                child = evolution["species"]["name"].strip().lower()
                bucket = children.setdefault(parent, [])
                if child not in bucket:
                    bucket.append(child)
                stack.append(evolution)

    return children


class EvolutionIndex:
    """
    Індекс відношення "еволюціонує з".

    Приклад використання:
        index = EvolutionIndex.from_pairs([
            ("bulbasaur", None),
            ("ivysaur", "bulbasaur"),
            ("venusaur", "ivysaur"),
        ])

        index.has_evolution("ivysaur")    # True
        index.descendants("bulbasaur")    # ['ivysaur', 'venusaur']
        index.base_of("venusaur")         # 'bulbasaur'
    """

    def __init__(self):
        self._parents: Dict[str, Optional[str]] = {}
        self._children: Dict[str, List[str]] = {}

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, Optional[str]]]) -> "EvolutionIndex":
        """Створити з пар (name, evolves_from)"""
        index = cls()
        for name, evolves_from in pairs:
            index.add(name, evolves_from)
        return index

    @classmethod
    def from_pokemon(cls, pokemon: Iterable[Any]) -> "EvolutionIndex":
        """Створити з об'єктів з атрибутами name / evolves_from"""
        return cls.from_pairs((p.name, p.evolves_from) for p in pokemon)

    def add(self, name: str, evolves_from: Optional[str] = None) -> None:
        """Додати вершину (і ребро від батька, якщо є)"""
        name = name.strip().lower()
        parent = evolves_from.strip().lower() if evolves_from else None

        if parent is not None or name not in self._parents:
            self._parents[name] = parent
        self._children.setdefault(name, [])

        if parent is not None:
            bucket = self._children.setdefault(parent, [])
            if name not in bucket:
                bucket.append(name)

    def merge_children(self, mapping: Dict[str, List[str]]) -> None:
        """Додати ребра parent → children (наприклад, з ланцюжків PokeAPI)"""
        for parent, children in mapping.items():
            for child in children:
                if self._parents.get(child) is None:
                    self._parents[child] = parent
                bucket = self._children.setdefault(parent, [])
                if child not in bucket:
                    bucket.append(child)

    def __contains__(self, name: str) -> bool:
        return name in self._parents or name in self._children

    def __len__(self) -> int:
        return len(set(self._parents) | set(self._children))

    def parent(self, name: str) -> Optional[str]:
        return self._parents.get(name)

    def children(self, name: str) -> List[str]:
        return list(self._children.get(name, []))

    def has_evolution(self, name: str) -> bool:
        """Чи еволюціонує хтось з цього покемона"""
        return bool(self._children.get(name))

    def is_evolved(self, name: str) -> bool:
        """Чи еволюціонує цей покемон з іншого"""
        return self._parents.get(name) is not None

    def descendants(self, name: str) -> List[str]:
        """Всі наступні форми (BFS, без повторів)"""
        result: List[str] = []
        visited = {name}
        queue = deque(self._children.get(name, []))

        while queue:
            current = queue.popleft()
            if current in visited:
                continue
            visited.add(current)
            result.append(current)
            queue.extend(self._children.get(current, []))

        return result

    def base_of(self, name: str) -> str:
        """Початкова форма ланцюжка (зупиняється на циклі)"""
        current = name
        visited = {current}

        while True:
            parent = self._parents.get(current)
            if parent is None or parent in visited:
                return current
            visited.add(parent)
            current = parent

    def chain_members(self, name: str) -> List[str]:
        """Всі члени ланцюжка, починаючи з базової форми"""
        base = self.base_of(name)
        return [base] + self.descendants(base)

    def find_cycles(self) -> List[str]:
        """
        Знайти вершини, що лежать на циклах "еволюціонує з".

        Коректні дані циклів не мають; метод потрібен для перевірки
        зовнішніх наборів даних.
        """
        on_cycle: Set[str] = set()
        finished: Set[str] = set()

        for start in self._parents:
            if start in finished:
                continue

            path: List[str] = []
            position: Dict[str, int] = {}
            current: Optional[str] = start

            while current is not None and current not in finished:
                if current in position:
                    on_cycle.update(path[position[current]:])
                    break
                position[current] = len(path)
                path.append(current)
                current = self._parents.get(current)

            finished.update(path)

        return sorted(on_cycle)

    def build_tree(self, name: str) -> Dict[str, Any]:
        """
        Дерево еволюцій від базової форми ланцюжка.

        Returns:
            {"name": str, "evolutions": [{"name": ..., "evolutions": [...]}, ...]}
        """
        root = {"name": self.base_of(name), "evolutions": []}
        visited = {root["name"]}
        stack = [root]

        while stack:
            node = stack.pop()
            for child in self._children.get(node["name"], []):
                if child in visited:
                    continue
                visited.add(child)
                child_node = {"name": child, "evolutions": []}
                node["evolutions"].append(child_node)
                stack.append(child_node)

        return root

    def __repr__(self) -> str:
        edges = sum(len(c) for c in self._children.values())
        return f"EvolutionIndex(species={len(self)}, edges={edges})"
