"""
PokeGuess — Схема покемона

Pydantic модель одного запису ростера. Створюється один раз
провайдером даних і далі ніколи не змінюється (frozen).

Одиниці:
- weight: гектограми (69 → 6.9 кг)
- height: дециметри (7 → 0.7 м)
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


UNKNOWN_COLOR = "unknown"

REGION_NAMES = {
    1: "Kanto",
    2: "Johto",
    3: "Hoenn",
    4: "Sinnoh",
    5: "Unova",
    6: "Kalos",
    7: "Alola",
    8: "Galar",
    9: "Paldea",
}


def region_name(generation: int) -> str:
    """Назва регіону для покоління"""
    return REGION_NAMES.get(generation, f"Generation {generation}")


class Pokemon(BaseModel):
    """
    Покемон — один елемент, який можна загадати.

    Приклад:
        pikachu = Pokemon(
            id=25,
            name="pikachu",
            weight=60,
            height=4,
            types=["electric"],
            generation=1,
            evolves_from="pichu",
            evolution_chain_id=10,
            color="yellow",
        )
    """
    id: int = Field(..., gt=0, description="Унікальний ідентифікатор")
    name: str = Field(..., min_length=1, description="Унікальна назва (lowercase)")

    # Числові атрибути
    weight: int = Field(..., ge=0, description="Вага в гектограмах")
    height: int = Field(..., ge=0, description="Зріст в дециметрах")

    # Категорії
    types: List[str] = Field(..., description="Типи (непорожній список)")
    generation: int = Field(default=1, ge=1, description="Покоління")
    color: str = Field(default=UNKNOWN_COLOR, description="Основний колір")

    # Прапорці
    is_legendary: bool = False
    is_mythical: bool = False
    is_baby: bool = False

    # Еволюція
    evolves_from: Optional[str] = Field(
        default=None,
        description="Назва покемона, з якого еволюціонує цей"
    )
    evolution_chain_id: Optional[int] = None
    has_evolution: bool = Field(
        default=False,
        description="Чи еволюціонує хтось із ростера з цього покемона"
    )

    # Похідні множини (обчислюються з таблиці типів)
    weaknesses: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def normalize_name(cls, v: str) -> str:
        """Нормалізація назви"""
        v = v.strip().lower()
        if not v:
            raise ValueError("name must not be empty")
        return v

    @field_validator('types')
    @classmethod
    def validate_types(cls, v: List[str]) -> List[str]:
        """Типи: lowercase, без повторів, хоча б один"""
        normalized = []
        for t in v:
            t = t.strip().lower()
            if t and t not in normalized:
                normalized.append(t)
        if not normalized:
            raise ValueError("types must contain at least one type")
        return normalized

    @field_validator('color', mode='before')
    @classmethod
    def normalize_color(cls, v: Optional[str]) -> str:
        if not v:
            return UNKNOWN_COLOR
        return str(v).strip().lower() or UNKNOWN_COLOR

    @field_validator('evolves_from')
    @classmethod
    def normalize_evolves_from(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip().lower()
        return v or None

    @field_validator('weaknesses', 'strengths')
    @classmethod
    def normalize_tags(cls, v: List[str]) -> List[str]:
        return [t.strip().lower() for t in v if t.strip()]

    @property
    def is_evolved(self) -> bool:
        """Чи еволюціонує цей покемон з іншого"""
        return self.evolves_from is not None

    @property
    def display_name(self) -> str:
        return self.name[:1].upper() + self.name[1:]

    @property
    def weight_kg(self) -> float:
        return self.weight / 10

    @property
    def height_m(self) -> float:
        return self.height / 10

    @property
    def region(self) -> str:
        return region_name(self.generation)

    def __repr__(self) -> str:
        return f"Pokemon(#{self.id} '{self.name}', types={self.types})"

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": 25,
                "name": "pikachu",
                "weight": 60,
                "height": 4,
                "types": ["electric"],
                "generation": 1,
                "color": "yellow",
                "is_legendary": False,
                "is_mythical": False,
                "is_baby": False,
                "evolves_from": "pichu",
                "evolution_chain_id": 10,
                "has_evolution": True,
                "weaknesses": ["ground"],
                "strengths": ["water", "flying"],
            }
        }
