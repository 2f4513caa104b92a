"""
PokeGuess API — Pydantic Models

Моделі для запитів та відповідей REST API.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator
from enum import Enum

from poke_guess.schemas import AnswerType, CompletionReason, Pokemon, Question


# === Enums ===

class SessionStatusEnum(str, Enum):
    WAITING_ANSWER = "waiting_answer"
    COMPLETED = "completed"


class LanguageEnum(str, Enum):
    EN = "en"
    UK = "uk"


# === Request Models ===

class NewSessionRequest(BaseModel):
    """Запит на нову гру"""
    language: Optional[LanguageEnum] = Field(
        default=None,
        description="Мова питань (en / uk); за замовчуванням з конфігурації"
    )


class AnswerRequest(BaseModel):
    """Запит з відповіддю на поточне питання"""
    answer: AnswerType = Field(
        ...,
        description="Відповідь: yes / no / unknown (також true / false, так / ні / не знаю)"
    )

    @field_validator('answer', mode='before')
    @classmethod
    def parse_answer(cls, v: Any) -> AnswerType:
        return AnswerType.parse(v)

    class Config:
        json_schema_extra = {
            "example": {"answer": "yes"}
        }


class ExplainRequest(BaseModel):
    """Запит на пояснення виключення"""
    name: str = Field(..., min_length=1, description="Назва покемона, якого загадав гравець")

    class Config:
        json_schema_extra = {
            "example": {"name": "pikachu"}
        }


# === Response Models ===

class QuestionResponse(BaseModel):
    """Питання для гравця"""
    text: str = Field(..., description="Текст питання")
    strategy: str = Field(..., description="Стратегія питання")

    class Config:
        json_schema_extra = {
            "example": {
                "text": "Is your Pokémon heavier than 19 kg?",
                "strategy": "weight",
            }
        }


class AnsweredQuestionResponse(BaseModel):
    """Питання з відповіддю"""
    text: str
    strategy: str
    response: AnswerType


class PokemonResponse(BaseModel):
    """Покемон для відображення"""
    id: int
    name: str
    display_name: str
    types: List[str]
    generation: int
    region: str
    color: str
    weight_kg: float
    height_m: float
    is_legendary: bool
    is_mythical: bool
    is_baby: bool
    evolves_from: Optional[str] = None
    weaknesses: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "id": 25,
                "name": "pikachu",
                "display_name": "Pikachu",
                "types": ["electric"],
                "generation": 1,
                "region": "Kanto",
                "color": "yellow",
                "weight_kg": 6.0,
                "height_m": 0.4,
                "is_legendary": False,
                "is_mythical": False,
                "is_baby": False,
                "evolves_from": "pichu",
                "weaknesses": ["ground"],
                "strengths": ["water", "flying"],
            }
        }


class SessionResponse(BaseModel):
    """Стан сесії гри"""
    session_id: str
    status: SessionStatusEnum
    language: str
    current_question: Optional[QuestionResponse] = None
    history: List[AnsweredQuestionResponse] = Field(default_factory=list)
    questions_asked: int
    remaining_count: int
    is_complete: bool
    guessed_pokemon: Optional[PokemonResponse] = None
    completion_reason: Optional[CompletionReason] = None

    class Config:
        json_schema_extra = {
            "example": {
                "session_id": "abc123",
                "status": "waiting_answer",
                "language": "en",
                "current_question": {
                    "text": "Is your Pokémon a Water type?",
                    "strategy": "type",
                },
                "history": [
                    {"text": "Is your Pokémon heavier than 19 kg?", "strategy": "weight", "response": "no"}
                ],
                "questions_asked": 1,
                "remaining_count": 11,
                "is_complete": False,
                "guessed_pokemon": None,
                "completion_reason": None,
            }
        }


class EliminationReasonResponse(BaseModel):
    question_text: str
    response: AnswerType
    reason: str


class ExplanationResponse(BaseModel):
    """Пояснення виключення"""
    found: bool
    matched_pokemon: Optional[PokemonResponse] = None
    eliminated_by: List[EliminationReasonResponse] = Field(default_factory=list)
    still_possible: bool = False


class EvolutionNodeResponse(BaseModel):
    """Вузол дерева еволюцій"""
    name: str
    evolutions: List["EvolutionNodeResponse"] = Field(default_factory=list)


EvolutionNodeResponse.model_rebuild()


class SuggestionResponse(BaseModel):
    id: int
    name: str
    display_name: str


class SuggestionListResponse(BaseModel):
    query: str
    suggestions: List[SuggestionResponse]


class HealthResponse(BaseModel):
    """Health check"""
    status: str
    version: str
    active_sessions: int = 0
    components: Dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Помилка API"""
    error: str
    detail: Optional[str] = None


# === Converters ===

def question_to_response(question: Question) -> QuestionResponse:
    return QuestionResponse(text=question.text, strategy=question.strategy.value)


def pokemon_to_response(pokemon: Pokemon) -> PokemonResponse:
    return PokemonResponse(
        id=pokemon.id,
        name=pokemon.name,
        display_name=pokemon.display_name,
        types=list(pokemon.types),
        generation=pokemon.generation,
        region=pokemon.region,
        color=pokemon.color,
        weight_kg=pokemon.weight_kg,
        height_m=pokemon.height_m,
        is_legendary=pokemon.is_legendary,
        is_mythical=pokemon.is_mythical,
        is_baby=pokemon.is_baby,
        evolves_from=pokemon.evolves_from,
        weaknesses=list(pokemon.weaknesses),
        strengths=list(pokemon.strengths),
    )
