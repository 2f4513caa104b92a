"""
PokeGuess API — Routes

REST API endpoints гри.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Depends, Query

from poke_guess.dataset import DataUnavailableError
from poke_guess.schemas import GameStateSnapshot

from .config import config
from .models import (
    NewSessionRequest, AnswerRequest, ExplainRequest,
    SessionResponse, AnsweredQuestionResponse, ExplanationResponse,
    EliminationReasonResponse, EvolutionNodeResponse,
    SuggestionResponse, SuggestionListResponse, HealthResponse,
    SessionStatusEnum,
    question_to_response, pokemon_to_response,
)
from .dependencies import (
    AppState, GameSession, SessionManager,
    app_state, session_manager,
    get_app_state, get_sessions, get_game_session,
)


# Роутери
router = APIRouter()
session_router = APIRouter(prefix="/sessions", tags=["Sessions"])
pokemon_router = APIRouter(prefix="/pokemon", tags=["Pokemon"])


# === Helper Functions ===

def session_to_response(session: GameSession) -> SessionResponse:
    """Конвертувати сесію в response"""
    snapshot: GameStateSnapshot = session.engine.get_game_state()

    return SessionResponse(
        session_id=session.session_id,
        status=SessionStatusEnum.COMPLETED if snapshot.is_complete else SessionStatusEnum.WAITING_ANSWER,
        language=session.language,
        current_question=(
            question_to_response(snapshot.current_question)
            if snapshot.current_question else None
        ),
        history=[
            AnsweredQuestionResponse(
                text=entry.question.text,
                strategy=entry.question.strategy.value,
                response=entry.response,
            )
            for entry in snapshot.answered_history
        ],
        questions_asked=snapshot.questions_asked,
        remaining_count=snapshot.remaining_count,
        is_complete=snapshot.is_complete,
        guessed_pokemon=(
            pokemon_to_response(snapshot.guessed_entity)
            if snapshot.guessed_entity else None
        ),
        completion_reason=snapshot.completion_reason,
    )


# === Health Check ===

@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check"
)
async def health_check():
    """Перевірка здоров'я сервісу"""
    return HealthResponse(
        status="ok" if app_state.is_initialized else "not_initialized",
        version="1.0.0",
        active_sessions=session_manager.get_active_count(),
        components=app_state.get_health()
    )


# === Session Endpoints ===

@session_router.post(
    "",
    response_model=SessionResponse,
    status_code=201,
    summary="Start new game",
    description="Почати нову гру: повертає сесію з першим питанням"
)
def start_session(
    request: Optional[NewSessionRequest] = None,
    state: AppState = Depends(get_app_state),
    sessions: SessionManager = Depends(get_sessions)
):
    language = (
        request.language.value
        if request is not None and request.language is not None
        else config.default_language
    )

    try:
        engine = state.create_engine(language)
        engine.start_new_game()
    except DataUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

    session = sessions.create_session(engine, language)
    return session_to_response(session)


@session_router.get(
    "/{session_id}",
    response_model=SessionResponse,
    summary="Get game state"
)
def get_session_state(session: GameSession = Depends(get_game_session)):
    with session.lock:
        return session_to_response(session)


@session_router.post(
    "/{session_id}/answer",
    response_model=SessionResponse,
    summary="Answer current question",
    description="Відповісти на поточне питання (yes / no / unknown)"
)
def answer_question(
    request: AnswerRequest,
    session: GameSession = Depends(get_game_session)
):
    """
    Відповідь на завершену гру або без питання ігнорується,
    повертається незмінений стан.
    """
    with session.lock:
        session.engine.answer_question(request.answer)
        session.touch()
        return session_to_response(session)


@session_router.post(
    "/{session_id}/explain",
    response_model=ExplanationResponse,
    summary="Explain elimination",
    description="Чому гра не вгадала названого покемона"
)
def explain_elimination(
    request: ExplainRequest,
    session: GameSession = Depends(get_game_session)
):
    with session.lock:
        result = session.engine.explain_elimination(request.name)

    return ExplanationResponse(
        found=result.found,
        matched_pokemon=pokemon_to_response(result.matched_entity) if result.matched_entity else None,
        eliminated_by=[
            EliminationReasonResponse(
                question_text=r.question_text,
                response=r.response,
                reason=r.reason,
            )
            for r in result.eliminated_by
        ],
        still_possible=result.still_possible,
    )


@session_router.get(
    "/{session_id}/evolution",
    response_model=EvolutionNodeResponse,
    summary="Evolution tree of the guess"
)
def get_evolution_tree(session: GameSession = Depends(get_game_session)):
    with session.lock:
        snapshot = session.engine.get_game_state()
        if snapshot.guessed_entity is None:
            raise HTTPException(status_code=409, detail="Game has no guess yet")

        tree = session.engine.get_evolution_tree(snapshot.guessed_entity)
    return tree


@session_router.delete(
    "/{session_id}",
    summary="Delete session"
)
def delete_session(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
):
    if not sessions.delete_session(session_id):
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return {"deleted": session_id}


# === Pokemon Endpoints ===

@pokemon_router.get(
    "/suggestions",
    response_model=SuggestionListResponse,
    summary="Autocomplete suggestions"
)
def get_suggestions(
    q: str = Query(..., description="Частина назви (мінімум 2 символи)"),
    limit: int = Query(10, ge=1, le=50),
    state: AppState = Depends(get_app_state)
):
    try:
        engine = state.create_engine()
        suggestions = engine.search_suggestions(q, limit=limit)
    except DataUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return SuggestionListResponse(
        query=q,
        suggestions=[SuggestionResponse(**s.model_dump()) for s in suggestions],
    )


# Підключаємо під-роутери
router.include_router(session_router)
router.include_router(pokemon_router)
