"""
PokeGuess API — FastAPI Application

Головний файл REST API гри.

Запуск:
    uvicorn poke_guess.api.main:app --reload --port 8000

Або:
    python -m poke_guess.api.main

Документація:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from poke_guess.dataset import DataUnavailableError

from .config import config
from .routes import router
from .dependencies import app_state


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle events"""
    # Startup
    print("=" * 50)
    print("PokeGuess API — Starting...")
    print("=" * 50)

    if not app_state.is_initialized:
        try:
            app_state.initialize(data_dir=config.data_dir)
            print("✓ API ready!")
            print(f"  Swagger UI: http://localhost:{config.port}/docs")
        except DataUnavailableError as e:
            # Ендпоінти гри повертатимуть 503, поки дані недоступні
            print(f"❌ Roster unavailable: {e}")

    print("=" * 50)

    yield

    # Shutdown
    print("\nPokeGuess API — Shutting down...")


# Створюємо FastAPI app
app = FastAPI(
    title=config.api_title,
    description="""
# PokeGuess — Вгадай покемона

Гравець загадує покемона, гра ставить питання так/ні/не знаю
і звужує список кандидатів, поки не залишиться один
(або не закінчиться бюджет з 20 питань).

## Як використовувати

```
# Почати гру
POST /api/v1/sessions
{"language": "en"}

# Відповісти на питання
POST /api/v1/sessions/{id}/answer
{"answer": "yes"}

# Чому гра не вгадала?
POST /api/v1/sessions/{id}/explain
{"name": "pikachu"}
```
    """,
    version="1.0.0",
    license_info={
        "name": "MIT",
    },
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)

# Підключаємо роути
app.include_router(router, prefix=config.router_prefix)


# Root endpoint
@app.get("/", tags=["Root"])
async def root():
    """Кореневий endpoint"""
    return {
        "name": config.api_title,
        "version": "1.0.0",
        "docs": "/docs",
        "health": f"{config.router_prefix}/health"
    }


# Для запуску напряму
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "poke_guess.api.main:app",
        host=config.host,
        port=config.port,
        reload=config.reload,
    )
