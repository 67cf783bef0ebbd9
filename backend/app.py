import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from backend import sessions
from backend.routes import router
from realm_architect.config import APP_TITLE

load_dotenv(Path(__file__).parent.parent / ".env")


def _env_seed() -> int | None:
    raw = os.getenv("REALM_SEED", "")
    return int(raw) if raw.strip() else None


def create_app(seed: int | None = None) -> FastAPI:
    sessions.init_sessions(seed if seed is not None else _env_seed())

    app = FastAPI(title=APP_TITLE)
    app.include_router(router, prefix="/api")
    return app


# Default app instance for uvicorn (uses REALM_SEED env var if set)
app = create_app()
