"""
Entry point de la API
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import get_settings
from app.database import Database, create_indexes

from app.controllers.health_controller import router as health_router
from app.controllers.workouts_controller import router as workouts_router
from app.controllers.results_controller import router as results_router
from app.controllers.compare_controller import router as compare_router
from app.controllers.leaderboard_controller import router as leaderboard_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)

# Parse CORS origins ("*" = cualquier origen)
CORS_ORIGINS = [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]


def is_allowed_origin(origin: str) -> bool:
    """Check if origin is allowed by the configured list."""
    if not origin:
        return False
    return "*" in CORS_ORIGINS or origin in CORS_ORIGINS


class CORSMiddleware(BaseHTTPMiddleware):
    """
    CORS middleware that answers OPTIONS preflight before routing.

    Query validation would otherwise turn preflights into 422s.
    """

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin", "")

        if request.method == "OPTIONS":
            if not is_allowed_origin(origin):
                return Response(status_code=403, content="Origin not allowed")
            return Response(
                status_code=200,
                headers={
                    "Access-Control-Allow-Origin": origin,
                    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
                    "Access-Control-Allow-Headers": "Content-Type, Accept, Origin, X-Requested-With",
                    "Access-Control-Allow-Credentials": "true",
                    "Access-Control-Max-Age": "86400",
                }
            )

        response = await call_next(request)

        if is_allowed_origin(origin):
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Credentials"] = "true"

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    await Database.connect()
    await create_indexes(Database.get_db())
    yield
    await Database.disconnect()

# Creo la app
app = FastAPI(
    title="Top 40 Benchmark API",
    description="Registra resultados de workouts y compáralos con el Top 40",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan
)

app.add_middleware(CORSMiddleware)

# Agrego todos los routers de los controllers al app
app.include_router(health_router)
app.include_router(workouts_router)
app.include_router(results_router)
app.include_router(compare_router)
app.include_router(leaderboard_router)


@app.get("/")
async def root():
    # Endpoint raíz, sirve para verificar que la API está levantada
    return {
        "name": "Top 40 Benchmark API",
        "version": "1.0.0",
        "docs": "/docs"
    }
