"""
➡️ But : assembler toutes les pièces du puzzle.

create_app() crée l'instance FastAPI et configure :

les logs (une seule fois pour le process),

CORS (autorisations de qui peut appeler ces API),

titre, version, tags, schéma OpenAPI personnalisé,

le format d'erreur unique {"error": "<message>"}.

Inclut les routers (/login, /note, /link) : la table de routage est résolue une fois au démarrage.

Ouvre la base SQLite au démarrage et la ferme à l'arrêt (lifespan).

🔹 Avantages :

Pas d'état global : le contexte (settings, base, JWT) vit dans app.state.

Point unique d'exécution : python -m app.main (ou uvicorn app.main:create_app --factory).
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings, build_context, ENV_DEVELOPMENT
from app.core.logging import setup_logging
from app.core.openapi import custom_openapi
from app.db.errors import StorageError

from app.api.v1.routers import authentication, notes, links

import uvicorn

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ctx = app.state.context
    ctx.database.open()
    yield
    ctx.database.close()


def _error(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        logger.debug("invalid payload on %s %s: %s", request.method, request.url.path, exc.errors())
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request payload")

    @app.exception_handler(StorageError)
    async def storage_error(request: Request, exc: StorageError):
        logger.error("storage failure on %s %s: %s", request.method, request.url.path, exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    setup_logging(settings)
    logger.info("config loaded (env=%s)", settings.ENV)

    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "auth", "description": "Opérations liées à l'authentification"},
            {"name": "notes", "description": "Opérations liées aux notes"},
            {"name": "links", "description": "Opérations liées aux liens"},
        ],
    )
    app.state.context = build_context(settings)

    # CORS (ajustez selon vos besoins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    register_error_handlers(app)

    # Routers
    app.include_router(authentication.router)
    app.include_router(notes.router)
    app.include_router(links.router)

    @app.get("/health", tags=["health"], summary="Vérifier que le serveur répond")
    def health():
        return {"status": "ok", "env": settings.ENV}

    # Génération du schéma OpenAPI custom (facultatif, mais propre)
    app.openapi = lambda: custom_openapi(app)
    return app


if __name__ == "__main__":
    settings = Settings()
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.ADDR,
        port=settings.PORT,
        reload=(settings.ENV == ENV_DEVELOPMENT),
    )
