"""
➡️ But : assembler toutes les pièces du puzzle.

create_app() crée l'instance FastAPI et configure :

CORS (autorisations de qui peut appeler ces API)

titre, version, tags, schéma OpenAPI personnalisé

gestion globale des erreurs (todo_api.api.errors)

les routers (/, /signup, /login, /todos)

les objets du process (settings, engine, JWTSettings) rangés dans app.state

🔹 Point unique d'exécution : la commande `todo-api` (ou uvicorn todo_api.main:create_app --factory)
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api.api.errors import register_error_handlers
from todo_api.api.routers import authentication, health, todos
from todo_api.core.config import Settings, get_settings
from todo_api.core.logging_config import configure_logging, handle_loop_exception, install_excepthooks
from todo_api.core.openapi import custom_openapi
from todo_api.db.session import build_engine, init_db

logger = logging.getLogger(__name__)

ROUTES_BANNER = (
    ("POST", "/signup", "Register new user"),
    ("POST", "/login", "Login user"),
    ("POST", "/todos", "Create todo (Protected)"),
    ("GET", "/todos", "Get todos (Protected)"),
    ("PUT", "/todos/{id}", "Update todo (Protected)"),
    ("DELETE", "/todos/{id}", "Delete todo (Protected)"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    init_db(app.state.engine)

    logger.info("%s started (env=%s, port=%s)", settings.APP_NAME, settings.ENV, settings.PORT)
    for method, path, label in ROUTES_BANNER:
        logger.info("  %-6s %-12s - %s", method, path, label)

    yield

    app.state.engine.dispose()
    logger.info("%s stopped", settings.APP_NAME)


def create_app(settings: Optional[Settings] = None, *, engine=None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "health", "description": "État du service"},
            {"name": "auth", "description": "Inscription et connexion"},
            {"name": "todos", "description": "Todos de l'utilisateur connecté"},
        ],
    )

    app.state.settings = settings
    app.state.jwt_settings = settings.jwt_settings()
    app.state.engine = engine if engine is not None else build_engine(settings)

    register_error_handlers(app)
    # CORS (ajustez selon vos besoins) ; doit rester le middleware le plus externe
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    # Routers
    app.include_router(health.router)
    app.include_router(authentication.router)
    app.include_router(todos.router)

    app.openapi = lambda: custom_openapi(app)
    return app


async def _serve(server: uvicorn.Server) -> None:
    asyncio.get_running_loop().set_exception_handler(handle_loop_exception)
    await server.serve()


def run() -> None:
    # Settings invalides (JWT_SECRET absent...) : échec immédiat au démarrage
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    install_excepthooks()
    config = uvicorn.Config(
        "todo_api.main:create_app", factory=True, host=settings.HOST, port=settings.PORT,
    )
    asyncio.run(_serve(uvicorn.Server(config)))


if __name__ == "__main__":
    run()
