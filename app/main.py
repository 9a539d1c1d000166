"""
➡️ But : assembler toutes les pièces du puzzle.

create_app() crée l’instance FastAPI (app).

Configure :

logs, CORS (autorisations de qui peut appeler ces API)

titre, version, tags

schéma OpenAPI personnalisé, handlers d’erreurs

Inclut les routers (/auth, /users, /articles et son alias /posts).

Crée l’engine (pool de connexions) et le hacheur de mots de passe, rattachés à l’app ; tables créées au démarrage.

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d’exécution : uvicorn app.main:app --reload.
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlmodel import Session

from app.core.config import Settings, settings as default_settings
from app.core.errors import internal_failure, register_exception_handlers
from app.core.logging_config import configure_logging
from app.core.openapi import custom_openapi
from app.db.session import build_engine, get_session, init_db
from app.security.password import PasswordHasher

from app.api.routers import users, authentication, articles

import uvicorn

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        openapi_tags=[
            {"name": "auth", "description": "Inscription, connexion et utilisateur courant"},
            {"name": "users", "description": "Gestion des utilisateurs"},
            {"name": "articles", "description": "Publication et lecture des articles"},
        ],
    )
    app.state.settings = settings
    app.state.engine = engine or build_engine(settings)
    app.state.password_hasher = PasswordHasher(settings.BCRYPT_ROUNDS)

    # CORS (ajustez selon vos besoins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Routers
    app.include_router(authentication.router)
    app.include_router(users.router)
    app.include_router(articles.router, prefix="/articles")
    app.include_router(articles.router, prefix="/posts", include_in_schema=False)

    @app.get("/health", tags=["health"], summary="État du service et de la base")
    def health(session: Session = Depends(get_session)):
        with internal_failure("Database unreachable"):
            session.connection().execute(text("SELECT 1"))
        return {"ok": True, "db": "ok"}

    # Génération du schéma OpenAPI custom
    app.openapi = lambda: custom_openapi(app)

    # Démarrage
    @app.on_event("startup")
    def on_startup():
        init_db(app.state.engine)
        logger.info("%s started (env=%s)", settings.APP_NAME, settings.ENV)

    @app.on_event("shutdown")
    def on_shutdown():
        app.state.engine.dispose()

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("app.main:app", host="127.0.0.1", port=8080, reload=(default_settings.ENV == "dev")) # http://localhost:8080
