"""
➡️ But : Configurer la base de données et gérer les sessions.

build_engine() : construit l'engine SQLAlchemy (et son pool de connexions) à partir des settings.

init_db() : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session sur l'engine de l'app, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

L'engine appartient à l'application (app.state.engine) : pas de singleton global, facile à remplacer en test.

Le pool borne le nombre de connexions simultanées ; les requêtes en trop attendent une connexion libre.
"""

from typing import Dict, Any, Iterator

from fastapi import Request
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

# Import all models for creating all tables
from app.db.models.users import User  # noqa: F401
from app.db.models.articles import Article  # noqa: F401

from app.core.config import Settings


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(settings: Settings) -> Engine:
    url = settings.DATABASE_URL
    assert url, "DATABASE_URL must be set"

    if url.startswith("sqlite:"):
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args: Dict[str, Any] = {"check_same_thread": False}
        kwargs: Dict[str, Any] = {}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # une seule connexion partagée, sinon chaque session voit une base vide
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=(settings.ENV == "dev"), connect_args=connect_args, **kwargs)
        # SQLite n'applique les FK (ON DELETE CASCADE) que si on le demande
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    # Pool borné (équivalent du connectionLimit), sans débordement
    return create_engine(
        url,
        echo=(settings.ENV == "dev"),
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=0,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_pre_ping=True,
    )


def init_db(engine: Engine) -> None:
    """
    Crée les tables si elles n'existent pas (usage dev/demo).
    En prod avec Alembic, préfère des migrations.
    """
    SQLModel.metadata.create_all(engine)


def get_session(request: Request) -> Iterator[Session]:
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    with Session(request.app.state.engine) as session:
        yield session
