import logging

from sqlmodel import Session

from app.core.config import settings
from app.core.logging_config import configure_logging
from app.db.session import build_engine, init_db
from app.db.seed import seed_all
from app.security.password import PasswordHasher

logger = logging.getLogger("seed")


def run_seed(seed_path: str = "app/db/seed_data.yaml") -> None:
    configure_logging(settings.LOG_LEVEL)
    engine = build_engine(settings)
    init_db(engine)
    with Session(engine) as session:
        users, articles = seed_all(
            session=session,
            seed_path=seed_path,
            hasher=PasswordHasher(settings.BCRYPT_ROUNDS),
        )
    logger.info("Seed terminé : %s utilisateurs, %s nouveaux articles", users, articles)
    engine.dispose()


if __name__ == "__main__":
    run_seed()
