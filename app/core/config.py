"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, base de données, secrets, etc.)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from app.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from datetime import timedelta
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings
from app.security.tokens import JWTSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Blog-API"
    ENV: str = "dev"  # dev | prod | test
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "app.db"  # fichier SQLite (fallback local)
    # Si DATABASE_URL est défini, il est prioritaire sur tout le reste.
    DATABASE_URL: Optional[str] = None

    # Connexion MySQL "à l'ancienne" (host / user / password / database)
    DB_HOST: Optional[str] = None
    DB_PORT: int = 3306
    DB_USER: Optional[str] = None
    DB_PASSWORD: str = ""
    DB_NAME: Optional[str] = None

    DB_POOL_SIZE: int = 10        # connexions simultanées max
    DB_POOL_TIMEOUT: int = 30     # secondes d'attente d'une connexion libre

    # -----------------------------
    # JWT / Auth
    # -----------------------------
    JWT_SECRET_KEY: str = "CHANGE_ME"     # ⚠️ change en prod
    JWT_ISSUER: str = "blog-api"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TTL_MINUTES: int = 24 * 60

    BCRYPT_ROUNDS: int = 10

    # -----------------------------
    # Pagination
    # -----------------------------
    PAGE_SIZE_DEFAULT: int = 10
    PAGE_SIZE_MAX: int = 100

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        if self.DATABASE_URL:
            return
        if self.DB_HOST and self.DB_USER and self.DB_NAME:
            url = (
                f"mysql+pymysql://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASSWORD)}"
                f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
            )
        else:
            url = f"sqlite:///{self.SQLITE_PATH}"
        object.__setattr__(self, "DATABASE_URL", url)

    @property
    def jwt(self) -> JWTSettings:
        return JWTSettings(
            secret=self.JWT_SECRET_KEY,
            issuer=self.JWT_ISSUER,
            algorithm=self.JWT_ALGORITHM,
            access_ttl=timedelta(minutes=self.ACCESS_TTL_MINUTES),
        )


# Instance globale importable partout
settings = Settings()
