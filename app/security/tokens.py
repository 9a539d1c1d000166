import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TypedDict

from jose import jwt, JWTError

# ==========================================================
# 🔧 Configuration : paramètres de génération/validation JWT
# ==========================================================

@dataclass(frozen=True)
class JWTSettings:
    """
    Configuration des tokens JWT.

    - `secret` : clé secrète pour signer/valider les tokens
    - `issuer` : émetteur (utilisé dans le payload et vérifié au décodage)
    - `algorithm` : algo de signature (HS256 recommandé)
    - `access_ttl` : durée de vie d’un access token
    """
    secret: str
    issuer: str = "blog-api"
    algorithm: str = "HS256"
    access_ttl: timedelta = timedelta(hours=24)


class InvalidTokenError(Exception):
    """Token illisible, falsifié, expiré ou d'un mauvais type."""


# ==========================================================
# 🧱 Types
# ==========================================================

class DecodedToken(TypedDict, total=False):
    iss: str
    sub: str            # identifiant utilisateur
    typ: str            # "access"
    jti: str
    iat: int
    exp: int


# ==========================================================
# 🧩 Fonctions utilitaires
# ==========================================================

def _now() -> datetime:
    """Renvoie l'heure UTC actuelle."""
    return datetime.now(timezone.utc)

def new_jti() -> str:
    """Crée un identifiant unique pour un token."""
    return str(uuid.uuid4())


# ==========================================================
# 🎟️ Génération des tokens
# ==========================================================

def create_access_token(*, user_id: int, settings: JWTSettings) -> str:
    """
    Crée un access token JWT signé (par défaut 24 h).
    """
    now = _now()
    payload: DecodedToken = {
        "iss": settings.issuer,
        "sub": str(user_id),
        "typ": "access",
        "jti": new_jti(),
        "iat": int(now.timestamp()),
        "exp": int((now + settings.access_ttl).timestamp()),
    }
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


# ==========================================================
# 🔍 Décodage / Validation
# ==========================================================

def decode_token(token: str, settings: JWTSettings) -> DecodedToken:
    """
    Décode et valide un token JWT (signature + expiration + émetteur).
    Lève InvalidTokenError en cas de signature invalide ou expirée.
    """
    try:
        decoded = jwt.decode(
            token,
            settings.secret,
            algorithms=[settings.algorithm],
            issuer=settings.issuer,
            options={"verify_aud": False},
        )
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e
    return decoded  # type: ignore[return-value]


def verify_access_token(token: str, settings: JWTSettings) -> int:
    """
    Retourne l'identifiant utilisateur porté par un access token valide.
    Tout autre cas (type, sub absent ou non entier) lève InvalidTokenError.
    """
    decoded = decode_token(token, settings)
    if decoded.get("typ") != "access":
        raise InvalidTokenError("Invalid token type")

    sub = decoded.get("sub")
    if not isinstance(sub, str) or not sub.isdigit():
        raise InvalidTokenError("Invalid subject")
    return int(sub)
