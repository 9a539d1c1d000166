"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_user_service() : crée un UserService à partir d’une session DB.

pagination() : paramètres communs page et limit.

get_current_user_id() : vérifie le bearer token et fournit l’id de l’appelant.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).

Les contrôles (auth, id, propriétaire) s’exécutent avant la validation du corps.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends, Path, Query, Request, Security
from fastapi.exceptions import RequestValidationError
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import ValidationError
from sqlmodel import Session

from app.core.config import Settings
from app.core.errors import Forbidden, Unauthenticated
from app.db.session import get_session

from app.db.repositories.users import UserRepository
from app.db.repositories.articles import ArticleRepository
from app.features.users.schemas import UserIdParam, UserPatch
from app.features.users.services import UserService
from app.features.authentication.services import AuthService
from app.features.articles.services import ArticleService

from app.security.password import PasswordHasher
from app.security.tokens import InvalidTokenError, verify_access_token

logger = logging.getLogger(__name__)

# l'offset SQL reste un petit entier quel que soit `limit`
PAGE_MAX = 1_000_000


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def pagination(
    request: Request,
    page: int = Query(1, ge=1, le=PAGE_MAX, description="Numéro de page", examples=[1]),
    limit: Optional[int] = Query(None, ge=1, description="Taille de page (max PAGE_SIZE_MAX)", examples=[10]),
):
    settings = get_settings(request)
    size = limit or settings.PAGE_SIZE_DEFAULT
    if size > settings.PAGE_SIZE_MAX:
        raise RequestValidationError([{
            "type": "less_than_equal",
            "loc": ("query", "limit"),
            "msg": f"Input should be less than or equal to {settings.PAGE_SIZE_MAX}",
            "input": limit,
        }])
    offset = (page - 1) * size
    return {"offset": offset, "limit": size}


def user_id_path(id: str = Path(..., description="Identifiant utilisateur", examples=["1"])) -> int:
    try:
        return int(UserIdParam(id=id).id)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors())


# -----------------------------
# Services
# -----------------------------
def get_user_service(
    session: Session = Depends(get_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    return UserService(UserRepository(session), ArticleRepository(session), hasher)


def get_auth_service(
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(user_repo=UserRepository(session), jwt_settings=settings.jwt, hasher=hasher)


def get_article_service(session: Session = Depends(get_session)) -> ArticleService:
    return ArticleService(ArticleRepository(session))


# -----------------------------
# Authentication data
# -----------------------------
bearer_scheme = HTTPBearer(auto_error=False)

def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> int:
    if not credentials or credentials.scheme.lower() != "bearer":
        raise Unauthenticated("Authentication required")
    try:
        return verify_access_token(credentials.credentials, settings.jwt)
    except InvalidTokenError as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise Unauthenticated("Invalid or expired token")


def require_account_owner(
    current_user_id: int = Depends(get_current_user_id),
    user_id: int = Depends(user_id_path),
) -> int:
    if current_user_id != user_id:
        raise Forbidden("Users can only update their own account")
    return user_id


def _body_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    return [{**err, "loc": ("body", *err["loc"])} for err in exc.errors()]


async def user_patch_body(
    request: Request,
    user_id: int = Depends(require_account_owner),
) -> UserPatch:
    """
    Corps du PATCH, lu seulement une fois le propriétaire vérifié :
    un appel sur le compte d'un autre reste un 403, même avec un JSON illisible.
    """
    raw = await request.body()
    if not raw.strip():
        raise RequestValidationError([{"type": "missing", "loc": ("body",), "msg": "Field required", "input": None}])
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise RequestValidationError([{"type": "json_invalid", "loc": ("body",), "msg": str(exc), "input": {}}])
    try:
        return UserPatch.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(_body_errors(exc))
