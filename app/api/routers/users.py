"""
➡️ But : Définir les endpoints de l’API.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, PATCH, DELETE…)

Appelle le service correspondant

Retourne les schémas de sortie (response_model)

Chaque fonction représente une route.

🔹 Avantages :

Automatiquement documentée dans Swagger :

summary, description, response_model, examples

Isolation totale du reste du code : les routes ne contiennent ni SQL ni logique métier.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from app.api.dependencies import (
    get_user_service,
    pagination,
    require_account_owner,
    user_patch_body,
    user_id_path,
)
from app.core.errors import internal_failure
from app.features.articles.schemas import ArticleOut, ArticleWithUserOut
from app.features.users.schemas import UserCreate, UserOut, UserPatch, UserReplace
from app.features.users.services import UserService

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={404: {"description": "Not Found"}},
)

@router.get(
    "",
    summary="Lister les utilisateurs",
    description="Retourne une liste paginée d'utilisateurs (`page` ≥ 1, `limit` ≤ PAGE_SIZE_MAX).",
    response_model=List[UserOut],
    responses={
        200: {
            "description": "Liste paginée",
            "content": {
                "application/json": {
                    "example": [
                        {"id": 1, "username": "alice", "email": "alice@example.com"},
                        {"id": 2, "username": "bob", "email": "bob@example.com"},
                    ]
                }
            },
        }
    },
)
def list_users(p=Depends(pagination), svc: UserService = Depends(get_user_service)):
    with internal_failure("Failed to fetch users"):
        return [UserOut.model_validate(u) for u in svc.list(**p)]

@router.post(
    "",
    summary="Créer un utilisateur",
    status_code=status.HTTP_201_CREATED,
    response_model=UserOut,
)
def create_user(payload: UserCreate, svc: UserService = Depends(get_user_service)):
    with internal_failure("Failed to create user"):
        return svc.create(payload)

@router.get(
    "/{id}",
    summary="Récupérer un utilisateur",
    response_model=UserOut,
)
def get_user(user_id: int = Depends(user_id_path), svc: UserService = Depends(get_user_service)):
    with internal_failure("Failed to fetch user"):
        return svc.get(user_id)

@router.put(
    "/{id}",
    summary="Remplacer un utilisateur",
    description="Remplace le nom d'utilisateur et l'email.",
    response_model=UserOut,
)
def replace_user(
    payload: UserReplace,
    user_id: int = Depends(user_id_path),
    svc: UserService = Depends(get_user_service),
):
    with internal_failure("Failed to update user"):
        return svc.replace(user_id, payload)

@router.patch(
    "/{id}",
    summary="Mettre à jour son compte",
    description="Mise à jour partielle : seuls les champs présents sont modifiés. "
                "Un utilisateur ne peut modifier que son propre compte.",
    response_model=UserOut,
    responses={
        401: {"description": "Token absent, invalide ou expiré"},
        403: {"description": "Users can only update their own account"},
    },
    # corps lu par user_patch_body, après le contrôle du propriétaire
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": UserPatch.model_json_schema()}},
        },
    },
)
def patch_user(
    user_id: int = Depends(require_account_owner),
    payload: UserPatch = Depends(user_patch_body),
    svc: UserService = Depends(get_user_service),
):
    with internal_failure("Failed to update user"):
        return svc.patch(user_id, payload, actor_id=user_id)

@router.delete(
    "/{id}",
    summary="Supprimer un utilisateur",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_user(user_id: int = Depends(user_id_path), svc: UserService = Depends(get_user_service)):
    with internal_failure("Failed to delete user"):
        svc.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# -----------------------------
# Articles d'un utilisateur
# -----------------------------
@router.get(
    "/{id}/posts",
    summary="Lister les articles d'un utilisateur",
    response_model=List[ArticleOut],
)
@router.get("/{id}/articles", response_model=List[ArticleOut], include_in_schema=False)
def list_user_articles(user_id: int = Depends(user_id_path), svc: UserService = Depends(get_user_service)):
    with internal_failure("Failed to fetch posts"):
        return svc.list_articles(user_id)

@router.get(
    "/{id}/posts-with-user",
    summary="Lister les articles d'un utilisateur avec l'auteur",
    response_model=List[ArticleWithUserOut],
)
@router.get("/{id}/articles-with-user", response_model=List[ArticleWithUserOut], include_in_schema=False)
def list_user_articles_with_user(user_id: int = Depends(user_id_path), svc: UserService = Depends(get_user_service)):
    with internal_failure("Failed to fetch posts"):
        return svc.list_articles_with_user(user_id)
