from typing import List

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_article_service, get_current_user_id
from app.core.errors import internal_failure
from app.features.articles.schemas import ArticleCreate, ArticleWithUserOut
from app.features.articles.services import ArticleService

# Sans préfixe : monté sous /articles (et /posts, alias historique) dans main.py
router = APIRouter(tags=["articles"])


@router.get(
    "",
    summary="Lister les articles",
    description="Tous les articles avec l'auteur (username, email), du plus récent au plus ancien.",
    response_model=List[ArticleWithUserOut],
)
def list_articles(svc: ArticleService = Depends(get_article_service)):
    with internal_failure("Failed to fetch articles"):
        return svc.list()


@router.post(
    "",
    summary="Publier un article",
    status_code=status.HTTP_201_CREATED,
    response_model=ArticleWithUserOut,
    responses={
        400: {"description": "Validation failed"},
        401: {"description": "Token absent, invalide ou expiré"},
    },
)
def create_article(
    payload: ArticleCreate,
    user_id: int = Depends(get_current_user_id),
    svc: ArticleService = Depends(get_article_service),
):
    with internal_failure("Failed to create article"):
        return svc.create(payload, user_id=user_id)
