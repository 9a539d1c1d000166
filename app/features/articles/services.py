import logging
from typing import List

from app.core.errors import InternalFailure
from app.db.models.articles import Article
from app.db.repositories.articles import ArticleRepository
from app.features.articles.schemas import ArticleCreate, ArticleOut, ArticleWithUserOut

logger = logging.getLogger(__name__)


def to_with_user(article: Article, username: str, email: str) -> ArticleWithUserOut:
    return ArticleWithUserOut(
        **ArticleOut.model_validate(article).model_dump(),
        username=username,
        email=email,
    )


class ArticleService:
    def __init__(self, repo: ArticleRepository):
        self.repo = repo

    def list(self) -> List[ArticleWithUserOut]:
        return [to_with_user(*row) for row in self.repo.list_with_author()]

    def create(self, payload: ArticleCreate, *, user_id: int) -> ArticleWithUserOut:
        article = self.repo.add(
            title=payload.title,
            body=payload.body,
            category=payload.category,
            user_id=user_id,
        )
        logger.info("Article %s created by user %s", article.id, user_id)

        # relecture séparée (pas de transaction englobante)
        row = self.repo.get_with_author(article.id)
        if row is None:
            raise InternalFailure("Failed to create article")
        return to_with_user(*row)
