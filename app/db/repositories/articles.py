from typing import Optional, Sequence, Tuple

from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.articles import Article
from app.db.models.users import User


class ArticleRepository(BaseRepository[Article]):
    model = Article

    def _with_author(self):
        return (
            select(
                Article,
                User.username.label("username"),
                User.email.label("email"),
            )
            .join(User, User.id == Article.user_id)
        )

    @staticmethod
    def _newest_first(stmt):
        return stmt.order_by(Article.created_at.desc(), Article.id.desc())

    def list_with_author(self) -> Sequence[Tuple[Article, str, str]]:
        """All articles with author username/email, newest first."""
        return self.session.exec(self._newest_first(self._with_author())).all()

    def get_with_author(self, article_id: int) -> Optional[Tuple[Article, str, str]]:
        stmt = self._with_author().where(Article.id == article_id)
        return self.session.exec(stmt).first()

    def list_for_user(self, user_id: int) -> Sequence[Article]:
        stmt = select(Article).where(Article.user_id == user_id)
        return self.session.exec(self._newest_first(stmt)).all()

    def list_for_user_with_author(self, user_id: int) -> Sequence[Tuple[Article, str, str]]:
        stmt = self._with_author().where(Article.user_id == user_id)
        return self.session.exec(self._newest_first(stmt)).all()
