"""
➡️ But : Contenir la logique métier : orchestrer les repos, appliquer des règles, gérer les erreurs.

UserService : applique les validations logiques (ex : vérifier si un élément existe avant suppression,
unicité de l’email / du nom, propriétaire du compte pour PATCH).

Lève des erreurs métier (NotFound, Conflict, Forbidden) traduites en réponses HTTP par l’app.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging
from typing import List, Optional, Sequence

from app.core.errors import Conflict, Forbidden, NotFound
from app.db.models.base import utcnow
from app.db.models.users import User
from app.db.repositories.users import UserRepository
from app.db.repositories.articles import ArticleRepository
from app.features.articles.schemas import ArticleOut, ArticleWithUserOut
from app.features.articles.services import to_with_user
from app.features.users.schemas import UserCreate, UserPatch, UserReplace
from app.security.password import PasswordHasher

logger = logging.getLogger(__name__)

DUPLICATE_USER = "User with this email or username already exists"


class UserService:
    def __init__(self, repo: UserRepository, article_repo: ArticleRepository, hasher: PasswordHasher):
        self.repo = repo
        self.articles = article_repo
        self.hasher = hasher

    def _ensure_unique(self, *, email: Optional[str], username: Optional[str], exclude_id: Optional[int] = None) -> None:
        if self.repo.find_conflicting(email=email, username=username, exclude_id=exclude_id):
            raise Conflict(DUPLICATE_USER)

    def list(self, offset: int, limit: int) -> Sequence[User]:
        return self.repo.page(offset, limit)

    def get(self, user_id: int) -> User:
        user = self.repo.get(user_id)
        if not user:
            raise NotFound("User not found")
        return user

    def create(self, payload: UserCreate) -> User:
        self._ensure_unique(email=payload.email, username=payload.username)
        hashed = self.hasher.hash(payload.password) if payload.password else None
        user = self.repo.add(
            username=payload.username,
            email=payload.email,
            hashed_password=hashed,
        )
        logger.info("User %s created", user.id)
        return user

    def replace(self, user_id: int, payload: UserReplace) -> User:
        user = self.get(user_id)
        self._ensure_unique(email=payload.email, username=payload.username, exclude_id=user_id)
        return self.repo.apply(user, {
            "username": payload.username,
            "email": payload.email,
            "updated_at": utcnow(),
        })

    def patch(self, user_id: int, payload: UserPatch, *, actor_id: int) -> User:
        if actor_id != user_id:
            raise Forbidden("Users can only update their own account")

        user = self.get(user_id)
        # UserPatch garantit au moins un champ non nul
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        self._ensure_unique(
            email=changes.get("email"),
            username=changes.get("username"),
            exclude_id=user_id,
        )
        changes["updated_at"] = utcnow()
        return self.repo.apply(user, changes)

    def delete(self, user_id: int) -> None:
        if self.repo.delete_by_id(user_id) == 0:
            raise NotFound("User not found")
        logger.info("User %s deleted", user_id)

    # ---------- Articles d'un utilisateur ----------
    def list_articles(self, user_id: int) -> List[ArticleOut]:
        rows = self.articles.list_for_user(user_id)
        return [ArticleOut.model_validate(a) for a in rows]

    def list_articles_with_user(self, user_id: int) -> List[ArticleWithUserOut]:
        rows = self.articles.list_for_user_with_author(user_id)
        return [to_with_user(*row) for row in rows]
