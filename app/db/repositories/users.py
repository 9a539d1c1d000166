"""
➡️ But : Encapsuler toutes les opérations de base de données.

UserRepository : lectures par email et détection des doublons (email / nom) sur la table User.

Ne contient aucune logique métier, juste de la persistance.

🔹 Avantages :

Réutilisable (les services n’ont pas à savoir comment la DB fonctionne).

Testable indépendamment (mock du repo sans base réelle).
"""

# app/db/repositories/users.py
from __future__ import annotations

from typing import Optional
from sqlmodel import select, or_

from app.db.repositories.base import BaseRepository
from app.db.models.users import User

class UserRepository(BaseRepository[User]):
    """
    Repository pour la table User.
    Hérite du socle BaseRepository (page, get, add, apply, delete_by_id).
    Contient uniquement les requêtes spécifiques à User.
    """
    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        """Retourne un utilisateur par son email."""
        return self.session.exec(
            select(self.model).where(self.model.email == email)
        ).first()

    def find_conflicting(
        self,
        *,
        email: Optional[str] = None,
        username: Optional[str] = None,
        exclude_id: Optional[int] = None,
    ) -> Optional[User]:
        """Retourne un autre utilisateur qui occupe déjà cet email ou ce nom."""
        clauses = []
        if email is not None:
            clauses.append(self.model.email == email)
        if username is not None:
            clauses.append(self.model.username == username)
        if not clauses:
            return None

        stmt = select(self.model).where(or_(*clauses))
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        return self.session.exec(stmt).first()
