"""
➡️ But : Socle commun des repositories (utilisateurs, articles).

Une table = un repository ; chaque repository concret déclare `model`.

Les écritures commitent par défaut ; `commit=False` laisse le service (ou le seed)
regrouper plusieurs écritures dans une seule transaction.

🔹 Avantages :

Requêtes toujours construites par SQLAlchemy : paramètres liés, aucun SQL concaténé.

Suppression par identifiant en une requête, avec le nombre de lignes touchées.
"""

from typing import Any, Dict, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete
from sqlmodel import SQLModel, Session, select

ModelT = TypeVar("ModelT", bound=SQLModel)


class BaseRepository(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def _persist(self, entity: ModelT, commit: bool) -> ModelT:
        self.session.add(entity)
        if commit:
            self.session.commit()
            self.session.refresh(entity)
        else:
            # l'id est attribué sans fermer la transaction
            self.session.flush()
        return entity

    def page(self, offset: int, limit: int) -> Sequence[ModelT]:
        """Une page d'enregistrements, du plus ancien id au plus récent."""
        stmt = select(self.model).order_by(self.model.id).offset(offset).limit(limit)
        return self.session.exec(stmt).all()

    def get(self, id_: int) -> Optional[ModelT]:
        return self.session.get(self.model, id_)

    def add(self, *, commit: bool = True, **fields: Any) -> ModelT:
        return self._persist(self.model(**fields), commit)

    def apply(self, entity: ModelT, changes: Dict[str, Any], *, commit: bool = True) -> ModelT:
        """Affecte `changes` attribut par attribut puis enregistre."""
        for name, value in changes.items():
            setattr(entity, name, value)
        return self._persist(entity, commit)

    def delete_by_id(self, id_: int) -> int:
        """
        DELETE ... WHERE id = :id, commit inclus.
        Retourne le nombre de lignes supprimées (0 si l'id n'existe pas).
        Les lignes dépendantes partent via ON DELETE CASCADE.
        """
        result = self.session.connection().execute(
            delete(self.model).where(self.model.id == id_)
        )
        self.session.commit()
        return result.rowcount
