"""
➡️ But : Définir la structure des tables de la base (ORM).

Représente les objets persistés. Ici on représente la table des utilisateurs.

Le hash du mot de passe est nullable : un utilisateur créé via POST /users
n'a pas encore d'identifiants.
"""

from typing import Optional
from sqlmodel import Field

from .base import BaseModelDB

class User(BaseModelDB, table=True):
    username: str = Field(index=True, unique=True, max_length=50)
    email: str = Field(index=True, unique=True, max_length=255)
    hashed_password: Optional[str] = Field(default=None)
