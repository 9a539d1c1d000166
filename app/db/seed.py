from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml
from sqlmodel import Session

from app.db.models.users import User
from app.db.models.articles import Article, ArticleCategory
from app.db.repositories.users import UserRepository
from app.db.repositories.articles import ArticleRepository
from app.security.password import PasswordHasher


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Seeders
# -----------------------------
def seed_users(session: Session, users_yaml: List[Dict[str, Any]], hasher: PasswordHasher) -> Dict[str, User]:
    """Crée les utilisateurs absents (clé = username). Retourne username -> User."""
    repo = UserRepository(session)
    by_username: Dict[str, User] = {}
    for u in users_yaml:
        user = repo.find_conflicting(email=u["email"], username=u["username"])
        if user is None:
            password = u.get("password")
            user = repo.add(
                commit=False,
                username=u["username"],
                email=u["email"],
                hashed_password=hasher.hash(password) if password else None,
            )
        by_username[user.username] = user
    return by_username


def seed_articles(
    session: Session,
    articles_yaml: List[Dict[str, Any]],
    users: Dict[str, User],
) -> int:
    """Crée les articles absents (clé = auteur + titre). Retourne le nombre créé."""
    repo = ArticleRepository(session)
    created = 0
    for a in articles_yaml:
        author = users.get(a["author"])
        if author is None:
            raise ValueError(f"Auteur inconnu dans le seed: {a['author']}")

        existing = {art.title for art in repo.list_for_user(author.id)}
        if a["title"] in existing:
            continue
        repo.add(
            commit=False,
            title=a["title"],
            body=a["body"],
            category=ArticleCategory(a["category"]),
            user_id=author.id,
        )
        created += 1
    return created


def seed_all(*, session: Session, seed_path: str | Path, hasher: PasswordHasher) -> Tuple[int, int]:
    """Charge le YAML et insère utilisateurs + articles en une seule transaction."""
    data = load_seed_yaml(seed_path)
    users = seed_users(session, data.get("users", []), hasher)
    created_articles = seed_articles(session, data.get("articles", []), users)
    session.commit()
    return len(users), created_articles
