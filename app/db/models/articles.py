from enum import Enum

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlmodel import Field

from .base import BaseModelDB


class ArticleCategory(str, Enum):
    news = "news"
    sports = "sports"
    culture = "culture"
    technology = "technology"


class Article(BaseModelDB, table=True):
    title: str = Field(max_length=255)
    body: str = Field(sa_column=Column(Text, nullable=False))
    category: ArticleCategory = Field(index=True)
    user_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("user.id", ondelete="CASCADE"),  # les articles suivent leur auteur
            index=True,
            nullable=False,
        )
    )
