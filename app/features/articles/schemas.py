from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.db.models.articles import ArticleCategory

CATEGORY_MESSAGE = "Category must be one of: news, sports, culture, or technology"


# ---------- Inputs ----------

class ArticleCreate(BaseModel):
    title: str = Field(..., max_length=255, examples=["Local team wins the cup"])
    body: str = Field(..., examples=["A thrilling final..."])
    category: ArticleCategory = Field(..., examples=["sports"])

    @field_validator("title")
    @classmethod
    def title_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        return v

    @field_validator("body")
    @classmethod
    def body_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Body is required")
        return v

    @field_validator("category", mode="before")
    @classmethod
    def category_in_enum(cls, v: Any) -> Any:
        if not isinstance(v, str) or v not in {c.value for c in ArticleCategory}:
            raise ValueError(CATEGORY_MESSAGE)
        return v


# ---------- Outputs ----------

class ArticleOut(BaseModel):
    id: int
    title: str
    body: str
    category: ArticleCategory
    user_id: int
    created_at: datetime

    model_config = {"from_attributes": True}

class ArticleWithUserOut(ArticleOut):
    username: str
    email: str
