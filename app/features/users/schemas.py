"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

Contient les modèles Pydantic utilisés par FastAPI :

UserCreate → corps de requête POST

UserReplace → corps PUT (remplacement complet)

UserPatch → corps PATCH (mise à jour partielle, au moins un champ)

UserOut → réponse de l’API

Sépare les modèles "de stockage" (ORM) de ceux "de transfert" (I/O API).

🔹 Avantages :

Validation automatique, messages d’erreur lisibles.

Documente les champs dans Swagger (types, exemples...).

Empêche d’exposer par erreur des infos sensibles (ex: hash de mot de passe).
"""

import re
from typing import Annotated, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, Field, field_validator, model_validator

ID_PATTERN = re.compile(r"^\d+$")
ID_MAX = 2**31 - 1  # INT signé côté SQL


# ---------- Règles partagées ----------

def check_username(value: str) -> str:
    value = value.strip()
    if len(value) < 2:
        raise ValueError("Username must be at least 2 characters")
    if len(value) > 50:
        raise ValueError("Username must not exceed 50 characters")
    return value

def check_email(value: str) -> str:
    try:
        return validate_email(value.strip(), check_deliverability=False).normalized
    except EmailNotValidError:
        raise ValueError("Email must be a valid email")

def check_password(value: str) -> str:
    if len(value) < 6:
        raise ValueError("Password must be at least 6 characters")
    # bcrypt ignore tout ce qui dépasse 72 octets
    if len(value.encode("utf-8")) > 72:
        raise ValueError("Password must not exceed 72 bytes")
    return value


def check_login_password(value: str) -> str:
    # longueur non vérifiée à la connexion
    if not value:
        raise ValueError("Password is required")
    return value


Username = Annotated[str, AfterValidator(check_username)]
Email = Annotated[str, AfterValidator(check_email)]
Password = Annotated[str, AfterValidator(check_password)]
LoginPassword = Annotated[str, AfterValidator(check_login_password)]


# ---------- Path params ----------

class UserIdParam(BaseModel):
    id: str

    @field_validator("id")
    @classmethod
    def id_is_positive_number(cls, v: str) -> str:
        if not ID_PATTERN.match(v) or not 1 <= int(v) <= ID_MAX:
            raise ValueError("ID must be a positive number")
        return v


# ---------- Inputs ----------

class UserCreate(BaseModel):
    username: Username = Field(..., examples=["alice"])
    email: Email = Field(..., examples=["alice@example.com"])
    password: Optional[Password] = Field(None, examples=["s3cret-pass"])

class UserReplace(BaseModel):
    username: Username = Field(..., examples=["alice"])
    email: Email = Field(..., examples=["alice@example.com"])

class UserPatch(BaseModel):
    username: Optional[Username] = Field(None, examples=["alice_b"])
    email: Optional[Email] = Field(None, examples=["alice.b@example.com"])

    @model_validator(mode="after")
    def at_least_one_field(self) -> "UserPatch":
        if self.username is None and self.email is None:
            raise ValueError("At least one field (username or email) is required")
        return self


# ---------- Outputs ----------

class UserOut(BaseModel):
    id: int
    username: str
    email: str
    # hashed_password: jamais exposé

    model_config = {"from_attributes": True}
