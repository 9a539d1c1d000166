from typing import Optional

from passlib.context import CryptContext


class PasswordHasher:
    """
    Hachage bcrypt des mots de passe.

    - `rounds` : facteur de coût bcrypt (Settings.BCRYPT_ROUNDS)
    Construit une fois par application (app.state.password_hasher).
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._ctx = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, raw: str) -> str:
        return self._ctx.hash(raw)

    def verify(self, raw: str, hashed: Optional[str]) -> bool:
        # comptes créés via POST /users : pas encore de mot de passe
        if not hashed:
            return False
        return self._ctx.verify(raw, hashed)
