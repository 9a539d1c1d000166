import logging

from app.core.errors import Conflict, NotFound, Unauthenticated
from app.db.repositories.users import UserRepository
from app.db.models.users import User
from app.security.password import PasswordHasher
from app.security.tokens import JWTSettings, create_access_token
from app.features.authentication.schemas import RegisterIn, LoginIn, LoginOut
from app.features.users.schemas import UserOut

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """
    Service d'authentification : orchestre le repository utilisateur + tokens.
    Ne contient pas d'accès SQL direct et lève des erreurs métier propres.
    """

    def __init__(self, *, user_repo: UserRepository, jwt_settings: JWTSettings, hasher: PasswordHasher):
        self.user_repo = user_repo
        self.jwt = jwt_settings
        self.hasher = hasher

    # ---------- Register ----------
    def register(self, payload: RegisterIn) -> User:
        if self.user_repo.find_conflicting(email=payload.email, username=payload.username):
            logger.info("Registration refused: email or username already taken")
            raise Conflict("User with this email or username already exists")

        user = self.user_repo.add(
            username=payload.username,
            email=payload.email,
            hashed_password=self.hasher.hash(payload.password),
        )
        logger.info("User %s registered", user.id)
        return user

    # ---------- Login ----------
    def login(self, payload: LoginIn) -> LoginOut:
        user = self.user_repo.get_by_email(payload.email)
        if not user or not self.hasher.verify(payload.password, user.hashed_password):
            # Ne pas révéler si l'utilisateur existe
            logger.info("Failed login attempt")
            raise Unauthenticated(INVALID_CREDENTIALS)

        token = create_access_token(user_id=user.id, settings=self.jwt)
        return LoginOut(
            user=UserOut.model_validate(user),
            token=token,
            token_type="bearer",
            expires_in=int(self.jwt.access_ttl.total_seconds()),
        )

    # ---------- Current user ----------
    def get_current_user(self, user_id: int) -> User:
        user = self.user_repo.get(user_id)
        if not user:
            raise NotFound("User not found")
        return user
